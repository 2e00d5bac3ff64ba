from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LocationSettings(BaseModel):
    """Where the default locations look for properties files."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    plain_resource: str = "/WEB-INF/application.properties"
    xml_resource: str = "/WEB-INF/applicationProperties.xml"
    override_variable: str = "application.properties.path"


class FileRotationSettings(BaseModel):
    """
    Date-based rotation settings (daily).

    This maps cleanly to Python's standard library TimedRotatingFileHandler behavior.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 5


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = "logs/simpleconf.log"
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    file: Optional[FileLoggingSettings] = None


class SimpleconfConfig(BaseModel):
    """Settings for the startup hook itself, not the properties it loads."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    locations: LocationSettings = Field(default_factory=LocationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Optional inputs for a configuration loader.

    `yaml_path=None` means no settings file; defaults and environment overrides still apply.
    """

    yaml_path: Optional[str] = None
    env_prefix: str = "SIMPLECONF__"
    dotenv_path: Optional[str] = ".env"
