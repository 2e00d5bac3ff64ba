"""Settings for the startup hook: models and the YAML/environment loader."""

from simpleconf.config.interfaces import ConfigLoader
from simpleconf.config.loader import YamlConfigLoader
from simpleconf.config.models import (
    ConfigLoadRequest,
    FileLoggingSettings,
    FileRotationSettings,
    LocationSettings,
    LoggingSettings,
    SimpleconfConfig,
)

__all__ = [
    "ConfigLoadRequest",
    "ConfigLoader",
    "FileLoggingSettings",
    "FileRotationSettings",
    "LocationSettings",
    "LoggingSettings",
    "SimpleconfConfig",
    "YamlConfigLoader",
]
