from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml
from dotenv import load_dotenv

from simpleconf.config.models import ConfigLoadRequest, SimpleconfConfig

logger = logging.getLogger(__name__)


def _merge_sections(config: MutableMapping[str, Any], overrides: Mapping[str, Any]) -> None:
    for section, values in overrides.items():
        current = config.get(section)
        if isinstance(current, dict) and isinstance(values, Mapping):
            current.update(values)
        else:
            config[section] = values


def _read_yaml_config(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Top-level YAML must be a mapping, got: {type(data).__name__}")
    return data


def _load_dotenv_if_present(dotenv_path: Path) -> None:
    if not dotenv_path.exists():
        return
    load_dotenv(dotenv_path=dotenv_path, override=False)


def _apply_env_overrides(config: MutableMapping[str, Any], env_prefix: str) -> None:
    """Apply `<prefix>SECTION__KEY=value` variables to string settings."""
    for name, value in os.environ.items():
        if not name.startswith(env_prefix):
            continue

        section, sep, key = name[len(env_prefix) :].lower().partition("__")
        dotted = f"{section}.{key}"
        settings = config.get(section)
        if not sep or not isinstance(settings, dict) or key not in settings:
            raise KeyError(f"Unknown configuration key path: {dotted}")
        if not isinstance(settings[key], str):
            raise TypeError(
                f"Environment variable overrides are only allowed for string values. "
                f"Key '{dotted}' is {type(settings[key]).__name__}."
            )
        settings[key] = value
        logger.debug("Applied settings override from environment. key=%s", dotted)


class YamlConfigLoader:
    def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> SimpleconfConfig:
        config: dict[str, Any] = copy.deepcopy(SimpleconfConfig().model_dump(mode="python"))

        if request.yaml_path is not None:
            _merge_sections(config, _read_yaml_config(Path(request.yaml_path)))

        if request.dotenv_path is not None:
            _load_dotenv_if_present(Path(request.dotenv_path))

        _apply_env_overrides(config, request.env_prefix)
        return SimpleconfConfig.model_validate(config)
