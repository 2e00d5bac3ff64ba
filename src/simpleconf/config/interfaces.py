from __future__ import annotations

from typing import Protocol

from simpleconf.config.models import ConfigLoadRequest, SimpleconfConfig


class ConfigLoader(Protocol):
    """
    Loads the effective settings for the startup hook.

    Precedence, lowest first: model defaults, the YAML file, environment overrides.
    """

    def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> SimpleconfConfig:
        ...
