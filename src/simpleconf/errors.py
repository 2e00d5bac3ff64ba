from __future__ import annotations

from pathlib import Path


class SimpleconfError(Exception):
    """Base class for errors raised by simpleconf."""


class PropertiesFileNotFoundError(SimpleconfError, FileNotFoundError):
    """An override variable names a path that is not a readable regular file."""

    def __init__(self, path: Path):
        super().__init__(f"Configured properties file cannot be found: {path}")
        self.path = path


class MissingResourceContextError(SimpleconfError, RuntimeError):
    """A resource location was resolved without a context able to open resources."""


class StartupError(SimpleconfError, RuntimeError):
    """Wraps a non-runtime failure raised while loading properties at startup."""
