from __future__ import annotations

import os
from typing import Dict, Mapping, MutableMapping, Optional


def _fits_environment(key: str, value: str) -> bool:
    # Names cannot be empty or contain "=", and neither part may hold NUL.
    return bool(key) and "=" not in key and "\0" not in key and "\0" not in value


class EnvironPropertyStore:
    """
    The process environment as the global property store.

    Values written here are visible to everything in the process that reads
    `os.environ`, and to child processes.
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self._environ = os.environ if environ is None else environ

    def get(self, key: str) -> Optional[str]:
        return self._environ.get(key)

    def set_if_absent(self, key: str, value: str) -> bool:
        if key in self._environ or not _fits_environment(key, value):
            return False
        self._environ[key] = value
        return True


class InMemoryPropertyStore:
    def __init__(self, initial: Optional[Mapping[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set_if_absent(self, key: str, value: str) -> bool:
        if key in self._values:
            return False
        self._values[key] = value
        return True

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)
