from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import BinaryIO, Optional, Tuple

from simpleconf.config.models import LocationSettings
from simpleconf.errors import MissingResourceContextError, PropertiesFileNotFoundError
from simpleconf.properties.interfaces import ResourceContext


class LocationKind(str, Enum):
    CLASSPATH = "classpath"
    OVERRIDE_VARIABLE = "override_variable"


def _ends_with_xml(value: str) -> bool:
    return value.lower().endswith(".xml")


@dataclass(frozen=True, slots=True)
class PropertyLocation:
    """
    A fixed place to look for a properties file.

    CLASSPATH locations read `source` through the host's resource context.
    OVERRIDE_VARIABLE locations read the environment variable named by `source`
    and, if it is set, open the file its value points at.
    """

    name: str
    source: str
    kind: LocationKind

    def open(self, context: Optional[object] = None) -> Optional[BinaryIO]:
        if self.kind is LocationKind.CLASSPATH:
            return self._open_resource(context)
        if self.kind is LocationKind.OVERRIDE_VARIABLE:
            path = os.environ.get(self.source)
            if path is None:
                return None
            return _open_file(path)
        raise ValueError(f"Unsupported location kind: {self.kind!r}")

    def is_xml(self) -> bool:
        if self.kind is LocationKind.CLASSPATH:
            return _ends_with_xml(self.source)
        # The variable may change between calls, so it is read every time.
        path = os.environ.get(self.source)
        if path is None:
            return False
        return _ends_with_xml(path)

    def _open_resource(self, context: Optional[object]) -> Optional[BinaryIO]:
        if context is None or not isinstance(context, ResourceContext):
            raise MissingResourceContextError(
                f"Can't read '{self.source}' from {self.name} without a resource context."
            )
        return context.open_resource(self.source)


def _open_file(path: str) -> BinaryIO:
    file_path = Path(path)
    if file_path.is_file() and os.access(file_path, os.R_OK):
        return file_path.open("rb")
    raise PropertiesFileNotFoundError(file_path.absolute())


def default_locations(settings: LocationSettings = LocationSettings()) -> Tuple[PropertyLocation, ...]:
    """Plain resource, then XML resource, then the override variable."""
    return (
        PropertyLocation(name="classpath", source=settings.plain_resource, kind=LocationKind.CLASSPATH),
        PropertyLocation(name="classpath", source=settings.xml_resource, kind=LocationKind.CLASSPATH),
        PropertyLocation(
            name="override variable",
            source=settings.override_variable,
            kind=LocationKind.OVERRIDE_VARIABLE,
        ),
    )


DEFAULT_LOCATIONS = default_locations()
