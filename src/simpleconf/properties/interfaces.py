from __future__ import annotations

from typing import BinaryIO, Optional, Protocol, runtime_checkable


@runtime_checkable
class ResourceContext(Protocol):
    """
    Resource lookup capability handed over by the host at startup.

    Paths are resolved relative to the application's resource root, e.g.
    "/WEB-INF/application.properties".
    """

    def open_resource(self, path: str) -> Optional[BinaryIO]:
        """Return an open binary stream, or None if the resource does not exist."""


class PropertySource(Protocol):
    """
    A candidate location for a properties file.

    The loader only depends on this shape, so callers may supply their own
    sources (an in-memory string, a remote blob) instead of the defaults.
    """

    @property
    def name(self) -> str:
        """Display label used in log records."""

    @property
    def source(self) -> str:
        """Resource path or variable name the location reads from."""

    def open(self, context: Optional[object] = None) -> Optional[BinaryIO]:
        """Return an open binary stream, or None if the location is absent."""

    def is_xml(self) -> bool:
        """Whether the resolved content is an XML properties document."""


class PropertyStore(Protocol):
    """The process-wide key/value registry properties are published into."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set_if_absent(self, key: str, value: str) -> bool:
        """Set `key` only if it has no value yet. Returns True if it was written."""
