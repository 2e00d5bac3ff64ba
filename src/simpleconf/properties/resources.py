from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import BinaryIO, Optional, Union

logger = logging.getLogger(__name__)


def _relative_parts(path: str) -> list[str]:
    parts = [p for p in path.replace("\\", "/").split("/") if p and p != "."]
    if ".." in parts:
        raise ValueError(f"Resource path must not leave the resource root: {path}")
    return parts


class DirectoryResourceContext:
    """Resolves resource paths against a web application directory on disk."""

    def __init__(self, root: Union[str, Path]):
        self.root = Path(root)

    def open_resource(self, path: str) -> Optional[BinaryIO]:
        resource_path = self.root.joinpath(*_relative_parts(path))
        if not resource_path.is_file():
            logger.debug("Resource not found. root=%s path=%s", self.root, path)
            return None
        return resource_path.open("rb")


class PackageResourceContext:
    """Resolves resource paths against the data files of an importable package."""

    def __init__(self, package: str):
        self.package = package

    def open_resource(self, path: str) -> Optional[BinaryIO]:
        resource = resources.files(self.package)
        for part in _relative_parts(path):
            resource = resource.joinpath(part)
        if not resource.is_file():
            logger.debug("Resource not found. package=%s path=%s", self.package, path)
            return None
        return resource.open("rb")
