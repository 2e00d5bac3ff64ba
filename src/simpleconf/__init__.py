"""Publish application properties into the process environment at startup."""

from simpleconf.errors import (
    MissingResourceContextError,
    PropertiesFileNotFoundError,
    SimpleconfError,
    StartupError,
)
from simpleconf.lifecycle import ApplicationPropertiesListener
from simpleconf.properties import (
    DEFAULT_LOCATIONS,
    DirectoryResourceContext,
    EnvironPropertyStore,
    InMemoryPropertyStore,
    LocationKind,
    PackageResourceContext,
    PropertyLocation,
    default_locations,
    load_location_properties,
    load_properties,
)

__all__ = [
    "ApplicationPropertiesListener",
    "DEFAULT_LOCATIONS",
    "DirectoryResourceContext",
    "EnvironPropertyStore",
    "InMemoryPropertyStore",
    "LocationKind",
    "MissingResourceContextError",
    "PackageResourceContext",
    "PropertiesFileNotFoundError",
    "PropertyLocation",
    "SimpleconfError",
    "StartupError",
    "default_locations",
    "load_location_properties",
    "load_properties",
]
