"""Property locations, stores and the startup loader."""

from simpleconf.properties.interfaces import PropertySource, PropertyStore, ResourceContext
from simpleconf.properties.loader import load_location_properties, load_properties, merge_properties
from simpleconf.properties.locations import DEFAULT_LOCATIONS, LocationKind, PropertyLocation, default_locations
from simpleconf.properties.resources import DirectoryResourceContext, PackageResourceContext
from simpleconf.properties.stores import EnvironPropertyStore, InMemoryPropertyStore

__all__ = [
    "DEFAULT_LOCATIONS",
    "DirectoryResourceContext",
    "EnvironPropertyStore",
    "InMemoryPropertyStore",
    "LocationKind",
    "PackageResourceContext",
    "PropertyLocation",
    "PropertySource",
    "PropertyStore",
    "ResourceContext",
    "default_locations",
    "load_location_properties",
    "load_properties",
    "merge_properties",
]
