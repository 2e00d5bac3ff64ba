from __future__ import annotations

import logging
from contextlib import closing
from typing import Iterable, Mapping, Optional

from simpleconf.properties.interfaces import PropertySource, PropertyStore
from simpleconf.properties.parsing import PARSE_ERRORS, PropertySet, parse_properties
from simpleconf.properties.stores import EnvironPropertyStore

logger = logging.getLogger(__name__)


def _read(location: PropertySource, context: Optional[object]) -> PropertySet:
    logger.debug("Trying to read application properties. location=%s source=%s", location.name, location.source)

    stream = location.open(context)
    if stream is None:
        return {}

    with closing(stream):
        try:
            properties = parse_properties(stream, xml=location.is_xml())
        except PARSE_ERRORS:
            logger.error(
                "Failed to read properties file. location=%s source=%s",
                location.name,
                location.source,
                exc_info=True,
            )
            return {}

    logger.debug(
        "Read application properties. location=%s source=%s count=%d",
        location.name,
        location.source,
        len(properties),
    )
    return properties


def _publish(properties: Mapping[object, object], store: PropertyStore) -> None:
    for key, value in properties.items():
        key_as_string = str(key)
        value_as_string = str(value)
        existing_value = store.get(key_as_string)
        if existing_value is None:
            if store.set_if_absent(key_as_string, value_as_string):
                logger.debug("Setting property '%s' to value '%s'.", key_as_string, value_as_string)
            else:
                logger.warning(
                    "Not setting property '%s' to value '%s', because the store rejected it.",
                    key_as_string,
                    value_as_string,
                )
            continue
        logger.info(
            "Not setting property '%s' to value '%s', because it is already set to '%s'.",
            key_as_string,
            value_as_string,
            existing_value,
        )


def merge_properties(locations: Iterable[PropertySource], context: Optional[object] = None) -> PropertySet:
    """
    Read every location in order and merge the results, later locations winning.

    A location that cannot be parsed contributes nothing. A location that fails
    to open (an override variable naming a missing file, a resource location
    without a context) aborts the merge.
    """
    merged: PropertySet = {}
    for location in locations:
        merged.update(_read(location, context))
    return merged


def load_properties(
    locations: Iterable[PropertySource],
    context: Optional[object] = None,
    store: Optional[PropertyStore] = None,
) -> PropertySet:
    """
    Read the given locations and publish the merged properties into `store`.

    Keys that already have a value in the store are left untouched. Nothing is
    written unless every location was resolved, so a failure part way through
    leaves the store as it was. Returns the merged properties.
    """
    if store is None:
        store = EnvironPropertyStore()

    properties = merge_properties(locations, context)
    if not properties:
        logger.warning("No property file found at any possible location, not processing any properties.")
        return properties

    _publish(properties, store)
    return properties


def load_location_properties(
    location: PropertySource,
    context: Optional[object] = None,
    store: Optional[PropertyStore] = None,
) -> PropertySet:
    """Same as `load_properties([location], context, store)`."""
    return load_properties([location], context, store)
