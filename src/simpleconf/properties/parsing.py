from __future__ import annotations

from typing import BinaryIO, Dict

import javaproperties

PropertySet = Dict[str, str]

# Raised by javaproperties and xml.etree for content that cannot be read as properties.
PARSE_ERRORS = (ValueError, SyntaxError, UnicodeDecodeError, OSError)


def parse_properties(stream: BinaryIO, *, xml: bool) -> PropertySet:
    """
    Parse a properties stream into an ordered mapping.

    Plain streams follow the .properties grammar (ISO-8859-1 bytes, `\\uXXXX`
    escapes, line continuations). XML streams use the
    `<properties><entry key="...">value</entry></properties>` layout.
    """
    if xml:
        return javaproperties.load_xml(stream, object_pairs_hook=dict)
    return javaproperties.load(stream, object_pairs_hook=dict)
