from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import BinaryIO, List, Optional

XML_FOO_AND_FOOBAR = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<!DOCTYPE properties SYSTEM "http://java.sun.com/dtd/properties.dtd">'
    "<properties>"
    '<entry key="foo">bar</entry>'
    '<entry key="foobar">baz</entry>'
    "</properties>"
)
PLAIN_FOO_AND_FOOBAR = "foo=bar\nfoobar=baz"


class TrackingStream(io.BytesIO):
    def __init__(self, data: bytes):
        super().__init__(data)
        self.was_closed = False

    def close(self) -> None:
        self.was_closed = True
        super().close()


@dataclass
class StringLocation:
    """A location serving fixed content, independent of any host context."""

    content: Optional[str]
    xml: bool = False
    name: str = "test"
    source: str = "test"
    opened: List[TrackingStream] = field(default_factory=list)

    def open(self, context: Optional[object] = None) -> Optional[BinaryIO]:
        if self.content is None:
            return None
        stream = TrackingStream(self.content.encode("utf-8"))
        self.opened.append(stream)
        return stream

    def is_xml(self) -> bool:
        return self.xml
