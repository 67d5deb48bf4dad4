"""Stack-based XML tag writer.

The writer streams markup to a text stream while tracking open elements
on a stack. Every end tag closes the most recently opened element, so a
document can only be finished once all elements are closed. Misuse is
reported as ``XmlWriterError`` instead of producing malformed output.
"""

import re
from collections.abc import Iterable
from typing import TextIO
from xml.sax.saxutils import escape

from .exceptions import XmlWriterError

_ENTITIES = {'"': "&quot;", "'": "&apos;"}

XML_DECLARATION = "<?xml version='1.0' encoding='UTF-8'?>"

# XML 1.0 allows only tab, LF and CR below U+0020
_INVALID_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f]")


def escape_xml(text: str) -> str:
    """Escape ``& < > " '`` for element text and attribute values."""
    return escape(text, _ENTITIES)


def _check_chars(value: str) -> str:
    match = _INVALID_CHARS.search(value)
    if match:
        raise XmlWriterError(
            f"Character U+{ord(match.group()):04X} is not allowed in XML"
        )
    return value


class TagWriter:
    """Write nested XML elements without whitespace between tags."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._stack: list[str] = []
        self._start_tag_open = False
        self._started = False
        self._closed = False

    def __enter__(self) -> "TagWriter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def depth(self) -> int:
        return len(self._stack)

    def start_document(self) -> "TagWriter":
        if self._started:
            raise XmlWriterError("Document already started")
        self._started = True
        self._write(XML_DECLARATION)
        return self

    def end_document(self) -> "TagWriter":
        if self._stack:
            raise XmlWriterError(f"Unclosed elements: {', '.join(self._stack)}")
        self._finish_start_tag()
        self._stream.flush()
        return self

    def start_tag(self, name: str) -> "TagWriter":
        if not name:
            raise XmlWriterError("Element name must not be empty")
        self._finish_start_tag()
        self._write(f"<{name}")
        self._stack.append(name)
        self._start_tag_open = True
        return self

    def attribute(self, name: str, value: str) -> "TagWriter":
        if not self._start_tag_open:
            raise XmlWriterError(f"Attribute {name!r} outside of a start tag")
        self._write(f' {name}="{escape_xml(_check_chars(value))}"')
        return self

    def text(self, value: str | None) -> "TagWriter":
        if not self._stack:
            raise XmlWriterError("Text outside of the root element")
        self._finish_start_tag()
        if value:
            self._write(escape_xml(_check_chars(value)))
        return self

    def end_tag(self) -> "TagWriter":
        if not self._stack:
            raise XmlWriterError("No open element to close")
        self._finish_start_tag()
        self._write(f"</{self._stack.pop()}>")
        return self

    def element(self, name: str, value: str | None) -> "TagWriter":
        """Write ``<name>value</name>``."""
        return self.start_tag(name).text(value).end_tag()

    def collection(
        self, wrapper: str | None, name: str, values: Iterable[str]
    ) -> "TagWriter":
        """Write one ``name`` element per value, inside ``wrapper`` if given.

        Nothing is written, wrapper included, when there are no values.
        """
        values = list(values)
        if not values:
            return self
        if wrapper:
            self.start_tag(wrapper)
        for value in values:
            self.element(name, value)
        if wrapper:
            self.end_tag()
        return self

    def getvalue(self) -> str:
        """Return the buffered document; the stream must be in-memory."""
        if self._stack:
            raise XmlWriterError("Document is incomplete")
        if self._closed:
            raise XmlWriterError("Writer is closed")
        return self._stream.getvalue()

    def close(self) -> None:
        """Release the writer and its stream. Safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        self._stream.close()

    def _finish_start_tag(self) -> None:
        if self._start_tag_open:
            self._write(">")
            self._start_tag_open = False

    def _write(self, markup: str) -> None:
        if self._closed:
            raise XmlWriterError("Writer is closed")
        self._stream.write(markup)
