"""Delimited text codec (EDI X12 style).

WHY: The text form is the native encoding of the data: segments separated
by one delimiter, elements within a segment separated by another, and the
segment name in the first position. Every other encoding is derived from
the segments read here.

HOW: ``parse_string`` splits on the segment separator, drops blank
fragments, then splits each fragment on the element separator.
``serialize_string`` is its inverse and always appends a final segment
separator, as X12 interchanges do.

RULES:
- Empty content or an empty separator is an InvalidArgumentError
- Blank (empty or whitespace-only) segment fragments are discarded, which
  allows a trailing separator and collapses consecutive separators
- Consecutive element separators produce an empty element, never a skip
- Fragments are not trimmed: whitespace around a kept segment is data
- Serialized output always ends with the segment separator
"""

from __future__ import annotations

from typing import List, Optional

from edi_converter.codecs.base import BaseCodec
from edi_converter.core.errors import EmptyInputError, InvalidArgumentError
from edi_converter.core.model import (
    Document,
    DocumentFormat,
    ParsedDocument,
    Segment,
    Separators,
)


def parse_string(
    content: str,
    segment_separator: str,
    element_separator: str,
) -> ParsedDocument:
    """Parse delimited text into a ParsedDocument.

    Args:
        content: The raw text, e.g. ``"ProductID*4*8~AddressID*42~"``.
        segment_separator: Delimiter between segments, e.g. ``"~"``.
        element_separator: Delimiter between elements, e.g. ``"*"``.

    Returns:
        The segments in order of appearance.
    """
    if not content or not segment_separator or not element_separator:
        raise InvalidArgumentError("Content and separators are required")

    segments: List[Segment] = []
    for raw in content.split(segment_separator):
        if not raw.strip():
            continue
        name, *elements = raw.split(element_separator)
        segments.append(Segment(name=name, elements=elements))

    return ParsedDocument(segments=segments)


def serialize_string(
    parsed: ParsedDocument,
    segment_separator: str,
    element_separator: str,
) -> str:
    """Serialize a ParsedDocument to delimited text with a trailing separator."""
    if not parsed.segments:
        raise EmptyInputError("No segments to serialize")
    if not segment_separator or not element_separator:
        raise InvalidArgumentError("Segment and element separators are required")

    body = segment_separator.join(
        element_separator.join([segment.name] + list(segment.elements))
        for segment in parsed.segments
    )
    return body + segment_separator


class StringCodec(BaseCodec):
    """Codec for the ``"string"`` format."""

    @property
    def format(self) -> DocumentFormat:
        return DocumentFormat.STRING

    @property
    def name(self) -> str:
        return "EDI X12 string"

    def decode(self, document: Document) -> ParsedDocument:
        self._check_format(document)
        separators = document.separators
        if separators is None:
            raise InvalidArgumentError("Content and separators are required")
        return parse_string(document.content, separators.segment, separators.element)

    def encode(
        self,
        parsed: ParsedDocument,
        separators: Optional[Separators] = None,
    ) -> Document:
        if separators is None:
            raise InvalidArgumentError(
                "Segment and element separators are required when converting to string format"
            )
        content = serialize_string(parsed, separators.segment, separators.element)
        return Document.string(content, separators.segment, separators.element)
