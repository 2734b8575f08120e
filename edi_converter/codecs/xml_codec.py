"""XML codec.

WHY: XML consumers expect one element per record with named fields. The
XML form wraps every segment occurrence in an element named after the
segment, holding one numbered child per element value.

HOW: ``parsed_to_xml`` writes the document as text so the output layout
and escaping are exactly reproducible (a fixed declaration, 2-space
indented segments, 4-space indented fields). ``xml_to_parsed`` reads it
back with ``xml.etree.ElementTree``.

RULES:
- Output starts with ``<?xml version="1.0" encoding="UTF-8" ?>``
- The single document element is ``<root>``
- Escaping order is & < > " ' — so a literal "&amp;" becomes "&amp;amp;"
- Each child of root becomes one Segment, in document order
- Field children are read in document order by default; ``child_order="tag"``
  sorts them by tag name instead (breaks for 10+ fields: PO110 < PO12)
- Malformed XML or a missing ``root`` is an InvalidStructureError
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import List, Optional

from edi_converter.codecs.base import BaseCodec
from edi_converter.config import XML_CHILD_ORDER
from edi_converter.core.errors import EmptyInputError, InvalidArgumentError, InvalidStructureError
from edi_converter.core.model import (
    Document,
    DocumentFormat,
    ParsedDocument,
    Segment,
    Separators,
)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'
ROOT_TAG = "root"

CHILD_ORDER_DOCUMENT = "document"
CHILD_ORDER_TAG = "tag"
CHILD_ORDERS = (CHILD_ORDER_DOCUMENT, CHILD_ORDER_TAG)

# Ampersand must come first or the other entities get double-escaped.
_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    for char, entity in _ESCAPES:
        text = text.replace(char, entity)
    return text


def parsed_to_xml(parsed: ParsedDocument) -> str:
    """Render segments as an indented XML document string."""
    if not parsed.segments:
        raise EmptyInputError("No segments to convert")

    lines = [XML_DECLARATION, "<{}>".format(ROOT_TAG)]
    for segment in parsed.segments:
        lines.append("  <{}>".format(segment.name))
        for index, value in enumerate(segment.elements, start=1):
            tag = "{}{}".format(segment.name, index)
            lines.append("    <{0}>{1}</{0}>".format(tag, escape_xml(value)))
        lines.append("  </{}>".format(segment.name))
    lines.append("</{}>".format(ROOT_TAG))
    return "\n".join(lines)


def xml_to_parsed(content: str, child_order: str = CHILD_ORDER_DOCUMENT) -> ParsedDocument:
    """Read segments back from an XML document string.

    Args:
        content: A complete XML document with a ``<root>`` element.
        child_order: ``"document"`` keeps field children as written;
            ``"tag"`` sorts them lexicographically by tag name.

    Returns:
        One Segment per child of root, in document order.
    """
    if child_order not in CHILD_ORDERS:
        raise InvalidArgumentError(
            "Unknown XML child order '{}'. Available: {}".format(
                child_order, ", ".join(CHILD_ORDERS)
            )
        )

    try:
        root = ET.fromstring(content)
    except ET.ParseError as exc:
        raise InvalidStructureError("Failed to parse XML: {}".format(exc)) from exc

    if root.tag != ROOT_TAG:
        raise InvalidStructureError("Invalid XML structure: missing root element")

    segments: List[Segment] = []
    for segment_element in root:
        fields = list(segment_element)
        if child_order == CHILD_ORDER_TAG:
            fields.sort(key=lambda field: field.tag)
        segments.append(Segment(
            name=segment_element.tag,
            elements=[field.text or "" for field in fields],
        ))
    return ParsedDocument(segments=segments)


class XmlCodec(BaseCodec):
    """Codec for the ``"xml"`` format."""

    def __init__(self, child_order: Optional[str] = None) -> None:
        self.child_order = child_order if child_order is not None else XML_CHILD_ORDER

    @property
    def format(self) -> DocumentFormat:
        return DocumentFormat.XML

    @property
    def name(self) -> str:
        return "XML"

    def decode(self, document: Document) -> ParsedDocument:
        self._check_format(document)
        return xml_to_parsed(document.content, child_order=self.child_order)

    def encode(
        self,
        parsed: ParsedDocument,
        separators: Optional[Separators] = None,
    ) -> Document:
        return Document.xml(parsed_to_xml(parsed))
