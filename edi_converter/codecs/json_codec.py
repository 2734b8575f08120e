"""Grouped JSON codec.

WHY: JSON consumers want to look segments up by name rather than walk a
positional list, so the JSON form groups every occurrence of a segment
under its name and names each element by its position.

HOW: ``parsed_to_json`` builds ``{name: [{name1: v1, name2: v2, ...}]}``
with one object per occurrence. ``json_to_parsed`` reverses it, using the
highest numeric field suffix of each object to rebuild the full
positional element list.

RULES:
- Field keys are ``<segmentName><1-based index>`` (e.g. "PO11", "PO12")
- Same-name segments accumulate into one list, in their relative order
- Top-level keys are read in insertion order of the mapping
- Missing keys inside 1..max are rebuilt as "" so positions never shift
- A key's field number is the leading ASCII digit run of its suffix
  ("N1_0" is field 1); keys with no leading digits count as 0
- Non-string values (numbers) are read back with str()
- Grouping is lossy for interleaved names: A, B, A reads back as A, A, B
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Mapping, Optional

from edi_converter.codecs.base import BaseCodec
from edi_converter.core.errors import EmptyInputError
from edi_converter.core.model import (
    Document,
    DocumentFormat,
    JsonContent,
    ParsedDocument,
    Segment,
    Separators,
)

_LEADING_DIGITS = re.compile(r"[0-9]+")


def parsed_to_json(parsed: ParsedDocument) -> JsonContent:
    """Group segments by name into numbered-field objects."""
    if not parsed.segments:
        raise EmptyInputError("No segments to convert")

    result: JsonContent = {}
    for segment in parsed.segments:
        fields = {
            "{}{}".format(segment.name, index): value
            for index, value in enumerate(segment.elements, start=1)
        }
        result.setdefault(segment.name, []).append(fields)
    return result


def _max_field_number(segment_name: str, fields: Mapping[str, Any]) -> int:
    highest = 0
    for key in fields:
        if not key.startswith(segment_name):
            continue
        match = _LEADING_DIGITS.match(key[len(segment_name):])
        number = int(match.group()) if match else 0
        highest = max(highest, number)
    return highest


def json_to_parsed(content: Mapping[str, List[Mapping[str, Any]]]) -> ParsedDocument:
    """Rebuild positional segments from grouped JSON content."""
    segments: List[Segment] = []
    for segment_name, occurrences in content.items():
        for fields in occurrences:
            elements: List[str] = []
            for index in range(1, _max_field_number(segment_name, fields) + 1):
                value = fields.get("{}{}".format(segment_name, index))
                elements.append("" if value is None else str(value))
            segments.append(Segment(name=segment_name, elements=elements))
    return ParsedDocument(segments=segments)


class JsonCodec(BaseCodec):
    """Codec for the ``"json"`` format."""

    @property
    def format(self) -> DocumentFormat:
        return DocumentFormat.JSON

    @property
    def name(self) -> str:
        return "Grouped JSON"

    def decode(self, document: Document) -> ParsedDocument:
        self._check_format(document)
        content: Dict[str, Any] = document.content  # type: ignore[assignment]
        return json_to_parsed(content)

    def encode(
        self,
        parsed: ParsedDocument,
        separators: Optional[Separators] = None,
    ) -> Document:
        return Document.json(parsed_to_json(parsed))
