"""Intermediate representation dataclasses for segment/element documents.

WHY: The same EDI-style record data travels in three encodings — delimited
text, grouped JSON, and XML. Converting pairwise between them would need six
converters with six sets of edge cases. A single format-neutral model lets
each encoding implement one decode and one encode, and every conversion
becomes decode → model → encode.

HOW: Five types live here:
  DocumentFormat — enum of the three wire formats ("string", "json", "xml")
  Segment        — one named record with ordered string elements
  ParsedDocument — the ordered list of segments (the IR)
  Separators     — segment/element delimiter pair for the text format
  Document       — the tagged document exchanged at the boundary

RULES:
- Element position encodes meaning: element N is field N of its segment
- An empty string element is a real value, never "absent"
- Segment order is significant; same-name segments need not be contiguous
- No validation happens here — producers (codecs) guarantee invariants
- Document is one discriminated record, not a class hierarchy
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


class DocumentFormat(str, enum.Enum):
    """Wire identifiers of the three supported encodings.

    Inherits from str so values serialize cleanly to JSON and compare
    equal to their plain string form ("json" == DocumentFormat.JSON).
    """

    STRING = "string"
    JSON = "json"
    XML = "xml"


@dataclass
class Segment:
    """A named group of ordered element values — one record of the text format."""

    name: str
    elements: List[str] = field(default_factory=list)


@dataclass
class ParsedDocument:
    """The format-neutral intermediate representation.

    RULES:
    - segments are kept in source order
    - a document with zero segments is rejected by every encoder
    """

    segments: List[Segment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.segments)


@dataclass(frozen=True)
class Separators:
    """Delimiter pair used to split and join the text format."""

    segment: str
    element: str


JsonContent = Dict[str, List[Dict[str, str]]]


@dataclass
class Document:
    """A document at the boundary, tagged with its format.

    WHY: Callers hand the engine a document in any of the three encodings.
    The format tag decides which codec reads the content, and the text
    variant needs its delimiters to be readable at all.

    HOW: One record with a ``format`` discriminator. ``content`` is a str
    for the string and xml variants and a ``JsonContent`` mapping for the
    json variant. The separator fields are only meaningful for the string
    variant and stay None otherwise. Use the ``string()``, ``json()`` and
    ``xml()`` constructors instead of filling fields by hand.

    RULES:
    - format="string": content str, both separators set
    - format="json": content maps segment name → list of numbered field dicts
    - format="xml": content is a full XML document string
    """

    format: DocumentFormat
    content: Union[str, JsonContent]
    segment_separator: Optional[str] = None
    element_separator: Optional[str] = None

    @classmethod
    def string(
        cls,
        content: str,
        segment_separator: str,
        element_separator: str,
    ) -> Document:
        return cls(
            format=DocumentFormat.STRING,
            content=content,
            segment_separator=segment_separator,
            element_separator=element_separator,
        )

    @classmethod
    def json(cls, content: JsonContent) -> Document:
        return cls(format=DocumentFormat.JSON, content=content)

    @classmethod
    def xml(cls, content: str) -> Document:
        return cls(format=DocumentFormat.XML, content=content)

    @property
    def separators(self) -> Optional[Separators]:
        """The text-format delimiters, or None when either is missing."""
        if not self.segment_separator or not self.element_separator:
            return None
        return Separators(segment=self.segment_separator, element=self.element_separator)

    def to_dict(self) -> Dict[str, Any]:
        """Render the document with the camelCase keys used on the wire."""
        data: Dict[str, Any] = {"format": self.format.value, "content": self.content}
        if self.format is DocumentFormat.STRING:
            data["segmentSeparator"] = self.segment_separator
            data["elementSeparator"] = self.element_separator
        return data
