"""Abstract base codec shared by the three document encodings.

WHY: The orchestrator, CLI and HTTP layer should treat every encoding the
same way: turn a tagged Document into the ParsedDocument IR, and turn the
IR back into a tagged Document. This base class fixes that interface so
the callers can dispatch generically through the CODECS registry.

HOW: BaseCodec is an ABC with a ``format`` property, a human-readable
``name`` and the ``decode()`` / ``encode()`` pair. Each concrete codec also
exposes module-level functions with the raw signatures (content in,
ParsedDocument out) for callers that do not hold a Document.

RULES:
- Subclasses MUST implement ``format``, ``name``, ``decode()`` and ``encode()``
- ``encode()`` raises EmptyInputError for a document with zero segments
- ``separators`` is only consulted by the string codec
- Codecs keep no per-call state; one instance may serve many calls
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from edi_converter.core.errors import InvalidArgumentError
from edi_converter.core.model import Document, DocumentFormat, ParsedDocument, Separators


class BaseCodec(ABC):
    """Abstract base for all document codecs.

    To add a new encoding:
    1. Create a new module in codecs/
    2. Subclass BaseCodec
    3. Implement format, name, decode() and encode()
    4. Register it in the CODECS dict in codecs/__init__.py
    """

    @property
    @abstractmethod
    def format(self) -> DocumentFormat:
        """The DocumentFormat this codec reads and writes."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable encoding name, e.g. 'EDI X12 string'."""

    @abstractmethod
    def decode(self, document: Document) -> ParsedDocument:
        """Read a tagged Document of this codec's format into the IR."""

    @abstractmethod
    def encode(
        self,
        parsed: ParsedDocument,
        separators: Optional[Separators] = None,
    ) -> Document:
        """Write the IR out as a tagged Document of this codec's format."""

    def _check_format(self, document: Document) -> None:
        if document.format != self.format:
            raise InvalidArgumentError(
                "{} codec cannot read a '{}' document".format(
                    self.name, DocumentFormat(document.format).value
                )
            )
