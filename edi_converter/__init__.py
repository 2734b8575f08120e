"""EDI Document Converter — lossless interchange between text, JSON, and XML.

WHY: EDI X12-style data arrives as delimited positional text, but modern
consumers want JSON or XML. This package reads any of the three encodings
into one intermediate representation and writes it back out in any other.

HOW: Two-stage pipeline — decode (codec for the source format → IR) and
encode (IR → codec for the target format). The orchestrator in
core.converter ties the stages together; the server and CLI are callers.

RULES:
- All codecs read and write the same ParsedDocument IR
- Adding a new encoding = one new codec module, no core changes
- Conversions are pure: no shared state between calls
"""

from edi_converter.core.converter import (
    convert,
    convert_to_json,
    convert_to_string,
    convert_to_xml,
)
from edi_converter.core.errors import (
    ConversionError,
    ConversionFailedError,
    EmptyInputError,
    InvalidArgumentError,
    InvalidStructureError,
)
from edi_converter.core.model import Document, DocumentFormat, ParsedDocument, Segment

__version__ = "1.0.0"

__all__ = [
    "ConversionError",
    "ConversionFailedError",
    "Document",
    "DocumentFormat",
    "EmptyInputError",
    "InvalidArgumentError",
    "InvalidStructureError",
    "ParsedDocument",
    "Segment",
    "convert",
    "convert_to_json",
    "convert_to_string",
    "convert_to_xml",
]
