"""Codec registry — one codec per document format.

WHY: The orchestrator, CLI, and HTTP layer need a single lookup to find
the codec that reads or writes a given format.

HOW: CODECS maps DocumentFormat members to codec *classes* (not
instances). Callers instantiate as needed: ``codec = CODECS[fmt]()``.
``get_codec()`` does the lookup and instantiation in one step.

RULES:
- Keys are DocumentFormat members (which compare equal to "string", etc.)
- Values are BaseCodec subclasses constructible with no arguments
"""

from __future__ import annotations

from typing import Dict, Type, Union

from edi_converter.codecs.base import BaseCodec
from edi_converter.codecs.json_codec import JsonCodec
from edi_converter.codecs.string_codec import StringCodec
from edi_converter.codecs.xml_codec import XmlCodec
from edi_converter.core.errors import InvalidArgumentError
from edi_converter.core.model import DocumentFormat

CODECS: Dict[DocumentFormat, Type[BaseCodec]] = {
    DocumentFormat.STRING: StringCodec,
    DocumentFormat.JSON: JsonCodec,
    DocumentFormat.XML: XmlCodec,
}


def resolve_format(value: Union[str, DocumentFormat]) -> DocumentFormat:
    """Turn a wire format name into a DocumentFormat, rejecting unknown ones."""
    try:
        return DocumentFormat(value)
    except ValueError:
        available = ", ".join(fmt.value for fmt in DocumentFormat)
        raise InvalidArgumentError(
            "Unsupported format '{}'. Available: {}".format(value, available)
        ) from None


def get_codec(value: Union[str, DocumentFormat]) -> BaseCodec:
    return CODECS[resolve_format(value)]()


__all__ = ["BaseCodec", "CODECS", "JsonCodec", "StringCodec", "XmlCodec", "get_codec", "resolve_format"]
