"""Conversion orchestrator — decode the source, encode the target.

WHY: Callers should not need to know which codec reads which format.
They hand over a tagged Document and name the format they want back; this
module validates the request, routes the document through the IR, and
reports failures with one consistent error type.

HOW: A single-shot pipeline per call:
  validate → codec(source).decode → ParsedDocument → codec(target).encode
The generic ``convert()`` applies the request rules (no same-format
conversion, separators required for string output). The direct entry
points ``convert_to_string/json/xml`` skip the same-format rule, so a
string document can be re-delimited with new separators.

RULES:
- Request errors raise InvalidArgumentError before any decoding
- Any decode/encode failure is re-raised as ConversionFailedError with the
  original exception on ``cause``
- No state survives a call; codecs are instantiated per call
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from edi_converter.codecs import get_codec, resolve_format
from edi_converter.core.errors import ConversionFailedError, InvalidArgumentError
from edi_converter.core.model import Document, DocumentFormat, Separators

logger = logging.getLogger(__name__)


def _require_separators(
    segment_separator: Optional[str],
    element_separator: Optional[str],
) -> Separators:
    if not segment_separator or not element_separator:
        raise InvalidArgumentError(
            "Segment and element separators are required when converting to string format"
        )
    return Separators(segment=segment_separator, element=element_separator)


def _run(
    document: Document,
    target: DocumentFormat,
    separators: Optional[Separators] = None,
) -> Document:
    source = resolve_format(document.format)
    try:
        parsed = get_codec(source).decode(document)
        logger.debug(
            "Decoded %s document into %d segments", source.value, len(parsed)
        )
        result = get_codec(target).encode(parsed, separators)
    except Exception as exc:
        raise ConversionFailedError(exc) from exc
    logger.debug("Converted %s → %s", source.value, target.value)
    return result


def convert(
    document: Document,
    target_format: Union[str, DocumentFormat],
    segment_separator: Optional[str] = None,
    element_separator: Optional[str] = None,
) -> Document:
    """Convert a tagged document to another format.

    Args:
        document: The source document in any supported format.
        target_format: "string", "json" or "xml"; must differ from the source.
        segment_separator: Required when the target is "string".
        element_separator: Required when the target is "string".

    Returns:
        A Document tagged with the target format.

    Raises:
        InvalidArgumentError: unknown or same-format target, missing separators.
        ConversionFailedError: the source could not be decoded or the target
            could not be encoded.
    """
    target = resolve_format(target_format)
    if resolve_format(document.format) is target:
        raise InvalidArgumentError("Target format cannot be the same as source format")

    separators = None
    if target is DocumentFormat.STRING:
        separators = _require_separators(segment_separator, element_separator)

    return _run(document, target, separators)


def convert_to_string(
    document: Document,
    segment_separator: Optional[str],
    element_separator: Optional[str],
) -> Document:
    """Convert any document to delimited text with the given separators."""
    separators = _require_separators(segment_separator, element_separator)
    return _run(document, DocumentFormat.STRING, separators)


def convert_to_json(document: Document) -> Document:
    """Convert any document to grouped JSON."""
    return _run(document, DocumentFormat.JSON)


def convert_to_xml(document: Document) -> Document:
    """Convert any document to XML."""
    return _run(document, DocumentFormat.XML)
