"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. The engine
in core.converter trusts its inputs to be well-shaped; these models are
where shape is checked.

HOW: The three document variants form a discriminated union on
``format``. Request models add cross-field rules with model validators
(same-format rejection, separators required/distinct). Python attribute
names are snake_case; the wire uses camelCase via field aliases.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Wire keys are camelCase: segmentSeparator, elementSeparator, targetFormat
- String and XML content must be non-empty; separators must be non-empty
- ConversionRequest: target != source, separators required for "string"
- StringConversionRequest: separators required and must differ
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from edi_converter.core.model import Document, DocumentFormat

_CAMEL_CASE = ConfigDict(populate_by_name=True)


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------


class StringDocumentModel(BaseModel):
    """A delimited text document with its separators."""

    model_config = _CAMEL_CASE

    format: Literal["string"] = Field(description="Document format discriminator.")
    content: str = Field(min_length=1, description="Delimited EDI text content.")
    segment_separator: str = Field(
        alias="segmentSeparator",
        min_length=1,
        description="Delimiter between segments, e.g. '~'.",
    )
    element_separator: str = Field(
        alias="elementSeparator",
        min_length=1,
        description="Delimiter between elements, e.g. '*'.",
    )

    def to_document(self) -> Document:
        return Document.string(self.content, self.segment_separator, self.element_separator)


class JsonDocumentModel(BaseModel):
    """A grouped JSON document."""

    format: Literal["json"] = Field(description="Document format discriminator.")
    content: Dict[str, List[Dict[str, Optional[Union[str, int, float]]]]] = Field(
        description=(
            "Segment name → list of occurrences; each occurrence maps "
            "'<name><n>' to the n-th element value. Numbers are read as "
            "their string form."
        ),
    )

    def to_document(self) -> Document:
        return Document.json(self.content)


class XmlDocumentModel(BaseModel):
    """An XML document string."""

    format: Literal["xml"] = Field(description="Document format discriminator.")
    content: str = Field(min_length=1, description="Complete XML document with a <root> element.")

    def to_document(self) -> Document:
        return Document.xml(self.content)


DocumentModel = Annotated[
    Union[StringDocumentModel, JsonDocumentModel, XmlDocumentModel],
    Field(discriminator="format"),
]


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class DocumentRequest(BaseModel):
    """Body of the direct JSON and XML conversion endpoints."""

    document: DocumentModel = Field(description="Source document in any supported format.")


class ConversionRequest(BaseModel):
    """Body of the generic conversion endpoint."""

    document: DocumentModel = Field(description="Source document in any supported format.")
    target_format: DocumentFormat = Field(
        alias="targetFormat",
        description="Format to convert to: 'string', 'json' or 'xml'.",
    )
    segment_separator: Optional[str] = Field(
        default=None,
        alias="segmentSeparator",
        min_length=1,
        description="Segment separator for string output (required when targetFormat is 'string').",
    )
    element_separator: Optional[str] = Field(
        default=None,
        alias="elementSeparator",
        min_length=1,
        description="Element separator for string output (required when targetFormat is 'string').",
    )

    @model_validator(mode="after")
    def _check_target(self) -> ConversionRequest:
        if self.document.format == self.target_format.value:
            raise ValueError("Target format cannot be the same as source format")
        if self.target_format is DocumentFormat.STRING and (
            not self.segment_separator or not self.element_separator
        ):
            raise ValueError(
                "Segment and element separators are required when converting to string format"
            )
        return self

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "document": {
                        "format": "string",
                        "content": "ProductID*4*8*15*16*23~AddressID*42*108*3*14~",
                        "segmentSeparator": "~",
                        "elementSeparator": "*",
                    },
                    "targetFormat": "json",
                }
            ]
        },
    )


class StringConversionRequest(BaseModel):
    """Body of the direct string conversion endpoint."""

    model_config = _CAMEL_CASE

    document: DocumentModel = Field(description="Source document in any supported format.")
    segment_separator: str = Field(
        alias="segmentSeparator",
        min_length=1,
        description="Segment separator for the output.",
    )
    element_separator: str = Field(
        alias="elementSeparator",
        min_length=1,
        description="Element separator for the output.",
    )

    @model_validator(mode="after")
    def _check_separators(self) -> StringConversionRequest:
        if self.segment_separator == self.element_separator:
            raise ValueError("Segment and element separators must be different")
        return self


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class ConversionResponse(BaseModel):
    """Result envelope for every conversion endpoint.

    RULES:
    - success=True carries ``data``; success=False carries ``error``
    """

    success: bool = Field(description="Whether the conversion succeeded.")
    data: Optional[DocumentModel] = Field(default=None, description="The converted document.")
    error: Optional[str] = Field(default=None, description="Human-readable error message.")


class HealthResponse(BaseModel):
    """Health check response."""

    success: bool = Field(description="Always true when the service is up.")
    message: str = Field(description="Service status message.")
    timestamp: str = Field(description="Current server time (ISO 8601, UTC).")
