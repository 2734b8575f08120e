"""Configuration constants, format mappings, and .env loading.

WHY: Centralizes the configurable values — default separators for text
output, the XML field-ordering mode, server bind address, logging level,
CORS origins — so they are easy to find, update, and override per
deployment without touching code.

HOW: python-dotenv loads the .env file on import. Constants are read from
the environment with plain defaults. FILE_EXTENSION_FORMATS maps file
suffixes to DocumentFormat for the CLI.

RULES:
- Every value can be overridden via an environment variable
- Default separators are "~" (segment) and "*" (element), as in X12
- XML_CHILD_ORDER is "document" unless explicitly set to "tag"
- Unknown file extensions fall back to the string format
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Dict, List, Union

from dotenv import load_dotenv

from edi_converter.core.model import DocumentFormat

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Conversion defaults
# ---------------------------------------------------------------------------

DEFAULT_SEGMENT_SEPARATOR = os.getenv("EDI_SEGMENT_SEPARATOR", "~")
DEFAULT_ELEMENT_SEPARATOR = os.getenv("EDI_ELEMENT_SEPARATOR", "*")
XML_CHILD_ORDER = os.getenv("EDI_XML_CHILD_ORDER", "document").strip().lower()

# ---------------------------------------------------------------------------
# Server and logging
# ---------------------------------------------------------------------------

API_VERSION = "1.0.0"
API_HOST = os.getenv("EDI_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("EDI_API_PORT", "3000"))
LOG_LEVEL = os.getenv("EDI_LOG_LEVEL", "INFO").upper()


def _split_origins(raw: str) -> List[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


ALLOWED_ORIGINS: List[str] = _split_origins(
    os.getenv("ALLOWED_ORIGINS", "http://localhost:3000")
)

# ---------------------------------------------------------------------------
# File extension → format
# ---------------------------------------------------------------------------

FILE_EXTENSION_FORMATS: Dict[str, DocumentFormat] = {
    ".json": DocumentFormat.JSON,
    ".xml": DocumentFormat.XML,
    ".edi": DocumentFormat.STRING,
    ".x12": DocumentFormat.STRING,
    ".txt": DocumentFormat.STRING,
}


def format_from_path(path: Union[str, Path]) -> DocumentFormat:
    """Guess a document's format from its file extension.

    RULES:
    - .json → json, .xml → xml
    - anything else (.edi, .x12, .txt, no extension) → string
    """
    return FILE_EXTENSION_FORMATS.get(Path(path).suffix.lower(), DocumentFormat.STRING)
