"""Typed errors raised by the codecs and the conversion orchestrator.

WHY: Callers (HTTP layer, CLI, tests) need to tell a bad request apart
from a document that cannot be converted, without parsing message text.

HOW: One base class, ConversionError, with a subclass per failure kind.
The argument/input/structure errors also subclass ValueError so generic
``except ValueError`` handlers keep working.

RULES:
- Every codec and orchestrator failure is one of these types
- Messages are human-readable and surfaced to callers verbatim
- ConversionFailedError keeps the original exception on ``cause``
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for every error raised by the conversion engine."""


class InvalidArgumentError(ConversionError, ValueError):
    """Raised for missing/empty separators, an unknown or same-format target."""


class EmptyInputError(ConversionError, ValueError):
    """Raised when a document with zero segments is handed to an encoder."""


class InvalidStructureError(ConversionError, ValueError):
    """Raised when XML input is malformed or lacks its ``root`` element."""


class ConversionFailedError(ConversionError):
    """Wraps any decode/encode failure raised during a conversion.

    RULES:
    - ``cause`` is the original exception
    - message is "Conversion failed: <original message>"
    """

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        super().__init__("Conversion failed: {}".format(cause))
