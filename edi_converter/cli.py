"""Command-line interface for the EDI Document Converter.

WHY: Users need a quick way to convert EDI files on disk from the
terminal or a shell pipeline without running the HTTP server.

HOW: Uses argparse to accept an input file, the target format, and the
separators for reading and writing delimited text. Reads the file into a
tagged Document (format taken from --from or the file extension), runs
the orchestrator, and writes the result to --output or stdout. Status and
errors go to stderr through logging / print.

RULES:
- Positional argument: input file path ("-" reads stdin)
- --to is required; --from defaults to the format implied by the extension
- Input separators default to the output separators, which default to config
- JSON output is pretty-printed with 2-space indentation
- Errors print "Error: <message>" to stderr and exit with status 1
- Python 3.9+ compatible — no match/case, no X | Y unions
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from edi_converter.config import (
    DEFAULT_ELEMENT_SEPARATOR,
    DEFAULT_SEGMENT_SEPARATOR,
    LOG_LEVEL,
    format_from_path,
)
from edi_converter.core.converter import convert, convert_to_string
from edi_converter.core.errors import ConversionError
from edi_converter.core.model import Document, DocumentFormat

logger = logging.getLogger(__name__)

_FORMAT_CHOICES = [fmt.value for fmt in DocumentFormat]


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8-sig")


def load_document(
    text: str,
    source: DocumentFormat,
    segment_separator: str,
    element_separator: str,
) -> Document:
    """Wrap raw file text as a tagged Document of the given format.

    RULES:
    - string: trailing newline is stripped (editors add one after the last "~")
    - json: the text must decode to an object; otherwise ValueError
    - xml: passed through unchanged
    """
    if source is DocumentFormat.STRING:
        return Document.string(text.rstrip("\r\n"), segment_separator, element_separator)
    if source is DocumentFormat.JSON:
        content = json.loads(text)
        if not isinstance(content, dict):
            raise ValueError("JSON input must be an object mapping segment names to lists")
        return Document.json(content)
    return Document.xml(text)


def render_document(document: Document) -> str:
    """Render a Document's content as text suitable for writing to a file."""
    if document.format is DocumentFormat.JSON:
        return json.dumps(document.content, indent=2, ensure_ascii=False) + "\n"
    return document.content


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separating parser construction from main() lets tests inspect the
    parser without running a conversion.
    """
    parser = argparse.ArgumentParser(
        prog="edi_converter",
        description="Convert EDI X12-style documents between delimited string, "
                    "grouped JSON, and XML formats.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the document to convert ('-' reads standard input).",
    )

    parser.add_argument(
        "--to",
        dest="target",
        required=True,
        choices=_FORMAT_CHOICES,
        help="Target format.",
    )

    parser.add_argument(
        "--from",
        dest="source",
        default=None,
        choices=_FORMAT_CHOICES,
        help="Source format (default: inferred from the file extension; "
             ".json → json, .xml → xml, anything else → string).",
    )

    parser.add_argument(
        "--segment-separator",
        default=DEFAULT_SEGMENT_SEPARATOR,
        help="Segment separator for string output (default: %(default)s).",
    )

    parser.add_argument(
        "--element-separator",
        default=DEFAULT_ELEMENT_SEPARATOR,
        help="Element separator for string output (default: %(default)s).",
    )

    parser.add_argument(
        "--input-segment-separator",
        default=None,
        help="Segment separator of a string input (default: --segment-separator).",
    )

    parser.add_argument(
        "--input-element-separator",
        default=None,
        help="Element separator of a string input (default: --element-separator).",
    )

    parser.add_argument(
        "-o", "--output",
        default=None,
        help="File to write the converted document to (default: standard output).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def run(args: argparse.Namespace) -> int:
    """Execute one conversion described by parsed CLI arguments.

    Returns the process exit status.
    """
    if args.source:
        source = DocumentFormat(args.source)
    elif args.input_file == "-":
        source = DocumentFormat.STRING
    else:
        source = format_from_path(args.input_file)
    target = DocumentFormat(args.target)

    try:
        text = _read_input(args.input_file)
    except OSError as exc:
        print("Error: Cannot read {}: {}".format(args.input_file, exc), file=sys.stderr)
        return 1

    try:
        document = load_document(
            text,
            source,
            args.input_segment_separator or args.segment_separator,
            args.input_element_separator or args.element_separator,
        )
        logger.debug("Converting %s → %s", source.value, target.value)
        if source is target and target is DocumentFormat.STRING:
            result = convert_to_string(document, args.segment_separator, args.element_separator)
        else:
            result = convert(
                document,
                target,
                segment_separator=args.segment_separator,
                element_separator=args.element_separator,
            )
    except (ConversionError, ValueError) as exc:
        print("Error: {}".format(exc), file=sys.stderr)
        return 1

    output = render_document(result)
    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        logger.info("Saved %s document to %s", target.value, args.output)
    else:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m edi_converter`` and the edi-converter script.

    argv=None means use sys.argv; an explicit list is for testing.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    sys.exit(run(args))


if __name__ == "__main__":
    main()
