"""Command-line caller for the validation report renderer.

Renders one report from a source file (or stdin) and prints it unchanged,
for shell pipelines and editor integrations that are not written in Python.

Usage:
    python -m tana_validation contract.ts --line 1 --column 26 \\
        --kind "Invalid Import" --message "Module 'tana/invalid' not found" \\
        --help-text "Available modules: tana/core, tana/kv" --length 12

    echo '{"code": "...", "file_path": "a.ts", ...}' \\
        | python -m tana_validation --json -

Exit Codes:
    0: Report written to stdout
    2: Bad arguments, unreadable source or unmarshalable JSON

Python 3.13+.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from tana_validation.bindings import format_from_json, format_from_mapping
from tana_validation.diagnostics import BindingError, ErrorKind

logger = logging.getLogger("tana_validation")

STDIN_MARKER = "-"
STDIN_DISPLAY_PATH = "<stdin>"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tana-validate",
        description="Render a validation error report.",
    )
    parser.add_argument(
        "source",
        help=f"Source file, or '{STDIN_MARKER}' to read from stdin",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help=(
            "Treat the source as a JSON object holding all report fields; "
            "cannot be combined with the field flags"
        ),
    )
    parser.add_argument("--file-path", help="Path shown in the report header")
    parser.add_argument(
        "--kind", help=f"Error kind label (default: {ErrorKind.ERROR})"
    )
    parser.add_argument("--line", type=int, help="Line number (1-indexed)")
    parser.add_argument("--column", type=int, help="Column number (1-indexed)")
    parser.add_argument("--message", help="Message printed after the underline")
    parser.add_argument("--help-text", help="Text for the '= help:' line")
    parser.add_argument(
        "--length", type=int, help="Number of characters to underline (default: 1)"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr"
    )
    return parser


def _read_source(source: str) -> str:
    # Bytes in, so a lone "\r" is not turned into a line break on the way.
    if source == STDIN_MARKER:
        return sys.stdin.buffer.read().decode("utf-8")
    return Path(source).read_bytes().decode("utf-8")


def main(argv: list[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv: Arguments without the program name (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    field_flags = (
        ("--file-path", args.file_path),
        ("--kind", args.kind),
        ("--line", args.line),
        ("--column", args.column),
        ("--message", args.message),
        ("--help-text", args.help_text),
        ("--length", args.length),
    )
    if args.json:
        given = [flag for flag, value in field_flags if value is not None]
        if given:
            parser.error(f"--json cannot be combined with: {', '.join(given)}")
    else:
        missing = [
            flag
            for flag, value in (
                ("--line", args.line),
                ("--column", args.column),
                ("--message", args.message),
            )
            if value is None
        ]
        if missing:
            parser.error(f"the following arguments are required: {', '.join(missing)}")

    try:
        text = _read_source(args.source)
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.source}: {e}", file=sys.stderr)
        return 2

    logger.debug("Read %d characters from %s", len(text), args.source)

    try:
        if args.json:
            report = format_from_json(text)
        else:
            display_path = args.file_path
            if display_path is None:
                display_path = (
                    STDIN_DISPLAY_PATH if args.source == STDIN_MARKER else args.source
                )
            fields: dict[str, object] = {
                "code": text,
                "file_path": display_path,
                "error_kind": args.kind if args.kind is not None else str(ErrorKind.ERROR),
                "line_num": args.line,
                "col_num": args.column,
                "message": args.message,
            }
            if args.help_text is not None:
                fields["help"] = args.help_text
            if args.length is not None:
                fields["underline_length"] = args.length
            report = format_from_mapping(fields)
    except BindingError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    sys.stdout.write(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
