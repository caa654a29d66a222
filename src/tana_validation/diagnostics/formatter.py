"""Validation report rendering.

Turns one diagnostic (file, line, column, kind, message, help, span length)
into the fixed multi-line report shared by every caller:

    Validation Error
    ❌ Invalid Import

    ┌─ contract.ts:1:26
    │
      1 │ import { console } from 'tana/invalid';
        │                          ^^^^^^^^^^^^ Module 'tana/invalid' not found
    │
    = help: Available modules: tana/core, tana/kv, tana/block
    │

The report starts and ends with a newline. Rendering is total: out-of-range
line numbers give an empty excerpt, columns below 1 give no padding and a
zero span length still draws one caret. Nothing here raises, logs or keeps
state between calls.

Note:
    Columns and span lengths are counted in Python string characters
    (Unicode code points). Wide and combining characters are not accounted
    for, so the underline can drift on such lines.

Python 3.13+. Zero external dependencies.
"""

from tana_validation.constants import (
    CARET,
    ERROR_MARKER,
    GUTTER_BAR,
    HEADER_CORNER,
    HELP_PREFIX,
    MIN_GUTTER_WIDTH,
    MIN_UNDERLINE_LENGTH,
    REPORT_TITLE,
    UNDERLINE_INDENT,
)

__all__ = [
    "excerpt_line",
    "format_validation_error",
    "split_source_lines",
    "underline",
]


def split_source_lines(code: str) -> list[str]:
    """Split source text into lines without their terminators.

    Only ``"\\n"`` ends a line; a ``"\\r"`` directly before it is dropped
    with it. A final terminator does not produce an extra empty line, and
    empty input has no lines at all.

    Unlike ``str.splitlines()``, form feeds, vertical tabs, lone carriage
    returns and Unicode line separators stay inside the line.

    Args:
        code: Source text

    Returns:
        Lines in source order

    Example:
        >>> split_source_lines("a\\r\\nb\\n")
        ['a', 'b']
        >>> split_source_lines("")
        []
    """
    if not code:
        return []

    lines = code.split("\n")
    if code.endswith("\n"):
        lines.pop()

    terminated = len(lines) if code.endswith("\n") else len(lines) - 1
    for i in range(terminated):
        if lines[i].endswith("\r"):
            lines[i] = lines[i][:-1]
    return lines


def excerpt_line(lines: list[str], line_num: int) -> str:
    """Return the 1-indexed line ``line_num``, or ``""`` when out of range."""
    if 1 <= line_num <= len(lines):
        return lines[line_num - 1]
    return ""


def underline(col_num: int, underline_length: int) -> str:
    """Build the caret run for a span, padded to its column.

    Args:
        col_num: 1-indexed column of the span start; values below 2 mean
            no padding
        underline_length: Span length; values below 1 draw a single caret

    Returns:
        Padding spaces followed by the carets
    """
    padding = " " * max(col_num - 1, 0)
    return padding + CARET * max(underline_length, MIN_UNDERLINE_LENGTH)


def format_validation_error(  # noqa: PLR0913 - fixed eight-field call contract
    code: str,
    file_path: str,
    error_kind: str,
    line_num: int,
    col_num: int,
    message: str,
    help: str,  # noqa: A002 - field name shared with every caller
    underline_length: int,
) -> str:
    """Render a validation error report.

    Args:
        code: Source text containing the error
        file_path: Path shown in the location header (e.g. "contract.ts")
        error_kind: Category label (e.g. "Invalid Import", "Type Error")
        line_num: Line number (1-indexed)
        col_num: Column number (1-indexed)
        message: Message printed after the underline
        help: Text for the closing ``= help:`` line
        underline_length: Number of characters to underline

    Returns:
        The complete report, beginning and ending with a newline

    Example:
        >>> report = format_validation_error(
        ...     "let x = 1", "a.ts", "Type Error", 1, 5, "bad", "fix it", 1
        ... )
        >>> print(report)
        <BLANKLINE>
        Validation Error
        ❌ Type Error
        <BLANKLINE>
        ┌─ a.ts:1:5
        │
          1 │ let x = 1
            │     ^ bad
        │
        = help: fix it
        │
        <BLANKLINE>
    """
    excerpt = excerpt_line(split_source_lines(code), line_num)
    marks = underline(col_num, underline_length)

    return (
        f"\n{REPORT_TITLE}\n"
        f"{ERROR_MARKER} {error_kind}\n"
        "\n"
        f"{HEADER_CORNER} {file_path}:{line_num}:{col_num}\n"
        f"{GUTTER_BAR}\n"
        f"{line_num:>{MIN_GUTTER_WIDTH}} {GUTTER_BAR} {excerpt}\n"
        f"{UNDERLINE_INDENT}{GUTTER_BAR} {marks} {message}\n"
        f"{GUTTER_BAR}\n"
        f"{HELP_PREFIX} {help}\n"
        f"{GUTTER_BAR}\n"
    )
