"""Shared constants for tana_validation.

Literal pieces of the validation report layout. Every caller (native
services, browser tooling, command-line tools) must produce identical
bytes for identical inputs, so these values are part of the output
contract and are not exposed as runtime options.

Constants are grouped by role:
- Report glyphs: Title line, marker and box-drawing characters
- Layout limits: Gutter width and underline floor

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Report glyphs
    "REPORT_TITLE",
    "ERROR_MARKER",
    "HEADER_CORNER",
    "GUTTER_BAR",
    "HELP_PREFIX",
    "CARET",
    # Layout limits
    "MIN_GUTTER_WIDTH",
    "UNDERLINE_INDENT",
    "MIN_UNDERLINE_LENGTH",
]

# ============================================================================
# REPORT GLYPHS
# ============================================================================

# First non-empty line of every report.
REPORT_TITLE: str = "Validation Error"

# Prefixes the error kind on the second line.
ERROR_MARKER: str = "\N{CROSS MARK}"

# Opens the location header ("┌─ file:line:col").
HEADER_CORNER: str = "\N{BOX DRAWINGS LIGHT DOWN AND RIGHT}\N{BOX DRAWINGS LIGHT HORIZONTAL}"

# Vertical rule used for blank gutter lines and as the gutter separator.
GUTTER_BAR: str = "\N{BOX DRAWINGS LIGHT VERTICAL}"

HELP_PREFIX: str = "= help:"

# Underline character. No color or ANSI styling is ever applied.
CARET: str = "^"

# ============================================================================
# LAYOUT LIMITS
# ============================================================================

# Line numbers are right-aligned in a field at least this wide.
# Longer numbers widen the field rather than being truncated.
MIN_GUTTER_WIDTH: int = 3

# The underline row is indented by a fixed four spaces, independent of the
# width of the line number printed above it.
UNDERLINE_INDENT: str = "    "

# Zero-length spans still get one caret.
MIN_UNDERLINE_LENGTH: int = 1
