"""Diagnostic data structures.

Defines error kind labels, source locations and validation diagnostics.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum

__all__ = [
    "ErrorKind",
    "SourceLocation",
    "ValidationDiagnostic",
]


class ErrorKind(StrEnum):
    """Well-known error kind labels.

    Inherits from ``StrEnum`` so members can be passed anywhere a kind
    string is expected and render as their plain value. Kinds are free-form:
    any string is accepted by the renderer, these are only the labels the
    validators emit today.
    """

    INVALID_IMPORT = "Invalid Import"
    INVALID_EXPORT = "Invalid Export"
    CONTEXT_ERROR = "Context Error"
    TYPE_ERROR = "Type Error"
    ERROR = "Error"


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Where a diagnostic points.

    Values are stored as given. Line and column are 1-indexed by
    convention but are not checked: the renderer clamps them, so a
    location past the end of the source is still representable.

    Attributes:
        file_path: Path shown in the report header (e.g. "contract.ts")
        line: Line number (1-indexed)
        column: Column number (1-indexed, counted in characters)
    """

    file_path: str
    line: int
    column: int

    def __str__(self) -> str:
        """Return ``file_path:line:column``."""
        return f"{self.file_path}:{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class ValidationDiagnostic:
    """A single source problem reported by a validator.

    Attributes:
        kind: Category label (see ErrorKind)
        message: Text printed after the underline
        location: Where the problem is
        help: Suggestion printed on the ``= help:`` line
        underline_length: Number of characters to underline
    """

    kind: str
    message: str
    location: SourceLocation
    help: str = ""
    underline_length: int = 1

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self, code: str) -> str:
        """Render this diagnostic against its source text.

        Produces exactly the same bytes as calling
        ``format_validation_error`` with the individual fields.

        Args:
            code: Source text the location refers to

        Returns:
            Formatted validation report
        """
        from .formatter import format_validation_error  # noqa: PLC0415 - circular

        return format_validation_error(
            code,
            self.location.file_path,
            self.kind,
            self.location.line,
            self.location.column,
            self.message,
            self.help,
            self.underline_length,
        )
