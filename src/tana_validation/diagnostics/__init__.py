"""Diagnostic system for validation errors.

Provides the shared report renderer, diagnostic value types and the
exceptions raised around them. Output style is inspired by Rust and Gleam
compiler errors.

Python 3.13+. Zero external dependencies.
"""

from .codes import ErrorKind, SourceLocation, ValidationDiagnostic
from .errors import BindingError, ValidationFailure
from .formatter import (
    excerpt_line,
    format_validation_error,
    split_source_lines,
    underline,
)

__all__ = [
    "BindingError",
    "ErrorKind",
    "SourceLocation",
    "ValidationDiagnostic",
    "ValidationFailure",
    "excerpt_line",
    "format_validation_error",
    "split_source_lines",
    "underline",
]
