"""tana_validation - Shared validation error formatting.

Renders one validator diagnostic into the fixed, compiler-style report
used by every Tana tool (runtime, edge service, playground, CLI), so all
of them print byte-identical text for the same error.

Public API:
    format_validation_error - Render a report from the eight report fields
    ValidationDiagnostic - Structured diagnostic with format_error()
    SourceLocation - File path, line and column of a diagnostic
    ErrorKind - Well-known error kind labels

Exceptions:
    ValidationFailure - Raised by validators to abort with a rendered report
    BindingError - Foreign input could not be marshaled into report fields

Submodules:
    tana_validation.diagnostics - Renderer, value types and exceptions
    tana_validation.bindings - JSON / mapping / positional entry points
"""

from .diagnostics import (
    BindingError,
    ErrorKind,
    SourceLocation,
    ValidationDiagnostic,
    ValidationFailure,
    format_validation_error,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("tana-validation")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "BindingError",
    "ErrorKind",
    "SourceLocation",
    "ValidationDiagnostic",
    "ValidationFailure",
    "__version__",
    "format_validation_error",
]
