"""Validation exception hierarchy.

Rendering itself never raises. These exceptions are for the code around
it: validators that want to abort with a rendered report, and the binding
layer when foreign input cannot be turned into the eight report fields.

Python 3.13+. Zero external dependencies.
"""

from .codes import ValidationDiagnostic

__all__ = [
    "BindingError",
    "ValidationFailure",
]


class ValidationFailure(Exception):
    """Source code failed validation.

    When built from a diagnostic, the exception text is the full rendered
    report, so an uncaught failure prints the same block every other
    caller shows.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        report: Rendered report ("" when built from a plain message)
    """

    def __init__(self, message: str | ValidationDiagnostic, code: str = "") -> None:
        """Initialize ValidationFailure.

        Args:
            message: Error message string OR ValidationDiagnostic object
            code: Source text the diagnostic refers to (ignored for strings)
        """
        if isinstance(message, ValidationDiagnostic):
            self.diagnostic: ValidationDiagnostic | None = message
            self.report = message.format_error(code)
            super().__init__(self.report)
        else:
            self.diagnostic = None
            self.report = ""
            super().__init__(message)


class BindingError(ValueError):
    """Foreign input could not be marshaled into report fields.

    Raised for missing fields, wrongly typed values and malformed JSON.

    Attributes:
        field: Name of the offending field ("" when not field-specific)
    """

    def __init__(self, message: str, *, field: str = "") -> None:
        """Initialize BindingError.

        Args:
            message: Error description
            field: Name of the offending field
        """
        super().__init__(message)
        self.field = field
