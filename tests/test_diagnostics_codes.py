"""Tests for diagnostics/codes.py value types.

Python 3.13+.
"""

import dataclasses

import pytest

from tana_validation.diagnostics.codes import (
    ErrorKind,
    SourceLocation,
    ValidationDiagnostic,
)
from tana_validation.diagnostics.formatter import format_validation_error


class TestErrorKind:
    """Test ErrorKind labels."""

    def test_values(self):
        """Kind labels match what validators print."""
        assert ErrorKind.INVALID_IMPORT.value == "Invalid Import"
        assert ErrorKind.INVALID_EXPORT.value == "Invalid Export"
        assert ErrorKind.CONTEXT_ERROR.value == "Context Error"
        assert ErrorKind.TYPE_ERROR.value == "Type Error"
        assert "SYNTAX_ERROR" not in ErrorKind.__members__
        assert ErrorKind.ERROR.value == "Error"

    def test_renders_as_plain_string(self):
        """StrEnum members render as their value in reports."""
        report = format_validation_error(
            "x", "a.ts", ErrorKind.INVALID_IMPORT, 1, 1, "m", "h", 1
        )

        assert "❌ Invalid Import\n" in report
        assert "ErrorKind" not in report


class TestSourceLocation:
    """Test SourceLocation construction and display."""

    def test_str(self):
        """str() is file_path:line:column."""
        assert str(SourceLocation("test.ts", 1, 26)) == "test.ts:1:26"

    def test_out_of_range_values_are_kept(self):
        """Locations are stored as given, without validation."""
        location = SourceLocation("a.ts", 0, -4)

        assert location.line == 0
        assert location.column == -4
        assert str(location) == "a.ts:0:-4"

    def test_frozen(self):
        """SourceLocation is immutable."""
        location = SourceLocation("a.ts", 1, 1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            location.line = 2  # type: ignore[misc]

    def test_equality(self):
        """Locations compare by value."""
        assert SourceLocation("a.ts", 3, 4) == SourceLocation("a.ts", 3, 4)
        assert SourceLocation("a.ts", 3, 4) != SourceLocation("a.ts", 3, 5)


class TestValidationDiagnostic:
    """Test ValidationDiagnostic defaults and rendering."""

    CODE = "import { console } from 'tana/invalid';"

    def _diagnostic(self) -> ValidationDiagnostic:
        return ValidationDiagnostic(
            kind=ErrorKind.INVALID_IMPORT,
            message="Module 'tana/invalid' not found",
            location=SourceLocation("contract.ts", 1, 26),
            help="Available modules: tana/core, tana/kv, tana/block",
            underline_length=12,
        )

    def test_defaults(self):
        """help defaults to empty, underline_length to one caret."""
        diagnostic = ValidationDiagnostic("Error", "msg", SourceLocation("a.ts", 1, 1))

        assert diagnostic.help == ""
        assert diagnostic.underline_length == 1

    def test_str_is_message(self):
        """str() returns the message only."""
        assert str(self._diagnostic()) == "Module 'tana/invalid' not found"

    def test_format_error(self):
        """format_error() renders the full report."""
        report = self._diagnostic().format_error(self.CODE)

        assert "┌─ contract.ts:1:26\n" in report
        assert f"  1 │ {self.CODE}\n" in report
        assert "    │ " + " " * 25 + "^" * 12 + " Module 'tana/invalid' not found\n" in report
        assert report.endswith("= help: Available modules: tana/core, tana/kv, tana/block\n│\n")

    def test_format_error_with_default_help(self):
        """Default help renders an empty help line."""
        diagnostic = ValidationDiagnostic("Error", "msg", SourceLocation("a.ts", 1, 1))

        assert diagnostic.format_error("x").endswith("= help: \n│\n")

    def test_frozen(self):
        """ValidationDiagnostic is immutable."""
        diagnostic = self._diagnostic()

        with pytest.raises(dataclasses.FrozenInstanceError):
            diagnostic.message = "other"  # type: ignore[misc]
