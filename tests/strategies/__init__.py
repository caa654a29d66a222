"""Hypothesis strategies for tana_validation property-based testing.

This package provides reusable strategies for generating test data
across multiple test modules.

Usage:
    from tests.strategies import report_arguments, source_documents
    from tests.strategies.diagnostics import validation_diagnostics

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - source_documents, line_numbers_for, column_numbers, underline_lengths
"""

from .diagnostics import (
    column_numbers,
    error_kinds,
    field_texts,
    line_numbers_for,
    line_texts,
    report_arguments,
    source_documents,
    source_locations,
    underline_lengths,
    validation_diagnostics,
)

__all__ = [
    "column_numbers",
    "error_kinds",
    "field_texts",
    "line_numbers_for",
    "line_texts",
    "report_arguments",
    "source_documents",
    "source_locations",
    "underline_lengths",
    "validation_diagnostics",
]
