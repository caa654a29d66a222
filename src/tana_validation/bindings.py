"""Foreign-runtime entry points for the report renderer.

Hosts that cannot call ``format_validation_error`` with native Python
arguments (JS tooling over a JSON bridge, positional RPC layers, shell
pipelines) go through these wrappers. They only marshal: fields are
checked, converted and put in call order, then handed to the renderer
unchanged, so a report produced here is byte-identical to a direct call.

Architecture:
    - coerce_arguments(): Mapping -> ordered, typed argument tuple
    - format_from_mapping(): coerce_arguments() + render
    - format_from_json(): JSON object -> format_from_mapping()
    - format_from_sequence(): Positional arguments -> render

Python 3.13+.
"""

import json
import logging
import re
from collections.abc import Mapping, Sequence
from typing import TypeAlias

from tana_validation.diagnostics import BindingError, format_validation_error

__all__ = [
    "FIELD_ORDER",
    "coerce_arguments",
    "format_from_json",
    "format_from_mapping",
    "format_from_sequence",
]

logger = logging.getLogger(__name__)

FIELD_ORDER: tuple[str, ...] = (
    "code",
    "file_path",
    "error_kind",
    "line_num",
    "col_num",
    "message",
    "help",
    "underline_length",
)

# Optional fields and their defaults; everything else is required.
_DEFAULTS: dict[str, str | int] = {
    "help": "",
    "underline_length": 1,
}

ReportArgs: TypeAlias = tuple[str, str, str, int, int, str, str, int]

# Optional minus sign and ASCII digits only: no "+", no "_", no other scripts
_DECIMAL = re.compile(r"-?[0-9]+")


def _coerce_int(field: str, value: object) -> int:
    """Convert an integer field, accepting ints and decimal strings."""
    # bool is an int subclass; True/False are never meant as positions
    if isinstance(value, bool):
        msg = f"Field '{field}' must be an integer, got bool"
        raise BindingError(msg, field=field)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if _DECIMAL.fullmatch(text) is None:
            msg = f"Field '{field}' must be an integer, got {value!r}"
            raise BindingError(msg, field=field)
        return int(text)
    msg = f"Field '{field}' must be an integer, got {type(value).__name__}"
    raise BindingError(msg, field=field)


def _coerce_str(field: str, value: object) -> str:
    if not isinstance(value, str):
        msg = f"Field '{field}' must be a string, got {type(value).__name__}"
        raise BindingError(msg, field=field)
    return value


def _lookup(fields: Mapping[str, object], field: str) -> object:
    if field in fields:
        return fields[field]
    if field in _DEFAULTS:
        return _DEFAULTS[field]
    msg = f"Missing required field '{field}'"
    raise BindingError(msg, field=field)


def coerce_arguments(fields: Mapping[str, object]) -> ReportArgs:
    """Validate report fields and return them in call order.

    Args:
        fields: Mapping of field name to value. ``help`` defaults to ""
            and ``underline_length`` to 1; all other fields are required.
            Unknown keys are ignored.

    Returns:
        Arguments ready to splat into format_validation_error()

    Raises:
        BindingError: If a required field is missing or a value has the
            wrong type
    """
    ignored = sorted(set(fields) - set(FIELD_ORDER))
    if ignored:
        logger.debug("Ignoring unknown report fields: %s", ", ".join(ignored))

    return (
        _coerce_str("code", _lookup(fields, "code")),
        _coerce_str("file_path", _lookup(fields, "file_path")),
        _coerce_str("error_kind", _lookup(fields, "error_kind")),
        _coerce_int("line_num", _lookup(fields, "line_num")),
        _coerce_int("col_num", _lookup(fields, "col_num")),
        _coerce_str("message", _lookup(fields, "message")),
        _coerce_str("help", _lookup(fields, "help")),
        _coerce_int("underline_length", _lookup(fields, "underline_length")),
    )


def format_from_mapping(fields: Mapping[str, object]) -> str:
    """Render a report from a field mapping.

    Raises:
        BindingError: If the fields cannot be marshaled
    """
    args = coerce_arguments(fields)
    logger.debug("Rendering report for %s:%d:%d", args[1], args[3], args[4])
    return format_validation_error(*args)


def format_from_json(payload: str | bytes) -> str:
    """Render a report from a JSON object of report fields.

    Args:
        payload: JSON text (UTF-8 when given as bytes) holding one object

    Returns:
        Formatted validation report

    Raises:
        BindingError: If the payload is not valid JSON, is not an object,
            or its fields cannot be marshaled
    """
    try:
        data = json.loads(payload)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        msg = f"Invalid JSON payload: {e}"
        raise BindingError(msg) from e

    if not isinstance(data, dict):
        msg = f"JSON payload must be an object, got {type(data).__name__}"
        raise BindingError(msg)

    return format_from_mapping(data)


def format_from_sequence(args: Sequence[object]) -> str:
    """Render a report from positional arguments in FIELD_ORDER.

    Raises:
        BindingError: If there are not exactly eight arguments or a value
            has the wrong type
    """
    if isinstance(args, str | bytes) or len(args) != len(FIELD_ORDER):
        count = "a string" if isinstance(args, str | bytes) else str(len(args))
        msg = f"Expected {len(FIELD_ORDER)} positional arguments, got {count}"
        raise BindingError(msg)
    return format_from_mapping(dict(zip(FIELD_ORDER, args, strict=True)))
