from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from .catalog import Endpoint, Param


class ArgumentError(ValueError):
    """Raised when tool arguments do not match the endpoint's declared parameters."""


def _is_number(value: Any) -> bool:
    # bool is a subclass of int, but never a valid number here.
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_value(param: Param, value: Any) -> str:
    """Validate `value` against the parameter kind and render it as query text."""
    if param.kind == "string":
        if not isinstance(value, str):
            raise ArgumentError(
                f"Parameter '{param.key}' must be a string, got {type(value).__name__}"
            )
        return value

    if param.kind == "boolean":
        if not isinstance(value, bool):
            raise ArgumentError(
                f"Parameter '{param.key}' must be a boolean, got {type(value).__name__}"
            )
        return "true" if value else "false"

    if not _is_number(value):
        raise ArgumentError(
            f"Parameter '{param.key}' must be a {param.kind}, got {type(value).__name__}"
        )
    if param.kind == "integer" and isinstance(value, float) and not value.is_integer():
        raise ArgumentError(f"Parameter '{param.key}' must be an integer, got {value}")
    return _format_number(value)


def build_query(endpoint: Endpoint, arguments: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Map a tool argument bag onto the endpoint's query parameters.

    Only declared parameters are forwarded; absent and null values are omitted.
    Missing required parameters and kind mismatches raise `ArgumentError`.
    """
    arguments = arguments or {}
    query: Dict[str, str] = {}

    for param in endpoint.params:
        value = arguments.get(param.key)
        if value is None:
            if param.required:
                raise ArgumentError(f"Missing required field '{param.key}'")
            continue
        query[param.key] = format_value(param, value)

    return query
