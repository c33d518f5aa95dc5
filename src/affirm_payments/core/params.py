"""
Optional parameters accepted by each charge operation.

Each operation declares which optional keys it forwards to Affirm and the
primitive type each one must have. Supplied values are type-checked, then
anything undeclared or empty is dropped before the request is built.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Mapping, Optional

from .errors import ValidationError

__all__ = [
    "AUTHORIZE_PARAMETERS",
    "CAPTURE_PARAMETERS",
    "READ_PARAMETERS",
    "REFUND_PARAMETERS",
    "VOID_PARAMETERS",
    "matches_type",
    "prepare_optional_data",
    "require_string",
    "validate_optional_data",
    "whitelist",
]

AUTHORIZE_PARAMETERS: Mapping[str, type] = {"order_id": str}
CAPTURE_PARAMETERS: Mapping[str, type] = {
    "order_id": str,
    "shipping_carrier": str,
    "shipping_confirmation": str,
}
READ_PARAMETERS: Mapping[str, type] = {
    "limit": int,
    "before": str,
    "after": str,
}
VOID_PARAMETERS: Mapping[str, type] = {}
REFUND_PARAMETERS: Mapping[str, type] = {"amount": int}


def matches_type(value: Any, expected: type) -> bool:
    # bool is an int subclass but never a valid integer parameter
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def require_string(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValidationError(name, "str", value)
    return value


def validate_optional_data(
    schema: Mapping[str, type],
    optional_data: Mapping[str, Any],
) -> None:
    """
    Check the declared keys present in ``optional_data`` against ``schema``.

    Keys the caller did not supply are not required, and undeclared keys are
    ignored here (they are removed by :func:`whitelist`).
    """
    for name, expected in schema.items():
        if name in optional_data and not matches_type(optional_data[name], expected):
            raise ValidationError(name, expected.__name__, optional_data[name])


def whitelist(optional_data: Mapping[str, Any], allowed: Iterable[str]) -> Dict[str, Any]:
    """Keep the allowed keys whose values are non-empty."""
    allowed_keys = set(allowed)
    return {
        key: value
        for key, value in optional_data.items()
        if key in allowed_keys and value
    }


def prepare_optional_data(
    schema: Mapping[str, type],
    optional_data: Optional[Mapping[str, Any]],
) -> Dict[str, Any]:
    if optional_data is None:
        return {}
    if not isinstance(optional_data, Mapping):
        raise ValidationError("optional_data", "Mapping", optional_data)
    validate_optional_data(schema, optional_data)
    return whitelist(optional_data, schema)
