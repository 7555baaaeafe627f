"""
Input Coercion
==============

Converts raw control output into typed FeatureSet values.

Numeric text is parsed the way browser number inputs are read: the longest
valid numeric prefix wins and anything after it is ignored. Advertised bounds
are never enforced. Text with no numeric prefix becomes NaN, unless strict
mode is on, in which case it is rejected with InputCoercionError.
"""

import re
from typing import Any, Union

from loguru import logger

from churn_form.errors import InputCoercionError
from churn_form.form.features import (
    DECIMAL_FIELDS,
    FIELD_OPTIONS,
    INTEGER_FIELDS,
    FeatureSet,
    update_field,
    wire_name,
)

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")

Number = Union[int, float]


def parse_int(raw: str) -> Number:
    """Parse a leading integer, returning NaN when there is none."""
    match = _INT_PREFIX.match(raw)
    if match is None:
        return float("nan")
    return int(match.group(1))


def parse_float(raw: str) -> float:
    """Parse a leading decimal literal, returning NaN when there is none."""
    match = _FLOAT_PREFIX.match(raw)
    if match is None:
        return float("nan")
    return float(match.group(1).replace("Infinity", "inf"))


def _numeric(field: str, raw: Any, strict: bool) -> Number:
    text = raw if isinstance(raw, str) else str(raw)
    value = parse_int(text) if field in INTEGER_FIELDS else parse_float(text)

    if isinstance(value, float) and value != value:
        if strict:
            raise InputCoercionError(field, raw, "not a number")
        logger.debug(f"Passing NaN through for {field}: {raw!r}")

    return value


def coerce_value(name: str, raw: Any, strict: bool = False) -> Any:
    """
    Convert raw control output for one field into its typed value.

    Args:
        name: Field wire name or attribute name
        raw: Control output, normally a string
        strict: Reject numeric text that does not parse

    Returns:
        The typed value for the FeatureSet

    Raises:
        InputCoercionError: enum value outside its option set, or
            unparseable numeric text in strict mode
    """
    field = wire_name(name)

    if field in INTEGER_FIELDS or field in DECIMAL_FIELDS:
        return _numeric(field, raw, strict)

    options = FIELD_OPTIONS[field]
    if raw not in options:
        raise InputCoercionError(field, raw, f"expected one of {list(options)}")
    return raw


def apply_input(features: FeatureSet, name: str, raw: Any, strict: bool = False) -> FeatureSet:
    """Coerce ``raw`` and return ``features`` with that single field replaced."""
    return update_field(features, name, coerce_value(name, raw, strict=strict))
