"""Numeric coercion helpers for aggregates"""
import logging
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def to_decimal(value: Any) -> Decimal:
    """Convert a column value to Decimal.

    None, booleans, non-numeric strings and NaN/infinite values become zero so
    that a single malformed row cannot corrupt a sum.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, bool):
        logger.warning(f"Non-numeric value {value!r} treated as 0")
        return ZERO
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            logger.warning(f"Non-numeric value {value!r} treated as 0")
            return ZERO
    else:
        logger.warning(f"Unsupported numeric type {type(value).__name__} treated as 0")
        return ZERO

    if not result.is_finite():
        logger.warning(f"Non-finite value {value!r} treated as 0")
        return ZERO
    return result


def sum_decimal(values: Iterable[Any]) -> Decimal:
    return sum((to_decimal(v) for v in values), ZERO)
