"""Common schema helpers used across multiple modules"""
from decimal import Decimal
from typing import Any

from split_engine.core.exceptions import ValidationError
from split_engine.utils.decimal_utils import to_decimal

# Upper bound on member and category keys carried by one policy
MAX_POLICY_ENTRIES = 256


def coerce_decimal(value: Any) -> Decimal:
    """Convert numeric input to Decimal, re-raising as ValueError for pydantic"""
    try:
        return to_decimal(value)
    except ValidationError as e:
        raise ValueError(e.message) from e
