"""Decimal arithmetic helpers"""

from decimal import ROUND_FLOOR, ROUND_HALF_EVEN, Decimal
from typing import Iterable, Union

from split_engine.core.exceptions import ValidationError

Numeric = Union[int, float, str, Decimal]

CENT = Decimal("0.01")
HALF = Decimal("0.5")

# Distance from an exact half cent still treated as a tie. Absorbs the drift
# left by float inputs and long Decimal weight quotients.
HALFWAY_TOLERANCE = Decimal("1e-9")

# Smallest residual worth moving onto the payer. Anything below it is
# sub-cent noise, never a real cent left over by rounding.
RESIDUAL_TOLERANCE = Decimal("0.001")


def to_decimal(value: Numeric) -> Decimal:
    """
    Convert a numeric value to Decimal.

    Floats go through their shortest string form so 0.7 becomes
    Decimal("0.7") rather than its binary expansion.

    Raises:
        ValidationError: For bools, unparsable strings and NaN/infinity
    """
    if isinstance(value, bool):
        raise ValidationError(f"Expected a number, got {value!r}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value)
        except ArithmeticError as e:
            raise ValidationError(f"Expected a number, got {value!r}") from e
    else:
        raise ValidationError(f"Expected a number, got {type(value).__name__}")

    if not result.is_finite():
        raise ValidationError(f"Amount must be finite, got {value!r}")

    return result


def round_to_cent(value: Numeric) -> Decimal:
    """
    Round a monetary value to cents using banker's rounding.

    Values exactly halfway between two cents (within HALFWAY_TOLERANCE)
    round to the even cent: 50.005 -> 50.00, 50.015 -> 50.02. Everything
    else rounds to the nearest cent.

    Args:
        value: Amount to round

    Returns:
        Decimal quantized to two places
    """
    scaled = to_decimal(value) * 100
    floor = scaled.to_integral_value(rounding=ROUND_FLOOR)

    if abs(scaled - floor - HALF) < HALFWAY_TOLERANCE:
        scaled = floor + HALF

    cents = scaled.to_integral_value(rounding=ROUND_HALF_EVEN)
    return (cents / 100).quantize(CENT)


def sum_decimals(values: Iterable[Decimal]) -> Decimal:
    """
    Sum a list of decimal values.

    Args:
        values: List of decimal values

    Returns:
        Sum of all values
    """
    return sum(values, Decimal("0"))
