"""
Rational time base.

Musical durations are ratios (1/3 for a triplet eighth of a half note) and
must compare exactly, so every time value is backed by a Fraction.
Floats are rejected instead of being approximated.
"""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
from typing import Union

from chuk_music_time.constants import ErrorMessages
from chuk_music_time.errors import RationalError

RationalLike = Union[int, Fraction, Decimal, str]


def to_rational(value: object) -> Fraction:
    """
    Convert a value to an exact Fraction.

    Args:
        value: int, Fraction, Decimal or a string like '3/4'

    Returns:
        The exact rational value

    Raises:
        RationalError: For floats, bools and anything non-numeric
    """
    if isinstance(value, bool):
        raise RationalError(ErrorMessages.NOT_RATIONAL.format(value=value))
    if isinstance(value, Fraction):
        return value
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        raise RationalError(ErrorMessages.FLOAT_TIME.format(value=value))
    if isinstance(value, Decimal):
        return Fraction(value)
    if isinstance(value, str):
        try:
            return Fraction(value.strip())
        except (ValueError, ZeroDivisionError) as e:
            raise RationalError(ErrorMessages.NOT_RATIONAL.format(value=value)) from e
    raise RationalError(ErrorMessages.NOT_RATIONAL.format(value=value))


def format_rational(value: Fraction) -> str:
    """Render a Fraction as '3/4', or '2' for whole numbers."""
    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"
