"""Assembly-line production rates and checked integer multiplication."""

from __future__ import annotations

import re

_CARS_PER_HOUR = 22
_U8_MAX = 255
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


def production_rate_per_hour(speed: int) -> float:
    """Cars produced per hour at ``speed`` (0-255); speeds outside 1-10 yield 0."""
    if not 0 <= speed <= _U8_MAX:
        raise ValueError(f"speed {speed} is out of range 0..{_U8_MAX}")
    produced = speed * _CARS_PER_HOUR
    if 1 <= speed <= 4:
        return float(produced)
    if 5 <= speed <= 8:
        return produced * 0.9
    if 9 <= speed <= 10:
        return produced * 0.77
    return 0.0


def _parse_i32(text: str) -> int:
    if not text:
        raise ValueError("cannot parse integer from empty string")
    if not _INTEGER.fullmatch(text):
        raise ValueError("invalid digit found in string")
    number = int(text)
    if number > _I32_MAX:
        raise ValueError("number too large to fit in target type")
    if number < _I32_MIN:
        raise ValueError("number too small to fit in target type")
    return number


def multiply(n1: str, n2: str) -> int:
    """Parse two 32-bit integers and return their product.

    Raises ValueError if either string is not a 32-bit integer and
    OverflowError if the product does not fit in 32 bits.
    """
    product = _parse_i32(n1) * _parse_i32(n2)
    if not _I32_MIN <= product <= _I32_MAX:
        raise OverflowError("attempt to multiply with overflow")
    return product