"""
Decimal digit arithmetic.

Integer-only helpers for counting and padding decimal digits, so that the
generators never depend on string formatting of numbers.
"""

from typing import Final

DECIMAL_BASE: Final[int] = 10


def digit_count(value: int) -> int:
    """
    Number of decimal digits of value, excluding the sign.

    Zero has one digit.

    Examples:
        >>> digit_count(7)
        1
        >>> digit_count(-12345)
        5
        >>> digit_count(9223372036854775807)
        19
    """
    value = abs(value)
    count = 1
    while value >= DECIMAL_BASE:
        value //= DECIMAL_BASE
        count += 1
    return count


def pad_fraction(fraction: int, width: int, target: int) -> int:
    """
    Right-pad a fractional digit group with zeros up to target digits.

    Args:
        fraction: Fractional digits read as an integer (e.g. 13 for "0.13")
        width: Number of digits the fraction was written with
        target: Digit count to pad to

    Returns:
        fraction * 10 ** (target - width)

    Raises:
        ValueError: If width exceeds target

    Examples:
        >>> pad_fraction(13, 2, 14)
        13000000000000
    """
    if width > target:
        raise ValueError(f"width {width} exceeds target {target}")
    return fraction * DECIMAL_BASE ** (target - width)
