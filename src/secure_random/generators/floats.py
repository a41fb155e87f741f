"""
Float Generator — fixed-precision and range-constrained fractions

Fixed precision (positive_float / negative_float / random_float):
    1. d = positive_integer(length=fractional_digits)
    2. value = 0.<digits of d> = d / 10^fractional_digits
    3. round half away from zero to fractional_digits places

Since d never has a leading zero, value ∈ [0.1, 1) and is never exactly 0.

Range constrained (float_between):
    1. Both bounds normalized to 14-digit integers [int_min, int_max]
    2. n = secure_ranged_int(int_min, int_max)
    3. value = n / 10^digit_count(n)

The scale in step 3 follows the digit count of the sampled integer, not a
fixed 14. With the accepted bound format every n in range has 14 digits,
but the rule is kept as is: an n with fewer digits yields a coarser, larger
fraction (n = 5 gives 0.5, not 0.00000000000005).
"""

from decimal import ROUND_HALF_UP, Decimal

from secure_random.core.config import DEFAULT_LIMITS
from secure_random.core.digits import digit_count
from secure_random.core.source import ByteSource, default_source
from secure_random.core.validation import (
    FloatBound,
    parse_fraction_range,
    validate_range,
)
from secure_random.generators.integers import positive_integer

# Coin flip outcomes of secure_ranged_int(0, 1)
_SIGNS = (-1, 1)


# =============================================================================
# ROUNDING
# =============================================================================


def round_half_away(value: Decimal, fractional_digits: int) -> float:
    """
    Round to `fractional_digits` places, ties away from zero.

    Examples:
        >>> round_half_away(Decimal("0.125"), 2)
        0.13
        >>> round_half_away(Decimal("-0.125"), 2)
        -0.13
    """
    quantum = Decimal(1).scaleb(-fractional_digits)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def _fraction(fractional_digits: int, source: ByteSource) -> Decimal:
    """Exact 0.<digits> value built from a fractional_digits-long integer."""
    digits = positive_integer(fractional_digits, source=source)
    return Decimal(digits).scaleb(-fractional_digits)


# =============================================================================
# FIXED PRECISION
# =============================================================================


def positive_float(
    fractional_digits: int = 14, *, source: ByteSource | None = None
) -> float:
    """
    Random fraction in (0, 1) with `fractional_digits` fractional digits.

    Raises:
        RangeError: If fractional_digits is outside [1, 14]
    """
    validate_range(fractional_digits, DEFAULT_LIMITS.float_fractional_digits)
    source = source or default_source()
    return round_half_away(_fraction(fractional_digits, source), fractional_digits)


def negative_float(
    fractional_digits: int = 14, *, source: ByteSource | None = None
) -> float:
    """
    Random fraction in (-1, 0); negation of positive_float.

    Raises:
        RangeError: If fractional_digits is outside [1, 14]
    """
    validate_range(fractional_digits, DEFAULT_LIMITS.float_fractional_digits)
    source = source or default_source()
    return round_half_away(-_fraction(fractional_digits, source), fractional_digits)


def random_float(
    fractional_digits: int = 14, *, source: ByteSource | None = None
) -> float:
    """
    Random signed fraction in (-1, 1), sign drawn from one secure bit.

    Raises:
        RangeError: If fractional_digits is outside [1, 14]
    """
    validate_range(fractional_digits, DEFAULT_LIMITS.float_fractional_digits)
    source = source or default_source()

    value = _fraction(fractional_digits, source)
    sign = _SIGNS[source.secure_ranged_int(0, 1)]
    return round_half_away(value * sign, fractional_digits)


# =============================================================================
# RANGE CONSTRAINED
# =============================================================================


def float_between(
    minimum: FloatBound,
    maximum: FloatBound,
    *,
    source: ByteSource | None = None,
) -> float:
    """
    Random fraction drawn from the integer image of [minimum, maximum].

    Bounds are decimal strings such as "0.2" (floats are accepted and read
    through their repr). Each must start with "0.", have a non-zero first
    fractional digit and at most 14 fractional digits.

    Args:
        minimum: Lower bound, e.g. "0.2"
        maximum: Upper bound, e.g. "0.8"
        source: Entropy source (default: system CSPRNG)

    Returns:
        n / 10^digit_count(n) for n uniform in the padded integer range

    Raises:
        RangeError: If a bound is malformed or out of domain
        OrderError: If minimum > maximum

    Examples:
        >>> 0.2 <= float_between("0.2", "0.8") <= 0.8
        True
    """
    fraction_range = parse_fraction_range(minimum, maximum)
    source = source or default_source()

    sampled = source.secure_ranged_int(fraction_range.low, fraction_range.high)
    return sampled / 10 ** digit_count(sampled)
