"""
Integer Generator — digit-length bounded and ranged integers

All draws go through ByteSource.secure_ranged_int, so no modulo bias is
introduced here.

Digit-length ranges:
    positive_integer(L) ∈ [10^(L-1), 10^L - 1]
    negative_integer(L) ∈ [-(10^L - 1), -10^(L-1)]

At L = 19 the far end is clamped to INT64_MAX / INT64_MIN, because
10^19 - 1 does not fit a signed 64-bit integer. Every 19-digit draw is
therefore confined to [10^18, INT64_MAX] (or its mirror).
"""

from secure_random.core.config import (
    DEFAULT_LIMITS,
    INT64_MAX,
    INT64_MIN,
    MAXIMUM_INTEGER_LENGTH,
)
from secure_random.core.source import ByteSource, default_source
from secure_random.core.validation import validate_order, validate_range


def integer(*, source: ByteSource | None = None) -> int:
    """Uniform signed integer over [INT64_MIN, INT64_MAX]."""
    source = source or default_source()
    return source.secure_ranged_int(INT64_MIN, INT64_MAX)


def positive_integer(length: int = 19, *, source: ByteSource | None = None) -> int:
    """
    Uniform positive integer with exactly `length` decimal digits.

    Args:
        length: Digit count, 1..19 (default: 19)
        source: Entropy source (default: system CSPRNG)

    Returns:
        Integer in [10^(length-1), 10^length - 1], upper end INT64_MAX at 19

    Raises:
        RangeError: If length is outside [1, 19]
    """
    validate_range(length, DEFAULT_LIMITS.integer_length)
    source = source or default_source()

    low = 10 ** (length - 1)
    if length == MAXIMUM_INTEGER_LENGTH:
        return source.secure_ranged_int(low, INT64_MAX)
    return source.secure_ranged_int(low, 10**length - 1)


def negative_integer(length: int = 19, *, source: ByteSource | None = None) -> int:
    """
    Uniform negative integer whose absolute value has exactly `length` digits.

    Mirror of positive_integer; at length 19 the lower end is INT64_MIN.

    Raises:
        RangeError: If length is outside [1, 19]
    """
    validate_range(length, DEFAULT_LIMITS.integer_length)
    source = source or default_source()

    high = -(10 ** (length - 1))
    if length == MAXIMUM_INTEGER_LENGTH:
        return source.secure_ranged_int(INT64_MIN, high)
    return source.secure_ranged_int(-(10**length - 1), high)


def integer_between(
    minimum: int, maximum: int, *, source: ByteSource | None = None
) -> int:
    """
    Uniform integer in [minimum, maximum] inclusive.

    Raises:
        OrderError: If minimum > maximum
    """
    validate_order(minimum, maximum)
    source = source or default_source()
    return source.secure_ranged_int(minimum, maximum)
