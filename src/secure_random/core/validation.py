"""
Parameter Validation — RangeValidator and OrderError checks

Every public operation validates its parameters here before any entropy is
consumed. Nothing is clamped or coerced: invalid input is rejected up front.

Float range bounds (float_between) have their own parser: a bound must be
written as "0." followed by 1..14 digits, the first of which is non-zero.
The fractional digits are right-padded to 14 digits and read as an integer,
which turns the pair into an integer range for the unbiased source.
"""

import logging
import re
from dataclasses import dataclass
from typing import Final, Union

from secure_random.core.config import (
    DEFAULT_LIMITS,
    FLOAT_RANGE_ERROR_MESSAGE,
    MAXIMUM_FLOAT_FRACTIONAL_DIGITS,
    MIN_MAX_ERROR_MESSAGE,
    GeneratorLimits,
    LengthBounds,
)
from secure_random.core.digits import pad_fraction
from secure_random.core.errors import OrderError, RangeError

logger = logging.getLogger(__name__)

FloatBound = Union[str, float]

# "0." then a non-zero digit then any digits
_FRACTION_BOUND_RE: Final[re.Pattern[str]] = re.compile(r"0\.([1-9][0-9]*)")


# =============================================================================
# RANGE / ORDER VALIDATORS
# =============================================================================


def validate_range(value: int, bounds: LengthBounds) -> None:
    """
    Check that value lies inside the inclusive bounds.

    Args:
        value: Requested length / precision parameter
        bounds: Row of the limits table for this parameter

    Raises:
        RangeError: With bounds.message if value is outside [minimum, maximum]
    """
    if not bounds.contains(value):
        logger.debug(
            "Rejected %r outside [%d, %d]", value, bounds.minimum, bounds.maximum
        )
        raise RangeError(bounds.message)


def validate_order(minimum: int, maximum: int) -> None:
    """
    Check that an explicit (minimum, maximum) pair is ordered.

    Raises:
        OrderError: If minimum > maximum
    """
    if minimum > maximum:
        logger.debug("Rejected unordered pair (%r, %r)", minimum, maximum)
        raise OrderError(MIN_MAX_ERROR_MESSAGE)


# =============================================================================
# FLOAT RANGE BOUNDS
# =============================================================================


@dataclass(frozen=True)
class FractionRange:
    """
    Float range bounds normalized to 14-digit integers.

    0.2 and 0.8 become low=20000000000000, high=80000000000000.
    Construction via parse_fraction_range guarantees low <= high.
    """

    low: int
    high: int


def _bound_text(bound: FloatBound) -> str:
    """Textual form of a bound; floats use their shortest round-trip repr."""
    if isinstance(bound, str):
        return bound
    return repr(bound)


def _parse_fraction_bound(bound: FloatBound, limits: GeneratorLimits) -> int:
    """
    Fractional digits of a single bound, padded to 14 digits.

    Raises:
        RangeError: If the bound is not "0.<digits>" with a non-zero first
            fractional digit, or is longer than limits.float_bound_max_chars
    """
    text = _bound_text(bound)
    match = _FRACTION_BOUND_RE.fullmatch(text)
    if match is None or len(text) > limits.float_bound_max_chars:
        logger.debug("Rejected float bound %r", text)
        raise RangeError(FLOAT_RANGE_ERROR_MESSAGE)

    digits = match.group(1)
    return pad_fraction(int(digits), len(digits), MAXIMUM_FLOAT_FRACTIONAL_DIGITS)


def parse_fraction_range(
    minimum: FloatBound,
    maximum: FloatBound,
    limits: GeneratorLimits = DEFAULT_LIMITS,
) -> FractionRange:
    """
    Validate and normalize a (minimum, maximum) pair of float bounds.

    Both bounds are checked for format before their order is compared, so a
    malformed bound always yields RangeError even when the pair is unordered.

    Args:
        minimum: Lower bound, e.g. "0.2" or 0.2
        maximum: Upper bound, e.g. "0.8" or 0.8
        limits: Limits table (default: DEFAULT_LIMITS)

    Returns:
        FractionRange with both bounds as 14-digit integers

    Raises:
        RangeError: If either bound is malformed or out of domain
        OrderError: If minimum > maximum after padding

    Examples:
        >>> parse_fraction_range("0.2", "0.8")
        FractionRange(low=20000000000000, high=80000000000000)
    """
    low = _parse_fraction_bound(minimum, limits)
    high = _parse_fraction_bound(maximum, limits)
    validate_order(low, high)
    return FractionRange(low=low, high=high)
