"""
Core primitives of secure_random.

Bounds configuration, error kinds, validators, digit arithmetic and the
entropy source adapter. Nothing here draws values on its own; the
generators in secure_random.generators are built on top of these pieces.
"""

from secure_random.core.config import (
    BUFFER_LENGTH,
    DEFAULT_LIMITS,
    FLOAT_BOUND_MAX_CHARS,
    INT64_MAX,
    INT64_MIN,
    MAXIMUM_FLOAT_FRACTIONAL_DIGITS,
    MAXIMUM_INTEGER_LENGTH,
    MAXIMUM_STRING_LENGTH,
    MINIMUM_FLOAT_FRACTIONAL_DIGITS,
    MINIMUM_INTEGER_LENGTH,
    MINIMUM_STRING_LENGTH,
    UUID_LENGTH,
    GeneratorLimits,
    LengthBounds,
)
from secure_random.core.digits import digit_count, pad_fraction
from secure_random.core.errors import OrderError, RangeError, SecureRandomError
from secure_random.core.source import ByteSource, SystemByteSource, default_source
from secure_random.core.validation import (
    FractionRange,
    parse_fraction_range,
    validate_order,
    validate_range,
)

__all__ = [
    # Config — Constants
    "BUFFER_LENGTH",
    "FLOAT_BOUND_MAX_CHARS",
    "INT64_MAX",
    "INT64_MIN",
    "MAXIMUM_FLOAT_FRACTIONAL_DIGITS",
    "MAXIMUM_INTEGER_LENGTH",
    "MAXIMUM_STRING_LENGTH",
    "MINIMUM_FLOAT_FRACTIONAL_DIGITS",
    "MINIMUM_INTEGER_LENGTH",
    "MINIMUM_STRING_LENGTH",
    "UUID_LENGTH",
    # Config — Models
    "DEFAULT_LIMITS",
    "GeneratorLimits",
    "LengthBounds",
    # Digits
    "digit_count",
    "pad_fraction",
    # Errors
    "OrderError",
    "RangeError",
    "SecureRandomError",
    # Source
    "ByteSource",
    "SystemByteSource",
    "default_source",
    # Validation
    "FractionRange",
    "parse_fraction_range",
    "validate_order",
    "validate_range",
]
