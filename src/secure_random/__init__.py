"""
secure_random — bounded, cryptographically secure random values.

Bytes, digit-length bounded integers, fixed-precision and range-constrained
fractions, hexadecimal / alphanumeric strings and version 4 UUIDs. All
unbiased randomness comes from the operating system CSPRNG (or an injected
ByteSource).

    >>> import secure_random
    >>> len(secure_random.hexadecimal_string(16))
    16
"""

from secure_random.core import (
    INT64_MAX,
    INT64_MIN,
    ByteSource,
    OrderError,
    RangeError,
    SecureRandomError,
    SystemByteSource,
)
from secure_random.generator import RandomValueGenerator
from secure_random.generators import (
    alphanumeric_string,
    float_between,
    hexadecimal_string,
    integer,
    integer_between,
    negative_float,
    negative_integer,
    positive_float,
    positive_integer,
    random_bytes,
    random_float,
    uuid,
)

__version__ = "1.0.0"

__all__ = [
    # Constants
    "INT64_MAX",
    "INT64_MIN",
    # Errors
    "OrderError",
    "RangeError",
    "SecureRandomError",
    # Source
    "ByteSource",
    "SystemByteSource",
    # Facade
    "RandomValueGenerator",
    # Operations
    "alphanumeric_string",
    "float_between",
    "hexadecimal_string",
    "integer",
    "integer_between",
    "negative_float",
    "negative_integer",
    "positive_float",
    "positive_integer",
    "random_bytes",
    "random_float",
    "uuid",
]
