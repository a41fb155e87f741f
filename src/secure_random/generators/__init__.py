"""
Value generators grouped by output shape.

Each function accepts an optional keyword-only `source`; without it the
shared system CSPRNG is used.
"""

from secure_random.generators.floats import (
    float_between,
    negative_float,
    positive_float,
    random_float,
    round_half_away,
)
from secure_random.generators.integers import (
    integer,
    integer_between,
    negative_integer,
    positive_integer,
)
from secure_random.generators.strings import (
    alphanumeric_string,
    hexadecimal_string,
    random_bytes,
)
from secure_random.generators.uuids import uuid

__all__ = [
    # Integers
    "integer",
    "integer_between",
    "negative_integer",
    "positive_integer",
    # Floats
    "float_between",
    "negative_float",
    "positive_float",
    "random_float",
    "round_half_away",
    # Strings
    "alphanumeric_string",
    "hexadecimal_string",
    "random_bytes",
    # UUID
    "uuid",
]
