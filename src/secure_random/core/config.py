"""
Bounds Configuration — Immutable Limits Table

Every public operation that takes a length or precision parameter is gated
by one row of this table. The table is built once at import time and never
mutated afterwards.

| Parameter               | Min | Max |
|-------------------------|-----|-----|
| byte / string length    | 1   | 64  |
| integer digit length    | 1   | 19  |
| float fractional digits | 1   | 14  |

INVARIANTS:
1. minimum <= maximum for every row (enforced on construction)
2. The models are frozen: assignment after construction raises
3. Integer limits are explicit signed 64-bit constants, independent of the
   interpreter's native integer width
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator, model_validator

# =============================================================================
# SIGNED 64-BIT LIMITS
# =============================================================================

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1


# =============================================================================
# LENGTH LIMITS
# =============================================================================

# Bytes and strings
MINIMUM_STRING_LENGTH: Final[int] = 1
MAXIMUM_STRING_LENGTH: Final[int] = 64

# Decimal digits of generated integers (19 is the digit count of INT64_MAX)
MINIMUM_INTEGER_LENGTH: Final[int] = 1
MAXIMUM_INTEGER_LENGTH: Final[int] = 19

# Fractional digits of generated floats
MINIMUM_FLOAT_FRACTIONAL_DIGITS: Final[int] = 1
MAXIMUM_FLOAT_FRACTIONAL_DIGITS: Final[int] = 14

# Size of the buffer drawn for string generation, independent of output length
BUFFER_LENGTH: Final[int] = 64

# RFC 4122 UUID size in bytes
UUID_LENGTH: Final[int] = 16

# Longest accepted float bound: "0." + 14 fractional digits
FLOAT_BOUND_MAX_CHARS: Final[int] = 2 + MAXIMUM_FLOAT_FRACTIONAL_DIGITS


# =============================================================================
# ERROR MESSAGES
# =============================================================================

STRING_LENGTH_ERROR_MESSAGE: Final[str] = "The value of length must be between 1 and 64."
INTEGER_LENGTH_ERROR_MESSAGE: Final[str] = "The value of length must be between 1 and 19."
FLOAT_FRACTION_ERROR_MESSAGE: Final[str] = (
    "The value of fractional_digits must be between 1 and 14."
)
FLOAT_RANGE_ERROR_MESSAGE: Final[str] = (
    "The value of min and max must be between 0.1 and 0.99999999999999."
)
MIN_MAX_ERROR_MESSAGE: Final[str] = (
    "The value of min must be less than or equal to the value of max."
)


# =============================================================================
# MODELS
# =============================================================================


class LengthBounds(BaseModel):
    """
    Inclusive [minimum, maximum] domain of one parameter.

    Immutable (frozen=True); the message is the fixed text carried by the
    RangeError raised when a value falls outside the domain.
    """

    minimum: int = Field(..., ge=0, description="Smallest accepted value")
    maximum: int = Field(..., ge=0, description="Largest accepted value")
    message: str = Field(..., min_length=1, description="RangeError message")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_ordering(self) -> "LengthBounds":
        """Reject a row whose maximum is below its minimum."""
        if self.maximum < self.minimum:
            raise ValueError(
                f"maximum {self.maximum} must be >= minimum {self.minimum}"
            )
        return self

    def contains(self, value: int) -> bool:
        """True if value lies inside the inclusive domain."""
        return self.minimum <= value <= self.maximum


class GeneratorLimits(BaseModel):
    """
    Complete limits table used by the generators.

    Immutable (frozen=True). DEFAULT_LIMITS is the single instance owned by
    this module; generators read it and never build their own.
    """

    string_length: LengthBounds = Field(
        default=LengthBounds(
            minimum=MINIMUM_STRING_LENGTH,
            maximum=MAXIMUM_STRING_LENGTH,
            message=STRING_LENGTH_ERROR_MESSAGE,
        ),
        description="Bounds for byte and string lengths",
    )
    integer_length: LengthBounds = Field(
        default=LengthBounds(
            minimum=MINIMUM_INTEGER_LENGTH,
            maximum=MAXIMUM_INTEGER_LENGTH,
            message=INTEGER_LENGTH_ERROR_MESSAGE,
        ),
        description="Bounds for integer digit lengths",
    )
    float_fractional_digits: LengthBounds = Field(
        default=LengthBounds(
            minimum=MINIMUM_FLOAT_FRACTIONAL_DIGITS,
            maximum=MAXIMUM_FLOAT_FRACTIONAL_DIGITS,
            message=FLOAT_FRACTION_ERROR_MESSAGE,
        ),
        description="Bounds for float fractional digits",
    )

    buffer_length: int = Field(
        default=BUFFER_LENGTH, gt=0, description="Bytes drawn per string"
    )
    uuid_length: int = Field(default=UUID_LENGTH, gt=0, description="Bytes per UUID")
    float_bound_max_chars: int = Field(
        default=FLOAT_BOUND_MAX_CHARS,
        gt=2,
        description="Longest accepted float bound string, including '0.'",
    )

    model_config = {"frozen": True}

    @field_validator("buffer_length")
    @classmethod
    def validate_buffer_covers_strings(cls, v: int) -> int:
        """
        The drawn buffer must be able to yield the longest hex string.

        Two hex characters per byte, so BUFFER_LENGTH bytes always cover
        MAXIMUM_STRING_LENGTH characters.
        """
        if v * 2 < MAXIMUM_STRING_LENGTH:
            raise ValueError(
                f"buffer_length {v} too small for {MAXIMUM_STRING_LENGTH} hex characters"
            )
        return v


DEFAULT_LIMITS: Final[GeneratorLimits] = GeneratorLimits()
