"""
String Generator — bytes, hexadecimal and alphanumeric strings

Strings are derived from a fixed 64-byte buffer regardless of the requested
length: the buffer is encoded once, filtered, then truncated. Generating
exactly `length` characters directly would change the character
distribution of alphanumeric output.
"""

import base64
import re
from typing import Final

from secure_random.core.config import DEFAULT_LIMITS
from secure_random.core.source import ByteSource, default_source
from secure_random.core.validation import validate_range

# Base64 symbols that are not alphanumeric
_NON_ALPHANUMERIC_RE: Final[re.Pattern[str]] = re.compile(r"[+/=]")


def random_bytes(length: int = 64, *, source: ByteSource | None = None) -> bytes:
    """
    `length` random bytes.

    Raises:
        RangeError: If length is outside [1, 64]
    """
    validate_range(length, DEFAULT_LIMITS.string_length)
    source = source or default_source()
    return source.secure_bytes(length)


def hexadecimal_string(length: int = 64, *, source: ByteSource | None = None) -> str:
    """
    Lowercase hexadecimal string of exactly `length` characters.

    Raises:
        RangeError: If length is outside [1, 64]
    """
    validate_range(length, DEFAULT_LIMITS.string_length)
    source = source or default_source()

    buffer = source.secure_bytes(DEFAULT_LIMITS.buffer_length)
    return buffer.hex()[:length]


def alphanumeric_string(length: int = 64, *, source: ByteSource | None = None) -> str:
    """
    Mixed-case alphanumeric string of at most `length` characters.

    The buffer is base64-encoded and stripped of '+', '/' and '=' before
    truncation. A 64-byte buffer encodes to 86 symbols plus padding, so the
    result is `length` characters long unless more than 22 symbols were
    stripped.

    Raises:
        RangeError: If length is outside [1, 64]
    """
    validate_range(length, DEFAULT_LIMITS.string_length)
    source = source or default_source()

    encoded = base64.b64encode(source.secure_bytes(DEFAULT_LIMITS.buffer_length))
    return _NON_ALPHANUMERIC_RE.sub("", encoded.decode("ascii"))[:length]
