"""
UUID Generator — RFC 4122 version 4

Byte layout of the 16 random bytes:

| Field                  | Bytes  |
|------------------------|--------|
| time_low               | 0..3   |
| time_mid               | 4..5   |
| time_hi_and_version    | 6..7   |
| clock_seq_and_reserved | 8      |
| clock_seq_low          | 9      |
| node                   | 10..15 |

Version and variant are forced by bit operations on the numeric fields:
- time_hi_and_version bits 15..12 := 0100 (version 4)
- clock_seq_and_reserved bits 7..6 := 10 (RFC 4122 variant)
"""

from secure_random.core.config import DEFAULT_LIMITS
from secure_random.core.source import ByteSource, default_source


def _field(buffer: bytes, start: int, size: int) -> int:
    return int.from_bytes(buffer[start : start + size], "big")


def uuid(*, source: ByteSource | None = None) -> str:
    """
    Random version 4 UUID as a lowercase hyphenated string.

    Returns:
        String matching xxxxxxxx-xxxx-4xxx-[89ab]xxx-xxxxxxxxxxxx
    """
    source = source or default_source()
    buffer = source.secure_bytes(DEFAULT_LIMITS.uuid_length)

    time_low = _field(buffer, 0, 4)
    time_mid = _field(buffer, 4, 2)
    time_hi_and_version = _field(buffer, 6, 2)
    clock_seq_and_reserved = _field(buffer, 8, 1)
    clock_seq_low = _field(buffer, 9, 1)
    node = _field(buffer, 10, 6)

    # variant: bit 7 set, bit 6 cleared
    clock_seq_and_reserved |= 1 << 7
    clock_seq_and_reserved &= ~(1 << 6)

    # version: bits 15..12 = 0100
    time_hi_and_version &= ~(1 << 15)
    time_hi_and_version |= 1 << 14
    time_hi_and_version &= ~(1 << 13)
    time_hi_and_version &= ~(1 << 12)

    return (
        f"{time_low:08x}-{time_mid:04x}-{time_hi_and_version:04x}-"
        f"{clock_seq_and_reserved:02x}{clock_seq_low:02x}-{node:012x}"
    )
