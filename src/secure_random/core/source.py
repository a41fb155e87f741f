"""
Entropy Source Adapter

Thin pass-through to a cryptographically secure byte/integer source. The
generators depend only on the ByteSource interface:

- secure_bytes(count): `count` uniformly random bytes
- secure_ranged_int(low, high): uniform integer in [low, high] inclusive,
  without modulo bias

SystemByteSource is the production implementation, backed by the `secrets`
module (os.urandom). It holds no state and is safe for concurrent use.
"""

import logging
import secrets
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class ByteSource(ABC):
    """Abstract CSPRNG interface consumed by the generators."""

    @abstractmethod
    def secure_bytes(self, count: int) -> bytes:
        """Return `count` uniformly random bytes."""
        pass

    @abstractmethod
    def secure_ranged_int(self, low: int, high: int) -> int:
        """Return a uniformly random int in [low, high] inclusive."""
        pass


class SystemByteSource(ByteSource):
    """
    Production source backed by the operating system CSPRNG.

    secrets.randbelow rejects out-of-range draws internally, so ranged
    integers carry no modulo bias.
    """

    def secure_bytes(self, count: int) -> bytes:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return secrets.token_bytes(count)

    def secure_ranged_int(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"low {low} must be <= high {high}")
        return low + secrets.randbelow(high - low + 1)


_DEFAULT_SOURCE = SystemByteSource()
logger.debug("Default entropy source: %s", type(_DEFAULT_SOURCE).__name__)


def default_source() -> ByteSource:
    """Shared SystemByteSource instance used when no source is injected."""
    return _DEFAULT_SOURCE
