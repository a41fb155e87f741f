"""
RandomValueGenerator — facade over the generators bound to one source.

Stateless apart from the injected source: each call validates its own
parameters and draws fresh entropy. Instances can be shared between threads
as long as the source can (SystemByteSource can).
"""

from secure_random.core.source import ByteSource, default_source
from secure_random.core.validation import FloatBound
from secure_random.generators import floats, integers, strings, uuids


class RandomValueGenerator:
    """Random values with shape constraints, drawn from a single ByteSource."""

    def __init__(self, source: ByteSource | None = None):
        self._source = source or default_source()

    @property
    def source(self) -> ByteSource:
        return self._source

    # Bytes and strings

    def random_bytes(self, length: int = 64) -> bytes:
        return strings.random_bytes(length, source=self._source)

    def hexadecimal_string(self, length: int = 64) -> str:
        return strings.hexadecimal_string(length, source=self._source)

    def alphanumeric_string(self, length: int = 64) -> str:
        return strings.alphanumeric_string(length, source=self._source)

    # Integers

    def integer(self) -> int:
        return integers.integer(source=self._source)

    def positive_integer(self, length: int = 19) -> int:
        return integers.positive_integer(length, source=self._source)

    def negative_integer(self, length: int = 19) -> int:
        return integers.negative_integer(length, source=self._source)

    def integer_between(self, minimum: int, maximum: int) -> int:
        return integers.integer_between(minimum, maximum, source=self._source)

    # Floats

    def random_float(self, fractional_digits: int = 14) -> float:
        return floats.random_float(fractional_digits, source=self._source)

    def positive_float(self, fractional_digits: int = 14) -> float:
        return floats.positive_float(fractional_digits, source=self._source)

    def negative_float(self, fractional_digits: int = 14) -> float:
        return floats.negative_float(fractional_digits, source=self._source)

    def float_between(self, minimum: FloatBound, maximum: FloatBound) -> float:
        return floats.float_between(minimum, maximum, source=self._source)

    # UUID

    def uuid(self) -> str:
        return uuids.uuid(source=self._source)
