"""Shared fixtures: a scripted ByteSource for deterministic boundary tests."""

from collections import deque

import pytest

from secure_random.core.source import ByteSource


class ScriptedSource(ByteSource):
    """
    ByteSource that replays queued answers and records every request.

    Ranged draws with nothing queued return the lower bound; byte draws with
    nothing queued return `count` zero bytes.
    """

    def __init__(self):
        self.ints: deque[int] = deque()
        self.buffers: deque[bytes] = deque()
        self.int_calls: list[tuple[int, int]] = []
        self.byte_calls: list[int] = []

    def secure_bytes(self, count: int) -> bytes:
        self.byte_calls.append(count)
        if self.buffers:
            return self.buffers.popleft()
        return bytes(count)

    def secure_ranged_int(self, low: int, high: int) -> int:
        self.int_calls.append((low, high))
        if self.ints:
            return self.ints.popleft()
        return low

    @property
    def consumed(self) -> bool:
        return bool(self.int_calls or self.byte_calls)


@pytest.fixture
def scripted_source() -> ScriptedSource:
    """Fresh ScriptedSource per test."""
    return ScriptedSource()
