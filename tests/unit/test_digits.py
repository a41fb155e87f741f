"""Tests for decimal digit arithmetic."""

import pytest

from secure_random.core.config import INT64_MAX, INT64_MIN
from secure_random.core.digits import digit_count, pad_fraction


class TestDigitCount:
    """Tests for digit_count"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0, 1),
            (9, 1),
            (10, 2),
            (99, 2),
            (100, 3),
            (10**13, 14),
            (10**14 - 1, 14),
            (INT64_MAX, 19),
        ],
    )
    def test_positive(self, value: int, expected: int) -> None:
        assert digit_count(value) == expected

    def test_sign_ignored(self) -> None:
        """Sign is not a digit"""
        assert digit_count(-1) == 1
        assert digit_count(-12345) == 5
        assert digit_count(INT64_MIN) == 19

    def test_matches_decimal_representation(self) -> None:
        for exponent in range(0, 30):
            for value in (10**exponent, 10 ** (exponent + 1) - 1):
                assert digit_count(value) == len(str(value))


class TestPadFraction:
    """Tests for pad_fraction"""

    def test_pads_to_target(self) -> None:
        assert pad_fraction(2, 1, 14) == 20000000000000
        assert pad_fraction(13, 2, 14) == 13000000000000

    def test_full_width_unchanged(self) -> None:
        assert pad_fraction(99999999999999, 14, 14) == 99999999999999

    def test_width_over_target_rejected(self) -> None:
        with pytest.raises(ValueError, match="exceeds target"):
            pad_fraction(123, 15, 14)
