"""
Tests for the float generator

Covers:
1. Fixed precision: interval, fractional digit count, sign
2. Rounding: half away from zero
3. float_between: bounds, error kinds, digit-count dependent scaling
"""

from decimal import Decimal

import pytest

from secure_random.core.errors import OrderError, RangeError
from secure_random.generators.floats import (
    float_between,
    negative_float,
    positive_float,
    random_float,
    round_half_away,
)


def fractional_digits_of(value: float) -> int:
    """Fractional digit count of the shortest repr of value."""
    exponent = Decimal(repr(value)).as_tuple().exponent
    return max(0, -exponent)


# =============================================================================
# ROUNDING
# =============================================================================


class TestRoundHalfAway:
    """Tests for round_half_away"""

    def test_ties_away_from_zero(self) -> None:
        assert round_half_away(Decimal("0.125"), 2) == 0.13
        assert round_half_away(Decimal("-0.125"), 2) == -0.13
        assert round_half_away(Decimal("2.5"), 0) == 3.0
        assert round_half_away(Decimal("-2.5"), 0) == -3.0

    def test_not_bankers_rounding(self) -> None:
        """0.5 rounds up, where round() would give 0"""
        assert round_half_away(Decimal("0.5"), 0) == 1.0
        assert round(0.5) == 0

    def test_exact_values_unchanged(self) -> None:
        assert round_half_away(Decimal("0.12345678901234"), 14) == 0.12345678901234


# =============================================================================
# FIXED PRECISION
# =============================================================================


class TestPositiveFloat:
    """Tests for positive_float"""

    @pytest.mark.parametrize("fractional_digits", range(1, 15))
    def test_interval_and_precision(self, fractional_digits: int) -> None:
        for _ in range(20):
            value = positive_float(fractional_digits)
            assert 0 < value < 1
            assert fractional_digits_of(value) <= fractional_digits

    def test_default_precision(self) -> None:
        value = positive_float()
        assert 0 < value < 1
        assert fractional_digits_of(value) <= 14

    def test_draws_integer_of_requested_length(self, scripted_source) -> None:
        positive_float(4, source=scripted_source)
        assert scripted_source.int_calls == [(1000, 9999)]

    def test_digits_become_fraction(self, scripted_source) -> None:
        scripted_source.ints.append(12345678901234)
        assert positive_float(source=scripted_source) == 0.12345678901234

    def test_smallest_value_is_never_zero(self, scripted_source) -> None:
        """Lowest draw for one digit is 1 -> 0.1"""
        assert positive_float(1, source=scripted_source) == 0.1

    def test_largest_value_below_one(self, scripted_source) -> None:
        scripted_source.ints.append(99999999999999)
        assert positive_float(14, source=scripted_source) == 0.99999999999999

    @pytest.mark.parametrize("fractional_digits", [-1, 0, 15])
    def test_out_of_range(self, scripted_source, fractional_digits: int) -> None:
        with pytest.raises(RangeError, match="between 1 and 14"):
            positive_float(fractional_digits, source=scripted_source)
        assert not scripted_source.consumed


class TestNegativeFloat:
    """Tests for negative_float"""

    @pytest.mark.parametrize("fractional_digits", [1, 4, 14])
    def test_interval(self, fractional_digits: int) -> None:
        for _ in range(20):
            value = negative_float(fractional_digits)
            assert -1 < value < 0
            assert fractional_digits_of(value) <= fractional_digits

    def test_mirror_of_positive(self, scripted_source) -> None:
        scripted_source.ints.append(4321)
        assert negative_float(4, source=scripted_source) == -0.4321

    @pytest.mark.parametrize("fractional_digits", [0, 15])
    def test_out_of_range(self, fractional_digits: int) -> None:
        with pytest.raises(RangeError):
            negative_float(fractional_digits)


class TestRandomFloat:
    """Tests for random_float"""

    def test_interval(self) -> None:
        for _ in range(50):
            value = random_float()
            assert -1 < value < 1
            assert value != 0

    def test_both_signs_occur(self) -> None:
        signs = {random_float(2) > 0 for _ in range(200)}
        assert signs == {True, False}

    def test_sign_from_coin_flip(self, scripted_source) -> None:
        scripted_source.ints.extend([123, 0, 123, 1])
        assert random_float(3, source=scripted_source) == -0.123
        assert random_float(3, source=scripted_source) == 0.123
        assert scripted_source.int_calls[1] == (0, 1)

    @pytest.mark.parametrize("fractional_digits", [0, 15])
    def test_out_of_range(self, fractional_digits: int) -> None:
        with pytest.raises(RangeError):
            random_float(fractional_digits)


# =============================================================================
# RANGE CONSTRAINED
# =============================================================================


class TestFloatBetween:
    """Tests for float_between"""

    def test_within_bounds(self) -> None:
        for _ in range(100):
            value = float_between(0.2, 0.8)
            assert 0.2 <= value < 0.9

    def test_string_bounds(self) -> None:
        for _ in range(100):
            assert 0.13 <= float_between("0.13", "0.14") <= 0.14

    def test_equal_bounds(self) -> None:
        assert float_between("0.5", "0.5") == 0.5

    def test_padded_integer_range_requested(self, scripted_source) -> None:
        float_between("0.2", "0.8", source=scripted_source)
        assert scripted_source.int_calls == [(20000000000000, 80000000000000)]

    def test_scaling_by_sampled_digit_count(self, scripted_source) -> None:
        """A short draw is scaled by its own digit count, not by 14"""
        scripted_source.ints.extend([5, 123, 20000000000000])
        assert float_between("0.1", "0.9", source=scripted_source) == 0.5
        assert float_between("0.1", "0.9", source=scripted_source) == 0.123
        assert float_between("0.1", "0.9", source=scripted_source) == 0.2

    def test_unordered_raises_order_error(self, scripted_source) -> None:
        with pytest.raises(OrderError):
            float_between(0.13, 0.12, source=scripted_source)
        assert not scripted_source.consumed

    @pytest.mark.parametrize(
        "minimum, maximum",
        [(1, 2.1), ("1", "2.1"), (0.2, 0.9999999999999999), ("0.01", "0.5")],
    )
    def test_out_of_domain_raises_range_error(
        self, scripted_source, minimum, maximum
    ) -> None:
        with pytest.raises(RangeError, match="between 0.1 and 0.99999999999999"):
            float_between(minimum, maximum, source=scripted_source)
        assert not scripted_source.consumed
