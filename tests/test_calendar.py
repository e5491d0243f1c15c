"""
Tests for day-of-year and timestamp conversion.
"""

import numpy as np
import pytest

from seisnav.errors import FormatError
from seisnav.utils.calendar import days_in_year, gregorian, is_leap_year, utc_seconds


class TestLeapYear:
    """Tests for the leap-year rules."""

    def test_divisible_by_four(self):
        assert is_leap_year(2024)
        assert not is_leap_year(2023)

    def test_julian_rule_ignores_century(self):
        """The default rule treats 1900 as a leap year."""
        assert is_leap_year(1900)
        assert is_leap_year(2100, "julian")

    def test_gregorian_rule_century_exception(self):
        assert not is_leap_year(1900, "gregorian")
        assert not is_leap_year(2100, "gregorian")
        assert is_leap_year(2000, "gregorian")
        assert is_leap_year(2024, "gregorian")

    def test_days_in_year(self):
        assert days_in_year(2024) == 366
        assert days_in_year(2023) == 365
        assert days_in_year(1900, "gregorian") == 365

    def test_unknown_rule(self):
        with pytest.raises(ValueError):
            is_leap_year(2024, "lunar")


class TestGregorian:
    """Tests for day-of-year to (day, month)."""

    def test_leap_day(self):
        assert gregorian(60, 2024) == (29, 2)

    def test_non_leap_day_60(self):
        assert gregorian(60, 2023) == (1, 3)

    def test_first_and_last_day(self):
        assert gregorian(1, 2023) == (1, 1)
        assert gregorian(365, 2023) == (31, 12)
        assert gregorian(366, 2024) == (31, 12)

    def test_month_boundaries(self):
        assert gregorian(31, 2023) == (31, 1)
        assert gregorian(32, 2023) == (1, 2)
        assert gregorian(335, 2023) == (1, 12)
        assert gregorian(336, 2024) == (1, 12)

    def test_century_year_rules(self):
        assert gregorian(60, 1900) == (29, 2)
        assert gregorian(60, 1900, "gregorian") == (1, 3)

    def test_vectorized(self):
        """Arrays of days convert element-wise."""
        day, month = gregorian(np.array([1, 59, 60, 61, 365]), 2023)

        np.testing.assert_array_equal(day, [1, 28, 1, 2, 31])
        np.testing.assert_array_equal(month, [1, 2, 3, 3, 12])

    def test_day_zero_rejected(self):
        with pytest.raises(FormatError):
            gregorian(0, 2021)

    def test_day_past_year_end_rejected(self):
        with pytest.raises(FormatError):
            gregorian(366, 2023)
        with pytest.raises(FormatError):
            gregorian(367, 2024)
        with pytest.raises(FormatError):
            gregorian(366, 1900, "gregorian")

    def test_out_of_range_in_batch(self):
        with pytest.raises(FormatError, match="day 400"):
            gregorian(np.array([1, 400, 2]), 2021)

    def test_scalar_returns_ints(self):
        day, month = gregorian(100, 2021)
        assert isinstance(day, int)
        assert isinstance(month, int)
        assert (day, month) == (10, 4)


class TestUtcSeconds:
    """Tests for absolute timestamp construction."""

    def test_epoch(self):
        assert utc_seconds(1970, [1], [1], [0], [0], [0])[0] == 0.0

    def test_known_timestamp(self):
        # 2021-01-01T12:23:00Z
        result = utc_seconds(2021, [1], [1], [12], [23], [0])
        assert result[0] == 1609503780.0

    def test_vectorized(self):
        result = utc_seconds(2024, [2, 3], [29, 1], [0, 0], [0, 0], [0, 30])
        assert result[1] - result[0] == 86400 + 30

    def test_invalid_month_or_day(self):
        with pytest.raises(FormatError):
            utc_seconds(2021, [0], [1], [0], [0], [0])
        with pytest.raises(FormatError):
            utc_seconds(2021, [13], [1], [0], [0], [0])
        with pytest.raises(FormatError):
            utc_seconds(2021, [1], [0], [0], [0], [0])

    def test_day_overflow_rolls_into_next_month(self):
        """29 February of a non-leap year lands on 1 March."""
        rolled = utc_seconds(1900, [2], [29], [6], [0], [0])
        march = utc_seconds(1900, [3], [1], [6], [0], [0])
        assert rolled[0] == march[0]
