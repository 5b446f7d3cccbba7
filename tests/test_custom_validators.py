"""
Tests for the built-in custom validators.
"""

import pytest
from datetime import date

from dynaform.domain.form import age_on, matches_field, minimum_age


class TestMatchesField:
    """Test the confirmation validator."""

    def test_equal_values(self):
        """Test that matching values pass."""
        validator = matches_field("password")
        assert validator({"password": "abc12345"}, "abc12345") is None

    def test_different_values(self):
        """Test the mismatch message."""
        validator = matches_field("password")
        assert validator({"password": "abc12345"}, "xyz12345") == "Passwords do not match"

    @pytest.mark.parametrize("values,value", [
        ({"password": "abc12345"}, ""),
        ({"password": ""}, "abc12345"),
        ({}, "abc12345"),
    ])
    def test_blank_side_is_not_compared(self, values, value):
        """Test that a blank side leaves the check to the required rule."""
        assert matches_field("password")(values, value) is None

    def test_custom_message_and_key(self):
        """Test comparing against another field with a custom message."""
        validator = matches_field("email", message="Emails do not match")
        assert validator({"email": "a@b.co"}, "b@b.co") == "Emails do not match"


class TestMinimumAge:
    """Test the age-from-birthdate validator."""

    @pytest.fixture
    def validator(self, clock):
        return minimum_age(18, clock=clock)

    def test_exactly_eighteen(self, validator):
        """Test that an eighteenth birthday today passes."""
        assert validator({}, "2008-10-19") is None

    def test_one_day_short(self, validator):
        """Test that one day short of eighteen fails."""
        assert validator({}, "2008-10-20") == "Must be at least 18 years old"

    def test_earlier_month(self, validator):
        """Test a birthday already passed this year."""
        assert validator({}, "2008-01-31") is None

    @pytest.mark.parametrize("value", [
        "not-a-date", "2008-13-01", "2008-02-30", "20000101", "2000-W01-1", 1990, object()
    ])
    def test_unparseable(self, validator, value):
        """Test that anything other than an ISO date is invalid."""
        assert validator({}, value) == "Invalid date"

    @pytest.mark.parametrize("value", ["", None])
    def test_blank_is_left_to_required(self, validator, value):
        """Test that blank input is not checked."""
        assert validator({}, value) is None

    def test_date_instance(self, validator):
        """Test that already-parsed dates are accepted."""
        assert validator({}, date(1990, 5, 1)) is None
        assert validator({}, date(2010, 5, 1)) == "Must be at least 18 years old"

    def test_custom_threshold(self, clock):
        """Test a different minimum age on both sides of the birthday."""
        validator = minimum_age(21, clock=clock)
        assert validator({}, "2005-10-19") is None
        assert validator({}, "2005-10-20") == "Must be at least 21 years old"

    def test_default_clock_is_today(self):
        """Test that the default clock uses the current date."""
        today = date.today()
        assert minimum_age()({}, today.isoformat()) == "Must be at least 18 years old"


class TestAgeOn:
    """Test whole-year age computation."""

    def test_birthday_boundaries(self):
        """Test the day before, on and after a birthday."""
        born = date(2000, 6, 15)
        assert age_on(born, date(2018, 6, 14)) == 17
        assert age_on(born, date(2018, 6, 15)) == 18
        assert age_on(born, date(2018, 6, 16)) == 18

    def test_leap_day_birthday(self):
        """Test that a 29 February birthday counts from 1 March in common years."""
        born = date(2008, 2, 29)
        assert age_on(born, date(2026, 2, 28)) == 17
        assert age_on(born, date(2026, 3, 1)) == 18

    def test_fixed_clock_date(self, today):
        """Test against the pinned test date."""
        assert age_on(date(1990, 12, 10), today) == 35
