"""
Built-in custom validators.

Each factory returns a closure with the custom validator signature
``(values, value) -> message or None``. Validators return None for
blank input so an optional field stays valid until it is filled in.
"""

from datetime import date, datetime
from typing import Any, Callable, Dict, Mapping, Optional

from ...core.entities import CustomValidator

Clock = Callable[[], date]

ISO_DATE_FORMAT = "%Y-%m-%d"


def matches_field(
    other_key: str = "password",
    message: str = "Passwords do not match"
) -> CustomValidator:
    """
    Build a validator requiring the value to equal another field's value.

    Args:
        other_key: Key of the field to compare with
        message: Message reported on mismatch

    Returns:
        CustomValidator: Confirmation validator
    """
    def validate(values: Mapping[str, Any], value: Any) -> Optional[str]:
        other = values.get(other_key)
        if value and other and value != other:
            return message
        return None

    return validate


def age_on(birth_date: date, today: date) -> int:
    """Whole years between a birth date and today."""
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def minimum_age(years: int = 18, clock: Clock = date.today) -> CustomValidator:
    """
    Build a validator requiring an ISO birth date at least `years` ago.

    Args:
        years: Minimum age in whole years
        clock: Callable returning the current local date

    Returns:
        CustomValidator: Age validator
    """
    def validate(values: Mapping[str, Any], value: Any) -> Optional[str]:
        if not value:
            return None
        if isinstance(value, date):
            birth_date = value
        else:
            try:
                text = value.strip() if isinstance(value, str) else value
                birth_date = datetime.strptime(text, ISO_DATE_FORMAT).date()
            except (TypeError, ValueError):
                return "Invalid date"
        if age_on(birth_date, clock()) < years:
            return f"Must be at least {years} years old"
        return None

    return validate


VALIDATOR_FACTORIES: Dict[str, Callable[..., CustomValidator]] = {
    "matches_field": matches_field,
    "minimum_age": minimum_age,
}
