"""
Default registration form.

Twenty fields covering every field kind, both built-in custom
validators and all rule types.
"""

from datetime import date

from ...core.entities import FieldDescriptor, FieldKind, FieldRules, FormSchema, InputType
from .custom_validators import Clock, matches_field, minimum_age

EMAIL_PATTERN = r"^[^\s@]+@[^\s@]+\.[^\s@]+$"
PHONE_PATTERN = r"^\d{10}$"
ZIP_PATTERN = r"^\d{5}$"
USERNAME_PATTERN = r"^[a-zA-Z0-9_]+$"

STATES = ("California", "New York", "Texas", "Florida", "Illinois")
GENDERS = ("Male", "Female", "Other")


def build_default_schema(clock: Clock = date.today) -> FormSchema:
    """
    Build the registration schema.

    Args:
        clock: Current-date source for the date-of-birth check

    Returns:
        FormSchema: Fresh schema instance
    """
    return FormSchema([
        FieldDescriptor("firstName", "First Name", rules=FieldRules(required=True, min_length=2)),
        FieldDescriptor("lastName", "Last Name", rules=FieldRules(required=True, min_length=2)),
        FieldDescriptor(
            "email", "Email",
            input_type=InputType.EMAIL,
            rules=FieldRules(required=True, pattern=EMAIL_PATTERN)
        ),
        FieldDescriptor(
            "phone", "Phone Number",
            input_type=InputType.PHONE,
            rules=FieldRules(required=True, pattern=PHONE_PATTERN)
        ),
        FieldDescriptor(
            "age", "Age",
            input_type=InputType.NUMBER,
            rules=FieldRules(required=True, min=18, max=100)
        ),
        FieldDescriptor("address", "Address", rules=FieldRules(required=True, min_length=10)),
        FieldDescriptor("city", "City", rules=FieldRules(required=True, min_length=2)),
        FieldDescriptor(
            "state", "State",
            kind=FieldKind.SELECT,
            rules=FieldRules(required=True),
            options=STATES
        ),
        FieldDescriptor("zip", "ZIP Code", rules=FieldRules(required=True, pattern=ZIP_PATTERN)),
        FieldDescriptor("country", "Country", rules=FieldRules(required=True, min_length=2)),
        FieldDescriptor(
            "username", "Username",
            rules=FieldRules(required=True, min_length=3, max_length=20, pattern=USERNAME_PATTERN)
        ),
        FieldDescriptor(
            "password", "Password",
            input_type=InputType.PASSWORD,
            rules=FieldRules(required=True, min_length=8)
        ),
        FieldDescriptor(
            "confirmPassword", "Confirm Password",
            input_type=InputType.PASSWORD,
            rules=FieldRules(required=True, min_length=8),
            custom_validator=matches_field("password")
        ),
        FieldDescriptor(
            "dob", "Date of Birth",
            input_type=InputType.DATE,
            rules=FieldRules(required=True),
            custom_validator=minimum_age(18, clock=clock)
        ),
        FieldDescriptor(
            "gender", "Gender",
            kind=FieldKind.SELECT,
            rules=FieldRules(required=True),
            options=GENDERS
        ),
        FieldDescriptor("subscribe", "Subscribe to Newsletter", kind=FieldKind.CHECKBOX),
        FieldDescriptor(
            "comments", "Comments",
            kind=FieldKind.TEXTAREA,
            rules=FieldRules(max_length=500)
        ),
        FieldDescriptor(
            "emergencyContact", "Emergency Contact Phone",
            input_type=InputType.PHONE,
            rules=FieldRules(required=True, pattern=PHONE_PATTERN)
        ),
        FieldDescriptor(
            "relation", "Relation to Emergency Contact",
            rules=FieldRules(required=True, min_length=2)
        ),
        FieldDescriptor(
            "salary", "Expected Salary",
            input_type=InputType.NUMBER,
            rules=FieldRules(min=0, max=1000000)
        ),
    ])
