"""
Domain service for value coercion.

Raw input from the presentation layer is converted to the logical
type of its field before it enters the value-set. Coercion never
fails: unparseable numeric input becomes the empty string so the
required check treats it as missing rather than as zero.
"""

import math
from typing import Any, Union

from ...core.entities import FieldDescriptor, FieldKind

CHECKED_TOKENS = frozenset(("true", "on", "1", "yes", "checked"))


def coerce_checked(raw: Any) -> bool:
    """
    Read a checkbox state.

    Args:
        raw: Boolean state, or the string a form control submitted

    Returns:
        bool: Whether the box is checked
    """
    if isinstance(raw, str):
        return raw.strip().lower() in CHECKED_TOKENS
    return bool(raw)


def coerce_number(raw: Any) -> Union[int, float, str]:
    """
    Parse numeric input.

    Args:
        raw: Typed number or text entered in a number control

    Returns:
        Union[int, float, str]: Parsed number, or "" when the input is
            blank, malformed or not finite
    """
    if isinstance(raw, bool):
        return ""
    if isinstance(raw, (int, float)):
        number = raw
    elif isinstance(raw, str):
        text = raw.strip()
        try:
            number = int(text)
        except ValueError:
            try:
                number = float(text)
            except ValueError:
                return ""
    else:
        return ""

    if isinstance(number, float) and not math.isfinite(number):
        return ""
    return number


class CoercionDomainService:
    """Service converting raw UI input into typed field values."""

    def coerce(self, descriptor: FieldDescriptor, raw: Any) -> Any:
        """
        Coerce a raw value for a field.

        Args:
            descriptor: Field the value belongs to
            raw: Raw value from the presentation layer

        Returns:
            Any: bool for checkboxes, number or "" for numeric inputs,
                otherwise the raw string unmodified
        """
        if descriptor.kind is FieldKind.CHECKBOX:
            return coerce_checked(raw)
        if descriptor.is_numeric:
            return coerce_number(raw)
        if raw is None:
            return ""
        # No trimming here; validation trims on its own
        return raw if isinstance(raw, str) else str(raw)
