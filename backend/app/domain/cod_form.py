"""Cash-on-delivery order form: fixed field list and validation rules."""

import re
from collections.abc import Mapping
from typing import Any

from app.domain.entities import FieldRule

COD_FORM_FIELDS: list[str] = [
    "name",
    "phone",
    "email",
    "address",
    "city",
    "state",
    "pincode",
    "quantity",
]

COD_FORM_RULES: dict[str, FieldRule] = {
    "name": FieldRule(
        required=True, min_length=2,
        message="Name must be at least 2 characters long",
    ),
    "phone": FieldRule(
        required=True, pattern=r"^[0-9]{10}$",
        message="Phone number must be 10 digits",
    ),
    "email": FieldRule(
        required=False, pattern=r"^[^\s@]+@[^\s@]+\.[^\s@]+$",
        message="Invalid email format",
    ),
    "address": FieldRule(
        required=True, min_length=10,
        message="Address must be at least 10 characters long",
    ),
    "city": FieldRule(required=True, min_length=2, message="City is required"),
    "state": FieldRule(required=True, min_length=2, message="State is required"),
    "pincode": FieldRule(
        required=True, pattern=r"^[0-9]{6}$",
        message="Pincode must be 6 digits",
    ),
    "quantity": FieldRule(
        required=True, min=1, max=10,
        message="Quantity must be between 1 and 10",
    ),
}


def validate_form(
    form_data: Mapping[str, Any],
    rules: Mapping[str, FieldRule] = COD_FORM_RULES,
) -> dict[str, str]:
    """Check every field against its rule and return ``{field: message}``.

    Every field is checked; a field contributes at most one message.
    An empty result means the form is valid.
    """
    errors: dict[str, str] = {}
    for field_name, rule in rules.items():
        problem = _check_field(field_name, form_data.get(field_name), rule)
        if problem is not None:
            errors[field_name] = rule.message or problem
    return errors


def _check_field(name: str, value: Any, rule: FieldRule) -> str | None:
    """Return a generic description of the first violated constraint, if any."""
    if _is_blank(value):
        return f"{name} is required" if rule.required else None

    if rule.min_length is not None or rule.max_length is not None or rule.pattern:
        text = str(value)
        if rule.min_length is not None and len(text) < rule.min_length:
            return f"{name} must be at least {rule.min_length} characters"
        if rule.max_length is not None and len(text) > rule.max_length:
            return f"{name} must be less than {rule.max_length} characters"
        if rule.pattern and re.fullmatch(rule.pattern, text) is None:
            return f"{name} format is invalid"

    if rule.min is not None or rule.max is not None:
        number = _as_number(value)
        if number is None:
            return f"{name} must be a number"
        if rule.min is not None and number < rule.min:
            return f"{name} must be at least {rule.min:g}"
        if rule.max is not None and number > rule.max:
            return f"{name} must be no more than {rule.max:g}"

    return None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value))
    except ValueError:
        return None
