"""Built-in field validators.

A validator is any callable ``(value, field_name) -> str | None``. An empty
string or None means the value passed; anything else is a user-facing
message. Factories here return such callables.
"""

import re
from collections.abc import Callable, Sized
from typing import Any

Validator = Callable[[Any, str], str | None]

DEFAULT_REQUIRED_MESSAGE = "Field is required"

# Deliberately loose: one "@", no whitespace, a dot in the domain part.
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def is_empty(value: Any) -> bool:
    """Whether a field value counts as empty.

    None, blank strings and empty containers are empty. Numbers and booleans
    never are, so ``0`` and ``False`` are legitimate values.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (bool, int, float)):
        return False
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def make_required(message: str = DEFAULT_REQUIRED_MESSAGE) -> Validator:
    """Build a REQUIRED check with a custom message."""

    def required(value: Any, field_name: str) -> str | None:
        if is_empty(value):
            return message
        return None

    required.__name__ = "required"
    return required


REQUIRED: Validator = make_required()


def min_length(length: int, message: str | None = None) -> Validator:
    """Fail when a non-empty value is shorter than ``length``."""

    def validator(value: Any, field_name: str) -> str | None:
        if is_empty(value) or not isinstance(value, Sized):
            return None
        if len(value) < length:
            return message or f"Must be at least {length} characters"
        return None

    return validator


def max_length(length: int, message: str | None = None) -> Validator:
    """Fail when a value is longer than ``length``."""

    def validator(value: Any, field_name: str) -> str | None:
        if is_empty(value) or not isinstance(value, Sized):
            return None
        if len(value) > length:
            return message or f"Must be at most {length} characters"
        return None

    return validator


def pattern(regex: str, message: str | None = None) -> Validator:
    """Fail when a non-empty string value does not fully match ``regex``."""
    compiled = re.compile(regex)

    def validator(value: Any, field_name: str) -> str | None:
        if is_empty(value):
            return None
        if not compiled.fullmatch(str(value)):
            return message or "Invalid format"
        return None

    return validator


def email(message: str = "Invalid email address") -> Validator:
    """Fail when a non-empty value is not shaped like an email address."""

    def validator(value: Any, field_name: str) -> str | None:
        if is_empty(value):
            return None
        if not isinstance(value, str) or not EMAIL_PATTERN.match(value.strip()):
            return message
        return None

    return validator


def _to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    try:
        return float(str(value).strip())
    except ValueError:
        return None


def numeric(message: str = "Must be a number") -> Validator:
    """Fail when a non-empty value cannot be read as a number."""

    def validator(value: Any, field_name: str) -> str | None:
        if is_empty(value):
            return None
        if _to_number(value) is None:
            return message
        return None

    return validator


def min_value(minimum: float, message: str | None = None) -> Validator:
    """Fail when a numeric value is below ``minimum``.

    Non-numeric values are left to ``numeric()``.
    """

    def validator(value: Any, field_name: str) -> str | None:
        if is_empty(value):
            return None
        number = _to_number(value)
        if number is not None and number < minimum:
            return message or f"Must be at least {minimum}"
        return None

    return validator


def max_value(maximum: float, message: str | None = None) -> Validator:
    """Fail when a numeric value is above ``maximum``."""

    def validator(value: Any, field_name: str) -> str | None:
        if is_empty(value):
            return None
        number = _to_number(value)
        if number is not None and number > maximum:
            return message or f"Must be at most {maximum}"
        return None

    return validator


def one_of(choices: list[Any], message: str | None = None) -> Validator:
    """Fail when a non-empty value is not one of ``choices``."""
    allowed = list(choices)

    def validator(value: Any, field_name: str) -> str | None:
        if is_empty(value):
            return None
        if value not in allowed:
            return message or f"Must be one of: {', '.join(str(c) for c in allowed)}"
        return None

    return validator
