"""Validator composition.

Turns a field's ``validation`` and ``required`` props into the single
message the Form records for that field.
"""

from collections.abc import Callable
from typing import Any

from formact.validation.validators import REQUIRED, Validator


def normalize_validation(validation: Any) -> list[Validator]:
    """Normalize a ``validation`` prop to a list of validators.

    None or an empty list gives ``[]``, a single callable gives a singleton
    list, and a list or tuple is returned as a list in the same order.
    """
    if not validation:
        return []
    if isinstance(validation, (list, tuple)):
        return list(validation)
    return [validation]


def compose_message(
    value: Any,
    field_name: str,
    validation: Any = None,
    required: bool = False,
    required_check: Callable[[Any, str], str | None] = REQUIRED,
) -> str:
    """Run every validator for a field and join the messages.

    REQUIRED runs first when ``required`` is set, so its message always
    leads. Entries that are not callable are skipped. Empty results are
    dropped; the rest are joined with one space.

    Args:
        value: Current field value.
        field_name: Current field name, passed to each validator.
        validation: The field's validation prop (callable, list or None).
        required: Whether to prepend the REQUIRED check.
        required_check: The REQUIRED implementation to use.

    Returns:
        The combined message, or ``""`` when every validator passed.
    """
    validators = normalize_validation(validation)
    if required:
        validators = [required_check, *validators]

    messages = [fn(value, field_name) for fn in validators if callable(fn)]
    return " ".join(str(message) for message in messages if message)
