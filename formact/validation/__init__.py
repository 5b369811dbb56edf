"""Field validators, composition, and name-based lookup."""

from formact.validation.compose import compose_message, normalize_validation
from formact.validation.registry import ValidatorRegistry, create_registry
from formact.validation.validators import (
    DEFAULT_REQUIRED_MESSAGE,
    REQUIRED,
    Validator,
    email,
    is_empty,
    make_required,
    max_length,
    max_value,
    min_length,
    min_value,
    numeric,
    one_of,
    pattern,
)

__all__ = [
    "DEFAULT_REQUIRED_MESSAGE",
    "REQUIRED",
    "Validator",
    "ValidatorRegistry",
    "compose_message",
    "create_registry",
    "email",
    "is_empty",
    "make_required",
    "max_length",
    "max_value",
    "min_length",
    "min_value",
    "normalize_validation",
    "numeric",
    "one_of",
    "pattern",
]
