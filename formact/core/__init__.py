"""Core shared models and errors for formact.

Contains the registry state aggregate, the payloads emitted to
listeners, and the exception hierarchy used across the package.
"""

from formact.core.errors import (
    DuplicateFieldError,
    FormactError,
    FormDefinitionError,
    ScenarioError,
    UnknownValidatorError,
)
from formact.core.models import (
    ErrorMap,
    FieldName,
    FieldValue,
    FormChangePayload,
    FormState,
    FormSubmitPayload,
    ValidatorRef,
)

__all__ = [
    # Models
    "ErrorMap",
    "FieldName",
    "FieldValue",
    "FormChangePayload",
    "FormState",
    "FormSubmitPayload",
    "ValidatorRef",
    # Errors
    "DuplicateFieldError",
    "FormactError",
    "FormDefinitionError",
    "ScenarioError",
    "UnknownValidatorError",
]
