"""Core state and payload models.

FormState is the aggregate owned by a Form. The payload models are what
listeners receive; they always carry copies of the Form's maps.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

FieldName = str
FieldValue = Any
ErrorMap = dict[str, str]


class ValidatorRef(BaseModel):
    """Reference to a field's zero-argument validate callable.

    The callable is never copied or evaluated at registration time; the
    Form invokes it on every validation pass.
    """

    validate_fn: Any = None

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    def run(self) -> str:
        """Invoke the validator, degrading to no error if it is not callable."""
        if self.validate_fn is None or not callable(self.validate_fn):
            return ""
        message = self.validate_fn()
        return str(message) if message else ""


class FormState(BaseModel):
    """Aggregate registry state for one Form."""

    fields: dict[str, Any] = Field(default_factory=dict)
    validators: dict[str, ValidatorRef] = Field(default_factory=dict)
    errors: ErrorMap = Field(default_factory=dict)
    submitted: bool = False

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @property
    def valid(self) -> bool:
        """True iff no tracked field carries a non-empty error message."""
        return not any(message for message in self.errors.values())

    @property
    def field_names(self) -> list[str]:
        """Tracked field names in registration order."""
        return list(self.fields.keys())


class FormChangePayload(BaseModel):
    """Snapshot emitted after every registry mutation."""

    fields: dict[str, Any]
    errors: ErrorMap
    last_change: FieldName | None = None
    valid: bool


class FormSubmitPayload(BaseModel):
    """Payload passed to submit listeners."""

    valid: bool
    fields: dict[str, Any]
    errors: ErrorMap
