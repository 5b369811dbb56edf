"""formact: observer-based state synchronization for interactive forms."""

__version__ = "0.1.0"

# Public API imports come after __version__; the CLI imports it from here.
from formact.channel import Channel, SubmitEvent
from formact.core import (
    DuplicateFieldError,
    FormactError,
    FormChangePayload,
    FormSubmitPayload,
)
from formact.field import FieldController, FieldProps
from formact.form import Form, FormHandle
from formact.validation import REQUIRED

__all__ = [
    "__version__",
    "Channel",
    "DuplicateFieldError",
    "FieldController",
    "FieldProps",
    "Form",
    "FormactError",
    "FormChangePayload",
    "FormHandle",
    "FormSubmitPayload",
    "REQUIRED",
    "SubmitEvent",
]
