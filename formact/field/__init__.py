"""Field controllers and their props."""

from formact.field.controller import FieldAccessor, FieldController
from formact.field.models import FieldProps, FieldStatus

__all__ = [
    "FieldAccessor",
    "FieldController",
    "FieldProps",
    "FieldStatus",
]
