"""Form registry, its commands, and the reducer behind them."""

from formact.form.commands import (
    AddField,
    FormCommand,
    RemoveField,
    RenameField,
    Submit,
    ValueChanged,
)
from formact.form.reducer import reduce, validate_all
from formact.form.registry import Form, FormHandle

__all__ = [
    "AddField",
    "Form",
    "FormCommand",
    "FormHandle",
    "RemoveField",
    "RenameField",
    "Submit",
    "ValueChanged",
    "reduce",
    "validate_all",
]
