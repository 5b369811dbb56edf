"""Commands applied to a Form's state.

Every registry mutation is expressed as one of these commands. They
serialize to plain dicts, except for the validator callable carried by
AddField, which is excluded from dumps.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class AddField(BaseModel):
    """Register a field with its initial value and validator."""

    kind: Literal["add_field"] = "add_field"
    name: str
    value: Any = None
    validate_fn: Any = Field(default=None, exclude=True)

    model_config = ConfigDict(frozen=True)


class RemoveField(BaseModel):
    """Deregister a field."""

    kind: Literal["remove_field"] = "remove_field"
    name: str

    model_config = ConfigDict(frozen=True)


class RenameField(BaseModel):
    """Move a field's registration to a new name in one transition."""

    kind: Literal["rename_field"] = "rename_field"
    old_name: str
    new_name: str
    value: Any = None
    validate_fn: Any = Field(default=None, exclude=True)

    model_config = ConfigDict(frozen=True)


class ValueChanged(BaseModel):
    """Record a new value for a tracked field."""

    kind: Literal["value_changed"] = "value_changed"
    name: str
    value: Any = None

    model_config = ConfigDict(frozen=True)


class Submit(BaseModel):
    """Mark a submission attempt."""

    kind: Literal["submit"] = "submit"

    model_config = ConfigDict(frozen=True)


FormCommand = Annotated[
    AddField | RemoveField | RenameField | ValueChanged | Submit,
    Field(discriminator="kind"),
]
