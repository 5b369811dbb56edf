"""Event and result models for scenario replay."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field, TypeAdapter

from formact.core.models import FormChangePayload, FormSubmitPayload


class ChangeAction(BaseModel):
    """A user edit of a field."""

    action: Literal["change"]
    field: str
    value: Any = None


class SetValueAction(BaseModel):
    """An external write to a field's controlled ``value`` prop."""

    action: Literal["set_value"]
    field: str
    value: Any = None


class RenameAction(BaseModel):
    """A change of a mounted field's name prop."""

    action: Literal["rename"]
    field: str
    to: str = Field(min_length=1)


class MountAction(BaseModel):
    action: Literal["mount"]
    field: str


class UnmountAction(BaseModel):
    action: Literal["unmount"]
    field: str


class SubmitAction(BaseModel):
    action: Literal["submit"]


ReplayEvent = Annotated[
    ChangeAction | SetValueAction | RenameAction | MountAction | UnmountAction | SubmitAction,
    Field(discriminator="action"),
]

replay_event_adapter = TypeAdapter(ReplayEvent)


class SubmissionRecord(BaseModel):
    """Outcome of one submit action."""

    default_prevented: bool
    payload: FormSubmitPayload


class ReplayResult(BaseModel):
    """Everything a replay produced, in emission order."""

    form_id: str
    events_applied: int = 0
    snapshots: list[FormChangePayload] = Field(default_factory=list)
    submissions: list[SubmissionRecord] = Field(default_factory=list)
    final: FormChangePayload | None = None
    submitted: bool = False

    @property
    def valid(self) -> bool:
        """Validity of the final snapshot (False if nothing was emitted)."""
        return self.final.valid if self.final is not None else False
