"""Form registry: the root aggregate that fields register with.

The Form owns the value, validator and error maps plus the submitted
flag. Fields never touch those maps; they talk to the Form through a
FormHandle carrying its protocol functions.
"""

import logging
from collections import deque
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from formact.channel import Channel, SubmitEvent
from formact.core.models import (
    ErrorMap,
    FormChangePayload,
    FormState,
    FormSubmitPayload,
)
from formact.form.commands import (
    AddField,
    FormCommand,
    RemoveField,
    RenameField,
    Submit,
    ValueChanged,
)
from formact.form.reducer import reduce, validate_all

logger = logging.getLogger(__name__)

ChangeListener = Callable[[FormChangePayload], None]
SubmitListener = Callable[[SubmitEvent, FormSubmitPayload], None]


@dataclass(frozen=True)
class FormHandle:
    """The protocol functions a Form exposes to its fields."""

    add_field: Callable[[str, Any, Callable[[], str] | None], None]
    remove_field: Callable[[str], None]
    rename_field: Callable[[str, str, Any, Callable[[], str] | None], None]
    value_changed: Callable[[str, Any], None]
    get_initial_value: Callable[[str], Any]
    submitted: Callable[[], bool]


class Form:
    """Root registry coordinating a set of mounted fields.

    Every mutation runs to completion synchronously: the command is
    reduced into a new state (revalidating every field), then a
    FormChangePayload is emitted to change listeners.
    """

    def __init__(
        self,
        model: Mapping[str, Any] | None = None,
        on_change: ChangeListener | None = None,
        on_submit: SubmitListener | None = None,
        history_limit: int | None = 0,
    ) -> None:
        """Initialize an empty form.

        Args:
            model: Optional initial values by field name.
            on_change: Optional listener for change snapshots.
            on_submit: Optional listener for submissions.
            history_limit: How many dispatched commands to keep for
                ``command_log()``. 0 keeps none, None keeps all.
        """
        self.model = dict(model) if model is not None else None
        self.changes = Channel("form.changes")
        self.submissions = Channel("form.submissions")
        self.history: deque[FormCommand] = deque(maxlen=history_limit)
        self._state = FormState()

        if on_change is not None:
            self.changes.subscribe(on_change)
        if on_submit is not None:
            self.submissions.subscribe(on_submit)

    @property
    def state(self) -> FormState:
        """The current registry state."""
        return self._state

    @property
    def fields(self) -> dict[str, Any]:
        """Copy of the current value map."""
        return dict(self._state.fields)

    @property
    def errors(self) -> ErrorMap:
        """Copy of the current error map."""
        return dict(self._state.errors)

    @property
    def handle(self) -> FormHandle:
        """Protocol handle to pass to field controllers."""
        return FormHandle(
            add_field=self.add_field,
            remove_field=self.remove_field,
            rename_field=self.rename_field,
            value_changed=self.value_changed,
            get_initial_value=self.get_initial_value,
            submitted=self.check_submitted,
        )

    def dispatch(self, command: FormCommand) -> FormState:
        """Reduce a command into the current state and record it."""
        self._state = reduce(self._state, command)
        self.history.append(command)
        return self._state

    def snapshot(self, last_change: str | None = None) -> FormChangePayload:
        """Build a change payload from the current state."""
        return FormChangePayload(
            fields=dict(self._state.fields),
            errors=dict(self._state.errors),
            last_change=last_change,
            valid=self._state.valid,
        )

    def _trigger_on_change(self, name: str | None) -> None:
        self.changes.emit(self.snapshot(name))

    def add_field(
        self,
        name: str,
        value: Any = None,
        validate: Callable[[], str] | None = None,
    ) -> None:
        """Register a field.

        Raises:
            DuplicateFieldError: If ``name`` is already tracked.
        """
        logger.debug("add_field %r", name)
        self.dispatch(AddField(name=name, value=value, validate_fn=validate))
        self._trigger_on_change(name)

    def remove_field(self, name: str) -> None:
        """Deregister a field. Unknown names still produce a snapshot."""
        logger.debug("remove_field %r", name)
        self.dispatch(RemoveField(name=name))
        self._trigger_on_change(name)

    def rename_field(
        self,
        old_name: str,
        new_name: str,
        value: Any = None,
        validate: Callable[[], str] | None = None,
    ) -> None:
        """Re-register a field under a new name.

        Removal of ``old_name`` and registration of ``new_name`` happen in a
        single state transition, so listeners see exactly one snapshot and
        never a state holding both names or neither.

        Raises:
            DuplicateFieldError: If ``new_name`` is tracked by another field.
        """
        logger.debug("rename_field %r -> %r", old_name, new_name)
        self.dispatch(
            RenameField(
                old_name=old_name,
                new_name=new_name,
                value=value,
                validate_fn=validate,
            )
        )
        self._trigger_on_change(new_name)

    def value_changed(self, name: str, value: Any) -> None:
        """Record a new value for a field. No-op for an empty name."""
        if not name:
            logger.debug("value_changed ignored: empty field name")
            return
        self.dispatch(ValueChanged(name=name, value=value))
        self._trigger_on_change(name)

    def validate(self) -> ErrorMap:
        """Recompute every field's error message without emitting."""
        errors = validate_all(self._state.fields, self._state.validators)
        self._state = self._state.model_copy(update={"errors": errors})
        return dict(errors)

    def validate_field(self, name: str) -> str:
        """Run one field's validator and return its message."""
        ref = self._state.validators.get(name)
        return ref.run() if ref is not None else ""

    def is_valid(self) -> bool:
        """True iff no tracked field has a non-empty error message."""
        return self._state.valid

    def get_initial_value(self, name: str) -> Any:
        """Return ``model[name]`` when a model was supplied, else None."""
        if self.model:
            return self.model.get(name)
        return None

    def check_submitted(self) -> bool:
        """Whether a submission has been attempted."""
        return self._state.submitted

    def on_submit(self, event: SubmitEvent | None = None) -> FormSubmitPayload:
        """Handle a submission attempt.

        Revalidates, latches the submitted flag, and suppresses the event's
        default action when the form is invalid. Submit listeners are
        always called, whatever the outcome.

        Args:
            event: The host submission event. A fresh one is used if omitted.

        Returns:
            The payload passed to submit listeners.
        """
        if event is None:
            event = SubmitEvent()

        self.dispatch(Submit())
        valid = self._state.valid

        if not valid:
            in_error = [name for name, message in self._state.errors.items() if message]
            logger.info("Submission blocked, fields in error: %s", ", ".join(in_error))
            event.prevent_default()

        payload = FormSubmitPayload(
            valid=valid,
            fields=dict(self._state.fields),
            errors=dict(self._state.errors),
        )
        self.submissions.emit(event, payload)
        self._trigger_on_change(None)
        return payload

    def command_log(self) -> list[dict[str, Any]]:
        """Serialize the retained commands, oldest first."""
        return [command.model_dump() for command in self.history]
