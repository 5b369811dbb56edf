"""Pure state transitions for the form registry.

``reduce`` takes the current FormState and one command and returns the
next FormState. Every transition ends with a full revalidation of all
tracked fields, so the error map is always consistent with the
validators as they stand after the command.
"""

import logging

from formact.core.errors import DuplicateFieldError
from formact.core.models import ErrorMap, FormState, ValidatorRef
from formact.form.commands import (
    AddField,
    FormCommand,
    RemoveField,
    RenameField,
    Submit,
    ValueChanged,
)

logger = logging.getLogger(__name__)


def validate_all(
    fields: dict,
    validators: dict[str, ValidatorRef],
) -> ErrorMap:
    """Recompute the error message for every tracked field.

    Fields without a validator reference get an empty message.
    """
    errors: ErrorMap = {}
    for name in fields:
        ref = validators.get(name)
        errors[name] = ref.run() if ref is not None else ""
    return errors


def reduce(state: FormState, command: FormCommand) -> FormState:
    """Apply a command to the state.

    Args:
        state: The current registry state.
        command: The command to apply.

    Returns:
        The next registry state. ``state`` is left untouched.

    Raises:
        DuplicateFieldError: If AddField names a field that is already tracked.
        TypeError: If ``command`` is not a known command.
    """
    fields = dict(state.fields)
    validators = dict(state.validators)
    submitted = state.submitted

    if isinstance(command, AddField):
        if command.name in fields:
            raise DuplicateFieldError(command.name)
        fields[command.name] = command.value
        validators[command.name] = ValidatorRef(validate_fn=command.validate_fn)

    elif isinstance(command, RemoveField):
        if command.name not in fields:
            logger.debug("remove_field: %r is not tracked", command.name)
        fields.pop(command.name, None)
        validators.pop(command.name, None)

    elif isinstance(command, RenameField):
        if command.new_name != command.old_name and command.new_name in fields:
            raise DuplicateFieldError(command.new_name)
        fields.pop(command.old_name, None)
        validators.pop(command.old_name, None)
        fields[command.new_name] = command.value
        validators[command.new_name] = ValidatorRef(validate_fn=command.validate_fn)

    elif isinstance(command, ValueChanged):
        if not command.name:
            return state
        if command.name not in fields:
            logger.debug("value_changed: %r was not registered", command.name)
        fields[command.name] = command.value

    elif isinstance(command, Submit):
        submitted = True

    else:
        raise TypeError(f"Unknown form command: {command!r}")

    return FormState(
        fields=fields,
        validators=validators,
        errors=validate_all(fields, validators),
        submitted=submitted,
    )
