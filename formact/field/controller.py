"""Field controller: one named value-holder registered with a Form.

The controller owns its local value (or mirrors the ``value`` prop when
controlled) and reaches the Form only through the FormHandle it was
constructed with.
"""

import logging
from collections.abc import Callable
from typing import Any

from formact.core.errors import DuplicateFieldError
from formact.field.models import FieldProps, FieldStatus
from formact.form.registry import FormHandle
from formact.validation.compose import compose_message
from formact.validation.validators import REQUIRED, Validator, is_empty

logger = logging.getLogger(__name__)


class FieldAccessor:
    """Current-state capability a Form validates a field through.

    Holds accessors rather than values, so ``validate()`` always sees the
    field's props and value at call time.
    """

    def __init__(
        self,
        get_current_value: Callable[[], Any],
        get_current_props: Callable[[], FieldProps],
        required_check: Validator = REQUIRED,
    ) -> None:
        self.get_current_value = get_current_value
        self.get_current_props = get_current_props
        self.required_check = required_check

    def validate(self) -> str:
        """Compose the field's current error message ("" when valid)."""
        props = self.get_current_props()
        return compose_message(
            self.get_current_value(),
            props.name,
            validation=props.validation,
            required=props.required,
            required_check=self.required_check,
        )


class FieldController:
    """Per-name state holder participating in a Form's registry."""

    def __init__(
        self,
        form: FormHandle,
        props: FieldProps,
        required_check: Validator = REQUIRED,
    ) -> None:
        """Create an unmounted controller.

        Args:
            form: Protocol handle of the owning Form.
            props: Initial props.
            required_check: REQUIRED implementation used when ``props.required``.
        """
        self.form = form
        self._props = props
        self._value: Any = ""
        self.status = FieldStatus.UNMOUNTED
        self.accessor = FieldAccessor(
            get_current_value=lambda: self._value,
            get_current_props=lambda: self._props,
            required_check=required_check,
        )

    @property
    def props(self) -> FieldProps:
        return self._props

    @property
    def name(self) -> str:
        return self._props.name

    @property
    def value(self) -> Any:
        return self._value

    @property
    def mounted(self) -> bool:
        return self.status is FieldStatus.MOUNTED

    def validate(self) -> str:
        """The validator registered with the Form for this field."""
        return self.accessor.validate()

    def _initial_value(self) -> Any:
        props = self._props
        if props.controlled:
            return props.value
        if props.default_value is not None:
            return props.default_value
        initial = self.form.get_initial_value(props.name)
        if initial is not None:
            return initial
        return ""

    def mount(self) -> None:
        """Register with the Form.

        A non-empty initial value is also propagated straight away so the
        Form's snapshot reflects pre-filled fields from the start.
        """
        if self.mounted:
            logger.debug("Field %r is already mounted", self.name)
            return

        self._value = self._initial_value()
        self.form.add_field(self.name, self._value, self.validate)
        self.status = FieldStatus.MOUNTED

        if not is_empty(self._value):
            self.propagate_value()

    def unmount(self) -> None:
        """Deregister from the Form. Later protocol calls become no-ops."""
        if not self.mounted:
            logger.debug("Field %r is not mounted", self.name)
            return

        self.form.remove_field(self.name)
        self.status = FieldStatus.UNMOUNTED

    def propagate_value(self) -> None:
        """Push the current value to the Form."""
        if not self.mounted:
            logger.debug("Field %r is unmounted, not propagating", self.name)
            return
        self.form.value_changed(self.name, self._value)

    def on_change(self, value: Any) -> None:
        """Handle a user edit.

        The local value is updated before the Form is notified, and the
        external ``on_change`` listener receives the new value last.
        """
        self._value = value
        self.propagate_value()

        if self._props.on_change is not None:
            self._props.on_change(value)

    def update_props(self, props: FieldProps) -> None:
        """Reconcile the controller with new props.

        A name change while mounted re-registers the field under the new
        name in one step, carrying the value over. A controlled ``value``
        that differs from the local value overwrites it and propagates.

        Raises:
            DuplicateFieldError: If the new name is already tracked. The
                controller keeps its previous props and value.
        """
        previous = self._props
        previous_value = self._value
        value = props.value if props.controlled else self._value
        changed = value != self._value

        self._props = props
        self._value = value

        if not self.mounted:
            return

        if previous.name != props.name:
            try:
                self.form.rename_field(previous.name, props.name, value, self.validate)
            except DuplicateFieldError:
                self._props = previous
                self._value = previous_value
                raise

        if changed:
            self.propagate_value()

    def submitted(self) -> bool:
        """Whether the owning Form has seen a submission attempt."""
        return self.form.submitted()
