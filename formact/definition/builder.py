"""Building a live Form and its fields from a definition."""

from formact.core.errors import FormDefinitionError
from formact.definition.models import FieldDefinition, FormDefinition
from formact.field import FieldController, FieldProps
from formact.form.registry import ChangeListener, Form, SubmitListener
from formact.validation.registry import ValidatorRegistry, create_registry
from formact.validation.validators import REQUIRED, Validator, make_required


class BuiltForm:
    """A Form together with the controllers built for it."""

    def __init__(
        self,
        definition: FormDefinition,
        form: Form,
        fields: dict[str, FieldController],
    ) -> None:
        self.definition = definition
        self.form = form
        self.fields = fields

    def field(self, name: str) -> FieldController | None:
        """Find a controller by its current name."""
        for controller in self.fields.values():
            if controller.name == name:
                return controller
        return None


def build_field_props(
    field: FieldDefinition,
    registry: ValidatorRegistry,
) -> FieldProps:
    """Resolve a field definition's validators and build its props.

    Raises:
        UnknownValidatorError: If a validator name is not registered.
        FormDefinitionError: If a validator rejects its parameters.
    """
    try:
        validation = [registry.get(spec.name, **spec.params) for spec in field.validator_specs()]
    except FormDefinitionError as e:
        raise FormDefinitionError(f"Field {field.name!r}: {e}") from e
    kwargs = {
        "name": field.name,
        "default_value": field.default_value,
        "validation": validation,
        "required": field.required,
    }
    if field.controlled:
        kwargs["value"] = field.value
    return FieldProps(**kwargs)


def build_form(
    definition: FormDefinition,
    registry: ValidatorRegistry | None = None,
    on_change: ChangeListener | None = None,
    on_submit: SubmitListener | None = None,
    required_message: str | None = None,
    mount: bool = True,
) -> BuiltForm:
    """Create a Form and one FieldController per defined field.

    Args:
        definition: The form definition.
        registry: Validator registry (built-ins by default).
        on_change: Optional change listener for the Form.
        on_submit: Optional submit listener for the Form.
        required_message: Message used by the REQUIRED check.
        mount: Mount every field in definition order.

    Returns:
        The built form with controllers keyed by their defined name.
    """
    if registry is None:
        registry = create_registry(required_message=required_message)
    required_check: Validator = make_required(required_message) if required_message else REQUIRED

    form = Form(model=definition.model, on_change=on_change, on_submit=on_submit)
    fields: dict[str, FieldController] = {}
    for field in definition.fields:
        props = build_field_props(field, registry)
        fields[field.name] = FieldController(form.handle, props, required_check=required_check)

    if mount:
        for controller in fields.values():
            controller.mount()

    return BuiltForm(definition=definition, form=form, fields=fields)
