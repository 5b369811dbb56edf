"""Pydantic models for declarative form definitions."""

from typing import Any

from pydantic import BaseModel, Field, model_validator


class ValidatorSpec(BaseModel):
    """A named validator with factory parameters."""

    name: str
    params: dict[str, Any] = Field(default_factory=dict)


class FieldDefinition(BaseModel):
    """Declarative description of one field."""

    name: str = Field(min_length=1)
    required: bool = False
    validators: list[str | ValidatorSpec] = Field(default_factory=list)
    default_value: Any = None
    value: Any = None
    label: str | None = None

    @property
    def controlled(self) -> bool:
        """Whether the definition pins the field's value."""
        return "value" in self.model_fields_set

    def validator_specs(self) -> list[ValidatorSpec]:
        """Validators normalized to ValidatorSpec instances."""
        return [
            ValidatorSpec(name=v) if isinstance(v, str) else v
            for v in self.validators
        ]


class FormDefinition(BaseModel):
    """Complete form definition."""

    form_id: str
    version: str | None = None
    description: str | None = None
    model: dict[str, Any] | None = None
    fields: list[FieldDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_names(self) -> "FormDefinition":
        """Ensure no two fields share a name."""
        seen: set[str] = set()
        for field in self.fields:
            if field.name in seen:
                raise ValueError(f"Duplicate field name: {field.name}")
            seen.add(field.name)
        return self

    def get_field(self, name: str) -> FieldDefinition | None:
        """Get a field definition by name."""
        for field in self.fields:
            if field.name == name:
                return field
        return None
