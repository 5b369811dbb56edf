"""Declarative form definitions: models, loading and building."""

from formact.definition.builder import BuiltForm, build_field_props, build_form
from formact.definition.loader import load_definition, load_schema, parse_definition
from formact.definition.models import FieldDefinition, FormDefinition, ValidatorSpec

__all__ = [
    "BuiltForm",
    "FieldDefinition",
    "FormDefinition",
    "ValidatorSpec",
    "build_field_props",
    "build_form",
    "load_definition",
    "load_schema",
    "parse_definition",
]
