"""Loading form definitions from JSON or YAML files."""

import json
import logging
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from pydantic import ValidationError

from formact.core.errors import FormDefinitionError
from formact.definition.models import FormDefinition

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "form_definition.schema.json"


def load_schema(schema_path: Path | str | None = None) -> dict[str, Any]:
    """Load the form definition JSON Schema (bundled one by default)."""
    with open(schema_path or SCHEMA_PATH) as f:
        return json.load(f)


def read_definition_data(path: Path | str) -> Any:
    """Parse a definition file, choosing YAML or JSON by extension.

    Raises:
        FormDefinitionError: If the file is missing or does not parse.
    """
    path = Path(path)
    if not path.exists():
        raise FormDefinitionError(f"Form definition not found: {path}")

    with open(path) as f:
        try:
            if path.suffix in (".yaml", ".yml"):
                return yaml.safe_load(f)
            return json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise FormDefinitionError(f"Could not parse {path}: {e}") from e


def parse_definition(
    data: Any,
    schema: dict[str, Any] | None = None,
) -> FormDefinition:
    """Validate raw definition data and build the model.

    Args:
        data: Parsed definition data.
        schema: JSON Schema to validate against (bundled one by default).

    Returns:
        The validated FormDefinition.

    Raises:
        FormDefinitionError: If the data fails schema or model validation.
    """
    if schema is None:
        schema = load_schema()

    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise FormDefinitionError(f"Form definition validation failed: {e.message}") from e

    try:
        return FormDefinition.model_validate(data)
    except ValidationError as e:
        raise FormDefinitionError(f"Form definition validation failed: {e}") from e


def load_definition(
    path: Path | str,
    schema_path: Path | str | None = None,
) -> FormDefinition:
    """Load and validate a form definition file.

    Args:
        path: Path to a .json, .yaml or .yml definition.
        schema_path: Optional override for the JSON Schema.

    Returns:
        The validated FormDefinition.

    Raises:
        FormDefinitionError: If the file is missing, malformed or invalid.
    """
    data = read_definition_data(path)
    definition = parse_definition(data, load_schema(schema_path))
    logger.debug("Loaded form definition %r with %d field(s)", definition.form_id, len(definition.fields))
    return definition
