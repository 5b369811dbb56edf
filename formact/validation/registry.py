"""Validator registry for name-based validator lookup.

Form definitions name their validators; the registry resolves those
names (plus parameters) to validator callables.
"""

import logging
import re
from collections.abc import Callable
from typing import Any

from formact.core.errors import FormDefinitionError, UnknownValidatorError
from formact.validation import validators as builtin
from formact.validation.validators import Validator

logger = logging.getLogger(__name__)

ValidatorFactory = Callable[..., Validator]


class ValidatorRegistry:
    """Maps validator names to factories.

    A factory is called with the parameters given in the definition and
    must return a ``(value, field_name) -> message`` callable.
    """

    def __init__(self) -> None:
        """Initialize an empty registry."""
        self._factories: dict[str, ValidatorFactory] = {}

    def register(self, name: str, factory: ValidatorFactory) -> None:
        """Register a validator factory, replacing any existing one.

        Args:
            name: Lookup name used in form definitions (e.g., "email").
            factory: Callable returning a validator.
        """
        if name in self._factories:
            logger.debug("Replacing validator factory %r", name)
        self._factories[name] = factory

    def get(self, name: str, **params: Any) -> Validator:
        """Build a validator by name.

        Args:
            name: The registered validator name.
            **params: Keyword arguments passed to the factory.

        Returns:
            A validator callable.

        Raises:
            UnknownValidatorError: If no factory is registered for this name.
            FormDefinitionError: If the factory rejects the parameters.
        """
        if name not in self._factories:
            raise UnknownValidatorError(name)
        try:
            return self._factories[name](**params)
        except (TypeError, ValueError, re.error) as e:
            raise FormDefinitionError(f"Invalid parameters for validator {name!r}: {e}") from e

    def has(self, name: str) -> bool:
        """Check if a factory is registered for a name."""
        return name in self._factories

    @property
    def names(self) -> list[str]:
        """List all registered validator names."""
        return list(self._factories.keys())


def create_registry(required_message: str | None = None) -> ValidatorRegistry:
    """Create a validator registry with the built-in validators registered.

    Args:
        required_message: Default message for the "required" validator.

    Returns:
        A ValidatorRegistry with every built-in factory.
    """
    registry = ValidatorRegistry()
    default_message = required_message or builtin.DEFAULT_REQUIRED_MESSAGE

    registry.register(
        "required",
        lambda message=default_message: builtin.make_required(message),
    )
    registry.register("min_length", builtin.min_length)
    registry.register("max_length", builtin.max_length)
    registry.register("pattern", builtin.pattern)
    registry.register("email", builtin.email)
    registry.register("numeric", builtin.numeric)
    registry.register("min_value", builtin.min_value)
    registry.register("max_value", builtin.max_value)
    registry.register("one_of", builtin.one_of)

    return registry
