"""Exception types raised by formact.

Validation failures are never exceptions; these cover programming and
input errors around the registry and its outer surfaces.
"""


class FormactError(Exception):
    """Base class for all formact errors."""

    pass


class DuplicateFieldError(FormactError):
    """Raised when a field registers under a name that is already tracked."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Field already registered: {name}")


class UnknownValidatorError(FormactError):
    """Raised when no validator factory is registered under a name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"No validator registered for name: {name}")


class FormDefinitionError(FormactError):
    """Raised when a form definition cannot be loaded or fails validation."""

    pass


class ScenarioError(FormactError):
    """Raised when a replay event cannot be applied to the form."""

    pass
