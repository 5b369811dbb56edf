"""Field configuration and lifecycle models."""

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FieldStatus(str, Enum):
    """Lifecycle state of a field controller."""

    UNMOUNTED = "unmounted"
    MOUNTED = "mounted"


class FieldProps(BaseModel):
    """Props a field controller is configured with.

    A field is controlled when ``value`` was passed explicitly, even as
    None; ``default_value`` only seeds an uncontrolled field at mount.
    """

    name: str = Field(min_length=1)
    value: Any = None
    default_value: Any = None
    validation: Any = None  # validator callable, list of them, or None
    required: bool = False
    on_change: Callable[[Any], None] | None = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def controlled(self) -> bool:
        """Whether the value is driven by the ``value`` prop."""
        return "value" in self.model_fields_set

    def replace(self, **changes: Any) -> "FieldProps":
        """Copy with some props changed, keeping which props were set."""
        data = {key: getattr(self, key) for key in self.model_fields_set}
        data.update(changes)
        return type(self)(**data)
