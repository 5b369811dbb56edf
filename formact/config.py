"""Global configuration for formact.

Settings live in ``$FORMACT_HOME/config.yaml`` (default
``~/.config/formact/config.yaml``). Environment variables override the
file.
"""

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel

from formact.validation.validators import DEFAULT_REQUIRED_MESSAGE

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class FormactSettings(BaseModel):
    """Resolved formact settings."""

    log_level: LogLevel = "WARNING"
    required_message: str = DEFAULT_REQUIRED_MESSAGE


def get_formact_home() -> Path:
    """Return the formact home directory."""
    env_home = os.environ.get("FORMACT_HOME")
    if env_home:
        return Path(env_home)
    return Path.home() / ".config" / "formact"


def get_config_path() -> Path:
    """Return the path of the global config file."""
    return get_formact_home() / "config.yaml"


def load_global_config(config_path: Path | None = None) -> FormactSettings:
    """Load settings from the config file and environment.

    A missing or empty config file gives the defaults.
    ``FORMACT_LOG_LEVEL`` overrides ``log_level``.
    """
    path = config_path or get_config_path()
    data: dict = {}
    if path.exists():
        with open(path) as f:
            data = yaml.safe_load(f) or {}

    env_level = os.environ.get("FORMACT_LOG_LEVEL")
    if env_level:
        data["log_level"] = env_level.upper()

    return FormactSettings.model_validate(data)


def write_default_config(config_path: Path | None = None) -> Path:
    """Write a config file holding the default settings."""
    path = config_path or get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(FormactSettings().model_dump(), f, sort_keys=False)
    return path
