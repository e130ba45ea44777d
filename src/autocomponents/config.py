"""Configuration loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError

from autocomponents.errors import ConfigError, ConfigNotFoundError

__all__ = ["Config", "ComponentSettings", "DEFAULT_ROOT"]

DEFAULT_ROOT = "./components"


class ComponentSettings(BaseModel):
    """Validated ``components`` section of a configuration."""

    model_config = ConfigDict(extra="forbid")

    root: str = DEFAULT_ROOT
    pattern: str | None = None
    on_conflict: Literal["overwrite", "error"] = "overwrite"
    name_map: str | None = None


class Config:
    """Configuration accessor with dot-path key support."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load a configuration from a YAML file.

        Raises:
            ConfigNotFoundError: If the file does not exist.
            ConfigError: If the file cannot be read, is not valid YAML or is not a mapping.
        """
        path = Path(path)
        if not path.exists():
            raise ConfigNotFoundError(config_path=str(path))
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(message=f"Cannot read config file: {path}", cause=e) from e
        try:
            parsed = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(message=f"Invalid YAML in config file: {path}") from e

        if parsed is None:
            return cls()
        if not isinstance(parsed, dict):
            raise ConfigError(message=f"Config file must be a YAML mapping: {path}")
        return cls(parsed)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dot-path key."""
        parts = key.split(".")
        current: Any = self._data
        for part in parts:
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    def component_settings(self) -> ComponentSettings:
        """Validate and return the ``components`` section.

        Raises:
            ConfigError: If the section has unknown keys or invalid values.
        """
        section = self.get("components", {})
        if section is None:
            section = {}
        try:
            return ComponentSettings.model_validate(section)
        except PydanticValidationError as e:
            raise ConfigError(message=f"Invalid 'components' configuration: {e}", cause=e) from e
