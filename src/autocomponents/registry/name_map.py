"""Name map loading: per-file overrides of canonical component names."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from autocomponents.errors import ConfigError, ConfigNotFoundError

logger = logging.getLogger(__name__)

__all__ = ["load_name_map"]


def load_name_map(name_map_path: Path) -> dict[str, str]:
    """Load a name map YAML file.

    The file holds a ``mappings`` list of ``{file, name}`` entries. File keys
    are stored without a leading ``./`` so they match either spelling.

    Raises ConfigNotFoundError if file does not exist (name map is explicitly requested).
    """
    name_map_path = Path(name_map_path)
    if not name_map_path.exists():
        raise ConfigNotFoundError(config_path=str(name_map_path))

    content = name_map_path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(message=f"Invalid YAML in name map file: {name_map_path}") from e

    if not isinstance(parsed, dict) or not isinstance(parsed.get("mappings"), list):
        raise ConfigError(message="Name map must contain a 'mappings' list")

    result: dict[str, str] = {}
    for entry in parsed["mappings"]:
        if not isinstance(entry, dict):
            raise ConfigError(message=f"Name map entry must be a mapping: {entry!r}")
        file_name = entry.get("file")
        if not file_name:
            logger.warning("Name map entry missing 'file' field, skipping")
            continue
        name = entry.get("name")
        if not name or not isinstance(name, str):
            raise ConfigError(message=f"Name map entry for '{file_name}' needs a non-empty 'name'")
        result[str(file_name).removeprefix("./")] = name
    return result
