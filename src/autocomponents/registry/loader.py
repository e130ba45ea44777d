"""Loading candidate files and resolving their exported component value."""

from __future__ import annotations

import hashlib
import importlib.util
import json
import re
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Callable

import yaml

from autocomponents.errors import ModuleResolutionError

__all__ = ["DEFAULT_LOADERS", "load_file", "resolve_component", "unwrap_default"]

Loader = Callable[[Path], Any]

_MODULE_NAME_UNSAFE = re.compile(r"\W")


def _import_python_file(file_path: Path) -> Any:
    """Dynamically import a Python file and return the loaded module object."""
    # One module name per file path.
    path_digest = hashlib.sha1(str(file_path.resolve()).encode("utf-8")).hexdigest()[:12]
    module_name = f"autocomponents_ext_{_MODULE_NAME_UNSAFE.sub('_', file_path.stem)}_{path_digest}"
    spec = importlib.util.spec_from_file_location(module_name, str(file_path))
    if spec is None or spec.loader is None:
        raise ModuleResolutionError(path=str(file_path), reason=f"Cannot create import spec for {file_path}")

    mod = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = mod
    try:
        spec.loader.exec_module(mod)
    except Exception as exc:
        sys.modules.pop(module_name, None)
        raise ModuleResolutionError(path=str(file_path), reason=f"Failed to import module: {exc}") from exc
    return mod


def _load_yaml_file(file_path: Path) -> Any:
    try:
        return yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ModuleResolutionError(path=str(file_path), reason=f"Invalid YAML: {exc}") from exc


def _load_json_file(file_path: Path) -> Any:
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ModuleResolutionError(path=str(file_path), reason=f"Invalid JSON: {exc}") from exc


DEFAULT_LOADERS: dict[str, Loader] = {
    ".py": _import_python_file,
    ".yaml": _load_yaml_file,
    ".yml": _load_yaml_file,
    ".json": _load_json_file,
}


def load_file(file_path: Path, loaders: Mapping[str, Loader] | None = None) -> Any:
    """Load a component file with the loader registered for its suffix.

    Raises:
        ModuleResolutionError: If no loader handles the suffix or loading fails.
    """
    file_path = Path(file_path)
    table = DEFAULT_LOADERS if loaders is None else loaders
    loader = table.get(file_path.suffix)
    if loader is None:
        raise ModuleResolutionError(
            path=str(file_path),
            reason=f"No loader for '{file_path.suffix or file_path.name}' files",
        )
    try:
        return loader(file_path)
    except ModuleResolutionError:
        raise
    except OSError as exc:
        raise ModuleResolutionError(path=str(file_path), reason=f"Cannot read file: {exc}") from exc


def unwrap_default(loaded: Any) -> Any:
    """Return the ``default`` export of a loaded object, or the object itself.

    Mappings are checked for a ``default`` key, everything else for a
    ``default`` attribute. Any present value other than None counts, empty
    containers included.
    """
    if isinstance(loaded, Mapping):
        default = loaded.get("default")
    else:
        default = getattr(loaded, "default", None)
    return loaded if default is None else default


def resolve_component(file_path: Path, loaders: Mapping[str, Loader] | None = None) -> Any:
    """Load a component file and return its exported component value.

    Raises:
        ModuleResolutionError: If loading fails or the file exports nothing.
    """
    value = unwrap_default(load_file(file_path, loaders=loaders))
    if value is None:
        raise ModuleResolutionError(path=str(file_path), reason="No component exported")
    return value
