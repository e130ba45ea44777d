"""Shared pytest fixtures for the registry test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
import yaml

from autocomponents.registry.registry import Registry


# ---------------------------------------------------------------------------
# Component file templates
# ---------------------------------------------------------------------------

_DEFAULT_EXPORT_TEMPLATE = """\
default = {{"name": "{name}"}}
"""

_PLAIN_MODULE_TEMPLATE = """\
name = "{name}"

def render():
    return "<{name}/>"
"""


def _write_component(directory: Path, filename: str, name: str) -> Path:
    """Write a Python component file exporting ``default = {"name": name}``."""
    path = directory / filename
    path.write_text(_DEFAULT_EXPORT_TEMPLATE.format(name=name))
    return path


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def components_dir(tmp_path: Path) -> Path:
    """Create a temp component dir with two components and a nested one."""
    root = tmp_path / "components"
    root.mkdir()

    _write_component(root, "vue-button.py", "Btn")
    _write_component(root, "vue-icon.py", "Icon")

    sub = root / "sub"
    sub.mkdir()
    _write_component(sub, "vue-nested.py", "Nested")

    return root


@pytest.fixture
def write_component() -> Callable[[Path, str, str], Path]:
    """Return a helper writing a component file with a default export."""
    return _write_component


@pytest.fixture
def plain_module_file(tmp_path: Path) -> Path:
    """A Python component file without a ``default`` export."""
    path = tmp_path / "vue-plain.py"
    path.write_text(_PLAIN_MODULE_TEMPLATE.format(name="Plain"))
    return path


@pytest.fixture
def registry(components_dir: Path) -> Registry:
    """Create a Registry pointed at components_dir (discover NOT called)."""
    return Registry(root=components_dir)


@pytest.fixture
def name_map_yaml(tmp_path: Path) -> Path:
    """Create a name map renaming vue-icon.py to Icon."""
    path = tmp_path / "names.yaml"
    path.write_text(yaml.dump({"mappings": [{"file": "vue-icon.py", "name": "Icon"}]}))
    return path
