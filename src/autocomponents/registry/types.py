"""Registry types: Candidate, RegistryEntry."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from autocomponents.registry.loader import Loader, load_file, resolve_component

__all__ = [
    "Candidate",
    "RegistryEntry",
]


@dataclass(frozen=True)
class Candidate:
    """A file matched by discovery, not yet loaded.

    Attributes:
        relative_path: Path relative to the component root, with the ``./``
            prefix the discovery pattern was matched against.
        file_path: Absolute path of the file.
    """

    relative_path: str
    file_path: Path

    def load(self, loaders: Mapping[str, Loader] | None = None) -> Any:
        """Load the file and return the raw loaded object."""
        return load_file(self.file_path, loaders=loaders)

    def resolve(self, loaders: Mapping[str, Loader] | None = None) -> Any:
        """Load the file and return its exported component value."""
        return resolve_component(self.file_path, loaders=loaders)


@dataclass(frozen=True)
class RegistryEntry:
    """A registered component and the file it came from, if any."""

    name: str
    value: Any
    source: Path | None = None
