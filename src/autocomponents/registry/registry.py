"""Component registry: discovering, registering, and querying components."""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, Iterator

from autocomponents.config import DEFAULT_ROOT
from autocomponents.errors import ComponentNotFoundError, DuplicateComponentError, InvalidInputError
from autocomponents.naming import normalize
from autocomponents.registry.loader import Loader
from autocomponents.registry.name_map import load_name_map
from autocomponents.registry.scanner import DEFAULT_PATTERN, discover
from autocomponents.registry.types import Candidate, RegistryEntry

if TYPE_CHECKING:
    from autocomponents.config import Config

logger = logging.getLogger(__name__)

__all__ = ["Registry", "REGISTRY_EVENTS", "CONFLICT_POLICIES"]

REGISTRY_EVENTS = ("register", "unregister")
CONFLICT_POLICIES = ("overwrite", "error")


class Registry:
    """Mapping from canonical component name to component value.

    Built once by the application and passed to whatever needs component
    lookup. ``discover()`` runs the registration pass over a component
    directory; ``get()`` is the read side.
    """

    def __init__(
        self,
        config: Config | None = None,
        root: str | Path | None = None,
        pattern: str | re.Pattern[str] | None = None,
        name_map_path: str | Path | None = None,
        on_conflict: str | None = None,
        loaders: Mapping[str, Loader] | None = None,
    ) -> None:
        """Initialize the Registry.

        Args:
            config: Optional Config whose ``components`` section supplies defaults.
            root: Component directory scanned by ``discover()``.
            pattern: Regular expression selecting component files.
            name_map_path: Path to a name map YAML file overriding canonical names.
            on_conflict: ``"overwrite"`` (last write wins) or ``"error"``.
            loaders: Suffix to loader mapping replacing the default loaders.

        Raises:
            ConfigError: If the config's ``components`` section is invalid.
            InvalidInputError: If on_conflict is not a known policy.
        """
        settings = config.component_settings() if config is not None else None

        # Explicit params > config > defaults
        self._root: str | Path = root if root is not None else (settings.root if settings else DEFAULT_ROOT)
        self._pattern: str | re.Pattern[str] = (
            pattern if pattern is not None else (settings.pattern if settings and settings.pattern else DEFAULT_PATTERN)
        )
        policy = on_conflict if on_conflict is not None else (settings.on_conflict if settings else "overwrite")
        if policy not in CONFLICT_POLICIES:
            raise InvalidInputError(message=f"Invalid conflict policy: {policy}. Must be 'overwrite' or 'error'")
        self._on_conflict = policy
        if name_map_path is None and settings is not None:
            name_map_path = settings.name_map

        self._entries: dict[str, RegistryEntry] = {}
        self._callbacks: dict[str, list[Callable[..., Any]]] = {event: [] for event in REGISTRY_EVENTS}
        self._write_lock = threading.RLock()
        self._loaders = loaders
        self._name_map: dict[str, str] = {}

        if name_map_path is not None:
            self._name_map = load_name_map(Path(name_map_path))

    @property
    def on_conflict(self) -> str:
        """The active conflict policy."""
        return self._on_conflict

    # ----- Discovery -----

    def discover(
        self,
        root: str | Path | None = None,
        pattern: str | re.Pattern[str] | None = None,
    ) -> int:
        """Discover component files and register each one.

        Candidates are processed once, in discovery order: resolved, named,
        then registered. The first failure aborts the pass; components
        registered before it stay registered.

        Returns:
            Number of registrations performed in this pass.

        Raises:
            DiscoveryError: If the root cannot be scanned.
            ModuleResolutionError: If a candidate fails to load or exports nothing.
            NormalizationError: If a candidate does not produce a name.
            DuplicateComponentError: On a name clash under the ``"error"`` policy.
        """
        root = self._root if root is None else root
        pattern = self._pattern if pattern is None else pattern

        candidates = discover(root, pattern)
        if not candidates:
            logger.warning("No components discovered in %s", root)
            return 0

        seen: dict[str, str] = {}
        registered_count = 0
        for candidate in candidates:
            value = candidate.resolve(loaders=self._loaders)
            name = self.canonical_name(candidate)
            if name in seen:
                logger.warning(
                    "Name collision: '%s' and '%s' both map to '%s'",
                    seen[name],
                    candidate.relative_path,
                    name,
                )
            seen[name] = candidate.relative_path
            self.register(name, value, source=candidate.file_path)
            registered_count += 1

        logger.info("Registered %d component(s) from %s", registered_count, root)
        return registered_count

    def canonical_name(self, candidate: Candidate) -> str:
        """Return the registry key for a candidate, honoring the name map."""
        mapped = self._name_map.get(candidate.relative_path.removeprefix("./"))
        if mapped is not None:
            return mapped
        return normalize(candidate.relative_path)

    # ----- Registration -----

    def register(self, name: str, value: Any, source: Path | None = None) -> None:
        """Register a component value under name.

        Under the ``"overwrite"`` policy an existing entry is replaced.

        Raises:
            InvalidInputError: If name is empty.
            DuplicateComponentError: If name exists under the ``"error"`` policy.
        """
        if not name:
            raise InvalidInputError(message="Component name must be a non-empty string")

        with self._write_lock:
            if name in self._entries:
                if self._on_conflict == "error":
                    raise DuplicateComponentError(name=name)
                logger.debug("Overwriting component '%s'", name)
            self._entries[name] = RegistryEntry(name=name, value=value, source=source)

        logger.debug("Registered component '%s'", name)
        self._trigger_event("register", name, value)

    def unregister(self, name: str) -> bool:
        """Remove a component from the registry.

        Returns False if the component was not registered.
        """
        with self._write_lock:
            entry = self._entries.pop(name, None)
        if entry is None:
            return False

        self._trigger_event("unregister", name, entry.value)
        return True

    # ----- Query Methods -----

    def get(self, name: str) -> Any:
        """Look up a component by name. Returns None if not found."""
        with self._write_lock:
            entry = self._entries.get(name)
        return entry.value if entry is not None else None

    def require(self, name: str) -> Any:
        """Look up a component by name.

        Raises:
            ComponentNotFoundError: If no component is registered under name.
        """
        with self._write_lock:
            entry = self._entries.get(name)
        if entry is None:
            raise ComponentNotFoundError(name=name)
        return entry.value

    def entry(self, name: str) -> RegistryEntry | None:
        """Return the full entry for name, or None."""
        with self._write_lock:
            return self._entries.get(name)

    def has(self, name: str) -> bool:
        """Check whether a component is registered."""
        with self._write_lock:
            return name in self._entries

    def iter(self) -> Iterator[tuple[str, Any]]:
        """Return an iterator of (name, value) tuples (snapshot-based)."""
        with self._write_lock:
            items = [(name, entry.value) for name, entry in self._entries.items()]
        return iter(items)

    @property
    def names(self) -> list[str]:
        """Sorted list of registered component names."""
        with self._write_lock:
            return sorted(self._entries.keys())

    @property
    def count(self) -> int:
        """Number of registered components."""
        with self._write_lock:
            return len(self._entries)

    def __len__(self) -> int:
        return self.count

    def __contains__(self, name: object) -> bool:
        with self._write_lock:
            return name in self._entries

    # ----- Event System -----

    def on(self, event: str, callback: Callable[..., Any]) -> None:
        """Register an event callback.

        Args:
            event: Event name ('register' or 'unregister').
            callback: Callable(name, value) to invoke on the event.

        Raises:
            InvalidInputError: If event name is invalid.
        """
        with self._write_lock:
            if event not in self._callbacks:
                raise InvalidInputError(message=f"Invalid event: {event}. Must be 'register' or 'unregister'")
            self._callbacks[event].append(callback)

    def _trigger_event(self, event: str, name: str, value: Any) -> None:
        """Trigger all callbacks for an event. Errors are logged and swallowed."""
        with self._write_lock:
            callbacks = list(self._callbacks.get(event, []))
        for cb in callbacks:
            try:
                cb(name, value)
            except Exception as e:
                logger.error(
                    "Callback error for event '%s' on component '%s': %s",
                    event,
                    name,
                    e,
                )
