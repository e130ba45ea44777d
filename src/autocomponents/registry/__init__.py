"""Component discovery and registration.

Provides directory scanning, component loading, name overrides, and the registry.

Usage::

    from autocomponents.registry import Registry

    registry = Registry(root="./components")
    count = registry.discover()
    button = registry.get("VueButton")
"""

from __future__ import annotations

from autocomponents.registry.loader import DEFAULT_LOADERS, load_file, resolve_component, unwrap_default
from autocomponents.registry.name_map import load_name_map
from autocomponents.registry.registry import CONFLICT_POLICIES, REGISTRY_EVENTS, Registry
from autocomponents.registry.scanner import DEFAULT_PATTERN, discover
from autocomponents.registry.types import Candidate, RegistryEntry

__all__ = [
    "CONFLICT_POLICIES",
    "Candidate",
    "DEFAULT_LOADERS",
    "DEFAULT_PATTERN",
    "REGISTRY_EVENTS",
    "Registry",
    "RegistryEntry",
    "discover",
    "load_file",
    "load_name_map",
    "resolve_component",
    "unwrap_default",
]
