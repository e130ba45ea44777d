"""autocomponents - Directory-driven component discovery and registration."""

from __future__ import annotations

# Core
from autocomponents.registry import Registry
from autocomponents.registry.registry import CONFLICT_POLICIES, REGISTRY_EVENTS
from autocomponents.registry.scanner import DEFAULT_PATTERN, discover
from autocomponents.registry.types import Candidate, RegistryEntry

# Naming
from autocomponents.naming import camel_case, normalize, upper_first

# Config
from autocomponents.config import ComponentSettings, Config

# Errors
from autocomponents.errors import (
    ComponentError,
    ComponentNotFoundError,
    ConfigError,
    ConfigNotFoundError,
    DiscoveryError,
    DuplicateComponentError,
    ErrorCodes,
    InvalidInputError,
    ModuleResolutionError,
    NormalizationError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Registry",
    "Candidate",
    "RegistryEntry",
    "discover",
    # Registry constants
    "REGISTRY_EVENTS",
    "CONFLICT_POLICIES",
    "DEFAULT_PATTERN",
    # Naming
    "normalize",
    "camel_case",
    "upper_first",
    # Config
    "Config",
    "ComponentSettings",
    # Errors
    "ErrorCodes",
    "ComponentError",
    "ComponentNotFoundError",
    "ConfigError",
    "ConfigNotFoundError",
    "DiscoveryError",
    "DuplicateComponentError",
    "InvalidInputError",
    "ModuleResolutionError",
    "NormalizationError",
]
