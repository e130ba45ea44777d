"""Error hierarchy for the autocomponents package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "ComponentError",
    "ConfigNotFoundError",
    "ConfigError",
    "DiscoveryError",
    "ModuleResolutionError",
    "NormalizationError",
    "DuplicateComponentError",
    "ComponentNotFoundError",
    "InvalidInputError",
    "ErrorCodes",
]


class ComponentError(Exception):
    """Base error for all autocomponents errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigNotFoundError(ComponentError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(ComponentError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class DiscoveryError(ComponentError):
    """Raised when a component root cannot be enumerated."""

    def __init__(self, root: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="DISCOVERY_ERROR",
            message=f"Cannot discover components in '{root}': {reason}",
            details={"root": root, "reason": reason},
            **kwargs,
        )

    @property
    def root(self) -> str:
        """The root directory that could not be scanned."""
        return self.details["root"]


class ModuleResolutionError(ComponentError):
    """Raised when a candidate file cannot be loaded or exports nothing usable."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="MODULE_RESOLUTION_ERROR",
            message=f"Failed to resolve component '{path}': {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The candidate path that failed to resolve."""
        return self.details["path"]


class NormalizationError(ComponentError):
    """Raised when a path does not normalize to a usable component name."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="NORMALIZATION_ERROR",
            message=f"Path '{path}' does not produce a component name",
            details={"path": path},
            **kwargs,
        )


class DuplicateComponentError(ComponentError):
    """Raised on a second registration of a name when overwrites are disabled."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            code="DUPLICATE_COMPONENT",
            message=f"Component already registered: {name}",
            details={"name": name},
            **kwargs,
        )

    @property
    def name(self) -> str:
        """The conflicting component name."""
        return self.details["name"]


class ComponentNotFoundError(ComponentError):
    """Raised when a required component is not registered."""

    def __init__(self, name: str, **kwargs: Any) -> None:
        super().__init__(
            code="COMPONENT_NOT_FOUND",
            message=f"Component not found: {name}",
            details={"name": name},
            **kwargs,
        )


class InvalidInputError(ComponentError):
    """Raised for invalid input."""

    def __init__(self, message: str = "Invalid input", **kwargs: Any) -> None:
        super().__init__(code="GENERAL_INVALID_INPUT", message=message, **kwargs)


class ErrorCodes:
    """All error codes as constants.

    Use these instead of hardcoding error code strings.

    Example:
        if error.code == ErrorCodes.COMPONENT_NOT_FOUND:
            handle_not_found()
    """

    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"
    DISCOVERY_ERROR = "DISCOVERY_ERROR"
    MODULE_RESOLUTION_ERROR = "MODULE_RESOLUTION_ERROR"
    NORMALIZATION_ERROR = "NORMALIZATION_ERROR"
    DUPLICATE_COMPONENT = "DUPLICATE_COMPONENT"
    COMPONENT_NOT_FOUND = "COMPONENT_NOT_FOUND"
    GENERAL_INVALID_INPUT = "GENERAL_INVALID_INPUT"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
