"""Exception classes for tab registry operations."""

from typing import Any, Dict


class TabRegistryError(Exception):
    """Base class for tab registry-related exceptions."""

    def __init__(self, message: str, details: Dict[str, Any] | None = None) -> None:
        """
        Initialize tab registry error.

        Args:
            message: Error message
            details: Optional dictionary of additional error details
        """
        super().__init__(message)
        self.details = details or {}


class TabArgumentError(TabRegistryError):
    """Raised when a registry operation is called with malformed arguments."""


class TabInvariantError(TabRegistryError):
    """Raised when an operation would break a registry invariant, such as closing the primary tab."""


class TabStateError(TabRegistryError):
    """Raised when a persisted tab state entry cannot be decoded."""


class TabSettingsError(TabRegistryError):
    """Raised when a settings file does not hold valid registry settings."""
