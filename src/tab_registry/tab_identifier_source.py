"""Sources of unique tab identifiers."""

from typing import Protocol
import uuid


class TabIdentifierSource(Protocol):
    """Interface for producing collision-resistant tab identifiers."""

    def new_id(self) -> str:
        """
        Create a new identifier.

        Returns:
            An identifier that has never been returned before
        """
        ...


class RandomTabIdentifierSource:
    """Identifier source producing prefixed random UUIDs."""

    def __init__(self, prefix: str = "tab-") -> None:
        """
        Initialize the identifier source.

        Args:
            prefix: String prepended to every identifier
        """
        self._prefix = prefix

    def new_id(self) -> str:
        """Create a new identifier."""
        return f"{self._prefix}{uuid.uuid4().hex}"
