"""Public-facing projection of a tab, as handed to the tab bar."""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class TabProjection:
    """Minimal representation of a tab for rendering."""
    id: str
    type: str
    title: str
    selected: bool

    def to_dict(self) -> Dict[str, Any]:
        """Convert the projection to a plain dictionary."""
        return asdict(self)
