from dataclasses import dataclass
from typing import Any, Dict

from tab_registry.tab_registry_error import TabStateError


@dataclass
class TabState:
    """Container for serializable tab state."""
    type: str
    title: str
    data: Any = None
    selected: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the TabState to a JSON-serializable dictionary.

        Returns:
            Dictionary with the type and title, plus data if present and the
            selected flag only when set
        """
        state_dict: Dict[str, Any] = {
            'type': self.type,
            'title': self.title
        }

        if self.data is not None:
            state_dict['data'] = self.data

        if self.selected:
            state_dict['selected'] = True

        return state_dict

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TabState':
        """
        Create a TabState instance from a dictionary.

        Args:
            data: Dictionary containing the serialized state

        Returns:
            New TabState instance

        Raises:
            TabStateError: If the dictionary is not a valid tab state
        """
        if not isinstance(data, dict):
            raise TabStateError(
                f"Tab state should be a dictionary (was {type(data).__name__})",
                {'entry': data}
            )

        tab_type = data.get('type')
        if not isinstance(tab_type, str):
            raise TabStateError(f"Tab state 'type' should be a string (was {tab_type!r})", {'entry': data})

        title = data.get('title')
        if not isinstance(title, str):
            raise TabStateError(f"Tab state 'title' should be a string (was {title!r})", {'entry': data})

        tab_data = data.get('data')

        selected = data.get('selected', False)
        if not isinstance(selected, bool):
            raise TabStateError(f"Tab state 'selected' should be a boolean (was {selected!r})", {'entry': data})

        return cls(type=tab_type, title=title, data=tab_data, selected=selected)
