from typing import List, Protocol

from tab_registry.tab_projection import TabProjection


class TabRegistryListener(Protocol):
    """Protocol for observers of tab registry refreshes."""
    def on_state_changed(self, projection: List[TabProjection]) -> None:
        """
        Called after every registry refresh.

        Args:
            projection: Projection of every tab in the registry, in order
        """
