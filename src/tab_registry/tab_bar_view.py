from typing import List, Protocol

from tab_registry.tab_projection import TabProjection


class TabBarView(Protocol):
    """Interface for the visual tab strip."""

    def set_tabs(self, tabs: List[TabProjection]) -> None:
        """
        Render the given tabs, in order.

        Args:
            tabs: Projection of every tab in the registry
        """
        ...
