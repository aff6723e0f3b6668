"""Context menu commands for tabs, dispatched by (action, tab ID)."""

import logging
from typing import List

from tab_registry.tab_menu_action import TabMenuAction
from tab_registry.tab_registry import TabRegistry


class TabMenuDispatcher:
    """Works out which context menu commands apply to a tab and carries them out."""

    def __init__(self, registry: TabRegistry) -> None:
        """
        Initialize the dispatcher.

        Args:
            registry: The registry the commands act on
        """
        self._registry = registry
        self._logger = logging.getLogger("TabMenuDispatcher")

    def available_actions(self, tab_id: str) -> List[TabMenuAction]:
        """
        Get the commands to offer for a tab, in menu order.

        Args:
            tab_id: ID of the tab the menu was opened on

        Returns:
            List of applicable actions
        """
        registry = self._registry
        is_primary = tab_id == registry.primary_tab_id
        actions: List[TabMenuAction] = []

        if not is_primary:
            if tab_id not in registry:
                return actions

            actions.extend([TabMenuAction.SHOW_IN_LIBRARY, TabMenuAction.OPEN_IN_WINDOW, TabMenuAction.CLOSE])

        # With only the primary tab and this one there is nothing else to close
        if len(registry) > 1 and not (len(registry) == 2 and not is_primary):
            actions.append(TabMenuAction.CLOSE_OTHERS)

        return actions

    def dispatch(self, action: TabMenuAction, tab_id: str) -> bool:
        """
        Carry out a context menu command.

        Args:
            action: The command to run
            tab_id: ID of the tab the menu was opened on

        Returns:
            True if the command did anything
        """
        registry = self._registry
        self._logger.debug("Dispatching %s for tab '%s'", action.name, tab_id)

        if action == TabMenuAction.CLOSE_OTHERS:
            count = len(registry)
            registry.close_others(tab_id)
            return len(registry) != count

        tab = registry.get_tab(tab_id)
        if tab is None:
            return False

        if action == TabMenuAction.CLOSE:
            registry.close(tab_id)
            return True

        viewer = registry.content_viewer(tab.tab_type())
        if viewer is None:
            return False

        if action == TabMenuAction.SHOW_IN_LIBRARY:
            if not viewer.show_in_library(tab_id):
                return False

            registry.select(registry.primary_tab_id)
            return True

        if action == TabMenuAction.OPEN_IN_WINDOW:
            return viewer.open_in_window(tab_id)

        return False
