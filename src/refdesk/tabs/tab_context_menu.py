"""Context menu for tabs in the tab bar."""

from typing import Dict

from PySide6.QtWidgets import QMenu, QToolTip, QWidget
from PySide6.QtCore import QPoint
from PySide6.QtGui import QAction

from tab_registry import TabMenuAction, TabMenuDispatcher


class TabContextMenu(QMenu):
    """Menu listing the commands that apply to one tab."""

    LABELS: Dict[TabMenuAction, str] = {
        TabMenuAction.SHOW_IN_LIBRARY: "Show in Library",
        TabMenuAction.OPEN_IN_WINDOW: "Open in Separate Window",
        TabMenuAction.CLOSE: "Close",
        TabMenuAction.CLOSE_OTHERS: "Close Other Tabs",
    }

    def __init__(self, dispatcher: TabMenuDispatcher, tab_id: str, parent: QWidget | None = None) -> None:
        """
        Initialize the menu.

        Args:
            dispatcher: Dispatcher that works out and runs the tab commands
            tab_id: ID of the tab the menu is for
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._dispatcher = dispatcher
        self._tab_id = tab_id

        for action in dispatcher.available_actions(tab_id):
            if action == TabMenuAction.CLOSE:
                self.addSeparator()

            menu_action = QAction(self.LABELS[action], self)
            menu_action.setData(action.name)
            self.addAction(menu_action)

        self.triggered.connect(self._handle_triggered)

    def tab_id(self) -> str:
        """Get the ID of the tab the menu is for."""
        return self._tab_id

    def _handle_triggered(self, menu_action: QAction) -> None:
        """Run the command for the chosen menu item."""
        name = menu_action.data()
        if not isinstance(name, str) or name not in TabMenuAction.__members__:
            return

        self._dispatcher.dispatch(TabMenuAction[name], self._tab_id)

    def popup_at(self, x: int, y: int) -> None:
        """
        Show the menu at a global screen position.

        Args:
            x: Global x coordinate
            y: Global y coordinate
        """
        QToolTip.hideText()
        if self.isEmpty():
            return

        self.popup(QPoint(x, y))
