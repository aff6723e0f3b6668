from typing import List

from PySide6.QtWidgets import QTabBar, QWidget
from PySide6.QtCore import Qt, Signal, QPoint

from tab_registry import TabProjection


class TabBar(QTabBar):
    """
    Tab strip for a window's tab registry.

    The tab bar never changes the registry itself.  User gestures are reported as
    signals carrying tab IDs, and the registry answers by handing back a new
    projection through set_tabs().
    """

    tab_selected = Signal(str)  # tab_id
    tab_moved = Signal(str, int)  # tab_id, target index (counted before removal)
    tab_close_requested = Signal(str)  # tab_id
    tab_context_menu_requested = Signal(int, int, str)  # global x, global y, tab_id

    def __init__(self, parent: QWidget | None = None) -> None:
        """Initialize the tab bar."""
        super().__init__(parent)
        self.setExpanding(False)
        self.setDocumentMode(True)
        self.setMovable(True)
        self.setTabsClosable(True)
        self.setUsesScrollButtons(True)
        self.setDrawBase(False)
        self.setContextMenuPolicy(Qt.ContextMenuPolicy.CustomContextMenu)

        # Set while we apply a projection, so our own changes aren't reported back
        self._updating = False

        self.currentChanged.connect(self._handle_current_changed)
        self.tabMoved.connect(self._handle_tab_moved)
        self.tabCloseRequested.connect(self._handle_close_requested)
        self.customContextMenuRequested.connect(self._handle_context_menu_requested)

    def tab_id_at(self, index: int) -> str | None:
        """
        Get the ID of the tab at an index.

        Args:
            index: Tab index

        Returns:
            The tab ID, or None if there is no tab at that index
        """
        if index < 0 or index >= self.count():
            return None

        tab_id = self.tabData(index)
        return tab_id if isinstance(tab_id, str) else None

    def tab_ids(self) -> List[str | None]:
        """Get the IDs of all tabs, in display order."""
        return [self.tab_id_at(index) for index in range(self.count())]

    def _remove_close_button(self, index: int) -> None:
        """Remove the close button from a tab, whichever side the style puts it."""
        for side in (QTabBar.ButtonPosition.LeftSide, QTabBar.ButtonPosition.RightSide):
            if self.tabButton(index, side) is not None:
                self.setTabButton(index, side, None)  # type: ignore[arg-type]

    def set_tabs(self, tabs: List[TabProjection]) -> None:
        """
        Render a projection of the registry's tabs.

        Tabs are only rebuilt if the order of IDs has changed; otherwise titles
        and the current tab are updated in place, which keeps an in-progress
        drag intact.

        Args:
            tabs: Projection of every tab, in display order
        """
        self._updating = True
        try:
            if [tab.id for tab in tabs] != self.tab_ids():
                while self.count() > 0:
                    self.removeTab(0)

                for tab in tabs:
                    index = self.addTab(tab.title)
                    self.setTabData(index, tab.id)

                # The first tab is the primary tab and can't be closed
                if tabs:
                    self._remove_close_button(0)

            for index, tab in enumerate(tabs):
                if self.tabText(index) != tab.title:
                    self.setTabText(index, tab.title)

                self.setTabToolTip(index, tab.title)
                if tab.selected and self.currentIndex() != index:
                    self.setCurrentIndex(index)

        finally:
            self._updating = False

    def _handle_current_changed(self, index: int) -> None:
        """Report the user selecting a tab."""
        if self._updating:
            return

        tab_id = self.tab_id_at(index)
        if tab_id is None:
            return

        self.tab_selected.emit(tab_id)

    def _handle_tab_moved(self, from_index: int, to_index: int) -> None:
        """
        Report the user dragging a tab to a new position.

        Qt reports where the tab ended up; the registry expects the target index
        counted before the tab is removed from its old position.

        Args:
            from_index: Original index of the tab
            to_index: Index the tab now occupies
        """
        if self._updating:
            return

        # The primary tab is pinned to the first position
        if from_index == 0 or to_index == 0:
            self._updating = True
            try:
                self.moveTab(to_index, from_index)

            finally:
                self._updating = False

            return

        tab_id = self.tab_id_at(to_index)
        if tab_id is None:
            return

        self.tab_moved.emit(tab_id, to_index + 1 if to_index > from_index else to_index)

    def _handle_close_requested(self, index: int) -> None:
        """Report the user clicking a tab's close button."""
        tab_id = self.tab_id_at(index)
        if tab_id is None:
            return

        self.tab_close_requested.emit(tab_id)

    def _handle_context_menu_requested(self, pos: QPoint) -> None:
        """Report a right-click on a tab."""
        tab_id = self.tab_id_at(self.tabAt(pos))
        if tab_id is None:
            return

        global_pos = self.mapToGlobal(pos)
        self.tab_context_menu_requested.emit(global_pos.x(), global_pos.y(), tab_id)
