"""Main window implementation for the Refdesk application."""

import json
import logging
import os
from typing import List

from PySide6.QtWidgets import QFileDialog, QMainWindow, QToolTip, QVBoxLayout, QWidget
from PySide6.QtCore import QEvent
from PySide6.QtGui import QAction, QKeySequence

from tab_registry import TabMenuDispatcher, TabRegistry, TabRegistrySettings, TabType

from refdesk.library_view import LibraryView
from refdesk.reader.reader_viewer import ReaderViewer
from refdesk.tabs.tab_bar import TabBar
from refdesk.tabs.tab_context_menu import TabContextMenu
from refdesk.tabs.tab_deck import TabDeck
from refdesk.tabs.tab_signal_notifier import TabSignalNotifier


class MainWindowChrome:
    """Window decorations kept in sync by the tab registry."""

    def __init__(self, window: QMainWindow, tab_bar: TabBar) -> None:
        """
        Initialize the chrome.

        Args:
            window: Window whose title is updated
            tab_bar: Tab bar shown or hidden as tabs come and go
        """
        self._window = window
        self._tab_bar = tab_bar

    def set_window_title(self, title: str) -> None:
        """Set the window title."""
        self._window.setWindowTitle(title)

    def set_tab_bar_visible(self, visible: bool) -> None:
        """Show or hide the tab bar."""
        self._tab_bar.setVisible(visible)

    def hide_tooltip(self) -> None:
        """Dismiss any tooltip that is currently showing."""
        QToolTip.hideText()


class MainWindow(QMainWindow):
    """Main window for the Refdesk application."""

    def __init__(self, settings: TabRegistrySettings | None = None, session_path: str | None = None) -> None:
        """
        Initialize the main window.

        Args:
            settings: Tab registry settings; defaults if not given
            session_path: File the open tabs are saved to on close and restored
                from by restore_session(); no session is kept if not given
        """
        super().__init__()

        self._logger = logging.getLogger("MainWindow")
        self._session_path = session_path

        central_widget = QWidget()
        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)
        self.setCentralWidget(central_widget)

        self._tab_bar = TabBar()
        layout.addWidget(self._tab_bar)

        self._deck = TabDeck()
        layout.addWidget(self._deck)

        self._notifier = TabSignalNotifier(self)

        # The registry belongs to this window and lives exactly as long as it does
        self._registry = TabRegistry(
            self._deck,
            self._notifier,
            settings=settings,
            tab_bar_view=self._tab_bar,
            chrome=MainWindowChrome(self, self._tab_bar)
        )
        self._menu_dispatcher = TabMenuDispatcher(self._registry)

        # The library view lives in the primary tab
        self._library_view = LibraryView()
        primary_placeholder = self._deck.placeholder(self._registry.primary_tab_id)
        assert primary_placeholder is not None, "Primary tab must have a placeholder"
        primary_placeholder.layout().addWidget(self._library_view)

        self._reader_viewer = ReaderViewer(self._registry, self._library_view)
        self._registry.register_content_viewer(TabType.READER, self._reader_viewer)
        self._library_view.open_requested.connect(self._reader_viewer.open_path)

        self._tab_bar.tab_selected.connect(self._registry.select)
        self._tab_bar.tab_moved.connect(self._registry.move)
        self._tab_bar.tab_close_requested.connect(self._registry.close)
        self._tab_bar.tab_context_menu_requested.connect(self._show_tab_context_menu)

        self._create_actions()
        self._create_menus()

        self.resize(1280, 900)
        self._registry.refresh()

    def _create_actions(self) -> None:
        """Create window actions and their keyboard shortcuts."""
        self._open_action = QAction("&Open...", self)
        self._open_action.setShortcut(QKeySequence.StandardKey.Open)
        self._open_action.triggered.connect(self._open_documents)

        self._close_tab_action = QAction("&Close Tab", self)
        self._close_tab_action.setShortcut(QKeySequence("Ctrl+W"))
        self._close_tab_action.triggered.connect(self._close_current_tab)

        self._close_all_action = QAction("Close &All Tabs", self)
        self._close_all_action.setShortcut(QKeySequence("Ctrl+Shift+W"))
        self._close_all_action.triggered.connect(self._registry.close_all)

        self._next_tab_action = QAction("&Next Tab", self)
        self._next_tab_action.setShortcut(QKeySequence("Ctrl+Tab"))
        self._next_tab_action.triggered.connect(self._registry.select_next)

        self._prev_tab_action = QAction("&Previous Tab", self)
        self._prev_tab_action.setShortcut(QKeySequence("Ctrl+Shift+Tab"))
        self._prev_tab_action.triggered.connect(self._registry.select_prev)

        self._jump_actions: List[QAction] = []
        for index in range(8):
            action = QAction(f"Tab {index + 1}", self)
            action.setShortcut(QKeySequence(f"Ctrl+{index + 1}"))
            action.setData(index)
            action.triggered.connect(self._handle_jump)
            self.addAction(action)
            self._jump_actions.append(action)

        self._last_tab_action = QAction("&Last Tab", self)
        self._last_tab_action.setShortcut(QKeySequence("Ctrl+9"))
        self._last_tab_action.triggered.connect(self._registry.select_last)

    def _create_menus(self) -> None:
        """Create the menu bar."""
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&File")
        file_menu.addAction(self._open_action)
        file_menu.addSeparator()
        file_menu.addAction(self._close_tab_action)
        file_menu.addAction(self._close_all_action)

        window_menu = menu_bar.addMenu("&Window")
        window_menu.addAction(self._next_tab_action)
        window_menu.addAction(self._prev_tab_action)
        window_menu.addAction(self._last_tab_action)

    def registry(self) -> TabRegistry:
        """Get the window's tab registry."""
        return self._registry

    def notifier(self) -> TabSignalNotifier:
        """Get the notifier that announces this window's tab events."""
        return self._notifier

    def reader_viewer(self) -> ReaderViewer:
        """Get the viewer that opens reader tabs."""
        return self._reader_viewer

    def tab_bar(self) -> TabBar:
        """Get the window's tab bar."""
        return self._tab_bar

    def open_document(self, path: str, open_in_background: bool = False) -> str:
        """
        Open a document in a reader tab.

        Args:
            path: Path of the document
            open_in_background: Whether to leave the current selection alone

        Returns:
            ID of the reader tab
        """
        return self._reader_viewer.open_path(path, open_in_background=open_in_background)

    def save_session(self) -> None:
        """Save the open tabs to the session file."""
        if self._session_path is None:
            return

        try:
            directory = os.path.dirname(self._session_path)
            if directory:
                os.makedirs(directory, exist_ok=True)

            with open(self._session_path, 'w', encoding='utf-8') as f:
                json.dump({'tabs': self._registry.serialize()}, f, indent=4)

        except OSError as e:
            self._logger.error("Failed to save session to '%s': %s", self._session_path, str(e))

    def restore_session(self) -> int:
        """
        Reopen the tabs saved in the session file.

        Returns:
            Number of tabs restored
        """
        if self._session_path is None or not os.path.exists(self._session_path):
            self._logger.debug("No saved session found")
            return 0

        try:
            with open(self._session_path, encoding='utf-8') as f:
                state = json.load(f)

        except (OSError, json.JSONDecodeError) as e:
            self._logger.error("Failed to load session from '%s': %s", self._session_path, str(e))
            return 0

        tabs = state.get('tabs') if isinstance(state, dict) else None
        if not isinstance(tabs, list):
            self._logger.warning("Session file '%s' has no tab list", self._session_path)
            return 0

        return self._registry.restore(tabs)

    def _open_documents(self) -> None:
        """Ask the user for documents and open them."""
        paths, _ = QFileDialog.getOpenFileNames(self, "Open Documents")
        for path in paths:
            self.open_document(path)

    def _close_current_tab(self) -> None:
        """Close the selected tab, unless it's the primary tab."""
        if self._registry.selected_id == self._registry.primary_tab_id:
            return

        self._registry.close()

    def _handle_jump(self) -> None:
        """Jump to the tab for the triggering shortcut."""
        action = self.sender()
        if not isinstance(action, QAction):
            return

        self._registry.jump(action.data())

    def _show_tab_context_menu(self, x: int, y: int, tab_id: str) -> None:
        """
        Show the context menu for a tab.

        Args:
            x: Global x coordinate
            y: Global y coordinate
            tab_id: ID of the tab that was right-clicked
        """
        menu = TabContextMenu(self._menu_dispatcher, tab_id, self)
        menu.aboutToHide.connect(menu.deleteLater)
        menu.popup_at(x, y)

    def closeEvent(self, event: QEvent) -> None:
        """Save the session and close all content tabs before the window goes away."""
        self.save_session()
        self._registry.close_all()
        event.accept()
