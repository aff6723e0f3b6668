"""Content viewer that opens documents in reader tabs."""

import logging
import os
from typing import Any, Dict, List

from PySide6.QtWidgets import QMainWindow, QWidget

from tab_registry import ContentOpenOptions, TabRegistry, TabType

from refdesk.library_view import LibraryView
from refdesk.reader.reader_widget import ReaderWidget


class ReaderViewer:
    """
    Opens documents in reader tabs.

    Reader tabs carry {"path": <absolute path>} as their data, which is what gets
    persisted and handed back on restore.
    """

    def __init__(self, registry: TabRegistry, library_view: LibraryView | None = None) -> None:
        """
        Initialize the reader viewer.

        Args:
            registry: Registry to open reader tabs in
            library_view: Optional library view used by show_in_library()
        """
        self._registry = registry
        self._library_view = library_view
        self._logger = logging.getLogger("ReaderViewer")
        self._tab_paths: Dict[str, str] = {}
        self._windows: List[QMainWindow] = []

    def library_view(self) -> LibraryView | None:
        """Get the library view documents are listed in."""
        return self._library_view

    def _path_from_ref(self, content_ref: Any) -> str | None:
        """Extract the document path from tab data."""
        if not isinstance(content_ref, dict):
            return None

        path = content_ref.get("path")
        return path if isinstance(path, str) else None

    def find_tab_by_path(self, path: str) -> str | None:
        """
        Find the reader tab showing a document.

        Args:
            path: Path of the document

        Returns:
            ID of the tab, or None if the document isn't open
        """
        path = os.path.abspath(path)
        for tab_id, tab_path in self._tab_paths.items():
            if tab_path == path:
                return tab_id

        return None

    def path_for_tab(self, tab_id: str) -> str | None:
        """Get the document path shown in a reader tab."""
        return self._tab_paths.get(tab_id)

    def content_exists(self, content_ref: Any) -> bool:
        """Check whether a document still exists on disk."""
        path = self._path_from_ref(content_ref)
        return path is not None and os.path.isfile(path)

    def open(self, content_ref: Any, options: ContentOpenOptions) -> None:
        """
        Open a document in a reader tab.

        If the document is already open its tab is reused.

        Args:
            content_ref: Tab data of the form {"path": <path>}
            options: Title and foreground/background choice
        """
        path = self._path_from_ref(content_ref)
        if path is None:
            self._logger.warning("Cannot open reader tab for %r", content_ref)
            return

        self.open_path(path, options.title, options.open_in_background)

    def open_path(self, path: str, title: str | None = None, open_in_background: bool = False) -> str:
        """
        Open a document in a reader tab.

        Args:
            path: Path of the document
            title: Tab title; the file name if not given
            open_in_background: Whether to leave the current selection alone

        Returns:
            ID of the tab showing the document
        """
        path = os.path.abspath(path)
        existing_id = self.find_tab_by_path(path)
        if existing_id is not None:
            if not open_in_background:
                self._registry.select(existing_id)

            return existing_id

        if self._library_view is not None:
            self._library_view.add_path(path)

        tab_id, placeholder = self._registry.add(
            TabType.READER,
            os.path.basename(path) if title is None else title,
            data={"path": path},
            select=not open_in_background,
            on_close=lambda: self._handle_tab_closed(tab_id)
        )
        self._tab_paths[tab_id] = path

        placeholder.layout().addWidget(ReaderWidget(path, placeholder))
        self._logger.debug("Opened '%s' in tab '%s'", path, tab_id)
        return tab_id

    def _handle_tab_closed(self, tab_id: str) -> None:
        """Forget a reader tab that has been closed."""
        self._tab_paths.pop(tab_id, None)

    def show_in_library(self, tab_id: str) -> bool:
        """Select a reader tab's document in the library view."""
        path = self._tab_paths.get(tab_id)
        if path is None or self._library_view is None:
            return False

        return self._library_view.select_path(path)

    def open_in_window(self, tab_id: str) -> bool:
        """Open a reader tab's document in its own window."""
        path = self._tab_paths.get(tab_id)
        if path is None:
            return False

        # Closed windows are only hidden, so drop them before adding another
        self._windows = [w for w in self._windows if w.isVisible()]

        window = QMainWindow()
        window.setWindowTitle(os.path.basename(path))
        window.setCentralWidget(ReaderWidget(path))
        window.resize(800, 1000)
        window.show()
        self._windows.append(window)
        return True

    def windows(self) -> List[QWidget]:
        """Get the separate reader windows that are open."""
        return [window for window in self._windows if window.isVisible()]
