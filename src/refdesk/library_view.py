"""Library view shown in the primary tab."""

import os
from typing import List

from PySide6.QtWidgets import QListWidget, QListWidgetItem, QWidget
from PySide6.QtCore import Qt, Signal


class LibraryView(QListWidget):
    """List of the documents known to the library."""

    open_requested = Signal(str)  # path

    def __init__(self, parent: QWidget | None = None) -> None:
        """Initialize the library view."""
        super().__init__(parent)
        self.itemActivated.connect(self._handle_item_activated)

    def paths(self) -> List[str]:
        """Get the paths of all documents in the library, in display order."""
        return [self.item(row).data(Qt.ItemDataRole.UserRole) for row in range(self.count())]

    def add_path(self, path: str) -> None:
        """
        Add a document to the library if it isn't already there.

        Args:
            path: Path of the document
        """
        path = os.path.abspath(path)
        if path in self.paths():
            return

        item = QListWidgetItem(os.path.basename(path))
        item.setData(Qt.ItemDataRole.UserRole, path)
        item.setToolTip(path)
        self.addItem(item)

    def select_path(self, path: str) -> bool:
        """
        Select a document in the library.

        Args:
            path: Path of the document

        Returns:
            True if the document is in the library and was selected
        """
        path = os.path.abspath(path)
        for row in range(self.count()):
            item = self.item(row)
            if item.data(Qt.ItemDataRole.UserRole) == path:
                self.setCurrentItem(item)
                self.scrollToItem(item)
                return True

        return False

    def _handle_item_activated(self, item: QListWidgetItem) -> None:
        """Ask for an activated document to be opened."""
        path = item.data(Qt.ItemDataRole.UserRole)
        if isinstance(path, str):
            self.open_requested.emit(path)
