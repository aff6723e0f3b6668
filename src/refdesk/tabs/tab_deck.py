from typing import Dict

from PySide6.QtWidgets import QStackedWidget, QVBoxLayout, QWidget


class TabDeck(QStackedWidget):
    """Stack of tab containers, showing one tab's content at a time."""

    def __init__(self, parent: QWidget | None = None) -> None:
        """Initialize the deck."""
        super().__init__(parent)
        self._placeholders: Dict[str, QWidget] = {}

    def create_placeholder(self, tab_id: str) -> QWidget:
        """
        Create an empty container for a tab's content.

        Args:
            tab_id: ID of the tab the container belongs to

        Returns:
            The container widget; content goes into its layout
        """
        placeholder = QWidget()
        placeholder.setObjectName(tab_id)
        layout = QVBoxLayout(placeholder)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.addWidget(placeholder)
        self._placeholders[tab_id] = placeholder
        return placeholder

    def destroy_placeholder(self, placeholder: QWidget) -> None:
        """
        Remove and destroy a tab's container.

        Args:
            placeholder: Container returned by create_placeholder()
        """
        self._placeholders.pop(placeholder.objectName(), None)
        self.removeWidget(placeholder)
        placeholder.deleteLater()

    def set_visible(self, tab_id: str) -> None:
        """
        Show the container for a tab.

        Args:
            tab_id: ID of the tab to show
        """
        placeholder = self._placeholders.get(tab_id)
        if placeholder is None:
            return

        self.setCurrentWidget(placeholder)

    def placeholder(self, tab_id: str) -> QWidget | None:
        """Get the container for a tab, if it exists."""
        return self._placeholders.get(tab_id)
