import logging
import os

from PySide6.QtWidgets import QTextBrowser, QWidget


class ReaderWidget(QTextBrowser):
    """Read-only display of a document."""

    def __init__(self, path: str, parent: QWidget | None = None) -> None:
        """
        Initialize the reader and load the document.

        Args:
            path: Path of the document to display
            parent: Optional parent widget
        """
        super().__init__(parent)
        self._logger = logging.getLogger("ReaderWidget")
        self._path = path
        self.setOpenExternalLinks(True)
        self.reload()

    def path(self) -> str:
        """Get the path of the displayed document."""
        return self._path

    def reload(self) -> None:
        """Load the document from disk."""
        try:
            with open(self._path, 'r', encoding='utf-8', errors='replace') as f:
                content = f.read()

        except OSError as e:
            self._logger.exception("Failed to read document '%s': %s", self._path, str(e))
            self.setPlainText(f"Unable to read {self._path}: {e}")
            return

        extension = os.path.splitext(self._path)[1].lower()
        if extension in (".md", ".markdown"):
            self.setMarkdown(content)

        elif extension in (".html", ".htm"):
            self.setHtml(content)

        else:
            self.setPlainText(content)
