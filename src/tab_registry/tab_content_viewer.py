"""Interface for collaborators that open content into tabs."""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass
class ContentOpenOptions:
    """Options passed when asking a content viewer to open content."""
    title: str | None = None
    open_in_background: bool = False


class TabContentViewer(Protocol):
    """
    Interface for the collaborator that opens content-viewer tabs.

    The registry uses it to re-open tabs on restore, and the context menu
    dispatcher uses it for the commands that act on a tab's content.
    """

    def content_exists(self, content_ref: Any) -> bool:
        """
        Check whether referenced content can still be opened.

        Args:
            content_ref: The tab data referring to the content

        Returns:
            True if the content still exists
        """
        ...

    def open(self, content_ref: Any, options: ContentOpenOptions) -> None:
        """
        Open content in a tab.

        Args:
            content_ref: The tab data referring to the content
            options: Title and foreground/background choice
        """
        ...

    def show_in_library(self, tab_id: str) -> bool:
        """
        Reveal the content shown in a tab within the primary view.

        Args:
            tab_id: ID of the tab whose content should be revealed

        Returns:
            True if the content was found and revealed
        """
        ...

    def open_in_window(self, tab_id: str) -> bool:
        """
        Open the content shown in a tab in a separate window.

        Args:
            tab_id: ID of the tab whose content should be opened

        Returns:
            True if a window was opened
        """
        ...
