from typing import Protocol


class TabWindowChrome(Protocol):
    """Interface for the window decorations the registry keeps in sync."""

    def set_window_title(self, title: str) -> None:
        """Set the window title."""
        ...

    def set_tab_bar_visible(self, visible: bool) -> None:
        """Show or hide the tab bar."""
        ...

    def hide_tooltip(self) -> None:
        """Dismiss any tooltip that is currently showing."""
        ...
