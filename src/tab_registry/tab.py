"""Tab records owned by the tab registry."""

import logging
from typing import Any, Callable


class TabCloseHandler:
    """Close-time capability attached to a tab; runs its callback at most once."""

    def __init__(self, callback: Callable[[], None]) -> None:
        """
        Initialize the close handler.

        Args:
            callback: Zero-argument callable to run when the tab closes
        """
        self._callback = callback
        self._invoked = False
        self._logger = logging.getLogger("TabCloseHandler")

    def is_invoked(self) -> bool:
        """Check if the handler has already run."""
        return self._invoked

    def invoke(self) -> None:
        """Run the callback unless it has already been run."""
        if self._invoked:
            self._logger.debug("Close handler already invoked, ignoring")
            return

        self._invoked = True
        self._callback()


class Tab:
    """
    One entry in the tab registry.

    The id, type and data are fixed when the tab is created.  Only the title
    can change afterwards.
    """

    def __init__(
        self,
        tab_id: str,
        tab_type: str,
        title: str,
        data: Any = None,
        close_handler: TabCloseHandler | None = None,
        placeholder: Any = None
    ) -> None:
        """
        Initialize a tab.

        Args:
            tab_id: Unique identifier for the tab
            tab_type: Tab type string
            title: Display title
            data: Optional type-specific payload
            close_handler: Optional handler to run when the tab closes
            placeholder: Opaque view port handle owned by this tab
        """
        self._tab_id = tab_id
        self._tab_type = tab_type
        self._title = title
        self._data = data
        self._close_handler = close_handler
        self._placeholder = placeholder

    def __repr__(self) -> str:
        return f"Tab(id={self._tab_id!r}, type={self._tab_type!r}, title={self._title!r})"

    def tab_id(self) -> str:
        """Get the tab's unique identifier."""
        return self._tab_id

    def tab_type(self) -> str:
        """Get the tab's type."""
        return self._tab_type

    def title(self) -> str:
        """Get the tab's display title."""
        return self._title

    def set_title(self, title: str) -> None:
        """Set the tab's display title."""
        self._title = title

    def data(self) -> Any:
        """Get the tab's type-specific payload, if any."""
        return self._data

    def close_handler(self) -> TabCloseHandler | None:
        """Get the tab's close handler, if any."""
        return self._close_handler

    def placeholder(self) -> Any:
        """Get the view port handle for this tab."""
        return self._placeholder
