from typing import Any, Protocol


class TabViewPort(Protocol):
    """Interface for the surface that displays one tab's content at a time."""

    def create_placeholder(self, tab_id: str) -> Any:
        """
        Create the container a tab's content will be rendered into.

        Args:
            tab_id: ID of the tab the container belongs to

        Returns:
            Opaque handle for the container
        """
        ...

    def destroy_placeholder(self, placeholder: Any) -> None:
        """
        Destroy a container previously returned by create_placeholder().

        Args:
            placeholder: Handle of the container to destroy
        """
        ...

    def set_visible(self, tab_id: str) -> None:
        """
        Make the container for a tab the visible one.

        Args:
            tab_id: ID of the tab to show
        """
        ...
