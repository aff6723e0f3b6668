from typing import Any, Dict, List, Protocol


class TabNotifier(Protocol):
    """Interface used to announce tab events to the rest of the application."""

    def trigger(
        self,
        event: str,
        resource_kind: str,
        ids: List[str],
        extra_by_id: Dict[str, Any],
        is_local_origin: bool
    ) -> None:
        """
        Announce an event.

        Args:
            event: Event name ("add", "close" or "select")
            resource_kind: Kind of resource the event refers to ("tab")
            ids: IDs of the affected resources
            extra_by_id: Extra payload for each affected resource, keyed by ID
            is_local_origin: Whether the event originated in this window
        """
        ...
