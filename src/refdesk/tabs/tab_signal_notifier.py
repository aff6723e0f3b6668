import logging
from typing import Any, Dict, List

from PySide6.QtCore import QObject, Signal


class TabSignalNotifier(QObject):
    """Announces tab events to the rest of the application as a Qt signal."""

    # event, resource kind, ids, extra payload by id, is local origin
    tab_event = Signal(str, str, object, object, bool)

    def __init__(self, parent: QObject | None = None) -> None:
        """Initialize the notifier."""
        super().__init__(parent)
        self._logger = logging.getLogger("TabSignalNotifier")

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
            event: Event name
            resource_kind: Kind of resource the event refers to
            ids: IDs of the affected resources
            extra_by_id: Extra payload for each affected resource, keyed by ID
            is_local_origin: Whether the event originated in this window
        """
        self._logger.debug("%s %s: %s", event, resource_kind, ", ".join(ids))
        self.tab_event.emit(event, resource_kind, list(ids), dict(extra_by_id), is_local_origin)
