"""
Registry of the tabs open in a single window.

The registry owns the ordered tab sequence and the selection state.  The first
tab is the primary tab: it is created with the registry and can never be closed
or moved.  Every other tab is an ephemeral content-viewer tab created by add()
and destroyed by close().

After each successful mutation the registry refreshes its views: the tab bar is
given a fresh projection of all tabs, listeners are told about the new state, and
the window chrome (title, tab bar visibility, tooltip) is brought up to date.
"""

import copy
from enum import Enum
import logging
from typing import Any, Callable, Dict, List, Tuple

from tab_registry.tab import Tab, TabCloseHandler
from tab_registry.tab_bar_view import TabBarView
from tab_registry.tab_content_viewer import ContentOpenOptions, TabContentViewer
from tab_registry.tab_event import TAB_RESOURCE_KIND, TabEvent
from tab_registry.tab_identifier_source import RandomTabIdentifierSource, TabIdentifierSource
from tab_registry.tab_notifier import TabNotifier
from tab_registry.tab_projection import TabProjection
from tab_registry.tab_registry_error import TabArgumentError, TabInvariantError, TabStateError
from tab_registry.tab_registry_listener import TabRegistryListener
from tab_registry.tab_registry_settings import TabRegistrySettings
from tab_registry.tab_state import TabState
from tab_registry.tab_view_port import TabViewPort
from tab_registry.tab_window_chrome import TabWindowChrome


def _is_index(value: Any) -> bool:
    """Check if a value is a real integer (bools are not indexes)."""
    return isinstance(value, int) and not isinstance(value, bool)


class TabRegistry:
    """Owns a window's tab sequence and its selection state machine."""

    def __init__(
        self,
        view_port: TabViewPort,
        notifier: TabNotifier,
        identifier_source: TabIdentifierSource | None = None,
        settings: TabRegistrySettings | None = None,
        tab_bar_view: TabBarView | None = None,
        chrome: TabWindowChrome | None = None
    ) -> None:
        """
        Initialize the registry with its primary tab.

        Args:
            view_port: Surface that hosts each tab's content
            notifier: Receiver for add/close/select announcements
            identifier_source: Source of tab IDs; random UUID-based if not given
            settings: Registry settings; defaults if not given
            tab_bar_view: Optional tab strip to keep in sync
            chrome: Optional window decorations to keep in sync
        """
        self._logger = logging.getLogger("TabRegistry")
        self._settings = settings if settings is not None else TabRegistrySettings.create_default()
        self._view_port = view_port
        self._notifier = notifier
        self._identifier_source: TabIdentifierSource = (
            identifier_source if identifier_source is not None
            else RandomTabIdentifierSource(self._settings.id_prefix)
        )
        self._tab_bar_view = tab_bar_view
        self._chrome = chrome
        self._listeners: List[TabRegistryListener] = []
        self._content_viewers: Dict[str, TabContentViewer] = {}

        primary_id = self._settings.primary_tab_id
        primary_tab = Tab(
            primary_id,
            self._settings.primary_tab_type,
            self._settings.primary_tab_title,
            placeholder=self._view_port.create_placeholder(primary_id)
        )
        self._tabs: List[Tab] = [primary_tab]
        self._selected_id = primary_id
        self._prev_selected_id: str | None = None
        self._view_port.set_visible(primary_id)

    def __len__(self) -> int:
        return len(self._tabs)

    def __contains__(self, tab_id: object) -> bool:
        return isinstance(tab_id, str) and self.index_of(tab_id) is not None

    @property
    def selected_id(self) -> str:
        """ID of the currently selected tab."""
        return self._selected_id

    @property
    def selected_index(self) -> int:
        """Position of the currently selected tab."""
        index = self.index_of(self._selected_id)
        assert index is not None, "Selected tab must be in the sequence"
        return index

    @property
    def primary_tab_id(self) -> str:
        """ID of the permanent primary tab."""
        return self._tabs[0].tab_id()

    def settings(self) -> TabRegistrySettings:
        """Get the registry settings."""
        return self._settings

    def set_tab_bar_view(self, tab_bar_view: TabBarView | None) -> None:
        """Set the tab strip to keep in sync."""
        self._tab_bar_view = tab_bar_view

    def set_window_chrome(self, chrome: TabWindowChrome | None) -> None:
        """Set the window decorations to keep in sync."""
        self._chrome = chrome

    def add_listener(self, listener: TabRegistryListener) -> None:
        """
        Register an observer to be told about every refresh.

        Args:
            listener: Observer to add
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: TabRegistryListener) -> None:
        """
        Unregister an observer.

        Args:
            listener: Observer to remove
        """
        if listener in self._listeners:
            self._listeners.remove(listener)

    def register_content_viewer(self, tab_type: str, viewer: TabContentViewer) -> None:
        """
        Register the content viewer responsible for a content-viewer tab type.

        Args:
            tab_type: Tab type the viewer opens
            viewer: The content viewer
        """
        self._content_viewers[self._normalize_type(tab_type)] = viewer

    def content_viewer(self, tab_type: str) -> TabContentViewer | None:
        """
        Get the content viewer registered for a tab type.

        Args:
            tab_type: Tab type to look up

        Returns:
            The registered viewer, or None if there isn't one
        """
        return self._content_viewers.get(self._normalize_type(tab_type))

    def index_of(self, tab_id: str) -> int | None:
        """
        Find the position of a tab.

        Args:
            tab_id: ID of the tab to find

        Returns:
            The tab's position in the sequence, or None if not found
        """
        for index, tab in enumerate(self._tabs):
            if tab.tab_id() == tab_id:
                return index

        return None

    def get_tab(self, tab_id: str) -> Tab | None:
        """
        Get a tab by its ID.

        Args:
            tab_id: ID of the tab to find

        Returns:
            The tab, or None if not found
        """
        index = self.index_of(tab_id)
        return self._tabs[index] if index is not None else None

    def tabs(self) -> List[Tab]:
        """Get all tabs, in display order."""
        return list(self._tabs)

    def tab_ids(self) -> List[str]:
        """Get the IDs of all tabs, in display order."""
        return [tab.tab_id() for tab in self._tabs]

    def projection(self) -> List[TabProjection]:
        """
        Build the public projection of all tabs.

        Returns:
            One TabProjection per tab, in display order
        """
        return [
            TabProjection(
                id=tab.tab_id(),
                type=tab.tab_type(),
                title=tab.title(),
                selected=tab.tab_id() == self._selected_id
            )
            for tab in self._tabs
        ]

    def _normalize_type(self, tab_type: str) -> str:
        """Store enum-valued tab types as their plain string value."""
        if isinstance(tab_type, Enum):
            return str(tab_type.value)

        return tab_type

    def _notify(self, event: TabEvent, tab_id: str, extra: Dict[str, Any]) -> None:
        """Announce an event for a single tab."""
        self._notifier.trigger(event.value, TAB_RESOURCE_KIND, [tab_id], extra, True)

    def refresh(self) -> None:
        """Project the current state to the tab bar, listeners and window chrome."""
        projection = self.projection()

        if self._tab_bar_view is not None:
            self._tab_bar_view.set_tabs(projection)

        for listener in list(self._listeners):
            listener.on_state_changed(projection)

        if self._chrome is None:
            return

        selected_tab = self._tabs[self.selected_index]
        app_title = self._settings.app_title
        title = selected_tab.title()
        self._chrome.set_window_title(f"{title} - {app_title}" if title else app_title)

        if not self._settings.tab_bar_always_visible:
            self._chrome.set_tab_bar_visible(len(self._tabs) > 1)

        self._chrome.hide_tooltip()

    def add(
        self,
        tab_type: str,
        title: str,
        data: Any = None,
        index: int | None = None,
        select: bool = False,
        on_close: Callable[[], None] | None = None
    ) -> Tuple[str, Any]:
        """
        Add a new tab.

        Args:
            tab_type: Tab type
            title: Display title
            data: Optional payload, passed to the notifier and kept for serialization
            index: Position to insert at (1 or greater); appended if not given.
                Positions past the end append.
            select: Whether to select the new tab.  If it is selected, closing it
                again before anything else is selected returns to the tab that was
                selected before it.
            on_close: Optional callback run once when the tab is closed

        Returns:
            Tuple of the new tab's ID and its view port placeholder

        Raises:
            TabArgumentError: If any argument is malformed
        """
        if not isinstance(tab_type, str):
            raise TabArgumentError(
                f"'tab_type' should be a string (was {type(tab_type).__name__})",
                {'tab_type': tab_type}
            )

        if not isinstance(title, str):
            raise TabArgumentError(
                f"'title' should be a string (was {type(title).__name__})",
                {'title': title}
            )

        if index is not None and (not _is_index(index) or index < 1):
            raise TabArgumentError(
                f"'index' should be an integer > 0 (was {index!r} ({type(index).__name__}))",
                {'index': index}
            )

        if on_close is not None and not callable(on_close):
            raise TabArgumentError(
                f"'on_close' should be callable (was {type(on_close).__name__})",
                {'on_close': on_close}
            )

        tab_type = self._normalize_type(tab_type)
        tab_id = self._identifier_source.new_id()
        if self.index_of(tab_id) is not None:
            raise TabInvariantError(f"Identifier source returned duplicate ID '{tab_id}'", {'tab_id': tab_id})

        placeholder = self._view_port.create_placeholder(tab_id)
        close_handler = TabCloseHandler(on_close) if on_close is not None else None
        tab = Tab(tab_id, tab_type, title, data, close_handler, placeholder)

        insert_index = len(self._tabs) if index is None else min(index, len(self._tabs))
        self._tabs.insert(insert_index, tab)
        self._logger.debug("Added %s tab '%s' at index %d", tab_type, tab_id, insert_index)

        self.refresh()
        self._notify(TabEvent.ADD, tab_id, {tab_id: data})

        if select:
            previous_id = self._selected_id
            self.select(tab_id)
            self._prev_selected_id = previous_id

        return tab_id, placeholder

    def rename(self, tab_id: str, title: str) -> None:
        """
        Set a new tab title.

        Args:
            tab_id: ID of the tab to rename
            title: New title

        Raises:
            TabArgumentError: If the title is not a string
        """
        if not isinstance(title, str):
            raise TabArgumentError(
                f"'title' should be a string (was {type(title).__name__})",
                {'title': title}
            )

        tab = self.get_tab(tab_id)
        if tab is None:
            return

        tab.set_title(title)
        self._logger.debug("Renamed tab '%s'", tab_id)
        self.refresh()

    def _next_selection_after_close(self, index: int) -> str:
        """
        Work out which tab to select when the selected tab at index is closed.

        Args:
            index: Position of the tab being closed

        Returns:
            ID of the tab to select instead
        """
        closing_id = self._tabs[index].tab_id()
        prev_id = self._prev_selected_id
        if prev_id is not None and prev_id != closing_id and self.index_of(prev_id) is not None:
            return prev_id

        if index + 1 < len(self._tabs):
            return self._tabs[index + 1].tab_id()

        return self._tabs[index - 1].tab_id()

    def close(self, tab_id: str | None = None) -> None:
        """
        Close a tab.

        Args:
            tab_id: ID of the tab to close; the selected tab if not given

        Raises:
            TabInvariantError: If the tab is the primary tab
        """
        if tab_id is None:
            tab_id = self._selected_id

        index = self.index_of(tab_id)
        if index == 0:
            raise TabInvariantError("Primary tab cannot be closed", {'tab_id': tab_id})

        if index is None:
            return

        tab = self._tabs[index]
        if tab_id == self._selected_id:
            self.select(self._next_selection_after_close(index))

        # Selection may have moved, so find the tab again before removing it
        self._tabs.remove(tab)
        if self._prev_selected_id == tab_id:
            self._prev_selected_id = None

        self._view_port.destroy_placeholder(tab.placeholder())
        self._logger.debug("Closed tab '%s'", tab_id)

        close_handler = tab.close_handler()
        try:
            if close_handler is not None:
                close_handler.invoke()

        except Exception:
            self._logger.exception("Close handler failed for tab '%s'", tab_id)
            raise

        finally:
            self._notify(TabEvent.CLOSE, tab_id, {})
            self.refresh()

    def close_all(self) -> None:
        """Close every tab except the primary tab."""
        while len(self._tabs) > 1:
            self.close(self._tabs[-1].tab_id())

    def close_others(self, tab_id: str) -> None:
        """
        Close every tab except the primary tab and the given one.

        Args:
            tab_id: ID of the tab to keep open
        """
        while True:
            remaining = [tab for tab in self._tabs[1:] if tab.tab_id() != tab_id]
            if not remaining:
                return

            self.close(remaining[-1].tab_id())

    def move(self, tab_id: str, new_index: int) -> None:
        """
        Move a tab to the specified index.

        The index is the visual position the tab should land at, counted before
        the tab is removed from its current position.  Indexes past the end of
        the sequence move the tab to the end.

        Args:
            tab_id: ID of the tab to move
            new_index: Target position (1 or greater)

        Raises:
            TabArgumentError: If new_index is not an integer > 0
            TabInvariantError: If the tab is the primary tab
        """
        if not _is_index(new_index) or new_index < 1:
            raise TabArgumentError(
                f"'new_index' should be an integer > 0 (was {new_index!r} ({type(new_index).__name__}))",
                {'new_index': new_index}
            )

        index = self.index_of(tab_id)
        if index == 0:
            raise TabInvariantError("Primary tab cannot be moved", {'tab_id': tab_id})

        if index is None:
            return

        new_index = min(new_index, len(self._tabs))
        if new_index == index:
            return

        if new_index > index:
            new_index -= 1

        # Dropping a tab just after itself leaves it where it is
        if new_index == index:
            return

        tab = self._tabs.pop(index)
        self._tabs.insert(new_index, tab)
        self._logger.debug("Moved tab '%s' from index %d to %d", tab_id, index, new_index)
        self.refresh()

    def select(self, tab_id: str) -> None:
        """
        Select a tab.

        Args:
            tab_id: ID of the tab to select
        """
        tab = self.get_tab(tab_id)
        if tab is None or tab_id == self._selected_id:
            return

        self._prev_selected_id = None
        self._selected_id = tab_id
        self._view_port.set_visible(tab_id)
        self._logger.debug("Selected tab '%s'", tab_id)
        self.refresh()
        self._notify(TabEvent.SELECT, tab_id, {tab_id: {'type': tab.tab_type()}})

    def select_prev(self) -> None:
        """Select the previous tab (closer to the primary tab), wrapping to the last."""
        index = self.selected_index
        target = self._tabs[index - 1] if index > 0 else self._tabs[-1]
        self.select(target.tab_id())

    def select_next(self) -> None:
        """Select the next tab (farther from the primary tab), wrapping to the first."""
        index = self.selected_index
        target = self._tabs[index + 1] if index + 1 < len(self._tabs) else self._tabs[0]
        self.select(target.tab_id())

    def select_last(self) -> None:
        """Select the last tab."""
        self.select(self._tabs[-1].tab_id())

    def jump(self, index: int) -> None:
        """
        Select the tab at a particular index.

        If the index points beyond the end of the sequence, the last tab is selected.

        Args:
            index: Position of the tab to select

        Raises:
            TabArgumentError: If index is not a non-negative integer
        """
        if not _is_index(index) or index < 0:
            raise TabArgumentError(
                f"'index' should be an integer >= 0 (was {index!r} ({type(index).__name__}))",
                {'index': index}
            )

        self.select(self._tabs[min(index, len(self._tabs) - 1)].tab_id())

    def serialize(self) -> List[Dict[str, Any]]:
        """
        Get the persistable state of all tabs.

        Tab IDs and view port handles are not included; they mean nothing once
        the window has been recreated.  Each entry holds its own copy of the
        tab data.

        Returns:
            List of tab state dictionaries, in display order
        """
        return [
            TabState(
                type=tab.tab_type(),
                title=tab.title(),
                data=copy.deepcopy(tab.data()),
                selected=tab.tab_id() == self._selected_id
            ).to_dict()
            for tab in self._tabs
        ]

    def restore(self, saved_state: List[Dict[str, Any]]) -> int:
        """
        Restore tabs from a list produced by serialize().

        The primary tab takes the saved primary title.  Content-viewer tabs are
        re-opened through the content viewer registered for their type; the one
        that was selected opens in the foreground, the rest in the background.
        Entries whose content no longer exists are skipped.

        Args:
            saved_state: List of tab state dictionaries

        Returns:
            Number of entries restored
        """
        restored = 0
        primary_type = self._tabs[0].tab_type()

        for state_dict in saved_state:
            try:
                state = TabState.from_dict(state_dict)

            except TabStateError as e:
                self._logger.warning("Skipping malformed tab state: %s", str(e))
                continue

            if state.type == primary_type:
                self.rename(self.primary_tab_id, state.title)
                restored += 1
                continue

            viewer = self.content_viewer(state.type)
            if viewer is None:
                self._logger.warning("Skipping tab state with no content viewer for type '%s'", state.type)
                continue

            if not viewer.content_exists(state.data):
                self._logger.warning("Skipping %s tab '%s': content no longer exists", state.type, state.title)
                continue

            viewer.open(state.data, ContentOpenOptions(title=state.title, open_in_background=not state.selected))
            restored += 1

        return restored
