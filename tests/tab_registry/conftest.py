"""Shared fixtures and fake collaborators for tab registry tests."""

from typing import Any, Dict, List, Tuple

import pytest

from tab_registry import ContentOpenOptions, TabProjection, TabRegistry, TabRegistrySettings


class FakePlaceholder:
    """Stand-in for a view port container."""

    def __init__(self, tab_id: str) -> None:
        self.tab_id = tab_id
        self.destroyed = False

    def __repr__(self) -> str:
        return f"FakePlaceholder({self.tab_id!r})"


class RecordingViewPort:
    """View port that records every call made to it."""

    def __init__(self) -> None:
        self.created: List[FakePlaceholder] = []
        self.destroyed: List[FakePlaceholder] = []
        self.visible: List[str] = []

    def create_placeholder(self, tab_id: str) -> FakePlaceholder:
        placeholder = FakePlaceholder(tab_id)
        self.created.append(placeholder)
        return placeholder

    def destroy_placeholder(self, placeholder: FakePlaceholder) -> None:
        placeholder.destroyed = True
        self.destroyed.append(placeholder)

    def set_visible(self, tab_id: str) -> None:
        self.visible.append(tab_id)

    def live_ids(self) -> List[str]:
        return [p.tab_id for p in self.created if not p.destroyed]


class RecordingNotifier:
    """Notifier that records every event it is asked to announce."""

    def __init__(self) -> None:
        self.events: List[Tuple[str, str, List[str], Dict[str, Any], bool]] = []

    def trigger(
        self,
        event: str,
        resource_kind: str,
        ids: List[str],
        extra_by_id: Dict[str, Any],
        is_local_origin: bool
    ) -> None:
        self.events.append((event, resource_kind, list(ids), extra_by_id, is_local_origin))

    def names(self) -> List[str]:
        return [event[0] for event in self.events]

    def clear(self) -> None:
        self.events.clear()


class RecordingTabBarView:
    """Tab bar that records each projection it is given."""

    def __init__(self) -> None:
        self.projections: List[List[TabProjection]] = []

    def set_tabs(self, tabs: List[TabProjection]) -> None:
        self.projections.append(list(tabs))

    def last(self) -> List[TabProjection]:
        return self.projections[-1]


class RecordingChrome:
    """Window chrome that records titles and tab bar visibility."""

    def __init__(self) -> None:
        self.titles: List[str] = []
        self.tab_bar_visible: List[bool] = []
        self.tooltip_hides = 0

    def set_window_title(self, title: str) -> None:
        self.titles.append(title)

    def set_tab_bar_visible(self, visible: bool) -> None:
        self.tab_bar_visible.append(visible)

    def hide_tooltip(self) -> None:
        self.tooltip_hides += 1


class SequentialIdentifierSource:
    """Identifier source producing predictable IDs."""

    def __init__(self, prefix: str = "tab-") -> None:
        self._prefix = prefix
        self._count = 0

    def new_id(self) -> str:
        self._count += 1
        return f"{self._prefix}{self._count}"


class FakeContentViewer:
    """
    Content viewer that opens content by adding tabs to a registry.

    Content is considered to exist if its "item_id" is in the existing set.
    """

    def __init__(self, registry: TabRegistry, tab_type: str = "reader") -> None:
        self.registry = registry
        self.tab_type = tab_type
        self.existing: set = set()
        self.opened: List[Tuple[Any, ContentOpenOptions]] = []
        self.shown_in_library: List[str] = []
        self.opened_in_window: List[str] = []

    def content_exists(self, content_ref: Any) -> bool:
        return isinstance(content_ref, dict) and content_ref.get("item_id") in self.existing

    def open(self, content_ref: Any, options: ContentOpenOptions) -> None:
        self.opened.append((content_ref, options))
        self.registry.add(
            self.tab_type,
            options.title or "",
            data=content_ref,
            select=not options.open_in_background
        )

    def show_in_library(self, tab_id: str) -> bool:
        self.shown_in_library.append(tab_id)
        return tab_id in self.registry

    def open_in_window(self, tab_id: str) -> bool:
        self.opened_in_window.append(tab_id)
        return tab_id in self.registry


class Helpers:
    """Helper functions for building registries in tests."""

    @staticmethod
    def add_reader(registry: TabRegistry, title: str, item_id: int | None = None, **kwargs: Any) -> str:
        data = {"item_id": item_id} if item_id is not None else None
        tab_id, _ = registry.add("reader", title, data=data, **kwargs)
        return tab_id

    @staticmethod
    def titles(registry: TabRegistry) -> List[str]:
        return [tab.title() for tab in registry.tabs()]

    @staticmethod
    def check_invariants(registry: TabRegistry) -> None:
        tabs = registry.tabs()
        assert len(tabs) > 0
        assert tabs[0].tab_type() == registry.settings().primary_tab_type
        assert tabs[0].tab_id() == registry.primary_tab_id
        ids = [tab.tab_id() for tab in tabs]
        assert len(ids) == len(set(ids))
        assert registry.selected_id in ids


@pytest.fixture
def helpers():
    """Provide helper functions."""
    return Helpers


@pytest.fixture
def settings():
    """Settings with the tab bar visibility rule enabled."""
    return TabRegistrySettings(app_title="Refdesk", primary_tab_title="My Library", tab_bar_always_visible=False)


@pytest.fixture
def view_port():
    """Provide a recording view port."""
    return RecordingViewPort()


@pytest.fixture
def notifier():
    """Provide a recording notifier."""
    return RecordingNotifier()


@pytest.fixture
def tab_bar_view():
    """Provide a recording tab bar."""
    return RecordingTabBarView()


@pytest.fixture
def chrome():
    """Provide recording window chrome."""
    return RecordingChrome()


@pytest.fixture
def registry(view_port, notifier, tab_bar_view, chrome, settings):
    """Provide a registry wired to recording collaborators."""
    return TabRegistry(
        view_port,
        notifier,
        identifier_source=SequentialIdentifierSource(),
        settings=settings,
        tab_bar_view=tab_bar_view,
        chrome=chrome
    )


@pytest.fixture
def content_viewer(registry):
    """Provide a fake reader content viewer registered with the registry."""
    viewer = FakeContentViewer(registry)
    registry.register_content_viewer("reader", viewer)
    return viewer
