"""Shared fixtures for Refdesk widget tests."""

import os

import pytest

# Widget tests run without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from tab_registry import TabRegistry, TabRegistrySettings  # noqa: E402

from refdesk.tabs import TabBar, TabDeck, TabSignalNotifier  # noqa: E402


@pytest.fixture
def documents(tmp_path):
    """Create a few documents on disk and return their paths."""
    paths = {}
    for name, content in (
        ("notes.md", "# Notes\n\nSome *notes*."),
        ("paper.txt", "A plain text paper."),
        ("page.html", "<p>An <b>HTML</b> page.</p>"),
    ):
        path = os.path.join(tmp_path, name)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)

        paths[name] = path

    return paths


@pytest.fixture
def tab_widgets(qtbot):
    """Provide a tab bar, deck and notifier wired to a registry."""
    tab_bar = TabBar()
    deck = TabDeck()
    qtbot.addWidget(tab_bar)
    qtbot.addWidget(deck)
    notifier = TabSignalNotifier()
    registry = TabRegistry(
        deck,
        notifier,
        settings=TabRegistrySettings(primary_tab_title="Library", tab_bar_always_visible=False),
        tab_bar_view=tab_bar
    )
    registry.refresh()
    return registry, tab_bar, deck, notifier
