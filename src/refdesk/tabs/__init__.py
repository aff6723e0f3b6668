"""Qt views and collaborators for the window's tab registry."""

from refdesk.tabs.tab_bar import TabBar
from refdesk.tabs.tab_context_menu import TabContextMenu
from refdesk.tabs.tab_deck import TabDeck
from refdesk.tabs.tab_signal_notifier import TabSignalNotifier

__all__ = [
    'TabBar',
    'TabContextMenu',
    'TabDeck',
    'TabSignalNotifier',
]
