"""
Tab registry and selection state machine for a single window.

This package owns the ordered set of tabs open in a window, enforces the rules
for adding, closing, moving and selecting them, and keeps external views in
sync.  It has no dependency on any GUI toolkit; views, notifiers and content
viewers are supplied by the application through small interfaces.
"""

from tab_registry.tab import Tab, TabCloseHandler
from tab_registry.tab_bar_view import TabBarView
from tab_registry.tab_content_viewer import ContentOpenOptions, TabContentViewer
from tab_registry.tab_event import TAB_RESOURCE_KIND, TabEvent
from tab_registry.tab_identifier_source import RandomTabIdentifierSource, TabIdentifierSource
from tab_registry.tab_menu_action import TabMenuAction
from tab_registry.tab_menu_dispatcher import TabMenuDispatcher
from tab_registry.tab_notifier import TabNotifier
from tab_registry.tab_projection import TabProjection
from tab_registry.tab_registry import TabRegistry
from tab_registry.tab_registry_error import (
    TabArgumentError,
    TabInvariantError,
    TabRegistryError,
    TabSettingsError,
    TabStateError,
)
from tab_registry.tab_registry_listener import TabRegistryListener
from tab_registry.tab_registry_settings import TabRegistrySettings
from tab_registry.tab_state import TabState
from tab_registry.tab_type import TabType
from tab_registry.tab_view_port import TabViewPort
from tab_registry.tab_window_chrome import TabWindowChrome

__all__ = [
    # Exceptions
    'TabRegistryError',
    'TabArgumentError',
    'TabInvariantError',
    'TabSettingsError',
    'TabStateError',
    # Types
    'Tab',
    'TabCloseHandler',
    'TabEvent',
    'TAB_RESOURCE_KIND',
    'TabMenuAction',
    'TabProjection',
    'TabState',
    'TabType',
    'ContentOpenOptions',
    # Interfaces
    'TabBarView',
    'TabContentViewer',
    'TabIdentifierSource',
    'TabNotifier',
    'TabRegistryListener',
    'TabViewPort',
    'TabWindowChrome',
    # Core classes
    'RandomTabIdentifierSource',
    'TabMenuDispatcher',
    'TabRegistry',
    'TabRegistrySettings',
]
