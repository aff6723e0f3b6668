"""Settings for a window's tab registry."""

from dataclasses import dataclass, field
import json
import os
import sys
from typing import ClassVar, Dict

from tab_registry.tab_registry_error import TabSettingsError
from tab_registry.tab_type import TabType


def _default_tab_bar_always_visible() -> bool:
    """On macOS the tab bar is part of the title bar and is never hidden."""
    return sys.platform == "darwin"


@dataclass
class TabRegistrySettings:
    """
    Tab registry settings.
    """
    app_title: str = "Refdesk"
    primary_tab_id: str = "library-pane"
    primary_tab_type: str = TabType.LIBRARY.value
    primary_tab_title: str = ""
    tab_bar_always_visible: bool = field(default_factory=_default_tab_bar_always_visible)
    id_prefix: str = "tab-"

    # On-disk keys and the JSON types their values must have
    _FIELD_TYPES: ClassVar[Dict[str, type]] = {
        "appTitle": str,
        "primaryTabId": str,
        "primaryTabType": str,
        "primaryTabTitle": str,
        "tabBarAlwaysVisible": bool,
        "idPrefix": str,
    }

    @classmethod
    def create_default(cls) -> "TabRegistrySettings":
        """Create a new TabRegistrySettings object with default values."""
        return cls()

    @classmethod
    def load(cls, path: str) -> "TabRegistrySettings":
        """
        Load settings from file.

        Missing keys keep their default values and unknown keys are ignored.

        Args:
            path: Path to the settings file

        Returns:
            TabRegistrySettings object with loaded values

        Raises:
            json.JSONDecodeError: If file contains invalid JSON
            TabSettingsError: If the file does not hold a settings object or a
                value has the wrong type
        """
        settings = cls.create_default()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise TabSettingsError(
                f"Settings file should hold an object (was {type(data).__name__})",
                {'path': path}
            )

        for key, expected_type in cls._FIELD_TYPES.items():
            if key in data and not isinstance(data[key], expected_type):
                raise TabSettingsError(
                    f"Setting '{key}' should be {expected_type.__name__} (was {data[key]!r})",
                    {'path': path, 'key': key}
                )

        settings.app_title = data.get("appTitle", settings.app_title)
        settings.primary_tab_id = data.get("primaryTabId", settings.primary_tab_id)
        settings.primary_tab_type = data.get("primaryTabType", settings.primary_tab_type)
        settings.primary_tab_title = data.get("primaryTabTitle", settings.primary_tab_title)
        settings.tab_bar_always_visible = data.get("tabBarAlwaysVisible", settings.tab_bar_always_visible)
        settings.id_prefix = data.get("idPrefix", settings.id_prefix)

        return settings

    def save(self, path: str) -> None:
        """
        Save settings to file.

        Args:
            path: Path to save settings file

        Raises:
            OSError: If unable to create directory or write file
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        data = {
            "appTitle": self.app_title,
            "primaryTabId": self.primary_tab_id,
            "primaryTabType": self.primary_tab_type,
            "primaryTabTitle": self.primary_tab_title,
            "tabBarAlwaysVisible": self.tab_bar_always_visible,
            "idPrefix": self.id_prefix
        }

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
