from enum import Enum, auto


class TabMenuAction(Enum):
    """Commands offered by a tab's context menu."""
    SHOW_IN_LIBRARY = auto()
    OPEN_IN_WINDOW = auto()
    CLOSE = auto()
    CLOSE_OTHERS = auto()
