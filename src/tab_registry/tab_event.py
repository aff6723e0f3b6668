from enum import Enum


# Resource kind reported with every tab notification
TAB_RESOURCE_KIND = "tab"


class TabEvent(str, Enum):
    """Events announced to the notifier."""
    ADD = "add"
    CLOSE = "close"
    SELECT = "select"
