from enum import Enum


class TabType(str, Enum):
    """
    Well-known tab types.

    Tab types are plain strings so callers can introduce their own content-viewer
    types; these members compare equal to their string values.
    """
    LIBRARY = "library"
    READER = "reader"
