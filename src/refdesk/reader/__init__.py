"""Document reader tabs."""

from refdesk.reader.reader_viewer import ReaderViewer
from refdesk.reader.reader_widget import ReaderWidget

__all__ = [
    'ReaderViewer',
    'ReaderWidget',
]
