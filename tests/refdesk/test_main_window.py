"""Tests for the main window, reader tabs and the library view."""

import json
import os

import pytest

from tab_registry import TabMenuAction, TabMenuDispatcher, TabRegistrySettings

from refdesk.main_window import MainWindow
from refdesk.reader import ReaderWidget


@pytest.fixture
def window(qtbot):
    """Provide a main window with the tab bar visibility rule enabled."""
    main_window = MainWindow(TabRegistrySettings(app_title="Refdesk", tab_bar_always_visible=False))
    qtbot.addWidget(main_window)
    return main_window


class TestMainWindow:
    """Test the main window's tab handling."""

    def test_initial_state(self, window):
        """Test a freshly opened window."""
        assert window.windowTitle() == "Refdesk"
        assert window.registry().tab_ids() == ["library-pane"]
        assert not window.tab_bar().isVisibleTo(window)

    def test_open_document(self, window, documents):
        """Test opening a document in a reader tab."""
        tab_id = window.open_document(documents["notes.md"])

        registry = window.registry()
        assert registry.selected_id == tab_id
        assert registry.get_tab(tab_id).title() == "notes.md"
        assert registry.get_tab(tab_id).data() == {"path": os.path.abspath(documents["notes.md"])}
        assert window.windowTitle() == "notes.md - Refdesk"
        assert window.tab_bar().isVisibleTo(window)
        assert window.tab_bar().tab_ids() == registry.tab_ids()

        placeholder = registry.get_tab(tab_id).placeholder()
        assert isinstance(placeholder.layout().itemAt(0).widget(), ReaderWidget)

    def test_open_same_document_reuses_tab(self, window, documents):
        """Test that opening an open document selects its existing tab."""
        tab_id = window.open_document(documents["notes.md"])
        window.open_document(documents["paper.txt"])

        assert window.open_document(documents["notes.md"]) == tab_id
        assert len(window.registry()) == 3
        assert window.registry().selected_id == tab_id

    def test_open_in_background(self, window, documents):
        """Test that background documents leave the selection alone."""
        window.open_document(documents["notes.md"], open_in_background=True)

        assert len(window.registry()) == 2
        assert window.registry().selected_id == "library-pane"
        assert window.windowTitle() == "Refdesk"

    def test_open_adds_to_library(self, window, documents):
        """Test that opened documents are listed in the library."""
        window.open_document(documents["notes.md"])
        window.open_document(documents["notes.md"])

        library_view = window.reader_viewer().library_view()
        assert library_view.paths() == [os.path.abspath(documents["notes.md"])]

    def test_closing_tab_forgets_document(self, window, documents):
        """Test that a closed reader tab's document can be opened afresh."""
        tab_id = window.open_document(documents["notes.md"])
        window.registry().close(tab_id)

        viewer = window.reader_viewer()
        assert viewer.find_tab_by_path(documents["notes.md"]) is None
        assert viewer.path_for_tab(tab_id) is None
        assert window.open_document(documents["notes.md"]) != tab_id
        assert not window.tab_bar().isVisibleTo(window)

    def test_tab_bar_close_button_closes_tab(self, window, documents):
        """Test that the tab bar's close request reaches the registry."""
        tab_id = window.open_document(documents["notes.md"])

        window.tab_bar().tabCloseRequested.emit(1)

        assert tab_id not in window.registry()

    def test_tab_bar_click_selects_tab(self, window, documents):
        """Test that picking a tab in the tab bar selects it."""
        tab_id = window.open_document(documents["notes.md"], open_in_background=True)

        window.tab_bar().setCurrentIndex(1)

        assert window.registry().selected_id == tab_id

    def test_jump_shortcuts(self, window, documents):
        """Test the numbered tab shortcuts and the last tab shortcut."""
        first_id = window.open_document(documents["notes.md"])
        second_id = window.open_document(documents["paper.txt"])

        window._jump_actions[0].trigger()
        assert window.registry().selected_id == "library-pane"

        window._jump_actions[1].trigger()
        assert window.registry().selected_id == first_id

        window._jump_actions[7].trigger()
        assert window.registry().selected_id == second_id

    def test_close_tab_shortcut_skips_primary(self, window, documents):
        """Test that closing the current tab never tries to close the primary tab."""
        tab_id = window.open_document(documents["notes.md"])

        window._close_tab_action.trigger()
        assert tab_id not in window.registry()

        window._close_tab_action.trigger()
        assert window.registry().tab_ids() == ["library-pane"]

    def test_closing_window_closes_tabs(self, window, documents):
        """Test that closing the window closes every reader tab."""
        window.open_document(documents["notes.md"])
        window.open_document(documents["paper.txt"])
        window.show()

        window.close()

        assert window.registry().tab_ids() == ["library-pane"]


class TestReaderViewer:
    """Test the reader content viewer behind the context menu and restore."""

    def test_content_exists(self, window, documents, tmp_path):
        """Test checking whether saved documents are still on disk."""
        viewer = window.reader_viewer()
        assert viewer.content_exists({"path": documents["notes.md"]})
        assert not viewer.content_exists({"path": os.path.join(tmp_path, "gone.md")})
        assert not viewer.content_exists({"item": 1})
        assert not viewer.content_exists(None)

    def test_show_in_library(self, window, documents):
        """Test that Show in Library selects the document and the library tab."""
        window.open_document(documents["notes.md"])
        tab_id = window.open_document(documents["paper.txt"])

        assert TabMenuDispatcher(window.registry()).dispatch(TabMenuAction.SHOW_IN_LIBRARY, tab_id)

        library_view = window.reader_viewer().library_view()
        assert window.registry().selected_id == "library-pane"
        assert library_view.currentItem().text() == "paper.txt"

    def test_open_in_window(self, window, documents):
        """Test that Open in Separate Window opens a standalone reader."""
        tab_id = window.open_document(documents["notes.md"])
        viewer = window.reader_viewer()

        assert TabMenuDispatcher(window.registry()).dispatch(TabMenuAction.OPEN_IN_WINDOW, tab_id)

        windows = viewer.windows()
        assert len(windows) == 1
        assert windows[0].windowTitle() == "notes.md"
        assert tab_id in window.registry()

        windows[0].close()
        assert viewer.windows() == []

    def test_library_activation_opens_document(self, window, documents):
        """Test that activating a library entry opens it."""
        tab_id = window.open_document(documents["notes.md"])
        window.registry().close(tab_id)

        library_view = window.reader_viewer().library_view()
        library_view.itemActivated.emit(library_view.item(0))

        assert window.reader_viewer().find_tab_by_path(documents["notes.md"]) is not None

    def test_session_round_trip(self, qtbot, window, documents):
        """Test saving a window's tabs and restoring them into a new window."""
        window.open_document(documents["notes.md"])
        window.open_document(documents["paper.txt"])
        window.registry().select(window.reader_viewer().find_tab_by_path(documents["notes.md"]))
        window.registry().rename("library-pane", "Shelf")
        saved = window.registry().serialize()

        restored = MainWindow(TabRegistrySettings(app_title="Refdesk", tab_bar_always_visible=False))
        qtbot.addWidget(restored)

        assert restored.registry().restore(saved) == 3
        assert restored.registry().serialize() == saved
        assert restored.windowTitle() == "notes.md - Refdesk"

    def test_empty_reader_title_round_trip(self, window, documents):
        """Test that a reader tab renamed to an empty title keeps it across a restore."""
        tab_id = window.open_document(documents["notes.md"])
        window.registry().rename(tab_id, "")
        saved = window.registry().serialize()

        window.registry().close_all()
        window.registry().restore(saved)

        assert window.registry().serialize() == saved
        assert [tab.title() for tab in window.registry().tabs()] == ["", ""]

    def test_restore_skips_deleted_documents(self, qtbot, window, documents):
        """Test that documents deleted since the session was saved are skipped."""
        window.open_document(documents["notes.md"])
        window.open_document(documents["paper.txt"])
        saved = window.registry().serialize()
        os.remove(documents["notes.md"])

        restored = MainWindow(TabRegistrySettings(app_title="Refdesk", tab_bar_always_visible=False))
        qtbot.addWidget(restored)

        assert restored.registry().restore(saved) == 2
        assert [tab.title() for tab in restored.registry().tabs()] == ["", "paper.txt"]


class TestSession:
    """Test saving the open tabs on close and restoring them on start-up."""

    def _new_window(self, qtbot, session_path):
        new_window = MainWindow(
            TabRegistrySettings(app_title="Refdesk", tab_bar_always_visible=False),
            session_path=session_path
        )
        qtbot.addWidget(new_window)
        return new_window

    def test_close_saves_and_start_restores(self, qtbot, documents, tmp_path):
        """Test that tabs open when the window closes come back in a new window."""
        session_path = os.path.join(tmp_path, "state", "session.json")
        first = self._new_window(qtbot, session_path)
        first.open_document(documents["notes.md"])
        first.open_document(documents["paper.txt"])
        saved = first.registry().serialize()
        first.show()

        first.close()

        with open(session_path, encoding='utf-8') as f:
            assert json.load(f) == {'tabs': saved}

        second = self._new_window(qtbot, session_path)
        assert second.restore_session() == 3
        assert second.registry().serialize() == saved

    def test_no_session_file(self, qtbot, tmp_path):
        """Test starting up with no saved session."""
        new_window = self._new_window(qtbot, os.path.join(tmp_path, "session.json"))
        assert new_window.restore_session() == 0
        assert new_window.registry().tab_ids() == ["library-pane"]

    def test_no_session_path(self, window):
        """Test that a window without a session file neither saves nor restores."""
        window.save_session()
        assert window.restore_session() == 0

    @pytest.mark.parametrize("content", ["{broken", "[]", "{\"tabs\": 5}"])
    def test_unreadable_session_file(self, qtbot, tmp_path, content):
        """Test that a damaged session file is ignored."""
        session_path = os.path.join(tmp_path, "session.json")
        with open(session_path, 'w', encoding='utf-8') as f:
            f.write(content)

        new_window = self._new_window(qtbot, session_path)

        assert new_window.restore_session() == 0
        assert new_window.registry().tab_ids() == ["library-pane"]
