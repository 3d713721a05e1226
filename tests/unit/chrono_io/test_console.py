# tests/unit/chrono_io/test_console.py
# Unit tests for the shared console accessor

from io import StringIO

from rich.console import Console

from chronoterm.chrono_io.console import get_console, reset_console, set_console


class TestSharedConsole:

    # * Test get_console hands out one real Console until it is swapped
    def test_get_console_is_stable(self):
        assert isinstance(get_console(), Console)
        assert get_console() is get_console()

    # * Test set_console swaps the instance & returns the previous one
    def test_set_console_returns_previous(self):
        before = get_console()
        recording = Console(file=StringIO(), record=True, width=60)

        assert set_console(recording) is before
        assert get_console() is recording

        get_console().print("recorded line")
        assert "recorded line" in recording.export_text()

    # * Test reset_console installs a fresh instance
    def test_reset_console_creates_new_instance(self):
        before = get_console()
        fresh = reset_console()

        assert fresh is not before
        assert get_console() is fresh
