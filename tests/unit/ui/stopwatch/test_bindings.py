# tests/unit/ui/stopwatch/test_bindings.py
# Unit tests for key -> command resolution

import pytest
from readchar import key

from chronoterm.ui.stopwatch.bindings import (
    Command,
    DEFAULT_BINDINGS,
    HELP_ENTRIES,
    help_entries,
    resolve_command,
)


class TestResolveCommand:

    # * Verify default bindings map to the fixed command set
    @pytest.mark.parametrize(
        "k, expected",
        [
            (" ", Command.START_LAP),
            ("l", Command.START_LAP),
            ("t", Command.START_LAP),
            ("p", Command.PAUSE_RESUME),
            ("s", Command.PAUSE_RESUME),
            ("r", Command.RESET),
            ("q", Command.QUIT),
            (key.CTRL_C, Command.QUIT),
        ],
    )
    def test_default_bindings(self, k, expected):

        assert resolve_command(k) is expected

    # * Verify letters match case-insensitively
    @pytest.mark.parametrize("k", ["L", "P", "R", "Q", "T", "S"])
    def test_uppercase(self, k):

        assert resolve_command(k) is resolve_command(k.lower())

    # * Verify unknown keys resolve to None
    @pytest.mark.parametrize("k", ["x", "1", key.UP, key.ESC, key.ENTER])
    def test_unknown_keys(self, k):

        assert resolve_command(k) is None

    # * Verify custom binding tables replace the defaults
    def test_custom_bindings(self):

        bindings = {"x": Command.QUIT}
        assert resolve_command("x", bindings) is Command.QUIT
        assert resolve_command("q", bindings) is None


class TestHelpEntries:

    # * Verify every command is advertised on the help line
    def test_help_covers_commands(self):

        descriptions = " ".join(desc for _, desc in HELP_ENTRIES)
        for word in ("Start", "Lap", "Pause", "Resume", "Reset", "Quit"):
            assert word in descriptions

    # * Verify the defaults bind every command
    def test_every_command_bound(self):

        assert set(DEFAULT_BINDINGS.values()) == set(Command)

    # * Verify every bound key is listed next to its command
    def test_help_lists_all_bound_keys(self):

        assert HELP_ENTRIES == [
            ("Space/L/T", "Start/Lap"),
            ("P/S", "Pause/Resume"),
            ("R", "Reset"),
            ("Q/Ctrl+C", "Quit"),
        ]

    # * Verify custom bindings drive the help line
    def test_help_follows_custom_bindings(self):

        entries = help_entries({"g": Command.START_LAP, "x": Command.QUIT})
        assert entries == [("G", "Start/Lap"), ("X", "Quit")]
