# chronoterm/ui/stopwatch/bindings.py
# Command set & default key bindings for the interactive stopwatch

from __future__ import annotations

from enum import Enum

from readchar import key


# * The fixed command set understood by the display loop
class Command(Enum):
    START_LAP = "start_lap"
    PAUSE_RESUME = "pause_resume"
    RESET = "reset"
    QUIT = "quit"


# key -> command; letters are matched case-insensitively
DEFAULT_BINDINGS: dict[str, Command] = {
    " ": Command.START_LAP,
    "l": Command.START_LAP,
    "t": Command.START_LAP,
    "p": Command.PAUSE_RESUME,
    "s": Command.PAUSE_RESUME,
    "r": Command.RESET,
    "q": Command.QUIT,
    key.CTRL_C: Command.QUIT,
}

# labels shown on the help line for each command
COMMAND_LABELS: dict[Command, str] = {
    Command.START_LAP: "Start/Lap",
    Command.PAUSE_RESUME: "Pause/Resume",
    Command.RESET: "Reset",
    Command.QUIT: "Quit",
}

_KEY_NAMES = {" ": "Space", key.CTRL_C: "Ctrl+C"}


# * Help line entries (key labels, description) built from the live bindings, in command order
def help_entries(bindings: dict[str, Command] | None = None) -> list[tuple[str, str]]:
    table = bindings if bindings is not None else DEFAULT_BINDINGS
    keys_by_command: dict[Command, list[str]] = {}
    for k, command in table.items():
        keys_by_command.setdefault(command, []).append(_KEY_NAMES.get(k, k.upper()))
    return [
        ("/".join(keys_by_command[command]), COMMAND_LABELS[command])
        for command in Command
        if command in keys_by_command
    ]


HELP_ENTRIES: list[tuple[str, str]] = help_entries()


# * Resolve a raw key to a command, or None for unbound keys
def resolve_command(k: str, bindings: dict[str, Command] | None = None) -> Command | None:
    table = bindings if bindings is not None else DEFAULT_BINDINGS
    if k in table:
        return table[k]
    if len(k) == 1:
        return table.get(k.lower())
    return None
