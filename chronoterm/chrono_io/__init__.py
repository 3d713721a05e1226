# chronoterm/chrono_io/__init__.py
# Console, JSON file & terminal device I/O helpers

from .console import get_console, set_console, reset_console
from .generics import ensure_parent, read_json_safe, write_json_safe, exit_with_error
from .terminal import KeyPoller, KeySource, terminal_mode, stdin_is_interactive

__all__ = [
    "get_console",
    "set_console",
    "reset_console",
    "ensure_parent",
    "read_json_safe",
    "write_json_safe",
    "exit_with_error",
    "KeyPoller",
    "KeySource",
    "terminal_mode",
    "stdin_is_interactive",
]
