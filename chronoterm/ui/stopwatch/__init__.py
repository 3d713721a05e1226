# chronoterm/ui/stopwatch/__init__.py
# Interactive stopwatch components: bindings, rendering, input handling & the display loop

from .bindings import Command, DEFAULT_BINDINGS, HELP_ENTRIES, help_entries, resolve_command
from .big_digits import render_big, big_width
from .renderer import StopwatchRenderer, create_renderer_from_console, status_label
from .input import StopwatchInputHandler
from .display import InteractiveStopwatch, SessionSummary, run_stopwatch_display

__all__ = [
    "Command",
    "DEFAULT_BINDINGS",
    "HELP_ENTRIES",
    "help_entries",
    "resolve_command",
    "render_big",
    "big_width",
    "StopwatchRenderer",
    "create_renderer_from_console",
    "status_label",
    "StopwatchInputHandler",
    "InteractiveStopwatch",
    "SessionSummary",
    "run_stopwatch_display",
]
