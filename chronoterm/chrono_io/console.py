# chronoterm/chrono_io/console.py
# Shared rich Console: CLI messages, verbose echo & the live display all write through one terminal handle

# Callers fetch it w/ get_console() at print time so a swapped console (tests, recording) is picked up
# everywhere; themes are pushed onto it by ui/theming/console_theme.py

from __future__ import annotations

from rich.console import Console

_console = Console()


# * The console everything prints to (rich.live.Live takes it directly)
def get_console() -> Console:
    return _console


# * Swap in another console; returns the one it replaced
def set_console(new_console: Console) -> Console:
    global _console
    previous = _console
    _console = new_console
    return previous


# * Back to a fresh default console, dropping any pushed theme
def reset_console() -> Console:
    set_console(Console())
    return _console


__all__ = ["get_console", "set_console", "reset_console"]
