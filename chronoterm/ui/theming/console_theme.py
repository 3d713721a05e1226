# chronoterm/ui/theming/console_theme.py
# Console theme initialization & management for Rich styling

from __future__ import annotations

from rich.theme import ThemeStackError

from ...chrono_io.console import get_console

# whether we pushed a theme onto the shared console (so refresh can pop it)
_theme_pushed = False


# * push the active theme onto the shared console; a name overrides settings for this run, None clears it
def initialize_theme(theme_name: str | None = None) -> None:
    global _theme_pushed
    from .theme_engine import get_chrono_theme, set_theme_override

    set_theme_override(theme_name)
    get_console().push_theme(get_chrono_theme())
    _theme_pushed = True


# * Refresh console theme after a settings change
def refresh_theme(theme_name: str | None = None) -> None:
    global _theme_pushed
    if _theme_pushed:
        try:
            get_console().pop_theme()
        except ThemeStackError:
            pass  # console was swapped out underneath us (tests), nothing to pop
        _theme_pushed = False
    initialize_theme(theme_name)


# called once per CLI invocation; re-pushing replaces the previous invocation's theme
def auto_initialize_theme(theme_name: str | None = None) -> None:
    refresh_theme(theme_name)
