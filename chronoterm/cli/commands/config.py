# chronoterm/cli/commands/config.py
# Settings mgmt subcommands (list/get/set/reset/path/themes) w/ JSON-backed storage

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any
import typer
from builtins import list as builtin_list

from ...config.settings import settings_manager, ChronoSettings
from ...chrono_io.console import get_console
from ...chrono_io.generics import exit_with_error
from ...core.exceptions import FileWriteError, SettingsValidationError
from ...ui.theming.console_theme import refresh_theme
from ...ui.theming.theme_definitions import THEMES
from ...ui.theming.theme_engine import (
    natural_gradient,
    styled_arrow,
    styled_bullet,
    styled_checkmark,
    success_gradient,
    accent_gradient,
)
from ..app import app

# * Sub-app for config commands; registered on root app
config_app = typer.Typer(
    rich_markup_mode="rich", help="[chrono.accent2]Manage chronoterm settings[/]"
)
app.add_typer(config_app, name="config")


# concise set of known keys for validation
def _known_keys() -> set[str]:
    return {f.name for f in fields(ChronoSettings)}


# coerce string value to JSON value (numbers, bools, null) or keep raw string
def _coerce_value(
    raw: str,
) -> str | int | float | bool | None | builtin_list[Any] | dict[str, Any]:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        return raw


def _format_setting_value(value: Any) -> str:
    if isinstance(value, str):
        return f'[chrono.accent2]"{value}"[/]'
    if isinstance(value, bool):
        return f"[chrono.accent2]{str(value).lower()}[/]"
    return f"[chrono.accent2]{json.dumps(value)}[/]"


# * Print current settings & config path w/ styled output
def _print_current_settings() -> None:
    data = settings_manager.list_settings()
    console = get_console()

    console.print()
    console.print(accent_gradient("Current Configuration"))
    console.print(f"[dim]Config file: {settings_manager.config_path}[/]")
    console.print()

    for key, value in data.items():
        console.print(styled_bullet(), f"[bold white]{key}[/]", styled_arrow(), _format_setting_value(value))

    console.print()
    console.print(
        "[dim]Use [/][chrono.accent2]chronoterm config --help[/][dim] to see available commands[/]"
    )


# * default callback: show current settings when no subcommand provided
@config_app.callback(invoke_without_command=True)
def config_callback(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        _print_current_settings()


# * Get a specific setting value & print as JSON
@config_app.command()
def get(key: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")
    value = settings_manager.get(key)
    # print JSON for consistency (strings quoted)
    get_console().print(f"[chrono.accent2]{json.dumps(value)}[/]")


# * Set a specific setting value; values are JSON-coerced when possible
@config_app.command(name="set")
def set_cmd(key: str, value: str) -> None:
    if key not in _known_keys():
        raise typer.BadParameter(f"Unknown setting: {key}")

    coerced = _coerce_value(value)
    try:
        settings_manager.set(key, coerced)
    except (ValueError, SettingsValidationError) as e:
        raise typer.BadParameter(str(e))
    except FileWriteError as e:
        exit_with_error(f"Error: {e}")

    if key == "theme":
        refresh_theme()

    get_console().print(
        styled_checkmark(),
        success_gradient(f"Set {key}"),
        styled_arrow(),
        f"[chrono.accent2]{json.dumps(coerced)}[/]",
    )


# * Reset all settings to defaults
@config_app.command()
def reset() -> None:
    settings_manager.reset()
    get_console().print(styled_checkmark(), success_gradient("Reset settings to defaults"))


# * Show the configuration file path
@config_app.command()
def path() -> None:
    get_console().print(f"[chrono.accent2]{settings_manager.config_path}[/]", soft_wrap=True)


# * Explicit 'list' command to show current settings
@config_app.command()
# noqa: A003 - allow command name 'list'
def list() -> None:
    _print_current_settings()


# * List available themes w/ a gradient preview; the active one is marked
@config_app.command()
def themes() -> None:
    active = settings_manager.get("theme")
    console = get_console()
    console.print()
    for name, colors in THEMES.items():
        marker = styled_checkmark() if name == active else " "
        console.print(marker, f"[bold white]{name:<16}[/]", natural_gradient("█" * 20, colors))
    console.print()
    console.print("[dim]Set w/ [/][chrono.accent2]chronoterm config set theme <name>[/]")
