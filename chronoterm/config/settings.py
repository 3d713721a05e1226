# chronoterm/config/settings.py
# Configuration management for chronoterm: display cadence, lap display, theme & startup behavior

import os
from pathlib import Path
from typing import Dict, Any, Optional
import typer
from dataclasses import dataclass, asdict, fields, replace

from ..chrono_io.generics import read_json_safe, write_json_safe
from ..core.constants import DEFAULT_TICK_MS, MIN_TICK_MS, MAX_TICK_MS, DEFAULT_MAX_VISIBLE_LAPS
from ..core.exceptions import JSONParsingError, SettingsValidationError
from ..ui.theming.theme_definitions import THEMES

# environment variable overriding the config file location
CONFIG_ENV_VAR = "CHRONOTERM_CONFIG"


# * Default settings dataclass for chronoterm w/ display & loop configuration
@dataclass
class ChronoSettings:
    # loop cadence in milliseconds (bounded input poll timeout)
    tick_ms: int = DEFAULT_TICK_MS

    # display options
    big_digits: bool = False
    show_deltas: bool = True
    max_visible_laps: int = DEFAULT_MAX_VISIBLE_LAPS

    # start timing immediately on launch
    auto_start: bool = False

    # leave the loop once the 99h cap is reached instead of waiting for quit
    exit_on_cap: bool = False

    # theme setting
    theme: str = "deep_blue"

    # dev mode setting (enables debug-level logging w/ --verbose)
    dev_mode: bool = False

    def __post_init__(self) -> None:
        # tick_ms validation (strict int, bounded so the loop neither spins nor stalls)
        if isinstance(self.tick_ms, bool) or not isinstance(self.tick_ms, int):
            raise ValueError(
                f"tick_ms must be an integer, got {type(self.tick_ms).__name__}"
            )
        if not MIN_TICK_MS <= self.tick_ms <= MAX_TICK_MS:
            raise ValueError(
                f"tick_ms must be {MIN_TICK_MS}-{MAX_TICK_MS}, got {self.tick_ms}"
            )

        if (
            isinstance(self.max_visible_laps, bool)
            or not isinstance(self.max_visible_laps, int)
            or self.max_visible_laps < 1
        ):
            raise ValueError(
                f"max_visible_laps must be a positive integer, got {self.max_visible_laps}"
            )

        if self.theme not in THEMES:
            raise ValueError(
                f"theme must be one of {sorted(THEMES)}, got '{self.theme}'"
            )

        # strict bool validation (no coercion)
        for name in ("big_digits", "show_deltas", "auto_start", "exit_on_cap", "dev_mode"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ValueError(
                    f"{name} must be a boolean (true/false), "
                    f"got {type(value).__name__}: {value}"
                )

    @property
    def tick_seconds(self) -> float:
        return self.tick_ms / 1000

    # * Return a copy w/ per-run overrides applied; None values keep the stored setting
    def with_overrides(self, **overrides: Any) -> "ChronoSettings":
        known = {f.name for f in fields(self)}
        changes = {k: v for k, v in overrides.items() if v is not None}
        unknown = set(changes) - known
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(sorted(unknown))}")
        return replace(self, **changes)


def _default_config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".chronoterm" / "config.json"


# * Settings management class w/ JSON persistence for loading, saving, & modifying settings
class SettingsManager:
    def __init__(self, config_path: Optional[Path] = None):
        self.config_path = config_path or _default_config_path()
        self._settings: Optional[ChronoSettings] = None

    # load settings from file or return defaults
    def load(self) -> ChronoSettings:
        if self._settings is not None:
            return self._settings

        if self.config_path.exists():
            try:
                data = read_json_safe(self.config_path)
                self._settings = ChronoSettings(**data)
            except (JSONParsingError, TypeError, ValueError) as e:
                typer.echo(f"Warning: Invalid config file {self.config_path}: {e}")
                typer.echo("Using default settings")
                self._settings = ChronoSettings()
        else:
            self._settings = ChronoSettings()

        return self._settings

    # save settings to file
    def save(self, settings: ChronoSettings) -> None:
        write_json_safe(asdict(settings), self.config_path)
        self._settings = settings

    # get a specific setting value
    def get(self, key: str) -> Any:
        settings = self.load()
        return getattr(settings, key, None)

    # set a specific setting value; re-validates the whole dataclass before saving
    def set(self, key: str, value: Any) -> None:
        settings = self.load()
        if not hasattr(settings, key):
            raise ValueError(f"Unknown setting: {key}")

        try:
            updated = replace(settings, **{key: value})
        except ValueError as e:
            raise SettingsValidationError(str(e), setting_name=key, value=value) from e
        self.save(updated)

    # reset to default settings
    def reset(self) -> None:
        self.save(ChronoSettings())

    # list all settings as a dictionary
    def list_settings(self) -> Dict[str, Any]:
        return asdict(self.load())


# global settings manager instance
settings_manager = SettingsManager()
