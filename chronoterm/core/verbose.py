# chronoterm/core/verbose.py
# Verbose logging helpers: timer transitions, laps, loop events & configuration, routed to the registered
# session output

from __future__ import annotations

from pathlib import Path
from typing import Any

from .output import get_output_manager, set_output_manager, OutputLevel
from .formatting import format_duration, format_delta


# * Register the CLI session output for this run
def init_verbose(
    enabled: bool = False,
    log_file: Path | None = None,
    dev_mode: bool = False,
) -> None:
    # DEBUG requires dev_mode on top of verbose
    if enabled and dev_mode:
        level = OutputLevel.DEBUG
    elif enabled:
        level = OutputLevel.VERBOSE
    else:
        level = OutputLevel.NORMAL

    from ..cli.output_manager import OutputManager

    set_output_manager(OutputManager(level=level, log_file=log_file))


def vlog(category: str, message: str) -> None:
    get_output_manager().verbose(message, category)


# * Log a timer state transition
def vlog_transition(previous: str, current: str, elapsed_ms: int) -> None:
    get_output_manager().verbose(
        f"{previous} -> {current} at {format_duration(elapsed_ms)}", "TIMER"
    )


# * Log a recorded lap
def vlog_lap(index: int, elapsed_ms: int, delta_ms: int) -> None:
    get_output_manager().verbose(
        f"Lap {index}: {format_duration(elapsed_ms)} ({format_delta(delta_ms)})", "LAP"
    )


def vlog_config(key: str, value: Any) -> None:
    get_output_manager().verbose(f"{key} = {value}", "CONFIG")


# * Dev-mode only logging
def vlog_dev(category: str, message: str) -> None:
    if get_output_manager().is_debug_enabled():
        get_output_manager().verbose(message, f"DEV:{category}")
