# chronoterm/cli/commands/run.py
# Stopwatch session runner: wires settings into the display loop, owns the session log lifetime & exit codes

from __future__ import annotations

from dataclasses import asdict

from rich.console import Console

from ...chrono_io.console import get_console
from ...chrono_io.generics import exit_with_error
from ...chrono_io.terminal import KeySource, stdin_is_interactive
from ...config.settings import ChronoSettings
from ...core.exceptions import ChronoError, NotATerminalError
from ...core.output import get_output_manager
from ...core.timer import TimerEngine, TimerSnapshot
from ...core.verbose import vlog_config
from ...ui.stopwatch.display import InteractiveStopwatch, SessionSummary, EXIT_CAP
from ...ui.stopwatch.renderer import StopwatchRenderer
from ...ui.theming.theme_engine import styled_checkmark, styled_arrow, success_gradient


# * Run one interactive session; exits 1 on terminal failure
def run_stopwatch(
    settings: ChronoSettings,
    key_source: KeySource | None = None,
    engine: TimerEngine | None = None,
    display_console: Console | None = None,
    screen: bool = True,
) -> SessionSummary:
    # a real key source needs a real terminal; injected sources (tests, embedding) do not
    if key_source is None and not stdin_is_interactive():
        err = NotATerminalError("chronoterm needs an interactive terminal (stdin is not a TTY)")
        exit_with_error(f"Error: {err}")

    # banner & session clock first so config lines & an auto-start land inside the session
    output = get_output_manager()
    output.start_session()
    try:
        if output.is_verbose_enabled():
            for key, value in asdict(settings).items():
                vlog_config(key, value)

        engine = engine or TimerEngine()
        if settings.auto_start:
            engine.start_or_lap()

        display = InteractiveStopwatch(
            engine=engine,
            key_source=key_source,
            console=display_console,
            tick_ms=settings.tick_ms,
            show_deltas=settings.show_deltas,
            big_digits=settings.big_digits,
            max_visible_laps=settings.max_visible_laps,
            exit_on_cap=settings.exit_on_cap,
            screen=screen,
        )
        summary = display.run()
    except ChronoError as e:
        # stdout may be the broken stream; report on stderr
        exit_with_error(f"Error: {e}")
    finally:
        output.end_session()

    print_summary(summary, show_deltas=settings.show_deltas)
    return summary


# * Final time & lap list printed after the terminal is restored
def print_summary(summary: SessionSummary, show_deltas: bool = True) -> None:
    console = get_console()
    console.print()
    console.print(
        styled_checkmark(),
        success_gradient("Final time"),
        styled_arrow(),
        f"[bold]{summary.elapsed_display}[/]",
    )
    if summary.reason == EXIT_CAP or summary.capped:
        console.print("[dim]Stopped at the 99 hour cap[/]")

    if summary.laps:
        # every lap, not just the on-screen window
        renderer = StopwatchRenderer(show_deltas=show_deltas, max_visible_laps=len(summary.laps))
        snapshot = TimerSnapshot(
            status=summary.status,
            elapsed_ms=summary.elapsed_ms,
            laps=summary.laps,
            capped=summary.capped,
        )
        console.print()
        for line in renderer.render_lap_lines(snapshot):
            console.print("  ", line)

    console.print()
    console.print("[dim]chronoterm stopped. Goodbye![/]")
