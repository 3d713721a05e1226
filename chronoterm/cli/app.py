# chronoterm/cli/app.py
# Root Typer application: runs the stopwatch when no subcommand is given & registers subcommands
#
# ! Command imports at bottom of file are deferred to avoid circular dependencies w/ the app object.

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

# load environment variables once at startup (e.g. CHRONOTERM_CONFIG)
load_dotenv()

from ..config.settings import settings_manager
from ..core.constants import MIN_TICK_MS, MAX_TICK_MS


app = typer.Typer(
    rich_markup_mode="rich",
    add_completion=False,
    no_args_is_help=False,
    context_settings={"help_option_names": ["--help", "-h"]},
    help=(
        "Terminal stopwatch w/ millisecond display, pause/resume & lap times.\n\n"
        "Keys: [bold]Space/L/T[/] start or lap, [bold]P/S[/] pause/resume, "
        "[bold]R[/] reset, [bold]Q[/] quit."
    ),
)


# * Load settings, set up logging & theme; run the stopwatch when no subcommand is used
@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    tick_ms: Optional[int] = typer.Option(
        None,
        "--tick-ms",
        min=MIN_TICK_MS,
        max=MAX_TICK_MS,
        help="Display refresh / input poll interval in milliseconds",
    ),
    big: Optional[bool] = typer.Option(
        None, "--big/--no-big", help="Render the time in large block digits"
    ),
    deltas: Optional[bool] = typer.Option(
        None, "--deltas/--no-deltas", help="Show the delta to the previous lap"
    ),
    auto_start: Optional[bool] = typer.Option(
        None, "--auto-start/--no-auto-start", help="Start timing immediately"
    ),
    exit_on_cap: Optional[bool] = typer.Option(
        None,
        "--exit-on-cap/--no-exit-on-cap",
        help="Exit automatically once the 99 hour cap is reached",
    ),
    theme: Optional[str] = typer.Option(
        None, "--theme", help="Color theme for this run (see 'config themes')"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging for debugging"
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help="Append a session log (transitions & laps) to this file; implies --verbose",
    ),
) -> None:
    # respect injected ctx.obj from tests/embedding; only load if absent
    if getattr(ctx, "obj", None) is None:
        ctx.obj = settings_manager.load()
    settings = ctx.obj

    from ..core.verbose import init_verbose

    # log_file implies verbose mode
    init_verbose(
        enabled=verbose or log_file is not None,
        log_file=log_file,
        dev_mode=settings.dev_mode,
    )

    from ..ui.theming.console_theme import auto_initialize_theme

    try:
        auto_initialize_theme(theme)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--theme")

    if ctx.invoked_subcommand is None:
        try:
            run_settings = settings.with_overrides(
                tick_ms=tick_ms,
                big_digits=big,
                show_deltas=deltas,
                auto_start=auto_start,
                exit_on_cap=exit_on_cap,
                theme=theme,
            )
        except ValueError as e:
            raise typer.BadParameter(str(e))

        from .commands.run import run_stopwatch

        run_stopwatch(run_settings)


# ! import command modules here to avoid circular import w/ app object
from .commands import config as _config  # noqa: F401,E402
