# chronoterm/ui/stopwatch/display.py
# Interactive stopwatch display: fixed-cadence poll -> dispatch -> tick -> render loop on a rich Live screen

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console, RenderableType
from rich.live import Live

from ...chrono_io.console import get_console
from ...chrono_io.terminal import KeyPoller, KeySource, terminal_mode
from ...core.constants import TimerStatus, DEFAULT_TICK_MS, DEFAULT_MAX_VISIBLE_LAPS
from ...core.exceptions import InputError, RenderError
from ...core.formatting import format_duration
from ...core.output import get_output_manager
from ...core.timer import TimerEngine
from ...core.verbose import vlog, vlog_dev
from .input import StopwatchInputHandler
from .renderer import StopwatchRenderer, create_renderer_from_console

# why the loop ended
EXIT_QUIT = "quit"
EXIT_CAP = "cap"
EXIT_INTERRUPT = "interrupt"


# * Final state handed back to the CLI once the terminal has been restored
@dataclass(frozen=True)
class SessionSummary:
    elapsed_ms: int
    laps: tuple[int, ...]
    status: TimerStatus
    capped: bool
    reason: str

    @property
    def elapsed_display(self) -> str:
        return format_duration(self.elapsed_ms)


# * Orchestrates one interactive stopwatch session
# * Owns the engine, renderer, input handler & key source; the terminal is held only inside run()
class InteractiveStopwatch:
    def __init__(
        self,
        engine: TimerEngine | None = None,
        key_source: KeySource | None = None,
        console: Console | None = None,
        tick_ms: int = DEFAULT_TICK_MS,
        show_deltas: bool = True,
        big_digits: bool = False,
        max_visible_laps: int = DEFAULT_MAX_VISIBLE_LAPS,
        exit_on_cap: bool = False,
        screen: bool = True,
        input_stream=None,
    ):
        self._engine = engine or TimerEngine()
        self._console = console or get_console()
        self._renderer: StopwatchRenderer = create_renderer_from_console(
            self._console,
            show_deltas=show_deltas,
            big_digits=big_digits,
            max_visible_laps=max_visible_laps,
        )
        self._input_handler = StopwatchInputHandler(self._engine)
        self._input_stream = input_stream
        self._keys: KeySource = key_source or KeyPoller(input_stream)
        self._tick_seconds = tick_ms / 1000
        self._exit_on_cap = exit_on_cap
        self._screen = screen

    # ===== COMPONENT ACCESSORS (read-only) =====

    @property
    def engine(self) -> TimerEngine:
        return self._engine

    @property
    def renderer(self) -> StopwatchRenderer:
        return self._renderer

    @property
    def input_handler(self) -> StopwatchInputHandler:
        return self._input_handler

    @property
    def tick_seconds(self) -> float:
        return self._tick_seconds

    # ===== PUBLIC API =====

    def render_screen(self) -> RenderableType:
        return self._renderer.render_screen(self._engine.snapshot())

    def handle_key(self, k: str) -> bool:
        # Returns False to exit loop.
        return self._input_handler.handle_key(k)

    # bounded wait for one key; a failed read counts as an empty tick
    def poll_key(self) -> str | None:
        try:
            return self._keys.poll(self._tick_seconds)
        except InputError as e:
            vlog_dev("INPUT", f"Key poll failed, skipping tick: {e}")
            return None

    def summary(self, reason: str) -> SessionSummary:
        snapshot = self._engine.snapshot()
        return SessionSummary(
            elapsed_ms=snapshot.elapsed_ms,
            laps=snapshot.laps,
            status=snapshot.status,
            capped=snapshot.capped,
            reason=reason,
        )

    # one loop iteration; returns an exit reason or None to keep going
    def step(self, live: Live) -> str | None:
        k = self.poll_key()
        if k is not None and not self.handle_key(k):
            return EXIT_QUIT

        capped = self._engine.tick()
        live.update(self.render_screen(), refresh=True)

        if capped and self._exit_on_cap:
            return EXIT_CAP
        return None

    def run(self) -> SessionSummary:
        reason = EXIT_QUIT
        output = get_output_manager()
        vlog("SESSION", f"Display loop starting (tick {self._tick_seconds * 1000:.0f}ms)")

        try:
            with terminal_mode(self._input_stream), output.muted_console():
                with Live(
                    self.render_screen(),
                    console=self._console,
                    screen=self._screen,
                    auto_refresh=False,
                    redirect_stdout=False,
                    redirect_stderr=False,
                ) as live:
                    try:
                        while True:
                            exit_reason = self.step(live)
                            if exit_reason is not None:
                                reason = exit_reason
                                break
                    except KeyboardInterrupt:
                        reason = EXIT_INTERRUPT
        except OSError as e:
            vlog("SESSION", f"[red]Terminal output failed[/]: {e}")
            raise RenderError(f"Terminal output failed: {e}") from e

        summary = self.summary(reason)
        vlog(
            "SESSION",
            f"Display loop ended ({reason}) at {summary.elapsed_display} w/ {len(summary.laps)} laps",
        )
        return summary


def run_stopwatch_display(
    engine: TimerEngine | None = None,
    key_source: KeySource | None = None,
    **kwargs,
) -> SessionSummary:
    return InteractiveStopwatch(engine=engine, key_source=key_source, **kwargs).run()
