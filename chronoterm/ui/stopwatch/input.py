# chronoterm/ui/stopwatch/input.py
# Input handling for the interactive stopwatch: keys -> commands -> timer engine

from __future__ import annotations

from rich.markup import escape

from ...core.timer import TimerEngine
from ...core.verbose import vlog_dev
from .bindings import Command, DEFAULT_BINDINGS, resolve_command


class StopwatchInputHandler:

    def __init__(self, engine: TimerEngine, bindings: dict[str, Command] | None = None):
        self.engine = engine
        self.bindings = bindings if bindings is not None else DEFAULT_BINDINGS

    # returns False when the loop should stop
    def handle_key(self, k: str) -> bool:
        command = resolve_command(k, self.bindings)
        if command is None:
            vlog_dev("INPUT", f"Ignored key {escape(repr(k))}")
            return True
        return self.dispatch(command)

    def dispatch(self, command: Command) -> bool:
        if command is Command.QUIT:
            return False
        if command is Command.START_LAP:
            self.engine.start_or_lap()
        elif command is Command.PAUSE_RESUME:
            self.engine.pause_resume()
        elif command is Command.RESET:
            self.engine.reset()
        return True
