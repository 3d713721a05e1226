# chronoterm/cli/output_manager.py
# Session output for the CLI: verbose lines echoed to the shared rich console & appended to a plain-text log

# * Registered via set_output_manager() by init_verbose at CLI startup
# * While the live display owns the screen the console echo is muted; the log file still gets every line

from __future__ import annotations

import time
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, TextIO

from rich.errors import MarkupError
from rich.text import Text

from ..chrono_io.console import get_console
from ..core.output import OutputLevel

_BANNER = "=" * 60


class OutputManager:
    def __init__(self, level: OutputLevel = OutputLevel.NORMAL, log_file: Path | None = None) -> None:
        self.level = level
        self._clock_start = time.monotonic()
        self._muted = False
        self._log: TextIO | None = None
        if log_file is not None:
            self._open_log(log_file)

    def is_verbose_enabled(self) -> bool:
        return self.level >= OutputLevel.VERBOSE

    def is_debug_enabled(self) -> bool:
        return self.level >= OutputLevel.DEBUG

    def verbose(self, msg: str, category: str = "INFO") -> None:
        if not self.is_verbose_enabled():
            return
        stamp = self._since_start()
        if not self._muted:
            get_console().print(f"[dim][{stamp}][/] [bold cyan]\\[{category}][/] {msg}")
        self._append(f"[{stamp}] [{category}] {_strip_markup(msg)}")

    # * Hold console echo back while the live display owns the screen
    @contextmanager
    def muted_console(self) -> Iterator[None]:
        previous = self._muted
        self._muted = True
        try:
            yield
        finally:
            self._muted = previous

    # session clock restarts here so log timestamps count from the stopwatch session
    def start_session(self) -> None:
        self._clock_start = time.monotonic()
        self._append(f"\n{_BANNER}")
        self._append(f"Session Started: {datetime.now().isoformat()}")
        self._append(f"Level: {self.level.name}")
        self._append(f"{_BANNER}\n")

    def end_session(self) -> None:
        self._append(f"\n{_BANNER}")
        self._append(f"Session Ended: {datetime.now().isoformat()}")
        self._append(f"{_BANNER}\n")
        self.close()

    def close(self) -> None:
        log, self._log = self._log, None
        if log is not None:
            try:
                log.close()
            except OSError:
                pass  # nothing left to flush to

    def _since_start(self) -> str:
        return f"{time.monotonic() - self._clock_start:.2f}s"

    def _open_log(self, log_file: Path) -> None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            self._log = open(log_file, "a", encoding="utf-8")
        except OSError as e:
            get_console().print(f"[yellow]Warning:[/] session log disabled, cannot open {log_file}: {e}")

    def _append(self, line: str) -> None:
        if self._log is None:
            return
        try:
            self._log.write(f"{line}\n")
            self._log.flush()
        except OSError:
            # a failing log must never take the stopwatch down; stop logging instead
            self.close()


# rich markup -> plain text for the log file
def _strip_markup(msg: str) -> str:
    try:
        return Text.from_markup(msg).plain
    except MarkupError:
        return msg
