# chronoterm/core/timer.py
# Stopwatch timer engine: Stopped/Running/Paused state machine w/ pause-aware elapsed time & laps

"""Timer engine for chronoterm.

States
------
STOPPED   Never started or just reset; elapsed is zero.
RUNNING   Counting; elapsed = accumulated + (now - start_instant).
PAUSED    Frozen; elapsed = accumulated.

Transitions
-----------
STOPPED -> RUNNING              (start_or_lap)
RUNNING -> RUNNING + new lap    (start_or_lap / record_lap)
RUNNING -> PAUSED               (pause_resume)
PAUSED  -> RUNNING              (pause_resume)
RUNNING -> PAUSED, capped       (tick once elapsed reaches 99h)
Any     -> STOPPED              (reset)

The lap command while PAUSED is a no-op: it neither resumes nor records.
Once capped, every command except ``reset`` is a no-op.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

from .constants import TimerStatus, MAX_ELAPSED_NS, NS_PER_MS
from .formatting import LapRow, build_lap_rows
from .verbose import vlog_transition, vlog_lap

# monotonic clock returning integer nanoseconds
Clock = Callable[[], int]


# * Immutable view of the engine at one instant; the renderer only ever sees this
@dataclass(frozen=True)
class TimerSnapshot:
    status: TimerStatus
    elapsed_ms: int
    laps: tuple[int, ...]
    capped: bool = False

    @property
    def lap_rows(self) -> list[LapRow]:
        return build_lap_rows(self.laps)


class TimerEngine:
    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or time.monotonic_ns
        self._status = TimerStatus.STOPPED
        self._start_instant: int | None = None
        self._accumulated: int = 0  # ns folded in from earlier running segments
        self._laps: list[int] = []  # absolute elapsed ms, recording order
        self._capped = False

    # ===== READ-ONLY STATE =====

    @property
    def status(self) -> TimerStatus:
        return self._status

    @property
    def laps(self) -> tuple[int, ...]:
        return tuple(self._laps)

    @property
    def is_capped(self) -> bool:
        return self._capped

    @property
    def is_running(self) -> bool:
        return self._status is TimerStatus.RUNNING

    # elapsed nanoseconds, clamped to the cap; never mutates state
    def elapsed(self) -> int:
        total = self._accumulated
        if self._status is TimerStatus.RUNNING and self._start_instant is not None:
            total += max(0, self._clock() - self._start_instant)
        return min(total, MAX_ELAPSED_NS)

    def elapsed_ms(self) -> int:
        return self.elapsed() // NS_PER_MS

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            status=self._status,
            elapsed_ms=self.elapsed_ms(),
            laps=tuple(self._laps),
            capped=self._capped,
        )

    def lap_rows(self) -> list[LapRow]:
        return build_lap_rows(self._laps)

    # ===== COMMANDS =====

    # * Start when stopped, record a lap when running; no-op when paused or capped
    def start_or_lap(self) -> int | None:
        if self._capped:
            return None
        if self._status is TimerStatus.STOPPED:
            self._start_instant = self._clock()
            self._transition(TimerStatus.RUNNING)
            return None
        if self._status is TimerStatus.RUNNING:
            return self.record_lap()
        return None

    # * Toggle RUNNING <-> PAUSED; no-op when stopped or capped
    def pause_resume(self) -> None:
        if self._capped:
            return
        if self._status is TimerStatus.RUNNING:
            self._fold_running_segment()
            self._transition(TimerStatus.PAUSED)
        elif self._status is TimerStatus.PAUSED:
            self._start_instant = self._clock()
            self._transition(TimerStatus.RUNNING)

    # * Clear everything & return to STOPPED; always succeeds
    def reset(self) -> None:
        previous = self._status
        elapsed_ms = self.elapsed_ms()
        self._accumulated = 0
        self._start_instant = None
        self._laps.clear()
        self._capped = False
        self._status = TimerStatus.STOPPED
        vlog_transition(previous.name, "RESET", elapsed_ms)

    # * Append the current elapsed time as a lap; ignored unless running
    def record_lap(self) -> int | None:
        if self._status is not TimerStatus.RUNNING or self._capped:
            return None
        lap = self.elapsed_ms()
        previous = self._laps[-1] if self._laps else 0
        self._laps.append(lap)
        vlog_lap(len(self._laps), lap, lap - previous)
        return lap

    # * Per-tick upkeep: freeze the engine once elapsed reaches the cap
    def tick(self) -> bool:
        if self._capped:
            return True
        if self._status is TimerStatus.RUNNING and self.elapsed() >= MAX_ELAPSED_NS:
            self._accumulated = MAX_ELAPSED_NS
            self._start_instant = None
            self._capped = True
            self._transition(TimerStatus.PAUSED)
            return True
        return False

    # ===== INTERNALS =====

    def _fold_running_segment(self) -> None:
        self._accumulated = self.elapsed()
        self._start_instant = None

    def _transition(self, new_status: TimerStatus) -> None:
        previous = self._status
        self._status = new_status
        vlog_transition(previous.name, new_status.name, self.elapsed_ms())
