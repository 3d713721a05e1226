# chronoterm/core/formatting.py
# Duration formatting & lap delta computation (pure functions used by renderer & session log)

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .constants import MS_PER_HOUR, MS_PER_MINUTE, MS_PER_SECOND, MAX_ELAPSED_MS


# * One rendered row of the lap list
@dataclass(frozen=True)
class LapRow:
    index: int  # 1-based
    elapsed_ms: int
    delta_ms: int


# * Format milliseconds as HH:MM:SS.mmm, zero-padded, all fields always shown
def format_duration(total_ms: int) -> str:
    total_ms = max(0, min(int(total_ms), MAX_ELAPSED_MS))
    hours, rest = divmod(total_ms, MS_PER_HOUR)
    minutes, rest = divmod(rest, MS_PER_MINUTE)
    seconds, millis = divmod(rest, MS_PER_SECOND)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"


# * Format a lap delta w/ leading plus sign
def format_delta(delta_ms: int) -> str:
    return f"+{format_duration(delta_ms)}"


# compute deltas between consecutive laps; first lap's delta is its own elapsed
def lap_deltas(laps: Sequence[int]) -> list[int]:
    deltas: list[int] = []
    previous = 0
    for lap in laps:
        deltas.append(max(0, lap - previous))
        previous = lap
    return deltas


# * Build display rows (index, absolute time, delta) in recording order
def build_lap_rows(laps: Sequence[int]) -> list[LapRow]:
    return [
        LapRow(index=i, elapsed_ms=lap, delta_ms=delta)
        for i, (lap, delta) in enumerate(zip(laps, lap_deltas(laps)), start=1)
    ]
