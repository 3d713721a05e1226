# chronoterm/core/constants.py
# Timing constants & timer status enum shared by engine, renderer & CLI

from __future__ import annotations

from enum import Enum


# * Timer lifecycle states
class TimerStatus(Enum):
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"


# unit conversions (engine keeps nanoseconds internally, exposes milliseconds)
NS_PER_MS = 1_000_000
MS_PER_SECOND = 1_000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_HOUR = 60 * MS_PER_MINUTE

# elapsed time saturates at 99 hours
MAX_ELAPSED_MS = 99 * MS_PER_HOUR
MAX_ELAPSED_NS = MAX_ELAPSED_MS * NS_PER_MS

# loop cadence bounds (milliseconds)
DEFAULT_TICK_MS = 50
MIN_TICK_MS = 10
MAX_TICK_MS = 1000

# number of laps shown before older rows are collapsed
DEFAULT_MAX_VISIBLE_LAPS = 10
