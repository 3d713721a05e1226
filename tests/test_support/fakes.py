# tests/test_support/fakes.py
# Deterministic stand-ins for the monotonic clock & the terminal key source

from __future__ import annotations

from typing import Callable

NS_PER_MS = 1_000_000


# * Manually advanced monotonic clock returning integer nanoseconds
class FakeClock:
    def __init__(self, start_ns: int = 1_000 * NS_PER_MS):
        self.now_ns = start_ns

    def __call__(self) -> int:
        return self.now_ns

    def advance(self, ms: int) -> None:
        self.now_ns += ms * NS_PER_MS

    def advance_ns(self, ns: int) -> None:
        self.now_ns += ns


# * Key source replaying a script; None = empty tick, Exception instances are raised
# * An exhausted script answers "q" so a loop under test always terminates
class ScriptedKeySource:
    def __init__(
        self,
        script: list[str | None | BaseException],
        on_poll: Callable[[], None] | None = None,
    ):
        self.script = list(script)
        self.on_poll = on_poll
        self.timeouts: list[float] = []

    def poll(self, timeout: float) -> str | None:
        self.timeouts.append(timeout)
        if self.on_poll is not None:
            self.on_poll()
        if not self.script:
            return "q"
        item = self.script.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    @property
    def exhausted(self) -> bool:
        return not self.script
