# chronoterm/core/output.py
# Session output seam: the timer engine & display loop report through whatever the CLI registers here
# * No I/O in this module; the rich console & log file implementation is chronoterm/cli/output_manager.py

from __future__ import annotations

from contextlib import contextmanager
from enum import IntEnum
from typing import ContextManager, Iterator, Protocol, runtime_checkable


class OutputLevel(IntEnum):
    NORMAL = 0
    VERBOSE = 1
    # dev_mode only
    DEBUG = 2


# * What the engine, input handler & display loop need from session output
@runtime_checkable
class SessionOutput(Protocol):
    def is_verbose_enabled(self) -> bool: ...

    def is_debug_enabled(self) -> bool: ...

    def verbose(self, msg: str, category: str = "INFO") -> None: ...

    def muted_console(self) -> ContextManager[None]: ...

    def start_session(self) -> None: ...

    def end_session(self) -> None: ...


# * Registered until the CLI installs a real manager; drops everything
class SilentOutput:
    def is_verbose_enabled(self) -> bool:
        return False

    def is_debug_enabled(self) -> bool:
        return False

    def verbose(self, msg: str, category: str = "INFO") -> None:
        pass

    @contextmanager
    def muted_console(self) -> Iterator[None]:
        yield

    def start_session(self) -> None:
        pass

    def end_session(self) -> None:
        pass


_active: SessionOutput = SilentOutput()


# * Install the session output (CLI startup, or init_verbose in tests)
def set_output_manager(manager: SessionOutput) -> None:
    global _active
    _active = manager


def get_output_manager() -> SessionOutput:
    return _active


# * Back to a fresh SilentOutput (test isolation)
def reset_output_manager() -> None:
    set_output_manager(SilentOutput())
