# chronoterm/chrono_io/terminal.py
# Terminal device access: scoped cbreak mode & bounded-timeout key polling for the display loop

from __future__ import annotations

import os
import sys
import time
from contextlib import contextmanager
from typing import IO, Callable, Iterator, Protocol, runtime_checkable

import readchar
from readchar import key

from ..core.exceptions import InputError

if sys.platform == "win32":
    import msvcrt
else:
    import select
    import termios
    import tty


# how long to wait for the remaining bytes of a key that is already arriving
ESCAPE_WAIT_S = 0.01
# longest sequence collected after ESC, e.g. "[1;5A" or "[15~"
MAX_ESCAPE_TAIL = 8

# application cursor mode arrows -> the readchar.key spelling the bindings match against
_KEY_ALIASES = {
    "\x1bOA": key.UP,
    "\x1bOB": key.DOWN,
    "\x1bOC": key.RIGHT,
    "\x1bOD": key.LEFT,
}


# * Anything the display loop can ask for "a key within timeout seconds, or None"
@runtime_checkable
class KeySource(Protocol):
    def poll(self, timeout: float) -> str | None: ...


# * Whether stdin is an interactive terminal the display can take over
def stdin_is_interactive(stream: IO[str] | None = None) -> bool:
    stream = stream if stream is not None else sys.stdin
    try:
        return stream is not None and stream.isatty()
    except (AttributeError, ValueError):
        # closed or detached stream
        return False


# * Put the input terminal in cbreak mode for the duration of the block
# * Keys arrive unbuffered & unechoed; original attributes restored on every exit path
@contextmanager
def terminal_mode(stream: IO[str] | None = None) -> Iterator[bool]:
    stream = stream if stream is not None else sys.stdin
    if sys.platform == "win32" or not stdin_is_interactive(stream):
        # console input on Windows is already unbuffered for msvcrt
        yield False
        return

    fd = stream.fileno()
    original = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        yield True
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, original)


# * Key source backed by the real terminal; waits at most `timeout` seconds per poll
# * POSIX reads raw bytes off the descriptor; nothing is flushed between readiness & read
class KeyPoller:
    def __init__(
        self,
        stream: IO[str] | None = None,
        reader: Callable[[], str] = readchar.readkey,
    ) -> None:
        self._stream = stream if stream is not None else sys.stdin
        # used on Windows only, after msvcrt reports a pending key
        self._reader = reader

    # returns one decoded key (readchar.key spelling for special keys) or None on timeout
    def poll(self, timeout: float) -> str | None:
        if sys.platform == "win32":
            return self._poll_windows(timeout)
        return self._poll_posix(timeout)

    def _poll_posix(self, timeout: float) -> str | None:
        try:
            fd = self._stream.fileno()
            if not _readable(fd, max(0.0, timeout)):
                return None
            data = os.read(fd, 1)
            if not data:
                # EOF on the input device
                return None
            if data == key.ESC.encode():
                data += _read_escape_tail(fd)
            else:
                data += _read_upto(fd, _utf8_length(data[0]) - 1)
        except (OSError, ValueError) as e:
            raise InputError(f"Failed to read key: {e}") from e
        return _decode_key(data)

    def _poll_windows(self, timeout: float) -> str | None:
        deadline = time.monotonic() + max(0.0, timeout)
        try:
            while not msvcrt.kbhit():
                if time.monotonic() >= deadline:
                    return None
                time.sleep(0.005)
            k = self._reader()
        except (OSError, ValueError) as e:
            raise InputError(f"Failed to read key: {e}") from e
        return k or None


# ===== RAW KEY DECODING (POSIX) =====


def _readable(fd: int, timeout: float) -> bool:
    ready, _, _ = select.select([fd], [], [], timeout)
    return bool(ready)


# read up to n more bytes, each only if it arrives within ESCAPE_WAIT_S
def _read_upto(fd: int, n: int) -> bytes:
    data = b""
    while len(data) < n and _readable(fd, ESCAPE_WAIT_S):
        chunk = os.read(fd, 1)
        if not chunk:
            break
        data += chunk
    return data


# collect the rest of a CSI/SS3 sequence after ESC; a lone ESC yields b""
def _read_escape_tail(fd: int) -> bytes:
    tail = b""
    while len(tail) < MAX_ESCAPE_TAIL and _readable(fd, ESCAPE_WAIT_S):
        chunk = os.read(fd, 1)
        if not chunk:
            break
        tail += chunk
        # "[" or "O" opens the sequence; the first later byte in @..~ closes it
        if len(tail) > 1 and 0x40 <= tail[-1] <= 0x7E:
            break
        # ESC + a plain character (Alt+key) is complete as soon as it lands
        if len(tail) == 1 and tail not in (b"[", b"O"):
            break
    return tail


def _utf8_length(lead: int) -> int:
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _decode_key(data: bytes) -> str:
    k = data.decode("utf-8", errors="replace")
    return _KEY_ALIASES.get(k, k)
