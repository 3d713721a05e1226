# chronoterm/core/exceptions.py
# Custom exception hierarchy for chronoterm (pure - no I/O operations)

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for chronoterm
class ChronoError(Exception):
    pass


# * Terminal device errors (raw mode, input polling, screen output)
class TerminalError(ChronoError):
    pass


# * Drawing to the terminal failed; fatal for the display loop
class RenderError(TerminalError):
    pass


# * Reading a key failed; the display loop recovers by treating the tick as empty
class InputError(TerminalError):
    pass


# * Interactive display requested but stdin is not a terminal
class NotATerminalError(TerminalError):
    def __init__(self, message: str, stream_name: str = "stdin"):
        super().__init__(message)
        self.stream_name = stream_name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, stream_name={self.stream_name!r})"


# * Configuration errors
class ConfigurationError(ChronoError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * JSON parsing errors
class JSONParsingError(ChronoError):
    pass


# * Base error for file I/O operations
class FileOperationError(ChronoError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to write file (config save, session log)
class FileWriteError(FileOperationError):
    pass
