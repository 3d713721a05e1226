# tests/unit/core/test_exceptions.py
# Unit tests for the chronoterm exception hierarchy

from pathlib import Path

import pytest

from chronoterm.core.exceptions import (
    ChronoError,
    TerminalError,
    RenderError,
    InputError,
    NotATerminalError,
    ConfigurationError,
    SettingsValidationError,
    JSONParsingError,
    FileOperationError,
    FileWriteError,
    format_error_message,
)


class TestFormatErrorMessage:

    # * Verify Rich markup formatting
    def test_format_error_message_basic(self):

        assert format_error_message("Error", "boom") == "[red]Error:[/] boom"


class TestHierarchy:

    # * Verify every error derives from ChronoError
    @pytest.mark.parametrize(
        "exc_type",
        [
            TerminalError,
            RenderError,
            InputError,
            ConfigurationError,
            JSONParsingError,
        ],
    )
    def test_derives_from_chrono_error(self, exc_type):

        assert issubclass(exc_type, ChronoError)

    # * Verify terminal failures share a common base
    def test_terminal_errors(self):

        assert issubclass(RenderError, TerminalError)
        assert issubclass(InputError, TerminalError)
        assert issubclass(NotATerminalError, TerminalError)

    # * Verify settings validation is a configuration error
    def test_settings_validation_is_configuration_error(self):

        assert issubclass(SettingsValidationError, ConfigurationError)

    # * Verify file write errors are file operation errors
    def test_file_write_error(self):

        assert issubclass(FileWriteError, FileOperationError)


class TestErrorFields:

    # * Verify NotATerminalError carries the stream name
    def test_not_a_terminal(self):

        err = NotATerminalError("stdin is not a TTY")
        assert err.stream_name == "stdin"
        assert str(err) == "stdin is not a TTY"
        assert "stream_name='stdin'" in repr(err)

    # * Verify SettingsValidationError carries the setting & value
    def test_settings_validation(self):

        err = SettingsValidationError("bad tick", setting_name="tick_ms", value=5)
        assert err.setting_name == "tick_ms"
        assert err.value == 5
        assert "setting_name='tick_ms'" in repr(err)
        assert "value=5" in repr(err)

    # * Verify string paths are normalized to Path
    def test_file_operation_path(self):

        err = FileWriteError("cannot write", "/tmp/x.json")
        assert err.path == Path("/tmp/x.json")
        assert "path=" in repr(err)
