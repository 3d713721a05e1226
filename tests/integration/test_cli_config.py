# tests/integration/test_cli_config.py
# Integration tests for CLI config commands w/ isolated home

import json
from pathlib import Path

from typer.testing import CliRunner

ENV = {"NO_COLOR": "1", "TERM": "dumb"}


# * Ensure config path command returns isolated temp config location
def test_config_path_returns_isolated_temp_path(isolate_config):
    from chronoterm.cli.app import app

    runner = CliRunner()
    result = runner.invoke(app, ["config", "path"], env=ENV)

    assert result.exit_code == 0
    output = result.stdout.strip()
    assert ".chronoterm" in output
    assert "config.json" in output
    assert Path(output).exists()


# * Ensure config set key value -> config get key returns same value
def test_config_set_get_round_trip(isolate_config):
    from chronoterm.cli.app import app

    runner = CliRunner()

    result = runner.invoke(app, ["config", "set", "tick_ms", "100"], env=ENV)
    assert result.exit_code == 0
    assert "Set tick_ms" in result.stdout

    result = runner.invoke(app, ["config", "get", "tick_ms"], env=ENV)
    assert result.exit_code == 0
    assert result.stdout.strip() == "100"

    # strings are printed JSON-quoted
    result = runner.invoke(app, ["config", "set", "theme", "mono"], env=ENV)
    assert result.exit_code == 0
    result = runner.invoke(app, ["config", "get", "theme"], env=ENV)
    assert '"mono"' in result.stdout

    # booleans are JSON-coerced
    result = runner.invoke(app, ["config", "set", "big_digits", "true"], env=ENV)
    assert result.exit_code == 0

    stored = json.loads((isolate_config / ".chronoterm" / "config.json").read_text())
    assert stored["tick_ms"] == 100
    assert stored["theme"] == "mono"
    assert stored["big_digits"] is True


# * Ensure invalid values are rejected w/ a usage error & nothing is written
def test_config_set_invalid_value(isolate_config):
    from chronoterm.cli.app import app

    runner = CliRunner()
    result = runner.invoke(app, ["config", "set", "tick_ms", "5"], env=ENV)

    assert result.exit_code == 2
    assert "tick_ms must be 10-1000" in result.output
    stored = json.loads((isolate_config / ".chronoterm" / "config.json").read_text())
    assert stored["tick_ms"] == 50


# * Ensure strict bools reject strings that only look truthy
def test_config_set_non_bool(isolate_config):
    from chronoterm.cli.app import app

    result = CliRunner().invoke(app, ["config", "set", "show_deltas", "yes"], env=ENV)
    assert result.exit_code == 2


# * Ensure unknown keys are usage errors for get & set
def test_config_unknown_key(isolate_config):
    from chronoterm.cli.app import app

    runner = CliRunner()
    assert runner.invoke(app, ["config", "get", "model"], env=ENV).exit_code == 2
    assert runner.invoke(app, ["config", "set", "model", "x"], env=ENV).exit_code == 2


# * Ensure reset restores defaults
def test_config_reset(isolate_config):
    from chronoterm.cli.app import app

    runner = CliRunner()
    runner.invoke(app, ["config", "set", "max_visible_laps", "3"], env=ENV)
    result = runner.invoke(app, ["config", "reset"], env=ENV)

    assert result.exit_code == 0
    assert "Reset settings to defaults" in result.stdout
    stored = json.loads((isolate_config / ".chronoterm" / "config.json").read_text())
    assert stored["max_visible_laps"] == 10


# * Ensure list & bare config show every setting
def test_config_list_and_default(isolate_config):
    from chronoterm.cli.app import app

    runner = CliRunner()
    for args in (["config", "list"], ["config"]):
        result = runner.invoke(app, args, env=ENV)
        assert result.exit_code == 0
        assert "Current Configuration" in result.stdout
        for key in ("tick_ms", "big_digits", "show_deltas", "max_visible_laps", "theme"):
            assert key in result.stdout


# * Ensure themes lists every palette
def test_config_themes(isolate_config):
    from chronoterm.cli.app import app
    from chronoterm.ui.theming.theme_definitions import THEMES

    result = CliRunner().invoke(app, ["config", "themes"], env=ENV)

    assert result.exit_code == 0
    for name in THEMES:
        assert name in result.stdout


# * Ensure an invalid config file falls back to defaults instead of crashing
def test_invalid_config_file_falls_back(isolate_config):
    from chronoterm.cli.app import app

    (isolate_config / ".chronoterm" / "config.json").write_text("{ broken")
    result = CliRunner().invoke(app, ["config", "get", "tick_ms"], env=ENV)

    assert result.exit_code == 0
    assert "Using default settings" in result.stdout
    assert "50" in result.stdout
