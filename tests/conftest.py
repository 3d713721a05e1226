# tests/conftest.py
# Pytest configuration w/ isolation fixtures for deterministic test runs

import json
from pathlib import Path

import pytest

from tests.test_support.fakes import FakeClock, ScriptedKeySource


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    # Patch Path.home() to isolated temp directory
    fake_home = tmp_path / "fake_home"
    fake_home.mkdir()

    # Create isolated .chronoterm directory
    chrono_dir = fake_home / ".chronoterm"
    chrono_dir.mkdir()

    # Create minimal config.json w/ test defaults
    config_data = {
        "tick_ms": 50,
        "big_digits": False,
        "show_deltas": True,
        "max_visible_laps": 10,
        "auto_start": False,
        "exit_on_cap": False,
        "theme": "deep_blue",
        "dev_mode": False,
    }

    config_file = chrono_dir / "config.json"
    with open(config_file, "w") as f:
        json.dump(config_data, f, indent=2)

    monkeypatch.setattr(Path, "home", lambda: fake_home)
    monkeypatch.delenv("CHRONOTERM_CONFIG", raising=False)

    # ! reset global settings_manager state & patch its config_path to use isolated location
    from chronoterm.config.settings import settings_manager

    settings_manager._settings = None
    settings_manager.config_path = config_file

    # ! clear any per-run theme override & the ChronoColors cache
    from chronoterm.ui.theming.theme_engine import set_theme_override

    set_theme_override(None)

    # ! reset output manager to SilentOutput for test isolation
    from chronoterm.core.output import reset_output_manager

    reset_output_manager()

    yield fake_home

    reset_output_manager()

    from chronoterm.chrono_io.console import reset_console

    reset_console()


@pytest.fixture
def fake_clock():
    return FakeClock()


@pytest.fixture
def engine(fake_clock):
    from chronoterm.core.timer import TimerEngine

    return TimerEngine(clock=fake_clock)


@pytest.fixture
def scripted_keys():
    # factory so each test states its own key script
    def _make(*keys, on_poll=None):
        return ScriptedKeySource(list(keys), on_poll=on_poll)

    return _make
