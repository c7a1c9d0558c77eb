"""Test server entry points and per-app logging context."""

from unittest.mock import MagicMock

import pytest

from siren import main as launcher
from siren.config import Settings
from siren.config.logging import _environment_processor


@pytest.mark.parametrize(
    "environment, expected",
    [("production", "run_production_server"), ("prod", "run_production_server"), ("development", "run_development_server")],
)
def test_main_picks_server_for_environment(monkeypatch, environment, expected):
    """Test that main() starts the server matching the environment."""
    runners = {name: MagicMock() for name in ("run_production_server", "run_development_server")}
    for name, runner in runners.items():
        monkeypatch.setattr(launcher, name, runner)
    monkeypatch.setattr(launcher, "get_settings", lambda: Settings(_env_file=None, environment=environment))

    launcher.main()

    runners[expected].assert_called_once_with()
    for name, runner in runners.items():
        if name != expected:
            runner.assert_not_called()


def test_environment_processor_uses_given_settings():
    processor = _environment_processor(Settings(_env_file=None, environment="staging", app_version="2.3.4"))

    event = processor(None, "info", {"event": "hello"})

    assert event == {"event": "hello", "environment": "staging", "app_version": "2.3.4"}
