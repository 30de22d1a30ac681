"""Tests for settings loading."""
from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from wildcraft.config import Settings, load_settings
from wildcraft.main import build_parser

ENV_NAMES = [
    "WILDCRAFT_TICK_SECONDS",
    "WILDCRAFT_TICK_MINUTES",
    "WILDCRAFT_AUTO_RESTART",
    "WILDCRAFT_LOG_LEVEL",
    "WILDCRAFT_HISTORY_DIR",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # load_dotenv writes into os.environ, so every name is restored afterwards
    for name in ENV_NAMES:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # Keep a stray .env in the working directory out of the way
    monkeypatch.chdir(tmp_path)


class TestLoadSettings:
    def test_defaults(self) -> None:
        settings = load_settings()
        assert settings.tick_seconds == 3.0
        assert settings.tick_minutes == 1
        assert settings.auto_restart is False
        assert settings.log_level == "WARNING"
        assert settings.history_dir == Path.home() / ".wildcraft"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WILDCRAFT_TICK_SECONDS", "0.5")
        monkeypatch.setenv("WILDCRAFT_TICK_MINUTES", "10")
        monkeypatch.setenv("WILDCRAFT_AUTO_RESTART", "true")
        monkeypatch.setenv("WILDCRAFT_LOG_LEVEL", "debug")
        settings = load_settings()
        assert settings.tick_seconds == 0.5
        assert settings.tick_minutes == 10
        assert settings.auto_restart is True
        assert settings.log_level == "DEBUG"

    def test_history_dir_expanded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WILDCRAFT_HISTORY_DIR", "~/games/wildcraft")
        assert load_settings().history_dir == Path.home() / "games" / "wildcraft"

    def test_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("WILDCRAFT_TICK_MINUTES=7\n")
        assert load_settings(env_file).tick_minutes == 7

    def test_environment_wins_over_env_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("WILDCRAFT_TICK_MINUTES=7\n")
        monkeypatch.setenv("WILDCRAFT_TICK_MINUTES", "3")
        assert load_settings(env_file).tick_minutes == 3


class TestSettingsValidation:
    def test_bad_level(self) -> None:
        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(log_level="chatty")

    def test_non_positive_interval(self) -> None:
        with pytest.raises(ValidationError):
            Settings(tick_seconds=0)

    def test_bad_environment_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("WILDCRAFT_TICK_MINUTES", "often")
        with pytest.raises(ValidationError):
            load_settings()


class TestParser:
    def test_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert not args.tui
        assert not args.paused
        assert args.env_file is None

    def test_flags(self) -> None:
        args = build_parser().parse_args(["--tui", "--paused", "--env-file", "x.env"])
        assert args.tui
        assert args.paused
        assert args.env_file == "x.env"
