"""Tests for logging configuration."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from wizard_economy.core.logging import (
    app_context,
    bind_context,
    clear_context,
    configure_from_settings,
    configure_logging,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    clear_context()
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test JSON rendering includes event, level and app."""
        configure_logging(level="DEBUG", json_format=True)

        get_logger("test").info("Item given", item="Potion")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "Item given"
        assert record["item"] == "Potion"
        assert record["level"] == "info"
        assert record["app"] == "wizard_economy"

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test events below the configured level are dropped."""
        configure_logging(level="WARNING", json_format=True)

        get_logger("test").debug("Spell fizzled")

        assert "Spell fizzled" not in capsys.readouterr().out

    def test_bound_context(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test bound context variables appear on every event."""
        configure_logging(level="INFO", json_format=True)
        bind_context(round=3)

        get_logger("test").info("Wizard looted")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["round"] == 3

    def test_configure_from_settings(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test settings drive level and format."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("WIZARD_ECONOMY_JSON_LOGS", "true")
        monkeypatch.setenv("WIZARD_ECONOMY_LOG_LEVEL", "DEBUG")

        configure_from_settings()
        get_logger("test").debug("Spell cast", spell="Confringo")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["spell"] == "Confringo"

    def test_settings_app_name_and_debug(
        self,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test debug mode lets DEBUG events through and app_name tags them."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("WIZARD_ECONOMY_JSON_LOGS", "true")
        monkeypatch.setenv("WIZARD_ECONOMY_LOG_LEVEL", "ERROR")
        monkeypatch.setenv("WIZARD_ECONOMY_DEBUG", "true")
        monkeypatch.setenv("WIZARD_ECONOMY_APP_NAME", "diagon_alley")

        configure_from_settings()
        get_logger("test").debug("Item exhausted", item="Potion")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "Item exhausted"
        assert record["app"] == "diagon_alley"


def test_app_context() -> None:
    """Test the app processor tags events with the given name."""
    event = app_context("market")(None, "info", {"event": "x"})
    assert event["app"] == "market"
