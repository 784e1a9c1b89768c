"""Tests for settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from src.config import Settings
from src.core.logging import LOG_FORMAT, _resolve_level, get_logger, setup_logging


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("SIMULATION_DAYS", raising=False)
        s = Settings(_env_file=None)
        assert s.LOG_LEVEL == "INFO"
        assert s.SIMULATION_DAYS == 30

    def test_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("SIMULATION_DAYS", "7")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings(_env_file=None)
        assert s.SIMULATION_DAYS == 7
        assert s.LOG_LEVEL == "DEBUG"

    def test_negative_days_rejected(self, monkeypatch) -> None:
        monkeypatch.setenv("SIMULATION_DAYS", "-1")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLogging:
    def test_get_logger(self) -> None:
        assert get_logger("src.core.pharmacy").name == "src.core.pharmacy"

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("DEBUG", logging.DEBUG),
            ("debug", logging.DEBUG),
            ("warning", logging.WARNING),
            ("INFO", logging.INFO),
            ("NOT_A_LEVEL", logging.INFO),
            ("", logging.INFO),
        ],
    )
    def test_resolve_level(self, name: str, expected: int) -> None:
        assert _resolve_level(name) == expected

    @pytest.mark.parametrize(
        "name, expected",
        [("debug", logging.DEBUG), ("NOT_A_LEVEL", logging.INFO)],
    )
    def test_setup_logging_passes_level(
        self, monkeypatch, name: str, expected: int
    ) -> None:
        calls: list[dict] = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        setup_logging(name)
        assert len(calls) == 1
        assert calls[0]["level"] == expected
        assert calls[0]["format"] == LOG_FORMAT
