from __future__ import annotations

import logging
from types import SimpleNamespace

import pytest
import structlog

from src.shared.consts import EnumEnvironment, EnumLogLevel
from src.shared.logging import (
    _select_renderer,
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


@pytest.mark.parametrize(
    "environment, renderer",
    [
        ("production", structlog.processors.JSONRenderer),
        ("PRODUCTION", structlog.processors.JSONRenderer),
        ("development", structlog.dev.ConsoleRenderer),
        ("testing", structlog.dev.ConsoleRenderer),
    ],
)
def test_renderer_depends_on_environment(environment, renderer) -> None:
    assert isinstance(_select_renderer(environment), renderer)


def test_log_file_receives_forecast_events(tmp_path) -> None:
    log_file = tmp_path / "spi.log"
    configure_logging(level="INFO", file_path=str(log_file), environment="production")

    get_logger("tests.forecast").info("forecast.request.accepted", country="Finland")
    for handler in logging.getLogger().handlers:
        handler.flush()

    content = log_file.read_text()
    assert "forecast.request.accepted" in content
    assert "Finland" in content


def test_level_falls_back_to_environment_variable(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("LOG_FILE_PATH", raising=False)

    configure_logging()

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)


def test_http_client_loggers_stay_at_warning_in_debug() -> None:
    configure_logging(level="DEBUG", environment="development")

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING


def test_update_logging_from_settings_accepts_enums() -> None:
    settings = SimpleNamespace(
        environment=EnumEnvironment.PRODUCTION,
        logging=SimpleNamespace(level=EnumLogLevel.ERROR, format="%(message)s", file_path=None),
    )

    update_logging_from_settings(settings)

    assert logging.getLogger().level == logging.ERROR


def test_update_logging_ignores_incomplete_settings() -> None:
    update_logging_from_settings(object())
