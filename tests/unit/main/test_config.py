from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.main.config import AppSettings, get_settings
from src.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    for key in ("ML_API_URL", "NEXT_PUBLIC_ML_API", "ML_API_TIMEOUT_SECONDS"):
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()

    assert settings.prediction.base_url == "http://localhost:8001"
    assert settings.prediction.timeout_seconds == 20.0
    assert settings.forecast.clamp_negative_debt is False
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("ML_API_URL", "http://ml-api:9000")
    monkeypatch.setenv("ML_API_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("FORECAST_CLAMP_NEGATIVE_DEBT", "true")
    monkeypatch.setenv("APP_TITLE", "Testing")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.prediction.base_url == "http://ml-api:9000"
    assert settings.prediction.timeout_seconds == 5.0
    assert settings.forecast.clamp_negative_debt is True
    assert settings.app.title == "Testing"
    assert settings.logging.level.value == "DEBUG"


def test_frontend_variable_is_accepted_as_service_url(monkeypatch) -> None:
    monkeypatch.delenv("ML_API_URL", raising=False)
    monkeypatch.setenv("NEXT_PUBLIC_ML_API", "http://frontend-configured:8001")

    settings = AppSettings()

    assert settings.prediction.base_url == "http://frontend-configured:8001"


def test_timeout_outside_bounds_is_rejected(monkeypatch) -> None:
    monkeypatch.setenv("ML_API_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValidationError):
        AppSettings()
