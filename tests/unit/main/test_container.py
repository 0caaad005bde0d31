from __future__ import annotations

import asyncio

import pytest
from dependency_injector import providers

from src.application.services.forecast_orchestrator import ForecastOrchestrator
from src.domain.entities.forecast import RequestStatus
from src.infrastructure.gateways.prediction_service_gateway import (
    PredictionServiceGateway,
)
from src.main.config import AppSettings
from src.main.container import app_lifespan, get_container, init_container
from tests.conftest import BlockingForecastGateway


def test_init_and_get_container(monkeypatch) -> None:
    monkeypatch.setenv("ML_API_URL", "http://ml-api:8001")

    container = init_container(AppSettings())

    assert get_container() is container
    gateway = container.prediction_service_gateway()
    assert isinstance(gateway, PredictionServiceGateway)
    assert gateway.predict_url == "http://ml-api:8001/predict"
    assert container.forecast_orchestrator() is container.forecast_orchestrator()
    assert container.forecast_orchestrator().forecast_gateway is gateway


@pytest.mark.asyncio
async def test_app_lifespan_cancels_in_flight_forecast() -> None:
    container = init_container(AppSettings())
    gateway = BlockingForecastGateway()
    orchestrator = ForecastOrchestrator(gateway)
    container.forecast_orchestrator.override(providers.Object(orchestrator))

    async with app_lifespan():
        pending = asyncio.create_task(orchestrator.request_forecast("Finland"))
        await gateway.started.wait()

    state = await pending
    assert state.status is RequestStatus.IDLE
    assert orchestrator.state.status is RequestStatus.IDLE
    assert gateway.cancelled == 1


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("src.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
