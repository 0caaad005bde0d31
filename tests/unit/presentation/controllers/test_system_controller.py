from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
from fastapi import Request, Response

from src.application.models import SystemInfo
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from src.presentation.controllers.system_controller import health, info


class _PredictionServiceProbe:
    def __init__(self, status: ServiceStatus):
        self.calls = 0
        self._status = status

    async def evaluate(self) -> SystemHealth:
        self.calls += 1
        return SystemHealth(
            status=self._status,
            dependencies=[
                DependencyStatus(name="prediction_service", status=self._status)
            ],
        )


def _request_started(seconds_ago: float) -> Request:
    started_at = datetime.now(timezone.utc) - timedelta(seconds=seconds_ago)
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/info",
            "headers": [],
            "query_string": b"",
            "app": SimpleNamespace(state=SimpleNamespace(started_at=started_at)),
        }
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "probe_status, http_status",
    [
        (ServiceStatus.UP, 200),
        (ServiceStatus.DEGRADED, 200),
        (ServiceStatus.DOWN, 503),
    ],
)
async def test_health_status_code_follows_prediction_service(
    probe_status, http_status
) -> None:
    response = Response()

    dto = await health(
        response=response,
        get_health_status_use_case=GetHealthStatusUseCase(
            _PredictionServiceProbe(probe_status)
        ),
    )

    assert dto.status is probe_status
    assert response.status_code == http_status


@pytest.mark.asyncio
async def test_info_reports_uptime_and_reachability() -> None:
    probe = _PredictionServiceProbe(ServiceStatus.DOWN)
    system_info = SystemInfo(
        title="SPI",
        description="desc",
        version="1.0",
        environment="testing",
        git_commit="abc",
        build_time="now",
        prediction_service_url="http://ml",
        prediction_timeout_seconds=10.0,
    )

    dto = await info(
        request=_request_started(30),
        get_application_info_use_case=GetApplicationInfoUseCase(probe, system_info),
    )

    assert probe.calls == 1
    assert dto.uptime_seconds >= 30
    assert dto.status is ServiceStatus.DOWN
    assert dto.extras["prediction_service"]["reachable"] is False
    assert dto.extras["prediction_service"]["timeout_seconds"] == 10.0
