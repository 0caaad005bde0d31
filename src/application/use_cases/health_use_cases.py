"""Use cases for health and application info endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, Optional
from urllib.parse import urlsplit, urlunsplit

from src.application.dtos.health_dto import ApplicationInfoDTO, SystemHealthDTO
from src.application.models import SystemInfo
from src.domain.entities.health import ApplicationInfo, SystemHealth
from src.domain.ports.health_check import IHealthCheckService
from src.domain.services.snapshot_synthesizer import FORECAST_HORIZON

PREDICTION_SERVICE_DEPENDENCY = "prediction_service"


def redact_url(url: str) -> str:
    """Strip credentials embedded in a service URL."""
    if not url:
        return url

    parsed = urlsplit(url)
    if not (parsed.username or parsed.password):
        return url

    netloc = parsed.hostname or ""
    if parsed.port:
        netloc = f"{netloc}:{parsed.port}"
    return urlunsplit((parsed.scheme, netloc, parsed.path, parsed.query, parsed.fragment))


class GetHealthStatusUseCase:
    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> SystemHealthDTO:
        return SystemHealthDTO.from_domain(await self._health_check_service.evaluate())


class GetApplicationInfoUseCase:
    """
    Build the ``/info`` payload.

    Combines build metadata with uptime, a fresh health probe and the
    prediction service settings the forecast flow runs with.
    """

    def __init__(
        self,
        health_check_service: IHealthCheckService,
        system_info: SystemInfo,
    ) -> None:
        self._health_check_service = health_check_service
        self._info = system_info

    async def execute(self, started_at: Optional[datetime]) -> ApplicationInfoDTO:
        system_health = await self._health_check_service.evaluate()

        now = datetime.now(timezone.utc)
        started = started_at or now

        info = ApplicationInfo(
            name=self._info.title,
            description=self._info.description,
            version=self._info.version,
            environment=self._info.environment,
            git_commit=self._info.git_commit,
            build_time=self._info.build_time,
            started_at=started,
            uptime_seconds=max(0.0, (now - started).total_seconds()),
            status=system_health.status,
            dependencies=system_health.dependencies,
            extras=self._forecast_extras(system_health),
        )
        return ApplicationInfoDTO.from_domain(info)

    def _forecast_extras(self, system_health: SystemHealth) -> Dict[str, Any]:
        probe = system_health.dependency(PREDICTION_SERVICE_DEPENDENCY)
        return {
            "prediction_service": {
                "url": redact_url(self._info.prediction_service_url),
                "timeout_seconds": self._info.prediction_timeout_seconds,
                "reachable": probe.is_reachable if probe else None,
            },
            "forecast": {
                "horizon": FORECAST_HORIZON,
                "clamp_negative_debt": self._info.clamp_negative_debt,
            },
        }
