"""Infrastructure implementation for dependency health checks."""

from __future__ import annotations

from datetime import datetime, timezone
from time import perf_counter
from typing import Iterable, List, Sequence
from urllib.parse import urljoin

import httpx

from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from src.domain.ports.health_check import IHealthCheckService
from src.shared import get_logger

logger = get_logger(__name__)

PREDICTION_SERVICE_PROBE_PATHS: Sequence[str] = ("/health", "/docs", "/")


class HealthCheckService(IHealthCheckService):
    """Probe the prediction service over HTTP and aggregate the result."""

    def __init__(
        self,
        prediction_service_url: str,
        *,
        http_timeout: float = 5.0,
        probe_paths: Sequence[str] = PREDICTION_SERVICE_PROBE_PATHS,
    ) -> None:
        self._prediction_service_url = prediction_service_url
        self._http_timeout = http_timeout
        self._probe_paths = tuple(probe_paths)

    async def evaluate(self) -> SystemHealth:
        dependency_statuses: List[DependencyStatus] = [
            await self._check_http_service(
                name="prediction_service",
                base_url=self._prediction_service_url,
                paths=self._probe_paths,
            )
        ]

        overall_status = self._aggregate_status(dependency_statuses)
        logger.debug("health.evaluated", status=overall_status.value)
        return SystemHealth(status=overall_status, dependencies=dependency_statuses)

    def _aggregate_status(self, statuses: Iterable[DependencyStatus]) -> ServiceStatus:
        return ServiceStatus.worst(dep.status for dep in statuses)

    async def _check_http_service(
        self,
        *,
        name: str,
        base_url: str,
        paths: Iterable[str],
    ) -> DependencyStatus:
        if not base_url:
            return DependencyStatus(
                name=name,
                status=ServiceStatus.UNKNOWN,
                message="Service URL not configured.",
            )

        attempts: List[dict] = []
        last_result: DependencyStatus | None = None

        # First reachable answer wins; otherwise report the last failure
        for path in paths:
            result = await self._probe(name=name, url=self._join(base_url, path))
            attempts.append(
                {
                    "path": path,
                    "status": result.status.value,
                    "message": result.message,
                    "checked_at": datetime.now(timezone.utc).isoformat(),
                }
            )
            if result.is_reachable:
                result.details["attempts"] = attempts
                return result
            last_result = result

        if last_result is None:
            return DependencyStatus(
                name=name,
                status=ServiceStatus.UNKNOWN,
                message="No probe paths configured",
            )

        last_result.details["attempts"] = attempts
        return last_result

    async def _probe(self, *, name: str, url: str) -> DependencyStatus:
        start = perf_counter()

        try:
            async with httpx.AsyncClient(timeout=self._http_timeout) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            return DependencyStatus(
                name=name,
                status=ServiceStatus.DOWN,
                message=f"HTTP request failed: {exc}",
                latency_ms=(perf_counter() - start) * 1000,
                details={"url": url},
            )

        status_code = response.status_code
        if status_code >= 500:
            status = ServiceStatus.DOWN
        elif status_code >= 400:
            status = ServiceStatus.DEGRADED
        else:
            status = ServiceStatus.UP

        return DependencyStatus(
            name=name,
            status=status,
            message=f"HTTP {status_code}",
            latency_ms=(perf_counter() - start) * 1000,
            details={"url": url, "status_code": status_code},
        )

    @staticmethod
    def _join(base_url: str, path: str) -> str:
        if not path:
            return base_url
        base = base_url if base_url.endswith("/") else f"{base_url}/"
        return urljoin(base, path.lstrip("/"))
