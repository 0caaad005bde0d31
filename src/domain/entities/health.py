"""
Health domain entities.

Value objects describing the availability of the prediction service and the
operational metadata reported by the ``/health`` and ``/info`` endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class ServiceStatus(str, Enum):
    """Availability of a dependency or of the whole service."""

    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"
    UNKNOWN = "unknown"

    @property
    def severity(self) -> int:
        """Rank used to aggregate statuses: the most severe one wins."""
        return _SEVERITY[self]

    @classmethod
    def worst(cls, statuses: Iterable["ServiceStatus"]) -> "ServiceStatus":
        return max(statuses, key=lambda status: status.severity, default=cls.UP)


_SEVERITY = {
    ServiceStatus.UP: 0,
    ServiceStatus.UNKNOWN: 1,
    ServiceStatus.DEGRADED: 2,
    ServiceStatus.DOWN: 3,
}


@dataclass(slots=True)
class DependencyStatus:
    """Result of probing one external dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_reachable(self) -> bool:
        # A 4xx answer still proves the service is listening
        return self.status in (ServiceStatus.UP, ServiceStatus.DEGRADED)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    def dependency(self, name: str) -> Optional[DependencyStatus]:
        return next((dep for dep in self.dependencies if dep.name == name), None)


@dataclass(slots=True)
class ApplicationInfo:
    """Snapshot served by ``GET /info``: build metadata, uptime and settings."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)
    extras: Dict[str, Any] = field(default_factory=dict)
