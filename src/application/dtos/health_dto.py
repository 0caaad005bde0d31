"""DTOs for the /health and /info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    ServiceStatus,
    SystemHealth,
)

_PREDICTION_SERVICE_EXAMPLE = {
    "name": "prediction_service",
    "status": "up",
    "message": "HTTP 200",
    "checked_at": "2024-09-09T12:00:00Z",
    "latency_ms": 12.5,
    "details": {"url": "http://ml-api:8001/health", "status_code": 200},
}


class DependencyStatusDTO(BaseModel):
    """Serializable result of one dependency probe."""

    name: str = Field(description="Dependency identifier")
    status: ServiceStatus = Field(description="Status of the dependency")
    message: Optional[str] = Field(default=None, description="Probe outcome")
    checked_at: datetime = Field(description="Timestamp of the probe")
    latency_ms: Optional[float] = Field(
        default=None, description="Latency in milliseconds"
    )
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Probed URL, status code and attempts"
    )

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )

    model_config = {"json_schema_extra": {"example": _PREDICTION_SERVICE_EXAMPLE}}


class SystemHealthDTO(BaseModel):
    """Payload of ``GET /health``."""

    status: ServiceStatus = Field(description="Overall service status")
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {"status": "up", "dependencies": [_PREDICTION_SERVICE_EXAMPLE]}
        }
    }


class ApplicationInfoDTO(BaseModel):
    """Payload of ``GET /info``."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    status: ServiceStatus
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)
    extras: Dict[str, Any] = Field(
        default_factory=dict,
        description="Prediction service endpoint and forecast settings",
    )

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            status=info.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in info.dependencies
            ],
            extras=info.extras,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "SPI Forecast Service",
                "description": "Societal Pressure Index forecasts",
                "version": "1.0.0",
                "environment": "development",
                "git_commit": "abcdef1",
                "build_time": "2024-09-09T11:30:00Z",
                "started_at": "2024-09-09T12:00:00Z",
                "uptime_seconds": 3600.5,
                "status": "up",
                "dependencies": [_PREDICTION_SERVICE_EXAMPLE],
                "extras": {
                    "prediction_service": {
                        "url": "http://ml-api:8001",
                        "timeout_seconds": 20.0,
                        "reachable": True,
                    },
                    "forecast": {"horizon": 6, "clamp_negative_debt": False},
                },
            }
        }
    }
