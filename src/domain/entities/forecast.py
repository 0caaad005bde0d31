"""Domain entities describing forecast requests and reconciled timelines."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from typing import Iterator, Optional, Tuple


class RequestStatus(str, Enum):
    """Lifecycle of a single forecast request."""

    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True, slots=True)
class ForecastResult:
    """Predicted SPI values, one per snapshot of the originating batch."""

    predicted_spi: Tuple[float, ...]

    def __len__(self) -> int:
        return len(self.predicted_spi)

    def __iter__(self) -> Iterator[float]:
        return iter(self.predicted_spi)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True)
class RequestState:
    """
    Immutable snapshot of an orchestrator's request state.

    Only ``SUCCEEDED`` carries a ``result`` and only ``FAILED`` carries an
    ``error`` message; the named constructors keep that consistent.
    """

    status: RequestStatus = RequestStatus.IDLE
    result: Optional[ForecastResult] = None
    error: Optional[str] = None
    error_kind: Optional[str] = None
    country: Optional[str] = None
    year: Optional[int] = None
    token: int = 0
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def idle(cls, token: int = 0) -> "RequestState":
        return cls(status=RequestStatus.IDLE, token=token)

    def in_flight(self, country: str, year: Optional[int], token: int) -> "RequestState":
        return RequestState(
            status=RequestStatus.IN_FLIGHT,
            country=country,
            year=year,
            token=token,
        )

    def succeeded(self, result: ForecastResult) -> "RequestState":
        return replace(
            self,
            status=RequestStatus.SUCCEEDED,
            result=result,
            error=None,
            error_kind=None,
            updated_at=_utcnow(),
        )

    def failed(self, error: str, error_kind: str) -> "RequestState":
        return replace(
            self,
            status=RequestStatus.FAILED,
            result=None,
            error=error,
            error_kind=error_kind,
            updated_at=_utcnow(),
        )

    @property
    def is_in_flight(self) -> bool:
        return self.status is RequestStatus.IN_FLIGHT

    @property
    def is_succeeded(self) -> bool:
        return self.status is RequestStatus.SUCCEEDED and self.result is not None


@dataclass(frozen=True, slots=True)
class TimelineSeries:
    """Labelled actual series plus the optional forecast continuation."""

    labels: Tuple[str, ...]
    actual: Tuple[float, ...]
    forecast: Optional[Tuple[float, ...]] = None

    @property
    def has_forecast(self) -> bool:
        return self.forecast is not None
