"""
Application DTOs - Forecast

Request and response payloads of the forecast endpoints: the forecast
trigger, the current request state and the chart-ready timeline.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from src.domain.entities.forecast import RequestState, RequestStatus, TimelineSeries
from src.domain.services.preset_catalog import YEAR_OPTIONS

CHART_TITLE = "Societal Pressure Index Over Time"
X_AXIS_TITLE = "Time Step (Month)"
Y_AXIS_TITLE = "SPI Score"
ACTUAL_SERIES_LABEL = "Actual SPI"
FORECAST_SERIES_LABEL = "Forecast SPI"


class ForecastRequestDTO(BaseModel):
    """Payload that triggers a forecast for a selected country and year."""

    country: str = Field(description="Country preset to forecast, e.g. 'Finland'")
    year: Optional[int] = Field(
        default=None, description="Selected reference year (display only)"
    )
    supersede: bool = Field(
        default=False,
        description=(
            "Replace a request that is still in flight instead of being "
            "rejected with 409"
        ),
    )

    @field_validator("year")
    @classmethod
    def _year_must_be_selectable(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value not in YEAR_OPTIONS:
            raise ValueError(f"year must be one of {list(YEAR_OPTIONS)}")
        return value

    model_config = {
        "json_schema_extra": {
            "example": {"country": "Finland", "year": 2024, "supersede": False}
        }
    }


class RequestStateDTO(BaseModel):
    """Current state of the forecast request lifecycle."""

    status: RequestStatus
    country: Optional[str] = None
    year: Optional[int] = None
    predicted_spi: Optional[List[float]] = Field(
        default=None, description="Present only when status is 'succeeded'"
    )
    error: Optional[str] = Field(
        default=None, description="Human readable failure reason"
    )
    error_kind: Optional[str] = Field(
        default=None,
        description="transport_error, server_error or malformed_response",
    )
    token: int = Field(description="Monotonic request token")
    updated_at: datetime

    @classmethod
    def from_domain(cls, state: RequestState) -> "RequestStateDTO":
        return cls(
            status=state.status,
            country=state.country,
            year=state.year,
            predicted_spi=list(state.result.predicted_spi) if state.result else None,
            error=state.error,
            error_kind=state.error_kind,
            token=state.token,
            updated_at=state.updated_at,
        )


class SeriesDTO(BaseModel):
    """One dataset of the timeline chart."""

    label: str
    data: List[float]
    is_forecast: bool = False


class TimelineDTO(BaseModel):
    """Timeline consumed by the chart renderer."""

    title: str = CHART_TITLE
    x_axis_title: str = X_AXIS_TITLE
    y_axis_title: str = Y_AXIS_TITLE
    suggested_min: float = 0
    suggested_max: float = 100
    labels: List[str]
    datasets: List[SeriesDTO]
    status: RequestStatus
    caption: Optional[str] = Field(
        default=None, description="Shown only when a forecast is displayed"
    )

    @classmethod
    def from_domain(
        cls, timeline: TimelineSeries, state: RequestState
    ) -> "TimelineDTO":
        datasets = [SeriesDTO(label=ACTUAL_SERIES_LABEL, data=list(timeline.actual))]
        caption = None
        if timeline.forecast is not None:
            datasets.append(
                SeriesDTO(
                    label=FORECAST_SERIES_LABEL,
                    data=list(timeline.forecast),
                    is_forecast=True,
                )
            )
            caption = f"Forecasting SPI for {state.country}"
            if state.year is not None:
                caption += f" in {state.year}"

        return cls(
            labels=list(timeline.labels),
            datasets=datasets,
            status=state.status,
            caption=caption,
        )
