"""
Application Service - Forecast Orchestrator

Owns the lifecycle of forecast requests for one dashboard session:

  * resolves the selected country to its baseline profile
  * synthesizes the snapshot batch for the forecast horizon
  * performs exactly one prediction call per accepted request
  * keeps the single current ``RequestState`` (idle, in flight, succeeded,
    failed) and the timeline derived from it

Only one request may be in flight. A new request while one is running is
rejected with ``ForecastInFlightError`` unless it explicitly supersedes the
running one. Every accepted request gets a new token; a response whose token
is no longer current is discarded.
"""

from __future__ import annotations

import asyncio
from typing import Optional, Sequence

import structlog

from src.domain.entities.errors import (
    ForecastClientError,
    ForecastInFlightError,
    ForecastTransportError,
)
from src.domain.entities.forecast import ForecastResult, RequestState, TimelineSeries
from src.domain.entities.profile import SnapshotBatch
from src.domain.gateways.forecast_gateway import IForecastGateway
from src.domain.services.preset_catalog import PresetCatalog
from src.domain.services.series_reconciler import ACTUAL_SPI_SERIES, reconcile
from src.domain.services.snapshot_synthesizer import FORECAST_HORIZON, synthesize
from src.shared.consts import DEFAULT_PREDICTION_TIMEOUT_SECONDS

logger = structlog.get_logger(__name__)

UNEXPECTED_ERROR_KIND = "unexpected_error"


class ForecastOrchestrator:
    """State machine around the prediction service call."""

    def __init__(
        self,
        forecast_gateway: IForecastGateway,
        catalog: Optional[PresetCatalog] = None,
        *,
        request_timeout: float = DEFAULT_PREDICTION_TIMEOUT_SECONDS,
        clamp_negative_debt: bool = False,
        actual_series: Sequence[float] = ACTUAL_SPI_SERIES,
    ):
        self.forecast_gateway = forecast_gateway
        self.catalog = catalog or PresetCatalog()
        self.request_timeout = request_timeout
        self.clamp_negative_debt = clamp_negative_debt
        self.actual_series = tuple(actual_series)

        self._token = 0
        self._state = RequestState.idle()
        self._task: Optional[asyncio.Task[ForecastResult]] = None

    @property
    def state(self) -> RequestState:
        return self._state

    def timeline(self) -> TimelineSeries:
        return reconcile(self.actual_series, self._state)

    async def request_forecast(
        self,
        country_id: str,
        year: Optional[int] = None,
        *,
        supersede: bool = False,
    ) -> RequestState:
        """
        Run one forecast request and return the state it settled in.

        Raises:
            UnknownCountryError: ``country_id`` is not in the catalog; the
                current state is left untouched.
            ForecastInFlightError: A request is running and ``supersede`` is
                not set.
        """
        baseline = self.catalog.lookup(country_id)

        if self._state.is_in_flight:
            if not supersede:
                logger.warning(
                    "forecast.request.rejected",
                    country=country_id,
                    in_flight_country=self._state.country,
                    token=self._state.token,
                )
                raise ForecastInFlightError(country_id)
            self._abandon_in_flight(reason="superseded")

        self._token += 1
        token = self._token
        self._state = self._state.in_flight(country_id, year, token)

        batch = synthesize(
            baseline, FORECAST_HORIZON, clamp_debt=self.clamp_negative_debt
        )
        task = asyncio.create_task(self._call_gateway(batch))
        self._task = task

        logger.info(
            "forecast.request.accepted",
            country=country_id,
            year=year,
            token=token,
            steps=len(batch),
        )

        try:
            result = await task
        except asyncio.CancelledError:
            caller = asyncio.current_task()
            caller_cancelled = caller is not None and caller.cancelling() > 0
            if token != self._token:
                logger.info("forecast.request.superseded", token=token)
                if not caller_cancelled:
                    return self._state
                raise
            self._state = RequestState.idle(token)
            logger.info("forecast.request.abandoned", token=token)
            raise
        except ForecastClientError as exc:
            return self._settle(token, self._state.failed(exc.message, exc.kind))
        except Exception as exc:
            logger.error(
                "forecast.request.unexpected_error",
                token=token,
                error=str(exc),
                exc_info=exc,
            )
            return self._settle(
                token,
                self._state.failed(f"Unexpected forecast error: {exc}", UNEXPECTED_ERROR_KIND),
            )
        finally:
            if self._task is task:
                self._task = None

        return self._settle(token, self._state.succeeded(result))

    def cancel(self) -> RequestState:
        """Abandon the running request, if any, and go back to idle."""
        if not self._state.is_in_flight:
            return self._state
        self._abandon_in_flight(reason="cancelled")
        self._state = RequestState.idle(self._token)
        return self._state

    async def _call_gateway(self, batch: SnapshotBatch) -> ForecastResult:
        try:
            return await asyncio.wait_for(
                self.forecast_gateway.predict(batch), timeout=self.request_timeout
            )
        except asyncio.TimeoutError as exc:
            raise ForecastTransportError(
                f"Forecast request timed out after {self.request_timeout:g}s"
            ) from exc

    def _abandon_in_flight(self, reason: str) -> None:
        abandoned = self._token
        self._token += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        logger.info("forecast.request.invalidated", token=abandoned, reason=reason)

    def _settle(self, token: int, new_state: RequestState) -> RequestState:
        if token != self._token:
            logger.info(
                "forecast.response.stale_discarded",
                token=token,
                current_token=self._token,
            )
            return self._state

        self._state = new_state
        logger.info(
            "forecast.request.settled",
            token=token,
            status=new_state.status.value,
            error=new_state.error,
            error_kind=new_state.error_kind,
        )
        return self._state
