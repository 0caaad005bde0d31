"""
Presentation Layer - Forecasts Controller

Endpoints that trigger, cancel and inspect the forecast request of the
dashboard session.
"""

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from src.application.dtos.forecast_dto import ForecastRequestDTO, RequestStateDTO
from src.application.use_cases.forecast_use_cases import (
    CancelForecastUseCase,
    GetForecastStateUseCase,
    RequestForecastUseCase,
)
from src.domain.entities.errors import ForecastInFlightError, UnknownCountryError
from src.main.container import AppContainer

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/forecasts", tags=["Forecasts"])


@router.post(
    "",
    response_model=RequestStateDTO,
    summary="Run an SPI forecast for a country preset",
    description="""
    Synthesizes six monthly snapshots from the country's baseline profile,
    sends them to the prediction service and waits for the outcome.
    Prediction service failures are reported in the returned state
    (status `failed`), not as HTTP errors.
    """,
)
@inject
async def request_forecast(
    payload: ForecastRequestDTO,
    request_forecast_use_case: RequestForecastUseCase = Depends(
        Provide[AppContainer.request_forecast_use_case]
    ),
) -> RequestStateDTO:
    try:
        return await request_forecast_use_case.execute(payload)
    except UnknownCountryError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except ForecastInFlightError as exc:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from exc
    except Exception as exc:  # pragma: no cover
        logger.error(
            "forecast.unexpected_error",
            country=payload.country,
            error=str(exc),
            exc_info=exc,
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error",
        ) from exc


@router.get(
    "/state",
    response_model=RequestStateDTO,
    summary="Current forecast request state",
)
@inject
async def get_forecast_state(
    get_forecast_state_use_case: GetForecastStateUseCase = Depends(
        Provide[AppContainer.get_forecast_state_use_case]
    ),
) -> RequestStateDTO:
    return await get_forecast_state_use_case.execute()


@router.delete(
    "/current",
    response_model=RequestStateDTO,
    summary="Cancel the forecast request in flight",
)
@inject
async def cancel_forecast(
    cancel_forecast_use_case: CancelForecastUseCase = Depends(
        Provide[AppContainer.cancel_forecast_use_case]
    ),
) -> RequestStateDTO:
    return await cancel_forecast_use_case.execute()
