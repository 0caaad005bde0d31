"""
Presentation Layer - Timeline Controller

Serves the reconciled SPI timeline. Labels 1..6 carry the actual series;
labels 7..12 and the forecast dataset appear only after a successful
forecast.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.application.dtos.forecast_dto import TimelineDTO
from src.application.use_cases.forecast_use_cases import GetTimelineUseCase
from src.main.container import AppContainer

router = APIRouter(tags=["Timeline"])


@router.get("/timeline", response_model=TimelineDTO, summary="Chart-ready SPI timeline")
@inject
async def get_timeline(
    get_timeline_use_case: GetTimelineUseCase = Depends(
        Provide[AppContainer.get_timeline_use_case]
    ),
) -> TimelineDTO:
    return await get_timeline_use_case.execute()
