"""
Application Use Cases - Forecast

Thin entry points used by the presentation layer. They translate DTOs to
orchestrator calls and orchestrator state back to DTOs; the request
lifecycle itself lives in ``ForecastOrchestrator``.
"""

from src.application.dtos.catalog_dto import CatalogResponseDTO, EconomicProfileDTO
from src.application.dtos.forecast_dto import (
    ForecastRequestDTO,
    RequestStateDTO,
    TimelineDTO,
)
from src.application.services.forecast_orchestrator import ForecastOrchestrator
from src.domain.services.preset_catalog import YEAR_OPTIONS, PresetCatalog


class GetCatalogUseCase:
    """List the selectable countries, years and baselines."""

    def __init__(self, catalog: PresetCatalog) -> None:
        self._catalog = catalog

    async def execute(self) -> CatalogResponseDTO:
        countries = self._catalog.countries()
        return CatalogResponseDTO(
            countries=countries,
            years=list(YEAR_OPTIONS),
            presets={
                name: EconomicProfileDTO.from_domain(self._catalog.lookup(name))
                for name in countries
            },
        )


class RequestForecastUseCase:
    """Trigger a forecast and wait for it to settle."""

    def __init__(self, orchestrator: ForecastOrchestrator) -> None:
        self._orchestrator = orchestrator

    async def execute(self, request: ForecastRequestDTO) -> RequestStateDTO:
        state = await self._orchestrator.request_forecast(
            request.country, request.year, supersede=request.supersede
        )
        return RequestStateDTO.from_domain(state)


class CancelForecastUseCase:
    """Abandon the in-flight forecast request."""

    def __init__(self, orchestrator: ForecastOrchestrator) -> None:
        self._orchestrator = orchestrator

    async def execute(self) -> RequestStateDTO:
        return RequestStateDTO.from_domain(self._orchestrator.cancel())


class GetForecastStateUseCase:
    def __init__(self, orchestrator: ForecastOrchestrator) -> None:
        self._orchestrator = orchestrator

    async def execute(self) -> RequestStateDTO:
        return RequestStateDTO.from_domain(self._orchestrator.state)


class GetTimelineUseCase:
    """Reconcile the actual series with the current forecast, if any."""

    def __init__(self, orchestrator: ForecastOrchestrator) -> None:
        self._orchestrator = orchestrator

    async def execute(self) -> TimelineDTO:
        state = self._orchestrator.state
        return TimelineDTO.from_domain(self._orchestrator.timeline(), state)
