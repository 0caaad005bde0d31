"""
Dependency container injection module - Main Layer

Composition root wiring the preset catalog, the prediction service gateway,
the forecast orchestrator and the use cases consumed by the controllers.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.services.forecast_orchestrator import ForecastOrchestrator
from src.application.use_cases.forecast_use_cases import (
    CancelForecastUseCase,
    GetCatalogUseCase,
    GetForecastStateUseCase,
    GetTimelineUseCase,
    RequestForecastUseCase,
)
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.domain.services.preset_catalog import PresetCatalog
from src.infrastructure.gateways.prediction_service_gateway import (
    PredictionServiceGateway,
)
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(
        packages=["..presentation", "..application"]
    )

    # Settings
    config = providers.Configuration()

    # Domain
    preset_catalog = providers.Singleton(PresetCatalog)

    # Infrastructure
    prediction_service_gateway = providers.Singleton(
        PredictionServiceGateway,
        base_url=config.prediction.base_url,
        timeout=config.prediction.timeout_seconds,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        prediction_service_url=config.prediction.base_url,
        http_timeout=config.prediction.health_timeout_seconds,
    )

    # Application
    forecast_orchestrator = providers.Singleton(
        ForecastOrchestrator,
        forecast_gateway=prediction_service_gateway,
        catalog=preset_catalog,
        request_timeout=config.prediction.timeout_seconds,
        clamp_negative_debt=config.forecast.clamp_negative_debt,
    )

    get_catalog_use_case = providers.Factory(
        GetCatalogUseCase,
        catalog=preset_catalog,
    )

    request_forecast_use_case = providers.Factory(
        RequestForecastUseCase,
        orchestrator=forecast_orchestrator,
    )

    cancel_forecast_use_case = providers.Factory(
        CancelForecastUseCase,
        orchestrator=forecast_orchestrator,
    )

    get_forecast_state_use_case = providers.Factory(
        GetForecastStateUseCase,
        orchestrator=forecast_orchestrator,
    )

    get_timeline_use_case = providers.Factory(
        GetTimelineUseCase,
        orchestrator=forecast_orchestrator,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.app.title,
        description=config.app.description,
        version=config.app.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.app.git_commit,
        build_time=config.app.build_time,
        prediction_service_url=config.prediction.base_url,
        prediction_timeout_seconds=config.prediction.timeout_seconds,
        clamp_negative_debt=config.forecast.clamp_negative_debt,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle of the forecast session owned by the container.

    Any forecast still in flight when the application stops is cancelled so
    that no task outlives the event loop.
    """
    container = get_container()
    orchestrator = container.forecast_orchestrator()

    logger.info(
        "container.resources.initialized",
        prediction_service=container.config.prediction.base_url(),
        countries=container.preset_catalog().countries(),
    )
    try:
        yield container
    finally:
        state = orchestrator.cancel()
        logger.info("container.resources.shutdown", forecast_status=state.status.value)
