"""Presentation Layer - Catalog Controller."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from src.application.dtos.catalog_dto import CatalogResponseDTO
from src.application.use_cases.forecast_use_cases import GetCatalogUseCase
from src.main.container import AppContainer

router = APIRouter(tags=["Catalog"])


@router.get(
    "/countries",
    response_model=CatalogResponseDTO,
    summary="Selectable countries, years and their baseline profiles",
)
@inject
async def list_countries(
    get_catalog_use_case: GetCatalogUseCase = Depends(
        Provide[AppContainer.get_catalog_use_case]
    ),
) -> CatalogResponseDTO:
    return await get_catalog_use_case.execute()
