"""DTOs describing the selectable country presets and years."""

from typing import Dict, List

from pydantic import BaseModel, Field

from src.domain.entities.profile import EconomicProfile


class EconomicProfileDTO(BaseModel):
    """Monthly baseline figures of a country preset."""

    food: float = Field(ge=0)
    rent: float = Field(ge=0)
    energy: float = Field(ge=0)
    transport: float = Field(ge=0)
    debt: float = Field(ge=0)
    income: float = Field(ge=0)

    @classmethod
    def from_domain(cls, profile: EconomicProfile) -> "EconomicProfileDTO":
        return cls(**profile.to_dict())


class CatalogResponseDTO(BaseModel):
    """Countries and years a forecast can be requested for."""

    countries: List[str]
    years: List[int]
    presets: Dict[str, EconomicProfileDTO]

    model_config = {
        "json_schema_extra": {
            "example": {
                "countries": ["Finland", "Germany"],
                "years": [2024, 2025],
                "presets": {
                    "Finland": {
                        "food": 320,
                        "rent": 850,
                        "energy": 160,
                        "transport": 140,
                        "debt": 200,
                        "income": 3400,
                    }
                },
            }
        }
    }
