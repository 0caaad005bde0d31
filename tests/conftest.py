from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import List, Optional, Sequence

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain.entities.errors import ForecastClientError  # noqa: E402
from src.domain.entities.forecast import ForecastResult  # noqa: E402
from src.domain.entities.profile import EconomicProfile, SnapshotBatch  # noqa: E402
from src.domain.gateways.forecast_gateway import IForecastGateway  # noqa: E402

FORECAST_VALUES = [52.0, 53.5, 55.0, 56.25, 57.0, 58.5]


class StubForecastGateway(IForecastGateway):
    """Records every batch and answers with a fixed result or error."""

    def __init__(
        self,
        values: Sequence[float] = FORECAST_VALUES,
        error: Optional[ForecastClientError] = None,
    ):
        self.values = list(values)
        self.error = error
        self.batches: List[SnapshotBatch] = []

    async def predict(self, batch: SnapshotBatch) -> ForecastResult:
        self.batches.append(batch)
        if self.error is not None:
            raise self.error
        return ForecastResult(predicted_spi=tuple(self.values))


class BlockingForecastGateway(IForecastGateway):
    """Holds each call open until the test releases it."""

    def __init__(self, values: Sequence[float] = FORECAST_VALUES):
        self.values = list(values)
        self.batches: List[SnapshotBatch] = []
        self.started = asyncio.Event()
        self.release = asyncio.Event()
        self.cancelled = 0

    async def predict(self, batch: SnapshotBatch) -> ForecastResult:
        self.batches.append(batch)
        self.started.set()
        try:
            await self.release.wait()
        except asyncio.CancelledError:
            self.cancelled += 1
            raise
        return ForecastResult(predicted_spi=tuple(self.values))


@pytest.fixture()
def finland_baseline() -> EconomicProfile:
    return EconomicProfile(
        food=320, rent=850, energy=160, transport=140, debt=200, income=3400
    )


@pytest.fixture()
def stub_gateway() -> StubForecastGateway:
    return StubForecastGateway()
