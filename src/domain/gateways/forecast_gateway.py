"""
Domain Gateway - Forecast

Contract of the external prediction service that turns a batch of synthetic
snapshots into predicted SPI values.
"""

from abc import ABC, abstractmethod

from src.domain.entities.forecast import ForecastResult
from src.domain.entities.profile import SnapshotBatch


class IForecastGateway(ABC):
    """Interface for the prediction service client."""

    @abstractmethod
    async def predict(self, batch: SnapshotBatch) -> ForecastResult:
        """
        Request one SPI prediction per snapshot.

        Args:
            batch: Snapshots to send, in time-step order

        Returns:
            ForecastResult with exactly ``len(batch)`` values

        Raises:
            ForecastTransportError: Connectivity problem or timeout
            ForecastServerError: Non-success status from the service
            MalformedForecastResponseError: Unexpected response body
        """
        pass
