"""
Infrastructure Gateway - Prediction Service

HTTP client for the external SPI prediction service. Sends a batch of
synthetic snapshots to ``POST {base_url}/predict`` and validates the
``predicted_spi`` array that comes back.
"""

import math
from typing import Any, List

import httpx
import structlog

from src.domain.entities.errors import (
    ForecastServerError,
    ForecastTransportError,
    MalformedForecastResponseError,
)
from src.domain.entities.forecast import ForecastResult
from src.domain.entities.profile import SnapshotBatch
from src.domain.gateways.forecast_gateway import IForecastGateway
from src.shared.consts import DEFAULT_PREDICTION_TIMEOUT_SECONDS

logger = structlog.get_logger(__name__)

PREDICT_PATH = "/predict"


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


class PredictionServiceGateway(IForecastGateway):
    """Implementation of the forecast gateway using an async HTTP client."""

    def __init__(
        self, base_url: str, timeout: float = DEFAULT_PREDICTION_TIMEOUT_SECONDS
    ):
        """
        Initialize the prediction service gateway.

        Args:
            base_url: Base URL of the prediction service (e.g. "http://ml-api:8001")
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def predict_url(self) -> str:
        return f"{self.base_url}{PREDICT_PATH}"

    async def predict(self, batch: SnapshotBatch) -> ForecastResult:
        url = self.predict_url
        headers = {"Content-Type": "application/json", "Accept": "application/json"}

        logger.info("prediction_service.predict.request", url=url, steps=len(batch))

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    url, json=batch.to_payload(), headers=headers
                )
                response.raise_for_status()

        except httpx.HTTPStatusError as e:
            message = self._error_detail(e.response)
            logger.error(
                "prediction_service.http_error",
                status_code=e.response.status_code,
                detail=message,
                url=url,
            )
            raise ForecastServerError(
                message,
                status_code=e.response.status_code,
                details={"url": url},
            ) from e

        except httpx.TimeoutException as e:
            logger.error("prediction_service.timeout", error=str(e), url=url)
            raise ForecastTransportError(
                f"Prediction service timed out after {self.timeout:g}s",
                details={"url": url},
            ) from e

        except httpx.RequestError as e:
            logger.error("prediction_service.request_error", error=str(e), url=url)
            raise ForecastTransportError(
                f"Prediction service request failed: {e}", details={"url": url}
            ) from e

        result = self._parse_prediction(response, expected_length=len(batch))
        logger.info(
            "prediction_service.predict.response",
            status_code=response.status_code,
            points=len(result),
        )
        return result

    def _error_detail(self, response: httpx.Response) -> str:
        """Server ``detail`` verbatim when present, otherwise a generic message."""
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            detail = body.get("detail")
            if isinstance(detail, str) and detail.strip():
                return detail

        return f"Prediction service error (HTTP {response.status_code})"

    def _parse_prediction(
        self, response: httpx.Response, expected_length: int
    ) -> ForecastResult:
        try:
            data = response.json()
        except ValueError as e:
            raise MalformedForecastResponseError(
                "Prediction service returned a non-JSON body"
            ) from e

        if not isinstance(data, dict) or "predicted_spi" not in data:
            logger.warning("prediction_service.missing_predicted_spi", body=data)
            raise MalformedForecastResponseError(
                "Prediction response is missing 'predicted_spi'"
            )

        values = data["predicted_spi"]
        if not isinstance(values, list):
            raise MalformedForecastResponseError("'predicted_spi' must be a list")

        if len(values) != expected_length:
            logger.warning(
                "prediction_service.length_mismatch",
                expected=expected_length,
                received=len(values),
            )
            raise MalformedForecastResponseError(
                f"Expected {expected_length} predictions, received {len(values)}",
                details={"expected": expected_length, "received": len(values)},
            )

        invalid: List[int] = [i for i, value in enumerate(values) if not _is_number(value)]
        if invalid:
            raise MalformedForecastResponseError(
                "'predicted_spi' contains non-numeric entries",
                details={"positions": invalid},
            )

        return ForecastResult(predicted_spi=tuple(float(value) for value in values))
