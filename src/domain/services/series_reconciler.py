"""
Domain Service - Series Reconciler

Joins the fixed actual SPI series with the forecast of a settled request.
Actual points sit on labels 1..6; a forecast, when one was returned,
continues on labels 7..12.
"""

from typing import Optional, Sequence, Tuple

from src.domain.entities.forecast import RequestState, TimelineSeries

ACTUAL_SPI_SERIES: Tuple[float, ...] = (45, 46, 47, 48, 49, 50)
ACTUAL_LENGTH = len(ACTUAL_SPI_SERIES)


def _labels(start: int, count: int) -> Tuple[str, ...]:
    return tuple(str(step) for step in range(start, start + count))


def reconcile(
    actual: Sequence[float] = ACTUAL_SPI_SERIES,
    state: Optional[RequestState] = None,
) -> TimelineSeries:
    """Build the renderable timeline for ``state``, idle when omitted."""
    if state is None:
        state = RequestState.idle()
    if len(actual) != ACTUAL_LENGTH:
        raise ValueError(
            f"Actual series must have {ACTUAL_LENGTH} points, got {len(actual)}"
        )

    actual_points = tuple(actual)
    labels = _labels(1, ACTUAL_LENGTH)

    if not state.is_succeeded:
        return TimelineSeries(labels=labels, actual=actual_points)

    forecast = tuple(state.result.predicted_spi)
    return TimelineSeries(
        labels=labels + _labels(ACTUAL_LENGTH + 1, len(forecast)),
        actual=actual_points,
        forecast=forecast,
    )
