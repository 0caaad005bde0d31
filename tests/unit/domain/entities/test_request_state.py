from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from src.domain.entities.errors import (
    ForecastServerError,
    ForecastTransportError,
    MalformedForecastResponseError,
)
from src.domain.entities.forecast import ForecastResult, RequestState, RequestStatus


def test_initial_state_is_idle() -> None:
    state = RequestState.idle()

    assert state.status is RequestStatus.IDLE
    assert state.result is None
    assert state.error is None
    assert state.token == 0


def test_in_flight_clears_previous_outcome() -> None:
    previous = (
        RequestState.idle()
        .in_flight("Finland", 2024, token=1)
        .succeeded(ForecastResult(predicted_spi=(1.0,) * 6))
    )

    state = previous.in_flight("Germany", 2023, token=2)

    assert state.is_in_flight
    assert state.result is None
    assert state.error is None
    assert (state.country, state.year, state.token) == ("Germany", 2023, 2)


def test_failed_keeps_request_identity() -> None:
    state = RequestState.idle().in_flight("USA", None, token=7)

    failed = state.failed("boom", "transport_error")

    assert failed.status is RequestStatus.FAILED
    assert failed.country == "USA"
    assert failed.token == 7
    assert failed.error == "boom"
    assert failed.error_kind == "transport_error"
    assert failed.is_succeeded is False


def test_state_is_immutable() -> None:
    with pytest.raises(FrozenInstanceError):
        RequestState.idle().status = RequestStatus.FAILED  # type: ignore[misc]


def test_error_kinds() -> None:
    assert ForecastTransportError("x").kind == "transport_error"
    assert ForecastServerError("x", status_code=503).kind == "server_error"
    assert MalformedForecastResponseError("x").kind == "malformed_response"
