from __future__ import annotations

import pytest

from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth


@pytest.mark.parametrize(
    "statuses, expected",
    [
        ([], ServiceStatus.UP),
        ([ServiceStatus.UP, ServiceStatus.UNKNOWN], ServiceStatus.UNKNOWN),
        ([ServiceStatus.UNKNOWN, ServiceStatus.DEGRADED], ServiceStatus.DEGRADED),
        ([ServiceStatus.DOWN, ServiceStatus.DEGRADED], ServiceStatus.DOWN),
    ],
)
def test_worst_status_wins(statuses, expected) -> None:
    assert ServiceStatus.worst(statuses) is expected


def test_degraded_dependency_is_still_reachable() -> None:
    assert DependencyStatus(name="ml", status=ServiceStatus.DEGRADED).is_reachable
    assert not DependencyStatus(name="ml", status=ServiceStatus.DOWN).is_reachable
    assert not DependencyStatus(name="ml", status=ServiceStatus.UNKNOWN).is_reachable


def test_dependency_lookup_by_name() -> None:
    probe = DependencyStatus(name="prediction_service", status=ServiceStatus.UP)
    health = SystemHealth(status=ServiceStatus.UP, dependencies=[probe])

    assert health.dependency("prediction_service") is probe
    assert health.dependency("database") is None
