"""
Domain Service - Snapshot Synthesizer

Projects a baseline profile forward into monthly snapshots: living costs and
income rise linearly while debt is paid down. The output is a pure function
of its arguments.
"""

from src.domain.entities.profile import EconomicProfile, SnapshotBatch

FORECAST_HORIZON = 6

# Per-step increments; debt is decremented by its step.
FOOD_STEP = 10
RENT_STEP = 10
ENERGY_STEP = 5
TRANSPORT_STEP = 5
DEBT_STEP = 10
INCOME_STEP = 50


def synthesize(
    baseline: EconomicProfile,
    step_count: int = FORECAST_HORIZON,
    *,
    clamp_debt: bool = False,
) -> SnapshotBatch:
    """
    Build ``step_count`` snapshots starting at ``baseline`` (step 0).

    Debt is passed through unclamped unless ``clamp_debt`` is set, in which
    case it never drops below zero.
    """
    if step_count < 1:
        raise ValueError(f"step_count must be positive, got {step_count}")

    snapshots = []
    for i in range(step_count):
        debt = baseline.debt - i * DEBT_STEP
        if clamp_debt:
            debt = max(debt, 0)
        snapshots.append(
            EconomicProfile(
                food=baseline.food + i * FOOD_STEP,
                rent=baseline.rent + i * RENT_STEP,
                energy=baseline.energy + i * ENERGY_STEP,
                transport=baseline.transport + i * TRANSPORT_STEP,
                debt=debt,
                income=baseline.income + i * INCOME_STEP,
            )
        )
    return SnapshotBatch(snapshots=tuple(snapshots))
