"""Lightweight settings structures consumed by the application layer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration required by the /info use case."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    prediction_service_url: str
    prediction_timeout_seconds: float
    clamp_negative_debt: bool = False
