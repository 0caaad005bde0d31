"""Domain entities for country economic profiles and synthetic snapshots."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Dict, Iterator, List, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True, slots=True)
class EconomicProfile:
    """Monthly living costs, debt and income for one household profile."""

    food: Number
    rent: Number
    energy: Number
    transport: Number
    debt: Number
    income: Number

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def has_negative_values(self) -> bool:
        return any(value < 0 for value in self.to_dict().values())

    def to_dict(self) -> Dict[str, Number]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class SnapshotBatch:
    """Ordered synthetic snapshots; index ``i`` is time step ``i``."""

    snapshots: Tuple[EconomicProfile, ...]

    def __len__(self) -> int:
        return len(self.snapshots)

    def __iter__(self) -> Iterator[EconomicProfile]:
        return iter(self.snapshots)

    def __getitem__(self, index: int) -> EconomicProfile:
        return self.snapshots[index]

    def to_payload(self) -> Dict[str, List[Dict[str, Number]]]:
        """Request body expected by the prediction service."""
        return {"snapshots": [snapshot.to_dict() for snapshot in self.snapshots]}
