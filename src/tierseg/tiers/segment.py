from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from tierseg.tiers.time_tier import TimeTier


@dataclass(eq=False)
class Segment:
    start: float
    end: float
    tier: Optional["TimeTier"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(f"segment start {self.start} must be before end {self.end}")

    @property
    def time_range(self) -> Tuple[float, float]:
        return (self.start, self.end)

    def duration(self) -> float:
        return self.end - self.start

    def contains(self, time_s: float) -> bool:
        """True when ``start < time_s <= end``."""

        return self.start < time_s <= self.end
