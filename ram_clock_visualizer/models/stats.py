from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Iterable


@dataclass
class FileStatistics:
    """
    Running sum/min/max/count over the clock rates of one file.

    Notes
    - min starts at +inf and max at -inf so the first update always wins.
    - min/max are only meaningful when count > 0; average and range report 0.0 otherwise.
    """
    sum: float = 0.0
    min: float = math.inf
    max: float = -math.inf
    count: int = 0

    def update(self, clock_rate: float) -> None:
        rate = float(clock_rate)
        self.sum += rate
        self.min = min(self.min, rate)
        self.max = max(self.max, rate)
        self.count += 1

    @property
    def average(self) -> float:
        return self.sum / self.count if self.count > 0 else 0.0

    @property
    def range(self) -> float:
        return self.max - self.min if self.count > 0 else 0.0

    def snapshot(self) -> FileStatistics:
        """Independent copy (finished files must not share a live accumulator)."""
        return replace(self)

    @classmethod
    def from_rates(cls, rates: Iterable[float]) -> FileStatistics:
        stats = cls()
        for r in rates:
            stats.update(r)
        return stats
