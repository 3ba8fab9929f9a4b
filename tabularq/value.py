"""Bounded Q-values."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

LOWER_BOUND = -1.0
UPPER_BOUND = 1.0


@dataclass(frozen=True, order=True)
class QValue:
    """A Q-value in the half-open range [-1.0, 1.0)."""

    value: float

    def __post_init__(self) -> None:
        number = float(self.value)
        if math.isnan(number) or not LOWER_BOUND <= number < UPPER_BOUND:
            raise ValueError(
                f"Q-value {number} outside [{LOWER_BOUND}, {UPPER_BOUND})"
            )
        object.__setattr__(self, "value", number)

    def __float__(self) -> float:
        return self.value

    @classmethod
    def random_collect(cls, size: int) -> list[QValue]:
        """Return ``size`` values drawn uniformly from the allowed range."""
        span = UPPER_BOUND - LOWER_BOUND
        return [cls(LOWER_BOUND + span * random.random()) for _ in range(size)]