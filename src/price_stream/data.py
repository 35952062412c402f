"""Domain objects for bounded price streams.

This module contains *pure* domain objects only:
- no file parsing (see :mod:`price_stream.io`)
- no random draws (see :mod:`price_stream.stream`)
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .constants import DEFAULT_COUNT


@dataclass(frozen=True, slots=True)
class PriceBounds:
    """Half-open interval ``[lower_bound, upper_bound)`` that prices must fall in.

    Candidate prices are drawn from ``[0, upper_bound)``, so ``upper_bound``
    must be positive. A ``lower_bound`` at or below zero rejects nothing.
    """

    lower_bound: float
    upper_bound: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lower_bound) and math.isfinite(self.upper_bound)):
            raise ValueError(
                f"PriceBounds must be finite, got lower_bound={self.lower_bound!r} upper_bound={self.upper_bound!r}"
            )
        if self.upper_bound <= 0:
            raise ValueError(f"PriceBounds.upper_bound must be > 0, got {self.upper_bound!r}")
        if self.lower_bound >= self.upper_bound:
            raise ValueError(
                "PriceBounds.lower_bound must be < upper_bound, "
                f"got lower_bound={self.lower_bound!r} upper_bound={self.upper_bound!r}"
            )

    @property
    def acceptance_rate(self) -> float:
        """Fraction of ``[0, upper_bound)`` draws that land inside the bounds."""

        return (self.upper_bound - max(self.lower_bound, 0.0)) / self.upper_bound

    @property
    def expected_draws_per_value(self) -> float:
        return 1.0 / self.acceptance_rate

    def contains(self, value: float) -> bool:
        return self.lower_bound <= value < self.upper_bound


@dataclass(frozen=True, slots=True)
class PricePoint:
    """A price paired with its position in the series."""

    time: int
    price: float

    def __post_init__(self) -> None:
        if self.time < 0:
            raise ValueError("PricePoint.time must be >= 0")


@dataclass(frozen=True, slots=True)
class StreamConfig:
    """How many prices to sample, from which bounds, with which seed."""

    bounds: PriceBounds
    count: int = DEFAULT_COUNT
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("StreamConfig.count must be >= 0")
