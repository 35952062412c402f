"""Attach context to bare prices.

A price stream is just floats. These helpers pair each price with a time
index (0, 1, 2, ...) or wrap it in a record, still lazily.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional

from .constants import DEFAULT_START_TIME
from .data import PriceBounds, PricePoint
from .sequences import naturals, take
from .stream import RandomSource, generate_prices_within


def price_records(prices: Iterable[float]) -> Iterator[Dict[str, Any]]:
    """Wrap each price as ``{"price": p}``."""

    return ({"price": float(p)} for p in prices)


def timestamped_prices(prices: Iterable[float], *, start: int = DEFAULT_START_TIME) -> Iterator[PricePoint]:
    """Pair each price with a counting time index starting at ``start``.

    The time index and the prices are independent sequences; the only link
    between them is position.
    """

    return (PricePoint(time=t, price=float(p)) for t, p in zip(naturals(start), prices))


def generate_price_series(
    bounds: PriceBounds,
    count: int,
    *,
    rng: Optional[RandomSource] = None,
    start: int = DEFAULT_START_TIME,
) -> List[PricePoint]:
    """Generate ``count`` time-indexed prices inside ``bounds``."""

    return take(count, timestamped_prices(generate_prices_within(bounds, rng=rng), start=start))
