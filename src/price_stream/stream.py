"""Bounded random price streams.

A stream is built by rejection sampling:

    repeatedly draw uniform(0, upper_bound) -> keep draws inside the bounds

The result is an infinite, lazily evaluated iterator. Nothing is drawn until
the consumer asks for the next value, so callers truncate it with
:func:`price_stream.sequences.take` (or :func:`itertools.islice`).

Bounds are validated when the stream is created, not on first ``next()``.
``lower_bound >= upper_bound`` would otherwise reject every draw forever.
"""

from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Protocol

from .constants import LOW_ACCEPTANCE_RATE_WARNING
from .data import PriceBounds, StreamConfig
from .sequences import repeatedly, take

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Anything with a ``random()`` returning floats in ``[0, 1)``.

    :class:`random.Random` is the usual implementation.
    """

    def random(self) -> float: ...


def generate_prices_within(bounds: PriceBounds, *, rng: Optional[RandomSource] = None) -> Iterator[float]:
    """Return an infinite iterator of prices inside ``bounds``.

    Parameters
    ----------
    bounds:
        Validated half-open interval.
    rng:
        Random source. When omitted a fresh :class:`random.Random` is created
        for this stream only.
    """

    source: RandomSource = rng if rng is not None else random.Random()
    upper = float(bounds.upper_bound)

    if bounds.acceptance_rate < LOW_ACCEPTANCE_RATE_WARNING:
        logger.warning(
            "Price bounds [%s, %s) keep only %.4f of draws (~%.0f draws per price)",
            bounds.lower_bound,
            bounds.upper_bound,
            bounds.acceptance_rate,
            bounds.expected_draws_per_value,
        )
    else:
        logger.debug(
            "Created price stream for [%s, %s) acceptance_rate=%.4f",
            bounds.lower_bound,
            bounds.upper_bound,
            bounds.acceptance_rate,
        )

    # contains() also guards the upper edge: random() * upper can round up to upper.
    return filter(bounds.contains, repeatedly(lambda: source.random() * upper))


def generate_prices(
    lower_bound: float,
    upper_bound: float,
    *,
    rng: Optional[RandomSource] = None,
) -> Iterator[float]:
    """Return an infinite iterator of floats ``v`` with ``lower_bound <= v < upper_bound``.

    Each call returns a new, independent stream.

    Raises
    ------
    ValueError
        If ``lower_bound >= upper_bound``, ``upper_bound <= 0`` or either bound
        is not finite (including integers too large for a float).
    """

    try:
        bounds = PriceBounds(float(lower_bound), float(upper_bound))
    except OverflowError as e:
        raise ValueError(
            f"Price bounds must be finite, got lower_bound={lower_bound!r} upper_bound={upper_bound!r}"
        ) from e
    return generate_prices_within(bounds, rng=rng)


def sample_prices(config: StreamConfig) -> List[float]:
    """Take ``config.count`` prices from a stream seeded with ``config.seed``."""

    rng = random.Random(config.seed)
    prices = take(config.count, generate_prices_within(config.bounds, rng=rng))
    logger.info(
        "Sampled %d prices in [%s, %s) seed=%s",
        len(prices),
        config.bounds.lower_bound,
        config.bounds.upper_bound,
        config.seed,
    )
    return prices
