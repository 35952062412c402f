"""Lazy streams of bounded random prices.

The core is :func:`generate_prices`, an infinite iterator of uniformly
distributed floats in ``[lower_bound, upper_bound)`` built by rejection
sampling. Consume it with :func:`take`:

    >>> import random
    >>> prices = take(5, generate_prices(10, 20, rng=random.Random(1)))
    >>> len(prices)
    5

The values are uniform random draws; there is no market model behind them.
"""

from .data import PriceBounds, PricePoint, StreamConfig
from .export import build_price_series_records, write_price_series_json
from .io import load_stream_config_from_json
from .sequences import naturals, repeatedly, take
from .series import generate_price_series, price_records, timestamped_prices
from .stream import RandomSource, generate_prices, generate_prices_within, sample_prices

__all__ = [
    "PriceBounds",
    "PricePoint",
    "RandomSource",
    "StreamConfig",
    "build_price_series_records",
    "generate_price_series",
    "generate_prices",
    "generate_prices_within",
    "load_stream_config_from_json",
    "naturals",
    "price_records",
    "repeatedly",
    "sample_prices",
    "take",
    "timestamped_prices",
    "write_price_series_json",
]
