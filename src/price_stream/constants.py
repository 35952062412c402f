"""Project-wide constants for :mod:`price_stream`.

Defaults used by the CLI and the config loader live here so call sites don't
carry their own literals.
"""

from __future__ import annotations

DEFAULT_LOWER_BOUND: float = 24.0
DEFAULT_UPPER_BOUND: float = 42.0

# How many prices to take from a stream when the caller doesn't say.
DEFAULT_COUNT: int = 10

# First time index assigned when pairing prices with time.
DEFAULT_START_TIME: int = 0

LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Streams keeping fewer than this fraction of draws get a warning logged.
LOW_ACCEPTANCE_RATE_WARNING: float = 0.01
