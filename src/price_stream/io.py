"""Input loading helpers for :mod:`price_stream`.

This module owns file-format knowledge (JSON) for stream configuration.

Expected format
---------------
    {"lower_bound": 24, "upper_bound": 42, "count": 10, "seed": 7}

``count`` and ``seed`` are optional. Value validation is left to the
dataclasses in :mod:`price_stream.data`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional

from .constants import DEFAULT_COUNT
from .data import PriceBounds, StreamConfig


def _required_float(raw: Mapping[str, Any], key: str) -> float:
    try:
        value = raw[key]
    except KeyError as e:
        raise ValueError(f"Stream config missing required key {key!r}") from e
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Stream config key {key!r} must be a number, got {value!r}")
    try:
        return float(value)
    except OverflowError as e:
        raise ValueError(f"Stream config key {key!r} must be a number, got {value!r}") from e


def _optional_int(raw: Mapping[str, Any], key: str) -> Optional[int]:
    value = raw.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Stream config key {key!r} must be an integer, got {value!r}")
    return value


def parse_stream_config(raw: Mapping[str, Any]) -> StreamConfig:
    """Build a :class:`~price_stream.data.StreamConfig` from a decoded JSON object."""

    if not isinstance(raw, Mapping):
        raise ValueError(f"Stream config must be a JSON object, got {type(raw).__name__}")

    bounds = PriceBounds(
        lower_bound=_required_float(raw, "lower_bound"),
        upper_bound=_required_float(raw, "upper_bound"),
    )
    count = _optional_int(raw, "count")

    return StreamConfig(
        bounds=bounds,
        count=DEFAULT_COUNT if count is None else count,
        seed=_optional_int(raw, "seed"),
    )


def load_stream_config_from_json(path: str | Path) -> StreamConfig:
    """Load a :class:`~price_stream.data.StreamConfig` from JSON."""

    path = Path(path)
    raw = json.loads(path.read_text(encoding="utf-8"))
    return parse_stream_config(raw)
