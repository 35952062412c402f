"""Export helpers.

The export target is a JSON list of ``{"time": t, "price": p}`` records,
ordered as the points were generated.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from .data import PricePoint

logger = logging.getLogger(__name__)


def build_price_series_records(points: Iterable[PricePoint]) -> list[dict[str, Any]]:
    """Build JSON-serialisable records from price points, preserving order."""

    return [{"time": int(p.time), "price": float(p.price)} for p in points]


def write_price_series_json(path: str | Path, points: Iterable[PricePoint]) -> int:
    """Write ``points`` to ``path`` as indented JSON and return the record count.

    Parent directories are created as needed.
    """

    path = Path(path)
    records = build_price_series_records(points)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(records, indent=2), encoding="utf-8")
    logger.info("Wrote %d price points to %s", len(records), path)
    return len(records)
