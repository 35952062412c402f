"""Command-line entry point for :mod:`price_stream`.

Prints (or exports) a sample of random prices drawn from a bounded stream.

Example
-------
python -m price_stream.cli --lower-bound 24 --upper-bound 42 --count 10 --with-time
"""

from __future__ import annotations

import argparse
import logging
import random
from pathlib import Path
from typing import Sequence

from .constants import DEFAULT_COUNT, DEFAULT_LOWER_BOUND, DEFAULT_UPPER_BOUND, LOG_FORMAT
from .data import PriceBounds, StreamConfig
from .export import write_price_series_json
from .io import load_stream_config_from_json
from .series import generate_price_series

logger = logging.getLogger(__name__)


def configure_logging(*, level: int = logging.INFO) -> None:
    """Configure a simple root logger.

    This is safe to call multiple times.
    """

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    else:
        root.setLevel(level)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="price_stream")
    parser.add_argument(
        "--config-json",
        type=Path,
        default=None,
        help="JSON file with lower_bound, upper_bound and optional count/seed (flags override it)",
    )
    parser.add_argument(
        "--lower-bound",
        type=float,
        default=None,
        help=f"Inclusive lower bound for prices (default: {DEFAULT_LOWER_BOUND:g})",
    )
    parser.add_argument(
        "--upper-bound",
        type=float,
        default=None,
        help=f"Exclusive upper bound for prices (default: {DEFAULT_UPPER_BOUND:g})",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help=f"Number of prices to take from the stream (default: {DEFAULT_COUNT})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for a reproducible stream (default: unseeded)",
    )
    parser.add_argument(
        "--with-time",
        action="store_true",
        help="Print each price alongside its time index",
    )
    parser.add_argument(
        "--out-json",
        type=Path,
        default=None,
        help="Write the time-indexed series to this JSON file (optional)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser


def _resolve_config(args: argparse.Namespace) -> StreamConfig:
    """Merge defaults, the optional config file and explicit flags, in that order."""

    lower = DEFAULT_LOWER_BOUND
    upper = DEFAULT_UPPER_BOUND
    count = DEFAULT_COUNT
    seed = None

    if args.config_json is not None:
        file_config = load_stream_config_from_json(args.config_json)
        lower = file_config.bounds.lower_bound
        upper = file_config.bounds.upper_bound
        count = file_config.count
        seed = file_config.seed

    if args.lower_bound is not None:
        lower = args.lower_bound
    if args.upper_bound is not None:
        upper = args.upper_bound
    if args.count is not None:
        count = args.count
    if args.seed is not None:
        seed = args.seed

    return StreamConfig(bounds=PriceBounds(lower, upper), count=count, seed=seed)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    configure_logging(level=getattr(logging, args.log_level))

    try:
        config = _resolve_config(args)
    except OSError as e:
        parser.error(f"cannot read --config-json {args.config_json}: {e.strerror or e}")
    except ValueError as e:
        parser.error(str(e))

    logger.info(
        "Generating %d prices in [%s, %s) seed=%s",
        config.count,
        config.bounds.lower_bound,
        config.bounds.upper_bound,
        config.seed,
    )

    series = generate_price_series(config.bounds, config.count, rng=random.Random(config.seed))

    for point in series:
        if args.with_time:
            print(f"{point.time}\t{point.price}")
        else:
            print(point.price)

    out_json: Path | None = args.out_json
    if out_json is not None:
        n = write_price_series_json(out_json, series)
        print(f"\nWrote {n} prices to {out_json}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
