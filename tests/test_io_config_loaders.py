from __future__ import annotations

import json
from pathlib import Path

import pytest

from price_stream.constants import DEFAULT_COUNT
from price_stream.io import load_stream_config_from_json, parse_stream_config


def test_load_stream_config_from_json_happy_path(tmp_path: Path) -> None:
    p = tmp_path / "stream.json"
    p.write_text(json.dumps({"lower_bound": 24, "upper_bound": 42, "count": 5, "seed": 3}), encoding="utf-8")

    config = load_stream_config_from_json(p)

    assert config.bounds.lower_bound == 24.0
    assert config.bounds.upper_bound == 42.0
    assert config.count == 5
    assert config.seed == 3


def test_parse_stream_config_optional_keys_default() -> None:
    config = parse_stream_config({"lower_bound": 1, "upper_bound": 2, "seed": None})
    assert config.count == DEFAULT_COUNT
    assert config.seed is None


def test_parse_stream_config_missing_key_raises() -> None:
    with pytest.raises(ValueError, match="'upper_bound'"):
        parse_stream_config({"lower_bound": 1})


def test_parse_stream_config_non_numeric_bound_raises() -> None:
    with pytest.raises(ValueError, match="must be a number"):
        parse_stream_config({"lower_bound": "low", "upper_bound": 2})


def test_parse_stream_config_non_integer_count_raises() -> None:
    with pytest.raises(ValueError, match="'count'"):
        parse_stream_config({"lower_bound": 1, "upper_bound": 2, "count": 2.5})


def test_parse_stream_config_invalid_bounds_raise() -> None:
    with pytest.raises(ValueError, match="lower_bound must be < upper_bound"):
        parse_stream_config({"lower_bound": 42, "upper_bound": 24})


def test_load_stream_config_rejects_non_object(tmp_path: Path) -> None:
    p = tmp_path / "stream.json"
    p.write_text(json.dumps([24, 42]), encoding="utf-8")

    with pytest.raises(ValueError, match="JSON object"):
        load_stream_config_from_json(p)


@pytest.mark.parametrize(
    "raw",
    [
        {"lower_bound": "24", "upper_bound": 42},
        {"lower_bound": 24, "upper_bound": True},
        {"lower_bound": 24, "upper_bound": 10**400},
    ],
)
def test_parse_stream_config_rejects_non_numeric_bound_types(raw: dict) -> None:
    with pytest.raises(ValueError, match="must be a number"):
        parse_stream_config(raw)
