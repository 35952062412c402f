from __future__ import annotations

import itertools

import pytest

from price_stream.sequences import naturals, repeatedly, take


def test_naturals_counts_from_zero() -> None:
    assert take(10, naturals()) == [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]


def test_naturals_custom_start() -> None:
    assert take(3, naturals(5)) == [5, 6, 7]


def test_repeatedly_calls_function_once_per_value() -> None:
    counter = itertools.count()
    assert take(4, repeatedly(lambda: next(counter))) == [0, 1, 2, 3]
    assert next(counter) == 4


def test_take_pulls_exactly_n_from_infinite_iterator() -> None:
    source = naturals()
    take(3, source)
    assert next(source) == 3


def test_take_from_short_iterable_returns_everything() -> None:
    assert take(5, [1, 2]) == [1, 2]


def test_take_zero_is_empty() -> None:
    assert take(0, naturals()) == []


def test_take_negative_raises() -> None:
    with pytest.raises(ValueError, match="must be >= 0"):
        take(-1, naturals())
