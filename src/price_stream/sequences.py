"""Small lazy-sequence helpers.

Everything here is built on :mod:`itertools` and never materialises more of an
infinite iterable than the caller asks for.
"""

from __future__ import annotations

import itertools
from typing import Callable, Iterable, Iterator, List, TypeVar

T = TypeVar("T")


def naturals(start: int = 0) -> Iterator[int]:
    """Count up from ``start`` forever."""

    return itertools.count(start)


def repeatedly(fn: Callable[[], T]) -> Iterator[T]:
    """Call ``fn`` with no arguments each time a value is requested."""

    while True:
        yield fn()


def take(n: int, iterable: Iterable[T]) -> List[T]:
    """Return the first ``n`` items of ``iterable`` as a list.

    Exactly ``n`` items are pulled from an infinite iterable. A shorter finite
    iterable yields all of its items.
    """

    if n < 0:
        raise ValueError(f"take() count must be >= 0, got {n}")
    return list(itertools.islice(iterable, n))
