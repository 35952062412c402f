from __future__ import annotations

import random
from typing import Iterable

import pytest


class ScriptedRandom:
    """Random source that replays fixed ``random()`` values and counts calls."""

    def __init__(self, values: Iterable[float]) -> None:
        self._values = iter(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return next(self._values)


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def scripted_rng():
    return ScriptedRandom
