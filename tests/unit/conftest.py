"""Shared fixtures for scheduling unit tests."""

from __future__ import annotations

import random

import pytest

from adaptive_recall.core.scheduling_data import SchedulingData


class FixedDraw(random.Random):
    """Random generator whose randrange always returns ``draw``.

    Records the (start, stop) of every randrange call.
    """

    draw = 0

    def randrange(self, start, stop=None, step=1):  # type: ignore[override]
        self.calls.append((start, stop))
        return self.draw


@pytest.fixture
def default_item() -> SchedulingData:
    """A freshly created item with default scheduling state."""
    return SchedulingData()


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic generator for reproducible jitter."""
    return random.Random(1234)


@pytest.fixture
def fixed_draw():
    """Factory for a generator that always draws the given value."""

    def _make(draw: int) -> FixedDraw:
        rng = FixedDraw()
        rng.draw = draw
        rng.calls = []
        return rng

    return _make
