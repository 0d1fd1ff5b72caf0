import random

import pytest

from zombiesim.common.errors import CapacityExceededError
from zombiesim.common.types import CellState
from zombiesim.engine.grid import SimulationGrid


class ScriptedRandom:
    """Returns queued values in order, then ``fallback`` when the queue runs dry."""

    def __init__(self, values, fallback=0):
        self.values = list(values)
        self.fallback = fallback

    def randrange(self, start, stop):
        value = self.values.pop(0) if self.values else self.fallback
        assert start <= value < stop
        return value


def test_randomize_places_exact_counts_in_interior():
    grid = SimulationGrid(random.Random(3))
    grid.init(12, 9)
    grid.randomize(10, 15)
    counts = grid.counts()
    assert counts.zombies == 10
    assert counts.survivors == 15
    for x, y, state in grid.cells():
        if state in (CellState.ZOMBIE, CellState.SURVIVOR):
            assert 1 <= x <= 10
            assert 1 <= y <= 7


def test_randomize_fills_interior_exactly():
    grid = SimulationGrid(random.Random(5))
    grid.init(6, 5)
    grid.randomize(6, 6)
    assert grid.empty_interior_count() == 0
    assert grid.counts().zombies == 6
    assert grid.counts().survivors == 6


def test_zombies_placed_before_survivors_and_retry_on_occupied():
    rng = ScriptedRandom([1, 1, 1, 1, 2, 2])
    grid = SimulationGrid(rng)
    grid.init(4, 4)
    grid.randomize(1, 1)
    assert grid.get_state_at_pos(1, 1) == CellState.ZOMBIE
    assert grid.get_state_at_pos(2, 2) == CellState.SURVIVOR
    assert rng.values == []


def test_randomize_never_overwrites_walls():
    grid = SimulationGrid(random.Random(17))
    grid.init(20, 20)
    grid.build_walls(6, 4, 12, 3)
    walls_before = {(x, y) for x, y, s in grid.cells() if s == CellState.WALL}
    grid.randomize(40, 40)
    walls_after = {(x, y) for x, y, s in grid.cells() if s == CellState.WALL}
    assert walls_before == walls_after
    assert grid.counts().zombies == 40
    assert grid.counts().survivors == 40


def test_capacity_exceeded_leaves_grid_untouched():
    grid = SimulationGrid(random.Random(1))
    grid.init(4, 4)
    grid.set_state(1, 1, CellState.WALL)
    with pytest.raises(CapacityExceededError) as excinfo:
        grid.randomize(2, 2)
    assert excinfo.value.requested == 4
    assert excinfo.value.available == 3
    counts = grid.counts()
    assert counts.zombies == 0
    assert counts.survivors == 0


def test_grid_without_interior_only_accepts_zero():
    grid = SimulationGrid(random.Random(1))
    grid.init(2, 8)
    grid.randomize(0, 0)
    with pytest.raises(CapacityExceededError):
        grid.randomize(1, 0)


def test_negative_counts_rejected():
    grid = SimulationGrid(random.Random(1))
    grid.init(5, 5)
    with pytest.raises(ValueError):
        grid.randomize(-1, 2)
