from __future__ import annotations

import random
from collections.abc import Iterator

from zombiesim.common.constants import INTERIOR_MARGIN, MOVE_MAX, MOVE_MIN
from zombiesim.common.errors import CapacityExceededError, GridNotInitializedError
from zombiesim.common.types import CellState, RandomSource, Tile
from zombiesim.engine.state import PopulationCounts
from zombiesim.engine.walls import (
    rand_between,
    random_direction,
    random_length,
    wall_cells,
)


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


class SimulationGrid:
    """Cell-state grid and the zombie infection update rule.

    Cells are stored column-major (``states[x][y]``) and updated in place:
    a tick is a single pass with x as the outer loop and y as the inner loop,
    so cells visited later in the pass see moves and conversions made earlier
    in the same tick.
    """

    def __init__(self, rng: RandomSource | None = None) -> None:
        self.rng: RandomSource = rng if rng is not None else random.Random()
        self._states: list[list[CellState]] | None = None

    def init(self, width: int, height: int) -> None:
        """Allocate a ``width`` x ``height`` grid of Empty cells, discarding prior state."""
        if width <= 0 or height <= 0:
            raise ValueError("Grid dimensions must be positive")
        self._states = [[CellState.EMPTY for _ in range(height)] for _ in range(width)]

    @property
    def width(self) -> int:
        return len(self._require_states())

    @property
    def height(self) -> int:
        return len(self._require_states()[0])

    def get_state_at_pos(self, x: int, y: int) -> CellState:
        """Return the state at (x, y), clamping both coordinates onto the grid."""
        states = self._require_states()
        x = _clamp(x, 0, len(states) - 1)
        y = _clamp(y, 0, len(states[0]) - 1)
        return states[x][y]

    def set_state(self, x: int, y: int, state: CellState | int) -> None:
        """Set the state at (x, y); out-of-range writes are dropped, never clamped."""
        states = self._require_states()
        new_state = CellState(state)
        if x < 0 or x >= len(states):
            return
        if y < 0 or y >= len(states[0]):
            return
        states[x][y] = new_state

    def next_generation(self) -> None:
        for x in range(self.width):
            for y in range(self.height):
                self._update_cell(x, y)

    def _update_cell(self, x: int, y: int) -> None:
        state = self.get_state_at_pos(x, y)
        if state == CellState.SURVIVOR and self._zombie_neighbors(x, y) > 0:
            self.set_state(x, y, CellState.ZOMBIE)
            state = CellState.ZOMBIE
        if state.mobile:
            move_x = self.rng.randrange(MOVE_MIN, MOVE_MAX)
            move_y = self.rng.randrange(MOVE_MIN, MOVE_MAX)
            self._move_to_cell(state, x, y, move_x, move_y)

    def _zombie_neighbors(self, x: int, y: int) -> int:
        # 3x3 block including the centre cell; edges read through the clamp.
        count = 0
        for a in (-1, 0, 1):
            for b in (-1, 0, 1):
                if self.get_state_at_pos(x + a, y + b) == CellState.ZOMBIE:
                    count += 1
        return count

    def _move_to_cell(
        self, state: CellState, x: int, y: int, offset_x: int, offset_y: int
    ) -> None:
        width, height = self.width, self.height
        dest_x = _clamp(x + offset_x, 0, width - 1)
        dest_y = _clamp(y + offset_y, 0, height - 1)
        # Row and column 0 are off limits; after the clamp the far edges never
        # equal width/height, so the last row and column stay reachable.
        if dest_x == 0 or dest_x == width or dest_y == 0 or dest_y == height:
            return
        if self.get_state_at_pos(dest_x, dest_y) != CellState.EMPTY:
            return
        self.set_state(x, y, CellState.EMPTY)
        self.set_state(dest_x, dest_y, state)

    def randomize(self, zombie_count: int, survivor_count: int) -> None:
        """Place zombies, then survivors, on random empty interior cells.

        Raises CapacityExceededError before touching the grid if the empty
        interior cannot hold every requested entity.
        """
        if zombie_count < 0 or survivor_count < 0:
            raise ValueError("Entity counts must be non-negative")
        requested = zombie_count + survivor_count
        available = self.empty_interior_count()
        if requested > available:
            raise CapacityExceededError(requested, available)
        self._place_random_of_state(CellState.ZOMBIE, zombie_count)
        self._place_random_of_state(CellState.SURVIVOR, survivor_count)

    def _place_random_of_state(self, state: CellState, amount: int) -> None:
        for _ in range(amount):
            while True:
                x, y = self._random_placement_loc()
                if self.get_state_at_pos(x, y) == CellState.EMPTY:
                    break
            self.set_state(x, y, state)

    def _random_placement_loc(self) -> Tile:
        # A grid under 3 cells on an axis has no interior; that axis pins to the margin.
        x = rand_between(self.rng, INTERIOR_MARGIN, self.width - INTERIOR_MARGIN)
        y = rand_between(self.rng, INTERIOR_MARGIN, self.height - INTERIOR_MARGIN)
        return x, y

    def empty_interior_count(self) -> int:
        states = self._require_states()
        count = 0
        for x in range(INTERIOR_MARGIN, self.width - INTERIOR_MARGIN):
            for y in range(INTERIOR_MARGIN, self.height - INTERIOR_MARGIN):
                if states[x][y] == CellState.EMPTY:
                    count += 1
        return count

    def build_walls(
        self, count: int, min_length: int, max_length: int, thickness: int
    ) -> None:
        """Build ``count`` random wall segments; call before ``randomize``."""
        if count < 0 or min_length < 0 or max_length < 0 or thickness < 0:
            raise ValueError("Wall parameters must be non-negative")
        self._require_states()
        for _ in range(count):
            start = self._random_placement_loc()
            direction = random_direction(self.rng)
            length = random_length(self.rng, min_length, max_length)
            for x, y in wall_cells(start, direction, length, thickness):
                self.set_state(x, y, CellState.WALL)

    def counts(self) -> PopulationCounts:
        counts = PopulationCounts()
        for _, _, state in self.cells():
            counts.add(state)
        return counts

    def cells(self) -> Iterator[tuple[int, int, CellState]]:
        """Yield ``(x, y, state)`` in scan order."""
        states = self._require_states()
        for x, column in enumerate(states):
            for y, state in enumerate(column):
                yield x, y, state

    def _require_states(self) -> list[list[CellState]]:
        if self._states is None:
            raise GridNotInitializedError()
        return self._states
