from __future__ import annotations

from zombiesim.common.types import DIRECTIONS, Direction, RandomSource, Tile


def wall_cells(start: Tile, direction: Direction, length: int, thickness: int) -> list[Tile]:
    """Return the cells covered by a wall segment.

    The segment runs ``length`` steps from ``start`` along ``direction`` and is
    ``thickness`` cells wide, growing perpendicular to the run (the x and y
    components of the direction are swapped for the thickness axis). Cells
    may fall outside the grid; callers discard those on write.
    """
    sx, sy = start
    dx, dy = direction.offset
    cells: list[Tile] = []
    for a in range(length):
        for b in range(thickness):
            cells.append((sx + a * dx + b * dy, sy + a * dy + b * dx))
    return cells


def random_direction(rng: RandomSource) -> Direction:
    return DIRECTIONS[rng.randrange(0, len(DIRECTIONS))]


def rand_between(rng: RandomSource, low: int, high: int) -> int:
    """Draw from ``[low, high)``; an empty range collapses to ``low`` without a draw."""
    if high <= low:
        return low
    return rng.randrange(low, high)


def random_length(rng: RandomSource, min_length: int, max_length: int) -> int:
    return rand_between(rng, min_length, max_length)
