from __future__ import annotations

from enum import Enum, IntEnum
from typing import Protocol, Tuple

Tile = Tuple[int, int]
RGB = Tuple[int, int, int]


class CellState(IntEnum):
    EMPTY = 0
    ZOMBIE = 1
    SURVIVOR = 2
    WALL = 3

    @property
    def mobile(self) -> bool:
        return self in (CellState.ZOMBIE, CellState.SURVIVOR)


class Direction(str, Enum):
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def offset(self) -> Tile:
        return DIRECTION_OFFSETS[self]


DIRECTION_OFFSETS = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}

# Draw order for random wall directions.
DIRECTIONS = (Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST)


class RandomSource(Protocol):
    """Anything exposing ``randrange(start, stop)``; ``random.Random`` qualifies."""

    def randrange(self, start: int, stop: int) -> int:
        ...
