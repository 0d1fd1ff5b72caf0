from __future__ import annotations

from dataclasses import dataclass, field

from zombiesim.common.types import CellState


@dataclass
class PopulationCounts:
    empty: int = 0
    zombies: int = 0
    survivors: int = 0
    walls: int = 0

    def add(self, state: CellState) -> None:
        if state == CellState.ZOMBIE:
            self.zombies += 1
        elif state == CellState.SURVIVOR:
            self.survivors += 1
        elif state == CellState.WALL:
            self.walls += 1
        else:
            self.empty += 1

    @property
    def total(self) -> int:
        return self.empty + self.zombies + self.survivors + self.walls


@dataclass
class TickStats:
    tick: int
    conversions: int
    population: PopulationCounts = field(default_factory=PopulationCounts)
