from __future__ import annotations

import logging
import random

from zombiesim.common.config import Settings
from zombiesim.common.errors import CapacityExceededError
from zombiesim.common.types import RandomSource
from zombiesim.engine.grid import SimulationGrid
from zombiesim.engine.state import TickStats
from zombiesim.render.frame import render_rows
from zombiesim.render.models import FrameSnapshot

logger = logging.getLogger(__name__)


class TickEngine:
    """Owns one simulation grid and advances it tick by tick."""

    def __init__(
        self,
        width: int,
        height: int,
        seed: int | None = None,
        rng: RandomSource | None = None,
    ) -> None:
        self.width = width
        self.height = height
        self.rng: RandomSource = rng if rng is not None else random.Random(seed)
        self.grid = SimulationGrid(self.rng)
        self.grid.init(width, height)
        self.tick = 0
        self.total_conversions = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> TickEngine:
        engine = cls(settings.width, settings.height, seed=settings.random_seed)
        engine.setup(
            zombies=settings.zombies,
            survivors=settings.survivors,
            walls=settings.walls,
            wall_min_length=settings.wall_min_length,
            wall_max_length=settings.wall_max_length,
            wall_thickness=settings.wall_thickness,
        )
        return engine

    def setup(
        self,
        zombies: int,
        survivors: int,
        walls: int = 0,
        wall_min_length: int = 0,
        wall_max_length: int = 0,
        wall_thickness: int = 1,
    ) -> None:
        """Reset the grid, build walls, then place zombies and survivors."""
        self.grid.init(self.width, self.height)
        self.tick = 0
        self.total_conversions = 0
        self.grid.build_walls(walls, wall_min_length, wall_max_length, wall_thickness)
        try:
            self.grid.randomize(zombies, survivors)
        except CapacityExceededError as exc:
            logger.error(
                "Population does not fit a %sx%s grid: requested=%s available=%s",
                self.width,
                self.height,
                exc.requested,
                exc.available,
            )
            raise
        counts = self.grid.counts()
        logger.info(
            "Simulation ready: %sx%s grid, %s wall cells, %s zombies, %s survivors",
            self.width,
            self.height,
            counts.walls,
            counts.zombies,
            counts.survivors,
        )

    def tick_once(self) -> TickStats:
        """Advance the grid by a single generation."""
        survivors_before = self.grid.counts().survivors
        self.grid.next_generation()
        self.tick += 1
        population = self.grid.counts()
        # Survivors only ever leave the population by turning.
        conversions = survivors_before - population.survivors
        self.total_conversions += conversions
        logger.debug(
            "Tick %s: conversions=%s zombies=%s survivors=%s",
            self.tick,
            conversions,
            population.zombies,
            population.survivors,
        )
        return TickStats(tick=self.tick, conversions=conversions, population=population)

    def is_settled(self) -> bool:
        """True once no further conversion can happen."""
        counts = self.grid.counts()
        return counts.survivors == 0 or counts.zombies == 0

    def render_frame(self) -> FrameSnapshot:
        counts = self.grid.counts()
        return FrameSnapshot(
            tick=self.tick,
            width=self.width,
            height=self.height,
            zombies=counts.zombies,
            survivors=counts.survivors,
            walls=counts.walls,
            conversions=self.total_conversions,
            grid=render_rows(self.grid),
        )
