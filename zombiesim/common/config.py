from __future__ import annotations

import os
from dataclasses import dataclass

from zombiesim.common.constants import (
    DEFAULT_HEIGHT,
    DEFAULT_SURVIVORS,
    DEFAULT_TICK_SECONDS,
    DEFAULT_WALL_MAX_LENGTH,
    DEFAULT_WALL_MIN_LENGTH,
    DEFAULT_WALL_THICKNESS,
    DEFAULT_WALLS,
    DEFAULT_WIDTH,
    DEFAULT_ZOMBIES,
)


def _env_bool(value: str | None, default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off"}


def _env_seed(value: str | None) -> int | None:
    if value is None or not value.strip():
        return None
    return int(value)


@dataclass(frozen=True)
class Settings:
    """Runtime settings loaded from environment variables.

    Grid size, population and wall parameters are read once at startup;
    the engine never re-reads them mid-run.
    """

    width: int = int(os.getenv("ZOMBIESIM_WIDTH", str(DEFAULT_WIDTH)))
    height: int = int(os.getenv("ZOMBIESIM_HEIGHT", str(DEFAULT_HEIGHT)))
    zombies: int = int(os.getenv("ZOMBIESIM_ZOMBIES", str(DEFAULT_ZOMBIES)))
    survivors: int = int(os.getenv("ZOMBIESIM_SURVIVORS", str(DEFAULT_SURVIVORS)))
    walls: int = int(os.getenv("ZOMBIESIM_WALLS", str(DEFAULT_WALLS)))
    wall_min_length: int = int(
        os.getenv("ZOMBIESIM_WALL_MIN_LENGTH", str(DEFAULT_WALL_MIN_LENGTH))
    )
    wall_max_length: int = int(
        os.getenv("ZOMBIESIM_WALL_MAX_LENGTH", str(DEFAULT_WALL_MAX_LENGTH))
    )
    wall_thickness: int = int(
        os.getenv("ZOMBIESIM_WALL_THICKNESS", str(DEFAULT_WALL_THICKNESS))
    )
    tick_seconds: float = float(
        os.getenv("ZOMBIESIM_TICK_SECONDS", str(DEFAULT_TICK_SECONDS))
    )
    random_seed: int | None = _env_seed(os.getenv("ZOMBIESIM_RANDOM_SEED"))
    max_ticks: int = int(os.getenv("ZOMBIESIM_MAX_TICKS", "0"))
    stop_when_settled: bool = _env_bool(os.getenv("ZOMBIESIM_STOP_WHEN_SETTLED", "1"))
    render_frames: bool = _env_bool(os.getenv("ZOMBIESIM_RENDER_FRAMES", "1"))


settings = Settings()
