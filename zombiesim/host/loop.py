from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from zombiesim.engine.engine import TickEngine
from zombiesim.render.models import FrameSnapshot

logger = logging.getLogger(__name__)


async def tick_loop(
    engine: TickEngine,
    tick_seconds: float,
    max_ticks: int = 0,
    stop_when_settled: bool = True,
    on_frame: Callable[[FrameSnapshot], None] | None = None,
) -> int:
    """Drive the engine at a fixed interval and return the number of ticks run.

    Frames are rendered between ticks only; ``max_ticks`` of 0 means no limit.
    """
    logger.info("Tick loop started (interval=%ss, max_ticks=%s)", tick_seconds, max_ticks)
    ticks = 0
    while True:
        if max_ticks and ticks >= max_ticks:
            break
        if stop_when_settled and engine.is_settled():
            logger.warning("Grid settled at tick %s; stopping tick loop", engine.tick)
            break
        engine.tick_once()
        ticks += 1
        if on_frame is not None:
            on_frame(engine.render_frame())
        await asyncio.sleep(tick_seconds)
    logger.info("Tick loop stopped after %s ticks", ticks)
    return ticks
