from __future__ import annotations

import asyncio
import logging

from zombiesim.common.config import settings
from zombiesim.engine.engine import TickEngine
from zombiesim.host.loop import tick_loop
from zombiesim.render.models import FrameSnapshot


def _print_frame(frame: FrameSnapshot) -> None:
    print(frame.text(), flush=True)


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    engine = TickEngine.from_settings(settings)
    on_frame = _print_frame if settings.render_frames else None
    asyncio.run(
        tick_loop(
            engine,
            settings.tick_seconds,
            max_ticks=settings.max_ticks,
            stop_when_settled=settings.stop_when_settled,
            on_frame=on_frame,
        )
    )


if __name__ == "__main__":
    main()
