from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field


class FrameSnapshot(BaseModel):
    tick: int
    width: int
    height: int
    zombies: int
    survivors: int
    walls: int
    conversions: int = 0
    grid: List[str] = Field(default_factory=list)

    def text(self) -> str:
        header = (
            f"tick={self.tick} zombies={self.zombies} survivors={self.survivors} "
            f"converted={self.conversions}"
        )
        return "\n".join([header, *self.grid])
