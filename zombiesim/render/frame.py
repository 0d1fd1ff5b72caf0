from __future__ import annotations

from dataclasses import dataclass

from zombiesim.common.types import RGB, CellState
from zombiesim.engine.grid import SimulationGrid

GLYPHS = {
    CellState.EMPTY: ".",
    CellState.ZOMBIE: "Z",
    CellState.SURVIVOR: "S",
    CellState.WALL: "#",
}


@dataclass(frozen=True)
class Palette:
    empty: RGB = (0, 0, 0)
    zombie: RGB = (0, 200, 0)
    survivor: RGB = (40, 90, 255)
    wall: RGB = (128, 128, 128)

    def color_for(self, state: CellState) -> RGB:
        if state == CellState.ZOMBIE:
            return self.zombie
        if state == CellState.SURVIVOR:
            return self.survivor
        if state == CellState.WALL:
            return self.wall
        return self.empty


def render_rows(grid: SimulationGrid) -> list[str]:
    """One string per y, x ascending, using GLYPHS."""
    return [
        "".join(GLYPHS[grid.get_state_at_pos(x, y)] for x in range(grid.width))
        for y in range(grid.height)
    ]


def pixel_buffer(grid: SimulationGrid, palette: Palette | None = None) -> list[RGB]:
    """Flat row-major pixel list; pixel (x, y) sits at index ``width * y + x``."""
    palette = palette or Palette()
    width, height = grid.width, grid.height
    pixels: list[RGB] = [palette.empty] * (width * height)
    for x in range(width):
        for y in range(height):
            pixels[width * y + x] = palette.color_for(grid.get_state_at_pos(x, y))
    return pixels
