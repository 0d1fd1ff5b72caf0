from zombiesim.common.types import CellState
from zombiesim.engine.grid import SimulationGrid
from zombiesim.render.frame import GLYPHS, Palette, pixel_buffer, render_rows


def _grid():
    grid = SimulationGrid()
    grid.init(3, 2)
    grid.set_state(2, 1, CellState.ZOMBIE)
    grid.set_state(0, 1, CellState.SURVIVOR)
    grid.set_state(1, 0, CellState.WALL)
    return grid


def test_render_rows_are_indexed_by_y():
    assert render_rows(_grid()) == [".#.", "S.Z"]


def test_every_state_has_a_glyph():
    assert set(GLYPHS) == set(CellState)


def test_pixel_buffer_row_major():
    palette = Palette()
    pixels = pixel_buffer(_grid(), palette)
    assert len(pixels) == 6
    assert pixels[3 * 1 + 2] == palette.zombie
    assert pixels[3 * 1 + 0] == palette.survivor
    assert pixels[1] == palette.wall
    assert pixels[0] == palette.empty


def test_custom_palette():
    palette = Palette(zombie=(255, 0, 0))
    assert pixel_buffer(_grid(), palette)[5] == (255, 0, 0)
    assert palette.color_for(CellState.EMPTY) == (0, 0, 0)
