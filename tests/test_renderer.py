import numpy as np

import constants as C
import ui
from renderer import Renderer, terrain_colors


def test_terrain_colors_by_level():
    values = np.array([[C.TERRAIN_MEADOW_LEVEL - 1, C.TERRAIN_ROCK_LEVEL + 1, C.TERRAIN_MEADOW_LEVEL]])
    colors = terrain_colors(values)
    assert colors.shape == (3, 1, 3)
    assert tuple(colors[0, 0]) == C.COLOR_MEADOW
    assert tuple(colors[1, 0]) == C.COLOR_ROCK
    assert tuple(colors[2, 0]) == C.COLOR_MEADOW


def test_hotbar_hit_testing():
    rects = ui.inventory_slot_rects()
    assert len(rects) == C.PLAYER_INVENTORY_SIZE
    assert ui.slot_at(rects[2].center) == 2
    assert ui.slot_at((0, 0)) is None


def test_draw_without_surface_is_reported(notices):
    renderer = Renderer(font=None, small_font=None)
    assert renderer.draw(None, session=None) is False
    assert notices[0][1] == "ASSERTION FAILED: Render called without a target surface"
