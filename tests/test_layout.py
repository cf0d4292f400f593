import math

import pytest

from ioscircles.model.layout import PairLayout, Side


def test_start_geometry():
    layout = PairLayout()

    assert layout.start_right_margin == 145
    assert layout.center_x(Side.LEFT) == 96      # 40 + 5 + 1 + 50
    assert layout.center_x(Side.RIGHT) == 196    # 145 + 1 + 50
    assert layout.distance() == 100


def test_box_size():
    layout = PairLayout()
    assert layout.end_diameter == 141
    assert layout.box_height == 143
    assert layout.box_width == 2 * 141 + 2 + 40 + 40 + 10


def test_max_drag_leaves_room_for_growth():
    layout = PairLayout(circle_diameter=100)
    assert layout.max_drag == pytest.approx(100 - (math.sqrt(2) * 50 - 50))


def test_max_drag_does_not_depend_on_text_widths():
    assert PairLayout(left_text_width=10).max_drag == pytest.approx(PairLayout(left_text_width=80).max_drag)


def test_growing_with_margin_shift_keeps_right_circle_in_place():
    layout = PairLayout()
    layout.translate_left_group(30)
    assert layout.distance() == 70

    layout.set_diameter(120)
    layout.set_right_margin(layout.start_right_margin - 10)
    assert layout.center_x(Side.RIGHT) == 196
    assert layout.center_x(Side.LEFT) == 136
    assert layout.distance() == 60


def test_reset():
    layout = PairLayout()
    layout.translate_left_group(12)
    layout.set_diameter(130)
    layout.set_right_margin(100)

    layout.reset()

    assert (layout.diameter, layout.left_translation, layout.right_margin) == (100, 0.0, 145)
