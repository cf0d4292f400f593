"""
Pair Layout
===========
Headless geometry of one rendered circle pair.

A pair is drawn as two horizontal groups inside a box:

    [left text][margin][left circle]        <- left group, translated by the user
    <---- right margin ----->[right circle][margin][right text]

The left group floats on top of the row, so the right group's left margin
alone positions the stationary circle. The controller moves circles only
through the four operations the renderer offers: read a center, set the
diameter, translate the left group, set the right group's margin. The Qt
view draws whatever this object holds.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import math

from ioscircles.utils import round_half_up


class Side(StrEnum):
    LEFT = "left"
    RIGHT = "right"


@dataclass
class PairLayout:
    circle_diameter: float = 100.0
    left_text_width: float = 40.0
    right_text_width: float = 40.0
    text_margin: float = 5.0
    border_width: float = 1.0

    # Mutable render state
    diameter: float = field(init=False)
    left_translation: float = field(init=False, default=0.0)
    right_margin: float = field(init=False)

    def __post_init__(self) -> None:
        self.diameter = self.circle_diameter
        self.right_margin = self.start_right_margin

    # ---- sizes fixed at construction ----

    @property
    def start_right_margin(self) -> float:
        """Left margin placing the right circle tangent to the left one."""
        return self.left_text_width + self.text_margin + self.circle_diameter

    @property
    def end_diameter(self) -> int:
        """Diameter of two concentric circles covering the area of two start circles."""
        return round_half_up(self.circle_diameter * math.sqrt(2))

    @property
    def left_group_width(self) -> float:
        return self.left_text_width + self.text_margin + self.circle_diameter + 2 * self.border_width

    @property
    def max_drag(self) -> float:
        """Furthest translation of the left group, where the circles become concentric."""
        start_r = self.circle_diameter / 2
        diff_r = math.sqrt(2) * start_r - start_r
        circle_outer_width = self.circle_diameter + 2 * self.border_width
        return circle_outer_width - diff_r + self.start_right_margin - self.left_group_width

    @property
    def box_width(self) -> float:
        return (
            2 * self.end_diameter + 2 * self.border_width
            + self.left_text_width + self.right_text_width + 2 * self.text_margin
        )

    @property
    def box_height(self) -> float:
        return self.end_diameter + 2 * self.border_width

    # ---- renderer operations ----

    def center_x(self, side: Side) -> float:
        """Horizontal position of a circle's center inside the box."""
        if side == Side.LEFT:
            return self.left_translation + self.left_text_width + self.text_margin + self.border_width + self.diameter / 2
        return self.right_margin + self.border_width + self.diameter / 2

    def set_diameter(self, px: float) -> None:
        self.diameter = px

    def translate_left_group(self, px: float) -> None:
        self.left_translation = px

    def set_right_margin(self, px: float) -> None:
        self.right_margin = px

    def distance(self) -> float:
        """Signed distance between the centers, positive while the right circle is on the right."""
        return self.center_x(Side.RIGHT) - self.center_x(Side.LEFT)

    def reset(self) -> None:
        self.diameter = self.circle_diameter
        self.left_translation = 0.0
        self.right_margin = self.start_right_margin
