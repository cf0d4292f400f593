"""
Step Calibration Table
======================
Lookup and unit conversion for the precomputed step calibration.

Each table for ``n`` steps holds ``n + 1`` points, from two circles just
touching ``(1000, 1000)`` to two concentric circles ``(1414, 0)``, such that
moving one point forward raises the overlap ratio by ``1 / n``.

Exports:
    CalibrationPoint: One (diameter, distance) pair in the normalised unit.
    get_calibration: 1-indexed lookup into a table.
    pair_calibration: The points a widget with N pairs steps through.
    place_step: Conversion of a point into render units.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging

import numpy as np
from scipy.optimize import brentq

from ioscircles.model.calibration_data import RAW_CALIBRATION_DATA
from ioscircles.model.geometry import BASE_SCALE, overlap_area
from ioscircles.utils import round_half_up

logger = logging.getLogger(__name__)

MIN_STEPS: int = 2
MAX_STEPS: int = 20

# Widgets show between 2 and 20 circle pairs
MIN_PAIRS: int = 2
MAX_PAIRS: int = 20


class CalibrationRangeError(IndexError):
    """Raised for a step count or point index without calibration data."""


@dataclass(frozen=True)
class CalibrationPoint:
    diameter: int
    distance: int


FULL_SEPARATION = CalibrationPoint(diameter=1000, distance=1000)
FULL_OVERLAP = CalibrationPoint(diameter=1414, distance=0)

CALIBRATION_DATA: dict[int, tuple[CalibrationPoint, ...]] = {
    steps: tuple(CalibrationPoint(diameter=d, distance=x) for d, x in points)
    for steps, points in RAW_CALIBRATION_DATA.items()
}


# ------------------------------------------------------------------------------
# Lookup
# ------------------------------------------------------------------------------

def calibration_table(steps: int) -> tuple[CalibrationPoint, ...]:
    """Return the whole immutable table for a step count in [2, 20]."""
    if steps not in CALIBRATION_DATA:
        raise CalibrationRangeError(
            f"No calibration for {steps} steps; supported step counts are {MIN_STEPS}-{MAX_STEPS}."
        )
    return CALIBRATION_DATA[steps]


def get_calibration(steps: int, index: int) -> CalibrationPoint:
    """
    Return point ``index`` (1-indexed) of the table for ``steps`` steps.

    Raises:
        CalibrationRangeError: If ``steps`` is outside [2, 20] or ``index``
            outside [1, steps + 1].
    """
    table = calibration_table(steps)
    if not 1 <= index <= len(table):
        raise CalibrationRangeError(
            f"Calibration index {index} out of range [1, {len(table)}] for {steps} steps."
        )
    return table[index - 1]


def pair_calibration(number_circles: int) -> tuple[CalibrationPoint, ...]:
    """
    Points for a widget showing ``number_circles`` pairs.

    The first pair just touches and the last one is concentric, so N pairs
    use the table with N - 1 equal steps. Two pairs need no table at all.
    """
    if not MIN_PAIRS <= number_circles <= MAX_PAIRS:
        raise CalibrationRangeError(
            f"number_circles must be between {MIN_PAIRS} and {MAX_PAIRS}, got {number_circles}."
        )
    steps = number_circles - 1
    if steps < MIN_STEPS:
        return FULL_SEPARATION, FULL_OVERLAP
    return calibration_table(steps)


# ------------------------------------------------------------------------------
# Conversion to render units
# ------------------------------------------------------------------------------

def scale_factor(initial_diameter: float) -> float:
    """Ratio between the normalised unit and the configured diameter."""
    return BASE_SCALE / initial_diameter


@dataclass(frozen=True)
class StepPlacement:
    """
    Render-unit geometry of one calibration point.

    Attributes:
        diameter: Diameter of both circles in pixels.
        translate: Distance the moving circle travels from its start.
        shift_margin: Half of the diameter growth. The moving group is pulled
            back and the stationary group's margin reduced by this amount so
            the stationary circle does not drift.
    """
    diameter: int
    translate: int
    shift_margin: float

    @property
    def group_translation(self) -> float:
        return self.translate - self.shift_margin

    def right_margin(self, start_margin: float) -> float:
        return start_margin - self.shift_margin


def place_step(
    point: CalibrationPoint,
    initial_diameter: float,
    origin_distance: int = FULL_SEPARATION.distance
) -> StepPlacement:
    """
    Convert a calibration point into pixels for a widget of ``initial_diameter``.

    Args:
        point: The calibration point.
        initial_diameter: Configured start diameter in pixels.
        origin_distance: Distance of the table's first point (normalised).
    """
    scale = scale_factor(initial_diameter)
    diameter = round_half_up(point.diameter / scale)
    translate = round_half_up((origin_distance - point.distance) / scale)
    shift_margin = diameter / 2 - initial_diameter / 2
    return StepPlacement(diameter=diameter, translate=translate, shift_margin=shift_margin)


# ------------------------------------------------------------------------------
# Offline computation
# ------------------------------------------------------------------------------

@lru_cache(maxsize=None)
def compute_calibration(steps: int) -> tuple[CalibrationPoint, ...]:
    """
    Recompute a table from the overlap equations.

    The union area is held at ``2π·500²``; for ratio ``p = i / steps`` this
    fixes ``r = 500·√(1 + p)`` and the distance is found by root finding on
    ``overlap_area(r, d) = p·2π·500²``.
    """
    if steps < 1:
        raise CalibrationRangeError(f"At least one step is required, got {steps}.")

    r0 = BASE_SCALE / 2.0
    union = 2.0 * np.pi * r0 ** 2
    points: list[CalibrationPoint] = []

    for p in np.linspace(0.0, 1.0, steps + 1):
        radius = r0 * np.sqrt(1.0 + p)
        target = p * union
        if p == 0.0:
            distance = 2.0 * radius
        elif p == 1.0:
            distance = 0.0
        else:
            distance = brentq(lambda d: overlap_area(radius, d) - target, 0.0, 2.0 * radius)
        points.append(CalibrationPoint(diameter=round_half_up(2.0 * radius), distance=round_half_up(distance)))

    logger.debug(f"Computed calibration for {steps} steps: {points}")
    return tuple(points)
