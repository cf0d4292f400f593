"""
Overlap Geometry
================
Closed-form geometry of two congruent circles of radius ``r`` whose centers
are ``d`` apart, plus the inverse relation used by the continuous scale.

All area functions accept Python floats or numpy arrays. A scalar input
returns a ``float``; array inputs return arrays of the broadcast shape.

Exports:
    overlap_area, total_visible_area, overlap_ratio: forward geometry.
    fitted_diameter, exact_diameter: diameter keeping the union area constant.
    Measurement, measure: the published distance/overlap triple.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Optional, Union, TYPE_CHECKING

import numpy as np
from scipy.optimize import brentq

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

ArrayLike = Union[float, "npt.NDArray[np.float64]"]

# Normalised unit the calibration data and the regression are expressed in.
BASE_SCALE: float = 1000.0

# Tolerance (relative to the diameter) for rounding overshoot of d beyond 2r
_DOMAIN_EPS: float = 1e-9


class GeometryDomainError(ValueError):
    """Raised when a distance lies outside [0, 2r] or the radius is not positive."""


# ------------------------------------------------------------------------------
# Forward geometry
# ------------------------------------------------------------------------------

def _as_float(value: npt.NDArray[np.float64]) -> ArrayLike:
    return float(value) if np.ndim(value) == 0 else value


def _checked(radius: ArrayLike, distance: ArrayLike) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    r = np.asarray(radius, dtype=float)
    d = np.asarray(distance, dtype=float)

    if np.any(r <= 0.0):
        raise GeometryDomainError(f"Radius must be positive, got {radius!r}.")
    if np.any(d < 0.0) or np.any(d > 2.0 * r * (1.0 + _DOMAIN_EPS)):
        raise GeometryDomainError(
            f"Distance {distance!r} is outside the valid range [0, 2r] for radius {radius!r}."
        )

    return r, np.minimum(d, 2.0 * r)


def overlap_area(radius: ArrayLike, distance: ArrayLike) -> ArrayLike:
    """
    Area of the lens shared by two circles of equal radius.

    Args:
        radius: Radius of both circles.
        distance: Distance between the two centers, 0 <= distance <= 2 * radius.

    Returns:
        ``2r²·acos(d/2r) − (d/2)·√(4r² − d²)``. Equal to ``πr²`` for concentric
        circles and to 0 when the circles just touch.
    """
    r, d = _checked(radius, distance)
    area = 2.0 * r ** 2 * np.arccos(d / (2.0 * r)) - 0.5 * d * np.sqrt(np.maximum(4.0 * r ** 2 - d ** 2, 0.0))
    return _as_float(area)


def total_visible_area(radius: ArrayLike, distance: ArrayLike) -> ArrayLike:
    """Area of the union of the two circles."""
    r = np.asarray(radius, dtype=float)
    return _as_float(2.0 * np.pi * r ** 2 - np.asarray(overlap_area(radius, distance)))


def overlap_ratio(radius: ArrayLike, distance: ArrayLike) -> ArrayLike:
    """
    Proportion of overlap with respect to the union of the two circles.

    Returns a value in [0, 1]: 0 for touching circles, 1 for concentric ones.
    """
    overlap = np.asarray(overlap_area(radius, distance))
    r = np.asarray(radius, dtype=float)
    return _as_float(overlap / (2.0 * np.pi * r ** 2 - overlap))


# ------------------------------------------------------------------------------
# Inverse: diameter from distance
# ------------------------------------------------------------------------------

def fitted_diameter(distance: float, scale: float) -> float:
    """
    Diameter keeping the union area constant, from the OLS quartic fit.

    The fit was made offline in the normalised unit (start diameter 1000), so
    ``scale`` (= 1000 / start diameter) converts the pixel distance in and the
    diameter back out. The coefficients are fixed; do not re-derive them.
    """
    d = distance
    return (
        1.415e+03 / scale
        - 6.428e-01 * d
        + 1.789e-04 * scale * d ** 2
        - 2.059e-08 * scale ** 2 * d ** 3
        + 6.938e-11 * scale ** 3 * d ** 4
    )


def fitted_radius(distance: float, scale: float) -> float:
    return fitted_diameter(distance, scale) / 2.0


def exact_diameter(distance: float, start_diameter: float) -> float:
    """
    Diameter keeping the union area at that of two disjoint start circles.

    Solves ``total_visible_area(r, d) = 2π·R0²`` for ``r`` in ``[R0, √2·R0]``
    with Brent's method. Distances of ``2·R0`` or more need no growth.
    """
    r0 = start_diameter / 2.0
    d = abs(distance)
    if d >= 2.0 * r0:
        return start_diameter
    if d == 0.0:
        return 2.0 * np.sqrt(2.0) * r0

    target = 2.0 * np.pi * r0 ** 2

    def residual(r: float) -> float:
        return total_visible_area(r, d) - target

    radius = brentq(residual, r0, np.sqrt(2.0) * r0, xtol=1e-9)
    return 2.0 * radius


# ------------------------------------------------------------------------------
# Measurement
# ------------------------------------------------------------------------------

@dataclass(frozen=True)
class Measurement:
    """The published state of a circle pair."""
    distance: float
    proportion_overlap: float
    proportion_distance: float
    current_circle: Optional[int] = None

    def with_circle(self, current_circle: Optional[int]) -> Measurement:
        return Measurement(
            distance=self.distance,
            proportion_overlap=self.proportion_overlap,
            proportion_distance=self.proportion_distance,
            current_circle=current_circle,
        )

    def to_dict(self) -> dict[str, float | int | None]:
        """Host-facing representation with the widget's public property names."""
        data: dict[str, float | int | None] = {
            "distance": self.distance,
            "proportionOverlap": self.proportion_overlap,
            "proportionDistance": self.proportion_distance,
        }
        if self.current_circle is not None:
            data["currentCircle"] = self.current_circle
        return data


def measure(diameter: float, distance: float, initial_diameter: float) -> Measurement:
    """
    Build the measurement triple from the rendered geometry.

    Args:
        diameter: Current diameter of both circles.
        distance: Signed horizontal gap between the centers (right minus left).
        initial_diameter: Diameter the widget was configured with.
    """
    # congruent circles: the overlap only depends on |d|; rounding can push it past 2r
    gap = min(abs(distance), diameter)
    return Measurement(
        distance=distance,
        proportion_overlap=overlap_ratio(diameter / 2.0, gap),
        proportion_distance=distance / initial_diameter,
    )
