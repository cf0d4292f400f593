import math

import numpy as np
import pytest

from ioscircles.model.geometry import (
    GeometryDomainError,
    Measurement,
    exact_diameter,
    fitted_diameter,
    measure,
    overlap_area,
    overlap_ratio,
    total_visible_area,
)


@pytest.mark.parametrize("radius", [0.5, 1.0, 50.0, 707.1])
def test_ratio_is_one_when_concentric_and_zero_when_touching(radius):
    assert overlap_ratio(radius, 0.0) == pytest.approx(1.0)
    assert overlap_ratio(radius, 2 * radius) == pytest.approx(0.0, abs=1e-12)


def test_overlap_area_limits():
    r = 3.0
    assert overlap_area(r, 0.0) == pytest.approx(math.pi * r ** 2)
    assert overlap_area(r, 2 * r) == pytest.approx(0.0, abs=1e-12)
    assert total_visible_area(r, 2 * r) == pytest.approx(2 * math.pi * r ** 2)
    assert total_visible_area(r, 0.0) == pytest.approx(math.pi * r ** 2)


@pytest.mark.parametrize("radius", [1.0, 61.5, 500.0])
def test_ratio_is_non_increasing_in_distance(radius):
    distances = np.linspace(0.0, 2 * radius, 401)
    ratios = overlap_ratio(radius, distances)

    assert isinstance(ratios, np.ndarray)
    assert np.all(np.diff(ratios) <= 1e-12)
    assert np.all((ratios >= 0.0) & (ratios <= 1.0))


@pytest.mark.parametrize("k", [0.01, 3.0, 250.0])
def test_ratio_is_scale_invariant(k):
    for r, d in [(1.0, 0.3), (50.0, 71.0), (612.5, 325.0)]:
        assert overlap_ratio(k * r, k * d) == pytest.approx(overlap_ratio(r, d))


def test_scalar_input_returns_float():
    assert isinstance(overlap_area(1.0, 1.0), float)
    assert isinstance(overlap_ratio(1.0, 1.0), float)


def test_rounding_overshoot_is_clipped():
    assert overlap_area(1.0, 2.0 * (1 + 1e-12)) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("radius, distance", [(1.0, 2.1), (1.0, -0.1), (0.0, 0.0), (-1.0, 0.5)])
def test_outside_domain_raises(radius, distance):
    with pytest.raises(GeometryDomainError):
        overlap_area(radius, distance)


def test_domain_error_is_value_error():
    with pytest.raises(ValueError):
        overlap_ratio(1.0, 5.0)


def test_fitted_diameter_uses_fixed_coefficients():
    # 1415/10 - 64.28 + 17.89 - 2.059 + 6.938
    assert fitted_diameter(100.0, 10.0) == pytest.approx(99.989)
    assert fitted_diameter(0.0, 10.0) == pytest.approx(141.5)


def test_fitted_diameter_scales_with_start_diameter():
    assert fitted_diameter(50.0, 10.0) * 10.0 == pytest.approx(fitted_diameter(500.0, 1.0))


def test_fitted_diameter_decreases_with_distance():
    values = [fitted_diameter(d, 10.0) for d in np.linspace(0.0, 100.0, 101)]
    assert all(b < a for a, b in zip(values, values[1:]))


def test_exact_diameter_keeps_union_area():
    start = 100.0
    for d in [5.0, 30.0, 60.0, 95.0]:
        r = exact_diameter(d, start) / 2
        assert total_visible_area(r, d) == pytest.approx(2 * math.pi * 50.0 ** 2, rel=1e-7)


def test_exact_diameter_limits():
    assert exact_diameter(100.0, 100.0) == 100.0
    assert exact_diameter(120.0, 100.0) == 100.0
    assert exact_diameter(0.0, 100.0) == pytest.approx(100.0 * math.sqrt(2))


@pytest.mark.parametrize("distance", [0.0, 20.0, 50.0, 80.0, 100.0])
def test_fit_is_close_to_exact_solution(distance):
    assert fitted_diameter(distance, 10.0) == pytest.approx(exact_diameter(distance, 100.0), abs=0.5)


def test_measure_touching_and_concentric():
    touching = measure(diameter=100, distance=100, initial_diameter=100)
    assert touching.proportion_overlap == pytest.approx(0.0, abs=1e-12)
    assert touching.proportion_distance == 1.0

    concentric = measure(diameter=141, distance=0, initial_diameter=100)
    assert concentric.proportion_overlap == pytest.approx(1.0)
    assert concentric.proportion_distance == 0.0


def test_measure_handles_small_negative_and_overshooting_distances():
    m = measure(diameter=142, distance=-0.3, initial_diameter=100)
    assert m.distance == -0.3
    assert m.proportion_overlap == pytest.approx(overlap_ratio(71.0, 0.3))

    m = measure(diameter=100, distance=100.4, initial_diameter=100)
    assert m.proportion_overlap == pytest.approx(0.0, abs=1e-12)


def test_measurement_to_dict():
    m = Measurement(distance=32.0, proportion_overlap=0.5, proportion_distance=0.32)
    assert m.to_dict() == {"distance": 32.0, "proportionOverlap": 0.5, "proportionDistance": 0.32}
    assert m.with_circle(2).to_dict()["currentCircle"] == 2
