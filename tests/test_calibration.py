import dataclasses

import numpy as np
import pytest

from ioscircles.model.calibration import (
    CALIBRATION_DATA,
    FULL_OVERLAP,
    FULL_SEPARATION,
    CalibrationPoint,
    CalibrationRangeError,
    calibration_table,
    compute_calibration,
    get_calibration,
    pair_calibration,
    place_step,
    scale_factor,
)
from ioscircles.model.geometry import overlap_ratio

STEP_COUNTS = range(2, 21)


def test_every_step_count_has_a_table():
    assert sorted(CALIBRATION_DATA) == list(STEP_COUNTS)


@pytest.mark.parametrize("steps", STEP_COUNTS)
def test_table_endpoints_and_length(steps):
    table = calibration_table(steps)
    assert len(table) == steps + 1
    assert table[0] == CalibrationPoint(diameter=1000, distance=1000)
    assert table[-1] == CalibrationPoint(diameter=1414, distance=0)


@pytest.mark.parametrize("steps", STEP_COUNTS)
def test_table_is_monotonic(steps):
    table = calibration_table(steps)
    diameters = [p.diameter for p in table]
    distances = [p.distance for p in table]
    assert all(b > a for a, b in zip(diameters, diameters[1:]))
    assert all(b < a for a, b in zip(distances, distances[1:]))


@pytest.mark.parametrize("steps", STEP_COUNTS)
def test_overlap_increments_are_equal(steps):
    table = calibration_table(steps)
    ratios = np.array([overlap_ratio(p.diameter / 2, p.distance) for p in table])
    increments = np.diff(ratios)
    assert np.allclose(increments, 1.0 / steps, atol=0.01)


@pytest.mark.parametrize("steps", [2, 3, 7, 12, 20])
def test_table_matches_recomputed_calibration(steps):
    computed = compute_calibration(steps)
    for stored, fresh in zip(calibration_table(steps), computed):
        assert abs(stored.diameter - fresh.diameter) <= 2
        assert abs(stored.distance - fresh.distance) <= 2


def test_get_calibration_is_one_indexed():
    assert get_calibration(3, 1) == FULL_SEPARATION
    assert get_calibration(3, 2) == CalibrationPoint(diameter=1155, distance=467)
    assert get_calibration(3, 4) == FULL_OVERLAP


@pytest.mark.parametrize("steps, index", [(3, 0), (3, 5), (1, 1), (21, 1), (0, 1)])
def test_get_calibration_out_of_range(steps, index):
    with pytest.raises(CalibrationRangeError):
        get_calibration(steps, index)


def test_range_error_is_index_error():
    with pytest.raises(IndexError):
        calibration_table(25)


def test_tables_are_immutable():
    table = calibration_table(5)
    assert isinstance(table, tuple)
    with pytest.raises(dataclasses.FrozenInstanceError):
        table[0].diameter = 5


def test_pair_calibration_runs_from_touching_to_concentric():
    assert pair_calibration(2) == (FULL_SEPARATION, FULL_OVERLAP)
    assert pair_calibration(3) == calibration_table(2)
    assert pair_calibration(7) == calibration_table(6)
    assert len(pair_calibration(20)) == 20


@pytest.mark.parametrize("number_circles", [1, 21])
def test_pair_calibration_out_of_range(number_circles):
    with pytest.raises(CalibrationRangeError):
        pair_calibration(number_circles)


def test_scale_factor():
    assert scale_factor(100) == 10.0
    assert scale_factor(250) == 4.0


def test_place_step_rounds_half_up():
    placement = place_step(CalibrationPoint(diameter=1225, distance=325), initial_diameter=100)

    assert placement.diameter == 123        # 122.5
    assert placement.translate == 68        # 67.5
    assert placement.shift_margin == 11.5
    assert placement.group_translation == 56.5
    assert placement.right_margin(145) == 133.5


def test_place_step_endpoints():
    first = place_step(FULL_SEPARATION, initial_diameter=100)
    assert (first.diameter, first.translate, first.shift_margin) == (100, 0, 0.0)

    last = place_step(FULL_OVERLAP, initial_diameter=100)
    assert (last.diameter, last.translate, last.shift_margin) == (141, 100, 20.5)
