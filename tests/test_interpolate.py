import pytest

from color_scales.core_types import ControlPoint
from color_scales.interpolate import bracket, interpolate_chroma, interpolate_lightness, sort_points


def L(position, lightness=None):
    return ControlPoint(position, lightness=lightness)


def S(position, saturation=None):
    return ControlPoint(position, saturation=saturation)


def test_empty_curves_use_neutral_defaults():
    for pos in (-1.0, 0.0, 0.37, 1.0, 2.0):
        assert interpolate_lightness(pos, []) == 0.5
        assert interpolate_chroma(pos, []) == 1.0


def test_single_point_returns_its_value():
    assert interpolate_lightness(0.9, [L(0.2, 0.33)]) == 0.33
    assert interpolate_chroma(0.1, [S(0.8, 0.4)]) == 0.4
    assert interpolate_lightness(0.5, [S(0.5, 0.4)]) == 0.5
    assert interpolate_chroma(0.5, [L(0.5, 0.4)]) == 1.0


def test_end_points_of_unsorted_curve():
    pts = [L(1.0, 0.1), L(0.0, 0.9), L(0.5, 0.5)]
    assert interpolate_lightness(0.0, pts) == 0.9
    assert interpolate_lightness(1.0, pts) == pytest.approx(0.1)
    assert interpolate_lightness(0.25, pts) == pytest.approx(0.7)


def test_outside_hull_clamps_instead_of_extrapolating():
    pts = [L(0.2, 0.8), L(0.8, 0.2)]
    assert interpolate_lightness(0.0, pts) == 0.8
    assert interpolate_lightness(-3.0, pts) == 0.8
    assert interpolate_lightness(1.0, pts) == 0.2
    assert interpolate_lightness(0.5, pts) == pytest.approx(0.5)


def test_missing_values_default_before_interpolating():
    assert interpolate_lightness(0.5, [L(0.0, 0.9), L(1.0)]) == pytest.approx(0.7)
    assert interpolate_chroma(0.5, [S(0.0, 0.5), S(1.0)]) == pytest.approx(0.75)


def test_duplicate_positions_use_first_matching_segment():
    pts = [L(0.0, 0.9), L(0.5, 0.6), L(0.5, 0.4), L(1.0, 0.1)]
    assert interpolate_lightness(0.5, pts) == pytest.approx(0.6)
    assert interpolate_lightness(0.75, pts) == pytest.approx(0.25)


def test_zero_width_segment_returns_lower_value():
    lower, upper, t = bracket(0.5, [L(0.5, 0.3), L(0.5, 0.7)])
    assert (lower.lightness, upper.lightness, t) == (0.3, 0.7, 0.0)
    assert interpolate_lightness(0.5, [L(0.5, 0.3), L(0.5, 0.7)]) == 0.3


def test_mappings_are_accepted():
    pts = [{"position": 0, "lightness": 1.0}, {"position": 1, "lightness": 0.0}]
    assert interpolate_lightness(0.25, pts) == pytest.approx(0.75)
    pts = [{"position": 0, "saturation": 0.0, "rangeType": "dark"}, {"position": 1, "saturation": 1.0}]
    assert interpolate_chroma(0.5, pts) == pytest.approx(0.5)


def test_inputs_are_not_reordered():
    pts = [L(1.0, 0.1), L(0.0, 0.9)]
    interpolate_lightness(0.5, pts)
    sort_points(pts)
    assert [p.position for p in pts] == [1.0, 0.0]


def test_bad_mapping_raises():
    with pytest.raises(ValueError):
        interpolate_lightness(0.5, [{"lightness": 0.3}])
    with pytest.raises(ValueError):
        interpolate_lightness(0.5, [{"position": 0.1, "rangeType": "mid"}])
