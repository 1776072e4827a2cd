import pytest

from color_scales.adapters import (
    generate_chroma_points,
    generate_curve_points,
    get_curve_path_definition,
    ui_points_to_control_points,
)
from color_scales.convert import hex_to_hsl
from color_scales.core_types import ControlPoint, CurvePoint
from color_scales.scales import generate_color_scale

SCALE = generate_color_scale("#3b82f6")


def test_ui_points_default_canvas():
    pts = ui_points_to_control_points([{"x": 0, "y": 0}, {"x": 160, "y": 320}], False)
    assert pts == [ControlPoint(0.0, lightness=1.0), ControlPoint(0.5, lightness=0.0)]


def test_ui_points_chroma_uses_saturation():
    (pt,) = ui_points_to_control_points([(320, 80)], True)
    assert pt.position == 1.0
    assert pt.saturation == pytest.approx(0.75)
    assert pt.lightness is None


def test_ui_points_custom_canvas():
    (pt,) = ui_points_to_control_points([CurvePoint(100, 25)], False, width=200, height=100)
    assert (pt.position, pt.lightness) == (0.5, 0.75)


def test_curve_points_cover_range():
    pts = generate_curve_points(SCALE, "50", "500")
    assert len(pts) == 6
    assert pts[0].x == 0.0 and pts[-1].x == 1.0
    assert pts[1].x == pytest.approx(50 / 450)
    assert pts[0].y == pytest.approx(1 - hex_to_hsl(SCALE["50"])[2])
    assert all(a.y < b.y for a, b in zip(pts, pts[1:]))


def test_curve_points_edge_ranges():
    assert generate_curve_points(SCALE, "960", "990") == []
    (only,) = generate_curve_points(SCALE, "600", "600")
    assert only.x == 0.0


def test_chroma_points_three_samples():
    pts = generate_chroma_points(SCALE, "50", "950")
    assert [p.x for p in pts] == [0.0, 0.5, 1.0]
    assert [p.color for p in pts] == [SCALE["50"], SCALE["500"], SCALE["950"]]
    assert pts[1].y == pytest.approx(1 - hex_to_hsl(SCALE["500"])[1])


def test_chroma_points_reversed_range():
    pts = generate_chroma_points(SCALE, "950", "50")
    assert [p.x for p in pts] == [1.0, 0.5, 0.0]
    assert [p.color for p in pts] == [SCALE["50"], SCALE["500"], SCALE["950"]]


def test_chroma_points_invalid_range():
    with pytest.raises(ValueError):
        generate_chroma_points(SCALE, "75", "950")


def test_path_needs_two_points():
    assert get_curve_path_definition([], 100, 100) == ""
    assert get_curve_path_definition([(0.5, 0.5)], 100, 100) == ""


def test_path_two_points():
    path = get_curve_path_definition([(0, 0), (1, 1)], 140, 140)
    assert path == "M 20,20 C 70,20 70,120 120,120"


def test_path_three_points_custom_padding():
    path = get_curve_path_definition(
        [{"x": 0, "y": 1}, {"x": 0.5, "y": 0.5}, {"x": 1, "y": 0}], 220, 120, padding=10
    )
    assert path == "M 10,110 C 60,110 60,60 110,60 C 160,60 160,10 210,10"


def test_path_fractional_coordinates():
    assert get_curve_path_definition([(0, 0), (1, 0)], 41, 40) == "M 20,20 C 20.5,20 20.5,20 21,20"
