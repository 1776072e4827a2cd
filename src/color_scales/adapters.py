"""Glue between the curve editor's pixel space and the curve engine."""

from __future__ import annotations

from typing import Iterable, List, Mapping, Sequence, Tuple, Union

from .convert import hex_to_hsl
from .core_types import SHADES, ChromaPoint, ColorScale, ControlPoint, CurvePoint, Shade

CANVAS_SIZE = 320  # legacy editor canvas, pixels per side

XY = Union[CurvePoint, Tuple[float, float], Mapping[str, float]]


def _xy(point: XY) -> Tuple[float, float]:
    if isinstance(point, Mapping):
        return float(point["x"]), float(point["y"])
    x, y = point[0], point[1]
    return float(x), float(y)


def ui_points_to_control_points(
    points: Iterable[XY],
    is_chroma: bool,
    *,
    width: float = CANVAS_SIZE,
    height: float = CANVAS_SIZE,
) -> List[ControlPoint]:
    """
    Pixel coordinates -> normalized control points.

    Screen y grows downwards, so the value is inverted: the top edge is full
    lightness (or saturation), the bottom edge zero.
    """
    out: List[ControlPoint] = []
    for point in points:
        x, y = _xy(point)
        position = x / width
        value = 1 - y / height
        if is_chroma:
            out.append(ControlPoint(position, saturation=value))
        else:
            out.append(ControlPoint(position, lightness=value))
    return out


def generate_curve_points(
    scale: ColorScale, start: Shade, end: Shade
) -> List[CurvePoint]:
    """Lightness of every shade in [start, end], as (x, 1 - L) plot points."""
    lo, hi = int(start), int(end)
    shades = sorted((k for k in scale if lo <= int(k) <= hi), key=int)
    if not shades:
        return []

    first, last = int(shades[0]), int(shades[-1])
    span = last - first
    points: List[CurvePoint] = []
    for shade in shades:
        _, _, l = hex_to_hsl(scale[shade])
        x = (int(shade) - first) / span if span else 0.0
        points.append(CurvePoint(x, 1 - l))
    return points


def generate_chroma_points(
    scale: ColorScale, start: Shade, end: Shade
) -> List[ChromaPoint]:
    """First, middle and last shade of a range with their saturation."""
    if start not in SHADES or end not in SHADES:
        raise ValueError(f"Invalid range: {start}-{end}")

    i0, i1 = SHADES.index(start), SHADES.index(end)
    shades = SHADES[min(i0, i1) : max(i0, i1) + 1]
    n = len(shades) - 1

    out: List[ChromaPoint] = []
    for idx in (0, len(shades) // 2, n):
        color = scale[shades[idx]]
        _, s, _ = hex_to_hsl(color)
        frac = idx / n if n else 0.0
        x = frac if i0 < i1 else 1 - frac
        out.append(ChromaPoint(x, 1 - s, color))
    return out


def _num(v: float) -> str:
    # print numbers like a browser does: 20 not 20.0
    v = float(v)
    if v.is_integer():
        return str(int(v))
    return repr(v)


def get_curve_path_definition(
    points: Sequence[XY], width: float, height: float, padding: float = 20
) -> str:
    """
    SVG path through normalized points.

    Each segment is a cubic whose two handles sit at the horizontal midpoint,
    level with their own end point, so monotonic inputs never overshoot.
    """
    if len(points) < 2:
        return ""

    draw_w = width - padding * 2
    draw_h = height - padding * 2
    mapped = [
        (padding + x * draw_w, padding + y * draw_h) for x, y in map(_xy, points)
    ]

    x0, y0 = mapped[0]
    parts = [f"M {_num(x0)},{_num(y0)}"]
    for (cx, cy), (nx, ny) in zip(mapped, mapped[1:]):
        c1x = cx + (nx - cx) * 0.5
        c2x = nx - (nx - cx) * 0.5
        parts.append(
            f"C {_num(c1x)},{_num(cy)} {_num(c2x)},{_num(ny)} {_num(nx)},{_num(ny)}"
        )
    return " ".join(parts)


__all__ = [
    "CANVAS_SIZE",
    "ui_points_to_control_points",
    "generate_curve_points",
    "generate_chroma_points",
    "get_curve_path_definition",
]
