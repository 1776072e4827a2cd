"""Curve-driven scale generation.

Lightness and chroma curves are sparse, piecewise-linear control point lists.
A scale samples both curves at each shade position and keeps the base hue.
Failures never reach the caller: the fixed profile is returned instead.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from .convert import hex_to_hsl, hsl_to_hex
from .core_types import (
    DARK_SHADES,
    LIGHT_SHADES,
    SHADES,
    ColorScale,
    ControlPoint,
    Hex,
    RangeType,
    Shade,
)
from .interpolate import (
    PointLike,
    as_control_points,
    interpolate_chroma,
    interpolate_lightness,
)
from .scales import generate_color_scale

log = logging.getLogger(__name__)

# denser around 0.4/0.5/0.6 to keep contrast near the 500 shade
DEFAULT_LIGHTNESS_POINTS: Tuple[ControlPoint, ...] = (
    ControlPoint(0.0, lightness=0.98),  # 50
    ControlPoint(0.2, lightness=0.9),  # ~200
    ControlPoint(0.4, lightness=0.75),  # ~400
    ControlPoint(0.5, lightness=0.6),  # 500
    ControlPoint(0.6, lightness=0.45),  # ~600
    ControlPoint(0.8, lightness=0.25),  # ~800
    ControlPoint(1.0, lightness=0.1),  # 950
)
DEFAULT_CHROMA_POINTS: Tuple[ControlPoint, ...] = (
    ControlPoint(0.0, saturation=0.7),
    ControlPoint(0.2, saturation=0.85),
    ControlPoint(0.4, saturation=0.95),
    ControlPoint(0.5, saturation=1.0),
    ControlPoint(0.6, saturation=0.95),
    ControlPoint(0.8, saturation=0.85),
    ControlPoint(1.0, saturation=0.7),
)

_QUARTERS = (0.0, 0.25, 0.5, 0.75, 1.0)

DEFAULT_LIGHT_LIGHTNESS_POINTS: Tuple[ControlPoint, ...] = tuple(
    ControlPoint(p, lightness=v, range_type="light")
    for p, v in zip(_QUARTERS, (0.98, 0.9, 0.8, 0.7, 0.55))
)
DEFAULT_DARK_LIGHTNESS_POINTS: Tuple[ControlPoint, ...] = tuple(
    ControlPoint(p, lightness=v, range_type="dark")
    for p, v in zip(_QUARTERS, (0.45, 0.35, 0.25, 0.15, 0.05))
)
DEFAULT_LIGHT_CHROMA_POINTS: Tuple[ControlPoint, ...] = tuple(
    ControlPoint(p, saturation=1.0, range_type="light") for p in _QUARTERS
)
DEFAULT_DARK_CHROMA_POINTS: Tuple[ControlPoint, ...] = tuple(
    ControlPoint(p, saturation=1.0, range_type="dark") for p in _QUARTERS
)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def _or_default(
    points: Iterable[PointLike], default: Sequence[ControlPoint]
) -> List[ControlPoint]:
    pts = as_control_points(points)
    return pts if pts else list(default)


def _shade_color(
    h: float,
    s: float,
    position: float,
    lightness_points: Sequence[ControlPoint],
    chroma_points: Sequence[ControlPoint],
) -> Hex:
    lightness = _clamp01(interpolate_lightness(position, lightness_points))
    multiplier = interpolate_chroma(position, chroma_points)
    log.debug("pos=%.3f  L=%.4f  chroma x%.4f", position, lightness, multiplier)
    return hsl_to_hex(h, _clamp01(s * multiplier), lightness)


def apply_color_curves(
    base: Hex,
    lightness_points: Iterable[PointLike] = (),
    chroma_points: Iterable[PointLike] = (),
) -> ColorScale:
    """
    Build a scale from a lightness curve and a chroma (saturation multiplier)
    curve, both sampled at shade index / 10. Empty curves fall back to the
    built-in 7-point profiles.
    """
    try:
        l_pts = _or_default(lightness_points, DEFAULT_LIGHTNESS_POINTS)
        c_pts = _or_default(chroma_points, DEFAULT_CHROMA_POINTS)
        h, s, _ = hex_to_hsl(base)

        last = len(SHADES) - 1
        return {
            shade: _shade_color(h, s, i / last, l_pts, c_pts)
            for i, shade in enumerate(SHADES)
        }
    except Exception:
        log.exception("Curve generation failed for %r; using fixed profile", base)
        return generate_color_scale(base)


def _in_range(points: List[ControlPoint], range_type: RangeType) -> List[ControlPoint]:
    return [p for p in points if p.range_type in (None, range_type)]


def _pick(
    points: Optional[Iterable[PointLike]],
    range_type: RangeType,
    default: Sequence[ControlPoint],
) -> List[ControlPoint]:
    kept = _in_range(as_control_points(points or ()), range_type)
    return kept if kept else list(default)


def _sample_range(
    h: float,
    s: float,
    shades: Sequence[Shade],
    lightness_points: Sequence[ControlPoint],
    chroma_points: Sequence[ControlPoint],
) -> ColorScale:
    last = len(shades) - 1
    return {
        shade: _shade_color(h, s, i / last, lightness_points, chroma_points)
        for i, shade in enumerate(shades)
    }


def apply_range_color_curves(
    base: Hex,
    light_lightness: Optional[Iterable[PointLike]] = None,
    dark_lightness: Optional[Iterable[PointLike]] = None,
    light_chroma: Optional[Iterable[PointLike]] = None,
    dark_chroma: Optional[Iterable[PointLike]] = None,
) -> ColorScale:
    """
    Split variant of :func:`apply_color_curves`.

    Shades 50..500 sample the light curves over their own 0..1 span, shades
    600..950 sample the dark curves. Points tagged for the other range are
    ignored; a range left without points uses its default profile.
    """
    try:
        h, s, _ = hex_to_hsl(base)
        scale = _sample_range(
            h,
            s,
            LIGHT_SHADES,
            _pick(light_lightness, "light", DEFAULT_LIGHT_LIGHTNESS_POINTS),
            _pick(light_chroma, "light", DEFAULT_LIGHT_CHROMA_POINTS),
        )
        scale.update(
            _sample_range(
                h,
                s,
                DARK_SHADES,
                _pick(dark_lightness, "dark", DEFAULT_DARK_LIGHTNESS_POINTS),
                _pick(dark_chroma, "dark", DEFAULT_DARK_CHROMA_POINTS),
            )
        )
        return scale
    except Exception:
        log.exception("Range curve generation failed for %r; using fixed profile", base)
        return generate_color_scale(base)


__all__ = [
    "DEFAULT_LIGHTNESS_POINTS",
    "DEFAULT_CHROMA_POINTS",
    "DEFAULT_LIGHT_LIGHTNESS_POINTS",
    "DEFAULT_DARK_LIGHTNESS_POINTS",
    "DEFAULT_LIGHT_CHROMA_POINTS",
    "DEFAULT_DARK_CHROMA_POINTS",
    "apply_color_curves",
    "apply_range_color_curves",
]
