from __future__ import annotations

from operator import attrgetter
from typing import Any, Iterable, List, Mapping, Tuple, Union

from .core_types import ControlPoint

PointLike = Union[ControlPoint, Mapping[str, Any]]

DEFAULT_LIGHTNESS = 0.5  # mid-gray when a curve says nothing
DEFAULT_SATURATION = 1.0  # multiplier that leaves saturation unchanged


def as_control_points(points: Iterable[PointLike]) -> List[ControlPoint]:
    """Accept ControlPoint instances or JSON-style mappings."""
    out: List[ControlPoint] = []
    for p in points:
        out.append(p if isinstance(p, ControlPoint) else ControlPoint.from_mapping(p))
    return out


def sort_points(points: Iterable[PointLike]) -> List[ControlPoint]:
    # sorted() is stable: equal positions keep caller order
    return sorted(as_control_points(points), key=attrgetter("position"))


def bracket(
    position: float, ordered: List[ControlPoint]
) -> Tuple[ControlPoint, ControlPoint, float]:
    """
    Locate the segment of a sorted, non-empty point list that holds `position`.

    Returns (lower, upper, t) with t in [0, 1]. The first segment whose closed
    interval contains the position wins, so a query landing on a duplicated
    position resolves to the earlier segment. Queries outside the hull collapse
    onto the nearest end point (t = 0), never extrapolating.
    """
    first, last = ordered[0], ordered[-1]
    if position < first.position:
        return first, first, 0.0
    if position > last.position:
        return last, last, 0.0

    lower, upper = first, last
    for cur, nxt in zip(ordered, ordered[1:]):
        if cur.position <= position <= nxt.position:
            lower, upper = cur, nxt
            break

    span = upper.position - lower.position
    if span == 0:
        return lower, upper, 0.0
    return lower, upper, (position - lower.position) / span


def _interpolate(
    position: float, points: Iterable[PointLike], field: str, default: float
) -> float:
    ordered = sort_points(points)
    if not ordered:
        return default
    if len(ordered) == 1:
        value = getattr(ordered[0], field)
        return default if value is None else value

    lower, upper, t = bracket(position, ordered)
    lo = getattr(lower, field)
    hi = getattr(upper, field)
    lo = default if lo is None else lo
    hi = default if hi is None else hi
    return lo + t * (hi - lo)


def interpolate_lightness(position: float, points: Iterable[PointLike]) -> float:
    """Target lightness at `position` along a lightness curve (0.5 if empty)."""
    return _interpolate(position, points, "lightness", DEFAULT_LIGHTNESS)


def interpolate_chroma(position: float, points: Iterable[PointLike]) -> float:
    """Saturation multiplier at `position` along a chroma curve (1.0 if empty)."""
    return _interpolate(position, points, "saturation", DEFAULT_SATURATION)


__all__ = [
    "DEFAULT_LIGHTNESS",
    "DEFAULT_SATURATION",
    "as_control_points",
    "sort_points",
    "bracket",
    "interpolate_lightness",
    "interpolate_chroma",
]
