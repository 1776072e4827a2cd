"""
Shade keys, scale aliases and the small value objects passed between modules.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping, NamedTuple, Optional, Tuple

Hex = str
Shade = str
ColorScale = Dict[Shade, Hex]
RangeType = Literal["light", "dark"]

SHADES: Tuple[Shade, ...] = (
    "50",
    "100",
    "200",
    "300",
    "400",
    "500",
    "600",
    "700",
    "800",
    "900",
    "950",
)
LIGHT_SHADES: Tuple[Shade, ...] = SHADES[:6]  # 50..500
DARK_SHADES: Tuple[Shade, ...] = SHADES[6:]  # 600..950


def shade_position(shade: Shade) -> float:
    """Normalized position of a shade: 50 -> 0.0, 500 -> 0.5, 950 -> 1.0."""
    return SHADES.index(shade) / (len(SHADES) - 1)


@dataclass(frozen=True)
class ControlPoint:
    """Anchor of a piecewise-linear lightness or saturation curve."""

    position: float  # [0, 1]
    lightness: Optional[float] = None  # [0, 1]
    saturation: Optional[float] = None  # multiplier, usually 0..1
    range_type: Optional[RangeType] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ControlPoint":
        if "position" not in data:
            raise ValueError("control point needs a position")
        range_type = data.get("range_type", data.get("rangeType"))
        if range_type not in (None, "light", "dark"):
            raise ValueError(f"unknown range type {range_type!r}")
        return cls(
            position=float(data["position"]),
            lightness=_opt_float(data.get("lightness")),
            saturation=_opt_float(data.get("saturation")),
            range_type=range_type,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"position": self.position}
        if self.lightness is not None:
            out["lightness"] = self.lightness
        if self.saturation is not None:
            out["saturation"] = self.saturation
        if self.range_type is not None:
            out["rangeType"] = self.range_type
        return out


def _opt_float(v: Any) -> Optional[float]:
    return None if v is None else float(v)


class CurvePoint(NamedTuple):
    x: float
    y: float


class ChromaPoint(NamedTuple):
    x: float
    y: float
    color: Hex


__all__ = [
    "Hex",
    "Shade",
    "ColorScale",
    "RangeType",
    "SHADES",
    "LIGHT_SHADES",
    "DARK_SHADES",
    "shade_position",
    "ControlPoint",
    "CurvePoint",
    "ChromaPoint",
]
