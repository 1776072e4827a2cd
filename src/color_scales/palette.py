from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Literal, Optional, Tuple

from .convert import canon_hex
from .core_types import ColorScale, ControlPoint, Hex
from .curves import apply_color_curves
from .interpolate import PointLike, as_control_points
from .scales import generate_color_scale, generate_neutrals

ColorKind = Literal["primary", "accent", "neutral"]
KINDS: Tuple[str, ...] = ("primary", "accent", "neutral")

DEFAULT_PRIMARY = "#3b82f6"  # blue
DEFAULT_ACCENT = "#ec4899"  # pink


@dataclass(frozen=True)
class Palette:
    """
    Base colors plus the curves shared by every scale.

    Immutable: the ``with_*`` methods hand back a new palette and the scales
    are recomputed from scratch. The neutral ramp follows the primary color
    unless it is set on its own.
    """

    primary: Hex = DEFAULT_PRIMARY
    accent: Hex = DEFAULT_ACCENT
    neutral: Hex = DEFAULT_PRIMARY
    lightness_points: Tuple[ControlPoint, ...] = ()
    chroma_points: Tuple[ControlPoint, ...] = ()
    _scales: Dict[str, ColorScale] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        for kind in KINDS:
            object.__setattr__(self, kind, canon_hex(getattr(self, kind)))
        object.__setattr__(
            self, "lightness_points", tuple(as_control_points(self.lightness_points))
        )
        object.__setattr__(
            self, "chroma_points", tuple(as_control_points(self.chroma_points))
        )
        self._scales.update(
            primary=self._curved(self.primary),
            accent=self._curved(self.accent),
            neutral=generate_neutrals(self.neutral),
        )

    @property
    def has_curves(self) -> bool:
        return bool(self.lightness_points or self.chroma_points)

    def _curved(self, base: Hex) -> ColorScale:
        if self.has_curves:
            return apply_color_curves(base, self.lightness_points, self.chroma_points)
        return generate_color_scale(base)

    @property
    def primary_scale(self) -> ColorScale:
        return dict(self._scales["primary"])

    @property
    def accent_scale(self) -> ColorScale:
        return dict(self._scales["accent"])

    @property
    def neutral_scale(self) -> ColorScale:
        return dict(self._scales["neutral"])

    def scales(self) -> Dict[str, ColorScale]:
        return {kind: dict(self._scales[kind]) for kind in KINDS}

    def with_base_color(self, kind: ColorKind, color: Hex) -> "Palette":
        if kind not in KINDS:
            raise ValueError(f"unknown color kind {kind!r}")
        if kind == "primary":
            return replace(self, primary=color, neutral=color)
        return replace(self, **{kind: color})

    def with_curves(
        self,
        lightness_points: Optional[Iterable[PointLike]] = None,
        chroma_points: Optional[Iterable[PointLike]] = None,
    ) -> "Palette":
        changes = {}
        if lightness_points is not None:
            changes["lightness_points"] = tuple(as_control_points(lightness_points))
        if chroma_points is not None:
            changes["chroma_points"] = tuple(as_control_points(chroma_points))
        return replace(self, **changes)


__all__ = ["ColorKind", "KINDS", "Palette"]
