from __future__ import annotations

from typing import Dict, Iterable, Mapping, Tuple

from .convert import HSL, hex_to_hsl, hsl_to_hex
from .core_types import SHADES, ColorScale, ControlPoint, Hex, Shade, shade_position
from .interpolate import DEFAULT_LIGHTNESS, PointLike, bracket, sort_points


# --- fixed profile -----------------------------------------------------------
LIGHTNESS_SCALE: Mapping[Shade, float] = {
    "50": 0.97,
    "100": 0.94,
    "200": 0.86,
    "300": 0.76,
    "400": 0.66,
    "500": 0.56,  # closest to the base color
    "600": 0.46,
    "700": 0.38,
    "800": 0.30,
    "900": 0.22,
    "950": 0.14,
}

LOW_SATURATION = 0.15
HIGH_SATURATION = 0.9
LIGHT_SHADE_L = 0.7
DARK_SHADE_L = 0.3

DEFAULT_CUSTOM_POINTS: Tuple[ControlPoint, ...] = (
    ControlPoint(0.0, lightness=0.97),  # 50
    ControlPoint(0.25, lightness=0.85),  # ~200
    ControlPoint(0.5, lightness=0.56),  # 500
    ControlPoint(0.75, lightness=0.32),  # ~700
    ControlPoint(1.0, lightness=0.14),  # 950
)


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def saturation_boost(s: float) -> float:
    """Scale-wide saturation factor: lift grays, tame neon."""
    if s < LOW_SATURATION:
        return 3.0
    if s > HIGH_SATURATION:
        return 0.85
    return 1.0


def shade_saturation(s: float, lightness: float, boost: float = 1.0) -> float:
    """Light shades lose saturation, dark shades gain some."""
    if lightness > LIGHT_SHADE_L:
        return _clamp01(s * 0.8 * boost)
    if lightness < DARK_SHADE_L:
        return _clamp01(s * 1.2 * boost)
    return _clamp01(s * boost)


def generate_color_scale(base: Hex) -> ColorScale:
    """Fixed 50..950 lightness profile around the hue of `base`."""
    h, s, _ = hex_to_hsl(base)
    boost = saturation_boost(s)
    return {
        shade: hsl_to_hex(h, shade_saturation(s, lightness, boost), lightness)
        for shade, lightness in LIGHTNESS_SCALE.items()
    }


def generate_custom_color_scale(
    base: Hex, control_points: Iterable[PointLike] = ()
) -> ColorScale:
    """
    Shape the scale with a lightness curve.

    Each shade samples the curve at its normalized position. Saturation comes
    from the curve too when both bracketing points carry one; otherwise the
    light/dark rule of the fixed profile applies.
    """
    h, s, _ = hex_to_hsl(base)
    ordered = sort_points(control_points) or list(DEFAULT_CUSTOM_POINTS)

    scale: ColorScale = {}
    for shade in SHADES:
        lower, upper, t = bracket(shade_position(shade), ordered)
        lo = DEFAULT_LIGHTNESS if lower.lightness is None else lower.lightness
        hi = DEFAULT_LIGHTNESS if upper.lightness is None else upper.lightness
        lightness = _clamp01(lo + t * (hi - lo))

        if lower.saturation is not None and upper.saturation is not None:
            saturation = _clamp01(
                lower.saturation + t * (upper.saturation - lower.saturation)
            )
        else:
            saturation = shade_saturation(s, lightness)

        scale[shade] = hsl_to_hex(h, saturation, lightness)
    return scale


# --- neutrals ----------------------------------------------------------------
NEUTRAL_MAX_SATURATION = 0.08
NEUTRAL_SATURATION_RATIO = 0.12
NEUTRAL_HUE_SHIFT = 0.05


def neutral_lightness(index: int) -> float:
    if index < 6:
        return 0.98 - index * 0.08  # 50..500: 0.98 down to 0.58
    return 0.48 - (index - 6) * 0.08  # 600..950: 0.48 down to 0.16


def neutral_profile(base: Hex) -> Dict[Shade, HSL]:
    """HSL triples of the neutral ramp before hex encoding."""
    h, s, _ = hex_to_hsl(base)
    # blues/greens drift cooler, warm hues drift the other way
    shift = NEUTRAL_HUE_SHIFT if 0.3 < h < 0.7 else -NEUTRAL_HUE_SHIFT
    hue = (h + shift) % 1.0
    cap = min(NEUTRAL_MAX_SATURATION, s * NEUTRAL_SATURATION_RATIO)

    out: Dict[Shade, HSL] = {}
    for i, shade in enumerate(SHADES):
        lightness = neutral_lightness(i)
        sat = cap / 2 if lightness > 0.9 or lightness < 0.2 else cap
        out[shade] = (hue, sat, lightness)
    return out


def generate_neutrals(base: Hex) -> ColorScale:
    """Near-gray ramp that keeps a hint of the base hue."""
    return {shade: hsl_to_hex(*hsl) for shade, hsl in neutral_profile(base).items()}


__all__ = [
    "LIGHTNESS_SCALE",
    "DEFAULT_CUSTOM_POINTS",
    "saturation_boost",
    "shade_saturation",
    "generate_color_scale",
    "generate_custom_color_scale",
    "neutral_lightness",
    "neutral_profile",
    "generate_neutrals",
]
