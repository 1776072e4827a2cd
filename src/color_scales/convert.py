"""Colorspace conversions: hex, RGB, HSL, OKLab and OKLCH.

Everything here is a pure function over plain floats and tuples. Parsing is
lenient on purpose: a malformed hex digit pair turns into ``nan`` instead of
raising, so callers validate with :func:`canon_hex` before generating scales.
Encoding back to hex is strict and refuses channels that are not finite.
"""

from __future__ import annotations

import math
import string
from typing import Tuple

import numpy as np

Hex = str
RGB = Tuple[float, float, float]
HSL = Tuple[float, float, float]
OKLab = Tuple[float, float, float]
OKLCH = Tuple[float, float, float]


class InvalidColorError(ValueError):
    """Raised when a color cannot be parsed or encoded."""


# -----------------------------------------------------------------------------
# Hex <-> RGB
# -----------------------------------------------------------------------------


def canon_hex(s: str) -> Hex:
    """Normalize to '#rrggbb'; accept 3- or 6-digit hex only."""
    raw = (s or "").strip()
    if raw.startswith("#"):
        raw = raw[1:]
    if len(raw) == 3 and all(c in string.hexdigits for c in raw):
        raw = "".join(ch * 2 for ch in raw)
    if len(raw) != 6 or not all(c in string.hexdigits for c in raw):
        raise InvalidColorError(f"invalid hex color: {s!r}")
    return "#" + raw.lower()


def is_valid_hex(s: str) -> bool:
    try:
        canon_hex(s)
    except InvalidColorError:
        return False
    return True


def _parse_pair(pair: str) -> float:
    if len(pair) != 2 or not all(c in string.hexdigits for c in pair):
        return math.nan
    return float(int(pair, 16))


def hex_to_rgb(hex_str: Hex) -> RGB:
    """'#rrggbb' or '#rgb' -> (r, g, b) in 0..255; bad channels become nan."""
    raw = hex_str[1:] if hex_str.startswith("#") else hex_str
    if len(raw) == 3:
        pairs = [ch * 2 for ch in raw]
    else:
        pairs = [raw[0:2], raw[2:4], raw[4:6]]
    r, g, b = (_parse_pair(p) for p in pairs)
    return r, g, b


def rgb_to_hex(r: float, g: float, b: float) -> Hex:
    out = []
    for v in (r, g, b):
        if not math.isfinite(v) or not 0 <= v <= 255:
            raise InvalidColorError(f"channel out of range: {v!r}")
        out.append(int(_round_half_up(v)))
    return "#{:02x}{:02x}{:02x}".format(*out)


# -----------------------------------------------------------------------------
# RGB <-> HSL (all components normalized to [0, 1])
# -----------------------------------------------------------------------------


def _round_half_up(x: float) -> float:
    # Math.round semantics; nan stays nan
    return math.floor(x + 0.5) if math.isfinite(x) else x


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    if any(math.isnan(v) for v in (r, g, b)):
        return math.nan, math.nan, math.nan

    r, g, b = r / 255.0, g / 255.0, b / 255.0
    hi = max(r, g, b)
    lo = min(r, g, b)
    h = s = 0.0
    l = (hi + lo) / 2.0

    if hi != lo:
        d = hi - lo
        s = d / (2.0 - hi - lo) if l > 0.5 else d / (hi + lo)
        if hi == r:
            h = (g - b) / d + (6.0 if g < b else 0.0)
        elif hi == g:
            h = (b - r) / d + 2.0
        else:
            h = (r - g) / d + 4.0
        h /= 6.0

    return h, s, l


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    if any(math.isnan(v) for v in (h, s, l)):
        return math.nan, math.nan, math.nan
    if s == 0:
        r = g = b = l
    else:
        q = l * (1 + s) if l < 0.5 else l + s - l * s
        p = 2 * l - q
        r = _hue_to_rgb(p, q, h + 1 / 3)
        g = _hue_to_rgb(p, q, h)
        b = _hue_to_rgb(p, q, h - 1 / 3)
    return (
        _round_half_up(r * 255),
        _round_half_up(g * 255),
        _round_half_up(b * 255),
    )


def hex_to_hsl(hex_str: Hex) -> HSL:
    return rgb_to_hsl(*hex_to_rgb(hex_str))


def hsl_to_hex(h: float, s: float, l: float) -> Hex:
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


# -----------------------------------------------------------------------------
# Linear <-> gamma-encoded sRGB (IEC 61966-2-1)
# -----------------------------------------------------------------------------
SRGB_THRESHOLD = 0.04045
LINEAR_THRESHOLD = 0.0031308
SRGB_EXPONENT = 2.4
SRGB_A = 0.055


def srgb_to_linear(x: float) -> float:
    if x <= SRGB_THRESHOLD:
        return x / 12.92
    return ((x + SRGB_A) / (1 + SRGB_A)) ** SRGB_EXPONENT


def linear_to_srgb(x: float) -> float:
    if x <= LINEAR_THRESHOLD:
        return 12.92 * x
    return (1 + SRGB_A) * x ** (1 / SRGB_EXPONENT) - SRGB_A


# -----------------------------------------------------------------------------
# Oklab (Bjorn Ottosson, MIT licence)
# -----------------------------------------------------------------------------
_LRGB_TO_LMS = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ],
    dtype=np.float64,
)
_LMS_TO_OKLAB = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ],
    dtype=np.float64,
)
_OKLAB_TO_LMS = np.array(
    [
        [1.0, 0.3963377774, 0.2158037573],
        [1.0, -0.1055613458, -0.0638541728],
        [1.0, -0.0894841775, -1.2914855480],
    ],
    dtype=np.float64,
)
_LMS_TO_LRGB = np.array(
    [
        [4.0767416621, -3.3077115913, 0.2309699292],
        [-1.2684380046, 2.6097574011, -0.3413193965],
        [-0.0041960863, -0.7034186147, 1.7076147010],
    ],
    dtype=np.float64,
)


def linear_rgb_to_oklab(r: float, g: float, b: float) -> OKLab:
    lms = np.cbrt(_LRGB_TO_LMS @ np.array([r, g, b], dtype=np.float64))
    L, a, b_ = _LMS_TO_OKLAB @ lms
    return float(L), float(a), float(b_)


def oklab_to_linear_rgb(L: float, a: float, b: float) -> RGB:
    lms = (_OKLAB_TO_LMS @ np.array([L, a, b], dtype=np.float64)) ** 3
    r, g, b_ = _LMS_TO_LRGB @ lms
    return float(r), float(g), float(b_)


def oklab_to_oklch(L: float, a: float, b: float) -> OKLCH:
    C = math.hypot(a, b)
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360.0
    return L, C, h


def oklch_to_oklab(L: float, C: float, h: float) -> OKLab:
    rad = math.radians(h)
    return L, C * math.cos(rad), C * math.sin(rad)


def hex_to_oklch(hex_str: Hex) -> OKLCH:
    """'#rrggbb' -> (L, C, h) with L in [0, 1] and h in degrees."""
    r, g, b = hex_to_rgb(hex_str)
    lab = linear_rgb_to_oklab(
        srgb_to_linear(r / 255.0),
        srgb_to_linear(g / 255.0),
        srgb_to_linear(b / 255.0),
    )
    return oklab_to_oklch(*lab)


def _encode_channel(x: float) -> int:
    v = _round_half_up(linear_to_srgb(x) * 255)
    if not math.isfinite(v):
        raise InvalidColorError(f"non-finite channel: {x!r}")
    return int(max(0, min(255, v)))


def oklch_to_hex(L: float, C: float, h: float) -> Hex:
    """(L, C, h) -> '#rrggbb', clamping out-of-gamut channels."""
    r, g, b = oklab_to_linear_rgb(*oklch_to_oklab(L, C, h))
    # negative linear values come back from cube roots of out-of-gamut colors
    return rgb_to_hex(*(_encode_channel(v) for v in (r, g, b)))


__all__ = [
    "InvalidColorError",
    "canon_hex",
    "is_valid_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "hex_to_hsl",
    "hsl_to_hex",
    "srgb_to_linear",
    "linear_to_srgb",
    "linear_rgb_to_oklab",
    "oklab_to_linear_rgb",
    "oklab_to_oklch",
    "oklch_to_oklab",
    "hex_to_oklch",
    "oklch_to_hex",
]
