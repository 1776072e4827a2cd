import math

import numpy as np
import pytest
from coloraide import Color

from color_scales.convert import (
    InvalidColorError,
    canon_hex,
    hex_to_hsl,
    hex_to_oklch,
    hex_to_rgb,
    hsl_to_rgb,
    is_valid_hex,
    oklch_to_hex,
    rgb_to_hex,
    rgb_to_hsl,
)

SAMPLES = ["#3b82f6", "#f59e0b", "#ec4899", "#10b981", "#6b7280", "#000000", "#ffffff", "#7f00ff"]


def test_hex_to_rgb_long_and_short():
    assert hex_to_rgb("#3b82f6") == (59, 130, 246)
    assert hex_to_rgb("3b82f6") == (59, 130, 246)
    assert hex_to_rgb("#abc") == hex_to_rgb("#aabbcc")


def test_malformed_hex_gives_nan_not_exception():
    assert all(math.isnan(c) for c in hex_to_rgb("#zzzzzz"))
    assert all(math.isnan(c) for c in hex_to_hsl("#zzzzzz"))
    r, g, b = hex_to_rgb("#12")
    assert r == 0x12 and math.isnan(g) and math.isnan(b)


def test_rgb_to_hex_is_lowercase_and_padded():
    assert rgb_to_hex(1, 2, 3) == "#010203"
    assert rgb_to_hex(255, 171, 0) == "#ffab00"


def test_rgb_to_hex_rounds_fractional_channels():
    assert rgb_to_hex(254.9, 0.4, 127.5) == "#ff0080"
    assert rgb_to_hex(254.4, 0, 0) == "#fe0000"


def test_rgb_to_hex_rejects_bad_channels():
    with pytest.raises(InvalidColorError):
        rgb_to_hex(math.nan, 0, 0)
    with pytest.raises(InvalidColorError):
        rgb_to_hex(256, 0, 0)


def test_hex_rgb_round_trip():
    for c in SAMPLES + ["#ABCDEF"]:
        assert rgb_to_hex(*hex_to_rgb(c)) == c.lower()


def test_hsl_primaries():
    assert rgb_to_hsl(255, 0, 0) == (0.0, 1.0, 0.5)
    assert hsl_to_rgb(0.0, 1.0, 0.5) == (255, 0, 0)
    assert hsl_to_rgb(2 / 3, 1.0, 0.5) == (0, 0, 255)


def test_hsl_achromatic():
    h, s, l = rgb_to_hsl(128, 128, 128)
    assert h == 0 and s == 0
    assert l == pytest.approx(128 / 255)
    assert hsl_to_rgb(0.3, 0.0, 0.5) == (128, 128, 128)


def test_hsl_round_trip():
    for c in SAMPLES:
        rgb = hex_to_rgb(c)
        back = hsl_to_rgb(*rgb_to_hsl(*rgb))
        assert np.all(np.abs(np.subtract(back, rgb)) <= 1)


def test_oklch_round_trip_within_one():
    for c in SAMPLES:
        back = hex_to_rgb(oklch_to_hex(*hex_to_oklch(c)))
        assert np.all(np.abs(np.subtract(back, hex_to_rgb(c))) <= 1), c


def test_oklch_extremes():
    L, C, _ = hex_to_oklch("#000000")
    assert L == pytest.approx(0.0, abs=1e-9)
    assert C == pytest.approx(0.0, abs=1e-9)
    L, C, _ = hex_to_oklch("#ffffff")
    assert L == pytest.approx(1.0, abs=1e-3)
    assert C < 1e-3


def test_oklch_matches_coloraide():
    for c in ["#3b82f6", "#f59e0b", "#ec4899", "#10b981"]:
        ref_l, ref_c, ref_h = Color(c).convert("oklch").coords()
        L, C, h = hex_to_oklch(c)
        assert L == pytest.approx(ref_l, abs=1e-3)
        assert C == pytest.approx(ref_c, abs=1e-3)
        assert h == pytest.approx(ref_h, abs=0.5)
        assert 0 <= h < 360


def test_oklch_to_hex_clamps_out_of_gamut():
    out = oklch_to_hex(0.7, 0.4, 150.0)
    assert is_valid_hex(out)
    assert out == out.lower() and len(out) == 7


def test_canon_hex():
    assert canon_hex("ABC") == "#aabbcc"
    assert canon_hex(" #3B82F6 ") == "#3b82f6"
    for bad in ["", "#abcd", "#ggg", "12345", "#3b82f6ff"]:
        with pytest.raises(InvalidColorError):
            canon_hex(bad)
        assert not is_valid_hex(bad)
