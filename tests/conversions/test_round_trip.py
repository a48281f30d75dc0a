from spectrum.conversions.to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from spectrum.conversions.to_rgb import hsl_to_unit_rgb, np_hsl_to_unit_rgb
import numpy as np
from ..samples import chromatic_rgb


rgb_tolerance = 1e-6


def test_round_trip_rgb_hsl():
    for r, g, b in chromatic_rgb:
        h, s, l = unit_rgb_to_hsl(r, g, b)
        r_out, g_out, b_out = hsl_to_unit_rgb(h, s, l)

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance


def test_round_trip_rgb_hsl_random():
    rng = np.random.default_rng(2024)
    for r, g, b in rng.random((500, 3)):
        r_out, g_out, b_out = hsl_to_unit_rgb(*unit_rgb_to_hsl(r, g, b))

        assert abs(r - r_out) < rgb_tolerance
        assert abs(g - g_out) < rgb_tolerance
        assert abs(b - b_out) < rgb_tolerance


def test_round_trip_rgb_hsl_numpy():
    rgb = np.array(chromatic_rgb)
    hsl = np_unit_rgb_to_hsl(rgb[..., 0], rgb[..., 1], rgb[..., 2])
    rgb_out = np_hsl_to_unit_rgb(hsl[..., 0], hsl[..., 1], hsl[..., 2])

    assert np.allclose(rgb, rgb_out, atol=rgb_tolerance)
