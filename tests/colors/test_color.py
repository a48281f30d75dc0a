from spectrum.colors.color import Color
from spectrum.colors.channels import RGBChannels, HSLChannels
from spectrum.exceptions import ComponentUnavailableError, InvalidArgumentError
from spectrum.types.mode import Mode
import copy
import numpy as np
import pytest


def test_defaults_to_opaque_rgb_black():
    color = Color()
    assert color.mode == Mode.RGB
    assert color.channels == RGBChannels((0, 0, 0))
    assert color.alpha == 1.0


def test_construct_in_each_mode():
    assert Color(0.1, 0.2, 0.3).mode == Mode.RGB
    assert Color(120, 0.5, 0.5, 0.4, "hsl").mode == Mode.HSL
    assert Color(120, 0.5, 0.5, None, Mode.HSV).mode == Mode.HSV
    assert Color(120, 0.5, 0.5, 0.4, "hsl").alpha == 0.4


def test_construct_rejects_unknown_mode():
    with pytest.raises(InvalidArgumentError) as info:
        Color(0, 0, 0, 1, "cmyk")
    assert info.value.data == "cmyk"


def test_channel_setters_clamp():
    color = Color(0.5, 0.5, 0.5)
    assert color.set_red(1.5).get_red() == 1.0
    assert color.set_red(-0.2).get_red() == 0.0
    assert color.set_green(2).green == 1.0
    assert color.set_blue(-1).blue == 0.0
    assert color.set_alpha(3).alpha == 1.0
    assert color.set_alpha(-3).alpha == 0.0


def test_set_alpha_none_means_opaque():
    color = Color(0, 0, 0, 0.2)
    assert color.set_alpha(None).get_alpha() == 1.0


def test_combined_setters_without_alpha_reset_alpha():
    color = Color(0, 0, 0, 0.3)
    assert color.set_rgb(0.1, 0.2, 0.3).alpha == 1.0

    color.set_alpha(0.3)
    assert color.set_hsl(10, 0.2, 0.3).alpha == 1.0
    assert color.mode == Mode.HSL

    color.set_alpha(0.3)
    assert color.set_hsv(10, 0.2, 0.3).alpha == 1.0
    assert color.mode == Mode.HSV

    assert color.set_rgba(0.1, 0.2, 0.3, 0.6).alpha == 0.6
    assert color.set_hsla(10, 0.2, 0.3).alpha == 1.0
    assert color.set_hsva(10, 0.2, 0.3, 0.25).alpha == 0.25


def test_reading_hue_switches_rgb_to_hsl():
    color = Color(1.0, 0.0, 0.0)
    assert color.mode == Mode.RGB

    assert color.hue == 0.0
    assert color.mode == Mode.HSL
    assert color.channels == HSLChannels((0.0, 1.0, 0.5))


def test_property_aliases():
    color = Color(0.2, 0.4, 0.6)
    assert color.hue == color.hsl_hue == color.get("hslHue") == color.get("hue")
    assert color.saturation == color.hsl_saturation == color.get("hslSaturation")
    assert abs(color.lightness - 0.4) < 1e-9
    assert abs(color.get("lightness") - 0.4) < 1e-9

    assert abs(color.hsv_hue - 210) < 1e-6
    assert abs(color.hsv_saturation - 2 / 3) < 1e-9
    assert abs(color.value - 0.6) < 1e-9
    assert color.value == color.hsv_value == color.get("hsvValue")
    assert color.mode == Mode.HSV


def test_property_setters():
    color = Color(0, 0, 0)
    color.hue = 400
    assert color.mode == Mode.HSL
    assert color.hue == 40
    color.lightness = 0.5
    color.saturation = 1.0
    color.set("value", 0.5)
    assert abs(color.get("value") - 0.5) < 1e-9


def test_unknown_property_name():
    color = Color()
    with pytest.raises(InvalidArgumentError) as info:
        color.get("brightness")
    assert info.value.data == "brightness"

    with pytest.raises(InvalidArgumentError):
        color.set("opacity", 1)


def test_set_mode_is_noop_for_current_mode():
    color = Color(0.1, 0.2, 0.3)
    channels = color.channels
    assert color.set_mode("rgb") is color
    assert color.channels is channels


def test_hsl_hue_wraps_but_saturation_clamps():
    color = Color(0, 0, 0, None, Mode.HSL)
    assert color.set_hsl_hue(-30).get_hsl_hue() == 330
    assert color.set_hsl_saturation(1.7).get_hsl_saturation() == 1.0
    assert color.set_hsl_lightness(-1).get_hsl_lightness() == 0.0


def test_hsv_setters_write_their_own_channel():
    color = Color(10, 0.2, 0.3, None, Mode.HSV)
    color.set_hsv_value(0.9)
    assert color.channels.value == (10.0, 0.2, 0.9)
    color.set_hsv_saturation(0.4)
    assert color.channels.value == (10.0, 0.4, 0.9)
    color.set_hsv_hue(370)
    assert color.channels.value == (10.0, 0.4, 0.9)


def test_hsv_to_rgb_is_unsupported():
    color = Color(120, 1.0, 1.0, None, Mode.HSV)
    with pytest.raises(ComponentUnavailableError):
        color.to_rgb()
    with pytest.raises(ComponentUnavailableError):
        color.red
    with pytest.raises(ComponentUnavailableError):
        color.get_hsl_lightness()
    assert color.mode == Mode.HSV


def test_rgb_to_hsl_to_rgb_round_trip():
    for rgb in [(0.9, 0.1, 0.3), (0.2, 0.4, 0.6), (0.123, 0.456, 0.789)]:
        color = Color(*rgb)
        color.to_hsl()
        assert color.mode == Mode.HSL
        color.to_rgb()
        assert np.allclose(color.channels.value, rgb, atol=1e-6)


def test_random_is_hsl_within_steps():
    rng = np.random.default_rng(42)
    for _ in range(50):
        color = Color.random(rng=rng)
        assert color.mode == Mode.HSL
        h, s, l = color.channels.value
        assert h == int(h) and 0 <= h <= 359
        assert round(s * 10) in range(1, 10)
        assert round(l * 10) in range(3, 9)
        assert color.alpha == 1.0


def test_random_respects_fixed_values_and_seed():
    color = Color.random(0.5, 0.25, rng=1)
    assert color.hsl_saturation == 0.5
    assert color.hsl_lightness == 0.25
    assert Color.random(rng=99) == Color.random(rng=99)


def test_create_variants():
    original = Color(0.1, 0.2, 0.3, 0.4)
    clone = Color.create(original)
    assert clone == original and clone is not original
    clone.set_red(1)
    assert original.red == 0.1

    assert Color.create("red") == Color.from_name("red")
    assert Color.create([0.5]).channels.value == (0.5, 0.0, 0.0)
    assert Color.create((0.1, 0.2, 0.3, 0.4)).alpha == 0.4
    assert Color.create([0.1, 0.2, 0.3, 0.4, 0.9]).alpha == 0.4
    assert Color.create(np.array([0.0, 1.0, 0.0])).channels.value == (0.0, 1.0, 0.0)
    assert Color.create(None) == Color(0, 0, 0)
    assert Color.create(0.7) == Color(0, 0, 0)
    assert Color.create([]).alpha == 1.0
    assert Color.create(b"ab") == Color(0, 0, 0)
    assert Color.create(bytearray(b"\xff\xff")) == Color(0, 0, 0)


def test_copy():
    color = Color(10, 0.5, 0.5, 0.5, Mode.HSL)
    for duplicate in (color.copy(), copy.copy(color)):
        assert duplicate == color
        duplicate.set_alpha(1)
        assert color.alpha == 0.5


def test_equality():
    assert Color(0.1, 0.2, 0.3) == Color(0.1, 0.2, 0.3 + 1e-12)
    assert Color(0.1, 0.2, 0.3) != Color(0.1, 0.2, 0.3, 0.5)
    assert Color(0.1, 0.2, 0.3) != Color(0.1, 0.2, 0.3, None, Mode.HSL)
    assert Color() != "black"
    with pytest.raises(TypeError):
        hash(Color())


def test_debug_export_leaves_mode_alone():
    color = Color(0, 1.0, 0.5, 0.5, Mode.HSL)
    export = color.debug_export()
    assert export["definition"] == "rgba(255, 0, 0, 0.5)"
    assert export["properties"] == {"h": 0.0, "s": 1.0, "l": 0.5, "alpha": 0.5}
    assert color.mode == Mode.HSL

    rgb = Color(1, 0, 0).debug_export()
    assert rgb["properties"] == {"r": 1.0, "g": 0.0, "b": 0.0, "alpha": 1.0}

    hsv = Color(0, 1, 1, None, Mode.HSV).debug_export()
    assert hsv["definition"] == ""
    assert hsv["properties"] == {"h": 0.0, "s": 1.0, "v": 1.0, "alpha": 1.0}


def test_repr():
    assert repr(Color(1, 0, 0)) == "Color(rgb: r=1.0, g=0.0, b=0.0, alpha=1.0)"
