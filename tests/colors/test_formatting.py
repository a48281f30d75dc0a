from spectrum.colors.color import Color
from spectrum.types.mode import Mode
import logging


def test_hex_string():
    assert Color(1, 0, 0).to_hex_string() == "#ff0000"
    assert Color(0, 0, 0).to_hex_string() == "#000000"
    assert Color(0.2, 0.4, 0.6).to_hex_string() == "#336699"


def test_hex_string_truncates():
    # 0.5 * 255 = 127.5 is truncated, not rounded
    assert Color(0.5, 0.5, 0.5).to_hex_string() == "#7f7f7f"
    assert Color(0.999, 0, 0).to_hex_string() == "#fe0000"


def test_short_hex():
    color = Color.from_hex("#aabbcc")
    assert color.to_hex_string(True) == "#abc"
    assert color.to_hex_string() == "#aabbcc"
    assert Color.from_hex("#aabbcd").to_hex_string(True) == "#aabbcd"


def test_hex_string_forces_rgb():
    color = Color(0, 1, 0.5, None, Mode.HSL)
    assert color.to_hex_string() == "#ff0000"
    assert color.mode == Mode.RGB


def test_css_string():
    assert Color.from_name("red").to_css_string() == "#ff0000"
    assert Color(1, 0, 0, 0.5).to_css_string() == "rgba(255, 0, 0, 0.5)"
    assert Color(0.5, 0.5, 0.5, 0.25).to_css_string() == "rgba(128, 128, 128, 0.25)"
    assert Color.from_name("transparent").to_css_string() == "rgba(0, 0, 0, 0)"


def test_css_string_alpha_precision():
    assert Color(0, 0, 0, 0.1 + 0.2).to_css_string() == "rgba(0, 0, 0, 0.3)"
    assert Color(0, 0, 0, 1 / 3).to_css_string() == "rgba(0, 0, 0, 0.33333333333333)"
    assert Color.from_hex("#00000080").to_css_string() == "rgba(0, 0, 0, 0.50196078431373)"


def test_str():
    assert str(Color.from_string("rgba(0, 0, 255, 0.75)")) == "rgba(0, 0, 255, 0.75)"
    assert str(Color.from_hex("#123456")) == "#123456"


def test_str_never_raises(caplog):
    color = Color(0, 1, 1, None, Mode.HSV)
    with caplog.at_level(logging.DEBUG, logger="spectrum.colors.color"):
        assert str(color) == ""
    assert "Could not convert" in caplog.text
    assert f"{color}" == ""
