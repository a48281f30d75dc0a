from spectrum.colors.color import Color
from spectrum.colors.color_stop import ColorStop, is_size
from spectrum.exceptions import InvalidArgumentError, UnexpectedValueError
from spectrum.types.mode import Mode
import pytest


def test_is_size():
    for token in ("50%", "12px", "1.5em", "0vmin", "9999rem"):
        assert is_size(token), token
    for token in ("red", "12", "px", "12 px", "12345px", "12pxx", "-4px", ".5em"):
        assert not is_size(token), token


def test_create_splits_trailing_size():
    stop = ColorStop.create("red 50%")
    assert stop.size == "50%"
    assert stop.color == Color.from_name("red")


def test_create_without_size():
    stop = ColorStop.create("red")
    assert stop.size is None
    assert str(stop) == "#ff0000"


def test_create_functional_color_with_size():
    stop = ColorStop.create("rgba(0, 0, 255, 0.5) 10em")
    assert stop.size == "10em"
    assert stop.color.alpha == 0.5
    assert str(stop) == "rgba(0, 0, 255, 0.5) 10em"


def test_explicit_size_wins():
    stop = ColorStop.create("blue", 12)
    assert stop.size == "12px"

    stop = ColorStop.create(Color(0, 0, 1), "3rem")
    assert str(stop) == "#0000ff 3rem"


def test_explicit_size_overrides_size_in_text():
    stop = ColorStop.create("red 50%", "10px")
    assert stop.color == Color.from_name("red")
    assert stop.size == "10px"

    stop = ColorStop.create("rgb(0, 0, 255) 5em", 3)
    assert str(stop) == "#0000ff 3px"

    stop = ColorStop.create("red", "1in")
    assert str(stop) == "#ff0000 1in"


def test_create_from_stop_copies():
    original = ColorStop("red", "50%")
    clone = ColorStop.create(original)
    assert clone == original
    assert clone is not original
    assert clone.color is not original.color

    resized = ColorStop.create(original, "75%")
    assert resized.size == "75%"
    assert original.size == "50%"


def test_color_is_owned():
    color = Color.from_name("red")
    stop = ColorStop(color)
    color.darken(0.5)
    assert stop.color == Color.from_name("red")

    clone = stop.copy()
    clone.color.lighten(0.25)
    assert stop.color == Color.from_name("red")


def test_set_color_and_size():
    stop = ColorStop("red")
    assert stop.set_color("#00ff00").set_size("1.5pt") is stop
    assert stop.get_color() == Color(0, 1, 0)
    assert stop.get_size() == "1.5pt"

    stop.color = "navy"
    stop.size = 40
    assert str(stop) == "#000080 40px"

    stop.size = None
    assert str(stop) == "#000080"


def test_size_validation():
    stop = ColorStop("red")
    for size in ("big", "12", "50 %"):
        with pytest.raises(InvalidArgumentError) as info:
            stop.set_size(size)
        assert info.value.data == size

    for size in (True, 1.5, ["10px"]):
        with pytest.raises(UnexpectedValueError):
            stop.set_size(size)

    assert stop.size is None


def test_unprintable_color_renders_empty():
    stop = ColorStop(Color(0, 1, 1, None, Mode.HSV), "10%")
    assert str(stop) == ""
    assert stop.debug_export() == {'definition': ""}


def test_debug_export():
    stop = ColorStop(Color(1, 0, 0, 0.5), "25%")
    assert stop.debug_export() == {'definition': "rgba(255, 0, 0, 0.5) 25%"}
    assert "size='25%'" in repr(stop)
