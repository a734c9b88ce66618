import pytest

from glplotlive.colours import Colour, DrawMode, GLType, LineType, gl_type_for

COLOUR_NAMES = [
    "WHITE",
    "BLACK",
    "RED",
    "GREEN",
    "BLUE",
    "YELLOW",
    "CYAN",
    "MAGENTA",
    "SILVER",
    "GRAY",
    "MAROON",
    "OLIVE",
    "DARKGREEN",
    "PURPLE",
    "TEAL",
    "NAVY",
]


def test_named_colour_values_match_definitions():
    assert Colour.WHITE.rgba() == (1.0, 1.0, 1.0, 1.0)
    assert Colour.SILVER.rgba(0.5) == (0.7529, 0.7529, 0.7529, 0.5)
    assert Colour.NAVY.rgba(1.0) == (0.0, 0.0, 0.5020, 1.0)


def test_colours_are_all_distinct():
    values = [Colour[name].rgba() for name in COLOUR_NAMES]
    assert len(values) == len(set(values)) == 16
    assert Colour.BLACK.rgba() != Colour.WHITE.rgba()


@pytest.mark.parametrize("name", COLOUR_NAMES)
def test_components_in_unit_range(name):
    rgba = Colour[name].rgba()
    assert len(rgba) == 4
    assert all(0.0 <= component <= 1.0 for component in rgba)


def test_rgba_appends_alpha():
    assert Colour.TEAL.rgba(0.25) == (*Colour.TEAL.rgb, 0.25)
    assert Colour.RED.rgba()[3] == 1.0


def test_line_types():
    assert [LineType(t.value) for t in LineType] == list(LineType)
    assert {t.name for t in LineType} == {"SINGLE_LINE", "SHADED_LINE"}


def test_draw_mode_gl_values():
    assert DrawMode.POINTS == 0
    assert DrawMode.LINE_STRIP == 3
    assert DrawMode(2) is DrawMode.LINE_LOOP


@pytest.mark.parametrize(
    "value_type, expected",
    [
        ("int", GLType.INT),
        ("float", GLType.FLOAT),
        ("double", GLType.DOUBLE),
        ("DOUBLE", GLType.DOUBLE),
        (int, GLType.INT),
        (float, GLType.FLOAT),
    ],
)
def test_gl_type_for(value_type, expected):
    assert gl_type_for(value_type) is expected


def test_gl_type_codes():
    assert gl_type_for("int") == 0x1404
    assert gl_type_for("float") == 0x1406
    assert gl_type_for("double") == 0x140A


def test_gl_type_for_unknown_name():
    with pytest.raises(ValueError):
        gl_type_for("complex")


def test_gl_type_for_unknown_type():
    with pytest.raises(TypeError):
        gl_type_for(bytes)
    with pytest.raises(TypeError):
        gl_type_for(bool)