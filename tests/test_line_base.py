import pytest

from glplotlive.colours import Colour, DrawMode
from glplotlive.line_base import (
    LEGEND_LINE,
    SELECTED_ALPHA,
    SELECTED_WIDTH_FACTOR,
    DrawPass,
    LineStyle,
    ShaderKind,
    select_shader,
)


@pytest.mark.parametrize(
    "log_x, log_y, expected",
    [
        (False, False, ShaderKind.PLOT_2D),
        (True, False, ShaderKind.PLOT_2D_LOGX),
        (False, True, ShaderKind.PLOT_2D_LOGY),
        (True, True, ShaderKind.PLOT_2D_LOGX_LOGY),
    ],
)
def test_select_shader(log_x, log_y, expected):
    assert select_shader(log_x, log_y) is expected


def test_defaults():
    style = LineStyle()
    assert style.colour == Colour.WHITE.rgb
    assert style.mode is DrawMode.LINE_STRIP
    assert style.line_width == 1
    assert style.hover_cursor == 0


def test_colour_from_enum_and_sequence():
    assert LineStyle(colour=Colour.RED).colour == Colour.RED.rgb
    assert LineStyle(colour=[0, 1, 0]).colour == Colour.GREEN.rgb


def test_bad_colour_rejected():
    with pytest.raises(ValueError):
        LineStyle(colour=(1.0, 0.0))


def test_negative_width_rejected():
    with pytest.raises(ValueError):
        LineStyle(line_width=-1)


def test_mode_coerced_from_int():
    assert LineStyle(mode=0).mode is DrawMode.POINTS


def test_unselected_draw_is_single_opaque_pass():
    style = LineStyle(colour=Colour.BLUE, line_width=2)
    passes = style.draw_passes(False)
    assert passes == [
        DrawPass(ShaderKind.PLOT_2D, 2, (*Colour.BLUE.rgb, 1.0), DrawMode.LINE_STRIP, 10.0, 10.0)
    ]


def test_selected_draw_adds_halo_first():
    style = LineStyle(colour=Colour.CYAN, line_width=3, log_x=True)
    halo, normal = style.draw_passes(True)
    assert halo.line_width == SELECTED_WIDTH_FACTOR * style.line_width
    assert halo.colour == (*Colour.CYAN.rgb, SELECTED_ALPHA)
    assert normal.line_width == style.line_width
    assert normal.colour[3] == 1.0
    assert halo.shader is normal.shader is ShaderKind.PLOT_2D_LOGX


def test_legend_uses_linear_shader_even_on_log_axes():
    style = LineStyle(log_x=True, log_y=True, log_x_base=2.0)
    passes = style.legend_passes(True)
    assert len(passes) == 2
    assert all(p.shader is ShaderKind.PLOT_2D for p in passes)
    assert all(p.log_x_base == 2.0 for p in passes)
    assert style.draw_passes(False)[0].shader is ShaderKind.PLOT_2D_LOGX_LOGY


def test_selected_constants_and_legend_line():
    style = LineStyle(colour=Colour.RED, line_width=2)
    halo = style.draw_passes(True)[0]
    assert halo.line_width == SELECTED_WIDTH_FACTOR * 2 == 20
    assert halo.colour[3] == SELECTED_ALPHA == 0.3
    assert LEGEND_LINE == ((-1.0, 0.0), (1.0, 0.0))


def test_passes_follow_style_changes():
    style = LineStyle()
    style.mode = DrawMode.POINTS
    assert style.draw_passes(False)[0].mode is DrawMode.POINTS