import pytest

from glplotlive.interaction import (
    LOGO_INDICES,
    TOOLTIP_HOVER_TIME_S,
    AttachLocation,
    Clickable,
    ImageButton,
    PressButton,
    Tooltip,
)


class FakeClock:
    def __init__(self, now=1.0):
        self.now = now

    def __call__(self):
        return self.now


def make_button(text="Help", clock=None):
    return PressButton("Zoom", 0.25, 0.5, 0.1, 0.1, text, clock=clock or FakeClock())


def test_clickable_is_abstract():
    with pytest.raises(TypeError):
        Clickable()


def test_click_toggles_active():
    button = make_button()
    assert button.active is False
    button.on_left_click()
    assert button.active is True
    button.on_left_click()
    assert button.active is False


def test_ident_format():
    assert make_button().ident() == "PressButton:Zoom:0.250000:0.500000"


def test_shading_colours_follow_state():
    button = make_button()
    assert button.shading_colour() == button.colours.inactive_shading
    button.selected = True
    assert button.shading_colour() == button.colours.inactive_shading_hover
    button.toggle_active()
    assert button.shading_colour() == button.colours.active_shading_hover
    button.selected = False
    assert button.shading_colour() == (0.3, 0.3, 0.3, 1.0)


def test_outline_colours_follow_hover():
    button = make_button()
    assert button.outline_colour() == (1.0, 1.0, 1.0, 1.0)
    button.set_hovered(True)
    assert button.outline_colour() == (0.0, 1.0, 1.0, 1.0)
    button.toggle_active()
    assert button.outline_colour() == button.colours.active_outline_hover


def test_set_hovered_records_time():
    clock = FakeClock(3.0)
    button = make_button(clock=clock)
    button.set_hovered(True)
    assert button.hover_begin_time == 3.0
    button.set_hovered(False)
    assert button.hover_begin_time == -1.0
    assert button.hovered is False


def test_tooltip_shows_after_delay():
    clock = FakeClock(1.0)
    button = make_button(clock=clock)
    button.set_hovered(True)
    assert not button.tooltip_visible()
    clock.now = 1.0 + TOOLTIP_HOVER_TIME_S / 2
    assert not button.tooltip_visible()
    clock.now = 1.0 + TOOLTIP_HOVER_TIME_S * 2
    assert button.tooltip_visible()
    button.set_hovered(False)
    assert not button.tooltip_visible()


def test_tooltip_hidden_without_text():
    clock = FakeClock(1.0)
    button = make_button(text="", clock=clock)
    button.set_hovered(True)
    clock.now = 100.0
    assert not button.tooltip_visible()


def test_button_tooltip_setup():
    tip = make_button("Reset view").tooltip
    assert tip.text == "Reset view"
    assert tip.font_size == 8.0
    assert tip.attach_location is AttachLocation.CENTRE_TOP
    assert tip.text_colour == (0.0, 0.0, 0.0)
    assert not tip.hoverable and not tip.can_mouse_over


def test_tooltip_defaults():
    tip = Tooltip("x")
    assert tip.background_colour == (0.8, 0.8, 0.8, 1.0)
    assert tip.font_size == 10.0


def test_image_button():
    button = ImageButton("Grid", 0.0, 0.0, 0.1, 0.1, "grid_icon", clock=FakeClock())
    assert button.texture_name == "grid_icon"
    assert button.ident() == "PressButton:Grid:0.000000:0.000000"
    assert len(button.logo_vertices) == 4
    assert button.logo_indices == LOGO_INDICES
    assert all(0 <= i < len(button.logo_vertices) for i in button.logo_indices)
    button.on_left_click()
    assert button.active is True