"""Clickable widgets: press buttons, image buttons and their tooltips.

The widgets hold only state: whether they are active, hovered or
selected, and which colours and tooltip follow from that. Time for the
tooltip delay comes from an injectable clock.
"""

from __future__ import annotations

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from .colours import Colour

RGBA = tuple[float, float, float, float]

TOOLTIP_HOVER_TIME_S = 0.5
"""Seconds a button must be hovered before its tooltip shows."""

BOUNDING_BOX_COLOUR: RGBA = (1.0, 1.0, 1.0, 1.0)
SHADING_INDICES = (0, 1, 3, 2, 3, 1)

LOGO_VERTICES = (
    # x, y, u, v
    (-1.0, -1.0, 0.0, 0.0),  # bottom left
    (1.0, -1.0, 1.0, 0.0),  # bottom right
    (1.0, 1.0, 1.0, 1.0),  # top right
    (-1.0, 1.0, 0.0, 1.0),  # top left
)
LOGO_INDICES = (0, 1, 3, 1, 2, 3)


class AttachLocation(Enum):
    """Point of a widget that its position refers to."""

    BOTTOM_LEFT = "bottom_left"
    CENTRE_TOP = "centre_top"


@dataclass(frozen=True)
class ButtonColours:
    """Outline and shading colours of a button in each state."""

    inactive_outline: RGBA = (1.0, 1.0, 1.0, 1.0)
    inactive_outline_hover: RGBA = (0.0, 1.0, 1.0, 1.0)
    inactive_shading: RGBA = (0.6, 0.6, 0.6, 1.0)
    inactive_shading_hover: RGBA = (0.8, 0.8, 0.8, 1.0)
    active_outline: RGBA = (1.0, 1.0, 1.0, 1.0)
    active_outline_hover: RGBA = (0.0, 1.0, 1.0, 1.0)
    active_shading: RGBA = (0.3, 0.3, 0.3, 1.0)
    active_shading_hover: RGBA = (0.4, 0.4, 0.4, 1.0)


class Clickable(ABC):
    """Something that reacts to a left click and has an on/off state."""

    def __init__(self) -> None:
        self.active = False

    @abstractmethod
    def on_left_click(self) -> None:
        """React to a left click."""

    def toggle_active(self) -> None:
        """Flip the active state."""
        self.active = not self.active


@dataclass
class Tooltip:
    """Text shown over a button; it is neither hoverable nor mouse-overable."""

    text: str
    x: float = 0.5
    y: float = -0.2
    font_size: float = 10.0
    attach_location: AttachLocation = AttachLocation.BOTTOM_LEFT
    text_colour: tuple[float, float, float] = Colour.WHITE.rgb
    background_colour: RGBA = (0.8, 0.8, 0.8, 1.0)
    indices: tuple[int, ...] = field(default=SHADING_INDICES)
    can_mouse_over: bool = False
    hoverable: bool = False


class PressButton(Clickable):
    """Rectangular button toggled by clicks, with a delayed tooltip."""

    def __init__(
        self,
        name: str,
        x: float,
        y: float,
        width: float,
        height: float,
        tooltip_text: str = "",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__()
        self.name = name
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.hovered = False
        self.selected = False
        self.colours = ButtonColours()
        self.bounding_box_colour = BOUNDING_BOX_COLOUR
        self.hover_begin_time = -1.0
        self._clock = clock
        self.tooltip = Tooltip(
            tooltip_text,
            x=0.5,
            y=-0.2,
            font_size=8.0,
            attach_location=AttachLocation.CENTRE_TOP,
            text_colour=Colour.BLACK.rgb,
        )

    def on_left_click(self) -> None:
        self.toggle_active()

    def ident(self) -> str:
        """Identifier built from the name and position."""
        return f"PressButton:{self.name}:{self.x:f}:{self.y:f}"

    def set_hovered(self, hovered: bool) -> None:
        """Mark hover state, starting or ending the tooltip timer."""
        self.hovered = hovered
        self.hover_begin_time = float(self._clock()) if hovered else -1.0

    def shading_colour(self) -> RGBA:
        """Fill colour for the current selected and active state."""
        c = self.colours
        if self.active:
            return c.active_shading_hover if self.selected else c.active_shading
        return c.inactive_shading_hover if self.selected else c.inactive_shading

    def outline_colour(self) -> RGBA:
        """Outline colour for the current hovered and active state."""
        c = self.colours
        if self.active:
            return c.active_outline_hover if self.hovered else c.active_outline
        return c.inactive_outline_hover if self.hovered else c.inactive_outline

    def tooltip_visible(self) -> bool:
        """Whether the tooltip has text and the hover has lasted long enough."""
        if not self.tooltip.text:
            return False
        now = float(self._clock())
        return self.hover_begin_time > 0 and now - self.hover_begin_time > TOOLTIP_HOVER_TIME_S


class ImageButton(PressButton):
    """Press button with a textured logo drawn over it."""

    def __init__(
        self,
        name: str,
        x: float,
        y: float,
        width: float,
        height: float,
        texture_name: str,
        tooltip_text: str = "",
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        super().__init__(name, x, y, width, height, tooltip_text, clock)
        self.texture_name = texture_name
        self.logo_vertices = LOGO_VERTICES
        self.logo_indices = LOGO_INDICES