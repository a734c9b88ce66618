"""Shared line styling and the render passes a line is drawn with."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .colours import Colour, DrawMode

SELECTED_WIDTH_FACTOR = 10
SELECTED_ALPHA = 0.3
LEGEND_LINE = ((-1.0, 0.0), (1.0, 0.0))
HOVER_CURSOR = 0


class ShaderKind(Enum):
    """Shader programs a 2D line can be drawn with."""

    PLOT_2D = "plot2d"
    PLOT_2D_LOGX = "plot2d_logx"
    PLOT_2D_LOGY = "plot2d_logy"
    PLOT_2D_LOGX_LOGY = "plot2d_logx_logy"


def select_shader(log_x: bool, log_y: bool) -> ShaderKind:
    """Pick the shader matching the axis scaling."""
    if log_x:
        return ShaderKind.PLOT_2D_LOGX_LOGY if log_y else ShaderKind.PLOT_2D_LOGX
    return ShaderKind.PLOT_2D_LOGY if log_y else ShaderKind.PLOT_2D


@dataclass(frozen=True)
class DrawPass:
    """One draw of a line: shader, width, RGBA colour and primitive mode."""

    shader: ShaderKind
    line_width: int
    colour: tuple[float, float, float, float]
    mode: DrawMode
    log_x_base: float
    log_y_base: float


def _to_rgb(colour) -> tuple[float, float, float]:
    if isinstance(colour, Colour):
        return colour.rgb
    components = tuple(float(c) for c in colour)
    if len(components) != 3:
        raise ValueError(f"a line colour needs 3 components, got {len(components)}")
    return components


@dataclass
class LineStyle:
    """Appearance of a 2D line and the passes needed to render it."""

    colour: tuple[float, float, float] = Colour.WHITE.rgb
    mode: DrawMode = DrawMode.LINE_STRIP
    line_width: int = 1
    opacity_ratio: float = 1.0
    log_x: bool = False
    log_y: bool = False
    log_x_base: float = 10.0
    log_y_base: float = 10.0

    def __post_init__(self) -> None:
        self.colour = _to_rgb(self.colour)
        self.mode = DrawMode(self.mode)
        if int(self.line_width) != self.line_width or self.line_width < 0:
            raise ValueError(f"line width must be a non-negative integer, got {self.line_width!r}")
        self.line_width = int(self.line_width)

    @property
    def hover_cursor(self) -> int:
        """Cursor shown while the line is hovered."""
        return HOVER_CURSOR

    def _pass(self, shader: ShaderKind, highlighted: bool) -> DrawPass:
        if highlighted:
            width = SELECTED_WIDTH_FACTOR * self.line_width
            alpha = SELECTED_ALPHA
        else:
            width = self.line_width
            alpha = 1.0
        return DrawPass(
            shader=shader,
            line_width=width,
            colour=(*self.colour, alpha),
            mode=self.mode,
            log_x_base=float(self.log_x_base),
            log_y_base=float(self.log_y_base),
        )

    def _passes(self, shader: ShaderKind, selected: bool) -> list[DrawPass]:
        passes = [self._pass(shader, True)] if selected else []
        passes.append(self._pass(shader, False))
        return passes

    def draw_passes(self, selected: bool) -> list[DrawPass]:
        """Passes for drawing the data; a selected line gets a wide translucent halo first."""
        return self._passes(select_shader(self.log_x, self.log_y), selected)

    def legend_passes(self, selected: bool) -> list[DrawPass]:
        """Passes for the legend sample, always drawn with the linear shader."""
        return self._passes(ShaderKind.PLOT_2D, selected)