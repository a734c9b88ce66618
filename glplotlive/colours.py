"""Named line colours, line kinds, draw modes and GL data-type codes."""

from __future__ import annotations

from enum import Enum, IntEnum


class Colour(Enum):
    """Predefined RGB line colours with components in the range 0..1."""

    WHITE = (1.0, 1.0, 1.0)
    BLACK = (0.0, 0.0, 0.0)
    RED = (1.0, 0.0, 0.0)
    GREEN = (0.0, 1.0, 0.0)
    BLUE = (0.0, 0.0, 1.0)
    YELLOW = (1.0, 1.0, 0.0)
    CYAN = (0.0, 1.0, 1.0)
    MAGENTA = (1.0, 0.0, 1.0)
    SILVER = (0.7529, 0.7529, 0.7529)
    GRAY = (0.5020, 0.5020, 0.5020)
    MAROON = (0.5020, 0.0, 0.0)
    OLIVE = (0.5020, 0.5020, 0.0)
    DARKGREEN = (0.0, 0.5020, 0.0)
    PURPLE = (0.5020, 0.0, 0.5020)
    TEAL = (0.0, 0.5020, 0.5020)
    NAVY = (0.0, 0.0, 0.5020)

    @property
    def rgb(self) -> tuple[float, float, float]:
        """The colour as an (r, g, b) tuple."""
        return self.value

    def rgba(self, alpha: float = 1.0) -> tuple[float, float, float, float]:
        """The colour with an alpha component appended."""
        return (*self.value, float(alpha))


class LineType(Enum):
    """Kinds of plotted line."""

    SINGLE_LINE = "single_line"
    SHADED_LINE = "shaded_line"


class DrawMode(IntEnum):
    """Primitive modes a line may be drawn with, using the GL enum values."""

    POINTS = 0x0000
    LINES = 0x0001
    LINE_LOOP = 0x0002
    LINE_STRIP = 0x0003
    TRIANGLES = 0x0004


class GLType(IntEnum):
    """GL codes for the element types vertex data may be stored as."""

    INT = 0x1404
    FLOAT = 0x1406
    DOUBLE = 0x140A


_TYPES_BY_NAME = {
    "int": GLType.INT,
    "float": GLType.FLOAT,
    "double": GLType.DOUBLE,
}


def gl_type_for(value_type: type | str) -> GLType:
    """Return the GL type code for an element type.

    Accepts the names ``"int"``, ``"float"`` and ``"double"`` or the Python
    types ``int`` and ``float`` (the latter maps to single-precision float,
    the type vertex data is uploaded as).
    """
    if isinstance(value_type, str):
        try:
            return _TYPES_BY_NAME[value_type.strip().lower()]
        except KeyError:
            raise ValueError(f"no GL type for element type {value_type!r}") from None
    if value_type is int:
        return GLType.INT
    if value_type is float:
        return GLType.FLOAT
    raise TypeError(f"no GL type for element type {value_type!r}")