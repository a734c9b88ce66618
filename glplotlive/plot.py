"""A plot: a grid of axes laid out within the plot's area."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

BOUNDING_BOX_COLOUR = (1.0, 0.0, 0.0, 1.0)


class AxesType(Enum):
    """Kinds of axes a plot can hold."""

    AXES_2D = "axes_2d"
    AXES_3D = "axes_3d"


@dataclass
class AxesSlot:
    """Placement of one set of axes, in fractions of the plot area."""

    axes_type: AxesType
    x: float
    y: float
    width: float
    height: float


class Plot:
    """Holds sets of axes and arranges them in a grid of rows and columns."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        num_horizontal: int = 1,
        num_vertical: int = 1,
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.bounding_box_colour = BOUNDING_BOX_COLOUR
        self.num_horizontal = 1
        self.num_vertical = 1
        self.axes: dict[int, AxesSlot] = {}
        self._axes_count = 0
        self.add_axes(AxesType.AXES_2D)
        self.set_layout(num_horizontal, num_vertical)

    @property
    def axes_count(self) -> int:
        """Number of axes ever added; ids run from 0 to this minus one."""
        return self._axes_count

    def set_layout(self, num_horizontal: int, num_vertical: int) -> None:
        """Set the grid size and re-arrange the axes."""
        if num_horizontal < 1 or num_vertical < 1:
            raise ValueError(
                f"layout needs at least one row and column, got {num_horizontal}x{num_vertical}"
            )
        self.num_horizontal = num_horizontal
        self.num_vertical = num_vertical
        self.update_layout()

    def update_layout(self) -> None:
        """Place each axes in its grid cell, filling rows left to right from the top."""
        cell_width = 1.0 / self.num_horizontal
        cell_height = 1.0 / self.num_vertical
        for axes_id in range(self._axes_count):
            slot = self.axes.get(axes_id)
            if slot is None:
                continue
            row, col = divmod(axes_id, self.num_horizontal)
            slot.x = col * cell_width
            slot.y = 1.0 - (row + 1) * cell_height
            slot.width = cell_width
            slot.height = cell_height

    def add_axes(self, axes_type: AxesType) -> AxesSlot:
        """Add axes of the given type and re-arrange the grid."""
        slot = self.add_axes_at(0.0, 0.0, 1.0, 1.0, axes_type)
        self.update_layout()
        return slot

    def add_axes_at(
        self, x: float, y: float, width: float, height: float, axes_type: AxesType
    ) -> AxesSlot:
        """Add axes at an explicit position without re-arranging the grid."""
        slot = AxesSlot(AxesType(axes_type), x, y, width, height)
        self.axes[self._axes_count] = slot
        self._axes_count += 1
        return slot

    def get_axes(self, axes_id: int) -> AxesSlot:
        """Axes with the given id; KeyError if there is none."""
        try:
            return self.axes[axes_id]
        except KeyError:
            raise KeyError(f"axes {axes_id} does not exist") from None

    def remove_axes(self, axes_id: int) -> None:
        """Remove the axes with the given id; KeyError if there is none."""
        if axes_id not in self.axes:
            raise KeyError(f"cannot remove axes {axes_id}, axes does not exist")
        del self.axes[axes_id]

    def ident(self) -> str:
        """Identifier built from the plot's position."""
        return f"Plot:{self.x:f}:{self.y:f}"