"""Lines over a pair of x and y lists: circular-buffer lines and x-sorted lines.

A circular line reads its two lists as ring buffers whose logical start is
a given index. A sorted line keeps its points ordered by x, so that the
point nearest a given x can be found by bisection. It also keeps the
index order that draws the points in their original sequence.
"""

from __future__ import annotations

from bisect import bisect_right
from typing import MutableSequence, Sequence

from .colours import DrawMode
from .line_base import DrawPass, LineStyle
from .simple_lines import FLOAT_MAX, Bounds

WINDOW_MARGIN = 0.01
"""Fraction by which a search window is widened on each side."""


def sorted_order(values: Sequence[float]) -> tuple[list[int], list[int]]:
    """Return the stable order that sorts ``values`` and its inverse.

    The first list gives, for each sorted position, the original index.
    The second gives, for each original index, its position after sorting.
    Drawing the sorted data in the second order traces the original sequence.
    """
    order = sorted(range(len(values)), key=lambda i: values[i])
    positions = [0] * len(order)
    for position, original in enumerate(order):
        positions[original] = position
    return order, positions


def _extent(
    points: Sequence[tuple[float, float]],
    only_positive_x: bool = False,
    only_positive_y: bool = False,
) -> Bounds:
    xmin, xmax, ymin, ymax = FLOAT_MAX, -FLOAT_MAX, FLOAT_MAX, -FLOAT_MAX
    for x, y in points:
        if not only_positive_x or x > 0:
            xmax = max(xmax, x)
            xmin = min(xmin, x)
        # The upper y bound follows the x filter, the lower y bound the y filter.
        if not only_positive_x or y > 0:
            ymax = max(ymax, y)
        if not only_positive_y or y > 0:
            ymin = min(ymin, y)
    return Bounds(xmin, xmax, ymin, ymax)


def _nearest(points: Sequence[tuple[float, float]], x_val: float) -> tuple[float, float]:
    """Nearest point by x in x-sorted ``points``; (0, 0) when there are none."""
    if not points:
        return (0.0, 0.0)
    xs = [x for x, _ in points]
    ind = max(bisect_right(xs, x_val) - 1, 0)
    # Only interior points look at their right neighbour.
    if 1 < ind < len(points) - 1:
        if abs(xs[ind + 1] - x_val) < abs(xs[ind] - x_val):
            ind += 1
    return points[ind]


class CircularLine:
    """Line over x and y lists read as ring buffers starting at a given index."""

    def __init__(
        self,
        data_x: Sequence[float],
        data_y: Sequence[float],
        mode: DrawMode = DrawMode.LINE_STRIP,
    ) -> None:
        self.data_x = data_x
        self.data_y = data_y
        self.style = LineStyle(mode=mode)
        self.points: list[tuple[float, float]] = []
        self.updated = False
        self.update(0)

    @property
    def point_count(self) -> int:
        """Number of points in the snapshot."""
        return len(self.points)

    def update(self, current_index: int) -> None:
        """Rebuild the snapshot: from ``current_index`` to the end, then from the start."""
        total = min(len(self.data_x), len(self.data_y))
        if not 0 <= current_index <= total:
            raise ValueError(f"current index {current_index} outside 0..{total}")
        order = [*range(current_index, total), *range(current_index)]
        self.points = [(float(self.data_x[i]), float(self.data_y[i])) for i in order]
        self.updated = True

    def min_max(self) -> Bounds:
        """Extent of the snapshot; with no data the bounds are inverted float limits."""
        return _extent(self.points)


def _rgba(colour: Sequence[float]) -> tuple[float, float, float, float]:
    components = tuple(float(c) for c in colour)
    if len(components) != 4:
        raise ValueError(f"an RGBA colour needs 4 components, got {len(components)}")
    return components


class PosNegCircularLine(CircularLine):
    """Circular line drawn in one colour above zero and another below."""

    def __init__(
        self,
        data_x: Sequence[float],
        data_y: Sequence[float],
        pos_colour: Sequence[float],
        neg_colour: Sequence[float],
        mode: DrawMode = DrawMode.LINE_STRIP,
    ) -> None:
        self.pos_colour = _rgba(pos_colour)
        self.neg_colour = _rgba(neg_colour)
        super().__init__(data_x, data_y, mode)


class SortedLine:
    """Line over x and y lists, held sorted by x."""

    def __init__(
        self,
        data_x: MutableSequence[float],
        data_y: MutableSequence[float],
        mode: DrawMode = DrawMode.LINE_STRIP,
        x: float = 0.0,
        y: float = 0.0,
    ) -> None:
        self.data_x = data_x
        self.data_y = data_y
        self.style = LineStyle(mode=mode)
        self.x = x
        self.y = y
        self.selected = False
        self.points: list[tuple[float, float]] = []
        self.indices: list[int] = []
        self.update()

    @property
    def point_count(self) -> int:
        """Number of points in the snapshot."""
        return len(self.points)

    def update(self) -> None:
        """Rebuild the x-sorted snapshot and the original-order indices."""
        length = min(len(self.data_x), len(self.data_y))
        xs = [float(v) for v in self.data_x[:length]]
        ys = [float(v) for v in self.data_y[:length]]
        order, positions = sorted_order(xs)
        self.points = [(xs[i], ys[i]) for i in order]
        self.indices = positions

    def clear(self) -> None:
        """Empty the caller's lists and the snapshot."""
        self.data_x.clear()
        self.data_y.clear()
        self.update()

    def ident(self) -> str:
        """Identifier built from the line's position."""
        return f"Line2D2Vecs:{self.x:f}:{self.y:f}"

    def draw_passes(self) -> list[DrawPass]:
        """Render passes for the current selection state."""
        return self.style.draw_passes(self.selected)

    def min_max(self, only_positive_x: bool = False, only_positive_y: bool = False) -> Bounds | None:
        """Extent of the data, or None when there is none."""
        if not self.points:
            return None
        return _extent(self.points, only_positive_x, only_positive_y)

    def closest_point(self, x_val: float) -> tuple[float, float]:
        """Point nearest ``x_val`` by x; (0, 0) when there is no data."""
        return _nearest(self.points, x_val)

    def closest_point_in_window(
        self, x_val: float, xmin: float, xmax: float, ymin: float, ymax: float
    ) -> tuple[float, float]:
        """Point nearest ``x_val`` among those inside a slightly widened window."""
        xmin -= WINDOW_MARGIN * abs(xmin)
        xmax += WINDOW_MARGIN * abs(xmax)
        ymin -= WINDOW_MARGIN * abs(ymin)
        ymax += WINDOW_MARGIN * abs(ymax)
        inside = [(px, py) for px, py in self.points if xmin <= px <= xmax and ymin <= py <= ymax]
        return _nearest(inside, x_val)