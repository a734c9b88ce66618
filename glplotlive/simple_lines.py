"""Lines drawn straight from caller-owned point containers.

Each line keeps a reference to the caller's data, so appending to the
original list is seen by the line. The lines built from rows or 3-vectors
copy the selected columns into an internal snapshot that is refreshed with
``update()``.
"""

from __future__ import annotations

from typing import Iterable, MutableSequence, NamedTuple, Sequence

from .colours import DrawMode, GLType, gl_type_for
from .line_base import LineStyle

FLOAT_MAX = 3.4028234663852886e38
"""Largest single-precision float, the starting bound for some extents."""


class Bounds(NamedTuple):
    """Extent of a line's data."""

    xmin: float
    xmax: float
    ymin: float
    ymax: float


def _xy(point) -> tuple[float, float]:
    if hasattr(point, "x") and hasattr(point, "y"):
        return float(point.x), float(point.y)
    x, y = point
    return float(x), float(y)


def _bounds(
    points: Iterable[tuple[float, float]],
    start: float,
    only_positive_x: bool = False,
    only_positive_y: bool = False,
) -> Bounds:
    xmin, xmax, ymin, ymax = start, -start, start, -start
    for x, y in points:
        if not only_positive_x or x > 0:
            xmax = max(xmax, x)
            xmin = min(xmin, x)
        if not only_positive_y or y > 0:
            ymax = max(ymax, y)
            ymin = min(ymin, y)
    return Bounds(xmin, xmax, ymin, ymax)


def _check_vec3_index(index: int, name: str) -> int:
    if not 0 <= index <= 2:
        raise ValueError(f"{name} must select a 3-vector component (0, 1 or 2), got {index!r}")
    return index


class _Line:
    """Common state: the style used to draw the line."""

    def __init__(self, mode: DrawMode) -> None:
        self.style = LineStyle(mode=mode)

    @property
    def mode(self) -> DrawMode:
        return self.style.mode


class PointsLine(_Line):
    """Line over a list of points, each an ``(x, y)`` pair or an object with ``x`` and ``y``."""

    def __init__(self, points: Sequence, mode: DrawMode = DrawMode.LINE_STRIP) -> None:
        super().__init__(mode)
        self.points = points

    def point_count(self) -> int:
        """Number of points currently in the data."""
        return len(self.points)

    def min_max(self) -> Bounds:
        """Extent of the data; the bounds always include the origin."""
        return _bounds((_xy(p) for p in self.points), 0.0)


class FlatLine(_Line):
    """Line over a flat list ``[x0, y0, x1, y1, ...]``."""

    def __init__(
        self,
        data: MutableSequence,
        value_type: type | str = float,
        mode: DrawMode = DrawMode.LINE_STRIP,
    ) -> None:
        super().__init__(mode)
        self.data = data
        self.gl_type: GLType = gl_type_for(value_type)

    def _pairs(self):
        it = iter(self.data)
        return ((float(x), float(y)) for x, y in zip(it, it))

    def append(self, x, y) -> None:
        """Append one point to the underlying data."""
        self.data.append(x)
        self.data.append(y)

    def point_count(self) -> int:
        """Number of complete (x, y) pairs in the data."""
        return len(self.data) // 2

    def min_max(self) -> Bounds:
        """Extent of the data; the bounds always include the origin."""
        return _bounds(self._pairs(), 0.0)


class RowsLine(_Line):
    """Line taking x and y from two columns of a list of rows."""

    def __init__(
        self,
        rows: Sequence[Sequence],
        index_x: int = 0,
        index_y: int = 1,
        mode: DrawMode = DrawMode.LINE_STRIP,
    ) -> None:
        super().__init__(mode)
        self.rows = rows
        self.index_x = index_x
        self.index_y = index_y
        self.points: list[tuple[float, float]] = []
        self.update()

    def update(self) -> None:
        """Refresh the snapshot from the rows."""
        self.points = [(float(r[self.index_x]), float(r[self.index_y])) for r in self.rows]

    def min_max(self, only_positive_x: bool = False, only_positive_y: bool = False) -> Bounds:
        """Extent of the snapshot, including the origin, optionally counting only positive values."""
        return _bounds(self.points, 0.0, only_positive_x, only_positive_y)


class Vec3Line(_Line):
    """Line taking x and y from two components of a list of 3-vectors."""

    def __init__(
        self,
        vectors: Sequence[Sequence[float]],
        index_x: int = 0,
        index_y: int = 1,
        mode: DrawMode = DrawMode.LINE_STRIP,
    ) -> None:
        super().__init__(mode)
        self.vectors = vectors
        self.index_x = _check_vec3_index(index_x, "index_x")
        self.index_y = _check_vec3_index(index_y, "index_y")
        self.points: list[tuple[float, float]] = []
        self.update()

    def update(self) -> None:
        """Refresh the snapshot from the vectors."""
        self.points = [(float(v[self.index_x]), float(v[self.index_y])) for v in self.vectors]

    def min_max(self) -> Bounds:
        """Extent of the snapshot; with no data the bounds are inverted float limits."""
        return _bounds(self.points, FLOAT_MAX)


class TimeVec3Line(_Line):
    """Line of a list of x values against one component of a list of 3-vectors."""

    def __init__(
        self,
        times: Sequence[float],
        vectors: Sequence[Sequence[float]],
        index: int = 0,
        mode: DrawMode = DrawMode.LINE_STRIP,
    ) -> None:
        super().__init__(mode)
        self.times = times
        self.vectors = vectors
        self.index = _check_vec3_index(index, "index")
        self.points: list[tuple[float, float]] = []
        self.update()

    def update(self) -> None:
        """Refresh the snapshot, pairing values up to the shorter of the two lists."""
        self.points = [(float(t), float(v[self.index])) for t, v in zip(self.times, self.vectors)]

    def min_max(self) -> Bounds:
        """Extent of the snapshot; with no data the bounds are inverted float limits."""
        return _bounds(self.points, FLOAT_MAX)