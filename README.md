# glplotlive

A pure-Python model of a live plotting library. It keeps the data and the
state behind plot lines, plot layouts and interactive buttons. It works out
extents, nearest points, draw passes, colours and grid placement. It draws
nothing, so it can feed any renderer or run headless in tests.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test requirements as well and run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `glplotlive.colours`

- `Colour` is an enum of named RGB colours: `WHITE`, `BLACK`, `RED`, `GREEN`,
  `BLUE`, `YELLOW`, `CYAN`, `MAGENTA`, `SILVER`, `GRAY`, `MAROON`, `OLIVE`,
  `DARKGREEN`, `PURPLE`, `TEAL` and `NAVY`. Each member has an `rgb` property and
  an `rgba(alpha=1.0)` method.
- `LineType` has two members, `SINGLE_LINE` and `SHADED_LINE`.
- `DrawMode` lists the primitive modes, using their GL enum values: `POINTS`,
  `LINES`, `LINE_LOOP`, `LINE_STRIP` and `TRIANGLES`.
- `GLType` holds the element type codes `INT`, `FLOAT` and `DOUBLE`.
- `gl_type_for(value_type)` maps a type to its `GLType`. It accepts the names
  `"int"`, `"float"` and `"double"`, and the Python types `int` and `float`,
  where `float` maps to `FLOAT`. An unknown name raises `ValueError` and any
  other type raises `TypeError`.

### `glplotlive.line_base`

- `LineStyle` is a dataclass holding the colour, the mode, the integer line
  width, the opacity ratio, the log-axis flags and the log bases.
  - `draw_passes(selected)` returns the list of `DrawPass` records needed to
    draw the data. A selected line first gets a halo pass at ten times the
    width with alpha 0.3, then the normal pass.
  - `legend_passes(selected)` does the same for the legend sample, but always
    uses the linear shader.
- `select_shader(log_x, log_y)` picks the `ShaderKind` to use: `PLOT_2D`,
  `PLOT_2D_LOGX`, `PLOT_2D_LOGY` or `PLOT_2D_LOGX_LOGY`.

### `glplotlive.simple_lines`

These lines keep a reference to the caller's data. Each has a `style`
(`LineStyle`) and a `min_max()` that returns a `Bounds(xmin, xmax, ymin, ymax)`.

- `PointsLine(points)` takes a list of `(x, y)` pairs, or of objects with `x`
  and `y`. Its bounds always include the origin.
- `FlatLine(data, value_type=float)` takes a flat `[x0, y0, x1, y1, ...]` list.
  `append(x, y)` adds a point to that list, and `gl_type` holds the element
  type. Its bounds always include the origin.
- `RowsLine(rows, index_x=0, index_y=1)` takes two columns from a list of rows.
  Call `update()` to refresh it. `min_max(only_positive_x, only_positive_y)`
  can count only positive values, and its bounds include the origin.
- `Vec3Line(vectors, index_x=0, index_y=1)` takes two components from a list of
  3-vectors. Each index must be 0, 1 or 2. Call `update()` to refresh it.
- `TimeVec3Line(times, vectors, index=0)` pairs a list of x values with one
  component of a list of 3-vectors, stopping at the shorter of the two lists.

For `Vec3Line` and `TimeVec3Line`, a line with no data has inverted
single-precision float limits as its bounds.

### `glplotlive.sorted_lines`

- `CircularLine(data_x, data_y)` reads two lists as ring buffers.
  `update(current_index)` rebuilds `points`, starting from `current_index` and
  wrapping round to the start. An index outside the data raises `ValueError`.
- `PosNegCircularLine` is a circular line that also carries a `pos_colour` and a
  `neg_colour`, each an RGBA tuple.
- `SortedLine(data_x, data_y)` keeps its `points` sorted by x. It also keeps
  `indices`, which trace the points in their original order.
  - `update()` rebuilds the points, and `clear()` empties both the caller's
    lists and the line.
  - `min_max(only_positive_x, only_positive_y)` returns the bounds, or `None`
    when the line has no points.
  - `closest_point(x_val)` returns the point nearest to `x_val` by x, or
    `(0.0, 0.0)` when the line is empty.
  - `closest_point_in_window(x_val, xmin, xmax, ymin, ymax)` searches only the
    points inside the window, after widening it by 1% on each side.
  - `draw_passes()` and `ident()` are also available.
- `sorted_order(values)` returns the stable sorting order of `values` and its
  inverse.

### `glplotlive.interaction`

- `Clickable` is an abstract base class with an `active` flag,
  `toggle_active()` and an abstract `on_left_click()`.
- `PressButton(name, x, y, width, height, tooltip_text="", clock=time.monotonic)`
  toggles on each left click.
  - `shading_colour()` and `outline_colour()` return the colour for the current
    selected, hovered and active state.
  - `set_hovered(hovered)` starts or resets the hover timer.
  - `tooltip_visible()` is true once the button has tooltip text and has been
    hovered for more than 0.5 seconds. The clock can be replaced, for example
    to control time in tests.
- `ImageButton` is a press button that also carries a `texture_name` and the
  logo quad's vertices and indices.
- `Tooltip` holds the text, position, font size, attach location and colours of
  a tooltip.

### `glplotlive.plot`

- `Plot(x, y, width, height, num_horizontal=1, num_vertical=1)` starts with one
  2D axes slot.
  - `add_axes(axes_type)` appends a slot and re-arranges the grid.
  - `add_axes_at(x, y, width, height, axes_type)` places a slot explicitly,
    without re-arranging the grid.
  - `set_layout(num_horizontal, num_vertical)` and `update_layout()` lay the
    slots out row by row from the top left. A layout with no rows or no columns
    raises `ValueError`.
  - `get_axes(axes_id)` and `remove_axes(axes_id)` raise `KeyError` for an
    unknown id.
- Each `AxesSlot` records its `AxesType` (`AXES_2D` or `AXES_3D`) and its
  position and size as fractions of the plot area.

## Example

```python
from glplotlive.sorted_lines import SortedLine
from glplotlive.plot import Plot, AxesType

xs = [3.0, 1.0, 2.0]
ys = [30.0, 10.0, 20.0]
line = SortedLine(xs, ys)
print(line.min_max(False, False))  # Bounds(xmin=1.0, xmax=3.0, ymin=10.0, ymax=30.0)
print(line.closest_point(2.1))     # (2.0, 20.0)

plot = Plot(0.0, 0.0, 1.0, 1.0)
plot.add_axes(AxesType.AXES_2D)
plot.set_layout(2, 1)
print(plot.get_axes(1))  # AxesSlot(axes_type=<AxesType.AXES_2D: 'axes_2d'>, x=0.5, y=0.0, width=0.5, height=1.0)
```

## What it does not do

- It does not render anything. There is no window, no OpenGL context, no
  shaders and no texture loading. Draw passes and colours are returned as plain
  values for a renderer to use.
- Axes are placement slots only. There are no axis ticks, labels, titles or
  legends, and lines are not attached to axes.
- There is no command-line tool and no example application.