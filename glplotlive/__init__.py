"""Model of live 2D plot lines, plot layouts and interactive buttons, without rendering."""

__version__ = "0.1.0"
__all__ = ["colours", "line_base", "simple_lines", "sorted_lines", "interaction", "plot"]