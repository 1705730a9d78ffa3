"""Helper functions for creating matplotlib plots in examples."""

import inspect
import os
from typing import Optional

from line_segment import Line
from line_segment.visualize import plot_line, plot_sort_orders


def _output_dir(output_dir: Optional[str]) -> str:
    if output_dir is not None:
        return output_dir
    caller_file = inspect.stack()[2].filename
    return os.path.dirname(os.path.abspath(caller_file))


def generate_line_plot(name: str, line: Line, output_dir: Optional[str] = None) -> None:
    """Save a plot of a line with automatic naming.

    Args:
        name: Base name for the plot (e.g., "basic_usage")
        line: Line to draw
        output_dir: Optional output directory (defaults to caller's directory)
    """
    filename = os.path.join(_output_dir(output_dir), f"{name}_line.png")
    plot_line(line, title=name.replace("_", " ").title(), show=False, save_path=filename)
    print(f"  Plot saved: {filename}")


def generate_sort_plot(
    name: str, count: int, spacing: float, output_dir: Optional[str] = None
) -> None:
    """Save a three-panel plot of the sort orders with automatic naming."""
    filename = os.path.join(_output_dir(output_dir), f"{name}_sort_orders.png")
    plot_sort_orders(count, spacing=spacing, show=False, save_path=filename)
    print(f"  Plot saved: {filename}")
