"""Visualization utilities for line segments and point sequences.

This module provides functions to draw a segment with its points, a single
point sequence, and the three sort orders of an alternating sequence side by
side.
"""

from typing import List, Optional

import matplotlib.pyplot as plt
import numpy as np

from line_segment.models import Line, SortOrder
from line_segment.sequencer import points as generate_points


def _finish(fig: plt.Figure, show: bool, save_path: Optional[str]) -> plt.Figure:
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches="tight")

    if show:
        plt.show()

    return fig


def plot_line(
    line: Line,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot a segment as a horizontal bar from min to max with its points.

    Args:
        line: Line to draw
        title: Optional custom title (default: auto-generated)
        show: Whether to display the plot (default: True)
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object

    Example:
        >>> from line_segment import one
        >>> plot_line(one({"end": -10, "count": 5}), show=False)
    """
    positions = np.array(line.points, dtype=float)
    if positions.size == 0:
        raise ValueError("Cannot plot line without points")

    if title is None:
        title = f"Line to {line.end} ({line.count} points, spacing {line.spacing:.3g})"

    fig, ax = plt.subplots(figsize=(12, 2.5))
    ax.hlines(0, line.min, line.max, color="gray", linewidth=2, label="Range")
    ax.plot(positions, np.zeros_like(positions), "o", label="Points")
    ax.plot([line.end], [0], "s", color="red", markersize=10, label=f"End ({line.end})")
    ax.axvline(0, color="black", linestyle="--", alpha=0.5)
    ax.set_yticks([])
    ax.set_xlabel("Position")
    ax.set_title(title)
    ax.legend(loc="upper right")
    ax.grid(True, axis="x", alpha=0.3)

    return _finish(fig, show, save_path)


def plot_points(
    positions: List[float],
    title: str = "Point Sequence",
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot a point sequence as position against generation index.

    Args:
        positions: Sequence of positions (e.g. the output of points())
        title: Plot title
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object
    """
    if not positions:
        raise ValueError("Cannot plot empty point sequence")

    values = np.array(positions, dtype=float)
    indices = np.arange(values.size)

    fig, ax = plt.subplots(figsize=(12, 4))
    ax.plot(indices, values, "o-", linewidth=1, alpha=0.8, label="Position")
    ax.axhline(0, color="black", linestyle="--", alpha=0.5)
    ax.set_xlabel("Index")
    ax.set_ylabel("Position")
    ax.set_title(title)
    ax.legend()
    ax.grid(True, alpha=0.3)

    return _finish(fig, show, save_path)


def plot_sort_orders(
    count: int,
    spacing: float = 1.0,
    title: Optional[str] = None,
    show: bool = True,
    save_path: Optional[str] = None,
) -> plt.Figure:
    """Plot one alternating sequence in each of the three sort orders.

    Args:
        count: Number of points to generate
        spacing: Distance between neighbouring points
        title: Optional custom title (default: auto-generated)
        show: Whether to display the plot
        save_path: Optional path to save the figure

    Returns:
        matplotlib Figure object with one panel per SortOrder
    """
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")

    orders = list(SortOrder)
    fig, axes = plt.subplots(len(orders), 1, figsize=(12, 8), sharex=True)

    if title is None:
        title = f"Point Sequence Orders ({count} points, spacing {spacing})"
    fig.suptitle(title, fontsize=14, fontweight="bold")

    for ax, order in zip(axes, orders):
        values = np.array(
            generate_points({"count": count, "spacing": spacing, "sort": order}), dtype=float
        )
        ax.plot(np.arange(values.size), values, "o-", linewidth=1)
        ax.axhline(0, color="black", linestyle="--", alpha=0.5)
        ax.set_ylabel("Position")
        ax.set_title(f"sort={order.value}")
        ax.grid(True, alpha=0.3)

    axes[-1].set_xlabel("Index")

    return _finish(fig, show, save_path)
