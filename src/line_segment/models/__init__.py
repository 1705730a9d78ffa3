"""Data models for line segments.

This package contains the Line record and the option records used to build
lines and point sequences.
"""

from line_segment.models.line import Line, sequence_length
from line_segment.models.options import (
    DEFAULT_COUNT,
    DEFAULT_DIS,
    DEFAULT_END,
    DEFAULT_NEG,
    DEFAULT_SORT,
    DEFAULT_SPACING,
    LineOptions,
    PointsOptions,
    SortOrder,
)

__all__ = [
    "Line",
    "LineOptions",
    "PointsOptions",
    "SortOrder",
    "sequence_length",
    "DEFAULT_COUNT",
    "DEFAULT_DIS",
    "DEFAULT_END",
    "DEFAULT_NEG",
    "DEFAULT_SORT",
    "DEFAULT_SPACING",
]
