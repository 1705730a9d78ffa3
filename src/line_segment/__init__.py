"""One-dimensional line segments: construction, point sequences and clamped stepping."""

from .errors import ValidationError
from .factory import one
from .models import Line, LineOptions, PointsOptions, SortOrder
from .navigator import inside, move
from .sequencer import points

__all__ = [
    "one",
    "points",
    "inside",
    "move",
    "Line",
    "LineOptions",
    "PointsOptions",
    "SortOrder",
    "ValidationError",
]
