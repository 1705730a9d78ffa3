"""Line model: a one-dimensional segment anchored at the origin."""

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Union

Number = Union[int, float]


def _divide(numerator: float, denominator: float) -> float:
    """Divide with IEEE-754 semantics instead of raising on zero."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return numerator / denominator


def sequence_length(count: Number) -> int:
    """Convert a point count into a usable list length.

    Fractional counts are truncated, negative and NaN counts give 0.
    """
    if isinstance(count, float):
        if math.isnan(count):
            return 0
        if math.isinf(count):
            raise ValueError(f"count must be finite, got {count}")
    return max(int(count), 0)


@dataclass
class Line:
    """A segment from 0 to a signed endpoint, split into evenly spaced points.

    Only ``neg``, ``count`` and ``dis`` are stored. Everything else is a
    property recomputed from them on each access, so assigning a new value to
    a stored field is reflected immediately by the derived values.

    Attributes:
        neg: True if the segment extends in the negative direction from 0
        count: Number of points on the segment, both ends included
        dis: Distance from 0 to the far end (always non-negative)
    """

    neg: bool
    count: Number
    dis: Number

    @property
    def spacing(self) -> float:
        """Distance between two consecutive points."""
        return _divide(self.dis, self.count - 1)

    @property
    def end(self) -> Number:
        """Signed far endpoint."""
        return -self.dis if self.neg else self.dis

    @property
    def min(self) -> Number:
        """Lower bound of the segment range."""
        return -self.dis if self.neg else 0

    @property
    def max(self) -> Number:
        """Upper bound of the segment range."""
        return 0 if self.neg else self.dis

    @property
    def points(self) -> List[float]:
        """Positions of all points, walking from 0 towards ``end``.

        A new list is built on every access.
        """
        spacing = self.spacing
        direction = -1 if self.neg else 1
        return [spacing * i * direction for i in range(sequence_length(self.count))]

    def as_dict(self) -> Dict[str, Any]:
        """Return stored and derived fields as a plain dictionary."""
        return {
            "neg": self.neg,
            "count": self.count,
            "dis": self.dis,
            "spacing": self.spacing,
            "end": self.end,
            "min": self.min,
            "max": self.max,
            "points": self.points,
        }
