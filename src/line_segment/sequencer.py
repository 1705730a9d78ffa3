"""Alternating point sequences centred on zero."""

import logging
from typing import Any, List, Mapping, Optional, Union

from line_segment.models.line import sequence_length
from line_segment.models.options import PointsOptions, SortOrder, coerce_options, resolve_sort

logger = logging.getLogger(__name__)


def points(options: Optional[Union[PointsOptions, Mapping[str, Any]]] = None) -> List[float]:
    """Generate ``count`` positions spaced by ``spacing`` around zero.

    Positions are written in pairs walking outward from zero, positive value
    first. An odd count starts with an exact 0 followed by ``±spacing``,
    ``±2*spacing`` and so on. An even count never lands on 0: the pairs sit at
    ``±spacing/2``, ``±3*spacing/2`` and so on, symmetric around it.

    The sort option is applied last:
    - ZERO: generation order (0, +a, -a, +b, -b, ...)
    - NEG: ascending
    - POS: descending

    Args:
        options: PointsOptions, a mapping with any of the keys ``count``,
            ``spacing`` and ``sort``, or None for the defaults
            (count=2, spacing=1, sort="zero")

    Returns:
        New list of positions. A count of 0 (or less) gives an empty list.

    Raises:
        ValidationError: If sort is not one of "zero", "neg" or "pos"

    Examples:
        >>> points({"count": 5, "spacing": 2})
        [0, 2, -2, 4, -4]
        >>> points({"count": 5, "spacing": 2, "sort": "neg"})
        [-4, -2, 0, 2, 4]
        >>> points({"count": 4, "spacing": 2, "sort": "pos"})
        [3.0, 1.0, -1.0, -3.0]
    """
    opts = coerce_options(options, PointsOptions)
    sort = resolve_sort(opts.sort)

    count = sequence_length(opts.count)
    spacing = opts.spacing
    is_even = count % 2 == 0

    positions: List[float] = []
    if not is_even:
        positions.append(0)

    j = 0 if is_even else 1
    half_spacing = spacing * 0.5 if is_even else 0
    for _ in range(j, count, 2):
        positions.append(spacing * j + half_spacing)
        positions.append(-(spacing * j) - half_spacing)
        j += 1

    logger.debug(f"Generated {len(positions)} points with spacing {spacing}, sort {sort.value}")

    if sort == SortOrder.NEG:
        return sorted(positions)
    if sort == SortOrder.POS:
        return sorted(positions, reverse=True)
    return positions
