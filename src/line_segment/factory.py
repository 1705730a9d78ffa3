"""Segment construction from partial, mutually derivable parameters."""

import logging
import math
from numbers import Real
from typing import Any, Mapping, Optional, Union

from line_segment.errors import ValidationError
from line_segment.models.line import Line
from line_segment.models.options import (
    DEFAULT_COUNT,
    DEFAULT_DIS,
    DEFAULT_NEG,
    DEFAULT_SPACING,
    LineOptions,
    coerce_options,
)

logger = logging.getLogger(__name__)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not math.isnan(value)


def _as_count(value: Any) -> Any:
    # Counts derived from dis / spacing come out as floats
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def one(options: Optional[Union[LineOptions, Mapping[str, Any]]] = None) -> Line:
    """
    Create a Line from a partial configuration.

    Missing values are inferred from the supplied ones. Whether a key was
    supplied at all matters, not just its value: ``end`` overrides ``neg`` and
    ``dis``, an explicit ``count`` overrides the count implied by
    ``dis / spacing``, and ``spacing * (count - 1)`` only fills in ``dis`` when
    neither ``end`` nor ``dis`` was given.

    Args:
        options: LineOptions, a mapping with any of the keys ``dis``, ``end``,
            ``spacing``, ``count`` and ``neg``, or None for all defaults.
            Unknown mapping keys are ignored; a None value counts as missing.

    Returns:
        New Line built from the inferred neg, count and dis

    Raises:
        ValidationError: If dis or spacing is negative or count is below 2.
            Values that are not numbers (including NaN) skip these checks.

    Examples:
        >>> line = one({"end": -10})
        >>> line.neg, line.count, line.dis, line.min, line.max
        (True, 2, 10, -10, 0)
        >>> line.points == [0, -10]
        True

        >>> one({"end": -10, "count": 3}).points == [0, -5, -10]
        True

        >>> one({"spacing": 5, "count": 3, "neg": True}) == one({"end": -10, "count": 3})
        True
    """
    opts = coerce_options(options, LineOptions)

    dis = DEFAULT_DIS if opts.dis is None else opts.dis
    spacing = DEFAULT_SPACING if opts.spacing is None else opts.spacing
    count = DEFAULT_COUNT if opts.count is None else opts.count
    neg = DEFAULT_NEG if opts.neg is None else opts.neg

    if _is_number(dis) and dis < 0:
        raise ValidationError(f"distance must be non-negative, got {dis}")
    if _is_number(spacing) and spacing < 0:
        raise ValidationError(f"spacing must be non-negative, got {spacing}")
    if _is_number(count) and count < 2:
        raise ValidationError(f"point count must be >= 2, got {count}")

    if opts.end is not None:
        neg = opts.end < 0

    if opts.count is None:
        count = _as_count(dis / spacing + 1) if _is_number(spacing) and spacing else 2

    if opts.end is not None:
        dis = abs(opts.end)
    elif opts.dis is not None:
        dis = opts.dis
    elif opts.spacing is not None:
        dis = opts.spacing * (count - 1)
    else:
        dis = DEFAULT_DIS

    line = Line(neg=neg, count=count, dis=dis)
    logger.debug(f"Created line neg={line.neg} count={line.count} dis={line.dis}")
    return line
