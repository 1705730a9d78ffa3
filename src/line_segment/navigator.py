"""Range membership and clamped stepping along a line."""

from typing import Any, Mapping


def _field(line: Any, name: str) -> Any:
    if isinstance(line, Mapping):
        return line[name]
    return getattr(line, name)


def inside(line: Any, value: float) -> bool:
    """Check whether a value lies within the line's range.

    Args:
        line: Line (or mapping) providing ``min`` and ``max``
        value: Position to test

    Returns:
        True if min <= value <= max, False otherwise
    """
    return _field(line, "min") <= value <= _field(line, "max")


def move(line: Any, current: float, step: float, inverse: bool = False) -> float:
    """
    Step a position along the line, clamped at the bound being approached.

    When ``inverse`` equals the line's ``neg`` flag the position advances
    towards ``max``; otherwise it retreats towards ``min``. For a positive
    line this means forward is away from the origin, and ``inverse=True``
    walks back to it. Only the approached bound is enforced, so a position
    that is already outside the range on the other side stays there.

    Args:
        line: Line (or mapping) providing ``min``, ``max`` and ``neg``
        current: Starting position
        step: Distance to move
        inverse: Reverse the direction of travel (default: False)

    Returns:
        New position. A zero step returns ``current`` untouched, unclamped.

    Examples:
        >>> from line_segment.factory import one
        >>> line = one({"end": 10, "count": 11})
        >>> move(line, 5, 3)
        8
        >>> move(line, 9, 5)
        10
        >>> move(line, 2, 5, inverse=True)
        0
    """
    if step == 0:
        return current

    if inverse == _field(line, "neg"):
        return min(current + step, _field(line, "max"))
    return max(current - step, _field(line, "min"))
