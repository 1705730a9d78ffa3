"""Configuration records for segment construction and point generation."""

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional, Union

from line_segment.errors import ValidationError

DEFAULT_DIS = 1
DEFAULT_END = 1
DEFAULT_SPACING = 1
DEFAULT_COUNT = 2
DEFAULT_NEG = False


class SortOrder(Enum):
    """Final ordering applied to a generated point sequence."""

    ZERO = "zero"  # Generation order, alternating outward from zero
    NEG = "neg"  # Ascending
    POS = "pos"  # Descending


DEFAULT_SORT = SortOrder.ZERO


def _pick(cls, values: Mapping[str, Any]) -> dict:
    names = {f.name for f in fields(cls)}
    return {key: value for key, value in values.items() if key in names}


@dataclass(frozen=True)
class LineOptions:
    """Partial description of a line segment.

    Every field is optional: ``None`` means the value was not supplied and
    will be inferred from the others. The defaults used for inference are the
    module-level ``DEFAULT_*`` constants.

    Attributes:
        dis: Distance from 0 to the far end
        end: Signed far endpoint, takes precedence over ``neg`` and ``dis``
        spacing: Distance between consecutive points
        count: Number of points, both ends included
        neg: True if the segment extends in the negative direction
    """

    dis: Optional[float] = None
    end: Optional[float] = None
    spacing: Optional[float] = None
    count: Optional[float] = None
    neg: Optional[bool] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "LineOptions":
        """Build options from a mapping, ignoring unrecognised keys."""
        return cls(**_pick(cls, values))


@dataclass(frozen=True)
class PointsOptions:
    """Configuration for an alternating point sequence.

    Attributes:
        count: Number of points to generate
        spacing: Distance between neighbouring points
        sort: Ordering of the result, a SortOrder or its string value
    """

    count: int = DEFAULT_COUNT
    spacing: float = DEFAULT_SPACING
    sort: Union[SortOrder, str] = DEFAULT_SORT

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PointsOptions":
        """Build options from a mapping, ignoring unrecognised keys.

        Keys whose value is None fall back to the defaults.
        """
        picked = {key: value for key, value in _pick(cls, values).items() if value is not None}
        return cls(**picked)


def coerce_options(options: Any, cls: type) -> Any:
    """Normalize ``None``, a mapping, or an options record into ``cls``.

    Raises:
        ValidationError: If options is none of the accepted kinds
    """
    if options is None:
        return cls()
    if isinstance(options, cls):
        return options
    if isinstance(options, Mapping):
        return cls.from_mapping(options)
    raise ValidationError(
        f"options must be a mapping or {cls.__name__}, got {type(options).__name__}"
    )


def resolve_sort(sort: Union[SortOrder, str]) -> SortOrder:
    """Resolve a sort option into a SortOrder.

    Raises:
        ValidationError: If sort is not a known ordering
    """
    if isinstance(sort, SortOrder):
        return sort
    try:
        return SortOrder(sort)
    except ValueError as e:
        raise ValidationError(f"invalid sort option, got {sort!r}") from e
