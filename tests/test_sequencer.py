"""Tests for alternating point sequences."""

import pytest

from line_segment.errors import ValidationError
from line_segment.factory import one
from line_segment.models import PointsOptions, SortOrder
from line_segment.sequencer import points


class TestPointsGeneration:
    """Tests for the zero-outward generation order."""

    def test_odd_count_starts_at_zero(self):
        """Test count=5, spacing=2 in generation order."""
        assert points({"count": 5, "spacing": 2, "sort": "zero"}) == [0, 2, -2, 4, -4]

    def test_even_count_offsets_by_half_spacing(self):
        """Test an even count is symmetric around 0 without touching it."""
        result = points({"count": 4, "spacing": 2})
        assert result == [1, -1, 3, -3]
        assert 0 not in result

    def test_defaults(self):
        """Test default count=2, spacing=1 gives +/- half a unit."""
        assert points() == [0.5, -0.5]
        assert points({}) == [0.5, -0.5]

    def test_count_zero_is_empty(self):
        assert points({"count": 0}) == []

    def test_count_one_is_zero(self):
        assert points({"count": 1}) == [0]

    def test_negative_count_is_empty(self):
        assert points({"count": -3}) == []

    @pytest.mark.parametrize("count", [0, 1, 2, 3, 8, 9, 50])
    def test_length_matches_count(self, count):
        assert len(points({"count": count, "spacing": 0.25})) == count

    @pytest.mark.parametrize("count", [2, 5, 6, 11])
    def test_symmetric_around_zero(self, count):
        """Test every value has its negation in the sequence."""
        result = points({"count": count, "spacing": 3})
        assert sorted(result) == pytest.approx(sorted(-v for v in result))

    def test_neighbours_in_sorted_order_are_one_spacing_apart(self):
        result = points({"count": 6, "spacing": 1.5, "sort": "neg"})
        gaps = [b - a for a, b in zip(result, result[1:])]
        assert gaps == pytest.approx([1.5] * 5)

    def test_accepts_points_options(self):
        opts = PointsOptions(count=5, spacing=2, sort=SortOrder.POS)
        assert points(opts) == [4, 2, 0, -2, -4]

    def test_returns_new_list(self):
        cfg = {"count": 3}
        assert points(cfg) is not points(cfg)

    def test_differs_from_line_points(self):
        """Test the alternating sequence is not the one-sided line sequence."""
        line = one({"dis": 4, "count": 5})
        assert line.points == [0, 1, 2, 3, 4]
        assert points({"count": 5, "spacing": line.spacing}) == [0, 1, -1, 2, -2]


class TestPointsSorting:
    """Tests for the sort option."""

    def test_neg_sort_is_ascending(self):
        assert points({"count": 5, "spacing": 2, "sort": "neg"}) == [-4, -2, 0, 2, 4]

    def test_pos_sort_is_descending(self):
        assert points({"count": 5, "spacing": 2, "sort": "pos"}) == [4, 2, 0, -2, -4]

    def test_enum_sort_values(self):
        assert points({"count": 3, "sort": SortOrder.NEG}) == [-1, 0, 1]

    def test_sort_on_empty_sequence(self):
        assert points({"count": 0, "sort": "pos"}) == []

    def test_invalid_sort_raises_error(self):
        with pytest.raises(ValidationError, match="invalid sort option"):
            points({"sort": "bogus"})

    def test_invalid_sort_raises_even_for_empty_sequence(self):
        with pytest.raises(ValidationError, match="invalid sort option"):
            points({"count": 0, "sort": "up"})
