"""Tests for the Line model."""

import math

import pytest

from line_segment.models import Line, sequence_length


class TestLine:
    """Tests for Line derived properties."""

    def test_positive_line_derived_values(self):
        """Test derived values of a line from 0 to 10 with 3 points."""
        line = Line(neg=False, count=3, dis=10)
        assert line.spacing == pytest.approx(5.0)
        assert line.end == 10
        assert line.min == 0
        assert line.max == 10
        assert line.points == [0, 5, 10]

    def test_negative_line_derived_values(self):
        """Test derived values of a line from 0 to -10 with 3 points."""
        line = Line(neg=True, count=3, dis=10)
        assert line.spacing == pytest.approx(5.0)
        assert line.end == -10
        assert line.min == -10
        assert line.max == 0
        assert line.points == [0, -5, -10]

    @pytest.mark.parametrize("neg", [False, True])
    @pytest.mark.parametrize("count,dis", [(2, 1), (3, 10), (7, 2.5), (11, 0.3)])
    def test_range_invariants(self, neg, count, dis):
        """Test min <= max, max - min == dis and points span 0 to end."""
        line = Line(neg=neg, count=count, dis=dis)
        assert line.min <= line.max
        assert line.max - line.min == pytest.approx(dis)
        assert line.spacing >= 0
        assert len(line.points) == count
        assert line.points[0] == 0
        assert line.points[-1] == pytest.approx(line.end)

    def test_zero_distance(self):
        """Test a degenerate line collapsed onto the origin."""
        line = Line(neg=False, count=4, dis=0)
        assert line.spacing == 0
        assert line.points == [0, 0, 0, 0]
        assert line.min == line.max == 0

    def test_single_point_spacing_is_nan(self):
        """Test 0 / 0 spacing follows IEEE semantics instead of raising."""
        line = Line(neg=False, count=1, dis=0)
        assert math.isnan(line.spacing)

    def test_points_returns_new_list(self):
        """Test that points is rebuilt on every access."""
        line = Line(neg=False, count=3, dis=10)
        first = line.points
        first.append(99)
        assert line.points == [0, 5, 10]
        assert line.points is not line.points

    def test_derived_values_follow_mutation(self):
        """Test that derived values are recomputed from the stored fields."""
        line = Line(neg=False, count=3, dis=10)
        line.neg = True
        line.count = 5
        assert line.end == -10
        assert line.spacing == pytest.approx(2.5)
        assert line.points == [0, -2.5, -5, -7.5, -10]

    def test_structural_equality(self):
        """Test equality compares stored fields, not identity."""
        assert Line(neg=True, count=2, dis=10) == Line(neg=True, count=2, dis=10)
        assert Line(neg=True, count=2, dis=10) != Line(neg=False, count=2, dis=10)

    def test_as_dict(self):
        """Test as_dict exposes stored and derived fields."""
        line = Line(neg=True, count=2, dis=10)
        assert line.as_dict() == {
            "neg": True,
            "count": 2,
            "dis": 10,
            "spacing": 10,
            "end": -10,
            "min": -10,
            "max": 0,
            "points": [0, -10],
        }


class TestSequenceLength:
    """Tests for sequence_length helper."""

    def test_integer_count(self):
        assert sequence_length(4) == 4

    def test_integral_float_count(self):
        assert sequence_length(4.0) == 4

    def test_fractional_count_truncates(self):
        assert sequence_length(2.7) == 2

    def test_negative_count_is_empty(self):
        assert sequence_length(-3) == 0

    def test_nan_count_is_empty(self):
        assert sequence_length(math.nan) == 0

    def test_infinite_count_raises_error(self):
        with pytest.raises(ValueError, match="count must be finite"):
            sequence_length(math.inf)
