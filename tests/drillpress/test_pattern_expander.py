"""Tests for drillpress/pattern_expander.py module."""
import pytest

from drillpress.models import Hole
from drillpress.pattern_expander import (
    rectangular_array,
    circular_pattern,
    renumber_holes,
    check_array_parameters,
    check_circle_parameters,
    expand_hole_operations
)


def _coords(holes):
    return [(h.x, h.y) for h in holes]


class TestRectangularArray:
    """Tests for rectangular_array function."""

    def test_2x3_array_row_major(self):
        """Test 2 rows x 3 cols yields six holes row by row."""
        holes = rectangular_array(2, 3, 1, 1, 0, 0)
        assert _coords(holes) == [
            (0, 0), (1, 0), (2, 0),
            (0, 1), (1, 1), (2, 1)
        ]

    def test_origin_offset(self):
        """Test origin shifts every hole."""
        holes = rectangular_array(2, 2, 0.5, 1.5, 2.0, 3.0)
        assert _coords(holes) == [(2.0, 3.0), (2.5, 3.0), (2.0, 4.5), (2.5, 4.5)]

    def test_single_hole(self):
        """Test 1x1 array."""
        holes = rectangular_array(1, 1, 1.0, 1.0, 4.0, 5.0)
        assert _coords(holes) == [(4.0, 5.0)]

    def test_numbering(self):
        """Test holes are numbered from start_number."""
        holes = rectangular_array(2, 2, 1, 1, start_number=5)
        assert [h.number for h in holes] == [5, 6, 7, 8]

    def test_carries_diameter_and_depth(self):
        """Test diameter and depth are set on every hole."""
        holes = rectangular_array(1, 3, 1, 1, diameter=0.25, depth=0.5)
        assert all(h.diameter == 0.25 and h.depth == 0.5 for h in holes)


class TestCircularPattern:
    """Tests for circular_pattern function."""

    def test_four_holes_on_radius_10(self):
        """Test four holes land on the axes."""
        holes = circular_pattern(4, 10, 0, 0, 0)
        expected = [(10, 0), (0, 10), (-10, 0), (0, -10)]
        assert len(holes) == 4
        for hole, (x, y) in zip(holes, expected):
            assert hole.x == pytest.approx(x, abs=1e-9)
            assert hole.y == pytest.approx(y, abs=1e-9)

    def test_start_angle(self):
        """Test start angle rotates the first hole."""
        holes = circular_pattern(2, 1.0, 0, 0, 90)
        assert holes[0].x == pytest.approx(0, abs=1e-9)
        assert holes[0].y == pytest.approx(1.0)
        assert holes[1].y == pytest.approx(-1.0)

    def test_center_offset(self):
        """Test holes are placed around the center."""
        holes = circular_pattern(3, 2.0, 5.0, 5.0)
        for hole in holes:
            assert ((hole.x - 5.0) ** 2 + (hole.y - 5.0) ** 2) ** 0.5 == pytest.approx(2.0)

    def test_numbering(self):
        """Test sequential numbering."""
        holes = circular_pattern(6, 1.0)
        assert [h.number for h in holes] == [1, 2, 3, 4, 5, 6]


class TestRenumberHoles:
    """Tests for renumber_holes function."""

    def test_renumber_returns_new_list(self):
        """Test renumbering leaves the input untouched."""
        holes = [Hole(1, 1, number=7), Hole(2, 2, number=3)]
        renumbered = renumber_holes(holes)
        assert [h.number for h in renumbered] == [1, 2]
        assert [h.number for h in holes] == [7, 3]


class TestParameterChecks:
    """Tests for pattern parameter checks."""

    def test_valid_array(self):
        assert check_array_parameters(2, 3, 1.0, 1.0) == []

    def test_invalid_dimensions(self):
        assert "Invalid array dimensions" in check_array_parameters(0, 3, 1.0, 1.0)

    def test_invalid_spacing(self):
        assert "Invalid spacing values" in check_array_parameters(2, 2, 0, 1.0)
        assert "Invalid spacing values" in check_array_parameters(2, 2, 1.0, None)

    def test_infinite_values(self):
        assert "Invalid spacing values" in check_array_parameters(2, 2, float("inf"), 1.0)
        assert "Invalid radius" in check_circle_parameters(4, float("inf"))

    def test_valid_circle(self):
        assert check_circle_parameters(4, 2.0) == []

    def test_invalid_count(self):
        assert "Invalid hole count" in check_circle_parameters(1, 2.0)

    def test_invalid_radius(self):
        assert "Invalid radius" in check_circle_parameters(4, -1.0)


class TestExpandHoleOperations:
    """Tests for expand_hole_operations function."""

    def test_mixed_operations(self):
        """Test singles and patterns are combined and numbered in order."""
        operations = [
            {'type': 'single', 'x': 1.0, 'y': 2.0},
            {'type': 'array', 'rows': 1, 'cols': 2, 'spacing_x': 1.0, 'spacing_y': 1.0,
             'origin_x': 5.0, 'origin_y': 5.0},
            {'type': 'circle', 'count': 4, 'radius': 1.0, 'center_x': 10.0, 'center_y': 10.0}
        ]
        holes = expand_hole_operations(operations, diameter=0.25, depth=0.5)

        assert len(holes) == 7
        assert [h.number for h in holes] == list(range(1, 8))
        assert (holes[0].x, holes[0].y) == (1.0, 2.0)
        assert (holes[2].x, holes[2].y) == (6.0, 5.0)
        assert holes[3].x == pytest.approx(11.0)

    def test_defaults_and_overrides(self):
        """Test per-operation diameter overrides the default."""
        operations = [
            {'type': 'single', 'x': 0, 'y': 0},
            {'type': 'single', 'x': 1, 'y': 1, 'diameter': 0.5}
        ]
        holes = expand_hole_operations(operations, diameter=0.25, depth=0.5)
        assert holes[0].diameter == 0.25
        assert holes[1].diameter == 0.5

    def test_arc_alias(self):
        """Test 'arc' expands like 'circle'."""
        holes = expand_hole_operations([{'type': 'arc', 'count': 3, 'radius': 1.0}])
        assert len(holes) == 3

    def test_unknown_type_skipped(self):
        """Test unknown operation types produce nothing."""
        assert expand_hole_operations([{'type': 'slot', 'x': 1, 'y': 1}]) == []

    def test_default_type_is_single(self):
        """Test operations without type are single holes."""
        holes = expand_hole_operations([{'x': 1.0, 'y': 1.0}])
        assert _coords(holes) == [(1.0, 1.0)]
