"""
Unit tests for ShapeCatalog.

Tests:
- Insertion order and index lookups
- Removal and index compaction
- Bulk translate/scale
- Area/perimeter queries, including the 0.0 "not found" path
- Concatenated display
"""

import pytest
from shapes import Point, Rectangle, Square, Circle, Triangle
from catalog import ShapeCatalog


class TestMembership:
    """add/get_at/remove_at/count."""

    def test_empty(self, empty_catalog):
        assert empty_catalog.count() == 0
        assert len(empty_catalog) == 0
        assert empty_catalog.get_at(0) is None
        assert empty_catalog.remove_at(0) is None

    def test_get_returns_same_instance(self, populated_catalog, rectangle, circle):
        assert populated_catalog.count() == 4
        assert populated_catalog.get_at(0) is rectangle
        assert populated_catalog.get_at(2) is circle

    @pytest.mark.parametrize("index", [-1, -4, 4, 100])
    def test_out_of_range_lookup(self, populated_catalog, index):
        assert populated_catalog.get_at(index) is None

    def test_remove_shifts_indices(self, populated_catalog, rectangle, square, circle, right_triangle):
        removed = populated_catalog.remove_at(1)
        assert removed is square
        assert populated_catalog.count() == 3
        assert populated_catalog.get_at(0) is rectangle
        assert populated_catalog.get_at(1) is circle
        assert populated_catalog.get_at(2) is right_triangle
        assert populated_catalog.get_at(3) is None

    def test_remove_then_get_never_returns_removed(self, populated_catalog):
        removed = populated_catalog.remove_at(3)
        assert populated_catalog.get_at(3) is None
        assert all(shape is not removed for shape in populated_catalog)

    def test_remove_invalid_keeps_count(self, populated_catalog):
        assert populated_catalog.remove_at(-1) is None
        assert populated_catalog.remove_at(4) is None
        assert populated_catalog.count() == 4

    def test_iteration_order(self, populated_catalog):
        assert [s.name for s in populated_catalog] == ["Rectangle", "Square", "Circle", "Triangle"]

    def test_clear(self, populated_catalog):
        populated_catalog.clear()
        assert populated_catalog.count() == 0


class TestBulkTransforms:
    """translate_all / scale_all."""

    def test_translate_round_trip(self, populated_catalog):
        before = [s.get_position() for s in populated_catalog]
        populated_catalog.translate_all(5, -3)
        assert [s.get_position() for s in populated_catalog] == [
            Point(p.x + 5, p.y - 3) for p in before
        ]
        populated_catalog.translate_all(-5, 3)
        assert [s.get_position() for s in populated_catalog] == before

    def test_translate_leaves_triangle_vertices(self, populated_catalog, right_triangle):
        populated_catalog.translate_all(7, 7)
        assert right_triangle.get_position() == Point(7, 7)
        assert right_triangle.vertices == (Point(0, 0), Point(4, 0), Point(0, 3))
        populated_catalog.translate_all(-7, -7)
        assert right_triangle.get_position() == Point(0, 0)
        assert right_triangle.vertices == (Point(0, 0), Point(4, 0), Point(0, 3))

    def test_scale_up_and_down(self, populated_catalog):
        populated_catalog.scale_all(3, True)
        assert populated_catalog.get_at(0).get_position() == Point(3, 6)
        populated_catalog.scale_all(3, False)
        assert populated_catalog.get_at(0).get_position() == Point(1, 2)

    def test_scale_keeps_measures(self, populated_catalog):
        before = [m for s in populated_catalog for m in (s.get_area(), s.get_perimeter())]
        populated_catalog.scale_all(4, True)
        after = [m for s in populated_catalog for m in (s.get_area(), s.get_perimeter())]
        assert after == pytest.approx(before)

    def test_scale_zero_decrease_raises_without_changes(self, populated_catalog):
        before = [s.get_position() for s in populated_catalog]
        with pytest.raises(ValueError):
            populated_catalog.scale_all(0, False)
        assert [s.get_position() for s in populated_catalog] == before

    def test_bulk_on_empty_catalog(self, empty_catalog):
        empty_catalog.translate_all(1, 1)
        empty_catalog.scale_all(2, False)
        assert empty_catalog.count() == 0


class TestMeasures:
    """area_at / perimeter_at / measure."""

    def test_area_and_perimeter(self, populated_catalog):
        assert populated_catalog.area_at(0) == 12
        assert populated_catalog.perimeter_at(0) == 14
        assert populated_catalog.area_at(1) == 25
        assert populated_catalog.perimeter_at(1) == 20
        assert populated_catalog.area_at(2) == pytest.approx(12.568)
        assert populated_catalog.area_at(3) == pytest.approx(6.0)
        assert populated_catalog.perimeter_at(3) == pytest.approx(12.0)

    def test_invalid_index_returns_zero(self, populated_catalog):
        assert populated_catalog.area_at(9) == 0
        assert populated_catalog.perimeter_at(-1) == 0

    def test_zero_area_shape_matches_not_found_sentinel(self):
        catalog = ShapeCatalog()
        catalog.add(Rectangle(Point(0, 0), 0, 5))
        assert catalog.area_at(0) == catalog.area_at(1) == 0
        # measure() tells them apart
        assert catalog.measure(0) == (0.0, 10.0)
        assert catalog.measure(1) is None

    def test_measure(self, populated_catalog):
        area, perimeter = populated_catalog.measure(3)
        assert area == pytest.approx(6.0)
        assert perimeter == pytest.approx(12.0)


class TestDisplayAll:
    """display_all concatenation."""

    def test_empty(self, empty_catalog):
        assert empty_catalog.display_all() == ""

    def test_each_summary_followed_by_blank_line(self):
        catalog = ShapeCatalog()
        sq = Square(Point(0, 0), 1)
        c = Circle(Point(1, 1), 1)
        catalog.add(sq)
        catalog.add(c)
        assert catalog.display_all() == sq.display() + "\n\n" + c.display() + "\n\n"

    def test_order(self, populated_catalog):
        text = populated_catalog.display_all()
        positions = [text.index(name) for name in ("Rectangle", "Square", "Circle", "Triangle")]
        assert positions == sorted(positions)
