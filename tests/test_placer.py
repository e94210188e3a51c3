import unittest

from app.adaptivegrid.layout.geometry import (
    Alignment,
    GridGeometry,
    ItemSize,
    Point,
    Rect,
    Size,
)
from app.adaptivegrid.layout.placer import align_in_cell, grid_origin, place
from app.adaptivegrid.layout.resolver import resolve

SCENARIO = [ItemSize(50, 20), ItemSize(120, 20), ItemSize(30, 20), ItemSize(80, 20)]


class TestPlaceGuards(unittest.TestCase):
    def test_empty_geometry_places_nothing(self):
        geometry = resolve([], 200)
        self.assertEqual(place(geometry, Rect(0, 0, 200, 100), []), [])
        self.assertEqual(place(geometry, Rect(0, 0, 200, 100), SCENARIO), [])

    def test_zero_column_count_places_nothing(self):
        geometry = GridGeometry(0, (50.0,), 20.0, Size(50, 20), item_count=1)
        self.assertEqual(place(geometry, Rect(0, 0, 200, 100), SCENARIO[:1]), [])

    def test_item_outside_resolved_columns_is_skipped(self):
        geometry = GridGeometry(2, (50.0,), 20.0, Size(50, 20), item_count=2)
        placements = place(geometry, Rect(0, 0, 200, 100), SCENARIO[:2], Alignment.TOP_LEADING)
        self.assertEqual([p.index for p in placements], [0])


class TestPlaceScenario(unittest.TestCase):
    def setUp(self):
        self.geometry = resolve(SCENARIO, 200)
        self.first, self.second = self.geometry.column_widths

    def test_top_leading_positions(self):
        placements = place(self.geometry, Rect(0, 0, 200, 48), SCENARIO, Alignment.TOP_LEADING)

        self.assertEqual([(p.column, p.row) for p in placements], [(0, 0), (1, 0), (0, 1), (1, 1)])
        self.assertEqual(placements[0].position, Point(0, 0))
        self.assertAlmostEqual(placements[1].position.x, self.first + 8)
        self.assertEqual(placements[1].position.y, 0)
        self.assertEqual(placements[2].position, Point(0, 28))
        self.assertAlmostEqual(placements[3].position.x, self.first + 8)
        self.assertEqual(placements[3].position.y, 28)

    def test_allocated_size_is_whole_cell(self):
        placements = place(self.geometry, Rect(0, 0, 200, 48), SCENARIO)
        self.assertEqual(placements[0].allocated_size, Size(self.first, 20))
        self.assertEqual(placements[3].allocated_size, Size(self.second, 20))
        self.assertEqual(placements[3].cell.size, Size(self.second, 20))

    def test_cell_contains_centered_item(self):
        placements = place(self.geometry, Rect(0, 0, 300, 100), SCENARIO, Alignment.CENTER)
        for p, size in zip(placements, SCENARIO):
            self.assertLessEqual(p.cell.min_x, p.position.x)
            self.assertGreaterEqual(p.cell.max_x, p.position.x + size.width)
            self.assertLessEqual(p.cell.min_y, p.position.y)
            self.assertGreaterEqual(p.cell.max_y, p.position.y + size.height)

        # Second column starts one gap after the first; grid origin is (50, 26).
        self.assertAlmostEqual(placements[1].cell.min_x, 50 + self.first + 8)
        self.assertAlmostEqual(placements[1].cell.max_x, 50 + self.first + 8 + self.second)
        self.assertAlmostEqual(placements[2].cell.min_y, 26 + 28)

    def test_center_anchors_grid_and_item(self):
        placements = place(self.geometry, Rect(0, 0, 300, 100), SCENARIO, Alignment.CENTER)
        # Grid origin is (50, 26); item 0 is centered in its 56.47-wide column.
        self.assertAlmostEqual(placements[0].position.x, 50 + (self.first - 50) / 2)
        self.assertAlmostEqual(placements[0].position.y, 26)

    def test_trailing_anchors_grid_and_item(self):
        placements = place(self.geometry, Rect(0, 0, 300, 100), SCENARIO, Alignment.TRAILING)
        self.assertAlmostEqual(placements[0].position.x, 100 + self.first - 50)

    def test_bounds_offset_is_respected(self):
        placements = place(self.geometry, Rect(10, 15, 200, 48), SCENARIO, Alignment.TOP_LEADING)
        self.assertEqual(placements[0].position, Point(10, 15))
        self.assertEqual(placements[2].position, Point(10, 43))

    def test_place_is_idempotent(self):
        bounds = Rect(0, 0, 320, 90)
        self.assertEqual(
            place(self.geometry, bounds, SCENARIO, Alignment.BOTTOM_TRAILING),
            place(self.geometry, bounds, SCENARIO, Alignment.BOTTOM_TRAILING),
        )


class TestInCellAlignment(unittest.TestCase):
    def test_shorter_item_aligns_vertically_in_row(self):
        items = [ItemSize(40, 10), ItemSize(40, 20)]
        geometry = resolve(items, 88)
        bounds = Rect(0, 0, 88, 20)

        bottom = place(geometry, bounds, items, Alignment.BOTTOM_LEADING)
        self.assertEqual(bottom[0].position, Point(0, 10))
        center = place(geometry, bounds, items, Alignment.LEADING)
        self.assertEqual(center[0].position, Point(0, 5))
        top = place(geometry, bounds, items, Alignment.TOP_LEADING)
        self.assertEqual(top[0].position, Point(0, 0))

    def test_leading_and_trailing_mirror_about_bounds_center(self):
        items = [ItemSize(40, 20)] * 3
        geometry = resolve(items, 200)
        bounds = Rect(0, 0, 300, 40)

        leading = place(geometry, bounds, items, Alignment.LEADING)
        trailing = place(geometry, bounds, items, Alignment.TRAILING)

        mirrored = sorted(2 * 150 - p.position.x - 40 for p in leading)
        actual = sorted(p.position.x for p in trailing)
        for m, a in zip(mirrored, actual):
            self.assertAlmostEqual(m, a)

    def test_helpers(self):
        bounds = Rect(0, 0, 100, 100)
        self.assertEqual(grid_origin(bounds, Size(40, 20), Alignment.BOTTOM_TRAILING), Point(60, 80))
        self.assertEqual(grid_origin(bounds, Size(40, 20), Alignment.CENTER), Point(30, 40))
        # Oversized grids spill out of the bounds instead of being clamped.
        self.assertEqual(grid_origin(bounds, Size(140, 20), Alignment.TRAILING), Point(-40, 40))
        self.assertEqual(
            align_in_cell(Rect(10, 10, 50, 30), ItemSize(20, 10), Alignment.TOP_TRAILING),
            Point(40, 10),
        )


if __name__ == "__main__":
    unittest.main()
