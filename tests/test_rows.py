import random
import time
import unittest

from app.perfectgrid.errors import InvalidInput
from app.perfectgrid.layout.params import GridParams
from app.perfectgrid.layout.rows import Row, build_rows

GALLERY = [0.6678, 1.5086, 0.5623, 0.6666, 1.7396, 1.7396]


def _spans(rows):
    return [(row.start, row.end) for row in rows]


class TestBuildRows(unittest.TestCase):
    def test_gallery_splits_four_and_two(self):
        params = GridParams(full_width=1526.0, min_height=200.0, max_height=444.0, min_item_width=175.0, gap=4.0)
        rows = build_rows(GALLERY, params)

        self.assertEqual(_spans(rows), [(0, 4), (4, 6)])
        # First row would be ~444.6px tall, clamped to the maximum.
        self.assertAlmostEqual(rows[0].solved_height, 444.6, delta=0.1)
        self.assertEqual(rows[0].height, 444.0)
        # Second row fits within bounds untouched.
        self.assertAlmostEqual(rows[1].height, 437.46, delta=0.01)
        self.assertEqual(rows[1].height, rows[1].solved_height)

    def test_narrow_item_shrinks_row(self):
        # All six items stay above min_height together (~218.8px), but the
        # 0.5623 item would only be ~123px wide; with five items it would be
        # ~165px, so the row stops at four.
        params = GridParams(full_width=1526.0, min_height=200.0, max_height=444.0, min_item_width=175.0, gap=4.0)
        self.assertEqual(_spans(build_rows(GALLERY, params)), [(0, 4), (4, 6)])

        relaxed = GridParams(full_width=1526.0, min_height=200.0, max_height=444.0, min_item_width=100.0, gap=4.0)
        rows = build_rows(GALLERY, relaxed)
        self.assertEqual(_spans(rows), [(0, 6)])
        self.assertAlmostEqual(rows[0].height, 218.75, delta=0.01)

    def test_equal_ratios_close_before_overflow(self):
        params = GridParams(full_width=1602.0, min_height=200.0, max_height=500.0, min_item_width=180.0, gap=4.0)
        rows = build_rows([0.875] * 12, params)

        # 8 items => ~224.9px; a 9th would give ~199.4px, further from the
        # 350px midpoint, so the row closes at 8.
        self.assertEqual([row.as_pair()[0] for row in rows], [8, 4])
        self.assertAlmostEqual(rows[0].height, 1574.0 / 7.0)
        self.assertAlmostEqual(rows[1].height, 1590.0 / 3.5)

    def test_squares_exactly_at_min_height(self):
        params = GridParams(full_width=800.0, min_height=200.0, max_height=500.0, min_item_width=180.0, gap=0.0)
        self.assertEqual([r.as_pair() for r in build_rows([1.0] * 4, params)], [(4, 200.0)])

    def test_fifth_square_moves_to_next_row(self):
        params = GridParams(full_width=800.0, min_height=200.0, max_height=500.0, min_item_width=180.0, gap=0.0)
        self.assertEqual(
            [r.as_pair() for r in build_rows([1.0] * 5, params)],
            [(4, 200.0), (1, 500.0)],
        )

    def test_tie_takes_the_item(self):
        # Midpoint 200: before = 320 (+120), with = 80 (-120).
        params = GridParams(full_width=320.0, min_height=100.0, max_height=300.0, min_item_width=50.0, gap=0.0)
        rows = build_rows([1.0, 3.0], params)
        self.assertEqual(_spans(rows), [(0, 2)])
        self.assertEqual(rows[0].solved_height, 80.0)
        self.assertEqual(rows[0].height, 100.0)

    def test_closer_option_wins(self):
        params = GridParams(full_width=320.0, min_height=100.0, max_height=300.0, min_item_width=50.0, gap=0.0)
        # 320 / 3.9 ~= 82.1 is closer to 200 than 320: take it.
        self.assertEqual(_spans(build_rows([1.0, 2.9], params)), [(0, 2)])
        # 320 / 4.1 ~= 78.0 is further: close before it.
        rows = build_rows([1.0, 3.1], params)
        self.assertEqual(_spans(rows), [(0, 1), (1, 2)])
        self.assertEqual(rows[0].height, 300.0)
        self.assertAlmostEqual(rows[1].height, 320.0 / 3.1)

    def test_too_wide_first_item_gets_own_row(self):
        params = GridParams(full_width=1000.0, min_height=200.0, max_height=500.0, min_item_width=175.0, gap=0.0)
        rows = build_rows([10.0, 1.0, 1.0], params)
        self.assertEqual(_spans(rows), [(0, 1), (1, 3)])
        self.assertEqual(rows[0].solved_height, 100.0)
        self.assertEqual(rows[0].height, 200.0)
        self.assertEqual(rows[1].height, 500.0)

    def test_single_item(self):
        params = GridParams(full_width=1000.0, min_height=100.0, max_height=400.0, min_item_width=175.0, gap=4.0)
        self.assertEqual([r.as_pair() for r in build_rows([2.0], params)], [(1, 400.0)])
        self.assertEqual([r.as_pair() for r in build_rows([4.0], params)], [(1, 250.0)])

    def test_single_narrow_item_accepted(self):
        # 0.1 * 400 = 40px < 175px, but a one-item row cannot shrink further.
        params = GridParams(full_width=1000.0, min_height=100.0, max_height=400.0, min_item_width=175.0, gap=4.0)
        self.assertEqual([r.as_pair() for r in build_rows([0.1], params)], [(1, 400.0)])

    def test_empty(self):
        params = GridParams(full_width=1000.0, min_height=100.0, max_height=400.0, min_item_width=175.0, gap=4.0)
        self.assertEqual(build_rows([], params), [])

    def test_invalid_inputs_fail_before_work(self):
        params = GridParams(full_width=1000.0, min_height=100.0, max_height=400.0, min_item_width=175.0, gap=4.0)
        with self.assertRaises(InvalidInput):
            build_rows([1.0, 0.0], params)
        with self.assertRaises(InvalidInput):
            build_rows([1.0], GridParams(full_width=1000.0, min_height=500.0, max_height=400.0, min_item_width=175.0))

    def test_real_gallery_of_twenty(self):
        ratios = [
            0.875, 0.875, 0.875, 16.0 / 9.0, 3.5555555555555554,
            0.875, 0.875, 0.875, 0.6648401826484018, 0.875,
            16.0 / 9.0, 0.875, 16.0 / 9.0, 16.0 / 9.0, 16.0 / 9.0,
            0.875, 0.875, 0.875, 0.875, 0.875,
        ]
        params = GridParams(full_width=1526.0, min_height=200.0, max_height=575.0, min_item_width=175.0, gap=4.0)
        rows = build_rows(ratios, params)

        self.assertEqual([row.count for row in rows], [4, 4, 4, 5, 3])
        for row, expected in zip(rows, [343.87, 244.96, 361.11, 213.18, 575.0]):
            self.assertAlmostEqual(row.height, expected, delta=0.01)

    def test_long_row_of_narrow_items_is_fast(self):
        # Every item is too narrow even at max_height, so each one ends up
        # alone in its row.
        params = GridParams(full_width=1000.0, min_height=10.0, max_height=20.0, min_item_width=5.0, gap=0.0)
        started = time.perf_counter()
        rows = build_rows([0.01] * 5000, params)
        elapsed = time.perf_counter() - started

        self.assertEqual(len(rows), 5000)
        self.assertTrue(all(row.count == 1 and row.height == 20.0 for row in rows))
        self.assertLess(elapsed, 2.0)

    def test_row_count_property(self):
        row = Row(start=2, end=5, aspect_sum=3.0, solved_height=120.0, height=150.0)
        self.assertEqual(row.count, 3)
        self.assertEqual(row.as_pair(), (3, 150.0))


class TestBuildRowsProperties(unittest.TestCase):
    def _cases(self, count=60):
        rng = random.Random(1234)
        for _ in range(count):
            full_width = rng.uniform(300.0, 2000.0)
            min_height = rng.uniform(50.0, 300.0)
            params = GridParams(
                full_width=full_width,
                min_height=min_height,
                max_height=min_height + rng.uniform(0.0, 400.0),
                min_item_width=rng.uniform(1.0, 200.0),
                gap=rng.uniform(0.0, 10.0),
            )
            ratios = [rng.uniform(0.2, 4.0) for _ in range(rng.randint(0, 40))]
            yield ratios, params

    def test_rows_partition_input(self):
        for ratios, params in self._cases():
            rows = build_rows(ratios, params)
            expected_start = 0
            for row in rows:
                self.assertEqual(row.start, expected_start)
                self.assertGreater(row.end, row.start)
                expected_start = row.end
            self.assertEqual(expected_start, len(ratios))

    def test_heights_within_bounds(self):
        for ratios, params in self._cases():
            for row in build_rows(ratios, params):
                self.assertGreaterEqual(row.height, params.min_height)
                self.assertLessEqual(row.height, params.max_height)

    def test_multi_item_rows_respect_min_item_width(self):
        for ratios, params in self._cases():
            for row in build_rows(ratios, params):
                if row.count > 1:
                    narrowest = min(ratios[row.start:row.end])
                    self.assertGreaterEqual(narrowest * row.height, params.min_item_width)

    def test_same_input_same_rows(self):
        for ratios, params in self._cases(10):
            self.assertEqual(build_rows(ratios, params), build_rows(list(ratios), params))


if __name__ == "__main__":
    unittest.main()
