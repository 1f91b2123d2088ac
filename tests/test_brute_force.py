import random
import unittest

from app.jigsaw.layout.brute_force import BRUTE_FORCE_MAX_ITEMS, all_splits, brute_force_partition
from app.jigsaw.layout.errors import InvalidInputError, NoValidPartitionError
from app.jigsaw.layout.geometry import row_height
from app.jigsaw.layout.objectives import penalize_small, squared_error
from app.jigsaw.layout.partition import best_partition


def _total_cost(ratios, margin, bounds, objective):
    return sum(objective(row_height(ratios[s:e + 1], margin)) for s, e in bounds)


class TestAllSplits(unittest.TestCase):
    def test_counts(self):
        self.assertEqual(list(all_splits(0)), [()])
        self.assertEqual(list(all_splits(1)), [((0, 0),)])
        for n in range(1, 8):
            self.assertEqual(sum(1 for _ in all_splits(n)), 2 ** (n - 1))

    def test_three_items(self):
        splits = set(all_splits(3))
        self.assertEqual(
            splits,
            {
                ((0, 2),),
                ((0, 0), (1, 2)),
                ((0, 1), (2, 2)),
                ((0, 0), (1, 1), (2, 2)),
            },
        )

    def test_single_row_first_and_restartable(self):
        self.assertEqual(next(all_splits(5)), ((0, 4),))
        self.assertEqual(list(all_splits(4)), list(all_splits(4)))

    def test_each_split_is_contiguous_cover(self):
        for bounds in all_splits(6):
            covered = [i for s, e in bounds for i in range(s, e + 1)]
            self.assertEqual(covered, list(range(6)))


class TestBruteForcePartition(unittest.TestCase):
    def test_reference_scenario(self):
        result = brute_force_partition([1.5, 1.0, 2.0], 0.02)
        self.assertEqual(result.bounds, ((0, 2),))
        self.assertAlmostEqual(result.cost, (0.92 / 4.5 - 0.25) ** 2)

    def test_skips_invalid_rows(self):
        result = brute_force_partition([1.0, 1.0, 1.0, 1.0], 0.25)
        self.assertEqual(result.bounds, ((0, 1), (2, 3)))
        self.assertEqual(result.cost, 0.03125)

    def test_mean_aggregate(self):
        result = brute_force_partition([1.0, 1.0, 1.0, 1.0], 0.25, aggregate="mean")
        self.assertEqual(result.bounds, ((0, 1), (2, 3)))
        self.assertEqual(result.cost, 0.015625)

    def test_empty(self):
        result = brute_force_partition([], 0.1)
        self.assertEqual(result.bounds, ())
        self.assertEqual(result.cost, 0.0)

    def test_no_valid_partition(self):
        with self.assertRaises(NoValidPartitionError):
            brute_force_partition([1.0], 0.6)
        with self.assertRaises(NoValidPartitionError):
            brute_force_partition([1.0, 2.0, 3.0], 0.5)

    def test_size_gate(self):
        with self.assertRaises(InvalidInputError):
            brute_force_partition([1.0] * (BRUTE_FORCE_MAX_ITEMS + 1), 0.0)
        with self.assertRaises(InvalidInputError):
            brute_force_partition([1.0] * 5, 0.0, max_items=4)

    def test_agrees_with_dynamic_program_under_sum(self):
        rng = random.Random(20240601)
        for objective in (squared_error(), penalize_small(), squared_error(0.4)):
            for _ in range(40):
                n = rng.randint(1, 6)
                ratios = [rng.uniform(0.5, 2.0) for _ in range(n)]
                margin = rng.choice([0.0, 0.01, 0.03, 0.1, 0.2])

                oracle = brute_force_partition(ratios, margin, objective)
                fast = best_partition(ratios, margin, objective, aggregate="sum")

                self.assertAlmostEqual(fast.cost, oracle.cost, places=9)
                # Tied alternatives are allowed, but the DP's rows must really
                # cost what it claims.
                self.assertAlmostEqual(
                    _total_cost(ratios, margin, fast.bounds, objective), oracle.cost, places=9
                )


if __name__ == "__main__":
    unittest.main()
