import math
import unittest

from app.jigsaw.layout.errors import InvalidInputError
from app.jigsaw.layout.objectives import (
    DEFAULT_IDEAL_HEIGHT,
    get_objective,
    penalize_small,
    squared_error,
)


class TestObjectives(unittest.TestCase):
    def test_default_ideal(self):
        self.assertEqual(DEFAULT_IDEAL_HEIGHT, 0.25)

    def test_squared_error_symmetric(self):
        cost = squared_error()
        self.assertEqual(cost(0.25), 0.0)
        self.assertAlmostEqual(cost(0.5), 0.0625)
        self.assertAlmostEqual(cost(0.0), 0.0625)
        self.assertAlmostEqual(squared_error(0.5)(0.25), 0.0625)

    def test_penalize_small(self):
        cost = penalize_small()
        self.assertEqual(cost(0.25), 0.0)
        self.assertAlmostEqual(cost(0.125), math.log(2))
        self.assertAlmostEqual(cost(0.5), 0.25)
        # Grows without bound as rows get flatter.
        self.assertGreater(cost(1e-9), cost(0.01))
        self.assertGreater(cost(0.01), squared_error()(0.01))

    def test_get_objective(self):
        self.assertAlmostEqual(get_objective("squared_error")(0.5), 0.0625)
        self.assertAlmostEqual(get_objective("penalize_small", 0.5)(0.25), math.log(2))
        with self.assertRaises(InvalidInputError):
            get_objective("sum_of_everything")

    def test_invalid_ideal(self):
        with self.assertRaises(InvalidInputError):
            squared_error(0)
        with self.assertRaises(InvalidInputError):
            penalize_small(-0.1)
        with self.assertRaises(InvalidInputError):
            squared_error(float("inf"))


if __name__ == "__main__":
    unittest.main()
