import unittest
from itertools import islice

import pidarts
from pidarts.generator import CoordinateGenerator
from pidarts._types import Coordinate


class TestCoordinateGenerator(unittest.TestCase):
    def __init__(self, *args, **kwargs):
        super(TestCoordinateGenerator, self).__init__(*args, **kwargs)

    def test_range(self):
        generator = CoordinateGenerator(1)
        for _ in range(1000):
            coordinate = generator.next()
            self.assertIsInstance(coordinate, Coordinate)
            self.assertTrue(0.0 <= coordinate.x < 1.0)
            self.assertTrue(0.0 <= coordinate.y < 1.0)

    def test_same_seed_same_darts(self):
        first = list(islice(CoordinateGenerator(42), 100))
        second = list(islice(CoordinateGenerator(42), 100))
        self.assertEqual(first, second)

    def test_other_seed_other_darts(self):
        first = list(islice(CoordinateGenerator(42), 10))
        second = list(islice(CoordinateGenerator(43), 10))
        self.assertNotEqual(first, second)

    def test_default_seed(self):
        self.assertEqual(CoordinateGenerator().seed, pidarts.RANDOM_SEED)
        self.assertEqual(
            CoordinateGenerator().next(),
            CoordinateGenerator(pidarts.RANDOM_SEED).next(),
        )

    def test_iteration_matches_next(self):
        generator = CoordinateGenerator(7)
        iterated = next(iter(generator))
        self.assertEqual(iterated, CoordinateGenerator(7).next())


if __name__ == "__main__":
    unittest.main(verbosity=2)
