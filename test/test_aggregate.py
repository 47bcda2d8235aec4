import unittest

import pidarts
from pidarts.aggregate import aggregate, errorPercent, estimatePi
from pidarts._types import ConfigurationError, FarmReport


class TestAggregate(unittest.TestCase):
    def __init__(self, *args, **kwargs):
        super(TestAggregate, self).__init__(*args, **kwargs)

    def test_estimate(self):
        self.assertAlmostEqual(estimatePi(1000, 785), 3.14)
        self.assertAlmostEqual(estimatePi(4, 3), 3.0)

    def test_error(self):
        self.assertAlmostEqual(errorPercent(3.14, 3.14159), 0.0506, places=4)
        self.assertAlmostEqual(errorPercent(3.14159, 3.14159), 0.0)

    def test_error_is_absolute(self):
        self.assertAlmostEqual(errorPercent(3.2, 3.14159),
                               errorPercent(3.14159 * 2 - 3.2, 3.14159))

    def test_default_reference(self):
        self.assertEqual(errorPercent(3.0), errorPercent(3.0,
                                                         pidarts.PI_REFERENCE))

    def test_no_darts(self):
        self.assertRaises(ConfigurationError, estimatePi, 0, 0)
        self.assertRaises(ConfigurationError, estimatePi, -1, 0)

    def test_aggregate(self):
        result = aggregate(FarmReport(1000, 785, [1000], 0.5), 3.14159)
        self.assertAlmostEqual(result.estimate, 3.14)
        self.assertAlmostEqual(result.error, 0.0506, places=4)
        self.assertEqual(result.reference, 3.14159)
        self.assertEqual(result.dartsThrown, 1000)
        self.assertEqual(result.hits, 785)


if __name__ == "__main__":
    unittest.main(verbosity=2)
