from pidarts._types import StopWatch

import unittest
import time

class TestStopWatch(unittest.TestCase):
    def __init__(self, *args, **kwargs):
        super(TestStopWatch, self).__init__(*args, **kwargs)

    def test_get(self):
        watch = StopWatch()
        first = watch.get()
        time.sleep(0.1)
        second = watch.get()
        # Sleeping may overshoot a tiny bit
        self.assertAlmostEqual(second - first, 0.1, places=1)
        self.assertGreaterEqual(second - first, 0.09)

    def test_halt(self):
        watch = StopWatch()
        halted = watch.halt()
        first = watch.get()
        time.sleep(0.1)
        second = watch.get()
        self.assertEqual(first, second)
        self.assertEqual(halted, first)

    def test_double_halt(self):
        watch = StopWatch()
        first = watch.halt()
        time.sleep(0.05)
        self.assertEqual(watch.halt(), first)

    def test_resume(self):
        watch = StopWatch()
        watch.halt()
        first = watch.get()
        watch.resume()
        time.sleep(0.1)
        second = watch.get()
        self.assertAlmostEqual(second - first, 0.1, places=1)

    def test_reset(self):
        watch = StopWatch()
        time.sleep(0.1)
        watch.reset()
        self.assertLess(watch.get(), 0.01)


if __name__ == "__main__":
    t = unittest.TestLoader().loadTestsFromTestCase(TestStopWatch)
    unittest.TextTestRunner(verbosity=2).run(t)
