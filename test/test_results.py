import os
import shutil
import tempfile
import unittest

from pidarts.results import DELIMITER, formatResults, writeResults
from pidarts._types import PiEstimate

ESTIMATE = PiEstimate(estimate=3.14, reference=3.14159, error=0.0506,
                      dartsThrown=1000, hits=785)


class TestResults(unittest.TestCase):
    def __init__(self, *args, **kwargs):
        super(TestResults, self).__init__(*args, **kwargs)

    def setUp(self):
        self.directory = tempfile.mkdtemp()
        self.filename = os.path.join(self.directory, "PiResults.txt")

    def tearDown(self):
        shutil.rmtree(self.directory)

    def test_fields(self):
        text = formatResults(ESTIMATE, 1.5, "rand in farmer only")
        self.assertIn("NOTE: rand in farmer only", text)
        self.assertIn("Pi approx   = 3.140000 using 1000 darts", text)
        self.assertIn("Pi actually = 3.141590 Error = 0.050600%", text)
        self.assertIn("Elapsed time = 1.500000s", text)
        self.assertTrue(text.endswith(DELIMITER))

    def test_appends(self):
        writeResults(self.filename, ESTIMATE, 1.0, "first")
        writeResults(self.filename, ESTIMATE, 2.0, "second")
        with open(self.filename) as f:
            content = f.read()
        self.assertEqual(content.count(DELIMITER), 2)
        self.assertLess(content.index("first"), content.index("second"))

    def test_io_error(self):
        filename = os.path.join(self.directory, "missing", "PiResults.txt")
        self.assertRaises(OSError, writeResults, filename, ESTIMATE, 1.0, "")


if __name__ == "__main__":
    unittest.main(verbosity=2)
