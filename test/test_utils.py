import io
import logging
import unittest

from pidarts import utils
from pidarts._types import ConfigurationError


class TestUtils(unittest.TestCase):
    def __init__(self, *args, **kwargs):
        super(TestUtils, self).__init__(*args, **kwargs)

    def test_getCpuCount(self):
        self.assertIsInstance(utils.getCPUcount(), int)
        self.assertTrue(utils.getCPUcount() > 0)

    def test_checkConfiguration(self):
        utils.checkConfiguration(1, 1)
        utils.checkConfiguration(1500, 10000000)

    def test_checkConfiguration_boards(self):
        for boards in (0, -1, None):
            self.assertRaises(ConfigurationError,
                              utils.checkConfiguration, boards, 10)

    def test_checkConfiguration_darts(self):
        for darts in (0, -10, None):
            self.assertRaises(ConfigurationError,
                              utils.checkConfiguration, 2, darts)

    def test_askBoardCount(self):
        stdout = io.StringIO()
        boards = utils.askBoardCount(io.StringIO("8\n"), stdout)
        self.assertEqual(boards, 8)
        self.assertTrue(stdout.getvalue().startswith(utils.BOARD_PROMPT))
        self.assertIn("8 boards", stdout.getvalue())

    def test_askBoardCount_garbage(self):
        self.assertRaises(ConfigurationError, utils.askBoardCount,
                          io.StringIO("many\n"), io.StringIO())

    def test_initLogging(self):
        logger = utils.initLogging(2, name="PIDARTSTEST")
        self.assertEqual(logger.name, "PIDARTSTESTLogger")
        self.assertEqual(logger.level, logging.DEBUG)
        logger = utils.initLogging(0, name="PIDARTSTEST")
        self.assertEqual(logger.level, logging.WARNING)


if __name__ == "__main__":
    t = unittest.TestLoader().loadTestsFromTestCase(TestUtils)
    unittest.TextTestRunner(verbosity=2).run(t)
