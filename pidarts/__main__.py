#
#    This file is part of pidarts, Pi on the Dart Board.
#
#    pidarts is free software: you can redistribute it and/or modify
#    it under the terms of the GNU Lesser General Public License as
#    published by the Free Software Foundation, either version 3 of
#    the License, or (at your option) any later version.
#
#    pidarts is distributed in the hope that it will be useful,
#    but WITHOUT ANY WARRANTY; without even the implied warranty of
#    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#    GNU Lesser General Public License for more details.
#
#    You should have received a copy of the GNU Lesser General Public
#    License along with pidarts. If not, see <http://www.gnu.org/licenses/>.
#
# Global imports
import argparse
import signal
import sys
import traceback

# Local imports
import pidarts
from pidarts import utils
from pidarts._comm import BACKENDS, openBoards
from pidarts._types import ConfigurationError
from pidarts.aggregate import aggregate
from pidarts.farmer import Farmer
from pidarts.generator import CoordinateGenerator
from pidarts.results import writeResults


class PiDartsApp(object):
    """Pi on the Dart Board. Starts the boards, farms the darts out and
    reports."""

    def __init__(self, boards, darts=None, seed=None, reference=None,
                 results=None, backend='thread', note=None):
        if darts is None:
            darts = pidarts.DARTS_TO_THROW
        # Refuse before anything is started
        utils.checkConfiguration(boards, darts)

        self.boards = boards
        self.darts = darts
        self.seed = pidarts.RANDOM_SEED if seed is None else seed
        self.reference = (pidarts.PI_REFERENCE if reference is None
                          else reference)
        self.results = results
        self.backend = backend
        self.note = pidarts.RESULTS_NOTE if note is None else note

        self.pool = None
        self.report = None
        self.piEstimate = None

    def run(self):
        """Throw every dart and return the resulting PiEstimate."""
        pidarts.logger.info("Max cores={0} Number of dart boards={1}".format(
            utils.getCPUcount(),
            self.boards,
        ))
        pidarts.logger.info("Start Dart Board {0}s...".format(self.backend))
        self.pool = openBoards(self.boards, self.backend)

        farmer = Farmer(
            self.pool.channels,
            CoordinateGenerator(self.seed),
            self.darts,
        )
        self.report = farmer.run()
        pidarts.logger.info("Total number of darts thrown = {0}".format(
            self.report.dartsThrown
        ))
        pidarts.logger.info("Final hit count = {0}".format(self.report.hits))

        self.piEstimate = aggregate(self.report, self.reference)
        pidarts.logger.info("Pi approx   = {0} using {1} darts".format(
            self.piEstimate.estimate,
            self.piEstimate.dartsThrown,
        ))
        pidarts.logger.info("Pi actually = {0}  Error = {1} %".format(
            self.piEstimate.reference,
            self.piEstimate.error,
        ))
        pidarts.logger.info("Elapsed time = {0:.6f}s".format(
            self.report.elapsed
        ))

        if self.results:
            writeResults(
                self.results,
                self.piEstimate,
                self.report.elapsed,
                self.note,
            )
        return self.piEstimate

    def close(self):
        """Stop every dart board."""
        if self.pool is not None:
            self.pool.close()
            self.pool = None
            pidarts.logger.debug("Dart boards stopped.")


def makeParser():
    """Create the pidarts module arguments parser."""
    parser = argparse.ArgumentParser(description="Estimates Pi by throwing "
                                                 "darts at concurrent dart "
                                                 "boards.",
                                     prog="{0} -m pidarts".format(
                                         sys.executable))
    parser.add_argument('-n', '--boards',
                        help="Number of dart boards to throw darts at "
                             "(asked on the terminal if omitted)",
                        type=int,
                        metavar="NumberOfBoards")
    parser.add_argument('--darts',
                        help="Total number of darts to throw (default: "
                             "{0})".format(pidarts.DARTS_TO_THROW),
                        type=int,
                        default=pidarts.DARTS_TO_THROW)
    parser.add_argument('--seed',
                        help="Seed of the dart coordinates generator "
                             "(default: {0})".format(pidarts.RANDOM_SEED),
                        type=int,
                        default=pidarts.RANDOM_SEED)
    parser.add_argument('--reference',
                        help="Value of Pi the estimate is compared to "
                             "(default: {0})".format(pidarts.PI_REFERENCE),
                        type=float,
                        default=pidarts.PI_REFERENCE)
    parser.add_argument('--results',
                        help="File the results are appended to (default: "
                             "{0})".format(pidarts.RESULTS_FILE),
                        default=pidarts.RESULTS_FILE,
                        metavar="FileName")
    parser.add_argument('--note',
                        help="Note heading the results block",
                        default=pidarts.RESULTS_NOTE)
    parser.add_argument('--backend',
                        help="How the dart boards are run",
                        choices=BACKENDS,
                        default='thread')
    parser.add_argument('--verbose', '-v',
                        action='count',
                        help="Verbosity level (-vv for more)",
                        default=1)
    parser.add_argument('--quiet', '-q',
                        action='store_true')
    parser.add_argument('--log',
                        help="The file to log the output. (default is stdout)",
                        default=None,
                        metavar="FileName")
    return parser


def main(argv=None):
    """Execution of the pidarts module. Parses its command-line arguments and
    throws the darts."""
    parser = makeParser()
    args = parser.parse_args(argv)

    pidarts.logger = utils.initLogging(
        args.verbose if not args.quiet else 0,
        filename=args.log,
    )

    try:
        signal.signal(signal.SIGQUIT, utils.KeyboardInterruptHandler)
    except AttributeError:
        # SIGQUIT doesn't exist on Windows
        signal.signal(signal.SIGTERM, utils.KeyboardInterruptHandler)

    try:
        boards = args.boards
        if boards is None:
            boards = utils.askBoardCount()
        app = PiDartsApp(boards, args.darts, args.seed, args.reference,
                         args.results, args.backend, args.note)
    except ConfigurationError as e:
        pidarts.logger.error(str(e))
        return 2

    try:
        app.run()
    except Exception:
        pidarts.logger.error('Error while throwing darts:')
        pidarts.logger.error(traceback.format_exc())
        return 1
    finally:
        app.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
