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
import time

import pidarts
from .board import HIT, MISS
from ._types import BoardFault, ConfigurationError, FarmReport, StopWatch


class Farmer(object):
    """Throws darts at a pool of boards until the target count is reached.

    The farmer sweeps the boards in index order, polling each one without
    blocking. A board that has answered immediately gets the coordinate the
    farmer is holding, and a new one is drawn for the next board. A board
    still busy is simply skipped until the next sweep.

    All counters live in run(): nothing the farmer tallies is ever visible to
    the boards.
    """

    def __init__(self, channels, generator, dartsToThrow):
        if dartsToThrow < 1:
            raise ConfigurationError(
                "At least one dart must be thrown (got {0}).".format(
                    dartsToThrow
                )
            )
        if not channels:
            raise ConfigurationError("At least one dart board is needed.")
        self.channels = channels
        self.generator = generator
        self.dartsToThrow = dartsToThrow

    def run(self):
        """Dispatch exactly dartsToThrow darts and return a FarmReport.

        The hit tally counts every dispatched dart: each result received is
        added, except the ready signal a board sends before its first dart,
        and the darts still in flight once dispatching stops are collected by
        _settle()."""
        generator = iter(self.generator)
        stopWatch = StopWatch()
        inFlight = [False] * len(self.channels)
        boardDarts = [0] * len(self.channels)
        dartsThrown = 0
        hits = 0

        nextXY = next(generator)
        while dartsThrown < self.dartsToThrow:
            served = 0
            for index, channel in enumerate(self.channels):
                result = channel.pollResult()
                if result is None:
                    continue
                channel.sendCoordinate(nextXY)
                if inFlight[index]:
                    hits += self._check(index, result)
                inFlight[index] = True
                boardDarts[index] += 1
                dartsThrown += 1
                served += 1
                if dartsThrown >= self.dartsToThrow:
                    break
                nextXY = next(generator)
            if not served:
                # Let board threads and processes run.
                time.sleep(0)

        hits += self._settle(inFlight)
        elapsed = stopWatch.halt()

        pidarts.logger.debug("Darts per board: {0}".format(boardDarts))
        return FarmReport(dartsThrown, hits, boardDarts, elapsed)

    def _settle(self, inFlight):
        """Collect the results of darts dispatched but not yet scored."""
        hits = 0
        for index, channel in enumerate(self.channels):
            if inFlight[index]:
                hits += self._check(index, channel.recvResult())
                inFlight[index] = False
        return hits

    def _check(self, index, result):
        if result not in (HIT, MISS):
            raise BoardFault(
                "Dart board {0} returned {1!r}.".format(index, result)
            )
        return result
