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
from collections import namedtuple
import time


# A dart on its way to a board. Both components are in [0, 1).
Coordinate = namedtuple('Coordinate', ['x', 'y'])

# What the farmer hands to the aggregator once dispatching is over.
FarmReport = namedtuple('FarmReport', [
    'dartsThrown',
    'hits',
    'boardDarts',
    'elapsed',
])

# Derived figures of a finished run.
PiEstimate = namedtuple('PiEstimate', [
    'estimate',
    'reference',
    'error',
    'dartsThrown',
    'hits',
])


class StopWatch(object):
    # initialize stopwatch.
    def __init__(self):
        self.totalTime = 0
        self.startTime = time.perf_counter()
        self.halted = False
    # return elapsed time.
    def get(self):
        if self.halted:
            return self.totalTime
        return self.totalTime + time.perf_counter() - self.startTime
    # halt stopwatch, keeping the accumulated time.
    def halt(self):
        if not self.halted:
            self.halted = True
            self.totalTime += time.perf_counter() - self.startTime
        return self.totalTime
    # resume stopwatch.
    def resume(self):
        self.halted = False
        self.startTime = time.perf_counter()
    # set stopwatch to zero.
    def reset(self):
        self.__init__()


class ConfigurationError(ValueError):
    """A board count or dart count that cannot drive a run."""
    pass


class BoardFault(Exception):
    """A dart board broke the dispatch protocol. This is a program defect."""
    pass
