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
import random

import pidarts
from ._types import Coordinate


class CoordinateGenerator(object):
    """Sequential source of dart coordinates.

    Every coordinate of a run comes from this single generator, owned by the
    farmer, so a given seed always yields the same sequence of darts no
    matter how many boards consume them or in which order."""

    def __init__(self, seed=None):
        self.seed = pidarts.RANDOM_SEED if seed is None else seed
        self._random = random.Random(self.seed)

    def next(self):
        """Returns a new Coordinate drawn uniformly from [0,1)x[0,1)."""
        x = self._random.random()
        y = self._random.random()
        return Coordinate(x, y)

    def __next__(self):
        return self.next()

    def __iter__(self):
        return self
