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
"""
A dart board scores the darts it is sent, one at a time.

Boards do not know how they are connected to the farmer. They talk to an
endpoint offering two calls:

    sendResult(value)   hand a 0 or 1 back to the farmer
    recvCoordinate()    block until the next dart arrives; None means the
                        farmer is shutting the board down
"""

import pidarts

HIT = 1
MISS = 0
# First result sent by a board, before it has seen any dart.
READY = MISS


def classify(coordinate):
    """Returns HIT if the dart lands inside the unit quarter circle."""
    x, y = coordinate
    return HIT if x * x + y * y <= 1.0 else MISS


def runBoard(index, endpoint):
    """Receive, score, send back, until told to stop."""
    endpoint.sendResult(READY)
    scored = 0
    while True:
        coordinate = endpoint.recvCoordinate()
        if coordinate is None:
            break
        endpoint.sendResult(classify(coordinate))
        scored += 1
    pidarts.logger.debug(
        "Dart board {0} stopping after {1} dart(s).".format(index, scored)
    )
    return scored
