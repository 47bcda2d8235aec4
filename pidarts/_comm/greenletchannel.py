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
import greenlet

from ..board import runBoard
from .._types import BoardFault


class GreenletEndpoint(object):
    """Board side of a GreenletChannel."""

    def __init__(self, channel):
        self.channel = channel

    def sendResult(self, value):
        if self.channel.result is not None:
            raise BoardFault(
                "Dart board {0} sent a result before its previous one was "
                "read.".format(self.channel.index)
            )
        self.channel.result = value

    def recvCoordinate(self):
        # Park the board and give control back to the farmer until it sends
        # the next dart.
        return self.channel.board.parent.switch()


class GreenletChannel(object):
    """Dart board running as a greenlet of the farmer.

    Sending a coordinate switches straight into the board, which scores it
    and parks again in recvCoordinate(): the handoff is fully synchronous and
    the result is ready as soon as sendCoordinate() returns."""

    def __init__(self, index):
        self.index = index
        self.result = None
        self.board = greenlet.greenlet(runBoard)
        # Runs up to the first recvCoordinate(), leaving the ready signal.
        self.board.switch(index, GreenletEndpoint(self))

    def pollResult(self):
        result, self.result = self.result, None
        return result

    def recvResult(self):
        result = self.pollResult()
        if result is None:
            raise BoardFault(
                "Dart board {0} holds no result.".format(self.index)
            )
        return result

    def sendCoordinate(self, coordinate):
        if self.board.dead:
            raise BoardFault(
                "Dart board {0} is not running.".format(self.index)
            )
        self.board.switch(coordinate)

    def close(self):
        if not self.board.dead:
            self.board.switch(None)


class GreenletBoardPool(object):
    """Every board cooperatively scheduled inside the farmer's thread."""

    def __init__(self, boards):
        self.channels = [GreenletChannel(index) for index in range(boards)]

    def close(self):
        for channel in self.channels:
            channel.close()
