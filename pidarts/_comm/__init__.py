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
"""Links between the farmer and its dart boards.

A board pool exposes ``channels``, one per board in index order, and
``close()``. Each channel offers the farmer:

    pollResult()             the board's result, or None if not ready yet
    recvResult()             block until the board's result arrives
    sendCoordinate(coord)    hand the next dart to a board that just answered
    close()                  stop the board
"""

BACKENDS = ('greenlet', 'thread', 'process')


def openBoards(boards, backend='thread'):
    """Start `boards` dart boards on the given backend."""
    if backend == 'greenlet':
        from .greenletchannel import GreenletBoardPool
        return GreenletBoardPool(boards)
    elif backend == 'thread':
        from .zmqchannel import ZMQBoardPool
        return ZMQBoardPool(boards, transport="inproc")
    elif backend == 'process':
        from .zmqchannel import ZMQBoardPool
        return ZMQBoardPool(boards, transport="tcp")
    raise ValueError("Unknown backend '{0}'.".format(backend))
