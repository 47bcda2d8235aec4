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
import multiprocessing
import pickle
import threading

import zmq

import pidarts
from ..board import runBoard
from .._types import BoardFault

# Message types
DART = b"D"
RESULT = b"R"
SHUTDOWN = b"S"

LINGER_TIME = 1000
JOIN_TIMEOUT = 5


def createZMQSocket(context, sock_type):
    """Create a socket of the given sock_type holding at most one message in
    each direction."""
    sock = context.socket(sock_type)
    sock.setsockopt(zmq.LINGER, LINGER_TIME)
    sock.setsockopt(zmq.SNDHWM, 1)
    sock.setsockopt(zmq.RCVHWM, 1)
    return sock


class ZMQEndpoint(object):
    """Board side of a ZMQChannel."""

    def __init__(self, context, address):
        self.socket = createZMQSocket(context, zmq.PAIR)
        self.socket.connect(address)

    def sendResult(self, value):
        self.socket.send_multipart([
            RESULT,
            pickle.dumps(value, pickle.HIGHEST_PROTOCOL),
        ])

    def recvCoordinate(self):
        msg = self.socket.recv_multipart()
        if msg[0] == SHUTDOWN:
            return None
        return pickle.loads(msg[1])

    def close(self):
        self.socket.close()


def serveBoard(index, address, context=None):
    """Entry point of a board thread or process. A process passes no context
    and builds its own."""
    ownContext = context is None
    if ownContext:
        context = zmq.Context()
    endpoint = ZMQEndpoint(context, address)
    try:
        return runBoard(index, endpoint)
    finally:
        endpoint.close()
        if ownContext:
            context.term()


class ZMQChannel(object):
    """Farmer side of the PAIR socket linking it to one dart board."""

    def __init__(self, context, index, transport="inproc"):
        self.index = index
        self.worker = None
        self.socket = createZMQSocket(context, zmq.PAIR)
        if transport == "inproc":
            self.address = "inproc://pidarts-{0}-board-{1}".format(
                id(context),
                index,
            )
            self.socket.bind(self.address)
        else:
            port = self.socket.bind_to_random_port("tcp://127.0.0.1")
            self.address = "tcp://127.0.0.1:{0}".format(port)

    def start(self, worker):
        worker.start()
        self.worker = worker

    def pollResult(self):
        if not self.socket.poll(0):
            return None
        return self.recvResult()

    def recvResult(self):
        msg = self.socket.recv_multipart()
        if msg[0] != RESULT:
            raise BoardFault(
                "Dart board {0} sent an unknown message {1!r}.".format(
                    self.index,
                    msg[0],
                )
            )
        return pickle.loads(msg[1])

    def sendCoordinate(self, coordinate):
        self.socket.send_multipart([
            DART,
            pickle.dumps(coordinate, pickle.HIGHEST_PROTOCOL),
        ])

    def close(self):
        """Stop the board, then release the socket."""
        if self.worker is not None:
            # The board may not have connected yet
            self.socket.setsockopt(zmq.SNDTIMEO, JOIN_TIMEOUT * 1000)
            try:
                self.socket.send(SHUTDOWN)
            except zmq.error.Again:
                pidarts.logger.warning(
                    "Dart board {0} could not be told to stop.".format(
                        self.index
                    )
                )
            else:
                self.worker.join(JOIN_TIMEOUT)
            if self.worker.is_alive():
                pidarts.logger.warning(
                    "Dart board {0} did not stop in time.".format(self.index)
                )
                if hasattr(self.worker, "terminate"):
                    self.worker.terminate()
                    self.worker.join()
        self.socket.close()


class ZMQBoardPool(object):
    """Dart boards running as threads (inproc transport) or as processes
    (tcp transport), each reached through its own ZMQChannel."""

    def __init__(self, boards, transport="inproc"):
        self.context = zmq.Context()
        self.channels = []
        try:
            for index in range(boards):
                channel = ZMQChannel(self.context, index, transport)
                if transport == "inproc":
                    worker = threading.Thread(
                        target=serveBoard,
                        args=(index, channel.address, self.context),
                        name="DartBoard-{0}".format(index),
                    )
                else:
                    worker = multiprocessing.Process(
                        target=serveBoard,
                        args=(index, channel.address),
                        name="DartBoard-{0}".format(index),
                    )
                worker.daemon = True
                self.channels.append(channel)
                channel.start(worker)
        except BaseException:
            self.close()
            raise

    def close(self):
        for channel in self.channels:
            channel.close()
        self.channels = []
        if not self.context.closed:
            self.context.destroy()
