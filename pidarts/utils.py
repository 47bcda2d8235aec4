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
from multiprocessing import cpu_count
from logging.config import dictConfig
import logging
import sys

from ._types import ConfigurationError


BOARD_PROMPT = "Enter number of dart boards to throw darts at: "

loggingConfig = {}


def initLogging(verbosity=0, name="PIDARTS", filename=None):
        """Creates a logger."""
        global loggingConfig

        verbose_levels = {
            -2: "CRITICAL",
            -1: "ERROR",
            0: "WARNING",
            1: "INFO",
            2: "DEBUG",
            3: "NOTSET",
        }
        verbosity = max(-2, min(verbosity, 3))
        if filename:
            handler = {
                "class": "logging.FileHandler",
                "formatter": "{name}Formatter".format(name=name),
                "filename": filename,
            }
        else:
            handler = {
                "class": "logging.StreamHandler",
                "formatter": "{name}Formatter".format(name=name),
                "stream": "ext://sys.stdout",
            }
        log_handlers = {"console": handler}
        loggingConfig.update({
            "{name}Logger".format(name=name):
            {
                "handlers": ["console"],
                "level": verbose_levels[verbosity],
            },
        })
        dict_log_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": log_handlers,
            "loggers": loggingConfig,
            "formatters":
            {
                "{name}Formatter".format(name=name):
                {
                    "format": "[%(asctime)-15s] %(module)-9s "
                              "%(levelname)-7s %(message)s",
                },
            },
        }
        dictConfig(dict_log_config)
        return logging.getLogger("{name}Logger".format(name=name))


def getCPUcount():
    """Try to get the number of cpu on the current host."""
    try:
        return cpu_count()
    except NotImplementedError:
        return 1


def checkConfiguration(boards, darts):
    """Refuse a run that could not end or could not be averaged. Must be
    called before any dart board is started."""
    if boards is None or boards < 1:
        raise ConfigurationError(
            "At least one dart board is needed (got {0}).".format(boards)
        )
    if darts is None or darts < 1:
        raise ConfigurationError(
            "At least one dart must be thrown (got {0}).".format(darts)
        )


def askBoardCount(stdin=None, stdout=None):
    """Prompt for the number of dart boards on the terminal."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stdout.write(BOARD_PROMPT)
    stdout.flush()
    answer = stdin.readline().strip()
    try:
        boards = int(answer)
    except ValueError:
        raise ConfigurationError(
            "'{0}' is not a number of dart boards.".format(answer)
        )
    stdout.write("{0} boards\n".format(boards))
    stdout.flush()
    return boards


def KeyboardInterruptHandler(signum, frame):
    """This is use in the interruption handler"""
    raise KeyboardInterrupt("Shutting down!")
