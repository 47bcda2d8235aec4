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
__author__ = ("pidarts Development Team",)
__version__ = "0.1"
__revision__ = "0"

import logging


# Replaced by utils.initLogging() when launched from the command line
logger = logging.getLogger("PIDARTSLogger")

DARTS_TO_THROW = 10000000
PI_REFERENCE = 3.14159
RANDOM_SEED = 999
RESULTS_FILE = "PiResults.txt"
RESULTS_NOTE = "rand in farmer only"
