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
DELIMITER = "_" * 72


def formatResults(piEstimate, elapsed, note):
    """Text block appended to the results file after a run."""
    return "".join([
        "\nNOTE: {0}".format(note),
        "\n\nPi approx   = {0:f} using {1:d} darts".format(
            piEstimate.estimate,
            piEstimate.dartsThrown,
        ),
        "\n\nPi actually = {0:f} Error = {1:f}%".format(
            piEstimate.reference,
            piEstimate.error,
        ),
        "\n\nElapsed time = {0:.6f}s".format(elapsed),
        "\n" + DELIMITER,
    ])


def writeResults(filename, piEstimate, elapsed, note):
    """Append the results of a run to filename. I/O errors propagate."""
    with open(filename, 'a') as f:
        f.write(formatResults(piEstimate, elapsed, note))
