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
import pidarts
from ._types import ConfigurationError, PiEstimate


def estimatePi(dartsThrown, hits):
    """Four times the fraction of darts that landed in the quarter circle."""
    if dartsThrown <= 0:
        raise ConfigurationError(
            "Cannot estimate Pi from {0} dart(s).".format(dartsThrown)
        )
    return 4.0 * hits / dartsThrown


def errorPercent(estimate, reference=None):
    """Relative distance between the estimate and the reference, in %."""
    if reference is None:
        reference = pidarts.PI_REFERENCE
    return abs(reference - estimate) * 100.0 / reference


def aggregate(report, reference=None):
    """Turns a FarmReport into a PiEstimate."""
    if reference is None:
        reference = pidarts.PI_REFERENCE
    estimate = estimatePi(report.dartsThrown, report.hits)
    return PiEstimate(
        estimate=estimate,
        reference=reference,
        error=errorPercent(estimate, reference),
        dartsThrown=report.dartsThrown,
        hits=report.hits,
    )
