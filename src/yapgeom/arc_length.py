## arc-length parameterization for yapgeom curves
## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Arc-length parameterization of parametric curves.

A curve evaluated at ``0 <= t <= 1`` generally does not move at constant
speed, so equal steps in ``t`` are unequal steps in distance.  An
:class:`ArcLengthParameterization` is a monotone table of
``(parameter value, arc length)`` breakpoints from which either quantity can
be looked up given the other.

The table is built from the curve's derivative magnitude (its speed) and an
upper bound ``M`` on the magnitude of its second derivative.  Between two
breakpoints ``h`` apart in ``t``, linear interpolation of arc length is off
by at most ``h**2 * M / 8``; ``[0, 1]`` is bisected until that bound is
below ``max_error`` for every segment.  The length of each segment is
integrated with two-point Gauss-Legendre quadrature, which is exact when the
speed is polynomial of degree three or less and in particular when it is
constant, so ``M == 0`` gives a single exact segment.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable, List, Tuple

from yapgeom import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ArcLengthParameterization:
    """Immutable lookup table between parameter value and arc length.

    ``parameter_values`` runs from exactly ``0.0`` to exactly ``1.0``;
    ``lengths`` runs from ``0.0`` to the total length.  Both are
    non-decreasing.
    """

    parameter_values: Tuple[float, ...]
    lengths: Tuple[float, ...]

    def length(self) -> float:
        """Total arc length of the curve."""
        return self.lengths[-1]

    def segment_count(self) -> int:
        return len(self.lengths) - 1

    def arc_length_to_parameter_value(self, distance: float) -> float:
        """Parameter value at ``distance`` along the curve.

        ``distance`` is clamped to ``[0, length()]`` so the result is always
        a valid parameter value.
        """
        lengths = self.lengths
        if distance <= 0.0:
            return 0.0
        if distance >= lengths[-1]:
            return 1.0
        i = bisect_right(lengths, distance) - 1
        return _interpolate(distance, lengths[i], lengths[i + 1],
                            self.parameter_values[i], self.parameter_values[i + 1])

    def parameter_value_to_arc_length(self, t: float) -> float:
        """Arc length from the start of the curve to parameter value ``t``
        (clamped to ``[0, 1]``)."""
        params = self.parameter_values
        if t <= 0.0:
            return 0.0
        if t >= 1.0:
            return self.lengths[-1]
        i = bisect_right(params, t) - 1
        return _interpolate(t, params[i], params[i + 1], self.lengths[i], self.lengths[i + 1])


def _interpolate(x: float, x0: float, x1: float, y0: float, y1: float) -> float:
    if x1 == x0:
        return y0
    return y0 + (x - x0) / (x1 - x0) * (y1 - y0)


def build(max_error: float,
          derivative_magnitude: Callable[[float], float],
          max_second_derivative_magnitude: float) -> ArcLengthParameterization:
    """Build the arc-length table for a curve.

    Parameters
    ----------
    max_error : float
        Largest acceptable error, in length units, of any lookup.
    derivative_magnitude : callable
        ``t -> |r'(t)|`` for the curve ``r``.
    max_second_derivative_magnitude : float
        Upper bound of ``|r''(t)|`` over ``[0, 1]``.  Zero for curves of
        constant speed.
    """

    if max_error <= 0.0:
        raise ValueError('max_error must be positive, got {}'.format(max_error))
    bound = abs(max_second_derivative_magnitude)

    segments: List[Tuple[float, float]] = []
    capped = False
    stack = [(0.0, 1.0, 0)]
    while stack:
        start, end, depth = stack.pop()
        width = end - start
        if width * width * bound / 8.0 > max_error:
            if depth < config.MAX_ARC_LENGTH_DEPTH:
                mid = 0.5 * (start + end)
                # right half first so the left half is processed next
                stack.append((mid, end, depth + 1))
                stack.append((start, mid, depth + 1))
                continue
            capped = True
        segments.append((start, end))

    if capped:
        logger.warning('arc length subdivision capped at depth %d; '
                       'lookups may exceed max_error=%g',
                       config.MAX_ARC_LENGTH_DEPTH, max_error)

    g = config.GAUSS_LEGENDRE_OFFSET
    params = [0.0]
    lengths = [0.0]
    total = 0.0
    for start, end in segments:
        width = end - start
        total += 0.5 * width * (derivative_magnitude(start + g * width) +
                                derivative_magnitude(end - g * width))
        params.append(end)
        lengths.append(total)

    logger.debug('built arc length table: %d segments, length %g', len(segments), total)
    return ArcLengthParameterization(tuple(params), tuple(lengths))


__all__ = ['ArcLengthParameterization', 'build']
