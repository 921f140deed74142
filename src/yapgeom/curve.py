## shared curve machinery for yapgeom
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

"""Machinery shared by all yapgeom curve types.

Nondegenerate curves
====================

Tangent directions and arc-length queries only make sense for a curve that
does not collapse to a single point.  Every curve type therefore has a
``nondegenerate()`` method returning either one of the variants below or a
:class:`~yapgeom.errors.DegenerateCurve` holding the collapsed point:

``FirstDerivativeNonZero``
    the first derivative never vanishes (circular arcs, full ellipses,
    straight splines)
``SecondDerivativeNonZero``
    the first derivative may vanish at isolated parameter values, where the
    second derivative gives the tangent
``ThirdDerivativeNonZero``
    cubic splines only; first and second derivative may vanish together

Each variant caches the direction of the derivative that proved the curve
nondegenerate.  At a reversal (first derivative exactly zero, second
derivative not) the tangent just after the point is the second derivative
direction, so that is what is returned, except at ``t == 1`` where the
tangent just *before* the end is returned instead.

Arc-length parameterized curves
===============================

:meth:`Nondegenerate.arc_length_parameterized` pairs a nondegenerate curve
with an :class:`~yapgeom.arc_length.ArcLengthParameterization`, giving
queries by distance along the curve.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from math import atan2, pi
from typing import Any, Callable, List, Sequence, Tuple

from yapgeom import arc_length
from yapgeom.arc_length import ArcLengthParameterization

TWO_PI = 2.0 * pi


@dataclass(frozen=True)
class Nondegenerate:
    """A curve proven to have non-zero length."""

    curve: Any
    direction: Any

    def from_nondegenerate(self) -> Any:
        return self.curve

    def tangent_direction(self, t: float):
        raise NotImplementedError

    def sample(self, t: float) -> Tuple[Any, Any]:
        """Point and tangent direction at ``t``."""
        return self.curve.point_on(t), self.tangent_direction(t)

    def arc_length_parameterized(self, max_error: float) -> 'ArcLengthParameterized':
        curve = self.curve
        parameterization = arc_length.build(
            max_error,
            lambda t: curve.first_derivative(t).length(),
            curve.arc_length_second_derivative_bound(),
        )
        return ArcLengthParameterized(self, parameterization)


@dataclass(frozen=True)
class FirstDerivativeNonZero(Nondegenerate):

    def tangent_direction(self, t: float):
        first = self.curve.first_derivative(t).direction()
        if first is None:
            return self.direction
        return first


@dataclass(frozen=True)
class SecondDerivativeNonZero(Nondegenerate):

    def tangent_direction(self, t: float):
        first = self.curve.first_derivative(t).direction()
        if first is not None:
            return first
        second = self.curve.second_derivative(t).direction()
        if second is None:
            second = self.direction
        return second.reverse() if t == 1.0 else second


@dataclass(frozen=True)
class ThirdDerivativeNonZero(Nondegenerate):

    def tangent_direction(self, t: float):
        first = self.curve.first_derivative(t).direction()
        if first is not None:
            return first
        second = self.curve.second_derivative(t).direction()
        if second is not None:
            return second.reverse() if t == 1.0 else second
        # cusp where both lower derivatives vanish; the cubic term dominates
        # on both sides with the same sign
        return self.direction


@dataclass(frozen=True)
class ArcLengthParameterized:
    """A nondegenerate curve together with its arc-length table."""

    nondegenerate_curve: Nondegenerate
    parameterization: ArcLengthParameterization

    @property
    def curve(self) -> Any:
        return self.nondegenerate_curve.curve

    def from_arc_length_parameterized(self) -> Any:
        return self.nondegenerate_curve.curve

    def arc_length_parameterization(self) -> ArcLengthParameterization:
        return self.parameterization

    def length(self) -> float:
        return self.parameterization.length()

    def arc_length_to_parameter_value(self, distance: float) -> float:
        return self.parameterization.arc_length_to_parameter_value(distance)

    def parameter_value_to_arc_length(self, t: float) -> float:
        return self.parameterization.parameter_value_to_arc_length(t)

    def point_along(self, distance: float):
        return self.curve.point_on(self.arc_length_to_parameter_value(distance))

    def tangent_direction_along(self, distance: float):
        return self.nondegenerate_curve.tangent_direction(self.arc_length_to_parameter_value(distance))

    def sample_along(self, distance: float):
        return self.nondegenerate_curve.sample(self.arc_length_to_parameter_value(distance))

    def midpoint(self):
        return self.point_along(0.5 * self.length())

    def points_along(self, count: int) -> List[Any]:
        """``count + 1`` points equally spaced by arc length, endpoints included."""
        if count < 1:
            raise ValueError('count must be >= 1')
        total = self.length()
        return [self.point_along(total * i / count) for i in range(count + 1)]


class Curve:
    """Protocol every curve type implements.

    Subclasses provide ``point_on``, ``first_derivative``,
    ``second_derivative``, ``max_second_derivative_magnitude`` and
    ``nondegenerate``.
    """

    def start_point(self):
        return self.point_on(0.0)

    def end_point(self):
        return self.point_on(1.0)

    def bisect(self):
        return self.split_at(0.5)

    def arc_length_second_derivative_bound(self) -> float:
        """Bound on the second derivative of arc length with respect to the
        parameter, used to size arc-length tables."""
        return self.max_second_derivative_magnitude()


class ControlPointCurve(Curve):
    """Bezier curve stored as a frozen dataclass of control points.

    Transformations map every control point; since a Bezier curve is an
    affine combination of its control points they commute with
    ``point_on``.
    """

    def control_points(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, f.name) for f in fields(self))

    def _map_control_points(self, function: Callable[[Any], Any]):
        return type(self)(*(function(p) for p in self.control_points()))

    def start_point(self):
        return self.control_points()[0]

    def end_point(self):
        return self.control_points()[-1]

    def point_on(self, t: float):
        return de_casteljau(self.control_points(), t)[0][-1]

    def split_at(self, t: float):
        left, right = de_casteljau(self.control_points(), t)
        return type(self)(*left), type(self)(*right)

    def reverse(self):
        return type(self)(*reversed(self.control_points()))

    def translate_by(self, displacement):
        return self._map_control_points(lambda p: p.translate_by(displacement))

    def translate_in(self, direction, distance: float):
        return self._map_control_points(lambda p: p.translate_in(direction, distance))

    def scale_about(self, center, k: float):
        return self._map_control_points(lambda p: p.scale_about(center, k))

    def rotate_around(self, reference, angle: float):
        """Rotate around a center point (2D) or an axis (3D)."""
        return self._map_control_points(lambda p: p.rotate_around(reference, angle))

    def mirror_across(self, reference):
        """Mirror across an axis (2D) or a plane (3D)."""
        return self._map_control_points(lambda p: p.mirror_across(reference))

    def relative_to(self, frame):
        return self._map_control_points(lambda p: p.relative_to(frame))

    def place_in(self, frame):
        return self._map_control_points(lambda p: p.place_in(frame))


def de_casteljau(points: Sequence[Any], t: float) -> Tuple[List[Any], List[Any]]:
    """Repeated linear interpolation of control points.

    Returns the control points of the two halves of the curve split at
    ``t``; the last point of the first half (and first of the second) is
    the point on the curve.
    """
    interpolate = type(points[0]).interpolate_from
    level = list(points)
    left = [level[0]]
    right = [level[-1]]
    while len(level) > 1:
        level = [interpolate(level[i], level[i + 1], t) for i in range(len(level) - 1)]
        left.append(level[0])
        right.append(level[-1])
    right.reverse()
    return left, right


def polynomial_extremum_parameters(coefficients: Sequence[Tuple[float, float, float]]) -> List[float]:
    """Parameter values in ``(0, 1)`` where ``a*t**2 + b*t + c`` vanishes,
    for each ``(a, b, c)`` in ``coefficients`` (one per coordinate of a
    derivative)."""
    roots = []
    for a, b, c in coefficients:
        if a == 0.0:
            if b != 0.0:
                roots.append(-c / b)
            continue
        disc = b * b - 4.0 * a * c
        if disc < 0.0:
            continue
        root = disc ** 0.5
        roots.append((-b + root) / (2.0 * a))
        roots.append((-b - root) / (2.0 * a))
    return [t for t in roots if 0.0 < t < 1.0]


def angular_extremum_parameters(start_angle: float, swept_angle: float,
                                amplitudes: Sequence[Tuple[float, float]]) -> List[float]:
    """Parameter values in ``(0, 1)`` where ``a*cos(theta) + b*sin(theta)``
    is extremal, ``theta = start_angle + t * swept_angle``, for each
    ``(a, b)`` in ``amplitudes``."""
    if swept_angle == 0.0:
        return []
    sweep = abs(swept_angle)
    params = []
    for a, b in amplitudes:
        if a == 0.0 and b == 0.0:
            continue
        base = atan2(b, a)
        for theta in (base, base + pi):
            if swept_angle > 0.0:
                delta = (theta - start_angle) % TWO_PI
            else:
                delta = (start_angle - theta) % TWO_PI
            while delta < sweep:
                if delta > 0.0:
                    params.append(delta / sweep)
                delta += TWO_PI
    return params


__all__ = [
    'Nondegenerate',
    'FirstDerivativeNonZero',
    'SecondDerivativeNonZero',
    'ThirdDerivativeNonZero',
    'ArcLengthParameterized',
    'Curve',
    'ControlPointCurve',
    'de_casteljau',
    'polynomial_extremum_parameters',
    'angular_extremum_parameters',
]
