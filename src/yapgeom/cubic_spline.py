## cubic Bezier splines for yapgeom
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

"""Cubic Bezier splines in 2D and 3D.

Four control points; the curve starts at the first, ends at the fourth and
leaves/arrives along the second/third.  Besides construction from control
points a spline can be built in Hermite form from its endpoints and
endpoint derivatives, or by degree elevation of a quadratic spline.

The third derivative is constant, so a cubic spline is nondegenerate if any
of its third, second (at ``t = 0``) or first (at ``t = 0``) derivatives is
non-zero, checked in that order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from yapgeom.bounding_box import BoundingBox2d, BoundingBox3d
from yapgeom.curve import (
    ControlPointCurve,
    FirstDerivativeNonZero,
    SecondDerivativeNonZero,
    ThirdDerivativeNonZero,
    polynomial_extremum_parameters,
)
from yapgeom.errors import DegenerateCurve
from yapgeom.point import Point2d, Point3d


class _CubicSpline(ControlPointCurve):

    @classmethod
    def from_endpoints(cls, start_point, start_derivative, end_point, end_derivative):
        """Hermite form: endpoints and the first derivatives at them."""
        return cls(start_point,
                   start_point.translate_by(start_derivative / 3.0),
                   end_point.translate_by(-end_derivative / 3.0),
                   end_point)

    @classmethod
    def from_quadratic_spline(cls, quadratic):
        """Exact cubic representation of a quadratic spline."""
        p1 = quadratic.first_control_point
        p2 = quadratic.second_control_point
        p3 = quadratic.third_control_point
        interpolate = type(p1).interpolate_from
        return cls(p1, interpolate(p1, p2, 2.0 / 3.0), interpolate(p3, p2, 2.0 / 3.0), p3)

    def start_derivative(self):
        return self.first_control_point.vector_to(self.second_control_point) * 3.0

    def end_derivative(self):
        return self.third_control_point.vector_to(self.fourth_control_point) * 3.0

    def first_derivative(self, t: float):
        interpolate = type(self.first_control_point).interpolate_from
        q1 = interpolate(self.first_control_point, self.second_control_point, t)
        q2 = interpolate(self.second_control_point, self.third_control_point, t)
        q3 = interpolate(self.third_control_point, self.fourth_control_point, t)
        r1 = interpolate(q1, q2, t)
        r2 = interpolate(q2, q3, t)
        return r1.vector_to(r2) * 3.0

    def _second_differences(self):
        v1 = self.first_control_point.vector_to(self.second_control_point)
        v2 = self.second_control_point.vector_to(self.third_control_point)
        v3 = self.third_control_point.vector_to(self.fourth_control_point)
        return v2 - v1, v3 - v2

    def second_derivative(self, t: float):
        u1, u2 = self._second_differences()
        return (u1 * (1.0 - t) + u2 * t) * 6.0

    def third_derivative(self):
        u1, u2 = self._second_differences()
        return (u2 - u1) * 6.0

    def max_second_derivative_magnitude(self) -> float:
        # the second derivative is linear in t, so it peaks at an endpoint
        u1, u2 = self._second_differences()
        return 6.0 * max(u1.length(), u2.length())

    def nondegenerate(self):
        third = self.third_derivative().direction()
        if third is not None:
            return ThirdDerivativeNonZero(self, third)
        # third derivative is zero so the second is constant
        second = self.second_derivative(0.0).direction()
        if second is not None:
            return SecondDerivativeNonZero(self, second)
        first = self.first_derivative(0.0).direction()
        if first is not None:
            return FirstDerivativeNonZero(self, first)
        return DegenerateCurve(self.start_point())

    def _extremum_parameters(self) -> List[float]:
        coefficients = []
        for p1, p2, p3, p4 in zip(self.first_control_point.coordinates(),
                                  self.second_control_point.coordinates(),
                                  self.third_control_point.coordinates(),
                                  self.fourth_control_point.coordinates()):
            d1, d2, d3 = p2 - p1, p3 - p2, p4 - p3
            # B'(t)/3 = (d1 - 2 d2 + d3) t^2 + 2 (d2 - d1) t + d1
            coefficients.append((d1 - 2.0 * d2 + d3, 2.0 * (d2 - d1), d1))
        return polynomial_extremum_parameters(coefficients)

    def bounding_box(self):
        candidates = [self.first_control_point, self.fourth_control_point]
        candidates.extend(self.point_on(t) for t in self._extremum_parameters())
        return self._bounding_box_type.hull_of(candidates)


@dataclass(frozen=True)
class CubicSpline2d(_CubicSpline):
    first_control_point: Point2d
    second_control_point: Point2d
    third_control_point: Point2d
    fourth_control_point: Point2d

    _bounding_box_type = BoundingBox2d

    @classmethod
    def from_control_points(cls, first: Point2d, second: Point2d,
                            third: Point2d, fourth: Point2d) -> 'CubicSpline2d':
        return cls(first, second, third, fourth)


@dataclass(frozen=True)
class CubicSpline3d(_CubicSpline):
    first_control_point: Point3d
    second_control_point: Point3d
    third_control_point: Point3d
    fourth_control_point: Point3d

    _bounding_box_type = BoundingBox3d

    @classmethod
    def from_control_points(cls, first: Point3d, second: Point3d,
                            third: Point3d, fourth: Point3d) -> 'CubicSpline3d':
        return cls(first, second, third, fourth)

    @classmethod
    def on(cls, sketch_plane, spline: CubicSpline2d) -> 'CubicSpline3d':
        """Lift a planar spline onto ``sketch_plane``."""
        return cls(*(Point3d.on(sketch_plane, p) for p in spline.control_points()))

    def project_into(self, sketch_plane) -> CubicSpline2d:
        return CubicSpline2d(*(p.project_into(sketch_plane) for p in self.control_points()))


__all__ = ['CubicSpline2d', 'CubicSpline3d']
