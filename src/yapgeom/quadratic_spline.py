## quadratic Bezier splines for yapgeom
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

"""Quadratic Bezier splines in 2D and 3D.

A quadratic spline is defined by three control points; it starts at the
first, ends at the third and is pulled towards the second.  Points are
evaluated by De Casteljau interpolation, which reproduces the first and
last control point exactly at ``t = 0`` and ``t = 1``.  The second
derivative is constant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from yapgeom.bounding_box import BoundingBox2d, BoundingBox3d
from yapgeom.curve import (
    ControlPointCurve,
    FirstDerivativeNonZero,
    SecondDerivativeNonZero,
    polynomial_extremum_parameters,
)
from yapgeom.errors import DegenerateCurve
from yapgeom.point import Point2d, Point3d


class _QuadraticSpline(ControlPointCurve):

    def start_derivative(self):
        return self.first_control_point.vector_to(self.second_control_point) * 2.0

    def end_derivative(self):
        return self.second_control_point.vector_to(self.third_control_point) * 2.0

    def first_derivative(self, t: float):
        interpolate = type(self.first_control_point).interpolate_from
        q1 = interpolate(self.first_control_point, self.second_control_point, t)
        q2 = interpolate(self.second_control_point, self.third_control_point, t)
        return q1.vector_to(q2) * 2.0

    def second_derivative(self, t: float = 0.0):
        """Constant; ``t`` is accepted for symmetry with other curves."""
        v1 = self.first_control_point.vector_to(self.second_control_point)
        v2 = self.second_control_point.vector_to(self.third_control_point)
        return (v2 - v1) * 2.0

    def max_second_derivative_magnitude(self) -> float:
        return self.second_derivative().length()

    def nondegenerate(self):
        second = self.second_derivative().direction()
        if second is not None:
            return SecondDerivativeNonZero(self, second)
        # second derivative is zero so the first is constant
        first = self.first_derivative(0.0).direction()
        if first is not None:
            return FirstDerivativeNonZero(self, first)
        return DegenerateCurve(self.start_point())

    def _extremum_parameters(self) -> List[float]:
        p1 = self.first_control_point.coordinates()
        p2 = self.second_control_point.coordinates()
        p3 = self.third_control_point.coordinates()
        # B'(t)/2 = (p2 - p1) + t * (p1 - 2 p2 + p3)
        return polynomial_extremum_parameters(
            [(0.0, a - 2.0 * b + c, b - a) for a, b, c in zip(p1, p2, p3)])

    def bounding_box(self):
        candidates = [self.first_control_point, self.third_control_point]
        candidates.extend(self.point_on(t) for t in self._extremum_parameters())
        return self._bounding_box_type.hull_of(candidates)


@dataclass(frozen=True)
class QuadraticSpline2d(_QuadraticSpline):
    first_control_point: Point2d
    second_control_point: Point2d
    third_control_point: Point2d

    _bounding_box_type = BoundingBox2d

    @classmethod
    def from_control_points(cls, first: Point2d, second: Point2d, third: Point2d) -> 'QuadraticSpline2d':
        return cls(first, second, third)


@dataclass(frozen=True)
class QuadraticSpline3d(_QuadraticSpline):
    first_control_point: Point3d
    second_control_point: Point3d
    third_control_point: Point3d

    _bounding_box_type = BoundingBox3d

    @classmethod
    def from_control_points(cls, first: Point3d, second: Point3d, third: Point3d) -> 'QuadraticSpline3d':
        return cls(first, second, third)

    @classmethod
    def on(cls, sketch_plane, spline: QuadraticSpline2d) -> 'QuadraticSpline3d':
        """Lift a planar spline onto ``sketch_plane``."""
        return cls(*(Point3d.on(sketch_plane, p) for p in spline.control_points()))

    def project_into(self, sketch_plane) -> QuadraticSpline2d:
        return QuadraticSpline2d(*(p.project_into(sketch_plane) for p in self.control_points()))


__all__ = ['QuadraticSpline2d', 'QuadraticSpline3d']
