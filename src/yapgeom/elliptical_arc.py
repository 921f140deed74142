## elliptical arcs for yapgeom
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

"""Elliptical arcs in 2D and 3D.

An elliptical arc lives in its own axes (a :class:`~yapgeom.frame.Frame2d`
in 2D, a :class:`~yapgeom.frame.SketchPlane3d` in 3D):

    p(t) = origin + x_radius * cos(theta) * x_direction
                  + y_radius * sin(theta) * y_direction

with ``theta = start_angle + t * swept_angle``.  The axes may be
left-handed, in which case a positive swept angle runs clockwise.

Unlike circular arcs the speed is not constant, so the arc-length table
uses ``swept_angle**2 * max(x_radius, y_radius)`` as its curvature bound.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, sin
from typing import List

from yapgeom.bounding_box import BoundingBox2d, BoundingBox3d
from yapgeom.curve import (
    Curve,
    FirstDerivativeNonZero,
    SecondDerivativeNonZero,
    angular_extremum_parameters,
)
from yapgeom.errors import DegenerateCurve
from yapgeom.frame import Frame2d, SketchPlane3d
from yapgeom.point import Point2d, Point3d
from yapgeom.vector import Direction2d, Direction3d, Vector2d


class _EllipticalArc(Curve):

    def __post_init__(self):
        if self.x_radius < 0 or self.y_radius < 0:
            raise ValueError('negative radius not allowed for elliptical arc')

    def center_point(self):
        return self.axes.origin_point

    def x_direction(self):
        return self.axes.x_direction

    def y_direction(self):
        return self.axes.y_direction

    def _angle(self, t: float) -> float:
        return self.start_angle + t * self.swept_angle

    def _combine(self, a: float, b: float):
        return self.axes.x_direction * (a * self.x_radius) + self.axes.y_direction * (b * self.y_radius)

    def point_on(self, t: float):
        theta = self._angle(t)
        return self.axes.origin_point.translate_by(self._combine(cos(theta), sin(theta)))

    def first_derivative(self, t: float):
        theta = self._angle(t)
        return self._combine(-sin(theta), cos(theta)) * self.swept_angle

    def second_derivative(self, t: float):
        theta = self._angle(t)
        return self._combine(cos(theta), sin(theta)) * (-self.swept_angle * self.swept_angle)

    def max_second_derivative_magnitude(self) -> float:
        return self.swept_angle * self.swept_angle * max(self.x_radius, self.y_radius)

    def nondegenerate(self):
        if self.swept_angle == 0.0 or (self.x_radius == 0.0 and self.y_radius == 0.0):
            return DegenerateCurve(self.start_point())
        if self.x_radius > 0.0 and self.y_radius > 0.0:
            return FirstDerivativeNonZero(self, self.first_derivative(0.0).direction())
        # collapsed to a line segment traversed back and forth
        direction = self.first_derivative(0.0).direction()
        if direction is None:
            direction = self.second_derivative(0.0).direction()
        return SecondDerivativeNonZero(self, direction)

    def _with(self, axes=None, start_angle=None, swept_angle=None, scale=1.0):
        return type(self)(self.axes if axes is None else axes,
                          self.x_radius * scale, self.y_radius * scale,
                          self.start_angle if start_angle is None else start_angle,
                          self.swept_angle if swept_angle is None else swept_angle)

    def split_at(self, t: float):
        split = t * self.swept_angle
        return (self._with(swept_angle=split),
                self._with(start_angle=self.start_angle + split,
                           swept_angle=self.swept_angle - split))

    def reverse(self):
        return self._with(start_angle=self.start_angle + self.swept_angle,
                          swept_angle=-self.swept_angle)

    def _extremum_parameters(self) -> List[float]:
        xd = self.axes.x_direction.components()
        yd = self.axes.y_direction.components()
        return angular_extremum_parameters(
            self.start_angle, self.swept_angle,
            [(self.x_radius * a, self.y_radius * b) for a, b in zip(xd, yd)])

    def bounding_box(self):
        candidates = [self.start_point(), self.end_point()]
        candidates.extend(self.point_on(t) for t in self._extremum_parameters())
        return self._bounding_box_type.hull_of(candidates)

    def translate_by(self, displacement):
        return self._with(axes=self.axes.translate_by(displacement))

    def translate_in(self, direction, distance: float):
        return self.translate_by(direction * distance)

    def scale_about(self, center, k: float):
        axes = self.axes
        origin = axes.origin_point.scale_about(center, k)
        if k < 0:
            axes = type(axes)(origin, -axes.x_direction, -axes.y_direction)
        else:
            axes = axes.move_to(origin)
        return self._with(axes=axes, scale=abs(k))

    def rotate_around(self, reference, angle: float):
        return self._with(axes=self.axes.rotate_around(reference, angle))

    def mirror_across(self, reference):
        return self._with(axes=self.axes.mirror_across(reference))

    def relative_to(self, frame):
        return self._with(axes=self.axes.relative_to(frame))

    def place_in(self, frame):
        return self._with(axes=self.axes.place_in(frame))


@dataclass(frozen=True)
class EllipticalArc2d(_EllipticalArc):
    axes: Frame2d
    x_radius: float
    y_radius: float
    start_angle: float
    swept_angle: float

    _bounding_box_type = BoundingBox2d

    @classmethod
    def with_(cls, center_point: Point2d, x_direction: Direction2d, x_radius: float,
              y_radius: float, start_angle: float, swept_angle: float) -> 'EllipticalArc2d':
        """Elliptical arc in right-handed axes with the given X direction."""
        return cls(Frame2d.with_x_direction(x_direction, center_point),
                   x_radius, y_radius, start_angle, swept_angle)

    @classmethod
    def from_conjugate_vectors(cls, center_point: Point2d, u: Vector2d, v: Vector2d,
                               start_angle: float, swept_angle: float) -> 'EllipticalArc2d':
        """Arc of ``center + cos(theta) * u + sin(theta) * v``.

        ``u`` and ``v`` are conjugate semi-diameters, which need not be
        perpendicular; this is what a circle or ellipse looks like after a
        parallel projection.
        """
        phi = 0.5 * atan2(2.0 * u.dot(v), u.dot(u) - v.dot(v))
        c = cos(phi)
        s = sin(phi)
        a = u * c + v * s
        b = v * c - u * s
        x_direction = a.direction()
        y_direction = b.direction()
        if x_direction is None and y_direction is None:
            x_direction = Direction2d.positive_x()
            y_direction = Direction2d.positive_y()
        elif x_direction is None:
            x_direction = y_direction.rotate_clockwise()
        elif y_direction is None:
            y_direction = x_direction.perpendicular_to()
        return cls(Frame2d(center_point, x_direction, y_direction),
                   a.length(), b.length(), start_angle - phi, swept_angle)


@dataclass(frozen=True)
class EllipticalArc3d(_EllipticalArc):
    axes: SketchPlane3d
    x_radius: float
    y_radius: float
    start_angle: float
    swept_angle: float

    _bounding_box_type = BoundingBox3d

    @classmethod
    def with_(cls, center_point: Point3d, x_direction: Direction3d, y_direction: Direction3d,
              x_radius: float, y_radius: float, start_angle: float,
              swept_angle: float) -> 'EllipticalArc3d':
        return cls(SketchPlane3d(center_point, x_direction, y_direction),
                   x_radius, y_radius, start_angle, swept_angle)

    @classmethod
    def on(cls, sketch_plane: SketchPlane3d, arc: EllipticalArc2d) -> 'EllipticalArc3d':
        """Lift a planar elliptical arc onto ``sketch_plane``."""
        axes = SketchPlane3d(Point3d.on(sketch_plane, arc.axes.origin_point),
                             Direction3d.on(sketch_plane, arc.axes.x_direction),
                             Direction3d.on(sketch_plane, arc.axes.y_direction))
        return cls(axes, arc.x_radius, arc.y_radius, arc.start_angle, arc.swept_angle)

    def project_into(self, sketch_plane: SketchPlane3d) -> EllipticalArc2d:
        u = (self.axes.x_direction * self.x_radius).project_into(sketch_plane)
        v = (self.axes.y_direction * self.y_radius).project_into(sketch_plane)
        return EllipticalArc2d.from_conjugate_vectors(
            self.axes.origin_point.project_into(sketch_plane), u, v,
            self.start_angle, self.swept_angle)


__all__ = ['EllipticalArc2d', 'EllipticalArc3d']
