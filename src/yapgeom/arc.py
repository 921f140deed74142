## circular arcs for yapgeom
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

"""Circular arcs in 2D and 3D.

As with yapCAD arcs, a planar arc is a center, a radius, a start angle and
a swept angle, parameterized over ``0 <= u <= 1`` from the start angle to
the start angle plus the swept angle.  Angles are in radians and
counterclockwise-positive; a negative swept angle runs clockwise.

A 3D arc is a start point swept around an axis.  The sense of rotation is
right-handed about the axis direction.

Arcs move at constant speed, so their arc-length tables need a single
segment.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from math import atan2, cos, pi, sin, sqrt
from typing import Optional

from yapgeom.bounding_box import BoundingBox2d, BoundingBox3d
from yapgeom.curve import TWO_PI, Curve, FirstDerivativeNonZero, angular_extremum_parameters
from yapgeom.elliptical_arc import EllipticalArc2d
from yapgeom.errors import DegenerateCurve
from yapgeom.frame import Axis3d
from yapgeom.point import Point2d, Point3d
from yapgeom.vector import Direction2d, Vector2d


class SweptAngle(enum.Enum):
    """Which of the four arcs of a given radius joins two points."""
    SMALL_POSITIVE = 'small_positive'
    SMALL_NEGATIVE = 'small_negative'
    LARGE_POSITIVE = 'large_positive'
    LARGE_NEGATIVE = 'large_negative'


def _handedness_sign(frame) -> float:
    return 1.0 if frame.is_right_handed() else -1.0


@dataclass(frozen=True)
class Arc2d(Curve):
    center_point: Point2d
    radius: float
    start_angle: float
    swept_angle: float

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError('negative radius not allowed for arc')

    @classmethod
    def swept_around(cls, center: Point2d, swept_angle: float, start_point: Point2d) -> 'Arc2d':
        """Arc starting at ``start_point`` swept ``swept_angle`` around ``center``."""
        v = center.vector_to(start_point)
        return cls(center, v.length(), atan2(v.y, v.x), swept_angle)

    @classmethod
    def through_points(cls, first: Point2d, second: Point2d, third: Point2d) -> Optional['Arc2d']:
        """Arc from ``first`` through ``second`` to ``third``, or ``None`` if
        the points are collinear."""
        center = Point2d.circumcenter(first, second, third)
        if center is None:
            return None
        a1 = center.vector_to(first)
        a3 = center.vector_to(third)
        start_angle = atan2(a1.y, a1.x)
        ccw = (atan2(a3.y, a3.x) - start_angle) % TWO_PI
        if first.vector_to(second).cross(first.vector_to(third)) > 0.0:
            swept_angle = ccw
        else:
            swept_angle = ccw - TWO_PI
        return cls(center, a1.length(), start_angle, swept_angle)

    @classmethod
    def with_radius(cls, radius: float, swept: SweptAngle,
                    start_point: Point2d, end_point: Point2d) -> Optional['Arc2d']:
        """Arc of ``radius`` from ``start_point`` to ``end_point``.

        Returns ``None`` if the points coincide or are further apart than
        twice the radius.
        """
        chord = start_point.vector_to(end_point)
        chord_direction = chord.direction()
        half = 0.5 * chord.length()
        if chord_direction is None or radius < half:
            return None
        offset = sqrt(max(radius * radius - half * half, 0.0))
        if swept in (SweptAngle.SMALL_POSITIVE, SweptAngle.LARGE_NEGATIVE):
            offset = -offset
        center = Point2d.midpoint(start_point, end_point).translate_in(
            chord_direction.rotate_clockwise(), offset)
        vs = center.vector_to(start_point)
        ve = center.vector_to(end_point)
        start_angle = atan2(vs.y, vs.x)
        ccw = (atan2(ve.y, ve.x) - start_angle) % TWO_PI
        if swept in (SweptAngle.SMALL_POSITIVE, SweptAngle.LARGE_POSITIVE):
            swept_angle = ccw
        else:
            swept_angle = ccw - TWO_PI
        return cls(center, radius, start_angle, swept_angle)

    def _angle(self, t: float) -> float:
        return self.start_angle + t * self.swept_angle

    def point_on(self, t: float) -> Point2d:
        theta = self._angle(t)
        c = self.center_point
        return Point2d(c.x + self.radius * cos(theta), c.y + self.radius * sin(theta))

    def first_derivative(self, t: float) -> Vector2d:
        theta = self._angle(t)
        k = self.radius * self.swept_angle
        return Vector2d(-k * sin(theta), k * cos(theta))

    def second_derivative(self, t: float) -> Vector2d:
        theta = self._angle(t)
        k = -self.radius * self.swept_angle * self.swept_angle
        return Vector2d(k * cos(theta), k * sin(theta))

    def max_second_derivative_magnitude(self) -> float:
        return self.radius * self.swept_angle * self.swept_angle

    def arc_length_second_derivative_bound(self) -> float:
        return 0.0

    def length(self) -> float:
        return self.radius * abs(self.swept_angle)

    def nondegenerate(self):
        if self.radius == 0.0 or self.swept_angle == 0.0:
            return DegenerateCurve(self.start_point())
        return FirstDerivativeNonZero(self, self.first_derivative(0.0).direction())

    def split_at(self, t: float):
        split = t * self.swept_angle
        return (Arc2d(self.center_point, self.radius, self.start_angle, split),
                Arc2d(self.center_point, self.radius, self.start_angle + split,
                      self.swept_angle - split))

    def reverse(self) -> 'Arc2d':
        return Arc2d(self.center_point, self.radius,
                     self.start_angle + self.swept_angle, -self.swept_angle)

    def bounding_box(self) -> BoundingBox2d:
        params = angular_extremum_parameters(self.start_angle, self.swept_angle,
                                             [(1.0, 0.0), (0.0, 1.0)])
        candidates = [self.start_point(), self.end_point()]
        candidates.extend(self.point_on(t) for t in params)
        return BoundingBox2d.hull_of(candidates)

    def _with_start_direction(self, center: Point2d, direction: Direction2d, swept: float) -> 'Arc2d':
        return Arc2d(center, self.radius, direction.angle(), swept)

    def translate_by(self, displacement: Vector2d) -> 'Arc2d':
        return Arc2d(self.center_point.translate_by(displacement), self.radius,
                     self.start_angle, self.swept_angle)

    def translate_in(self, direction: Direction2d, distance: float) -> 'Arc2d':
        return self.translate_by(direction * distance)

    def scale_about(self, center: Point2d, k: float) -> 'Arc2d':
        # a negative scale is a half turn in the plane
        start_angle = self.start_angle + pi if k < 0 else self.start_angle
        return Arc2d(self.center_point.scale_about(center, k), self.radius * abs(k),
                     start_angle, self.swept_angle)

    def rotate_around(self, center: Point2d, angle: float) -> 'Arc2d':
        return Arc2d(self.center_point.rotate_around(center, angle), self.radius,
                     self.start_angle + angle, self.swept_angle)

    def mirror_across(self, axis) -> 'Arc2d':
        direction = Direction2d.from_angle(self.start_angle).mirror_across(axis)
        return self._with_start_direction(self.center_point.mirror_across(axis), direction,
                                          -self.swept_angle)

    def relative_to(self, frame) -> 'Arc2d':
        direction = Direction2d.from_angle(self.start_angle).relative_to(frame)
        return self._with_start_direction(self.center_point.relative_to(frame), direction,
                                          self.swept_angle * _handedness_sign(frame))

    def place_in(self, frame) -> 'Arc2d':
        direction = Direction2d.from_angle(self.start_angle).place_in(frame)
        return self._with_start_direction(self.center_point.place_in(frame), direction,
                                          self.swept_angle * _handedness_sign(frame))


@dataclass(frozen=True)
class Arc3d(Curve):
    axis: Axis3d
    initial_point: Point3d
    swept_angle: float

    @classmethod
    def swept_around(cls, axis: Axis3d, swept_angle: float, start_point: Point3d) -> 'Arc3d':
        return cls(axis, start_point, swept_angle)

    @classmethod
    def on(cls, sketch_plane, arc: Arc2d) -> 'Arc3d':
        """Lift a planar arc onto ``sketch_plane``."""
        axis = Axis3d(Point3d.on(sketch_plane, arc.center_point), sketch_plane.normal_direction())
        return cls(axis, Point3d.on(sketch_plane, arc.start_point()), arc.swept_angle)

    @classmethod
    def through_points(cls, first: Point3d, second: Point3d, third: Point3d) -> Optional['Arc3d']:
        """Arc from ``first`` through ``second`` to ``third``, or ``None`` if
        the points are collinear."""
        center = Point3d.circumcenter(first, second, third)
        if center is None:
            return None
        normal = first.vector_to(second).cross(first.vector_to(third)).direction()
        a1 = center.vector_to(first)
        a3 = center.vector_to(third)
        # the three points are counterclockwise about the normal
        swept_angle = atan2(a1.cross(a3).dot(normal), a1.dot(a3)) % TWO_PI
        return cls(Axis3d(center, normal), first, swept_angle)

    def center_point(self) -> Point3d:
        return self.initial_point.project_onto_axis(self.axis)

    def radius(self) -> float:
        return self.initial_point.distance_from_axis(self.axis)

    def point_on(self, t: float) -> Point3d:
        return self.initial_point.rotate_around(self.axis, t * self.swept_angle)

    def first_derivative(self, t: float):
        radial = self.center_point().vector_to(self.point_on(t))
        return self.axis.direction.cross(radial) * self.swept_angle

    def second_derivative(self, t: float):
        radial = self.center_point().vector_to(self.point_on(t))
        return radial * (-self.swept_angle * self.swept_angle)

    def max_second_derivative_magnitude(self) -> float:
        return self.radius() * self.swept_angle * self.swept_angle

    def arc_length_second_derivative_bound(self) -> float:
        return 0.0

    def length(self) -> float:
        return self.radius() * abs(self.swept_angle)

    def nondegenerate(self):
        if self.swept_angle == 0.0 or self.radius() == 0.0:
            return DegenerateCurve(self.start_point())
        direction = self.first_derivative(0.0).direction()
        if direction is None:
            return DegenerateCurve(self.start_point())
        return FirstDerivativeNonZero(self, direction)

    def split_at(self, t: float):
        split = t * self.swept_angle
        return (Arc3d(self.axis, self.initial_point, split),
                Arc3d(self.axis, self.point_on(t), self.swept_angle - split))

    def reverse(self) -> 'Arc3d':
        return Arc3d(self.axis, self.end_point(), -self.swept_angle)

    def bounding_box(self) -> BoundingBox3d:
        center = self.center_point()
        radial = center.vector_to(self.initial_point)
        tangential = self.axis.direction.cross(radial)
        params = angular_extremum_parameters(
            0.0, self.swept_angle,
            [(radial.x, tangential.x), (radial.y, tangential.y), (radial.z, tangential.z)])
        candidates = [self.start_point(), self.end_point()]
        candidates.extend(self.point_on(t) for t in params)
        return BoundingBox3d.hull_of(candidates)

    def translate_by(self, displacement) -> 'Arc3d':
        return Arc3d(self.axis.translate_by(displacement),
                     self.initial_point.translate_by(displacement), self.swept_angle)

    def translate_in(self, direction, distance: float) -> 'Arc3d':
        return self.translate_by(direction * distance)

    def scale_about(self, center: Point3d, k: float) -> 'Arc3d':
        # a point reflection commutes with rotation about the same axis
        return Arc3d(self.axis.scale_about(center, k),
                     self.initial_point.scale_about(center, k), self.swept_angle)

    def rotate_around(self, axis: Axis3d, angle: float) -> 'Arc3d':
        return Arc3d(self.axis.rotate_around(axis, angle),
                     self.initial_point.rotate_around(axis, angle), self.swept_angle)

    def mirror_across(self, plane) -> 'Arc3d':
        return Arc3d(self.axis.mirror_across(plane),
                     self.initial_point.mirror_across(plane), -self.swept_angle)

    def relative_to(self, frame) -> 'Arc3d':
        return Arc3d(self.axis.relative_to(frame), self.initial_point.relative_to(frame),
                     self.swept_angle * _handedness_sign(frame))

    def place_in(self, frame) -> 'Arc3d':
        return Arc3d(self.axis.place_in(frame), self.initial_point.place_in(frame),
                     self.swept_angle * _handedness_sign(frame))

    def project_into(self, sketch_plane) -> EllipticalArc2d:
        """Parallel projection; in general an elliptical arc."""
        center = self.center_point()
        radial = center.vector_to(self.initial_point)
        tangential = self.axis.direction.cross(radial)
        return EllipticalArc2d.from_conjugate_vectors(
            center.project_into(sketch_plane),
            radial.project_into(sketch_plane),
            tangential.project_into(sketch_plane),
            0.0, self.swept_angle)


__all__ = ['Arc2d', 'Arc3d', 'SweptAngle']
