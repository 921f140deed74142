## axes, frames and planes for yapgeom
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

"""Axes, coordinate frames, planes and sketch planes.

These are the reference objects that points, directions and curves are
transformed with: ``rotate_around`` takes a center point (2D) or an
:class:`Axis3d`, ``mirror_across`` takes an :class:`Axis2d` or a
:class:`Plane3d`, and ``relative_to`` / ``place_in`` take a frame.

Frames may be left-handed (for instance after mirroring).  Curves whose
sense of rotation depends on handedness query :meth:`Frame2d.is_right_handed`
and :meth:`Frame3d.is_right_handed`.
"""

from __future__ import annotations

from dataclasses import dataclass

from yapgeom import config
from yapgeom.errors import GeometryError
from yapgeom.point import Point2d, Point3d
from yapgeom.vector import Direction2d, Direction3d, Vector2d, Vector3d


def _check_perpendicular(*pairs) -> None:
    for a, b in pairs:
        if abs(a.dot(b)) > config.DIRECTION_TOLERANCE:
            raise GeometryError('frame directions {} and {} are not perpendicular'.format(a, b))


@dataclass(frozen=True)
class Axis2d:
    origin_point: Point2d
    direction: Direction2d

    @classmethod
    def x(cls) -> 'Axis2d':
        return cls(Point2d.origin(), Direction2d.positive_x())

    @classmethod
    def y(cls) -> 'Axis2d':
        return cls(Point2d.origin(), Direction2d.positive_y())

    @classmethod
    def through(cls, point: Point2d, direction: Direction2d) -> 'Axis2d':
        return cls(point, direction)

    def reverse(self) -> 'Axis2d':
        return Axis2d(self.origin_point, self.direction.reverse())

    def move_to(self, point: Point2d) -> 'Axis2d':
        return Axis2d(point, self.direction)

    def translate_by(self, v: Vector2d) -> 'Axis2d':
        return Axis2d(self.origin_point.translate_by(v), self.direction)

    def scale_about(self, center: Point2d, k: float) -> 'Axis2d':
        return Axis2d(self.origin_point.scale_about(center, k), self.direction)

    def rotate_around(self, center: Point2d, angle: float) -> 'Axis2d':
        return Axis2d(self.origin_point.rotate_around(center, angle), self.direction.rotate_by(angle))

    def mirror_across(self, axis: 'Axis2d') -> 'Axis2d':
        return Axis2d(self.origin_point.mirror_across(axis), self.direction.mirror_across(axis))

    def relative_to(self, frame: 'Frame2d') -> 'Axis2d':
        return Axis2d(self.origin_point.relative_to(frame), self.direction.relative_to(frame))

    def place_in(self, frame: 'Frame2d') -> 'Axis2d':
        return Axis2d(self.origin_point.place_in(frame), self.direction.place_in(frame))


@dataclass(frozen=True)
class Frame2d:
    """Origin plus a perpendicular pair of directions, either handedness."""

    origin_point: Point2d
    x_direction: Direction2d
    y_direction: Direction2d

    def __post_init__(self):
        _check_perpendicular((self.x_direction, self.y_direction))

    @classmethod
    def at_origin(cls) -> 'Frame2d':
        return cls(Point2d.origin(), Direction2d.positive_x(), Direction2d.positive_y())

    @classmethod
    def at_point(cls, point: Point2d) -> 'Frame2d':
        return cls(point, Direction2d.positive_x(), Direction2d.positive_y())

    @classmethod
    def with_x_direction(cls, x_direction: Direction2d, origin: Point2d) -> 'Frame2d':
        """Right-handed frame with the given X direction."""
        return cls(origin, x_direction, x_direction.perpendicular_to())

    def is_right_handed(self) -> bool:
        return self.x_direction.to_vector().cross(self.y_direction) > 0.0

    def x_axis(self) -> Axis2d:
        return Axis2d(self.origin_point, self.x_direction)

    def y_axis(self) -> Axis2d:
        return Axis2d(self.origin_point, self.y_direction)

    def reverse_x(self) -> 'Frame2d':
        return Frame2d(self.origin_point, self.x_direction.reverse(), self.y_direction)

    def reverse_y(self) -> 'Frame2d':
        return Frame2d(self.origin_point, self.x_direction, self.y_direction.reverse())

    def move_to(self, point: Point2d) -> 'Frame2d':
        return Frame2d(point, self.x_direction, self.y_direction)

    def translate_by(self, v: Vector2d) -> 'Frame2d':
        return self.move_to(self.origin_point.translate_by(v))

    def rotate_around(self, center: Point2d, angle: float) -> 'Frame2d':
        return Frame2d(self.origin_point.rotate_around(center, angle),
                       self.x_direction.rotate_by(angle),
                       self.y_direction.rotate_by(angle))

    def mirror_across(self, axis: Axis2d) -> 'Frame2d':
        return Frame2d(self.origin_point.mirror_across(axis),
                       self.x_direction.mirror_across(axis),
                       self.y_direction.mirror_across(axis))

    def relative_to(self, frame: 'Frame2d') -> 'Frame2d':
        return Frame2d(self.origin_point.relative_to(frame),
                       self.x_direction.relative_to(frame),
                       self.y_direction.relative_to(frame))

    def place_in(self, frame: 'Frame2d') -> 'Frame2d':
        return Frame2d(self.origin_point.place_in(frame),
                       self.x_direction.place_in(frame),
                       self.y_direction.place_in(frame))


@dataclass(frozen=True)
class Axis3d:
    origin_point: Point3d
    direction: Direction3d

    @classmethod
    def x(cls) -> 'Axis3d':
        return cls(Point3d.origin(), Direction3d.positive_x())

    @classmethod
    def y(cls) -> 'Axis3d':
        return cls(Point3d.origin(), Direction3d.positive_y())

    @classmethod
    def z(cls) -> 'Axis3d':
        return cls(Point3d.origin(), Direction3d.positive_z())

    @classmethod
    def through(cls, point: Point3d, direction: Direction3d) -> 'Axis3d':
        return cls(point, direction)

    @classmethod
    def on(cls, sketch_plane: 'SketchPlane3d', axis: Axis2d) -> 'Axis3d':
        return cls(Point3d.on(sketch_plane, axis.origin_point),
                   Direction3d.on(sketch_plane, axis.direction))

    def reverse(self) -> 'Axis3d':
        return Axis3d(self.origin_point, self.direction.reverse())

    def move_to(self, point: Point3d) -> 'Axis3d':
        return Axis3d(point, self.direction)

    def translate_by(self, v: Vector3d) -> 'Axis3d':
        return Axis3d(self.origin_point.translate_by(v), self.direction)

    def scale_about(self, center: Point3d, k: float) -> 'Axis3d':
        return Axis3d(self.origin_point.scale_about(center, k), self.direction)

    def rotate_around(self, axis: 'Axis3d', angle: float) -> 'Axis3d':
        return Axis3d(self.origin_point.rotate_around(axis, angle),
                      self.direction.rotate_around(axis, angle))

    def mirror_across(self, plane: 'Plane3d') -> 'Axis3d':
        return Axis3d(self.origin_point.mirror_across(plane), self.direction.mirror_across(plane))

    def relative_to(self, frame: 'Frame3d') -> 'Axis3d':
        return Axis3d(self.origin_point.relative_to(frame), self.direction.relative_to(frame))

    def place_in(self, frame: 'Frame3d') -> 'Axis3d':
        return Axis3d(self.origin_point.place_in(frame), self.direction.place_in(frame))


@dataclass(frozen=True)
class Plane3d:
    origin_point: Point3d
    normal_direction: Direction3d

    @classmethod
    def xy(cls) -> 'Plane3d':
        return cls(Point3d.origin(), Direction3d.positive_z())

    @classmethod
    def yz(cls) -> 'Plane3d':
        return cls(Point3d.origin(), Direction3d.positive_x())

    @classmethod
    def zx(cls) -> 'Plane3d':
        return cls(Point3d.origin(), Direction3d.positive_y())

    @classmethod
    def through(cls, point: Point3d, normal: Direction3d) -> 'Plane3d':
        return cls(point, normal)

    def reverse_normal(self) -> 'Plane3d':
        return Plane3d(self.origin_point, self.normal_direction.reverse())

    def translate_by(self, v: Vector3d) -> 'Plane3d':
        return Plane3d(self.origin_point.translate_by(v), self.normal_direction)

    def rotate_around(self, axis: Axis3d, angle: float) -> 'Plane3d':
        return Plane3d(self.origin_point.rotate_around(axis, angle),
                       self.normal_direction.rotate_around(axis, angle))

    def mirror_across(self, plane: 'Plane3d') -> 'Plane3d':
        return Plane3d(self.origin_point.mirror_across(plane),
                       self.normal_direction.mirror_across(plane))

    def relative_to(self, frame: 'Frame3d') -> 'Plane3d':
        return Plane3d(self.origin_point.relative_to(frame),
                       self.normal_direction.relative_to(frame))

    def place_in(self, frame: 'Frame3d') -> 'Plane3d':
        return Plane3d(self.origin_point.place_in(frame),
                       self.normal_direction.place_in(frame))


@dataclass(frozen=True)
class SketchPlane3d:
    """Plane with its own 2D coordinate system, used to lift planar geometry
    into 3D and to project 3D geometry back down."""

    origin_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d

    def __post_init__(self):
        _check_perpendicular((self.x_direction, self.y_direction))

    @classmethod
    def xy(cls) -> 'SketchPlane3d':
        return cls(Point3d.origin(), Direction3d.positive_x(), Direction3d.positive_y())

    @classmethod
    def yz(cls) -> 'SketchPlane3d':
        return cls(Point3d.origin(), Direction3d.positive_y(), Direction3d.positive_z())

    @classmethod
    def zx(cls) -> 'SketchPlane3d':
        return cls(Point3d.origin(), Direction3d.positive_z(), Direction3d.positive_x())

    @classmethod
    def with_normal_direction(cls, normal: Direction3d, origin: Point3d) -> 'SketchPlane3d':
        x = normal.perpendicular_direction()
        y = normal.cross(x).direction()
        return cls(origin, x, y)

    def normal_direction(self) -> Direction3d:
        return self.x_direction.cross(self.y_direction).direction()

    def normal_axis(self) -> Axis3d:
        return Axis3d(self.origin_point, self.normal_direction())

    def to_plane(self) -> Plane3d:
        return Plane3d(self.origin_point, self.normal_direction())

    def move_to(self, point: Point3d) -> 'SketchPlane3d':
        return SketchPlane3d(point, self.x_direction, self.y_direction)

    def translate_by(self, v: Vector3d) -> 'SketchPlane3d':
        return self.move_to(self.origin_point.translate_by(v))

    def rotate_around(self, axis: Axis3d, angle: float) -> 'SketchPlane3d':
        return SketchPlane3d(self.origin_point.rotate_around(axis, angle),
                             self.x_direction.rotate_around(axis, angle),
                             self.y_direction.rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> 'SketchPlane3d':
        return SketchPlane3d(self.origin_point.mirror_across(plane),
                             self.x_direction.mirror_across(plane),
                             self.y_direction.mirror_across(plane))

    def relative_to(self, frame: 'Frame3d') -> 'SketchPlane3d':
        return SketchPlane3d(self.origin_point.relative_to(frame),
                             self.x_direction.relative_to(frame),
                             self.y_direction.relative_to(frame))

    def place_in(self, frame: 'Frame3d') -> 'SketchPlane3d':
        return SketchPlane3d(self.origin_point.place_in(frame),
                             self.x_direction.place_in(frame),
                             self.y_direction.place_in(frame))


@dataclass(frozen=True)
class Frame3d:
    origin_point: Point3d
    x_direction: Direction3d
    y_direction: Direction3d
    z_direction: Direction3d

    def __post_init__(self):
        _check_perpendicular((self.x_direction, self.y_direction),
                             (self.y_direction, self.z_direction),
                             (self.z_direction, self.x_direction))

    @classmethod
    def at_origin(cls) -> 'Frame3d':
        return cls(Point3d.origin(), Direction3d.positive_x(),
                   Direction3d.positive_y(), Direction3d.positive_z())

    @classmethod
    def at_point(cls, point: Point3d) -> 'Frame3d':
        return cls(point, Direction3d.positive_x(),
                   Direction3d.positive_y(), Direction3d.positive_z())

    @classmethod
    def with_z_direction(cls, z_direction: Direction3d, origin: Point3d) -> 'Frame3d':
        """Right-handed frame with the given Z direction."""
        x = z_direction.perpendicular_direction()
        y = z_direction.cross(x).direction()
        return cls(origin, x, y, z_direction)

    def is_right_handed(self) -> bool:
        return self.x_direction.cross(self.y_direction).dot(self.z_direction) > 0.0

    def x_axis(self) -> Axis3d:
        return Axis3d(self.origin_point, self.x_direction)

    def y_axis(self) -> Axis3d:
        return Axis3d(self.origin_point, self.y_direction)

    def z_axis(self) -> Axis3d:
        return Axis3d(self.origin_point, self.z_direction)

    def xy_sketch_plane(self) -> SketchPlane3d:
        return SketchPlane3d(self.origin_point, self.x_direction, self.y_direction)

    def reverse_z(self) -> 'Frame3d':
        return Frame3d(self.origin_point, self.x_direction, self.y_direction,
                       self.z_direction.reverse())

    def move_to(self, point: Point3d) -> 'Frame3d':
        return Frame3d(point, self.x_direction, self.y_direction, self.z_direction)

    def translate_by(self, v: Vector3d) -> 'Frame3d':
        return self.move_to(self.origin_point.translate_by(v))

    def rotate_around(self, axis: Axis3d, angle: float) -> 'Frame3d':
        return Frame3d(self.origin_point.rotate_around(axis, angle),
                       self.x_direction.rotate_around(axis, angle),
                       self.y_direction.rotate_around(axis, angle),
                       self.z_direction.rotate_around(axis, angle))

    def mirror_across(self, plane: Plane3d) -> 'Frame3d':
        return Frame3d(self.origin_point.mirror_across(plane),
                       self.x_direction.mirror_across(plane),
                       self.y_direction.mirror_across(plane),
                       self.z_direction.mirror_across(plane))

    def relative_to(self, frame: 'Frame3d') -> 'Frame3d':
        return Frame3d(self.origin_point.relative_to(frame),
                       self.x_direction.relative_to(frame),
                       self.y_direction.relative_to(frame),
                       self.z_direction.relative_to(frame))

    def place_in(self, frame: 'Frame3d') -> 'Frame3d':
        return Frame3d(self.origin_point.place_in(frame),
                       self.x_direction.place_in(frame),
                       self.y_direction.place_in(frame),
                       self.z_direction.place_in(frame))


__all__ = [
    'Axis2d',
    'Axis3d',
    'Frame2d',
    'Frame3d',
    'Plane3d',
    'SketchPlane3d',
]
