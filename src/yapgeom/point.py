## points for yapgeom
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

"""Points in two and three dimensions.

A point is a position; the displacement between two points is a
:class:`~yapgeom.vector.Vector2d` / :class:`~yapgeom.vector.Vector3d`.
Every transformation returns a new point.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, hypot, sin
from typing import Optional, Tuple

from yapgeom.vector import Vector2d, Vector3d, _rotate3


@dataclass(frozen=True)
class Point2d:
    x: float
    y: float

    @classmethod
    def origin(cls) -> 'Point2d':
        return cls(0.0, 0.0)

    @classmethod
    def polar(cls, radius: float, angle: float) -> 'Point2d':
        return cls(radius * cos(angle), radius * sin(angle))

    @classmethod
    def xy_in(cls, frame, x: float, y: float) -> 'Point2d':
        """Point with local coordinates ``(x, y)`` in ``frame``."""
        return cls(x, y).place_in(frame)

    @staticmethod
    def interpolate_from(p: 'Point2d', q: 'Point2d', t: float) -> 'Point2d':
        """Linear interpolation that returns ``p`` exactly at ``t == 0`` and
        ``q`` exactly at ``t == 1``."""
        if t <= 0.5:
            return Point2d(p.x + t * (q.x - p.x), p.y + t * (q.y - p.y))
        return Point2d(q.x + (1.0 - t) * (p.x - q.x), q.y + (1.0 - t) * (p.y - q.y))

    @staticmethod
    def midpoint(p: 'Point2d', q: 'Point2d') -> 'Point2d':
        return Point2d.interpolate_from(p, q, 0.5)

    @staticmethod
    def circumcenter(p1: 'Point2d', p2: 'Point2d', p3: 'Point2d') -> Optional['Point2d']:
        """Center of the circle through three points, ``None`` if collinear."""
        bx, by = p2.x - p1.x, p2.y - p1.y
        cx, cy = p3.x - p1.x, p3.y - p1.y
        d = 2.0 * (bx * cy - by * cx)
        if d == 0.0:
            return None
        b2 = bx * bx + by * by
        c2 = cx * cx + cy * cy
        return Point2d(p1.x + (cy * b2 - by * c2) / d,
                       p1.y + (bx * c2 - cx * b2) / d)

    def coordinates(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def vector_to(self, other: 'Point2d') -> Vector2d:
        return Vector2d(other.x - self.x, other.y - self.y)

    def vector_from(self, other: 'Point2d') -> Vector2d:
        return Vector2d(self.x - other.x, self.y - other.y)

    def distance_from(self, other: 'Point2d') -> float:
        return hypot(other.x - self.x, other.y - self.y)

    def squared_distance_from(self, other: 'Point2d') -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        return dx * dx + dy * dy

    def equal_within(self, other: 'Point2d', tol: float) -> bool:
        return self.distance_from(other) <= tol

    def signed_distance_along(self, axis) -> float:
        return self.vector_from(axis.origin_point).component_in(axis.direction)

    def signed_distance_from(self, axis) -> float:
        """Positive to the left of ``axis``."""
        return axis.direction.to_vector().cross(self.vector_from(axis.origin_point))

    def translate_by(self, v: Vector2d) -> 'Point2d':
        return Point2d(self.x + v.x, self.y + v.y)

    def translate_in(self, direction, distance: float) -> 'Point2d':
        return Point2d(self.x + distance * direction.x, self.y + distance * direction.y)

    def scale_about(self, center: 'Point2d', k: float) -> 'Point2d':
        return Point2d(center.x + k * (self.x - center.x), center.y + k * (self.y - center.y))

    def rotate_around(self, center: 'Point2d', angle: float) -> 'Point2d':
        return center.translate_by(self.vector_from(center).rotate_by(angle))

    def mirror_across(self, axis) -> 'Point2d':
        o = axis.origin_point
        return o.translate_by(self.vector_from(o).mirror_across(axis))

    def relative_to(self, frame) -> 'Point2d':
        v = self.vector_from(frame.origin_point).relative_to(frame)
        return Point2d(v.x, v.y)

    def place_in(self, frame) -> 'Point2d':
        return frame.origin_point.translate_by(Vector2d(self.x, self.y).place_in(frame))


@dataclass(frozen=True)
class Point3d:
    x: float
    y: float
    z: float

    @classmethod
    def origin(cls) -> 'Point3d':
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def on(cls, sketch_plane, point: Point2d) -> 'Point3d':
        """Lift a planar point onto ``sketch_plane``."""
        return sketch_plane.origin_point.translate_by(
            Vector3d.on(sketch_plane, Vector2d(point.x, point.y)))

    @classmethod
    def xyz_in(cls, frame, x: float, y: float, z: float) -> 'Point3d':
        return cls(x, y, z).place_in(frame)

    @staticmethod
    def interpolate_from(p: 'Point3d', q: 'Point3d', t: float) -> 'Point3d':
        """Linear interpolation that returns ``p`` exactly at ``t == 0`` and
        ``q`` exactly at ``t == 1``."""
        if t <= 0.5:
            return Point3d(p.x + t * (q.x - p.x),
                           p.y + t * (q.y - p.y),
                           p.z + t * (q.z - p.z))
        s = 1.0 - t
        return Point3d(q.x + s * (p.x - q.x),
                       q.y + s * (p.y - q.y),
                       q.z + s * (p.z - q.z))

    @staticmethod
    def midpoint(p: 'Point3d', q: 'Point3d') -> 'Point3d':
        return Point3d.interpolate_from(p, q, 0.5)

    @staticmethod
    def circumcenter(p1: 'Point3d', p2: 'Point3d', p3: 'Point3d') -> Optional['Point3d']:
        """Center of the circle through three points, ``None`` if collinear."""
        u = p1.vector_to(p2)
        v = p1.vector_to(p3)
        w = u.cross(v)
        w2 = w.squared_length()
        if w2 == 0.0:
            return None
        offset = (v.cross(w) * u.squared_length() + w.cross(u) * v.squared_length()) / (2.0 * w2)
        return p1.translate_by(offset)

    def coordinates(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def vector_to(self, other: 'Point3d') -> Vector3d:
        return Vector3d(other.x - self.x, other.y - self.y, other.z - self.z)

    def vector_from(self, other: 'Point3d') -> Vector3d:
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def distance_from(self, other: 'Point3d') -> float:
        return self.vector_to(other).length()

    def squared_distance_from(self, other: 'Point3d') -> float:
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        return dx * dx + dy * dy + dz * dz

    def equal_within(self, other: 'Point3d', tol: float) -> bool:
        return self.distance_from(other) <= tol

    def signed_distance_along(self, axis) -> float:
        return self.vector_from(axis.origin_point).dot(axis.direction)

    def distance_from_axis(self, axis) -> float:
        v = self.vector_from(axis.origin_point)
        return v.cross(axis.direction.to_vector()).length()

    def project_onto_axis(self, axis) -> 'Point3d':
        return axis.origin_point.translate_by(axis.direction * self.signed_distance_along(axis))

    def signed_distance_from(self, plane) -> float:
        return self.vector_from(plane.origin_point).dot(plane.normal_direction)

    def translate_by(self, v: Vector3d) -> 'Point3d':
        return Point3d(self.x + v.x, self.y + v.y, self.z + v.z)

    def translate_in(self, direction, distance: float) -> 'Point3d':
        return Point3d(self.x + distance * direction.x,
                       self.y + distance * direction.y,
                       self.z + distance * direction.z)

    def scale_about(self, center: 'Point3d', k: float) -> 'Point3d':
        return Point3d(center.x + k * (self.x - center.x),
                       center.y + k * (self.y - center.y),
                       center.z + k * (self.z - center.z))

    def rotate_around(self, axis, angle: float) -> 'Point3d':
        o = axis.origin_point
        rotated = _rotate3(self.vector_from(o).components(), axis.direction.components(), angle)
        return Point3d(o.x + rotated[0], o.y + rotated[1], o.z + rotated[2])

    def mirror_across(self, plane) -> 'Point3d':
        o = plane.origin_point
        return o.translate_by(self.vector_from(o).mirror_across(plane))

    def relative_to(self, frame) -> 'Point3d':
        v = self.vector_from(frame.origin_point).relative_to(frame)
        return Point3d(v.x, v.y, v.z)

    def place_in(self, frame) -> 'Point3d':
        return frame.origin_point.translate_by(Vector3d(self.x, self.y, self.z).place_in(frame))

    def project_into(self, sketch_plane) -> Point2d:
        v = self.vector_from(sketch_plane.origin_point).project_into(sketch_plane)
        return Point2d(v.x, v.y)


__all__ = ['Point2d', 'Point3d']
