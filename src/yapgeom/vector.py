## vectors and directions for yapgeom
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

"""Vectors and unit directions in two and three dimensions.

Vectors are displacements: they are unaffected by translation and are
rotated, mirrored and converted between frames without reference to any
origin.  Directions are vectors of unit length.  A direction can only be
built from components that already have unit magnitude; normalizing a
vector goes through :meth:`Vector2d.direction`, which returns ``None`` for
the zero vector.

Frames, axes, planes and sketch planes are accepted by duck type (see
:mod:`yapgeom.frame`) so this module has no dependency on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import atan2, cos, hypot, sin
from typing import Optional, Tuple

from yapgeom import config
from yapgeom.errors import GeometryError


def _check_unit(components: Tuple[float, ...]) -> None:
    magnitude = hypot(*components)
    if abs(magnitude - 1.0) > config.DIRECTION_TOLERANCE:
        raise GeometryError('direction components {} do not have unit magnitude'.format(components))


def _rotate3(v: Tuple[float, float, float], k: Tuple[float, float, float], angle: float) -> Tuple[float, float, float]:
    # Rodrigues' rotation of v about unit vector k
    c = cos(angle)
    s = sin(angle)
    kx, ky, kz = k
    vx, vy, vz = v
    kdotv = kx * vx + ky * vy + kz * vz
    cx = ky * vz - kz * vy
    cy = kz * vx - kx * vz
    cz = kx * vy - ky * vx
    return (vx * c + cx * s + kx * kdotv * (1.0 - c),
            vy * c + cy * s + ky * kdotv * (1.0 - c),
            vz * c + cz * s + kz * kdotv * (1.0 - c))


@dataclass(frozen=True)
class Vector2d:
    """Displacement in the plane."""

    x: float
    y: float

    @classmethod
    def zero(cls) -> 'Vector2d':
        return cls(0.0, 0.0)

    @classmethod
    def polar(cls, radius: float, angle: float) -> 'Vector2d':
        return cls(radius * cos(angle), radius * sin(angle))

    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def __add__(self, other: 'Vector2d') -> 'Vector2d':
        return Vector2d(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2d') -> 'Vector2d':
        return Vector2d(self.x - other.x, self.y - other.y)

    def __neg__(self) -> 'Vector2d':
        return Vector2d(-self.x, -self.y)

    def __mul__(self, k: float) -> 'Vector2d':
        return Vector2d(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> 'Vector2d':
        return Vector2d(self.x / k, self.y / k)

    def length(self) -> float:
        return hypot(self.x, self.y)

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other) -> float:
        """Scalar (z component) of the cross product."""
        return self.x * other.y - self.y * other.x

    def direction(self) -> Optional['Direction2d']:
        """Return the direction of this vector, or ``None`` if it is zero."""
        length = self.length()
        if length == 0.0:
            return None
        return Direction2d(self.x / length, self.y / length)

    def normalize(self) -> 'Vector2d':
        length = self.length()
        if length == 0.0:
            return self
        return Vector2d(self.x / length, self.y / length)

    def reverse(self) -> 'Vector2d':
        return Vector2d(-self.x, -self.y)

    def scale_by(self, k: float) -> 'Vector2d':
        return Vector2d(self.x * k, self.y * k)

    def component_in(self, direction: 'Direction2d') -> float:
        return self.x * direction.x + self.y * direction.y

    def rotate_by(self, angle: float) -> 'Vector2d':
        c = cos(angle)
        s = sin(angle)
        return Vector2d(c * self.x - s * self.y, s * self.x + c * self.y)

    def rotate_counterclockwise(self) -> 'Vector2d':
        return Vector2d(-self.y, self.x)

    def rotate_clockwise(self) -> 'Vector2d':
        return Vector2d(self.y, -self.x)

    def mirror_across(self, axis) -> 'Vector2d':
        d = axis.direction
        k = 2.0 * (self.x * d.x + self.y * d.y)
        return Vector2d(k * d.x - self.x, k * d.y - self.y)

    def relative_to(self, frame) -> 'Vector2d':
        return Vector2d(self.component_in(frame.x_direction),
                        self.component_in(frame.y_direction))

    def place_in(self, frame) -> 'Vector2d':
        fx = frame.x_direction
        fy = frame.y_direction
        return Vector2d(fx.x * self.x + fy.x * self.y,
                        fx.y * self.x + fy.y * self.y)


@dataclass(frozen=True)
class Vector3d:
    """Displacement in space."""

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> 'Vector3d':
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def on(cls, sketch_plane, vector: Vector2d) -> 'Vector3d':
        """Lift a planar vector into 3D using the axes of ``sketch_plane``."""
        u = sketch_plane.x_direction
        v = sketch_plane.y_direction
        return cls(u.x * vector.x + v.x * vector.y,
                   u.y * vector.x + v.y * vector.y,
                   u.z * vector.x + v.z * vector.y)

    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def __add__(self, other: 'Vector3d') -> 'Vector3d':
        return Vector3d(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: 'Vector3d') -> 'Vector3d':
        return Vector3d(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> 'Vector3d':
        return Vector3d(-self.x, -self.y, -self.z)

    def __mul__(self, k: float) -> 'Vector3d':
        return Vector3d(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> 'Vector3d':
        return Vector3d(self.x / k, self.y / k, self.z / k)

    def length(self) -> float:
        return hypot(self.x, self.y, self.z)

    def squared_length(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> 'Vector3d':
        return Vector3d(self.y * other.z - self.z * other.y,
                        self.z * other.x - self.x * other.z,
                        self.x * other.y - self.y * other.x)

    def direction(self) -> Optional['Direction3d']:
        """Return the direction of this vector, or ``None`` if it is zero."""
        length = self.length()
        if length == 0.0:
            return None
        return Direction3d(self.x / length, self.y / length, self.z / length)

    def normalize(self) -> 'Vector3d':
        length = self.length()
        if length == 0.0:
            return self
        return self / length

    def reverse(self) -> 'Vector3d':
        return -self

    def scale_by(self, k: float) -> 'Vector3d':
        return self * k

    def component_in(self, direction: 'Direction3d') -> float:
        return self.dot(direction)

    def rotate_around(self, axis, angle: float) -> 'Vector3d':
        return Vector3d(*_rotate3(self.components(), axis.direction.components(), angle))

    def mirror_across(self, plane) -> 'Vector3d':
        n = plane.normal_direction
        k = 2.0 * self.dot(n)
        return Vector3d(self.x - k * n.x, self.y - k * n.y, self.z - k * n.z)

    def relative_to(self, frame) -> 'Vector3d':
        return Vector3d(self.dot(frame.x_direction),
                        self.dot(frame.y_direction),
                        self.dot(frame.z_direction))

    def place_in(self, frame) -> 'Vector3d':
        fx = frame.x_direction
        fy = frame.y_direction
        fz = frame.z_direction
        return Vector3d(fx.x * self.x + fy.x * self.y + fz.x * self.z,
                        fx.y * self.x + fy.y * self.y + fz.y * self.z,
                        fx.z * self.x + fy.z * self.y + fz.z * self.z)

    def project_into(self, sketch_plane) -> Vector2d:
        return Vector2d(self.dot(sketch_plane.x_direction),
                        self.dot(sketch_plane.y_direction))


@dataclass(frozen=True)
class Direction2d:
    """Unit vector in the plane.  Construction fails with
    :class:`~yapgeom.errors.GeometryError` for non-unit components."""

    x: float
    y: float

    def __post_init__(self):
        _check_unit((self.x, self.y))

    @classmethod
    def from_angle(cls, angle: float) -> 'Direction2d':
        return cls(cos(angle), sin(angle))

    @classmethod
    def positive_x(cls) -> 'Direction2d':
        return cls(1.0, 0.0)

    @classmethod
    def negative_x(cls) -> 'Direction2d':
        return cls(-1.0, 0.0)

    @classmethod
    def positive_y(cls) -> 'Direction2d':
        return cls(0.0, 1.0)

    @classmethod
    def negative_y(cls) -> 'Direction2d':
        return cls(0.0, -1.0)

    def components(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def angle(self) -> float:
        """Counterclockwise angle from the positive X axis, in ``(-pi, pi]``."""
        return atan2(self.y, self.x)

    def to_vector(self) -> Vector2d:
        return Vector2d(self.x, self.y)

    def __mul__(self, k: float) -> Vector2d:
        return Vector2d(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __neg__(self) -> 'Direction2d':
        return Direction2d(-self.x, -self.y)

    def reverse(self) -> 'Direction2d':
        return Direction2d(-self.x, -self.y)

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y

    def perpendicular_to(self) -> 'Direction2d':
        """Direction rotated 90 degrees counterclockwise."""
        return Direction2d(-self.y, self.x)

    def rotate_counterclockwise(self) -> 'Direction2d':
        return Direction2d(-self.y, self.x)

    def rotate_clockwise(self) -> 'Direction2d':
        return Direction2d(self.y, -self.x)

    def rotate_by(self, angle: float) -> 'Direction2d':
        return Direction2d.from_angle(self.angle() + angle)

    def mirror_across(self, axis) -> 'Direction2d':
        d = axis.direction
        k = 2.0 * (self.x * d.x + self.y * d.y)
        return Direction2d(k * d.x - self.x, k * d.y - self.y)

    def relative_to(self, frame) -> 'Direction2d':
        return _renormalized2(self.to_vector().relative_to(frame))

    def place_in(self, frame) -> 'Direction2d':
        return _renormalized2(self.to_vector().place_in(frame))


@dataclass(frozen=True)
class Direction3d:
    """Unit vector in space.  Construction fails with
    :class:`~yapgeom.errors.GeometryError` for non-unit components."""

    x: float
    y: float
    z: float

    def __post_init__(self):
        _check_unit((self.x, self.y, self.z))

    @classmethod
    def positive_x(cls) -> 'Direction3d':
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def positive_y(cls) -> 'Direction3d':
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def positive_z(cls) -> 'Direction3d':
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def negative_z(cls) -> 'Direction3d':
        return cls(0.0, 0.0, -1.0)

    @classmethod
    def on(cls, sketch_plane, direction: Direction2d) -> 'Direction3d':
        return _renormalized3(Vector3d.on(sketch_plane, direction.to_vector()))

    def components(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def to_vector(self) -> Vector3d:
        return Vector3d(self.x, self.y, self.z)

    def __mul__(self, k: float) -> Vector3d:
        return Vector3d(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __neg__(self) -> 'Direction3d':
        return Direction3d(-self.x, -self.y, -self.z)

    def reverse(self) -> 'Direction3d':
        return -self

    def dot(self, other) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other) -> Vector3d:
        return self.to_vector().cross(other)

    def perpendicular_direction(self) -> 'Direction3d':
        """Some direction perpendicular to this one."""
        ax, ay, az = abs(self.x), abs(self.y), abs(self.z)
        if ax <= ay and ax <= az:
            v = Vector3d(0.0, -self.z, self.y)
        elif ay <= az:
            v = Vector3d(self.z, 0.0, -self.x)
        else:
            v = Vector3d(-self.y, self.x, 0.0)
        return v.direction()

    def rotate_around(self, axis, angle: float) -> 'Direction3d':
        return _renormalized3(self.to_vector().rotate_around(axis, angle))

    def mirror_across(self, plane) -> 'Direction3d':
        return _renormalized3(self.to_vector().mirror_across(plane))

    def relative_to(self, frame) -> 'Direction3d':
        return _renormalized3(self.to_vector().relative_to(frame))

    def place_in(self, frame) -> 'Direction3d':
        return _renormalized3(self.to_vector().place_in(frame))

    def project_into(self, sketch_plane) -> Optional[Direction2d]:
        return self.to_vector().project_into(sketch_plane).direction()


def _renormalized2(v: Vector2d) -> Direction2d:
    direction = v.direction()
    if direction is None:
        raise GeometryError('direction collapsed to zero under transformation')
    return direction


def _renormalized3(v: Vector3d) -> Direction3d:
    direction = v.direction()
    if direction is None:
        raise GeometryError('direction collapsed to zero under transformation')
    return direction


__all__ = [
    'Vector2d',
    'Vector3d',
    'Direction2d',
    'Direction3d',
]
