## axis-aligned bounding boxes for yapgeom
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

"""Axis-aligned bounding boxes.

Same role as the ``[[xmin,ymin,zmin,1],[xmax,ymax,zmax,1]]`` bounding box
lines of :mod:`yapcad.geom`, as value types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from yapgeom.point import Point2d, Point3d


@dataclass(frozen=True)
class BoundingBox2d:
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_extrema(cls, min_x: float, max_x: float, min_y: float, max_y: float) -> 'BoundingBox2d':
        return cls(min(min_x, max_x), max(min_x, max_x), min(min_y, max_y), max(min_y, max_y))

    @classmethod
    def singleton(cls, point: Point2d) -> 'BoundingBox2d':
        return cls(point.x, point.x, point.y, point.y)

    @classmethod
    def hull_of(cls, points: Iterable[Point2d]) -> 'BoundingBox2d':
        pts = list(points)
        if not pts:
            raise ValueError('cannot compute the bounding box of an empty point set')
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        return cls(min(xs), max(xs), min(ys), max(ys))

    def extrema(self) -> Tuple[float, float, float, float]:
        return (self.min_x, self.max_x, self.min_y, self.max_y)

    def center_point(self) -> Point2d:
        return Point2d(0.5 * (self.min_x + self.max_x), 0.5 * (self.min_y + self.max_y))

    def dimensions(self) -> Tuple[float, float]:
        return (self.max_x - self.min_x, self.max_y - self.min_y)

    def union(self, other: 'BoundingBox2d') -> 'BoundingBox2d':
        return BoundingBox2d(min(self.min_x, other.min_x), max(self.max_x, other.max_x),
                             min(self.min_y, other.min_y), max(self.max_y, other.max_y))

    def contains(self, point: Point2d) -> bool:
        return self.min_x <= point.x <= self.max_x and self.min_y <= point.y <= self.max_y

    def intersects(self, other: 'BoundingBox2d') -> bool:
        return (self.min_x <= other.max_x and other.min_x <= self.max_x and
                self.min_y <= other.max_y and other.min_y <= self.max_y)


@dataclass(frozen=True)
class BoundingBox3d:
    min_x: float
    max_x: float
    min_y: float
    max_y: float
    min_z: float
    max_z: float

    @classmethod
    def singleton(cls, point: Point3d) -> 'BoundingBox3d':
        return cls(point.x, point.x, point.y, point.y, point.z, point.z)

    @classmethod
    def hull_of(cls, points: Iterable[Point3d]) -> 'BoundingBox3d':
        pts = list(points)
        if not pts:
            raise ValueError('cannot compute the bounding box of an empty point set')
        xs = [p.x for p in pts]
        ys = [p.y for p in pts]
        zs = [p.z for p in pts]
        return cls(min(xs), max(xs), min(ys), max(ys), min(zs), max(zs))

    def extrema(self) -> Tuple[float, float, float, float, float, float]:
        return (self.min_x, self.max_x, self.min_y, self.max_y, self.min_z, self.max_z)

    def center_point(self) -> Point3d:
        return Point3d(0.5 * (self.min_x + self.max_x),
                       0.5 * (self.min_y + self.max_y),
                       0.5 * (self.min_z + self.max_z))

    def dimensions(self) -> Tuple[float, float, float]:
        return (self.max_x - self.min_x, self.max_y - self.min_y, self.max_z - self.min_z)

    def union(self, other: 'BoundingBox3d') -> 'BoundingBox3d':
        return BoundingBox3d(min(self.min_x, other.min_x), max(self.max_x, other.max_x),
                             min(self.min_y, other.min_y), max(self.max_y, other.max_y),
                             min(self.min_z, other.min_z), max(self.max_z, other.max_z))

    def contains(self, point: Point3d) -> bool:
        return (self.min_x <= point.x <= self.max_x and
                self.min_y <= point.y <= self.max_y and
                self.min_z <= point.z <= self.max_z)


__all__ = ['BoundingBox2d', 'BoundingBox3d']
