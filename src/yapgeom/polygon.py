## polygons with holes for yapgeom
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

"""Planar polygons with holes.

A :class:`Polygon2d` is an outer loop plus zero or more inner loops (holes),
each a tuple of :class:`~yapgeom.point.Point2d` with the closing edge
implied.  Windings are normalized on construction: the outer loop is
counterclockwise (non-negative signed area) and every inner loop is
clockwise, so the interior is always to the left of every edge.  Since
every transformation builds a new polygon, loops are reversed
automatically whenever a transformation (a mirror, a left-handed frame)
reverses orientation.

Point containment follows

    Hao, Sun, Guo, Zhang, Wang: "Optimal Reliable Point-in-Polygon Test and
    Differential Coding Boolean Operations on Polygons", Symmetry 2018.

Points on the boundary are inside.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import pi
from typing import Iterable, List, Optional, Sequence, Tuple

from yapgeom.bounding_box import BoundingBox2d
from yapgeom.line_segment import LineSegment2d
from yapgeom.mesh import TriangularMesh
from yapgeom.point import Point2d
from yapgeom.triangulation import triangulate
from yapgeom.vector import Vector2d

Loop = Tuple[Point2d, ...]


def signed_area(loop: Sequence[Point2d]) -> float:
    """Signed area of a closed loop; positive when counterclockwise.

    Computed as a fan of triangles from the first vertex, zero for fewer
    than three vertices.
    """
    if len(loop) < 3:
        return 0.0
    p0 = loop[0]
    total = 0.0
    for p1, p2 in zip(loop[1:-1], loop[2:]):
        total += p0.vector_to(p1).cross(p0.vector_to(p2))
    return 0.5 * total


def make_outer_loop(loop: Iterable[Point2d]) -> Loop:
    """``loop`` as a tuple, reversed if needed so it runs counterclockwise."""
    pts = tuple(loop)
    if signed_area(pts) < 0.0:
        return pts[::-1]
    return pts


def make_inner_loop(loop: Iterable[Point2d]) -> Loop:
    """``loop`` as a tuple, reversed if needed so it runs clockwise."""
    pts = tuple(loop)
    if signed_area(pts) > 0.0:
        return pts[::-1]
    return pts


def _cross(o: Point2d, a: Point2d, b: Point2d) -> float:
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)


def _chain(points: Iterable[Point2d]) -> List[Point2d]:
    chain: List[Point2d] = []
    for p in points:
        # pop non-left turns, which also drops collinear points
        while len(chain) >= 2 and _cross(chain[-2], chain[-1], p) <= 0.0:
            chain.pop()
        chain.append(p)
    return chain


def convex_hull(points: Iterable[Point2d]) -> List[Point2d]:
    """Counterclockwise convex hull by Andrew's monotone chain.

    Duplicate points and points on hull edges are dropped.  Fewer than two
    distinct input points give an empty hull.
    """
    ordered: List[Point2d] = []
    for p in sorted(points, key=lambda q: (q.x, q.y)):
        if not ordered or ordered[-1] != p:
            ordered.append(p)
    if len(ordered) < 2:
        return []
    lower = _chain(ordered)
    upper = _chain(reversed(ordered))
    return lower[:-1] + upper[:-1]


def _loop_contains(point: Point2d, loop: Sequence[Point2d]) -> Optional[int]:
    """Crossing count of ``loop`` for ``point``, or ``None`` if the point
    lies on the loop."""
    xp = point.x
    yp = point.y
    k = 0
    n = len(loop)
    for i in range(n):
        pi_ = loop[i]
        pj = loop[(i + 1) % n]
        v1 = pi_.y - yp
        v2 = pj.y - yp
        # edge entirely above or entirely below
        if (v1 < 0 and v2 < 0) or (v1 > 0 and v2 > 0):
            continue
        u1 = pi_.x - xp
        u2 = pj.x - xp
        f = u1 * v2 - u2 * v1
        if v2 > 0 and v1 <= 0:
            if f > 0:
                k += 1
            elif f == 0:
                return None
        elif v1 > 0 and v2 <= 0:
            if f < 0:
                k += 1
            elif f == 0:
                return None
        elif v2 == 0 and v1 < 0:
            if f == 0:
                return None
        elif v1 == 0 and v2 < 0:
            if f == 0:
                return None
        elif v1 == 0 and v2 == 0:
            if (u2 <= 0 and u1 >= 0) or (u1 <= 0 and u2 >= 0):
                return None
    return k


def contains(point: Point2d, polygon: 'Polygon2d') -> bool:
    """Is ``point`` inside ``polygon`` or on its boundary?"""
    crossings = 0
    for loop in polygon.loops():
        k = _loop_contains(point, loop)
        if k is None:
            return True
        crossings += k
    return crossings % 2 == 1


@dataclass(frozen=True)
class Polygon2d:
    outer_loop: Loop
    inner_loops: Tuple[Loop, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'outer_loop', make_outer_loop(self.outer_loop))
        object.__setattr__(self, 'inner_loops',
                           tuple(make_inner_loop(loop) for loop in self.inner_loops))

    @classmethod
    def single_loop(cls, vertices: Iterable[Point2d]) -> 'Polygon2d':
        return cls(tuple(vertices))

    @classmethod
    def with_holes(cls, inner_loops: Iterable[Iterable[Point2d]],
                   outer_loop: Iterable[Point2d]) -> 'Polygon2d':
        return cls(tuple(outer_loop), tuple(tuple(loop) for loop in inner_loops))

    @classmethod
    def convex_hull(cls, points: Iterable[Point2d]) -> 'Polygon2d':
        return cls(tuple(convex_hull(points)))

    @classmethod
    def regular(cls, center: Point2d, circumradius: float, num_sides: int) -> 'Polygon2d':
        """Regular polygon with a horizontal bottom edge."""
        if num_sides < 3:
            raise ValueError('a regular polygon needs at least 3 sides, got {}'.format(num_sides))
        step = 2.0 * pi / num_sides
        start = -0.5 * pi + 0.5 * step
        return cls(tuple(center.translate_by(Vector2d.polar(circumradius, start + i * step))
                         for i in range(num_sides)))

    def loops(self) -> Tuple[Loop, ...]:
        return (self.outer_loop,) + self.inner_loops

    def vertices(self) -> List[Point2d]:
        """Outer loop vertices followed by those of each inner loop."""
        return [p for loop in self.loops() for p in loop]

    def edges(self) -> List[LineSegment2d]:
        result = []
        for loop in self.loops():
            n = len(loop)
            result.extend(LineSegment2d(loop[i], loop[(i + 1) % n]) for i in range(n))
        return result

    def perimeter(self) -> float:
        return sum(edge.length() for edge in self.edges())

    def area(self) -> float:
        return sum(signed_area(loop) for loop in self.loops())

    def centroid(self) -> Optional[Point2d]:
        """Area centroid, or ``None`` for a polygon of zero area."""
        if not self.outer_loop:
            return None
        o = self.outer_loop[0]
        total = 0.0
        cx = 0.0
        cy = 0.0
        for loop in self.loops():
            n = len(loop)
            for i in range(n):
                a = loop[i].vector_from(o)
                b = loop[(i + 1) % n].vector_from(o)
                w = a.cross(b)
                total += w
                cx += (a.x + b.x) * w
                cy += (a.y + b.y) * w
        if total == 0.0:
            return None
        return Point2d(o.x + cx / (3.0 * total), o.y + cy / (3.0 * total))

    def bounding_box(self) -> Optional[BoundingBox2d]:
        """Extent of the outer loop, or ``None`` for an empty polygon."""
        if not self.outer_loop:
            return None
        return BoundingBox2d.hull_of(self.outer_loop)

    def contains(self, point: Point2d) -> bool:
        return contains(point, self)

    def triangulate(self) -> TriangularMesh:
        """Triangulate into a :class:`~yapgeom.mesh.TriangularMesh` whose
        vertices are :meth:`vertices`."""
        return triangulate(self)

    def _map(self, function) -> 'Polygon2d':
        return Polygon2d(tuple(function(p) for p in self.outer_loop),
                         tuple(tuple(function(p) for p in loop) for loop in self.inner_loops))

    def translate_by(self, displacement) -> 'Polygon2d':
        return self._map(lambda p: p.translate_by(displacement))

    def translate_in(self, direction, distance: float) -> 'Polygon2d':
        return self._map(lambda p: p.translate_in(direction, distance))

    def scale_about(self, center: Point2d, k: float) -> 'Polygon2d':
        return self._map(lambda p: p.scale_about(center, k))

    def rotate_around(self, center: Point2d, angle: float) -> 'Polygon2d':
        return self._map(lambda p: p.rotate_around(center, angle))

    def mirror_across(self, axis) -> 'Polygon2d':
        return self._map(lambda p: p.mirror_across(axis))

    def relative_to(self, frame) -> 'Polygon2d':
        return self._map(lambda p: p.relative_to(frame))

    def place_in(self, frame) -> 'Polygon2d':
        return self._map(lambda p: p.place_in(frame))


__all__ = [
    'Polygon2d',
    'signed_area',
    'make_outer_loop',
    'make_inner_loop',
    'convex_hull',
    'contains',
]
