## line segments for yapgeom
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

"""Planar line segments, used for polygon edges.

Parameterized over ``0 <= t <= 1`` from the start point to the end point,
like yapCAD lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from yapgeom.bounding_box import BoundingBox2d
from yapgeom.point import Point2d
from yapgeom.vector import Direction2d, Vector2d


@dataclass(frozen=True)
class LineSegment2d:
    start_point: Point2d
    end_point: Point2d

    @classmethod
    def from_endpoints(cls, endpoints: Tuple[Point2d, Point2d]) -> 'LineSegment2d':
        return cls(endpoints[0], endpoints[1])

    def endpoints(self) -> Tuple[Point2d, Point2d]:
        return (self.start_point, self.end_point)

    def point_on(self, t: float) -> Point2d:
        return Point2d.interpolate_from(self.start_point, self.end_point, t)

    def midpoint(self) -> Point2d:
        return Point2d.midpoint(self.start_point, self.end_point)

    def vector(self) -> Vector2d:
        return self.start_point.vector_to(self.end_point)

    def direction(self) -> Optional[Direction2d]:
        return self.vector().direction()

    def length(self) -> float:
        return self.start_point.distance_from(self.end_point)

    def reverse(self) -> 'LineSegment2d':
        return LineSegment2d(self.end_point, self.start_point)

    def bounding_box(self) -> BoundingBox2d:
        return BoundingBox2d.hull_of(self.endpoints())


__all__ = ['LineSegment2d']
