## y-monotone polygon triangulation for yapgeom
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

"""Triangulation of polygons with holes.

Follows de Berg, van Kreveld, Overmars, Schwarzkopf, *Computational
Geometry*, chapter 3:

1. Sweep the vertices of every loop from top to bottom (decreasing ``y``,
   ties broken by increasing ``x``), classifying each as a start, split,
   end, merge or regular vertex, and add diagonals at split and merge
   vertices so that every resulting piece is y-monotone.
2. Trace the faces of the boundary-plus-diagonals graph to recover the
   monotone pieces.
3. Triangulate each piece with the linear stack algorithm.

Loops must already be wound with the interior on the left of every edge
(counterclockwise outer loop, clockwise holes), which :class:`Polygon2d`
guarantees.  Triangle indices refer to ``polygon.vertices()`` and every
triangle is counterclockwise.  A polygon with ``V`` vertices and ``H``
holes gives ``V + 2H - 2`` triangles.
"""

from __future__ import annotations

import logging
from math import atan2, pi
from typing import Dict, List, Optional, Set, Tuple

from yapgeom.mesh import TriangularMesh

logger = logging.getLogger(__name__)

START = 'start'
END = 'end'
SPLIT = 'split'
MERGE = 'merge'
REGULAR = 'regular'

Triangle = Tuple[int, int, int]


class _Boundary:
    """Vertex positions plus loop connectivity, by global vertex index."""

    def __init__(self, polygon):
        self.points = polygon.vertices()
        self.next: Dict[int, int] = {}
        self.prev: Dict[int, int] = {}
        self.hole_count = 0
        offset = 0
        for n, loop in enumerate(polygon.loops()):
            count = len(loop)
            if count >= 3:
                if n > 0:
                    self.hole_count += 1
                for i in range(count):
                    v = offset + i
                    self.next[v] = offset + (i + 1) % count
                    self.prev[v] = offset + (i - 1) % count
            offset += count

    def key(self, v: int) -> Tuple[float, float]:
        p = self.points[v]
        return (-p.y, p.x)

    def above(self, a: int, b: int) -> bool:
        return self.key(a) < self.key(b)

    def cross(self, o: int, a: int, b: int) -> float:
        po = self.points[o]
        pa = self.points[a]
        pb = self.points[b]
        return (pa.x - po.x) * (pb.y - po.y) - (pa.y - po.y) * (pb.x - po.x)

    def classify(self, v: int) -> str:
        u = self.prev[v]
        w = self.next[v]
        p = self.points
        convex = (p[v].x - p[u].x) * (p[w].y - p[v].y) - (p[v].y - p[u].y) * (p[w].x - p[v].x) > 0.0
        if self.above(v, u) and self.above(v, w):
            return START if convex else SPLIT
        if self.above(u, v) and self.above(w, v):
            return END if convex else MERGE
        return REGULAR

    def x_at(self, edge: int, y: float) -> float:
        a = self.points[edge]
        b = self.points[self.next[edge]]
        if a.y == b.y:
            return a.x
        if y == b.y:
            return b.x
        if y == a.y:
            return a.x
        return a.x + (y - a.y) * (b.x - a.x) / (b.y - a.y)


class _SweepStatus:
    """Edges crossing the sweep line, left to right, with their helpers.

    Edges in the status never cross, so their order along the sweep line
    is fixed while they are in it and a binary search finds the edge left
    of a vertex.
    """

    def __init__(self, boundary: _Boundary):
        self.boundary = boundary
        self.edges: List[int] = []
        self.helper: Dict[int, int] = {}

    def _index(self, x: float, y: float) -> int:
        # first position whose edge is not left of x at height y
        lo = 0
        hi = len(self.edges)
        while lo < hi:
            mid = (lo + hi) // 2
            if self.boundary.x_at(self.edges[mid], y) < x:
                lo = mid + 1
            else:
                hi = mid
        return lo

    def insert(self, edge: int, helper: int) -> None:
        p = self.boundary.points[edge]
        self.edges.insert(self._index(p.x, p.y), edge)
        self.helper[edge] = helper

    def remove(self, edge: int) -> Optional[int]:
        """Drop ``edge`` as the sweep reaches its lower end; returns its
        helper, or ``None`` if it was not in the status."""
        helper = self.helper.pop(edge, None)
        if helper is None:
            return None
        y = self.boundary.points[self.boundary.next[edge]].y
        i = self._index(self.boundary.x_at(edge, y), y)
        if i < len(self.edges) and self.edges[i] == edge:
            del self.edges[i]
        else:
            self.edges.remove(edge)
        return helper

    def left_of(self, point) -> Optional[int]:
        """Nearest edge strictly left of ``point`` on its sweep line."""
        i = self._index(point.x, point.y)
        return self.edges[i - 1] if i > 0 else None


def _monotone_diagonals(boundary: _Boundary) -> Set[Tuple[int, int]]:
    """Diagonals that split the polygon into y-monotone pieces."""
    order = sorted(boundary.next, key=boundary.key)
    kinds = {v: boundary.classify(v) for v in order}
    # edges crossing the sweep line with the interior to their right,
    # keyed by start vertex
    status = _SweepStatus(boundary)
    diagonals: Set[Tuple[int, int]] = set()

    def add(a: int, b: int) -> None:
        if a == b or boundary.next[a] == b or boundary.next[b] == a:
            return
        diagonals.add((min(a, b), max(a, b)))

    def left_edge(v: int) -> Optional[int]:
        p = boundary.points[v]
        edge = status.left_of(p)
        if edge is None:
            logger.warning('no edge left of %s vertex %d at %s', kinds[v], v, p)
        return edge

    def close_edge(v: int) -> None:
        helper = status.remove(boundary.prev[v])
        if helper is not None and kinds[helper] == MERGE:
            add(v, helper)

    def update_left(v: int) -> None:
        edge = left_edge(v)
        if edge is None:
            return
        helper = status.helper[edge]
        if kinds[helper] == MERGE:
            add(v, helper)
        status.helper[edge] = v

    for v in order:
        kind = kinds[v]
        if kind == START:
            status.insert(v, v)
        elif kind == END:
            close_edge(v)
        elif kind == SPLIT:
            edge = left_edge(v)
            if edge is not None:
                add(v, status.helper[edge])
                status.helper[edge] = v
            status.insert(v, v)
        elif kind == MERGE:
            close_edge(v)
            update_left(v)
        elif boundary.above(boundary.prev[v], v):
            # interior lies to the right of v
            close_edge(v)
            status.insert(v, v)
        else:
            update_left(v)

    return diagonals


def _monotone_pieces(boundary: _Boundary, diagonals: Set[Tuple[int, int]]) -> List[List[int]]:
    """Faces of the boundary plus diagonals, each counterclockwise."""
    outgoing: Dict[int, List[int]] = {v: [w] for v, w in boundary.next.items()}
    for a, b in diagonals:
        outgoing[a].append(b)
        outgoing[b].append(a)

    p = boundary.points

    def angle(a: int, b: int) -> float:
        return atan2(p[b].y - p[a].y, p[b].x - p[a].x)

    def turn(u: int, w: int) -> int:
        # the edge leaving w that is furthest counterclockwise from w->u
        back = angle(w, u)
        best = u
        best_angle = -1.0
        for x in outgoing[w]:
            if x == u:
                continue
            a = (angle(w, x) - back) % (2.0 * pi)
            if a > best_angle:
                best = x
                best_angle = a
        return best

    used: Set[Tuple[int, int]] = set()
    pieces = []
    for v in sorted(outgoing):
        for w in outgoing[v]:
            if (v, w) in used:
                continue
            face = []
            a, b = v, w
            while (a, b) not in used:
                used.add((a, b))
                face.append(a)
                a, b = b, turn(a, b)
            pieces.append(face)
    return pieces


def _triangulate_monotone(boundary: _Boundary, face: List[int]) -> List[Triangle]:
    n = len(face)
    if n < 3:
        logger.warning('skipping monotone piece with %d vertices', n)
        return []
    if n == 3:
        return [tuple(face)]
    top = min(range(n), key=lambda i: boundary.key(face[i]))
    bottom = max(range(n), key=lambda i: boundary.key(face[i]))
    on_left = {}
    i = top
    while i != bottom:
        on_left[face[i]] = True
        i = (i + 1) % n
    while i != top:
        on_left[face[i]] = False
        i = (i + 1) % n

    u = sorted(face, key=boundary.key)
    triangles: List[Triangle] = []
    stack = [u[0], u[1]]
    for j in range(2, n - 1):
        uj = u[j]
        if on_left[uj] != on_left[stack[-1]]:
            while len(stack) > 1:
                a = stack.pop()
                triangles.append((uj, a, stack[-1]))
            stack = [u[j - 1], uj]
        else:
            last = stack.pop()
            while stack:
                c = boundary.cross(stack[-1], last, uj)
                if (c > 0.0) if on_left[uj] else (c < 0.0):
                    triangles.append((uj, last, stack[-1]))
                    last = stack.pop()
                else:
                    break
            stack.append(last)
            stack.append(uj)
    lowest = u[n - 1]
    while len(stack) > 1:
        a = stack.pop()
        triangles.append((lowest, a, stack[-1]))
    return triangles


def _counterclockwise(boundary: _Boundary, triangle: Triangle) -> Triangle:
    a, b, c = triangle
    if boundary.cross(a, b, c) < 0.0:
        return (a, c, b)
    return triangle


def triangulate(polygon) -> TriangularMesh:
    """Triangulate ``polygon`` into a mesh over ``polygon.vertices()``."""
    boundary = _Boundary(polygon)
    if len(polygon.outer_loop) < 3 or polygon.area() == 0.0:
        logger.debug('nothing to triangulate for polygon of %d vertices', len(boundary.points))
        return TriangularMesh.indexed(boundary.points, [])

    diagonals = _monotone_diagonals(boundary)
    pieces = _monotone_pieces(boundary, diagonals)
    triangles = []
    for face in pieces:
        triangles.extend(_counterclockwise(boundary, t) for t in _triangulate_monotone(boundary, face))

    expected = len(boundary.next) + 2 * boundary.hole_count - 2
    if len(triangles) != expected:
        logger.warning('triangulation produced %d triangles, expected %d',
                       len(triangles), expected)
    logger.debug('triangulated %d vertices and %d holes: %d diagonals, %d pieces, %d triangles',
                 len(boundary.next), boundary.hole_count, len(diagonals), len(pieces),
                 len(triangles))
    return TriangularMesh.indexed(boundary.points, triangles)


__all__ = ['triangulate']
