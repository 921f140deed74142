## triangle meshes for yapgeom
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

"""Indexed triangle meshes.

A :class:`TriangularMesh` holds a tuple of vertices and a tuple of
``(i, j, k)`` index triples into it.  :meth:`TriangularMesh.vertex_array`
and :meth:`TriangularMesh.face_array` hand the same data to NumPy
consumers, in the layout ``mapbox-earcut`` and most mesh tooling expect.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Sequence, Tuple

import numpy as np

Face = Tuple[int, int, int]


@dataclass(frozen=True)
class TriangularMesh:
    vertices: Tuple[Any, ...]
    faces: Tuple[Face, ...]

    def __post_init__(self):
        count = len(self.vertices)
        for face in self.faces:
            if len(face) != 3:
                raise ValueError('mesh faces must be index triples, got {}'.format(face))
            for index in face:
                if not 0 <= index < count:
                    raise ValueError('face {} refers to missing vertex {}'.format(face, index))

    @classmethod
    def indexed(cls, vertices: Sequence[Any], faces: Sequence[Sequence[int]]) -> 'TriangularMesh':
        return cls(tuple(vertices), tuple(tuple(int(i) for i in face) for face in faces))

    def vertex_count(self) -> int:
        return len(self.vertices)

    def face_count(self) -> int:
        return len(self.faces)

    def face_vertices(self) -> List[Tuple[Any, Any, Any]]:
        """Each face as a triple of vertices rather than indices."""
        v = self.vertices
        return [(v[i], v[j], v[k]) for i, j, k in self.faces]

    def vertex_array(self) -> np.ndarray:
        """``(n, 2)`` or ``(n, 3)`` float64 array of vertex coordinates."""
        if not self.vertices:
            return np.zeros((0, 2), dtype=np.float64)
        return np.asarray([p.coordinates() for p in self.vertices], dtype=np.float64)

    def face_array(self) -> np.ndarray:
        """``(m, 3)`` uint32 array of vertex indices."""
        if not self.faces:
            return np.zeros((0, 3), dtype=np.uint32)
        return np.asarray(self.faces, dtype=np.uint32)

    def map_vertices(self, function) -> 'TriangularMesh':
        """Same connectivity with every vertex passed through ``function``."""
        return TriangularMesh(tuple(function(p) for p in self.vertices), self.faces)


__all__ = ['TriangularMesh']
