## error values and exceptions for yapgeom
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

"""Errors and failure values.

Geometric conditions a caller is expected to handle (a curve collapsing to a
point, three collinear points, a zero vector) are reported as values:
:class:`DegenerateCurve` or ``None``.  Exceptions are reserved for malformed
input, and all of them derive from :class:`ValueError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class GeometryError(ValueError):
    """Raised when a value violates a geometric invariant (non-unit direction,
    non-orthogonal frame, etc.)."""


@dataclass(frozen=True)
class DegenerateCurve:
    """A curve that collapses to a single point.

    Returned by ``nondegenerate()`` instead of a nondegenerate curve.  It is
    falsy so callers can write ``if not result: ...``.
    """

    point: Any

    def __bool__(self) -> bool:
        return False


__all__ = ['GeometryError', 'DegenerateCurve']
