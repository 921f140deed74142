## numeric tolerances and limits for yapgeom
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

"""Numeric constants shared across yapgeom.

These play the role ``epsilon`` plays in :mod:`yapcad.geom`: they are module
level values read at call time.  Redefine them at your peril.
"""

# Allowed deviation of a direction's magnitude from 1.
DIRECTION_TOLERANCE = 1e-9

# Maximum bisection depth for arc-length tables (2**depth segments).
MAX_ARC_LENGTH_DEPTH = 16

# Abscissa of two-point Gauss-Legendre quadrature mapped onto [0, 1].
GAUSS_LEGENDRE_OFFSET = 0.21132486540518713
