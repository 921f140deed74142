# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

from yapgeom.arc import Arc2d, Arc3d, SweptAngle
from yapgeom.arc_length import ArcLengthParameterization
from yapgeom.bounding_box import BoundingBox2d, BoundingBox3d
from yapgeom.cubic_spline import CubicSpline2d, CubicSpline3d
from yapgeom.curve import (
    ArcLengthParameterized,
    FirstDerivativeNonZero,
    Nondegenerate,
    SecondDerivativeNonZero,
    ThirdDerivativeNonZero,
)
from yapgeom.elliptical_arc import EllipticalArc2d, EllipticalArc3d
from yapgeom.errors import DegenerateCurve, GeometryError
from yapgeom.frame import Axis2d, Axis3d, Frame2d, Frame3d, Plane3d, SketchPlane3d
from yapgeom.line_segment import LineSegment2d
from yapgeom.mesh import TriangularMesh
from yapgeom.point import Point2d, Point3d
from yapgeom.polygon import Polygon2d
from yapgeom.quadratic_spline import QuadraticSpline2d, QuadraticSpline3d
from yapgeom.vector import Direction2d, Direction3d, Vector2d, Vector3d


try:
    __version__ = version("yapgeom")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"


__all__ = [
    "Arc2d",
    "Arc3d",
    "ArcLengthParameterization",
    "ArcLengthParameterized",
    "Axis2d",
    "Axis3d",
    "BoundingBox2d",
    "BoundingBox3d",
    "CubicSpline2d",
    "CubicSpline3d",
    "DegenerateCurve",
    "Direction2d",
    "Direction3d",
    "EllipticalArc2d",
    "EllipticalArc3d",
    "FirstDerivativeNonZero",
    "Frame2d",
    "Frame3d",
    "GeometryError",
    "LineSegment2d",
    "Nondegenerate",
    "Plane3d",
    "Point2d",
    "Point3d",
    "Polygon2d",
    "QuadraticSpline2d",
    "QuadraticSpline3d",
    "SecondDerivativeNonZero",
    "SketchPlane3d",
    "SweptAngle",
    "ThirdDerivativeNonZero",
    "TriangularMesh",
    "Vector2d",
    "Vector3d",
]
