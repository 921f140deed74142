import math

import pytest

from yapgeom import (
    Axis2d,
    DegenerateCurve,
    Direction2d,
    Direction3d,
    EllipticalArc2d,
    EllipticalArc3d,
    FirstDerivativeNonZero,
    Frame2d,
    Plane3d,
    Point2d,
    Point3d,
    SecondDerivativeNonZero,
    SketchPlane3d,
    Vector2d,
    Vector3d,
)

SAMPLES = [i / 8.0 for i in range(9)]


def _close(p, q, tol=1e-9):
    assert p.distance_from(q) <= tol, '{} != {}'.format(p, q)


def _ellipse(swept=2 * math.pi):
    return EllipticalArc2d.with_(Point2d(1.0, -1.0), Direction2d.positive_x(), 2.0, 1.0, 0.0, swept)


def test_point_on():
    arc = _ellipse(math.pi)
    _close(arc.start_point(), Point2d(3.0, -1.0))
    _close(arc.point_on(0.5), Point2d(1.0, 0.0))
    _close(arc.end_point(), Point2d(-1.0, -1.0))
    assert arc.center_point() == Point2d(1.0, -1.0)


def test_negative_radius_is_rejected():
    with pytest.raises(ValueError):
        EllipticalArc2d.with_(Point2d(0, 0), Direction2d.positive_x(), -1.0, 1.0, 0.0, 1.0)


def test_nondegenerate_variants():
    assert isinstance(_ellipse().nondegenerate(), FirstDerivativeNonZero)
    flat = EllipticalArc2d.with_(Point2d(0, 0), Direction2d.positive_x(), 2.0, 0.0, 0.0, 2 * math.pi)
    assert isinstance(flat.nondegenerate(), SecondDerivativeNonZero)
    point = EllipticalArc2d.with_(Point2d(0, 0), Direction2d.positive_x(), 0.0, 0.0, 0.0, 1.0)
    assert isinstance(point.nondegenerate(), DegenerateCurve)
    no_sweep = EllipticalArc2d.with_(Point2d(0, 0), Direction2d.positive_x(), 1.0, 1.0, 0.0, 0.0)
    assert isinstance(no_sweep.nondegenerate(), DegenerateCurve)


def test_flat_ellipse_tangent_at_turning_point():
    # collapsed onto the x axis: runs out to x = 2 and turns back
    flat = EllipticalArc2d.with_(Point2d(0, 0), Direction2d.positive_x(), 2.0, 0.0,
                                 -math.pi / 2, math.pi)
    nd = flat.nondegenerate()
    assert math.isclose(nd.tangent_direction(0.25).x, 1.0)
    assert flat.first_derivative(0.5).length() == 0.0
    turning = nd.tangent_direction(0.5)
    assert math.isclose(turning.x, -1.0)
    assert abs(turning.y) < 1e-12


def test_full_ellipse_length_matches_elliptic_integral():
    mpmath = pytest.importorskip("mpmath")
    a, b = 2.0, 1.0
    expected = 4.0 * a * float(mpmath.ellipe(1.0 - (b / a) ** 2))
    param = _ellipse().nondegenerate().arc_length_parameterized(1e-6)
    assert abs(param.length() - expected) <= 1e-6


def test_split_and_reverse():
    arc = _ellipse(2.5)
    a, b = arc.split_at(0.25)
    assert a.end_point() == b.start_point()
    for t in SAMPLES:
        _close(a.point_on(t), arc.point_on(0.25 * t))
        _close(b.point_on(t), arc.point_on(0.25 + 0.75 * t))
        _close(arc.reverse().point_on(t), arc.point_on(1.0 - t))


def test_bounding_box():
    tilted = EllipticalArc2d.with_(Point2d(0, 0), Direction2d.from_angle(math.pi / 4),
                                   2.0, 1.0, 0.0, 2 * math.pi)
    box = tilted.bounding_box()
    half_width = math.sqrt((4.0 + 1.0) / 2.0)
    assert math.isclose(box.max_x, half_width)
    assert math.isclose(box.min_y, -half_width)


def test_transformations_commute_with_point_on():
    arc = _ellipse(2.0)
    axis = Axis2d(Point2d(0.0, 2.0), Direction2d.from_angle(0.4))
    frame = Frame2d(Point2d(1.0, -1.0), Direction2d.positive_x(), Direction2d.negative_y())
    center = Point2d(0.5, 0.5)
    for t in SAMPLES:
        p = arc.point_on(t)
        _close(arc.mirror_across(axis).point_on(t), p.mirror_across(axis))
        _close(arc.relative_to(frame).point_on(t), p.relative_to(frame))
        _close(arc.place_in(frame).point_on(t), p.place_in(frame))
        _close(arc.scale_about(center, -2.0).point_on(t), p.scale_about(center, -2.0))
        _close(arc.rotate_around(center, 1.3).point_on(t), p.rotate_around(center, 1.3))
        _close(arc.translate_by(Vector2d(1.0, 2.0)).point_on(t), p.translate_by(Vector2d(1.0, 2.0)))


def test_from_conjugate_vectors():
    u = Vector2d(2.0, 0.5)
    v = Vector2d(-0.3, 1.0)
    center = Point2d(1.0, 1.0)
    arc = EllipticalArc2d.from_conjugate_vectors(center, u, v, 0.2, 3.0)
    for t in SAMPLES:
        theta = 0.2 + 3.0 * t
        expected = center.translate_by(u * math.cos(theta) + v * math.sin(theta))
        _close(arc.point_on(t), expected)


def test_elliptical_arc3d():
    plane = SketchPlane3d(Point3d(0, 0, 2), Direction3d.positive_x(), Direction3d.positive_z())
    planar = _ellipse(1.5)
    arc = EllipticalArc3d.on(plane, planar)
    for t in SAMPLES:
        _close(arc.point_on(t), Point3d.on(plane, planar.point_on(t)))
        _close(arc.project_into(plane).point_on(t), planar.point_on(t))
    mirror = Plane3d(Point3d(0, 0, 0), Vector3d(1, 1, 0).direction())
    for t in SAMPLES:
        _close(arc.mirror_across(mirror).point_on(t), arc.point_on(t).mirror_across(mirror))
        _close(arc.scale_about(Point3d(1, 1, 1), -0.5).point_on(t),
               arc.point_on(t).scale_about(Point3d(1, 1, 1), -0.5))
    box = arc.bounding_box()
    assert abs(box.min_y) < 1e-12 and abs(box.max_y) < 1e-12
    assert math.isclose(box.max_x, 3.0)


def test_elliptical_arc3d_with_():
    arc = EllipticalArc3d.with_(Point3d(0, 0, 0), Direction3d.positive_x(), Direction3d.positive_y(),
                                3.0, 1.0, 0.0, math.pi / 2)
    _close(arc.end_point(), Point3d(0.0, 1.0, 0.0))
    assert isinstance(arc.nondegenerate(), FirstDerivativeNonZero)
