import math

import pytest

from yapgeom import (
    Arc2d,
    Arc3d,
    Axis2d,
    Axis3d,
    DegenerateCurve,
    Direction2d,
    Direction3d,
    FirstDerivativeNonZero,
    Frame2d,
    Frame3d,
    Plane3d,
    Point2d,
    Point3d,
    SketchPlane3d,
    SweptAngle,
    Vector3d,
)

SAMPLES = [i / 8.0 for i in range(9)]


def _close(p, q, tol=1e-9):
    assert p.distance_from(q) <= tol, '{} != {}'.format(p, q)


def _arc():
    return Arc2d(Point2d(1.0, 1.0), 2.0, 0.0, math.pi / 2)


def test_point_on_and_length():
    arc = _arc()
    assert arc.point_on(0.0) == Point2d(3.0, 1.0)
    _close(arc.end_point(), Point2d(1.0, 3.0))
    _close(arc.point_on(0.5), Point2d(1.0 + math.sqrt(2.0), 1.0 + math.sqrt(2.0)))
    assert math.isclose(arc.length(), math.pi)
    assert arc.radius == 2.0
    assert arc.center_point == Point2d(1.0, 1.0)


def test_negative_radius_is_rejected():
    with pytest.raises(ValueError):
        Arc2d(Point2d(0, 0), -1.0, 0.0, 1.0)


def test_swept_around():
    arc = Arc2d.swept_around(Point2d(0, 0), -math.pi, Point2d(0, 2))
    assert arc.radius == 2.0
    _close(arc.start_point(), Point2d(0, 2))
    _close(arc.end_point(), Point2d(0, -2))
    _close(arc.point_on(0.5), Point2d(2, 0))


def test_through_points_counterclockwise_and_clockwise():
    arc = Arc2d.through_points(Point2d(2, 0), Point2d(0, 2), Point2d(0, -2))
    assert math.isclose(arc.swept_angle, 1.5 * math.pi)
    _close(arc.point_on(1.0 / 3.0), Point2d(0, 2))
    _close(arc.end_point(), Point2d(0, -2))

    cw = Arc2d.through_points(Point2d(-1, 0), Point2d(0, 1), Point2d(1, 0))
    assert math.isclose(cw.swept_angle, -math.pi)
    _close(cw.point_on(0.5), Point2d(0, 1))


def test_through_collinear_points_is_none():
    assert Arc2d.through_points(Point2d(0, 0), Point2d(1, 1), Point2d(3, 3)) is None


@pytest.mark.parametrize("swept, expected", [
    (SweptAngle.SMALL_POSITIVE, math.pi / 3),
    (SweptAngle.SMALL_NEGATIVE, -math.pi / 3),
    (SweptAngle.LARGE_POSITIVE, 5 * math.pi / 3),
    (SweptAngle.LARGE_NEGATIVE, -5 * math.pi / 3),
])
def test_with_radius(swept, expected):
    start = Point2d(0, 0)
    end = Point2d(2, 0)
    arc = Arc2d.with_radius(2.0, swept, start, end)
    assert math.isclose(arc.swept_angle, expected)
    _close(arc.start_point(), start)
    _close(arc.end_point(), end)


def test_with_radius_without_solution():
    assert Arc2d.with_radius(0.5, SweptAngle.SMALL_POSITIVE, Point2d(0, 0), Point2d(2, 0)) is None
    assert Arc2d.with_radius(1.0, SweptAngle.SMALL_POSITIVE, Point2d(1, 1), Point2d(1, 1)) is None


def test_split_and_reverse():
    arc = _arc()
    a, b = arc.split_at(0.3)
    assert a.end_point() == b.start_point()
    assert a.end_point() == arc.point_on(0.3)
    for t in SAMPLES:
        _close(b.point_on(t), arc.point_on(0.3 + 0.7 * t))
        _close(arc.reverse().point_on(t), arc.point_on(1.0 - t))
        _close(arc.reverse().reverse().point_on(t), arc.point_on(t))
    first, second = arc.bisect()
    _close(first.end_point(), arc.point_on(0.5))


def test_nondegenerate():
    assert isinstance(_arc().nondegenerate(), FirstDerivativeNonZero)
    degenerate = Arc2d(Point2d(1, 1), 0.0, 0.0, 1.0).nondegenerate()
    assert isinstance(degenerate, DegenerateCurve)
    assert isinstance(Arc2d(Point2d(1, 1), 1.0, 0.0, 0.0).nondegenerate(), DegenerateCurve)


def test_tangent_direction():
    nd = _arc().nondegenerate()
    d = nd.tangent_direction(0.0)
    assert abs(d.x) < 1e-12 and math.isclose(d.y, 1.0)


def test_arc_length_is_a_single_exact_segment():
    arc = _arc()
    param = arc.nondegenerate().arc_length_parameterized(1e-9)
    assert param.arc_length_parameterization().segment_count() == 1
    assert math.isclose(param.length(), arc.length(), rel_tol=1e-14)
    _close(param.point_along(0.25 * arc.length()), arc.point_on(0.25))


def test_bounding_box():
    box = Arc2d(Point2d(0, 0), 1.0, 0.3, 2 * math.pi).bounding_box()
    for value, expected in zip(box.extrema(), (-1.0, 1.0, -1.0, 1.0)):
        assert math.isclose(value, expected)
    quarter = Arc2d(Point2d(0, 0), 1.0, math.pi / 4, math.pi / 2).bounding_box()
    assert math.isclose(quarter.max_y, 1.0)
    assert math.isclose(quarter.min_y, math.sqrt(0.5))


def test_transformations_commute_with_point_on():
    arc = _arc()
    axis = Axis2d(Point2d(0.0, 2.0), Direction2d.from_angle(0.4))
    left_handed = Frame2d(Point2d(1.0, -1.0), Direction2d.positive_x(), Direction2d.negative_y())
    right_handed = Frame2d.with_x_direction(Direction2d.from_angle(2.0), Point2d(-1.0, 0.5))
    center = Point2d(0.5, 0.5)
    for t in SAMPLES:
        p = arc.point_on(t)
        _close(arc.mirror_across(axis).point_on(t), p.mirror_across(axis))
        _close(arc.relative_to(left_handed).point_on(t), p.relative_to(left_handed))
        _close(arc.place_in(left_handed).point_on(t), p.place_in(left_handed))
        _close(arc.relative_to(right_handed).point_on(t), p.relative_to(right_handed))
        _close(arc.scale_about(center, -1.5).point_on(t), p.scale_about(center, -1.5))
        _close(arc.rotate_around(center, 0.7).point_on(t), p.rotate_around(center, 0.7))
    assert arc.mirror_across(axis).swept_angle == -arc.swept_angle


def test_arc3d_swept_around_axis():
    arc = Arc3d.swept_around(Axis3d.z(), math.pi / 2, Point3d(1, 0, 2))
    _close(arc.end_point(), Point3d(0, 1, 2))
    _close(arc.center_point(), Point3d(0, 0, 2))
    assert math.isclose(arc.radius(), 1.0)
    assert math.isclose(arc.length(), math.pi / 2)
    assert isinstance(arc.nondegenerate(), FirstDerivativeNonZero)
    on_axis = Arc3d.swept_around(Axis3d.z(), 1.0, Point3d(0, 0, 5))
    assert isinstance(on_axis.nondegenerate(), DegenerateCurve)


def test_arc3d_through_points():
    arc = Arc3d.through_points(Point3d(1, 0, 0), Point3d(0, 1, 0), Point3d(-1, 0, 0))
    assert math.isclose(arc.swept_angle, math.pi)
    _close(arc.point_on(0.5), Point3d(0, 1, 0))
    _close(arc.end_point(), Point3d(-1, 0, 0))
    assert Arc3d.through_points(Point3d(0, 0, 0), Point3d(1, 1, 1), Point3d(2, 2, 2)) is None


def test_arc3d_on_sketch_plane():
    plane = SketchPlane3d(Point3d(0, 0, 3), Direction3d.positive_y(), Direction3d.positive_z())
    planar = _arc()
    arc = Arc3d.on(plane, planar)
    for t in SAMPLES:
        _close(arc.point_on(t), Point3d.on(plane, planar.point_on(t)))


def test_arc3d_derivatives_and_split():
    axis = Axis3d(Point3d(1, 1, 0), Vector3d(0, 1, 1).direction())
    arc = Arc3d(axis, Point3d(2, 0, 1), 2.0)
    h = 1e-6
    for t in (0.1, 0.5, 0.9):
        numeric = arc.point_on(t - h).vector_to(arc.point_on(t + h)) / (2 * h)
        assert (numeric - arc.first_derivative(t)).length() <= 1e-5
    a, b = arc.split_at(0.4)
    for t in SAMPLES:
        _close(a.point_on(t), arc.point_on(0.4 * t))
        _close(b.point_on(t), arc.point_on(0.4 + 0.6 * t))
        _close(arc.reverse().point_on(t), arc.point_on(1.0 - t))
    box = arc.bounding_box()
    dense = [arc.point_on(i / 400.0) for i in range(401)]
    assert math.isclose(box.max_x, max(p.x for p in dense), abs_tol=1e-4)
    assert math.isclose(box.min_y, min(p.y for p in dense), abs_tol=1e-4)
    assert math.isclose(box.max_z, max(p.z for p in dense), abs_tol=1e-4)
    for p in dense:
        assert box.min_x - 1e-9 <= p.x <= box.max_x + 1e-9
        assert box.min_z - 1e-9 <= p.z <= box.max_z + 1e-9


def test_arc3d_transformations():
    axis = Axis3d(Point3d(1, 1, 0), Vector3d(0, 1, 1).direction())
    arc = Arc3d(axis, Point3d(2, 0, 1), 2.0)
    plane = Plane3d(Point3d(0, 0, 1), Vector3d(1, 0, 1).direction())
    left_handed = Frame3d(Point3d(1, 2, 3), Direction3d.positive_x(),
                          Direction3d.positive_y(), Direction3d.negative_z())
    center = Point3d(0.5, 0.0, -1.0)
    for t in SAMPLES:
        p = arc.point_on(t)
        _close(arc.mirror_across(plane).point_on(t), p.mirror_across(plane))
        _close(arc.relative_to(left_handed).point_on(t), p.relative_to(left_handed))
        _close(arc.place_in(left_handed).point_on(t), p.place_in(left_handed))
        _close(arc.scale_about(center, -2.0).point_on(t), p.scale_about(center, -2.0))
        _close(arc.rotate_around(Axis3d.x(), 0.3).point_on(t), p.rotate_around(Axis3d.x(), 0.3))


def test_arc3d_projects_to_elliptical_arc():
    axis = Axis3d(Point3d(0, 0, 0), Vector3d(0, 1, 1).direction())
    arc = Arc3d(axis, Point3d(1, 0, 0), 2.0)
    plane = SketchPlane3d.xy()
    projected = arc.project_into(plane)
    for t in SAMPLES:
        _close(projected.point_on(t), arc.point_on(t).project_into(plane))
