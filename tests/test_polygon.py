import math
import random

import pytest

from yapgeom import Axis2d, Direction2d, Frame2d, Point2d, Polygon2d, Vector2d
from yapgeom.polygon import convex_hull, make_inner_loop, make_outer_loop, signed_area


def _pts(*coords):
    return [Point2d(x, y) for x, y in coords]


SQUARE = _pts((0, 0), (1, 0), (1, 1), (0, 1))


def _square_with_hole():
    outer = _pts((0, 0), (3, 0), (3, 3), (0, 3))
    hole = _pts((1, 1), (2, 1), (2, 2), (1, 2))
    return Polygon2d.with_holes([hole], outer)


def test_signed_area():
    assert signed_area(SQUARE) == 1.0
    assert signed_area(SQUARE[::-1]) == -1.0
    assert signed_area(SQUARE[:2]) == 0.0


def test_loops_are_normalized():
    assert signed_area(make_outer_loop(SQUARE[::-1])) == 1.0
    assert signed_area(make_inner_loop(SQUARE)) == -1.0
    polygon = Polygon2d.with_holes([_pts((1, 1), (1, 2), (2, 2), (2, 1))],
                                   _pts((0, 0), (0, 3), (3, 3), (3, 0)))
    assert signed_area(polygon.outer_loop) > 0
    assert all(signed_area(loop) < 0 for loop in polygon.inner_loops)
    assert polygon.outer_loop[0] == Point2d(3, 0)


def test_convex_hull():
    points = _pts((0, 0), (1, 0), (2, 0), (2, 2), (0, 2), (1, 1), (0, 1), (2, 0))
    assert convex_hull(points) == _pts((0, 0), (2, 0), (2, 2), (0, 2))
    assert convex_hull(_pts((1, 1), (1, 1))) == []
    assert convex_hull([]) == []
    hull = Polygon2d.convex_hull(points)
    assert hull.area() == 4.0


def _uniform_points(rng):
    return [Point2d(rng.uniform(-10.0, 10.0), rng.uniform(-10.0, 10.0)) for _ in range(200)]


def _grid_points(rng):
    # duplicates and collinear runs along the hull edges
    return [Point2d(float(rng.randint(0, 5)), float(rng.randint(0, 5))) for _ in range(40)]


@pytest.mark.parametrize("seed", range(5))
@pytest.mark.parametrize("make_points", [_uniform_points, _grid_points])
def test_convex_hull_of_random_points(make_points, seed):
    points = make_points(random.Random(seed))
    hull = convex_hull(points)
    assert len(hull) >= 3
    assert set(hull) <= set(points)
    assert len(set(hull)) == len(hull)
    n = len(hull)
    for i in range(n):
        a, b, c = hull[i], hull[(i + 1) % n], hull[(i + 2) % n]
        assert a.vector_to(b).cross(b.vector_to(c)) > 0.0
    polygon = Polygon2d.single_loop(hull)
    assert all(polygon.contains(p) for p in points)


def test_convex_hull_of_grid_has_no_collinear_vertices():
    points = [Point2d(float(x), float(y)) for x in range(4) for y in range(3)]
    assert convex_hull(points) == _pts((0.0, 0.0), (3.0, 0.0), (3.0, 2.0), (0.0, 2.0))


def test_empty_polygon():
    polygon = Polygon2d.convex_hull([Point2d(1.0, 1.0)])
    assert polygon.outer_loop == ()
    assert polygon.bounding_box() is None
    assert polygon.area() == 0.0
    assert polygon.perimeter() == 0.0
    assert polygon.centroid() is None
    assert not polygon.contains(Point2d(1.0, 1.0))
    assert polygon.triangulate().face_count() == 0


def test_contains_square():
    polygon = Polygon2d.single_loop(SQUARE)
    assert polygon.contains(Point2d(0.5, 0.5))
    assert polygon.contains(Point2d(0.5, 0.0))
    assert polygon.contains(Point2d(1.0, 0.5))
    assert polygon.contains(Point2d(0.0, 0.0))
    assert polygon.contains(Point2d(1.0, 1.0))
    assert not polygon.contains(Point2d(2.0, 0.5))
    assert not polygon.contains(Point2d(0.5, -0.1))
    assert not polygon.contains(Point2d(-1.0, 0.0))


def test_contains_with_hole():
    polygon = _square_with_hole()
    assert polygon.contains(Point2d(0.5, 0.5))
    assert not polygon.contains(Point2d(1.5, 1.5))
    assert polygon.contains(Point2d(1.5, 1.0))
    assert polygon.contains(Point2d(2.0, 2.0))
    assert not polygon.contains(Point2d(4.0, 1.5))


def test_contains_concave():
    polygon = Polygon2d.single_loop(_pts((0, 0), (4, 0), (4, 3), (3, 3), (2, 1), (1, 3), (0, 3)))
    assert polygon.contains(Point2d(0.5, 2.5))
    assert polygon.contains(Point2d(3.5, 2.5))
    assert not polygon.contains(Point2d(2.0, 2.5))
    assert polygon.contains(Point2d(2.0, 0.5))


def test_area_perimeter_and_bounding_box():
    polygon = _square_with_hole()
    assert polygon.area() == 8.0
    assert polygon.perimeter() == 16.0
    assert Polygon2d.single_loop(SQUARE[::-1]).area() == 1.0
    assert polygon.bounding_box().extrema() == (0, 3, 0, 3)
    assert len(polygon.vertices()) == 8
    assert len(polygon.edges()) == 8


def test_centroid():
    polygon = Polygon2d.single_loop(_pts((0, 0), (4, 0), (4, 2), (0, 2)))
    c = polygon.centroid()
    assert math.isclose(c.x, 2.0) and math.isclose(c.y, 1.0)
    hollow = _square_with_hole().centroid()
    assert math.isclose(hollow.x, 1.5) and math.isclose(hollow.y, 1.5)
    assert Polygon2d.single_loop(_pts((0, 0), (1, 1), (2, 2))).centroid() is None


def test_regular_polygon():
    hexagon = Polygon2d.regular(Point2d(1.0, 1.0), 2.0, 6)
    assert len(hexagon.outer_loop) == 6
    assert math.isclose(hexagon.area(), 1.5 * math.sqrt(3.0) * 4.0)
    for p in hexagon.outer_loop:
        assert math.isclose(p.distance_from(Point2d(1.0, 1.0)), 2.0)
    a, b = hexagon.outer_loop[0], hexagon.outer_loop[-1]
    # bottom edge is horizontal
    assert math.isclose(a.y, b.y)
    with pytest.raises(ValueError):
        Polygon2d.regular(Point2d(0, 0), 1.0, 2)


def test_transformations_keep_orientation():
    polygon = _square_with_hole()
    axis = Axis2d(Point2d(0.0, 5.0), Direction2d.from_angle(0.3))
    left_handed = Frame2d(Point2d(1.0, 1.0), Direction2d.positive_x(), Direction2d.negative_y())
    for moved in (polygon.mirror_across(axis),
                  polygon.relative_to(left_handed),
                  polygon.place_in(left_handed),
                  polygon.scale_about(Point2d(1.0, 1.0), -2.0),
                  polygon.rotate_around(Point2d(0.0, 0.0), 1.0),
                  polygon.translate_by(Vector2d(2.0, -1.0))):
        assert signed_area(moved.outer_loop) > 0
        assert all(signed_area(loop) < 0 for loop in moved.inner_loops)
    mirrored = polygon.mirror_across(axis)
    assert math.isclose(mirrored.area(), 8.0)
    inside = Point2d(0.5, 0.5).mirror_across(axis)
    assert mirrored.contains(inside)
    assert not mirrored.contains(Point2d(1.5, 1.5).mirror_across(axis))
    assert math.isclose(polygon.scale_about(Point2d(0, 0), -2.0).area(), 32.0)
