import logging
import math

import pytest

from yapgeom import arc_length, config
from yapgeom import Point2d, QuadraticSpline2d, CubicSpline2d

mpmath = pytest.importorskip("mpmath")


def _reference_length(curve):
    def speed(t):
        return curve.first_derivative(float(t)).length()
    return float(mpmath.quad(speed, [0, 0.25, 0.5, 0.75, 1]))


def test_constant_speed_gives_single_exact_segment():
    table = arc_length.build(1e-9, lambda t: 2.5, 0.0)
    assert table.segment_count() == 1
    assert table.length() == 2.5
    assert table.arc_length_to_parameter_value(1.25) == 0.5
    assert table.parameter_value_to_arc_length(0.5) == 1.25


def test_non_positive_max_error_is_rejected():
    with pytest.raises(ValueError):
        arc_length.build(0.0, lambda t: 1.0, 1.0)
    with pytest.raises(ValueError):
        arc_length.build(-1e-3, lambda t: 1.0, 1.0)


def test_subdivision_honours_error_bound():
    table = arc_length.build(1e-4, lambda t: 1.0 + t, 1.0)
    widths = [b - a for a, b in zip(table.parameter_values, table.parameter_values[1:])]
    assert all(w * w / 8.0 <= 1e-4 for w in widths)
    assert table.parameter_values[0] == 0.0
    assert table.parameter_values[-1] == 1.0
    # speed 1 + t is linear, so two-point quadrature is exact
    assert math.isclose(table.length(), 1.5, rel_tol=1e-12)


def test_lookups_clamp_and_hit_endpoints_exactly():
    spline = QuadraticSpline2d(Point2d(0, 0), Point2d(1, 2), Point2d(3, 0))
    param = spline.nondegenerate().arc_length_parameterized(1e-5)
    total = param.length()
    assert param.arc_length_to_parameter_value(0.0) == 0.0
    assert param.arc_length_to_parameter_value(total) == 1.0
    assert param.arc_length_to_parameter_value(-5.0) == 0.0
    assert param.arc_length_to_parameter_value(total + 5.0) == 1.0
    assert param.parameter_value_to_arc_length(0.0) == 0.0
    assert param.parameter_value_to_arc_length(1.0) == total
    assert param.parameter_value_to_arc_length(2.0) == total


def test_lookup_is_monotone_and_round_trips():
    spline = CubicSpline2d(Point2d(0, 0), Point2d(0, 3), Point2d(4, -1), Point2d(5, 2))
    param = spline.nondegenerate().arc_length_parameterized(1e-4)
    total = param.length()
    previous = -1.0
    for i in range(101):
        d = total * i / 100.0
        t = param.arc_length_to_parameter_value(d)
        assert t >= previous
        previous = t
        assert abs(param.parameter_value_to_arc_length(t) - d) <= 1e-4


def test_length_matches_high_precision_quadrature():
    spline = CubicSpline2d(Point2d(0, 0), Point2d(1, 3), Point2d(3, -2), Point2d(4, 1))
    param = spline.nondegenerate().arc_length_parameterized(1e-6)
    assert abs(param.length() - _reference_length(spline)) <= 1e-6


def test_point_along_matches_reference_distance():
    spline = QuadraticSpline2d(Point2d(0, 0), Point2d(2, 4), Point2d(4, 0))
    param = spline.nondegenerate().arc_length_parameterized(1e-6)
    t = param.arc_length_to_parameter_value(0.3 * param.length())

    def speed(s):
        return spline.first_derivative(float(s)).length()

    reference = float(mpmath.quad(speed, [0, t]))
    assert abs(reference - 0.3 * param.length()) <= 1e-5


def test_depth_cap_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="yapgeom.arc_length"):
        table = arc_length.build(1e-30, lambda t: 1.0, 1.0)
    assert table.segment_count() == 2 ** config.MAX_ARC_LENGTH_DEPTH
    assert any("capped" in r.getMessage() for r in caplog.records)
