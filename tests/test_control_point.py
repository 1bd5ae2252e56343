from __future__ import annotations

import pytest

from smoothpath.geometry.point import Point2D
from smoothpath.path.spline import get_control_point


def test_control_point_midpoint_offset_to_the_left_of_tangent() -> None:
    assert get_control_point(Point2D(0, 0), Point2D(10, 0), 0.5, 2) == Point2D(5.0, 2.0)
    p = get_control_point((0.0, 0.0), (0.0, 10.0), 0.5, 3.0)
    assert p.x == pytest.approx(-3.0)
    assert p.y == pytest.approx(5.0)


def test_control_point_defaults_return_start() -> None:
    assert get_control_point({"x": 1, "y": 2}, {"x": 9, "y": 4}) == Point2D(1.0, 2.0)
    assert get_control_point((1.0, 2.0), (9.0, 4.0), percent=1.0) == Point2D(9.0, 4.0)


@pytest.mark.parametrize("percent,offset", [(0.0, 0.0), (0.5, 2.0), (1.0, -7.5), (0.25, 100.0)])
def test_control_point_coincident_endpoints_collapse_to_point(percent: float, offset: float) -> None:
    p = Point2D(3.0, 4.0)
    assert get_control_point(p, p, percent, offset) == p
