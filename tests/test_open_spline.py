from __future__ import annotations

import pytest

from smoothpath.errors import InvalidInputError
from smoothpath.path.catmull_rom import catmull_rom_to_bezier
from smoothpath.path.segments import CubicBezier, Move
from smoothpath.path.spline import get_spline


def test_open_spline_prepends_move_and_hits_every_point() -> None:
    pts = [(0.0, 0.0), (3.0, 4.0), (6.0, 0.0), (9.0, 2.0)]
    path = get_spline(pts)
    assert path[0] == Move(0.0, 0.0)
    assert len(path) == len(pts)
    assert [(seg.x, seg.y) for seg in path[1:]] == pts[1:]


def test_open_spline_two_points_is_straight() -> None:
    path = get_spline([{"x": 0, "y": 0}, {"x": 4, "y": 2}])
    assert path == [Move(0.0, 0.0), CubicBezier(0.0, 0.0, 4.0, 2.0, 4.0, 2.0)]


@pytest.mark.parametrize("pts", [[], [(1.0, 2.0)]])
def test_open_spline_requires_two_points(pts) -> None:
    with pytest.raises(InvalidInputError) as exc:
        get_spline(pts)
    assert f"got {len(pts)}" in str(exc.value)


def test_catmull_rom_collinear_tangents() -> None:
    curves = catmull_rom_to_bezier([0, 0, 1, 0, 2, 0])
    assert len(curves) == 2
    a, b = curves
    assert (a.c1x, a.c1y) == (0.0, 0.0)
    assert (a.c2x, a.c2y) == pytest.approx((0.6, 0.0))
    assert (a.x, a.y) == (1.0, 0.0)
    assert (b.c1x, b.c1y) == pytest.approx((1.4, 0.0))
    assert (b.c2x, b.c2y) == (2.0, 0.0)


def test_catmull_rom_closed_adds_closing_curve() -> None:
    curves = catmull_rom_to_bezier([0, 0, 4, 0, 2, 3], closed=True)
    assert len(curves) == 3
    assert (curves[-1].x, curves[-1].y) == (0.0, 0.0)
    # Controls around the first point share one tangent line on opposite sides.
    out0 = (curves[0].c1x, curves[0].c1y)
    in0 = (curves[-1].c2x, curves[-1].c2y)
    assert out0[0] * in0[1] - out0[1] * in0[0] == pytest.approx(0.0, abs=1e-12)
    assert out0[0] * in0[0] + out0[1] * in0[1] < 0.0


def test_catmull_rom_constraint_clamps_control_points_into_point_box() -> None:
    coords = [0, 0, 1, 10, 1.1, 0, 5, 0]
    free = catmull_rom_to_bezier(coords)
    assert free[0].c2y > 10.0
    assert free[1].c2x < 0.0

    # A degenerate box is grown to the bounding box of the points.
    curves = catmull_rom_to_bezier(coords, constraint=((0.0, 0.0), (0.0, 0.0)))
    assert curves[0].c2y == 10.0
    assert curves[1].c2x == 0.0
    assert curves[2].c1y == 0.0
    # Endpoints are never clamped.
    assert (curves[0].x, curves[0].y) == (1.0, 10.0)


def test_catmull_rom_constraint_wider_than_points_keeps_overshoot() -> None:
    coords = [0, 0, 1, 10, 1.1, 0, 5, 0]
    free = catmull_rom_to_bezier(coords)
    curves = catmull_rom_to_bezier(coords, constraint=((-1.0, -2.0), (6.0, 20.0)))
    assert curves[0].c2y == pytest.approx(free[0].c2y)
    assert curves[1].c2x == pytest.approx(free[1].c2x)
    assert curves[2].c1y == pytest.approx(free[2].c1y)


@pytest.mark.parametrize("coords", [[0, 0], [0, 0, 1], [0, 0, 1, 1, 2]])
def test_catmull_rom_rejects_short_or_odd_coordinate_lists(coords) -> None:
    with pytest.raises(InvalidInputError):
        catmull_rom_to_bezier(coords)
