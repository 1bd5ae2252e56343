from __future__ import annotations

import math
import re

import pytest

from smoothpath.geometry.point import Point2D
from smoothpath.path.hull import PathString, PointSequence, padded_hull, smooth_hull_path
from smoothpath.path.options import HullOptions

_NUM = re.compile(r"-?\d+(?:\.\d+)?(?:e[-+]\d+)?")


def test_padded_hull_empty_and_single_point() -> None:
    assert padded_hull([], 3.0) == PathString("")
    out = padded_hull([(0.0, 0.0)], 5)
    assert out == PathString("M 0,-5 A 5,5,0,0,0,0,5 A 5,5,0,0,0,0,-5")
    assert "L" not in out.data


def test_padded_hull_two_points_bezier_stadium() -> None:
    out = padded_hull([(0.0, 0.0), (10.0, 0.0)], 1.0)
    assert isinstance(out, PathString)
    assert re.findall(r"[A-Z]", out.data) == ["M", "C", "S", "Z"]
    nums = [float(n) for n in _NUM.findall(out.data)]
    assert nums == pytest.approx([-1, 0, -2.2, 0, 9.8, 0, 11, 0, 0.2, 0, -1, 0])


def test_padded_hull_two_points_control_scale_option() -> None:
    out = padded_hull([(0.0, 0.0), (10.0, 0.0)], 2.0, HullOptions(control_scale=1.5))
    assert out == PathString("M -2,0 C -5,0,9,0,12,0 S 1,0,-2,0 Z")


def test_padded_hull_square_moves_corners_along_bisectors() -> None:
    square = [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]
    out = padded_hull(square, 1.0)
    assert isinstance(out, PointSequence)
    assert len(out.points) == 4

    s = 1.0 / math.sqrt(2.0)
    expected = [(-s, -s), (1.0 + s, -s), (1.0 + s, 1.0 + s), (-s, 1.0 + s)]
    for got, want, corner in zip(out.points, expected, square):
        assert isinstance(got, Point2D)
        assert (got.x, got.y) == pytest.approx(want)
        assert math.hypot(got.x - corner[0], got.y - corner[1]) == pytest.approx(1.0)


def test_padded_hull_is_independent_of_winding() -> None:
    ccw = [(0.0, 0.0), (4.0, 0.0), (2.0, 3.0)]
    cw = list(reversed(ccw))
    a = padded_hull(ccw, 0.5)
    b = padded_hull(cw, 0.5)
    assert isinstance(a, PointSequence) and isinstance(b, PointSequence)
    flat_a = [c for p in sorted((p.x, p.y) for p in a.points) for c in p]
    flat_b = [c for p in sorted((p.x, p.y) for p in b.points) for c in p]
    assert flat_a == pytest.approx(flat_b)


def test_smooth_hull_path_normalizes_every_branch_to_a_string() -> None:
    assert smooth_hull_path([], 2.0) == ""
    assert smooth_hull_path([(0.0, 0.0)], 5.0) == "M 0,-5 A 5,5,0,0,0,0,5 A 5,5,0,0,0,0,-5"

    out = smooth_hull_path([(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)], 1.0)
    assert out.startswith("M ")
    assert out.endswith(" Z")
    assert out.count("C ") == 4
