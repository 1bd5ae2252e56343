from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

from smoothpath.errors import InvalidInputError
from smoothpath.geometry.point import Vec2
from smoothpath.geometry.vector import add, scale, sub
from smoothpath.path.segments import CubicBezier

# Fraction of the neighbour chord used as tangent length.
DEFAULT_SMOOTH = 0.4

Constraint = Tuple[Sequence[float], Sequence[float]]


def _pairs(coords: Sequence[float]) -> List[Vec2]:
    if len(coords) % 2 != 0:
        raise InvalidInputError(f"Coordinate list must have an even length, got {len(coords)}")
    if len(coords) < 4:
        raise InvalidInputError(f"Coordinate list needs at least 2 points (4 numbers), got {len(coords)}")
    return [(float(coords[i]), float(coords[i + 1])) for i in range(0, len(coords), 2)]


def _widen(points: Sequence[Vec2], constraint: Constraint) -> Constraint:
    # The box always covers the input points themselves.
    lo, hi = constraint
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return (
        (min(min(xs), float(lo[0])), min(min(ys), float(lo[1]))),
        (max(max(xs), float(hi[0])), max(max(ys), float(hi[1]))),
    )


def _clamp(p: Vec2, constraint: Optional[Constraint]) -> Vec2:
    if constraint is None:
        return p
    lo, hi = constraint
    x = min(max(p[0], float(lo[0])), float(hi[0]))
    y = min(max(p[1], float(lo[1])), float(hi[1]))
    return (x, y)


def smooth_control_points(
    points: Sequence[Vec2],
    smooth: float = DEFAULT_SMOOTH,
    closed: bool = False,
    constraint: Optional[Constraint] = None,
) -> List[Vec2]:
    """Two control points per curve, in drawing order.

    For an open curve the first and last control points are the endpoints
    themselves, which keeps the end tangents pointing at the neighbours.
    A ``constraint`` box is first grown to contain all points, then every
    control point is clamped into it.
    """
    n = len(points)
    if constraint is not None and n:
        constraint = _widen(points, constraint)
    cps: List[Vec2] = []
    for i in range(n):
        point = points[i]
        if closed:
            prev_pt = points[i - 1 if i else n - 1]
            next_pt = points[(i + 1) % n]
        else:
            if i == 0 or i == n - 1:
                cps.append(point)
                continue
            prev_pt = points[i - 1]
            next_pt = points[i + 1]

        v = scale(sub(next_pt, prev_pt), smooth)
        d0 = math.hypot(point[0] - prev_pt[0], point[1] - prev_pt[1])
        d1 = math.hypot(point[0] - next_pt[0], point[1] - next_pt[1])
        total = d0 + d1
        if total != 0.0:
            d0 /= total
            d1 /= total

        incoming = add(point, scale(v, -d0))
        outgoing = add(point, scale(v, d1))
        cps.append(_clamp(incoming, constraint))
        cps.append(_clamp(outgoing, constraint))

    if closed:
        # The first vertex's incoming control belongs to the closing curve.
        cps.append(cps.pop(0))
    return cps


def catmull_rom_to_bezier(
    coords: Sequence[float],
    closed: bool = False,
    constraint: Optional[Constraint] = None,
    smooth: float = DEFAULT_SMOOTH,
) -> List[CubicBezier]:
    """Cubic Bezier curves through the flat ``[x0, y0, x1, y1, ...]`` list.

    The result does not include the initial move to the first point.
    """
    points = _pairs(coords)
    cps = smooth_control_points(points, smooth=smooth, closed=closed, constraint=constraint)
    n = len(points)

    curves: List[CubicBezier] = []
    for i in range(n - 1):
        curves.append(CubicBezier.through(cps[i * 2], cps[i * 2 + 1], points[i + 1]))
    if closed:
        curves.append(CubicBezier.through(cps[(n - 1) * 2], cps[(n - 1) * 2 + 1], points[0]))
    return curves
