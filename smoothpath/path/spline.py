from __future__ import annotations

from typing import List, Sequence

from smoothpath.errors import InvalidInputError
from smoothpath.geometry.point import Point2D, PointLike, as_point, as_points
from smoothpath.geometry.vector import normalize
from smoothpath.log import get_logger
from smoothpath.path.catmull_rom import catmull_rom_to_bezier
from smoothpath.path.segments import CubicBezier, Move, PathGeometry

logger = get_logger(__name__)


def _require_spline_points(points: Sequence[PointLike]) -> List[Point2D]:
    if len(points) < 2:
        raise InvalidInputError(f"Spline needs at least 2 points, got {len(points)}")
    return as_points(points)


def get_spline(points: Sequence[PointLike]) -> PathGeometry:
    """Open cubic Bezier spline through ``points``, starting with a move."""
    pts = _require_spline_points(points)
    coords: List[float] = []
    for p in pts:
        coords.append(p.x)
        coords.append(p.y)

    path: PathGeometry = [Move(pts[0].x, pts[0].y)]
    path.extend(catmull_rom_to_bezier(coords))
    return path


def get_control_point(
    start: PointLike,
    end: PointLike,
    percent: float = 0.0,
    offset: float = 0.0,
) -> Point2D:
    """Point at ``percent`` along ``start -> end``, pushed ``offset`` to its left.

    Coincident endpoints have no tangent, so the offset is ignored and the
    interpolated point is returned.
    """
    s = as_point(start)
    e = as_point(end)
    t = float(percent)
    x = (1.0 - t) * s.x + t * e.x
    y = (1.0 - t) * s.y + t * e.y

    tangent = normalize((e.x - s.x, e.y - s.y))
    off = float(offset)
    return Point2D(x - tangent[1] * off, y + tangent[0] * off)


def get_closed_spline(points: Sequence[PointLike]) -> PathGeometry:
    """Closed Catmull-Rom curve through the point ring.

    Drawing starts at the last point and the n curves visit every point once,
    the first curve running from the last point back to the first. The final
    curve ends on the last point with its second control pulled towards the
    previous point only. The caller's sequence is left untouched.
    """
    pts = _require_spline_points(points)
    n = len(pts)
    # Two neighbours wrapped onto each end of a local window.
    ring = [pts[-2], pts[-1], *pts, pts[0], pts[1]]

    path: PathGeometry = [Move(pts[-1].x, pts[-1].y)]
    for i in range(1, n + 1):
        p0, p1, p2 = ring[i - 1], ring[i], ring[i + 1]
        # No lookahead on the closing joint: its tangent is flattened.
        p3 = p2 if i == n else ring[i + 2]
        path.append(
            CubicBezier(
                p1.x + (p2.x - p0.x) / 6.0,
                p1.y + (p2.y - p0.y) / 6.0,
                p2.x - (p3.x - p1.x) / 6.0,
                p2.y - (p3.y - p1.y) / 6.0,
                p2.x,
                p2.y,
            )
        )
    logger.debug("closed spline: %d points -> %d curves", n, len(path) - 1)
    return path
