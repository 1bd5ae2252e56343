"""Padded outlines around small point sets.

Both outline styles expect the points in convex-hull order; computing the
hull is left to the caller. Point sets of one or two points have no polygon
to pad, so they become a circle or a stadium shape instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from smoothpath.geometry.point import Point2D, PointLike, Vec2, as_pair
from smoothpath.geometry.vector import add, normalize, scale, scale_to, sub, unit_normal, vec_from
from smoothpath.log import get_logger
from smoothpath.path.options import HullOptions, resolve_padding
from smoothpath.path.segments import Arc, Close, CubicBezier, Line, Move, PathGeometry, SmoothCubic, to_path_string
from smoothpath.path.spline import get_closed_spline

logger = get_logger(__name__)


@dataclass(frozen=True)
class PathString:
    data: str


@dataclass(frozen=True)
class PointSequence:
    points: List[Point2D] = field(default_factory=list)


HullOutline = Union[PathString, PointSequence]


def _circle(center: Vec2, radius: float) -> PathGeometry:
    top = (center[0], center[1] - radius)
    bottom = (center[0], center[1] + radius)
    return [
        Move(top[0], top[1]),
        Arc.circular(radius, bottom),
        Arc.circular(radius, top),
    ]


def _rounded_stadium(p0: Vec2, p1: Vec2, radius: float) -> PathGeometry:
    offset = scale(unit_normal(p0, p1), radius)
    inv_offset = scale(offset, -1.0)

    a = add(p0, offset)
    b = add(p1, offset)
    c = add(p1, inv_offset)
    d = add(p0, inv_offset)
    return [
        Move(a[0], a[1]),
        Line(b[0], b[1]),
        Arc.circular(radius, c),
        Line(d[0], d[1]),
        Arc.circular(radius, a),
    ]


def rounded_hull_geometry(points: Sequence[PointLike], padding: float, options: Optional[HullOptions] = None) -> PathGeometry:
    pts = [as_pair(p) for p in points]
    if not pts:
        return []
    r = resolve_padding(padding, options)
    if len(pts) == 1:
        return _circle(pts[0], r)
    if len(pts) == 2:
        return _rounded_stadium(pts[0], pts[1], r)

    # Every hull edge shifted outwards by the padding.
    shifted: List[Tuple[Vec2, Vec2]] = []
    for i in range(len(pts)):
        p0 = pts[i - 1]
        p1 = pts[i]
        offset = scale(unit_normal(p0, p1), r)
        shifted.append((add(p0, offset), add(p1, offset)))

    last_end = shifted[-1][1]
    path: PathGeometry = [Move(last_end[0], last_end[1])]
    for start, end in shifted:
        path.append(Arc.circular(r, start))
        path.append(Line(end[0], end[1]))
    return path


def rounded_hull(points: Sequence[PointLike], padding: float, options: Optional[HullOptions] = None) -> str:
    """SVG path of the hull grown by ``padding`` with arc-rounded corners.

    Edges are pushed along their left normal, which points outwards for
    rings wound clockwise in y-up axes (counterclockwise on screen).
    """
    logger.debug("rounded hull: %d points, padding %g", len(points), float(padding))
    return to_path_string(rounded_hull_geometry(points, padding, options))


def _smooth_stadium(p0: Vec2, p1: Vec2, radius: float, control_scale: float) -> PathGeometry:
    v = vec_from(p0, p1)
    extension = scale_to(v, radius)

    e0 = add(p0, scale(extension, -1.0))
    e1 = add(p1, extension)

    delta = scale_to(normalize(v), control_scale * radius)
    inv_delta = scale(delta, -1.0)

    c0 = add(e0, inv_delta)
    c1 = add(e1, inv_delta)
    c3 = add(e0, delta)
    return [
        Move(e0[0], e0[1]),
        CubicBezier.through(c0, c1, e1),
        SmoothCubic(c3[0], c3[1], e0[0], e0[1]),
        Close(),
    ]


def _padded_vertices(pts: Sequence[Vec2], radius: float) -> List[Point2D]:
    n = len(pts)
    edge_dirs = [normalize(vec_from(pts[i], pts[(i + 1) % n])) for i in range(n)]

    out: List[Point2D] = []
    for i in range(n):
        # Corner bisector pointing away from the polygon.
        extension = normalize(sub(edge_dirs[i - 1], edge_dirs[i]))
        p = add(pts[i], scale(extension, radius))
        out.append(Point2D(p[0], p[1]))
    return out


def padded_hull(points: Sequence[PointLike], padding: float, options: Optional[HullOptions] = None) -> HullOutline:
    """Bezier-style padded hull.

    One or two points give a ready ``PathString``; three or more give the
    padded vertex ring as a ``PointSequence`` for the caller to fit a curve
    through (see ``smooth_hull_path``).
    """
    pts = [as_pair(p) for p in points]
    if not pts:
        return PathString("")
    opts = options or HullOptions()
    r = resolve_padding(padding, opts)
    logger.debug("padded hull: %d points, padding %g", len(pts), r)
    if len(pts) == 1:
        return PathString(to_path_string(_circle(pts[0], r)))
    if len(pts) == 2:
        return PathString(to_path_string(_smooth_stadium(pts[0], pts[1], r, float(opts.control_scale))))
    return PointSequence(_padded_vertices(pts, r))


def smooth_hull_path(points: Sequence[PointLike], padding: float, options: Optional[HullOptions] = None) -> str:
    """``padded_hull`` as a path string for every point count."""
    outline = padded_hull(points, padding, options)
    if isinstance(outline, PathString):
        return outline.data
    path = get_closed_spline(outline.points)
    path.append(Close())
    return to_path_string(path)
