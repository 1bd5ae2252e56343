from __future__ import annotations

import math
from typing import Any, List, Sequence

import numpy as np

from smoothpath.geometry.point import Vec2
from smoothpath.geometry.tolerance import EPS_POS
from smoothpath.path.segments import Arc, Close, CubicBezier, Line, Move, PathSegment, SmoothCubic, as_segment


def cubic_points(p0: Vec2, c1: Vec2, c2: Vec2, p3: Vec2, samples: int = 16) -> np.ndarray:
    """Points of a cubic Bezier at ``samples`` even steps, start excluded."""
    t = np.linspace(0.0, 1.0, max(1, int(samples)) + 1)[1:, None]
    mt = 1.0 - t
    P = np.array([p0, c1, c2, p3], dtype=float)
    return (mt ** 3) * P[0] + 3.0 * (mt ** 2) * t * P[1] + 3.0 * mt * (t ** 2) * P[2] + (t ** 3) * P[3]


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)


def arc_points(start: Vec2, arc: Arc, samples: int = 16) -> np.ndarray:
    """Points of an SVG elliptical arc at ``samples`` even angle steps, start excluded.

    Uses the endpoint-to-center conversion of the SVG implementation notes,
    including the radius scale-up when the radii cannot span the chord.
    """
    x1, y1 = float(start[0]), float(start[1])
    x2, y2 = float(arc.x), float(arc.y)
    rx, ry = abs(float(arc.rx)), abs(float(arc.ry))
    if math.hypot(x2 - x1, y2 - y1) <= EPS_POS:
        return np.empty((0, 2), dtype=float)
    if rx <= EPS_POS or ry <= EPS_POS:
        return np.array([[x2, y2]], dtype=float)

    phi = math.radians(float(arc.rotation))
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)
    dx2, dy2 = (x1 - x2) * 0.5, (y1 - y2) * 0.5
    x1p = cos_phi * dx2 + sin_phi * dy2
    y1p = -sin_phi * dx2 + cos_phi * dy2

    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1.0:
        s = math.sqrt(lam)
        rx, ry = rx * s, ry * s

    num = rx * rx * ry * ry - rx * rx * y1p * y1p - ry * ry * x1p * x1p
    den = rx * rx * y1p * y1p + ry * ry * x1p * x1p
    coef = math.sqrt(max(0.0, num / den)) if den > EPS_POS else 0.0
    if bool(arc.large_arc) == bool(arc.sweep):
        coef = -coef
    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx
    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) * 0.5
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) * 0.5

    ux, uy = (x1p - cxp) / rx, (y1p - cyp) / ry
    vx, vy = (-x1p - cxp) / rx, (-y1p - cyp) / ry
    theta1 = math.atan2(uy, ux)
    dtheta = _vector_angle(ux, uy, vx, vy)
    if not arc.sweep and dtheta > 0.0:
        dtheta -= 2.0 * math.pi
    elif arc.sweep and dtheta < 0.0:
        dtheta += 2.0 * math.pi

    theta = theta1 + dtheta * np.linspace(0.0, 1.0, max(1, int(samples)) + 1)[1:]
    xs = cos_phi * rx * np.cos(theta) - sin_phi * ry * np.sin(theta) + cx
    ys = sin_phi * rx * np.cos(theta) + cos_phi * ry * np.sin(theta) + cy
    out = np.column_stack([xs, ys])
    # Land exactly on the requested endpoint.
    out[-1] = (x2, y2)
    return out


def sample_path(path: Sequence[PathSegment | Sequence[Any]], samples_per_segment: int = 16) -> np.ndarray:
    """Dense ``(N, 2)`` polyline following ``path``.

    Curves and arcs are subdivided into ``samples_per_segment`` steps; moves
    and lines contribute their endpoint; ``Z`` returns to the subpath start.
    """
    chunks: List[np.ndarray] = []
    current: Vec2 = (0.0, 0.0)
    subpath_start: Vec2 = (0.0, 0.0)
    last_c2: Vec2 | None = None

    for raw in path:
        seg = as_segment(raw)
        next_c2: Vec2 | None = None
        if isinstance(seg, Move):
            current = (float(seg.x), float(seg.y))
            subpath_start = current
            chunks.append(np.array([current], dtype=float))
        elif isinstance(seg, Line):
            current = (float(seg.x), float(seg.y))
            chunks.append(np.array([current], dtype=float))
        elif isinstance(seg, CubicBezier):
            c1 = (float(seg.c1x), float(seg.c1y))
            c2 = (float(seg.c2x), float(seg.c2y))
            end = (float(seg.x), float(seg.y))
            chunks.append(cubic_points(current, c1, c2, end, samples_per_segment))
            current, next_c2 = end, c2
        elif isinstance(seg, SmoothCubic):
            # First control is the previous second control mirrored through the current point.
            if last_c2 is None:
                c1 = current
            else:
                c1 = (2.0 * current[0] - last_c2[0], 2.0 * current[1] - last_c2[1])
            c2 = (float(seg.c2x), float(seg.c2y))
            end = (float(seg.x), float(seg.y))
            chunks.append(cubic_points(current, c1, c2, end, samples_per_segment))
            current, next_c2 = end, c2
        elif isinstance(seg, Arc):
            chunks.append(arc_points(current, seg, samples_per_segment))
            current = (float(seg.x), float(seg.y))
        elif isinstance(seg, Close):
            if math.hypot(current[0] - subpath_start[0], current[1] - subpath_start[1]) > EPS_POS:
                chunks.append(np.array([subpath_start], dtype=float))
            current = subpath_start
        last_c2 = next_c2

    if not chunks:
        return np.empty((0, 2), dtype=float)
    return np.vstack(chunks)
