from __future__ import annotations

import math
from typing import Sequence

from smoothpath.errors import DegenerateInputError
from smoothpath.geometry.point import Vec2


def length(v: Sequence[float]) -> float:
    return math.hypot(float(v[0]), float(v[1]))


def normalize(v: Sequence[float]) -> Vec2:
    # Zero vector maps to zero vector; coincident endpoints rely on this.
    n = length(v)
    if n <= 0.0:
        return (0.0, 0.0)
    return (float(v[0]) / n, float(v[1]) / n)


def scale(v: Sequence[float], k: float) -> Vec2:
    return (float(v[0]) * float(k), float(v[1]) * float(k))


def add(v: Sequence[float], w: Sequence[float]) -> Vec2:
    return (float(v[0]) + float(w[0]), float(v[1]) + float(w[1]))


def sub(v: Sequence[float], w: Sequence[float]) -> Vec2:
    return (float(v[0]) - float(w[0]), float(v[1]) - float(w[1]))


def scale_to(v: Sequence[float], size: float) -> Vec2:
    """Vector with the direction of ``v`` and the given length."""
    return scale(normalize(v), size)


def vec_from(p0: Sequence[float], p1: Sequence[float]) -> Vec2:
    return sub(p1, p0)


def direction(p0: Sequence[float], p1: Sequence[float]) -> Vec2:
    return normalize(vec_from(p0, p1))


def unit_normal(p0: Sequence[float], p1: Sequence[float]) -> Vec2:
    """Unit normal of the segment ``p0 -> p1`` (left-hand side in y-up axes)."""
    n = (float(p0[1]) - float(p1[1]), float(p1[0]) - float(p0[0]))
    ln = length(n)
    if ln == 0.0:
        raise DegenerateInputError(f"Segment from {tuple(p0)} to {tuple(p1)} has zero length and no normal")
    return (n[0] / ln, n[1] / ln)
