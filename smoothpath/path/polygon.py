from __future__ import annotations

from typing import List, Sequence

from smoothpath.geometry.point import PointLike, as_point
from smoothpath.path.template import substitute


def points_to_polygon(points: Sequence[PointLike], close: bool = False) -> str:
    """Straight polygon path ``M{x} {y}L{x} {y}...`` through ``points``."""
    if not points:
        return ""

    parts: List[str] = []
    for i, raw in enumerate(points):
        template = "M{x} {y}" if i == 0 else "L{x} {y}"
        parts.append(substitute(template, as_point(raw).to_dict()))
    if close:
        parts.append("Z")
    return "".join(parts)
