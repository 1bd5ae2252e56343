from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple, Union


Vec2 = Tuple[float, float]


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def as_tuple(self) -> Vec2:
        return (float(self.x), float(self.y))

    def to_dict(self) -> dict:
        return {"x": float(self.x), "y": float(self.y)}


PointLike = Union[Point2D, Mapping[str, Any], Sequence[float]]


def as_point(obj: PointLike) -> Point2D:
    """Coerce a ``Point2D``, an ``{"x", "y"}`` mapping or an ``(x, y)`` pair."""
    if isinstance(obj, Point2D):
        return obj
    if isinstance(obj, Mapping):
        return Point2D(float(obj["x"]), float(obj["y"]))
    if len(obj) != 2:
        raise ValueError(f"Point must have exactly 2 coordinates, got {len(obj)}")
    return Point2D(float(obj[0]), float(obj[1]))


def as_pair(obj: PointLike) -> Vec2:
    return as_point(obj).as_tuple()


def as_points(points: Sequence[PointLike]) -> List[Point2D]:
    return [as_point(p) for p in points]
