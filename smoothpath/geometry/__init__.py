from .point import Point2D, PointLike, Vec2, as_pair, as_point, as_points
from .vector import add, direction, length, normalize, scale, scale_to, sub, unit_normal, vec_from

__all__ = [
    "Point2D",
    "PointLike",
    "Vec2",
    "as_point",
    "as_pair",
    "as_points",
    "normalize",
    "scale",
    "scale_to",
    "add",
    "sub",
    "length",
    "vec_from",
    "direction",
    "unit_normal",
]
