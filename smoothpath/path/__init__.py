from .catmull_rom import catmull_rom_to_bezier, smooth_control_points
from .format import format_number
from .hull import HullOutline, PathString, PointSequence, padded_hull, rounded_hull, rounded_hull_geometry, smooth_hull_path
from .options import HullOptions, resolve_padding
from .polygon import points_to_polygon
from .sampling import arc_points, cubic_points, sample_path
from .segments import (
    Arc,
    Close,
    CubicBezier,
    Line,
    Move,
    PathGeometry,
    PathSegment,
    SmoothCubic,
    path_to_points,
    segment_from_list,
    to_path_lists,
    to_path_string,
)
from .spline import get_closed_spline, get_control_point, get_spline
from .template import substitute

__all__ = [
    "Move",
    "Line",
    "CubicBezier",
    "SmoothCubic",
    "Arc",
    "Close",
    "PathSegment",
    "PathGeometry",
    "segment_from_list",
    "to_path_string",
    "to_path_lists",
    "path_to_points",
    "format_number",
    "substitute",
    "points_to_polygon",
    "catmull_rom_to_bezier",
    "smooth_control_points",
    "get_spline",
    "get_closed_spline",
    "get_control_point",
    "HullOptions",
    "resolve_padding",
    "HullOutline",
    "PathString",
    "PointSequence",
    "rounded_hull",
    "rounded_hull_geometry",
    "padded_hull",
    "smooth_hull_path",
    "sample_path",
    "cubic_points",
    "arc_points",
]
