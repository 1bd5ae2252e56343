"""
smoothpath

Smooth path geometry for 2D diagrams: splines through points and padded
outlines around point groups, emitted as path segments or SVG path data.
"""

from smoothpath.errors import DegenerateInputError, GeometryInputError, InvalidInputError
from smoothpath.geometry import Point2D, unit_normal
from smoothpath.path import (
    HullOptions,
    PathString,
    PointSequence,
    get_closed_spline,
    get_control_point,
    get_spline,
    padded_hull,
    rounded_hull,
    smooth_hull_path,
    to_path_string,
)

__all__ = [
    "GeometryInputError",
    "InvalidInputError",
    "DegenerateInputError",
    "Point2D",
    "unit_normal",
    "HullOptions",
    "PathString",
    "PointSequence",
    "get_spline",
    "get_closed_spline",
    "get_control_point",
    "rounded_hull",
    "padded_hull",
    "smooth_hull_path",
    "to_path_string",
]
