from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, List

from smoothpath.errors import GeometryInputError
from smoothpath.geometry.point import Point2D, as_points
from smoothpath.log import setup_logging
from smoothpath.path.hull import PathString, padded_hull, rounded_hull, smooth_hull_path
from smoothpath.path.options import PADDING_POLICIES, HullOptions
from smoothpath.path.polygon import points_to_polygon
from smoothpath.path.segments import to_path_lists, to_path_string
from smoothpath.path.spline import get_closed_spline, get_spline


def _load_points(path_arg: str) -> List[Point2D]:
    p = Path(path_arg).expanduser().resolve()
    if not p.exists() or not p.is_file():
        raise GeometryInputError(f"Points file not found: {p}")
    try:
        data: Any = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise GeometryInputError(f"Points file is not valid JSON: {p}") from e
    if not isinstance(data, list):
        raise GeometryInputError("Points file must hold a JSON list of [x, y] pairs or {x, y} objects")
    try:
        return as_points(data)
    except (KeyError, TypeError, ValueError) as e:
        raise GeometryInputError(f"Invalid point in {p}: {e}") from e


def _cmd_spline(args: argparse.Namespace) -> int:
    points = _load_points(args.file)
    path = get_closed_spline(points) if args.closed else get_spline(points)
    if args.json:
        print(json.dumps(to_path_lists(path)))
    else:
        print(to_path_string(path))
    return 0


def _cmd_hull(args: argparse.Namespace) -> int:
    points = _load_points(args.file)
    options = HullOptions(padding_policy=args.padding_policy)
    if args.style == "rounded":
        print(rounded_hull(points, args.padding, options))
        return 0
    if args.style == "smooth":
        print(smooth_hull_path(points, args.padding, options))
        return 0

    outline = padded_hull(points, args.padding, options)
    if isinstance(outline, PathString):
        print(outline.data)
    else:
        print(json.dumps([p.to_dict() for p in outline.points]))
    return 0


def _cmd_polygon(args: argparse.Namespace) -> int:
    points = _load_points(args.file)
    print(points_to_polygon(points, close=bool(args.close)))
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="smoothpath")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("spline", help="Cubic Bezier spline through the points of a JSON file.")
    s.add_argument("file", help="JSON list of [x, y] pairs or {x, y} objects")
    s.add_argument("--closed", action="store_true", help="Close the curve into a loop")
    s.add_argument("--json", action="store_true", help="Print segments as JSON arrays instead of path data")
    s.set_defaults(func=_cmd_spline)

    h = sub.add_parser("hull", help="Padded outline around points given in convex-hull order.")
    h.add_argument("file", help="JSON list of [x, y] pairs or {x, y} objects")
    h.add_argument("--padding", type=float, required=True, help="Distance between points and outline")
    h.add_argument("--style", choices=("rounded", "padded", "smooth"), default="rounded", help="Outline style (default: rounded)")
    h.add_argument("--padding-policy", choices=PADDING_POLICIES, default="allow", help="Handling of non-positive padding")
    h.set_defaults(func=_cmd_hull)

    g = sub.add_parser("polygon", help="Straight polygon path through the points.")
    g.add_argument("file", help="JSON list of [x, y] pairs or {x, y} objects")
    g.add_argument("--close", action="store_true", help="Append Z to close the polygon")
    g.set_defaults(func=_cmd_polygon)

    args = p.parse_args(argv)
    if args.verbose:
        setup_logging(logging.DEBUG)
    try:
        return int(args.func(args))
    except GeometryInputError as e:
        print(f"[ERROR] {e}")
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
