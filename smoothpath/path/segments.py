from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Any, ClassVar, List, Sequence, Tuple, Union

from smoothpath.geometry.point import Vec2
from smoothpath.path.format import format_number


@dataclass(frozen=True)
class Move:
    command: ClassVar[str] = "M"
    x: float
    y: float

    def operands(self) -> Tuple[float, ...]:
        return astuple(self)

    def to_list(self) -> List[Any]:
        return [self.command, *self.operands()]


@dataclass(frozen=True)
class Line:
    command: ClassVar[str] = "L"
    x: float
    y: float

    def operands(self) -> Tuple[float, ...]:
        return astuple(self)

    def to_list(self) -> List[Any]:
        return [self.command, *self.operands()]


@dataclass(frozen=True)
class CubicBezier:
    command: ClassVar[str] = "C"
    c1x: float
    c1y: float
    c2x: float
    c2y: float
    x: float
    y: float

    @staticmethod
    def through(c1: Vec2, c2: Vec2, end: Vec2) -> "CubicBezier":
        return CubicBezier(
            float(c1[0]), float(c1[1]), float(c2[0]), float(c2[1]), float(end[0]), float(end[1])
        )

    def operands(self) -> Tuple[float, ...]:
        return astuple(self)

    def to_list(self) -> List[Any]:
        return [self.command, *self.operands()]


@dataclass(frozen=True)
class SmoothCubic:
    command: ClassVar[str] = "S"
    c2x: float
    c2y: float
    x: float
    y: float

    def operands(self) -> Tuple[float, ...]:
        return astuple(self)

    def to_list(self) -> List[Any]:
        return [self.command, *self.operands()]


@dataclass(frozen=True)
class Arc:
    command: ClassVar[str] = "A"
    rx: float
    ry: float
    rotation: float
    large_arc: int
    sweep: int
    x: float
    y: float

    @staticmethod
    def circular(radius: float, end: Vec2, *, large_arc: int = 0, sweep: int = 0) -> "Arc":
        r = float(radius)
        return Arc(r, r, 0.0, int(large_arc), int(sweep), float(end[0]), float(end[1]))

    def operands(self) -> Tuple[float, ...]:
        return astuple(self)

    def to_list(self) -> List[Any]:
        return [self.command, *self.operands()]


@dataclass(frozen=True)
class Close:
    command: ClassVar[str] = "Z"

    def operands(self) -> Tuple[float, ...]:
        return ()

    def to_list(self) -> List[Any]:
        return [self.command]


PathSegment = Union[Move, Line, CubicBezier, SmoothCubic, Arc, Close]
PathGeometry = List[PathSegment]

_SEGMENT_TYPES = {cls.command: cls for cls in (Move, Line, CubicBezier, SmoothCubic, Arc, Close)}


def segment_from_list(seg: Sequence[Any]) -> PathSegment:
    """Build a segment from its array form, e.g. ``["C", 1, 2, 3, 4, 5, 6]``."""
    if not seg:
        raise ValueError("Path segment is empty")
    cmd = str(seg[0])
    cls = _SEGMENT_TYPES.get(cmd)
    if cls is None:
        raise ValueError(f"Unsupported path command '{cmd}'")
    try:
        return cls(*seg[1:])
    except TypeError as e:
        raise ValueError(f"Path command '{cmd}' got {len(seg) - 1} operands") from e


def as_segment(seg: PathSegment | Sequence[Any]) -> PathSegment:
    if isinstance(seg, (Move, Line, CubicBezier, SmoothCubic, Arc, Close)):
        return seg
    return segment_from_list(seg)


def segment_to_string(seg: PathSegment) -> str:
    ops = seg.operands()
    if not ops:
        return seg.command
    return f"{seg.command} " + ",".join(format_number(v) for v in ops)


def to_path_string(path: Sequence[PathSegment | Sequence[Any]]) -> str:
    """SVG path data for ``path``; the one place path text is produced."""
    return " ".join(segment_to_string(as_segment(seg)) for seg in path)


def to_path_lists(path: Sequence[PathSegment]) -> List[List[Any]]:
    return [as_segment(seg).to_list() for seg in path]


def path_to_points(path: Sequence[PathSegment | Sequence[Any]]) -> List[Vec2]:
    """Coordinate pairs mentioned by a path.

    Every operand pair is reported except for arcs, which only contribute
    their endpoint (radii and flags are not coordinates).
    """
    points: List[Vec2] = []
    for raw in path:
        seg = as_segment(raw)
        if isinstance(seg, Arc):
            points.append((float(seg.x), float(seg.y)))
            continue
        ops = seg.operands()
        for i in range(0, len(ops) - 1, 2):
            points.append((float(ops[i]), float(ops[i + 1])))
    return points
