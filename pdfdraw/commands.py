"""Path drawing commands extracted from PDF content streams."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar, Tuple

Point = Tuple[float, float]


class DrawingLineType(IntEnum):
    """Kind of a drawing command; values match the content stream operators."""

    LINE_TO = ord("l")
    CUBIC_BEZIER_TO = ord("c")
    MOVE_TO = ord("m")
    QUIT_TO = ord("q")
    CMATRIX_TRANSFORM = 208
    NO_TYPE_TO = 1123


def _point(value) -> Point:
    x, y = value
    return (float(x), float(y))


@dataclass(frozen=True)
class DrawingCommand:
    """Base of all drawing commands."""

    kind: ClassVar[DrawingLineType] = DrawingLineType.NO_TYPE_TO

    def _describe(self) -> str:
        return ""

    def __str__(self) -> str:
        payload = self._describe()
        code = str(int(self.kind))
        return f"{code} {payload}" if payload else code


@dataclass(frozen=True)
class CMatrix(DrawingCommand):
    """A ``cm`` transformation matrix of six numbers."""

    matrix: Tuple[float, ...]
    kind: ClassVar[DrawingLineType] = DrawingLineType.CMATRIX_TRANSFORM

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.matrix)
        if len(values) != 6:
            raise ValueError("a transformation matrix has six values")
        object.__setattr__(self, "matrix", values)

    def _describe(self) -> str:
        return str(self.matrix)


@dataclass(frozen=True)
class Move(DrawingCommand):
    """Begin a new subpath at a point."""

    point: Point
    kind: ClassVar[DrawingLineType] = DrawingLineType.MOVE_TO

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", _point(self.point))

    def _describe(self) -> str:
        return str(self.point)


@dataclass(frozen=True)
class Line(DrawingCommand):
    """A straight segment to a point."""

    point: Point
    kind: ClassVar[DrawingLineType] = DrawingLineType.LINE_TO

    def __post_init__(self) -> None:
        object.__setattr__(self, "point", _point(self.point))

    def _describe(self) -> str:
        return str(self.point)


@dataclass(frozen=True)
class CubicBezier(DrawingCommand):
    """A cubic Bézier segment: two control points and an end point."""

    points: Tuple[Point, Point, Point]
    kind: ClassVar[DrawingLineType] = DrawingLineType.CUBIC_BEZIER_TO

    def __post_init__(self) -> None:
        points = tuple(_point(p) for p in self.points)
        if len(points) != 3:
            raise ValueError("a cubic Bézier segment has three points")
        object.__setattr__(self, "points", points)

    def _describe(self) -> str:
        return str(self.points)


@dataclass(frozen=True)
class Quit(DrawingCommand):
    """A ``q`` operator."""

    kind: ClassVar[DrawingLineType] = DrawingLineType.QUIT_TO