"""Transform chains for the ``transform`` attribute.

A chain is an ordered, append-only list of operations. Each operation has a
name and an argument list; every argument formats itself, so new operation
kinds only need a builder method:

    chain = TransformList().translate(10, 20).rotate_orig(30)
    chain.format_attr()  # "translate(10,20) rotate(30)"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from svgdoc.formatting import format_number
from svgdoc.lists import join_list


class TransformArg(Protocol):
    def __str__(self) -> str: ...


@dataclass(frozen=True)
class IntArg:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class FloatArg:
    value: float

    def __str__(self) -> str:
        return format_number(self.value)


def _arg(value: float) -> TransformArg:
    if isinstance(value, int):
        return IntArg(value)
    return FloatArg(value)


@dataclass(frozen=True)
class Transform:
    name: str
    args: tuple[TransformArg, ...] = field(default_factory=tuple)

    def call(self) -> str:
        """Functional notation, e.g. ``translate(1,2)``."""
        return f"{self.name}({','.join(str(a) for a in self.args)})"


def make_transform(name: str, *values: float) -> Transform:
    return Transform(name, tuple(_arg(v) for v in values))


class TransformList(list):
    """Ordered transform operations, rendered left to right."""

    def add(self, t: Transform) -> TransformList:
        self.append(t)
        return self

    def translate(self, x: float, y: float) -> TransformList:
        return self.add(make_transform("translate", x, y))

    def rotate_orig(self, degrees: float) -> TransformList:
        """Rotate by ``degrees`` around the origin of the current coordinate system."""
        return self.add(make_transform("rotate", degrees))

    def rotate(self, degrees: float, cx: float, cy: float) -> TransformList:
        """Rotate by ``degrees`` around the point (cx, cy)."""
        return self.add(make_transform("rotate", degrees, cx, cy))

    def skew_x(self, degrees: float) -> TransformList:
        return self.add(make_transform("skewX", degrees))

    def skew_y(self, degrees: float) -> TransformList:
        return self.add(make_transform("skewY", degrees))

    def scale(self, sx: float, sy: float | None = None) -> TransformList:
        if sy is None:
            return self.add(make_transform("scale", sx))
        return self.add(make_transform("scale", sx, sy))

    def matrix(self, a: float, b: float, c: float, d: float, e: float, f: float) -> TransformList:
        return self.add(make_transform("matrix", a, b, c, d, e, f))

    def format_attr(self) -> str:
        return join_list(t.call() for t in self)
