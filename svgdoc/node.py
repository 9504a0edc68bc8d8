"""Attributes and behaviour shared by every element of the tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Union

from svgdoc.styling import Styling
from svgdoc.transform import TransformList

# Attribute name -> raw value. The encoder formats the value and drops the
# attribute when the result is empty or the value is None.
Attributes = list[tuple[str, Any]]

Content = list[Union[str, "Node"]]


class Node:
    """Anything the encoder can turn into one element."""

    tag: ClassVar[str] = ""

    def attributes(self) -> Attributes:
        return []

    def content(self) -> Content:
        """Child nodes and character data, in document order."""
        return []


@dataclass
class SvgObject(Node):
    """An element that may carry an ID, a transform and styling."""

    id: str = ""
    transform: TransformList = field(default_factory=TransformList)
    styling: Styling = field(default_factory=Styling)

    def object_attributes(self) -> Attributes:
        return [
            ("id", self.id),
            ("transform", self.transform),
            ("class", self.styling.class_),
            ("style", self.styling.style),
        ]

    def attributes(self) -> Attributes:
        return self.object_attributes()

    def set_id(self, id: str):
        self.id = id
        return self

    def set_class(self, class_: str):
        self.styling.set_class(class_)
        return self

    def set_style(self, style: str):
        self.styling.set_style(style)
        return self

    def with_style(self, styling: Styling):
        self.styling.with_style(styling)
        return self

    # Transform shortcuts, appended to this element's chain.

    def translate(self, x: float, y: float):
        self.transform.translate(x, y)
        return self

    def rotate_orig(self, degrees: float):
        self.transform.rotate_orig(degrees)
        return self

    def rotate(self, degrees: float, cx: float, cy: float):
        self.transform.rotate(degrees, cx, cy)
        return self

    def skew_x(self, degrees: float):
        self.transform.skew_x(degrees)
        return self

    def skew_y(self, degrees: float):
        self.transform.skew_y(degrees)
        return self

    def scale(self, sx: float, sy: float | None = None):
        self.transform.scale(sx, sy)
        return self

    def matrix(self, a: float, b: float, c: float, d: float, e: float, f: float):
        self.transform.matrix(a, b, c, d, e, f)
        return self


def nonzero(value: float) -> float | None:
    """``None`` for zero, so optional coordinates are left out."""
    return value if value else None
