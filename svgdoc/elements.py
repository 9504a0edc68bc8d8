"""Shapes, containers and the element list that owns them.

Every append method on a container returns the new element, so it can be
configured in place:

    g = doc.group().set_id("grid").translate(10, 10)
    g.rect(0, 0, 50, 20).set_class("cell")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from svgdoc.lists import Points
from svgdoc.node import Attributes, Content, Node, SvgObject, nonzero
from svgdoc.text import Text


@dataclass
class Line(SvgObject):
    tag: ClassVar[str] = "line"

    x1: float = 0
    y1: float = 0
    x2: float = 0
    y2: float = 0

    def attributes(self) -> Attributes:
        return [("x1", self.x1), ("y1", self.y1), ("x2", self.x2), ("y2", self.y2), *self.object_attributes()]


@dataclass
class Rect(SvgObject):
    tag: ClassVar[str] = "rect"

    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0

    def attributes(self) -> Attributes:
        return [
            ("x", self.x),
            ("y", self.y),
            ("width", self.width),
            ("height", self.height),
            *self.object_attributes(),
        ]


@dataclass
class Circle(SvgObject):
    tag: ClassVar[str] = "circle"

    cx: float = 0
    cy: float = 0
    r: float = 0

    def attributes(self) -> Attributes:
        return [("cx", self.cx), ("cy", self.cy), ("r", self.r), *self.object_attributes()]


@dataclass
class Ellipse(SvgObject):
    tag: ClassVar[str] = "ellipse"

    cx: float = 0
    cy: float = 0
    rx: float = 0
    ry: float = 0

    def attributes(self) -> Attributes:
        return [("cx", self.cx), ("cy", self.cy), ("rx", self.rx), ("ry", self.ry), *self.object_attributes()]


@dataclass
class PolyLine(SvgObject):
    """Open polyline; points are added after creation."""

    tag: ClassVar[str] = "polyline"

    points: Points = field(default_factory=Points)

    def attributes(self) -> Attributes:
        return [("points", self.points), *self.object_attributes()]

    def add_point(self, x: float, y: float) -> PolyLine:
        self.points.add(x, y)
        return self

    def pre_alloc(self, n: int) -> PolyLine:
        """Capacity hint. Python lists grow on demand, so nothing is reserved."""
        return self


@dataclass
class Polygon(PolyLine):
    tag: ClassVar[str] = "polygon"


@dataclass
class Use(SvgObject):
    """Reference to another element by ID."""

    tag: ClassVar[str] = "use"

    x: float = 0
    y: float = 0
    href: str = ""

    def attributes(self) -> Attributes:
        return [("x", nonzero(self.x)), ("y", nonzero(self.y)), ("href", self.href), *self.object_attributes()]


@dataclass
class Title(Node):
    tag: ClassVar[str] = "title"

    data: str = ""

    def content(self) -> Content:
        return [self.data] if self.data else []


@dataclass
class Container(SvgObject):
    """Ordered, append-only list of child elements. May be styled and transformed."""

    children: list[Node] = field(default_factory=list)

    def content(self) -> Content:
        return list(self.children)

    def _append(self, node):
        self.children.append(node)
        return node

    def pre_alloc(self, n: int) -> Container:
        """Capacity hint. Python lists grow on demand, so nothing is reserved."""
        return self

    def group(self) -> Group:
        return self._append(Group())

    def defs(self) -> Defs:
        """Container for elements that are not rendered directly."""
        return self._append(Defs())

    def line(self, x1: float, y1: float, x2: float, y2: float) -> Line:
        return self._append(Line(x1=x1, y1=y1, x2=x2, y2=y2))

    def rect(self, x: float, y: float, width: float, height: float) -> Rect:
        return self._append(Rect(x=x, y=y, width=width, height=height))

    def circle(self, cx: float, cy: float, r: float) -> Circle:
        return self._append(Circle(cx=cx, cy=cy, r=r))

    def ellipse(self, cx: float, cy: float, rx: float, ry: float) -> Ellipse:
        return self._append(Ellipse(cx=cx, cy=cy, rx=rx, ry=ry))

    def polyline(self) -> PolyLine:
        return self._append(PolyLine())

    def polygon(self) -> Polygon:
        return self._append(Polygon())

    def use(self, x: float, y: float, ref_id: str) -> Use:
        return self._append(Use(x=x, y=y, href="#" + ref_id))

    def title(self, content: str) -> Title:
        return self._append(Title(data=content))

    def text(self, x: float, y: float, content: str = "") -> Text:
        t = Text(x=x, y=y)
        if content:
            t.data.append(content)
        return self._append(t)


@dataclass
class Group(Container):
    tag: ClassVar[str] = "g"


@dataclass
class Defs(Container):
    tag: ClassVar[str] = "defs"
