"""<text> and <tspan> elements with mixed character data."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import ClassVar

from svgdoc.formatting import Length
from svgdoc.lists import Floats
from svgdoc.node import Attributes, Content, SvgObject, nonzero


class TextAnchor(str, enum.Enum):
    MIDDLE = "middle"
    END = "end"


class LengthAdjust(str, enum.Enum):
    SPACING = "spacing"
    SPACING_AND_GLYPHS = "spacingAndGlyphs"


@dataclass
class TextObject(SvgObject):
    """Properties common to <text> and <tspan> elements."""

    x: float = 0
    y: float = 0
    dx: Length | None = None
    dy: Length | None = None
    text_anchor: TextAnchor | None = None
    text_length: Length | None = None
    length_adjust: LengthAdjust | None = None
    # Per-glyph rotation in degrees.
    glyph_rotate: Floats = field(default_factory=Floats)
    # Character data (str) and nested TSpan elements, in order.
    data: list[str | TSpan] = field(default_factory=list)

    def attributes(self) -> Attributes:
        return [
            ("x", nonzero(self.x)),
            ("y", nonzero(self.y)),
            ("dx", self.dx),
            ("dy", self.dy),
            ("text-anchor", self.text_anchor),
            ("textLength", self.text_length),
            ("lengthAdjust", self.length_adjust),
            ("rotate", self.glyph_rotate),
            *self.object_attributes(),
        ]

    def content(self) -> Content:
        return list(self.data)

    def anchor(self, a: TextAnchor) -> TextObject:
        self.text_anchor = a
        return self

    def add_span(self, content: str = "") -> TSpan:
        """Append a <tspan> and return it."""
        span = TSpan()
        if content:
            span.data.append(content)
        self.data.append(span)
        return span

    def add_text(self, content: str) -> TextObject:
        """Append character data, e.g. after a <tspan>."""
        self.data.append(content)
        return self


@dataclass
class Text(TextObject):
    tag: ClassVar[str] = "text"


@dataclass
class TSpan(TextObject):
    tag: ClassVar[str] = "tspan"
