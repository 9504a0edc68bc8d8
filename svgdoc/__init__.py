"""svgdoc: build SVG documents in memory and serialize them."""

from svgdoc.config import DocumentConfig
from svgdoc.document import Document
from svgdoc.elements import Circle, Container, Defs, Ellipse, Group, Line, PolyLine, Polygon, Rect, Title, Use
from svgdoc.errors import NonFiniteValueError, NonIntegerValueError, StyleScopeError, SvgDocError
from svgdoc.formatting import Length, em_units, ex_units, format_number, number, percentage, pixels
from svgdoc.lists import Floats, Ints, Points
from svgdoc.styling import Styling
from svgdoc.text import LengthAdjust, Text, TextAnchor, TSpan
from svgdoc.transform import Transform, TransformList

__all__ = [
    "Circle",
    "Container",
    "Defs",
    "Document",
    "DocumentConfig",
    "Ellipse",
    "Floats",
    "Group",
    "Ints",
    "Length",
    "LengthAdjust",
    "Line",
    "NonFiniteValueError",
    "NonIntegerValueError",
    "Points",
    "PolyLine",
    "Polygon",
    "Rect",
    "StyleScopeError",
    "Styling",
    "SvgDocError",
    "TSpan",
    "Text",
    "TextAnchor",
    "Title",
    "Transform",
    "TransformList",
    "Use",
    "em_units",
    "ex_units",
    "format_number",
    "number",
    "percentage",
    "pixels",
]
