"""The root <svg> element: canvas size, embedded stylesheet and element tree."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

from svgdoc import encoder
from svgdoc.config import DocumentConfig
from svgdoc.elements import Container
from svgdoc.errors import StyleScopeError
from svgdoc.formatting import Length
from svgdoc.lists import Ints
from svgdoc.node import Attributes, Content, Node
from svgdoc.styling import Styling, trim_declaration
from svgdoc.stylesheet import StyleSheet

logger = logging.getLogger(__name__)

NAMESPACE = "http://www.w3.org/2000/svg"


@dataclass
class StyleElement(Node):
    tag: ClassVar[str] = "style"

    data: str = ""

    def content(self) -> Content:
        return [self.data]


@dataclass
class Document(Container):
    """An SVG document. Adjust ``view_box``, ``width`` and ``height`` as needed."""

    tag: ClassVar[str] = "svg"

    view_box: Ints = field(default_factory=Ints)
    width: Length | float | None = None
    height: Length | float | None = None
    config: DocumentConfig | None = None
    stylesheet: StyleSheet = field(default_factory=StyleSheet)

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = DocumentConfig()

    @property
    def namespace(self) -> str:
        return "" if self.config.embedded else NAMESPACE

    @property
    def style(self) -> str:
        """Text of the embedded <style> element."""
        return self.stylesheet.text

    def attributes(self) -> Attributes:
        return [
            ("viewBox", self.view_box),
            ("width", self.width),
            ("height", self.height),
            *self.object_attributes(),
            ("xmlns", self.namespace),
        ]

    def content(self) -> Content:
        if self.stylesheet.text:
            return [StyleElement(self.stylesheet.text), *self.children]
        return list(self.children)

    def make_style(self, name: str, style: str) -> Styling:
        """Return a Styling to apply to elements with ``with_style``.

        With ``generate_embedded_stylesheet`` set, the style is added to the
        embedded stylesheet under ``name`` (renamed on conflict) and the
        result only names the class. Otherwise the result carries the style
        itself and ``name`` is only used when ``style`` is empty.
        """
        conf = self.config
        if not conf.generate_embedded_stylesheet:
            if style:
                return Styling(style=trim_declaration(style))
            return Styling(class_=name)

        class_ = self.stylesheet.lookup(style)
        if class_ is None:
            scope_id = ""
            if conf.scope_style_definitions:
                if not self.id:
                    raise StyleScopeError("scope_style_definitions requires the document to have an ID")
                scope_id = self.id
            class_ = self.stylesheet.register(
                name, style, unify=conf.stylesheet_unify_styles, scope_id=scope_id
            )
        return Styling(class_=class_)

    def to_string(self, indent: str | None = "  ", xml_declaration: bool = False) -> str:
        return encoder.encode(self, space=indent, xml_declaration=xml_declaration)

    def write(self, path: str | Path, indent: str | None = "  ") -> None:
        path = Path(path)
        path.write_text(self.to_string(indent=indent, xml_declaration=True) + "\n", encoding="utf-8")
        logger.info("Wrote SVG document to %s", path)
