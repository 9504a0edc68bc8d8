"""Class and style attributes shared by every element."""

from __future__ import annotations

from dataclasses import dataclass


def trim_declaration(style: str) -> str:
    """Drop one trailing ``;`` from a declaration block."""
    return style[:-1] if style.endswith(";") else style


@dataclass
class Styling:
    class_: str = ""
    style: str = ""

    def set_style(self, style: str) -> Styling:
        self.style = trim_declaration(style)
        return self

    def set_class(self, class_: str) -> Styling:
        self.class_ = class_
        return self

    def with_style(self, other: Styling) -> Styling:
        self.class_ = other.class_
        self.style = other.style
        return self
