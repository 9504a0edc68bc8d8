"""Turn an element tree into ElementTree elements and markup text.

Nodes describe themselves through ``tag``, ``attributes()`` and
``content()``; composite attribute values render themselves through
``format_attr()``. Escaping is left to ElementTree.
"""

from __future__ import annotations

import enum
import logging
from typing import Any
from xml.etree import ElementTree as ET

from svgdoc.formatting import AttrFormatter, format_number
from svgdoc.node import Node

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Indentation whitespace inside these would become part of the rendered text.
_PRESERVE_SPACE = frozenset({"text", "tspan"})


def format_attr_value(value: Any) -> str:
    """Attribute text for ``value``; ``""`` means the attribute is omitted."""
    if value is None:
        return ""
    if isinstance(value, AttrFormatter):
        return value.format_attr()
    if isinstance(value, enum.Enum):
        return str(value.value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return format_number(value)
    return str(value)


def to_element(node: Node) -> ET.Element:
    elem = ET.Element(node.tag)
    for name, value in node.attributes():
        text = format_attr_value(value)
        if text:
            elem.set(name, text)

    last: ET.Element | None = None
    for item in node.content():
        if isinstance(item, str):
            if last is None:
                elem.text = (elem.text or "") + item
            else:
                last.tail = (last.tail or "") + item
        else:
            last = to_element(item)
            elem.append(last)
    return elem


def indent(elem: ET.Element, space: str = "  ", level: int = 0) -> None:
    """Like ``ElementTree.indent`` but leaves text content untouched."""
    if elem.tag in _PRESERVE_SPACE or not len(elem):
        return
    child_pad = "\n" + space * (level + 1)
    if not elem.text or not elem.text.strip():
        elem.text = child_pad
    child = None
    for child in elem:
        indent(child, space, level + 1)
        if not child.tail or not child.tail.strip():
            child.tail = child_pad
    if child is not None and not child.tail.strip():
        child.tail = "\n" + space * level


def encode(node: Node, space: str | None = None, xml_declaration: bool = False) -> str:
    """Serialize ``node`` and its subtree. ``space`` enables pretty printing."""
    root = to_element(node)
    if space is not None:
        indent(root, space)
    markup = ET.tostring(root, encoding="unicode")
    logger.debug("Encoded <%s> into %d characters", node.tag, len(markup))
    if xml_declaration:
        return XML_DECLARATION + "\n" + markup
    return markup
