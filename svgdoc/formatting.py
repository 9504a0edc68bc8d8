"""Scalar formatters: numbers and lengths to SVG attribute text."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from svgdoc.errors import NonFiniteValueError


@runtime_checkable
class AttrFormatter(Protocol):
    """Anything that knows how to render itself as an attribute value.

    The encoder calls ``format_attr`` on every attribute value implementing
    this protocol. An empty string means "leave the attribute out".
    """

    def format_attr(self) -> str: ...


def format_number(value: float) -> str:
    """Shortest text that parses back to ``value``; integral values drop the ``.0``."""
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise NonFiniteValueError(f"Cannot format non-finite value {value!r}")
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


@dataclass(frozen=True)
class Length:
    """A number with an optional unit suffix ("", "em", "ex", "%", "px")."""

    value: float
    unit: str = ""

    def format_attr(self) -> str:
        return format_number(self.value) + self.unit

    def __str__(self) -> str:
        return self.format_attr()


def number(value: float) -> Length:
    """Length marshaled without a unit."""
    return Length(value)


def em_units(value: float) -> Length:
    return Length(value, "em")


def ex_units(value: float) -> Length:
    return Length(value, "ex")


def percentage(value: float) -> Length:
    return Length(value, "%")


def pixels(value: float) -> Length:
    return Length(value, "px")
