"""List attribute values: space separated numbers and coordinate pairs."""

from __future__ import annotations

from typing import Iterable

from svgdoc.errors import NonIntegerValueError
from svgdoc.formatting import format_number


def join_list(values: Iterable[str]) -> str:
    """Join pre-formatted values with single spaces. Empty input gives ``""``."""
    return " ".join(values)


class Ints(list):
    """Integers marshaled as a space separated list, e.g. a ``viewBox``."""

    def format_attr(self) -> str:
        for v in self:
            if not isinstance(v, int) or isinstance(v, bool):
                raise NonIntegerValueError(f"Ints holds non-integer value {v!r}")
        return join_list(str(v) for v in self)


class Floats(list):
    """Floats marshaled as a space separated list, e.g. per-glyph ``rotate``."""

    def format_attr(self) -> str:
        return join_list(format_number(v) for v in self)


class Points(list):
    """2D coordinates marshaled as space separated ``x,y`` pairs."""

    def add(self, x: float, y: float) -> Points:
        self.append((x, y))
        return self

    def format_attr(self) -> str:
        return join_list(f"{format_number(x)},{format_number(y)}" for x, y in self)
