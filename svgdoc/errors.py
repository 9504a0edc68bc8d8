"""Exceptions raised while building or serializing a document."""

from __future__ import annotations


class SvgDocError(ValueError):
    """Base class for all svgdoc errors."""


class NonFiniteValueError(SvgDocError):
    """Raised when NaN or infinity reaches an attribute formatter."""


class StyleScopeError(SvgDocError):
    """Raised when scoped style definitions are requested for a document without an ID."""


class NonIntegerValueError(SvgDocError):
    """Raised when an integer list holds a value that is not an integer."""
