"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgdoc import Document, DocumentConfig


@pytest.fixture
def plain_doc() -> Document:
    """Inline styles, no stylesheet."""
    return Document(config=DocumentConfig())


@pytest.fixture
def embedded_doc() -> Document:
    """No xmlns attribute, so compact markup stays short."""
    return Document(config=DocumentConfig(embedded=True))


@pytest.fixture
def sheet_doc() -> Document:
    return Document(config=DocumentConfig(generate_embedded_stylesheet=True))


@pytest.fixture
def unified_doc() -> Document:
    return Document(
        config=DocumentConfig(generate_embedded_stylesheet=True, stylesheet_unify_styles=True)
    )
