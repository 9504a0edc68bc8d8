"""Opt-in logging setup. The library itself only creates module loggers."""

from __future__ import annotations

import logging

from svgdoc.config import settings


def configure_logging(level: str | None = None) -> None:
    name = (level or settings.svgdoc_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
