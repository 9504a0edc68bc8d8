"""Embedded stylesheet with class name deduplication.

Styles registered here end up as rules of a single <style> element. Two
tables are kept: style text -> class (only filled when styles are unified)
and class -> style text (always filled, to detect name conflicts). A
conflicting class name gets the next value of a per-document counter
appended; the counter never goes back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from svgdoc.styling import trim_declaration

logger = logging.getLogger(__name__)


@dataclass
class StyleTable:
    def_map: dict[str, str] = field(default_factory=dict)
    class_map: dict[str, str] = field(default_factory=dict)
    n_conflict: int = 0


@dataclass
class StyleSheet:
    text: str = ""
    table: StyleTable = field(default_factory=StyleTable)

    def lookup(self, style: str) -> str | None:
        """Class previously assigned to identical style text, if unified."""
        return self.table.def_map.get(style)

    def free_name(self, name: str) -> str:
        """Return ``name`` or, if taken, ``name`` suffixed with the next counter value."""
        t = self.table
        candidate = name
        while candidate in t.class_map:
            t.n_conflict += 1
            candidate = f"{name}{t.n_conflict}"
        if candidate != name:
            logger.debug("Class %r already defined, using %r", name, candidate)
        return candidate

    def register(self, name: str, style: str, *, unify: bool = False, scope_id: str = "") -> str:
        """Add a rule for ``style`` and return the class name it was stored under."""
        class_ = self.free_name(name)
        if unify:
            self.table.def_map[style] = class_
        self.table.class_map[class_] = style

        if self.text:
            self.text += " "
        if scope_id:
            self.text += f"#{scope_id} "
        self.text += f".{class_} {{{trim_declaration(style)}}}"
        logger.debug("Registered style class %r: %s", class_, style)
        return class_
