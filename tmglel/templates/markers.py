"""Marker keywords recognized inside grammar templates."""

from __future__ import annotations

from enum import Enum
from typing import Literal

SENTINEL = "@_"

DryRole = Literal["dry-1", "dry-2"]


class Marker(str, Enum):
    """Placeholder kinds that can follow the ``@_`` sentinel."""

    ID = "ID"
    SCOPE = "SCOPE"
    LIST = "LIST"
    PATTERNS = "PATTERNS"
    DRY_1 = "DRY_1"
    DRY_2 = "DRY_2"  # no shipped template uses it yet

    @property
    def keyword(self) -> str:
        return self.value

    @property
    def is_dry(self) -> bool:
        return self in DRY_ROLES


# Longest keyword first so a keyword that prefixes another never shadows it.
MARKER_KEYWORDS: tuple[tuple[str, Marker], ...] = tuple(
    sorted(((marker.keyword, marker) for marker in Marker), key=lambda item: -len(item[0]))
)

DRY_ROLES: dict[Marker, DryRole] = {
    Marker.DRY_1: "dry-1",
    Marker.DRY_2: "dry-2",
}


def match_keyword(text: str, start: int) -> Marker | None:
    """Return the marker whose keyword begins at ``start`` in ``text``."""

    for keyword, marker in MARKER_KEYWORDS:
        if text.startswith(keyword, start):
            return marker
    return None
