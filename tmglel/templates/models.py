"""Data models for tokenized template fragments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from tmglel.templates.markers import SENTINEL, Marker
from tmglel.utils.errors import NestedDryError

FragmentRole = Literal["content", "dry-1", "dry-2"]


@dataclass(frozen=True)
class Segment:
    """Literal text followed by the marker that ends it."""

    literal: str
    marker: Marker


@dataclass(frozen=True)
class TokenizedFragment:
    """Template fragment split into marker segments plus a trailing literal."""

    language: str
    role: FragmentRole
    segments: tuple[Segment, ...] = ()
    tail: str = ""

    @property
    def markers(self) -> list[Marker]:
        return [segment.marker for segment in self.segments]

    def reconstruct(self) -> str:
        """Rebuild the raw template text with markers left unresolved."""

        parts: list[str] = []
        for segment in self.segments:
            parts.append(segment.literal)
            parts.append(SENTINEL)
            parts.append(segment.marker.keyword)
        parts.append(self.tail)
        return "".join(parts)


@dataclass(frozen=True)
class DryFragment(TokenizedFragment):
    """Auxiliary fragment expanded in place of a dry marker.

    Dry fragments may only carry label markers; a dry marker inside one is
    rejected when the fragment is built.
    """

    def __post_init__(self) -> None:
        for segment in self.segments:
            if segment.marker.is_dry:
                raise NestedDryError(
                    f"inner dry for {self.language}: {self.role} references "
                    f"{SENTINEL}{segment.marker.keyword}",
                    language=self.language,
                    role=self.role,
                )
