"""Host language and label records."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HostLanguage:
    """A language whose strings and comments can carry embedded labels."""

    id: str
    name: str
    scope: str
    prelude: str
    content: str
    dry_1: str = ""
    dry_2: str = ""


@dataclass(frozen=True)
class Label:
    """An embeddable language selected by a comment label.

    ``file_patterns`` is the ``|``-separated alternation matched
    case-insensitively against the label text; ``patterns`` is an optional
    extra block appended where a template asks for it.
    """

    id: str
    scope: str
    file_patterns: str
    patterns: str = ""
