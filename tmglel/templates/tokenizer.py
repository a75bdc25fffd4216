"""Marker tokenizer for host language grammar templates.

A marker is the two-character sentinel ``@_`` followed by one of the keywords
in :data:`tmglel.templates.markers.MARKER_KEYWORDS`. Any other text after the
sentinel is a template authoring defect and aborts tokenization.
"""

from __future__ import annotations

from tmglel.templates.markers import SENTINEL, match_keyword
from tmglel.templates.models import DryFragment, FragmentRole, Segment, TokenizedFragment
from tmglel.utils.errors import MalformedTemplateError

_SNIPPET_LENGTH = 16


def tokenize(text: str, *, language: str, role: FragmentRole = "content") -> TokenizedFragment:
    """Split template text into ``(literal, marker)`` segments and a tail.

    Args:
        text: Raw template fragment.
        language: Host language display name, used in error messages.
        role: Fragment role inside the host language.

    Returns:
        TokenizedFragment whose ``reconstruct()`` equals ``text``.

    Raises:
        MalformedTemplateError: The sentinel is followed by an unknown keyword.
    """

    segments, tail = _scan(text, language=language, role=role)
    return TokenizedFragment(language=language, role=role, segments=segments, tail=tail)


def tokenize_dry(text: str, *, language: str, role: FragmentRole) -> DryFragment:
    """Tokenize a dry fragment; dry markers inside it raise ``NestedDryError``."""

    segments, tail = _scan(text, language=language, role=role)
    return DryFragment(language=language, role=role, segments=segments, tail=tail)


def _scan(text: str, *, language: str, role: str) -> tuple[tuple[Segment, ...], str]:
    segments: list[Segment] = []
    cursor = 0

    while True:
        index = text.find(SENTINEL, cursor)
        if index < 0:
            break

        keyword_start = index + len(SENTINEL)
        marker = match_keyword(text, keyword_start)
        if marker is None:
            snippet = text[index : index + _SNIPPET_LENGTH]
            raise MalformedTemplateError(
                f"malformed content for {language}: unknown marker {snippet!r} "
                f"in {role} at offset {index}",
                language=language,
                role=role,
                position=index,
                snippet=snippet,
            )

        segments.append(Segment(literal=text[cursor:index], marker=marker))
        cursor = keyword_start + len(marker.keyword)

    return tuple(segments), text[cursor:]
