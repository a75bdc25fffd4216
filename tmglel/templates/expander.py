"""Label expansion of tokenized host language templates."""

from __future__ import annotations

from tmglel.grammar.models import Label
from tmglel.templates.markers import SENTINEL, Marker
from tmglel.templates.models import TokenizedFragment
from tmglel.templates.registry import DryBlockRegistry
from tmglel.utils.errors import NestedDryError


def expand_label(registry: DryBlockRegistry, label: Label, buffer: list[str]) -> None:
    """Append the content fragment of ``registry`` expanded for ``label``.

    Dry markers in the content fragment splice in the matching dry fragment,
    resolved against the same label. Dry fragments cannot nest.
    """

    content = registry.content
    for segment in content.segments:
        buffer.append(segment.literal)
        if segment.marker.is_dry:
            _expand_dry(registry.dry(segment.marker), label, buffer)
        else:
            buffer.append(label_value(segment.marker, label))
    buffer.append(content.tail)


def render_label(registry: DryBlockRegistry, label: Label) -> str:
    """Return the content fragment of ``registry`` expanded for ``label``."""

    buffer: list[str] = []
    expand_label(registry, label, buffer)
    return "".join(buffer)


def label_value(marker: Marker, label: Label) -> str:
    if marker is Marker.ID:
        return label.id
    if marker is Marker.SCOPE:
        return label.scope
    if marker is Marker.LIST:
        return label.file_patterns
    if marker is Marker.PATTERNS:
        return label.patterns
    raise ValueError(f"Marker {SENTINEL}{marker.keyword} has no label value")


def _expand_dry(fragment: TokenizedFragment, label: Label, buffer: list[str]) -> None:
    for segment in fragment.segments:
        if segment.marker.is_dry:
            raise NestedDryError(
                f"inner dry for {fragment.language}: {fragment.role} references "
                f"{SENTINEL}{segment.marker.keyword}",
                language=fragment.language,
                role=fragment.role,
            )
        buffer.append(segment.literal)
        buffer.append(label_value(segment.marker, label))
    buffer.append(fragment.tail)
