"""Per host language registry of tokenized template fragments."""

from __future__ import annotations

from dataclasses import dataclass

from tmglel.grammar.models import HostLanguage
from tmglel.templates.markers import DRY_ROLES, Marker
from tmglel.templates.models import DryFragment, TokenizedFragment
from tmglel.templates.tokenizer import tokenize, tokenize_dry


@dataclass(frozen=True)
class DryBlockRegistry:
    """Tokenized content fragment and the dry fragments it may splice in."""

    language: str
    content: TokenizedFragment
    dry_1: DryFragment
    dry_2: DryFragment

    def dry(self, marker: Marker) -> DryFragment:
        try:
            role = DRY_ROLES[marker]
        except KeyError as exc:
            raise ValueError(f"Not a dry marker: {marker.keyword}") from exc
        return {fragment.role: fragment for fragment in (self.dry_1, self.dry_2)}[role]

    def fragments(self) -> tuple[TokenizedFragment, ...]:
        return (self.content, self.dry_1, self.dry_2)


def build_registry(host: HostLanguage) -> DryBlockRegistry:
    """Tokenize the three template fragments of one host language.

    Raises:
        MalformedTemplateError: A fragment contains an unknown marker.
        NestedDryError: A dry fragment contains a dry marker.
    """

    return DryBlockRegistry(
        language=host.name,
        content=tokenize(host.content, language=host.name, role="content"),
        dry_1=tokenize_dry(host.dry_1, language=host.name, role=DRY_ROLES[Marker.DRY_1]),
        dry_2=tokenize_dry(host.dry_2, language=host.name, role=DRY_ROLES[Marker.DRY_2]),
    )
