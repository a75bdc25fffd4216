"""VS Code extension manifest assembled as TOML text."""

from __future__ import annotations

from collections.abc import Iterable

from tmglel.grammar.models import HostLanguage, Label

MANIFEST_HEADER = """\
name = 'tmglel'
displayName = 'TMGLEL'
description = 'TextMate Grammars for Labeled Embedded Languages'
license = 'Apache-2.0'
version = '0.0.1'
publisher = 'ejaa3'
private = true
engines = { vscode = '^1.92.0' }
repository = 'github:ejaa3/tmglel'
bugs = 'https://github.com/ejaa3/tmglel/issues'
"""


def grammar_path(host_id: str) -> str:
    return f"./syntaxes/{host_id}.tmLanguage.json"


def embedded_scope(label_id: str) -> str:
    return f"meta.embedded.block.{label_id}"


class ManifestBuilder:
    """Accumulate grammar contributions for every processed host language.

    Each host gets a ``[[contributes.grammars]]`` entry injected into all host
    scopes, followed by its embedded language table. Labels must be added right
    after their host.
    """

    def __init__(self, hosts: Iterable[HostLanguage]) -> None:
        self._inject_to = [host.scope for host in hosts]
        self._parts: list[str] = [MANIFEST_HEADER]
        self._languages: list[str] = []
        self._current: str | None = None

    @property
    def languages(self) -> list[str]:
        return list(self._languages)

    def add_language(self, host: HostLanguage) -> None:
        inject_to = "".join(f"'{scope}'," for scope in self._inject_to)
        self._parts.append(
            "\n"
            "[[contributes.grammars]]\n"
            f"path = '{grammar_path(host.id)}'\n"
            f"scopeName = '{host.scope}.tmglel'\n"
            f"injectTo = [\n{inject_to}]\n"
            "\n"
            "[contributes.grammars.embeddedLanguages]\n"
        )
        self._languages.append(host.id)
        self._current = host.id

    def add_label(self, label: Label) -> None:
        if self._current is None:
            raise RuntimeError("add_language must be called before add_label")
        self._parts.append(f"'{embedded_scope(label.id)}' = '{label.id}'\n")

    def build(self) -> str:
        return "".join(self._parts)
