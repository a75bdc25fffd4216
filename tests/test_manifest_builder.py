from __future__ import annotations

import pytest

from tmglel.grammar.models import HostLanguage, Label
from tmglel.manifest.builder import MANIFEST_HEADER, ManifestBuilder, embedded_scope, grammar_path

ONE = HostLanguage(id="one", name="One", scope="source.one", prelude="", content="")
TWO = HostLanguage(id="two", name="Two", scope="source.two", prelude="", content="")


def test_manifest_without_languages_is_header_only() -> None:
    builder = ManifestBuilder([ONE, TWO])

    assert builder.build() == MANIFEST_HEADER
    assert builder.languages == []


def test_manifest_language_entry() -> None:
    builder = ManifestBuilder([ONE, TWO])
    builder.add_language(TWO)
    builder.add_label(Label("css", "source.css", "css"))

    assert builder.build() == MANIFEST_HEADER + (
        "\n"
        "[[contributes.grammars]]\n"
        "path = './syntaxes/two.tmLanguage.json'\n"
        "scopeName = 'source.two.tmglel'\n"
        "injectTo = [\n'source.one','source.two',]\n"
        "\n"
        "[contributes.grammars.embeddedLanguages]\n"
        "'meta.embedded.block.css' = 'css'\n"
    )
    assert builder.languages == ["two"]


def test_add_label_requires_language() -> None:
    builder = ManifestBuilder([ONE])

    with pytest.raises(RuntimeError, match="add_language"):
        builder.add_label(Label("css", "source.css", "css"))


def test_path_helpers() -> None:
    assert grammar_path("rust") == "./syntaxes/rust.tmLanguage.json"
    assert embedded_scope("sql") == "meta.embedded.block.sql"
