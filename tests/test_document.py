from __future__ import annotations

import json

import pytest

from tmglel.grammar.document import grammar_header, parse_toml_document, toml_to_json
from tmglel.utils.errors import GrammarSerializationError


def test_toml_to_json_sorts_keys_and_indents() -> None:
    text = "zeta = 1\nalpha = 'é'\n[table]\nkey = true\n"

    result = toml_to_json(text, document="doc.json")

    assert result == '{\n  "alpha": "é",\n  "table": {\n    "key": true\n  },\n  "zeta": 1\n}'
    assert json.loads(result) == {"alpha": "é", "table": {"key": True}, "zeta": 1}


def test_toml_to_json_names_document_on_parse_error() -> None:
    with pytest.raises(GrammarSerializationError, match="syntaxes/x.tmLanguage.json") as exc_info:
        toml_to_json("key = \n", document="syntaxes/x.tmLanguage.json")

    assert exc_info.value.document == "syntaxes/x.tmLanguage.json"


def test_toml_to_json_rejects_values_without_json_form() -> None:
    with pytest.raises(GrammarSerializationError, match="cannot serialize"):
        toml_to_json("when = 1979-05-27\n", document="dates.json")


def test_grammar_header() -> None:
    header = grammar_header("rust", "Rust", "source.rust", "[repository]\n")

    assert header == (
        "name = 'TMGLEL for Rust'\n"
        "scopeName = 'source.rust.tmglel'\n"
        "injectionSelector = 'L:source.rust, L:meta.embedded.block.rust'\n"
        "\n"
        "[repository]\n"
    )
    assert parse_toml_document(header, document="header")["scopeName"] == "source.rust.tmglel"
