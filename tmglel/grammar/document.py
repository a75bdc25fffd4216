"""TOML to JSON conversion of generated documents."""

from __future__ import annotations

import json
import tomllib
from typing import Any

from tmglel.utils.errors import GrammarSerializationError


def parse_toml_document(text: str, *, document: str) -> dict[str, Any]:
    """Parse generated TOML text, naming ``document`` on failure."""

    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise GrammarSerializationError(
            f"invalid TOML for {document}: {exc}", document=document
        ) from exc


def toml_to_json(text: str, *, document: str) -> str:
    """Convert TOML text to pretty JSON with sorted keys."""

    payload = parse_toml_document(text, document=document)
    try:
        return json.dumps(payload, ensure_ascii=False, sort_keys=True, indent=2)
    except (TypeError, ValueError) as exc:
        raise GrammarSerializationError(
            f"cannot serialize {document} as JSON: {exc}", document=document
        ) from exc


def grammar_header(host_id: str, name: str, scope: str, prelude: str) -> str:
    """Top-level keys of one injection grammar followed by the host prelude."""

    return (
        f"name = 'TMGLEL for {name}'\n"
        f"scopeName = '{scope}.tmglel'\n"
        f"injectionSelector = 'L:{scope}, L:meta.embedded.block.{host_id}'\n"
        "\n"
        f"{prelude}"
    )
