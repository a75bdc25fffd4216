"""CLI I/O helpers for atomic output writing."""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from tmglel.orchestrator.models import GrammarDocument, ManifestDocument


@dataclass(frozen=True)
class GrammarPaths:
    """Output paths for one host language grammar."""

    json: Path
    toml: Path


@dataclass(frozen=True)
class ManifestPaths:
    """Output paths for the extension manifest."""

    json: Path
    toml: Path


def build_grammar_paths(out_dir: Path, language_id: str) -> GrammarPaths:
    """Build grammar output paths under ``out_dir/syntaxes``."""

    syntaxes = out_dir / "syntaxes"
    return GrammarPaths(
        json=syntaxes / f"{language_id}.tmLanguage.json",
        toml=syntaxes / f"{language_id}.tmLanguage.toml",
    )


def build_manifest_paths(out_dir: Path) -> ManifestPaths:
    """Build manifest output paths under ``out_dir``."""

    return ManifestPaths(json=out_dir / "package.json", toml=out_dir / "package.toml")


def write_grammar(
    out_dir: Path, grammar: GrammarDocument, *, save_toml: bool = False
) -> list[Path]:
    """Write one grammar, plus its TOML source when ``save_toml`` is set."""

    paths = build_grammar_paths(out_dir, grammar.language_id)
    paths.json.parent.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    if save_toml:
        _atomic_write_text(paths.toml, grammar.toml_text)
        written.append(paths.toml)
    _atomic_write_text(paths.json, grammar.json_text)
    written.append(paths.json)
    return written


def write_manifest(
    out_dir: Path, manifest: ManifestDocument, *, save_toml: bool = False
) -> list[Path]:
    """Write the manifest, plus its TOML source when ``save_toml`` is set."""

    paths = build_manifest_paths(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    if save_toml:
        _atomic_write_text(paths.toml, manifest.toml_text)
        written.append(paths.toml)
    _atomic_write_text(paths.json, manifest.json_text)
    written.append(paths.json)
    return written


def _atomic_write_text(path: Path, text: str) -> None:
    fd, raw_tmp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=f"{path.name}.",
        suffix=".tmp",
    )
    os.close(fd)
    tmp_path = Path(raw_tmp_path)

    try:
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(path)
    except Exception:
        if tmp_path.exists():
            tmp_path.unlink(missing_ok=True)
        raise
