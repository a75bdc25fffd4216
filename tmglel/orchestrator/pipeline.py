"""Generation pipeline: tokenize -> expand per label -> serialize."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Sequence
from typing import Any

from tmglel.config.models import LabelSupport
from tmglel.grammar.document import grammar_header, toml_to_json
from tmglel.grammar.hosts import HOST_LANGUAGES
from tmglel.grammar.labels import LABELS
from tmglel.grammar.models import HostLanguage, Label
from tmglel.manifest.builder import ManifestBuilder
from tmglel.orchestrator.models import GenerationResult, GrammarDocument, ManifestDocument
from tmglel.templates.expander import expand_label
from tmglel.templates.registry import build_registry

logger = logging.getLogger("tmglel.generate")

GrammarSink = Callable[[GrammarDocument], None]


def run_generation(
    support: LabelSupport,
    *,
    hosts: Sequence[HostLanguage] = HOST_LANGUAGES,
    labels: Sequence[Label] = LABELS,
    on_grammar: GrammarSink | None = None,
) -> GenerationResult:
    """Generate one grammar per configured host language and the manifest.

    Hosts are processed one at a time, in order. Each finished grammar is
    passed to ``on_grammar`` before the next host starts, so a failure later in
    the run leaves earlier grammars delivered. Labels are emitted in the order
    of ``labels``, never in configuration order.
    """

    _log_event(logging.INFO, "start", languages=sorted(support.languages))
    _warn_unknown(support, hosts, labels)

    manifest = ManifestBuilder(hosts)
    grammars: list[GrammarDocument] = []
    skipped: list[str] = []

    try:
        for host in hosts:
            if not support.has_labels(host.id):
                skipped.append(host.id)
                _log_event(logging.INFO, "language_skipped", language=host.id)
                continue

            grammar = _generate_host(host, labels, support.labels_for(host.id), manifest)
            grammars.append(grammar)
            _log_event(
                logging.INFO,
                "language_done",
                language=host.id,
                label_count=len(grammar.labels),
                toml_bytes=len(grammar.toml_text.encode("utf-8")),
            )
            if on_grammar is not None:
                on_grammar(grammar)

        manifest_text = manifest.build()
        manifest_document = ManifestDocument(
            languages=manifest.languages,
            toml_text=manifest_text,
            json_text=toml_to_json(manifest_text, document="package.json"),
        )
    except Exception as exc:
        _log_event(logging.ERROR, "failed", error_type=type(exc).__name__, error=str(exc))
        raise

    _log_event(logging.INFO, "done", grammar_count=len(grammars), skipped=skipped)
    return GenerationResult(
        grammars=grammars, manifest=manifest_document, skipped_languages=skipped
    )


def _generate_host(
    host: HostLanguage,
    labels: Sequence[Label],
    enabled: frozenset[str],
    manifest: ManifestBuilder,
) -> GrammarDocument:
    registry = build_registry(host)
    manifest.add_language(host)

    buffer: list[str] = [grammar_header(host.id, host.name, host.scope, host.prelude)]
    expanded: list[str] = []
    for label in labels:
        if label.id not in enabled:
            continue
        manifest.add_label(label)
        expand_label(registry, label, buffer)
        expanded.append(label.id)

    toml_text = "".join(buffer)
    return GrammarDocument(
        language_id=host.id,
        scope_name=f"{host.scope}.tmglel",
        labels=expanded,
        toml_text=toml_text,
        json_text=toml_to_json(toml_text, document=f"syntaxes/{host.id}.tmLanguage.json"),
    )


def _warn_unknown(
    support: LabelSupport, hosts: Sequence[HostLanguage], labels: Sequence[Label]
) -> None:
    host_ids = {host.id for host in hosts}
    label_ids = {label.id for label in labels}

    for language_id in sorted(support.languages):
        if language_id not in host_ids:
            _log_event(logging.WARNING, "unknown_language", language=language_id)
            continue
        for label_id in sorted(support.labels_for(language_id) - label_ids):
            _log_event(logging.WARNING, "unknown_label", language=language_id, label=label_id)


def _log_event(level: int, event: str, **fields: Any) -> None:
    payload = {"event": event, **fields}
    logger.log(level, _dump_json(payload))


def _dump_json(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True, separators=(",", ":"))
