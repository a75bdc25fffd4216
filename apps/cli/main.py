"""Typer CLI entrypoint for tmglel."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Annotated

import typer

from apps.cli.io import write_grammar, write_manifest
from tmglel.config.support_loader import DEFAULT_CONFIG_NAME, load_label_support
from tmglel.grammar.hosts import HOST_LANGUAGES, HOST_LANGUAGES_BY_ID
from tmglel.grammar.labels import LABELS
from tmglel.orchestrator.models import GrammarDocument
from tmglel.orchestrator.pipeline import run_generation
from tmglel.templates.registry import build_registry
from tmglel.utils.errors import GrammarSerializationError, TemplateError

app = typer.Typer(help="TextMate Grammars for Labeled Embedded Languages", rich_markup_mode=None)

EXIT_OK = 0
EXIT_INTERNAL = 1
EXIT_CONFIG = 2
EXIT_TEMPLATE = 3


@app.callback()
def cli_callback() -> None:
    """CLI root callback to keep subcommands explicit."""


@app.command("generate")
def generate_command(
    config: Annotated[Path, typer.Option(dir_okay=False)] = Path(DEFAULT_CONFIG_NAME),
    out_dir: Annotated[Path, typer.Option(file_okay=False)] = Path("."),
    save_toml: Annotated[
        bool,
        typer.Option(
            "--save-toml",
            help="Also write the intermediate TOML grammars and package.toml.",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log generation events to stderr.")
    ] = False,
) -> None:
    """Generate syntaxes/<language>.tmLanguage.json and package.json."""

    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
        logging.getLogger("tmglel").setLevel(logging.INFO)

    exit_code = EXIT_INTERNAL
    failure_stage = "load_config"

    def _write(grammar: GrammarDocument) -> None:
        for path in write_grammar(out_dir, grammar, save_toml=save_toml):
            typer.echo(f"INFO: wrote {path}")

    try:
        support = load_label_support(config)
        failure_stage = "generate"
        result = run_generation(support, on_grammar=_write)
        failure_stage = "write_manifest"
        if not result.grammars:
            typer.echo("WARNING: no host language has labels configured.")
        for path in write_manifest(out_dir, result.manifest, save_toml=save_toml):
            typer.echo(f"INFO: wrote {path}")
        exit_code = EXIT_OK
    except TemplateError as exc:
        exit_code = EXIT_TEMPLATE
        typer.echo(f"ERROR: template error: {exc}")
    except GrammarSerializationError as exc:
        typer.echo(f"ERROR: serialization failed: {exc}")
    except ValueError as exc:
        if failure_stage == "load_config":
            exit_code = EXIT_CONFIG
            typer.echo(f"ERROR: {exc}")
            if exc.__cause__ is not None:
                typer.echo(f"ERROR: {exc.__cause__}")
        else:
            typer.echo(f"ERROR: {failure_stage} failed: {type(exc).__name__}: {exc}")
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"ERROR: {failure_stage} failed: {type(exc).__name__}: {exc}")

    if exit_code == EXIT_OK:
        typer.echo("INFO: success")
    raise typer.Exit(code=exit_code)


@app.command("check")
def check_command() -> None:
    """Tokenize every built-in template and print marker counts."""

    exit_code = EXIT_OK
    for host in HOST_LANGUAGES:
        try:
            registry = build_registry(host)
        except TemplateError as exc:
            typer.echo(f"ERROR: {host.id}: {exc}")
            exit_code = EXIT_TEMPLATE
            continue

        for fragment in registry.fragments():
            counts = Counter(marker.keyword for marker in fragment.markers)
            summary = ", ".join(f"{keyword}={counts[keyword]}" for keyword in sorted(counts))
            typer.echo(f"{host.id}\t{fragment.role}\t{summary or '-'}")

    raise typer.Exit(code=exit_code)


@app.command("labels")
def labels_command(
    language: Annotated[
        str | None,
        typer.Option(help="Only list labels enabled for this host language in the config."),
    ] = None,
    config: Annotated[Path, typer.Option(dir_okay=False)] = Path(DEFAULT_CONFIG_NAME),
) -> None:
    """List the label table in output order."""

    enabled: frozenset[str] | None = None
    if language is not None:
        if language not in HOST_LANGUAGES_BY_ID:
            supported = ", ".join(host.id for host in HOST_LANGUAGES)
            typer.echo(f"ERROR: --language must be one of: {supported}.")
            raise typer.Exit(code=EXIT_CONFIG)
        try:
            support = load_label_support(config)
        except ValueError as exc:
            typer.echo(f"ERROR: {exc}")
            raise typer.Exit(code=EXIT_CONFIG) from exc
        enabled = support.labels_for(language)

    for label in LABELS:
        if enabled is not None and label.id not in enabled:
            continue
        typer.echo(f"{label.id}\t{label.scope}")


def main() -> None:
    """Console script entrypoint."""

    app()


if __name__ == "__main__":
    main()
