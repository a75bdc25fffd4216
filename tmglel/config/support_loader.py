"""Loading of the label support configuration file."""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from tmglel.config.models import LabelSupport

DEFAULT_CONFIG_NAME = "TMGLEL.toml"
_YAML_SUFFIXES = {".yaml", ".yml"}


def load_label_support(path: Path | None = None) -> LabelSupport:
    """Load and validate the host language -> labels mapping.

    TOML is the default format; files ending in ``.yaml``/``.yml`` are read as
    YAML. The top level must map host language ids to lists of label ids.
    """

    config_path = path or Path(DEFAULT_CONFIG_NAME)

    try:
        text = config_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ValueError(f"Config file not found: {config_path}") from exc
    except OSError as exc:
        raise ValueError(f"Cannot read config file: {config_path}") from exc

    if config_path.suffix.lower() in _YAML_SUFFIXES:
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in config file: {config_path}") from exc
        if raw is None:
            raw = {}
    else:
        try:
            raw = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ValueError(f"Invalid TOML in config file: {config_path}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"Config file must contain a mapping: {config_path}")

    try:
        return LabelSupport.model_validate({"languages": raw})
    except ValidationError as exc:
        raise ValueError(f"Invalid config schema: {config_path}") from exc
