from __future__ import annotations

from pathlib import Path

import pytest

from tmglel.config.support_loader import load_label_support


def test_load_toml_config(tmp_path: Path) -> None:
    path = tmp_path / "TMGLEL.toml"
    path.write_text(
        """
javascript = ['css', 'html', 'css']
rust = ['sql']
""",
        encoding="utf-8",
    )

    support = load_label_support(path)

    assert support.labels_for("javascript") == frozenset({"css", "html"})
    assert support.labels_for("rust") == frozenset({"sql"})
    assert support.labels_for("yaml") == frozenset()
    assert support.has_labels("rust")
    assert not support.has_labels("yaml")


def test_load_yaml_config(tmp_path: Path) -> None:
    path = tmp_path / "tmglel.yaml"
    path.write_text(
        """
toml:
  - json
  - sql
yaml: []
""",
        encoding="utf-8",
    )

    support = load_label_support(path)

    assert support.labels_for("toml") == frozenset({"json", "sql"})
    assert not support.has_labels("yaml")


def test_load_empty_yaml_config(tmp_path: Path) -> None:
    path = tmp_path / "tmglel.yml"
    path.write_text("", encoding="utf-8")

    assert load_label_support(path).languages == {}


def test_load_default_path_from_working_directory(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    (tmp_path / "TMGLEL.toml").write_text("rhai = ['html']\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert load_label_support().labels_for("rhai") == frozenset({"html"})


def test_load_raises_for_missing_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Config file not found"):
        load_label_support(tmp_path / "missing.toml")


def test_load_raises_for_invalid_toml(tmp_path: Path) -> None:
    path = tmp_path / "TMGLEL.toml"
    path.write_text("javascript = ['css'\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid TOML in config file"):
        load_label_support(path)


def test_load_raises_for_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "tmglel.yaml"
    path.write_text("javascript: [css\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid YAML in config file"):
        load_label_support(path)


def test_load_raises_when_top_level_is_not_mapping(tmp_path: Path) -> None:
    path = tmp_path / "tmglel.yaml"
    path.write_text("- css\n- html\n", encoding="utf-8")

    with pytest.raises(ValueError, match="must contain a mapping"):
        load_label_support(path)


def test_load_raises_for_invalid_schema(tmp_path: Path) -> None:
    path = tmp_path / "TMGLEL.toml"
    path.write_text("javascript = 'css'\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Invalid config schema"):
        load_label_support(path)
