from __future__ import annotations

import pytest

from tmglel.grammar.models import HostLanguage, Label
from tmglel.templates.expander import expand_label, label_value, render_label
from tmglel.templates.markers import DRY_ROLES, Marker
from tmglel.templates.registry import DryBlockRegistry, build_registry
from tmglel.templates.tokenizer import tokenize, tokenize_dry
from tmglel.utils.errors import NestedDryError

CSS = Label("css", "source.css", "css|css.erb")
GO = Label("go", "source.go", "go|golang")
PHP = Label("php", "source.php", "php|phtml", patterns="\n  - include: text.html.basic")


def _host(content: str, dry_1: str = "", dry_2: str = "") -> HostLanguage:
    return HostLanguage(
        id="test",
        name="Test",
        scope="source.test",
        prelude="",
        content=content,
        dry_1=dry_1,
        dry_2=dry_2,
    )


def test_expand_label_values() -> None:
    registry = build_registry(_host("X:@_ID,@_SCOPE;"))

    assert render_label(registry, CSS) == "X:css,source.css;"


def test_expand_list_and_patterns() -> None:
    registry = build_registry(_host("(?i:@_LIST)|@_PATTERNS|"))

    assert render_label(registry, PHP) == "(?i:php|phtml)|\n  - include: text.html.basic|"
    assert render_label(registry, CSS) == "(?i:css|css.erb)||"


def test_expand_dry_fragment_in_place() -> None:
    registry = build_registry(_host("@_DRY_1!", dry_1="[@_ID]"))

    assert render_label(registry, GO) == "[go]!"


def test_expand_dry_2_fragment() -> None:
    registry = build_registry(_host("<@_DRY_2|@_DRY_1>", dry_1="@_ID", dry_2="@_SCOPE;"))

    assert render_label(registry, GO) == "<source.go;|go>"


def test_expand_label_appends_to_buffer() -> None:
    registry = build_registry(_host("@_ID\n"))
    buffer = ["header\n"]

    expand_label(registry, CSS, buffer)
    expand_label(registry, GO, buffer)

    assert "".join(buffer) == "header\ncss\ngo\n"


def test_nested_dry_is_rejected_when_registry_is_built() -> None:
    with pytest.raises(NestedDryError) as exc_info:
        build_registry(_host("a @_DRY_1 b", dry_1="@_DRY_2"))

    assert exc_info.value.language == "Test"
    assert exc_info.value.role == "dry-1"


def test_self_referencing_dry_is_rejected() -> None:
    with pytest.raises(NestedDryError):
        build_registry(_host("@_DRY_2", dry_2="x @_DRY_2 y"))


def test_nested_dry_is_rejected_during_expansion() -> None:
    registry = DryBlockRegistry(
        language="Test",
        content=tokenize("@_DRY_1", language="Test"),
        dry_1=tokenize("@_DRY_2", language="Test", role="dry-1"),  # type: ignore[arg-type]
        dry_2=tokenize_dry("", language="Test", role="dry-2"),
    )

    with pytest.raises(NestedDryError, match="inner dry for Test"):
        render_label(registry, CSS)


def test_label_value_rejects_dry_markers() -> None:
    with pytest.raises(ValueError, match="no label value"):
        label_value(Marker.DRY_1, CSS)


def test_registry_dry_lookup() -> None:
    registry = build_registry(_host("", dry_1="one", dry_2="two"))

    assert registry.dry(Marker.DRY_1).tail == "one"
    assert registry.dry(Marker.DRY_2).tail == "two"
    with pytest.raises(ValueError, match="Not a dry marker"):
        registry.dry(Marker.ID)


def test_registry_dry_fragments_carry_marker_roles() -> None:
    registry = build_registry(_host("@_DRY_1@_DRY_2", dry_1="a", dry_2="b"))

    assert registry.dry(Marker.DRY_1).role == DRY_ROLES[Marker.DRY_1] == "dry-1"
    assert registry.dry(Marker.DRY_2).role == DRY_ROLES[Marker.DRY_2] == "dry-2"
    assert [fragment.role for fragment in registry.fragments()] == ["content", "dry-1", "dry-2"]
