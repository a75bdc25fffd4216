"""Generation output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GrammarDocument(BaseModel):
    """Injection grammar generated for one host language."""

    model_config = ConfigDict(extra="forbid")

    language_id: str
    scope_name: str
    labels: list[str] = Field(default_factory=list)
    toml_text: str
    json_text: str


class ManifestDocument(BaseModel):
    """Extension manifest covering every processed host language."""

    model_config = ConfigDict(extra="forbid")

    languages: list[str] = Field(default_factory=list)
    toml_text: str
    json_text: str


class GenerationResult(BaseModel):
    """Outcome of one full generation run."""

    model_config = ConfigDict(extra="forbid")

    grammars: list[GrammarDocument] = Field(default_factory=list)
    manifest: ManifestDocument
    skipped_languages: list[str] = Field(default_factory=list)
