"""Label support configuration model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class LabelSupport(BaseModel):
    """Labels enabled per host language id.

    Values are sets: the order labels are listed in the configuration file
    never influences generated output.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    languages: dict[str, frozenset[str]] = Field(default_factory=dict)

    def labels_for(self, language_id: str) -> frozenset[str]:
        return self.languages.get(language_id, frozenset())

    def has_labels(self, language_id: str) -> bool:
        return bool(self.labels_for(language_id))
