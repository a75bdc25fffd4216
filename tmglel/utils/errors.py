"""Custom exceptions for grammar generation."""

from __future__ import annotations


class TemplateError(Exception):
    """Raised when a host language template cannot be tokenized or expanded."""

    def __init__(self, message: str, *, language: str, role: str | None = None) -> None:
        super().__init__(message)
        self.language = language
        self.role = role


class MalformedTemplateError(TemplateError):
    """Raised when a marker sentinel is followed by an unknown keyword."""

    def __init__(
        self,
        message: str,
        *,
        language: str,
        role: str | None = None,
        position: int | None = None,
        snippet: str = "",
    ) -> None:
        super().__init__(message, language=language, role=role)
        self.position = position
        self.snippet = snippet


class NestedDryError(TemplateError):
    """Raised when a dry fragment references another dry fragment."""


class GrammarSerializationError(Exception):
    """Raised when generated TOML text cannot be converted to JSON."""

    def __init__(self, message: str, *, document: str) -> None:
        super().__init__(message)
        self.document = document
