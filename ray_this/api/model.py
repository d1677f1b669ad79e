"""Pydantic models for the public API surface."""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from ..snippet import Snippet


class SnippetRequest(BaseModel):
    code: str = Field(..., description="Selected source text to publish")
    file_name: str | None = Field(
        None, description="Name or path of the file the selection came from"
    )
    options: Dict[str, str] = Field(
        default_factory=dict,
        description="Extra ray.so options (colors, background, darkMode, padding, title)",
    )
    format: bool = Field(True, description="Run the formatter before encoding")


class SnippetResponse(BaseModel):
    url: str
    title: str
    language: str
    encoded: str

    @classmethod
    def from_snippet(cls, snippet: Snippet) -> "SnippetResponse":
        return cls(
            url=snippet.url,
            title=snippet.title,
            language=snippet.language,
            encoded=snippet.encoded,
        )


class LanguageResponse(BaseModel):
    value: str
    extensions: List[str]


__all__ = ["SnippetRequest", "SnippetResponse", "LanguageResponse"]
