from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel, ConfigDict


SnippetOptions = Mapping[str, str]


class Snippet(BaseModel):
    """A selection that has been turned into a ray.so URL."""

    title: str
    language: str
    code: str
    encoded: str
    url: str
    path: str | None = None

    model_config = ConfigDict(extra="ignore", frozen=True)


__all__ = ["Snippet", "SnippetOptions"]
