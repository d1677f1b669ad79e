"""Published snippet model."""

from .model import Snippet, SnippetOptions

__all__ = ["Snippet", "SnippetOptions"]
