"""Orchestration for the publish-selected-snippet command."""

from .publish import SnippetPublisher, create_snippet, derive_title, publish_selected_snippet

__all__ = ["SnippetPublisher", "create_snippet", "derive_title", "publish_selected_snippet"]
