"""Collaborators standing in for the editor host."""

from .launcher import NullOpener, UrlOpener, WebBrowserOpener
from .presenter import ConsolePresenter, Presenter
from .source import EditorDocument, FileTextSource, StreamTextSource, TextRange, TextSource

__all__ = [
    "NullOpener",
    "UrlOpener",
    "WebBrowserOpener",
    "ConsolePresenter",
    "Presenter",
    "EditorDocument",
    "FileTextSource",
    "StreamTextSource",
    "TextRange",
    "TextSource",
]
