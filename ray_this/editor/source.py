from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import NamedTuple, TextIO


logger = logging.getLogger("ray_this")


class TextRange(NamedTuple):
    """Half-open character offsets into a document."""
    start: int
    end: int


class EditorDocument(NamedTuple):
    """The active document together with its current selection."""
    file_name: str | None
    text: str
    selection: TextRange | None = None

    def selected_text(self) -> str:
        if self.selection is None:
            return ""
        return self.text[self.selection.start:self.selection.end]


class TextSource(ABC):
    """Supplies the document the user is working in, if any."""

    @abstractmethod
    def active_document(self) -> EditorDocument | None:
        ...


class FileTextSource(TextSource):
    """Treat a file on disk as the active document.

    The selection is the whole file, or the inclusive 1-based ``lines`` range
    when one is given.
    """

    def __init__(self, path: str | Path, lines: tuple[int, int] | None = None) -> None:
        self.path = Path(path)
        self.lines = lines

    def active_document(self) -> EditorDocument | None:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read %s: %s", self.path, exc)
            return None

        return EditorDocument(
            file_name=str(self.path),
            text=text,
            selection=self._selection(text),
        )

    def _selection(self, text: str) -> TextRange:
        if self.lines is None:
            return TextRange(0, len(text))

        first, last = self.lines
        lines = text.splitlines(keepends=True)
        start = sum(len(line) for line in lines[:max(first - 1, 0)])
        end = sum(len(line) for line in lines[:max(last, 0)])
        return TextRange(start, max(start, end))


class StreamTextSource(TextSource):
    """Read the whole stream (usually stdin) as the selected text."""

    def __init__(self, stream: TextIO, file_name: str | None = None) -> None:
        self.stream = stream
        self.file_name = file_name

    def active_document(self) -> EditorDocument | None:
        try:
            text = self.stream.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read %s: %s", self.file_name or "stream", exc)
            return None

        return EditorDocument(
            file_name=self.file_name,
            text=text,
            selection=TextRange(0, len(text)),
        )


__all__ = [
    "TextRange",
    "EditorDocument",
    "TextSource",
    "FileTextSource",
    "StreamTextSource",
]
