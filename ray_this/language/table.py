"""Map file names to the language identifiers ray.so highlights."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Iterable, Iterator, List, NamedTuple, Sequence

from ..exception_handler import LanguageTableError


logger = logging.getLogger("ray_this")

AUTO_LANGUAGE = "auto"


class LanguageRecord(NamedTuple):
    """One row of the file type table."""
    value: str
    extensions: frozenset[str]


class LanguageTable:
    """Ordered, read-only file type table.

    Lookups scan the records in table order and the first record claiming an
    extension wins, so tables may list the same extension more than once
    (``h`` for both C and C++, for example).
    """

    def __init__(self, records: Iterable[LanguageRecord]) -> None:
        self._records: tuple[LanguageRecord, ...] = tuple(records)

    @classmethod
    def from_entries(cls, entries: Any) -> "LanguageTable":
        """Build a table from decoded JSON ``[{value, extensions}, ...]``."""
        if not isinstance(entries, list):
            raise LanguageTableError("File type table must be a JSON array")

        records: List[LanguageRecord] = []
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise LanguageTableError(f"Entry {index} is not an object")
            value = entry.get("value")
            extensions = entry.get("extensions")
            if not isinstance(value, str) or not value:
                raise LanguageTableError(f"Entry {index} has no 'value'")
            if not isinstance(extensions, list) or not all(
                isinstance(ext, str) for ext in extensions
            ):
                raise LanguageTableError(
                    f"Entry {index} ({value}) has invalid 'extensions'"
                )
            records.append(
                LanguageRecord(
                    value=value,
                    extensions=frozenset(ext.lower() for ext in extensions),
                )
            )
        return cls(records)

    @classmethod
    def from_file(cls, path: str | Path) -> "LanguageTable":
        try:
            with open(path, "r", encoding="utf-8") as f:
                entries = json.load(f)
        except (OSError, ValueError) as exc:
            raise LanguageTableError(f"Failed to load file types from {path}: {exc}") from exc
        table = cls.from_entries(entries)
        logger.debug("Loaded %d file types from %s", len(table), path)
        return table

    @property
    def records(self) -> Sequence[LanguageRecord]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[LanguageRecord]:
        return iter(self._records)

    def resolve(self, file_path: str | None) -> str:
        """Return the language identifier for ``file_path``.

        The extension is whatever follows the last ``.`` in the path,
        lowercased. A name without a dot is matched as a whole, which for
        names such as ``Makefile`` falls through to ``"auto"``.
        """
        if not file_path:
            return AUTO_LANGUAGE

        extension = file_path.split(".")[-1].lower()
        for record in self._records:
            if extension in record.extensions:
                return record.value
        return AUTO_LANGUAGE


@lru_cache(maxsize=1)
def _bundled_table() -> LanguageTable:
    source = resources.files("ray_this").joinpath("filetypes.json")
    try:
        entries = json.loads(source.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise LanguageTableError(f"Failed to load bundled file types: {exc}") from exc
    return LanguageTable.from_entries(entries)


def load_language_table(path: str | Path | None = None) -> LanguageTable:
    """Load a file type table, defaulting to the bundled one.

    The bundled table is read once per process.
    """
    if path is None:
        return _bundled_table()
    return LanguageTable.from_file(path)


def resolve_language(file_path: str | None, table: LanguageTable | None = None) -> str:
    """Resolve ``file_path`` against ``table`` (the bundled table by default)."""
    if table is None:
        table = load_language_table()
    return table.resolve(file_path)


__all__ = [
    "AUTO_LANGUAGE",
    "LanguageRecord",
    "LanguageTable",
    "load_language_table",
    "resolve_language",
]
