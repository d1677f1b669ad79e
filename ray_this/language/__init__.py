"""File type table and language resolution."""

from .table import (
    AUTO_LANGUAGE,
    LanguageRecord,
    LanguageTable,
    load_language_table,
    resolve_language,
)

__all__ = [
    "AUTO_LANGUAGE",
    "LanguageRecord",
    "LanguageTable",
    "load_language_table",
    "resolve_language",
]
