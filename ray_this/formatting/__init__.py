"""Snippet formatters and the unformatted fallback."""

from .formatter import PRETTIER_STYLE, CodeFormatter, PrettierFormatter, format_snippet

__all__ = ["PRETTIER_STYLE", "CodeFormatter", "PrettierFormatter", "format_snippet"]
