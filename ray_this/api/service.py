"""Service-layer helpers shared by the HTTP API and the MCP server."""

from __future__ import annotations

import logging
from typing import List

from fastapi import HTTPException

from ..config import PublishSettings
from ..exception_handler import EmptySelectionError
from ..formatting import CodeFormatter, PrettierFormatter
from ..language import LanguageTable
from ..orchestration import create_snippet
from .model import LanguageResponse, SnippetRequest, SnippetResponse

logger = logging.getLogger("ray_this")


def build_formatter(settings: PublishSettings) -> CodeFormatter:
    return PrettierFormatter(
        settings.prettier_command,
        parser=settings.prettier_parser,
        timeout=settings.format_timeout,
    )


def create_snippet_service(
    payload: SnippetRequest,
    settings: PublishSettings,
    table: LanguageTable,
    *,
    formatter: CodeFormatter | None,
) -> SnippetResponse:
    try:
        snippet = create_snippet(
            payload.code,
            payload.file_name,
            formatter=formatter if payload.format else None,
            table=table,
            settings=settings,
            options=payload.options,
        )
    except EmptySelectionError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return SnippetResponse.from_snippet(snippet)


def list_languages_service(table: LanguageTable) -> List[LanguageResponse]:
    return [
        LanguageResponse(value=record.value, extensions=sorted(record.extensions))
        for record in table
    ]


__all__ = ["build_formatter", "create_snippet_service", "list_languages_service"]
