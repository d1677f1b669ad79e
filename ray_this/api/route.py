"""FastAPI routes for building snippet URLs."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends, Request, status
from fastapi.concurrency import run_in_threadpool

from ..config import PublishSettings
from ..formatting import CodeFormatter
from ..language import LanguageTable, load_language_table
from .model import LanguageResponse, SnippetRequest, SnippetResponse
from .service import build_formatter, create_snippet_service, list_languages_service


def get_settings(request: Request) -> PublishSettings:
    settings = getattr(request.app.state, "settings", None)
    if not isinstance(settings, PublishSettings):
        raise RuntimeError("API settings have not been initialised")
    return settings


def get_language_table(
    request: Request,
    settings: PublishSettings = Depends(get_settings),
) -> LanguageTable:
    table = getattr(request.app.state, "language_table", None)
    if table is None:
        table = load_language_table(settings.filetypes_path)
        request.app.state.language_table = table
    return table


def get_formatter(
    request: Request,
    settings: PublishSettings = Depends(get_settings),
) -> CodeFormatter:
    formatter = getattr(request.app.state, "formatter", None)
    if formatter is None:
        formatter = build_formatter(settings)
        request.app.state.formatter = formatter
    return formatter


router = APIRouter()


@router.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}


@router.post("/snippets", response_model=SnippetResponse, status_code=status.HTTP_201_CREATED)
async def create_snippet(
    payload: SnippetRequest,
    settings: PublishSettings = Depends(get_settings),
    table: LanguageTable = Depends(get_language_table),
    formatter: CodeFormatter = Depends(get_formatter),
) -> SnippetResponse:
    # prettier runs as a blocking subprocess
    return await run_in_threadpool(
        create_snippet_service, payload, settings, table, formatter=formatter
    )


@router.get("/languages", response_model=List[LanguageResponse])
async def list_languages(
    table: LanguageTable = Depends(get_language_table),
) -> List[LanguageResponse]:
    return list_languages_service(table)


__all__ = ["router"]
