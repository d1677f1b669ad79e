"""FastMCP server exposing snippet URL building as an MCP tool."""

from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import HTTPException
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from ..api.model import SnippetRequest
from ..api.service import build_formatter, create_snippet_service
from ..config import PublishSettings
from ..formatting import CodeFormatter
from ..language import LanguageTable, load_language_table

logger = logging.getLogger("ray_this")


class ServiceContext:
    """Lazy dependency container for MCP tool handlers."""

    def __init__(self) -> None:
        self._settings: PublishSettings | None = None
        self._table: LanguageTable | None = None
        self._formatter: CodeFormatter | None = None

    @property
    def settings(self) -> PublishSettings:
        if self._settings is None:
            self._settings = PublishSettings.from_env()
        return self._settings

    def table(self) -> LanguageTable:
        if self._table is None:
            self._table = load_language_table(self.settings.filetypes_path)
        return self._table

    def formatter(self) -> CodeFormatter:
        if self._formatter is None:
            self._formatter = build_formatter(self.settings)
        return self._formatter


def _handle_http_exception(exc: HTTPException, *, default_message: str) -> ToolError:
    detail = exc.detail if isinstance(exc.detail, str) else None
    message = detail or default_message
    return ToolError(message)


def build_snippet_url_tool(
    services: ServiceContext,
    code: str,
    file_name: str | None = None,
    title: str | None = None,
    colors: str | None = None,
    padding: str | None = None,
) -> Dict[str, Any]:
    options = {
        key: value
        for key, value in (("title", title), ("colors", colors), ("padding", padding))
        if value
    }
    payload = SnippetRequest(code=code, file_name=file_name, options=options)

    try:
        response = create_snippet_service(
            payload,
            services.settings,
            services.table(),
            formatter=services.formatter(),
        )
    except HTTPException as exc:
        raise _handle_http_exception(exc, default_message="Snippet URL could not be built")

    return response.model_dump()


def create_server() -> FastMCP:
    """Create a FastMCP server wired to the snippet services."""

    services = ServiceContext()
    server = FastMCP("Ray This MCP Server")

    @server.tool(
        name="build_snippet_url",
        description=(
            "Build a ray.so URL that renders `code` as a shareable screenshot. Pass `file_name`"
            " so the language can be detected from its extension; `title`, `colors`"
            " (candy, breeze, midnight, sunset) and `padding` (16, 32, 64, 128) are optional."
        ),
        tags={"snippets", "ray.so"},
    )
    def build_snippet_url(
        code: str,
        file_name: str | None = None,
        title: str | None = None,
        colors: str | None = None,
        padding: str | None = None,
    ) -> Dict[str, Any]:
        """Return the ray.so URL and metadata for a code snippet."""
        return build_snippet_url_tool(
            services,
            code,
            file_name=file_name,
            title=title,
            colors=colors,
            padding=padding,
        )

    return server


mcp = create_server()

__all__ = ["mcp", "create_server", "ServiceContext", "build_snippet_url_tool"]
