"""FastAPI application factory for the ray-this service."""

from __future__ import annotations

from fastapi import FastAPI

from ..config import PublishSettings
from ..mcpserver import mcp
from .route import router


def create_app(settings: PublishSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    # setup mcp
    mcp_app = mcp.http_app("/")

    app = FastAPI(
        title="Ray This API",
        version="0.1.0",
        lifespan=mcp_app.lifespan,
    )
    app.state.settings = settings or PublishSettings.from_env()
    app.include_router(router)

    # mount mcp
    app.mount("/mcp", mcp_app)

    return app


app = create_app()


__all__ = ["app", "create_app"]
