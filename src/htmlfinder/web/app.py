"""FastAPI application serving the search form, results and corpus files."""

from __future__ import annotations

import asyncio
import logging

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from htmlfinder.access import AccessGuard
from htmlfinder.config import AppConfig
from htmlfinder.errors import FileSystemError, ParseError
from htmlfinder.index.search import FileSearcher
from htmlfinder.index.tree import build_tree
from htmlfinder.web.frontend import load_template, render_results_page
from htmlfinder.web.frontend import router as frontend_router

LOGGER = logging.getLogger(__name__)


def get_client_address(request: Request) -> str | None:
    """Source address of the caller, without the port."""
    return request.client.host if request.client else None


def require_allowed_address(request: Request, address: str | None = Depends(get_client_address)) -> str | None:
    guard: AccessGuard = request.app.state.guard
    if not guard.allows(address):
        LOGGER.warning("Forbidden access for: %s", address)
        raise HTTPException(status_code=403, detail="Forbidden")
    return address


def create_app(config: AppConfig) -> FastAPI:
    """Build the web application around an immutable config snapshot."""
    app = FastAPI(title="htmlfinder", version="0.1.0")
    app.state.config = config
    app.state.guard = AccessGuard(config.allowed_ranges)
    app.state.searcher = FileSearcher(config.directory)
    app.include_router(frontend_router)

    @app.get("/", response_class=HTMLResponse)
    async def search(
        request: Request,
        q: str = "",
        address: str | None = Depends(require_allowed_address),
    ) -> HTMLResponse:
        query = q.strip()
        if not query:
            return HTMLResponse(content=load_template("search.html"))

        searcher: FileSearcher = request.app.state.searcher
        try:
            result = await asyncio.to_thread(searcher.search, query)
        except (FileSystemError, ParseError) as exc:
            LOGGER.error("Search for %r from %s failed: %s", query, address, exc)
            raise HTTPException(status_code=500, detail="Error searching files") from exc

        if not result:
            raise HTTPException(status_code=404, detail="No results found")

        LOGGER.info("Query %r from %s: %d matches", query, address, len(result.matches))
        return HTMLResponse(content=render_results_page(build_tree(result.matches), query))

    app.mount(
        "/static",
        StaticFiles(directory=config.directory, check_dir=False),
        name="static",
    )
    return app
