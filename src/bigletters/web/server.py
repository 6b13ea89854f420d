"""FastAPI HTTP server for Big Letters.

Serves the static letter pages and the grid API:

    GET  /            -> home page
    GET  /a           -> page A with the interactive grid
    GET  /b, /c       -> pages B and C
    GET  /api/grid    -> {"cells": [255, 255, ...]}
    POST /api/cell    <- {"idx": 17}

Bodies that fail validation on ``/api/cell`` get FastAPI's default 422
response. Indexes past the end of the grid are accepted and ignored.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI, Response
from fastapi.responses import HTMLResponse

from bigletters import __version__
from bigletters.config.settings import load_settings
from bigletters.domain.models import CellUpdate, Grid
from bigletters.grid.store import GridStore
from bigletters.utils.logging import setup_logging
from bigletters.web.pages import HOME_PAGE, PAGE_A, PAGE_B, PAGE_C

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------

def create_app(grid: GridStore | None = None) -> FastAPI:
    """Create the Big Letters application.

    Args:
        grid: Shared grid store. A fresh all-bright grid is created when
              omitted; pass one in to share or inspect it (tests).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store: GridStore = app.state.grid
        logger.info("Big Letters server started (%dx%d grid)", store.size, store.size)
        yield
        logger.info("Big Letters server stopped")

    app = FastAPI(
        title="Big Letters",
        description="Static letter pages and a shared brightness grid",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.grid = grid if grid is not None else GridStore()

    # -------------------------------------------------------------------
    # Pages
    # -------------------------------------------------------------------

    @app.get("/", response_class=HTMLResponse)
    async def index() -> str:
        return HOME_PAGE

    @app.get("/a", response_class=HTMLResponse)
    async def page_a() -> str:
        return PAGE_A

    @app.get("/b", response_class=HTMLResponse)
    async def page_b() -> str:
        return PAGE_B

    @app.get("/c", response_class=HTMLResponse)
    async def page_c() -> str:
        return PAGE_C

    # -------------------------------------------------------------------
    # Grid API
    # -------------------------------------------------------------------

    @app.get("/api/grid")
    async def get_grid() -> Grid:
        store: GridStore = app.state.grid
        return store.snapshot()

    @app.post("/api/cell")
    async def update_cell(request: CellUpdate) -> Response:
        store: GridStore = app.state.grid
        store.darken(request.idx)
        return Response(status_code=200)

    return app


# ---------------------------------------------------------------------------
# Standalone entry point
# ---------------------------------------------------------------------------

def main(config_path: Path | str | None = None) -> None:
    """Run the Big Letters server with host and port from the settings."""
    settings = load_settings(config_path)
    setup_logging(settings.logging)
    uvicorn.run(create_app(), host=settings.server.host, port=settings.server.port)


if __name__ == "__main__":
    main()
