"""FastAPI application factory.

The runner is injected rather than created at import time, so the app can
be built around a fake in tests and the stdio server is only spawned when
the application actually starts.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from mcpbridge import __version__
from mcpbridge.server import routes

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from mcpbridge.protocols.provider import ToolRunner

logger = logging.getLogger(__name__)


def create_app(runner: ToolRunner) -> FastAPI:
    """Build the API around *runner*; startup and shutdown drive its lifecycle."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await runner.start()
        logger.info("MCP bridge started")
        try:
            yield
        finally:
            await runner.close()
            logger.info("MCP bridge stopped")

    app = FastAPI(title="mcpbridge", version=__version__, lifespan=lifespan)
    app.state.runner = runner
    app.include_router(routes.router)
    return app
