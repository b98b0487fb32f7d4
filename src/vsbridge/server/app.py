"""FastAPI application serving the JSON-RPC endpoint."""

import asyncio
import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from vsbridge import __version__
from vsbridge.server.routes import jsonrpc

if TYPE_CHECKING:
    from vsbridge.rpc.engine import JsonRpcEngine

logger = logging.getLogger(__name__)


def create_app(
    engine: "JsonRpcEngine",
    max_concurrent_requests: int | None = None,
) -> FastAPI:
    """Create the FastAPI application.

    Only ``POST /jsonrpc`` is routed; every other path or method gets a 404.

    Args:
        engine: Dispatcher handling request bodies.
        max_concurrent_requests: Admission limit on in-flight requests.
            None leaves concurrency unbounded.
    """
    app = FastAPI(
        title="vsbridge",
        description="JSON-RPC bridge to the IDE code model",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.engine = engine
    app.state.limiter = (
        asyncio.Semaphore(max_concurrent_requests) if max_concurrent_requests else None
    )

    app.include_router(jsonrpc.router, tags=["jsonrpc"])

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> Response:
        # Wrong method on a known path is reported like an unknown path
        status_code = 404 if exc.status_code == 405 else exc.status_code
        return Response(status_code=status_code)

    return app
