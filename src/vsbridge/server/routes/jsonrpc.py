"""JSON-RPC endpoint."""

import logging

from fastapi import APIRouter, Request, Response

router = APIRouter()
logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"


@router.post("/jsonrpc")
async def jsonrpc_endpoint(request: Request) -> Response:
    """Handle one JSON-RPC request.

    Every JSON-RPC outcome, including protocol errors, is an HTTP 200 with a
    JSON-RPC response body.
    """
    engine = request.app.state.engine
    limiter = request.app.state.limiter

    body = await request.body()
    logger.debug(f"Received JSON-RPC request: {body!r}")

    if limiter is None:
        response = await engine.process(body)
    else:
        async with limiter:
            response = await engine.process(body)

    payload = response.to_bytes()
    logger.debug(f"Sent JSON-RPC response: {payload!r}")
    return Response(content=payload, media_type=JSON_MEDIA_TYPE)
