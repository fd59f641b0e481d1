"""Application compartment — Starlette ASGI server.

Single ``/rpc`` endpoint that hands the raw body to the dispatch core
and always answers with one JSON-RPC 2.0 envelope.

Run directly::

    python -m rpc_app.server
"""

from __future__ import annotations

import argparse
import logging

from rpc_core.dispatcher import Dispatcher
from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from rpc_app.config import Settings
from rpc_app.handlers import registry

log = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
}


class RpcResponse(JSONResponse):
    media_type = "application/json; charset=utf-8"


# ── App factory ──────────────────────────────────────────────────────


def create_app(dispatcher: Dispatcher | None = None) -> Starlette:
    dispatcher = dispatcher or Dispatcher(registry)

    async def rpc_endpoint(request: Request) -> RpcResponse:
        """Handle a JSON-RPC 2.0 POST to ``/rpc``."""
        body = await request.body()
        envelope = await run_in_threadpool(dispatcher.handle_body, body)
        if "error" in envelope:
            log.info("rpc ✗ id=%s code=%s", envelope.get("id"), envelope["error"]["code"])
        else:
            log.info("rpc ✓ id=%s", envelope.get("id"))
        return RpcResponse(envelope, headers=CORS_HEADERS)

    async def preflight(request: Request) -> Response:
        return Response(status_code=204, headers=CORS_HEADERS)

    return Starlette(
        debug=False,
        routes=[
            Route("/rpc", rpc_endpoint, methods=["POST"]),
            Route("/rpc", preflight, methods=["OPTIONS"]),
        ],
    )


app = create_app()


# ── Runnable entrypoint ──────────────────────────────────────────────


def main() -> None:
    import uvicorn

    settings = Settings.from_env()
    parser = argparse.ArgumentParser(description="JSON-RPC 2.0 server")
    parser.add_argument("--host", type=str, default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    parser.add_argument(
        "--log-level", type=str, default=settings.log_level, help="Logging level"
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    log.info("serving %d operations: %s", len(registry.methods), ", ".join(registry.methods))
    uvicorn.run(
        "rpc_app.server:app",
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
