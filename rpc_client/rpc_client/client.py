"""Thin JSON-RPC 2.0 client over HTTP.

* ``call(method, params)`` → result, or ``RpcError``

Uses ``httpx.AsyncClient`` with connection pooling and retries
connection-level failures with tenacity.  **Never** imports from
``rpc_app``.

Run directly for a quick demo against a running server::

    python -m rpc_client.client
"""

from __future__ import annotations

import logging
import uuid
from typing import Any

import httpx
from rpc_core.envelope import JsonRpcError, JsonRpcRequest
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential

log = logging.getLogger(__name__)


class RpcError(Exception):
    """Raised when the server answers with a JSON-RPC error."""

    def __init__(self, error: JsonRpcError, req_id: Any = None) -> None:
        self.error = error
        self.id = req_id
        super().__init__(f"[{error.code}] {error.message}")

    @property
    def code(self) -> int:
        return self.error.code


class RpcClient:
    """Async client that talks JSON-RPC 2.0 to ``POST <base_url>/rpc``.

    Parameters
    ----------
    base_url : str
        Server origin, e.g. ``http://127.0.0.1:8100``.
    timeout : float
        Default request timeout in seconds.
    max_retries : int
        Max connection-level attempts.
    transport : httpx.AsyncBaseTransport | None
        Optional transport, e.g. ``httpx.ASGITransport`` in tests.
    """

    def __init__(
        self,
        base_url: str = "http://127.0.0.1:8100",
        timeout: float = 30.0,
        max_retries: int = 3,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.max_retries = max_retries
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    # -- Lifecycle -----------------------------------------------------

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RpcClient":
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    # -- Internal retry helper -----------------------------------------

    def _get_retrier(self) -> AsyncRetrying:
        return AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=wait_exponential(multiplier=0.5, max=10),
            retry=retry_if_exception_type((httpx.NetworkError, httpx.TimeoutException)),
            reraise=True,
        )

    # -- Unary RPC -----------------------------------------------------

    async def send(self, payload: Any) -> dict[str, Any]:
        """POST an arbitrary payload and return the decoded envelope."""
        async for attempt in self._get_retrier():
            with attempt:
                resp = await self._client.post("/rpc", json=payload)
                resp.raise_for_status()
        return resp.json()

    async def call(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        req_id: str | int | None = None,
    ) -> Any:
        """Send a request and return its result.

        Raises ``RpcError`` if the server returns a JSON-RPC error.
        """
        req = JsonRpcRequest(
            method=method,
            params=params or {},
            id=req_id if req_id is not None else uuid.uuid4().hex,
            has_id=True,
        )
        log.debug("rpc → %s(id=%s)", method, req.id)

        data = await self.send(req.to_dict())
        if data.get("error") is not None:
            raise RpcError(JsonRpcError(**data["error"]), data.get("id"))
        return data.get("result")


# ── Demo entrypoint ──────────────────────────────────────────────────


async def _demo() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    async with RpcClient() as client:
        print("── echo ──")
        print(f"  result: {await client.call('echo', {'payload': {'msg': 'hello'}})}")

        print("── add ──")
        print(f"  result: {await client.call('add', {'a': 17, 'b': 25})}")

        print("── scale (default factor) ──")
        print(f"  result: {await client.call('scale', {'value': 4})}")

        print("── missing method ──")
        try:
            await client.call("nope")
        except RpcError as exc:
            print(f"  error: {exc}")


if __name__ == "__main__":
    import anyio

    anyio.run(_demo)
