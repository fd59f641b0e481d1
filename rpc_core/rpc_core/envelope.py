"""JSON-RPC 2.0 envelope models.

Pure data — no I/O, no dispatch logic.  The core builds these per
request and throws them away once the response dict is produced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

JSONRPC_VERSION = "2.0"

# Only these top-level keys are accepted on an incoming request.
ENVELOPE_KEYS = frozenset({"jsonrpc", "id", "method", "params"})

# string | number | null
RequestId = str | int | float | None


# ── Models ───────────────────────────────────────────────────────────
@dataclass(slots=True)
class JsonRpcError:
    """JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.data is not None:
            d["data"] = self.data
        return d


@dataclass(slots=True)
class JsonRpcRequest:
    """A resolved inbound request.

    ``has_id`` records whether the ``id`` key was present at all, so an
    explicit ``"id": null`` is still echoed back while a missing key is not.
    """

    method: str
    params: dict[str, Any] = field(default_factory=dict)
    id: RequestId = None
    has_id: bool = False
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"jsonrpc": self.jsonrpc, "method": self.method}
        if self.has_id:
            d["id"] = self.id
        if self.params:
            d["params"] = self.params
        return d


@dataclass(slots=True)
class JsonRpcResponse:
    """Outbound JSON-RPC 2.0 response."""

    result: Any = None
    error: JsonRpcError | None = None
    id: RequestId = None
    has_id: bool = False
    jsonrpc: str = JSONRPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"jsonrpc": self.jsonrpc}
        if self.has_id:
            d["id"] = self.id
        if self.error is not None:
            d["error"] = self.error.to_dict()
        else:
            d["result"] = self.result
        return d

    # -- Factories -----------------------------------------------------
    @classmethod
    def success(
        cls, result: Any, req_id: RequestId = None, has_id: bool = False
    ) -> "JsonRpcResponse":
        return cls(result=result, id=req_id, has_id=has_id)

    @classmethod
    def fail(
        cls, error: JsonRpcError, req_id: RequestId = None, has_id: bool = False
    ) -> "JsonRpcResponse":
        return cls(error=error, id=req_id, has_id=has_id)
