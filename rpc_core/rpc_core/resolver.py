"""Request resolution: decoded payload → ``JsonRpcRequest``.

Shape is checked before the method lookup so a malformed envelope is
always reported as ``InvalidRequest``, never as ``MethodNotFound``.
"""

from __future__ import annotations

from typing import Any

from rpc_core.envelope import ENVELOPE_KEYS, JSONRPC_VERSION, JsonRpcRequest, RequestId
from rpc_core.errors import InvalidParams, InvalidRequest, MethodNotFound
from rpc_core.registry import HandlerCapabilities


def _is_valid_id(value: Any) -> bool:
    # bool is an int subclass but not a JSON number
    return value is None or (
        isinstance(value, (str, int, float)) and not isinstance(value, bool)
    )


def request_id(payload: Any) -> tuple[RequestId, bool]:
    """Best-effort ``(id, present)`` lookup for building an error envelope."""
    if isinstance(payload, dict) and "id" in payload and _is_valid_id(payload["id"]):
        return payload["id"], True
    return None, False


def check_envelope(payload: Any) -> None:
    """Validate the generic request shape; raises ``InvalidRequest``."""
    if not payload or not isinstance(payload, dict):
        raise InvalidRequest()
    if not set(payload) <= ENVELOPE_KEYS:
        raise InvalidRequest()
    if payload.get("jsonrpc") != JSONRPC_VERSION:
        raise InvalidRequest()
    method = payload.get("method")
    if not isinstance(method, str) or not method:
        raise InvalidRequest()
    if "id" in payload and not _is_valid_id(payload["id"]):
        raise InvalidRequest()


def resolve(payload: Any, handler: HandlerCapabilities) -> JsonRpcRequest:
    """Turn a decoded payload into a request the binder can work with.

    Raises ``InvalidRequest``, ``MethodNotFound`` or ``InvalidParams``.
    """
    check_envelope(payload)
    method = payload["method"]
    if not handler.has_operation(method):
        raise MethodNotFound(method)

    params = payload.get("params") or {}
    if not isinstance(params, dict):
        raise InvalidParams("Invalid request params: expected an object")

    req_id, has_id = request_id(payload)
    return JsonRpcRequest(method=method, params=params, id=req_id, has_id=has_id)
