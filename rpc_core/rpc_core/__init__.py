"""rpc_core — single-request JSON-RPC 2.0 dispatch core."""

from rpc_core.binder import bind
from rpc_core.dispatcher import Dispatcher
from rpc_core.envelope import JsonRpcError, JsonRpcRequest, JsonRpcResponse
from rpc_core.errors import (
    INTEGRITY_ERROR,
    INTERNAL_ERROR,
    INVALID_PARAMS,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    PARSE_ERROR,
    IntegrityError,
    InternalError,
    InvalidParams,
    InvalidRequest,
    MethodNotFound,
    ParseError,
    RpcFault,
)
from rpc_core.registry import HandlerCapabilities, ParameterDescriptor, Registry
from rpc_core.resolver import resolve

__all__ = [
    "Dispatcher",
    "Registry",
    "HandlerCapabilities",
    "ParameterDescriptor",
    "resolve",
    "bind",
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcError",
    "RpcFault",
    "ParseError",
    "InvalidRequest",
    "MethodNotFound",
    "InvalidParams",
    "InternalError",
    "IntegrityError",
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
    "INTEGRITY_ERROR",
]
