"""Error taxonomy and the mapping from exceptions to error objects.

Every failure the pipeline can report is an ``RpcFault`` tagged with one
of the codes below.  Anything else that escapes resolution, binding or
invocation is demoted to ``InternalError`` with the raised exception
kept as ``__cause__``; the cause is only disclosed in debug mode.
"""

from __future__ import annotations

import traceback
from typing import Any

from rpc_core.envelope import JsonRpcError

# ── Standard error codes (JSON-RPC 2.0 §5.1) ────────────────────────
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603

# Reserved for handlers; the core never raises it.
INTEGRITY_ERROR = -32020


# ── Faults ───────────────────────────────────────────────────────────
class RpcFault(Exception):
    """Base class for failures that map directly onto an error code.

    Handlers may raise ``RpcFault("...", code=-32050)`` to report their
    own codes; they reach the caller unchanged.
    """

    code: int = INTERNAL_ERROR
    message: str = "Internal error"

    def __init__(self, message: str | None = None, code: int | None = None) -> None:
        if message is not None:
            self.message = message
        if code is not None:
            self.code = code
        super().__init__(self.message)


class ParseError(RpcFault):
    code = PARSE_ERROR
    message = "Parse error"


class InvalidRequest(RpcFault):
    code = INVALID_REQUEST
    message = "Invalid request"


class MethodNotFound(RpcFault):
    code = METHOD_NOT_FOUND
    message = "Method not found"

    def __init__(self, method: str) -> None:
        self.method = method
        super().__init__()


class InvalidParams(RpcFault):
    code = INVALID_PARAMS
    message = "Invalid request params"

    def __init__(self, message: str | None = None, param: str | None = None) -> None:
        self.param = param
        if message is None and param is not None:
            message = f"Invalid request params: missing {param!r}"
        super().__init__(message)


class InternalError(RpcFault):
    code = INTERNAL_ERROR
    message = "Internal error"


class IntegrityError(RpcFault):
    code = INTEGRITY_ERROR
    message = "Integrity error"


# ── Mapping ──────────────────────────────────────────────────────────
def to_fault(exc: BaseException) -> RpcFault:
    """Return *exc* if it is already classified, else wrap it as internal."""
    if isinstance(exc, RpcFault):
        return exc
    fault = InternalError()
    fault.__cause__ = exc
    return fault


def describe_cause(cause: BaseException) -> dict[str, Any]:
    """Diagnostic summary of a chained exception: type, code, message, location."""
    file: str | None = None
    line: int | None = None
    if cause.__traceback__ is not None:
        frame = traceback.extract_tb(cause.__traceback__)[-1]
        file, line = frame.filename, frame.lineno
    code = getattr(cause, "code", 0)
    return {
        "type": f"{type(cause).__module__}.{type(cause).__qualname__}",
        "code": code if isinstance(code, int) else 0,
        "message": str(cause),
        "file": file,
        "line": line,
    }


def to_error(exc: BaseException, debug: bool = False) -> JsonRpcError:
    """Build the error object sent to the caller for *exc*.

    ``data`` is attached only when *debug* is on and the fault has a
    chained cause; otherwise it is left out of the envelope entirely.
    """
    fault = to_fault(exc)
    data = None
    if debug and fault.__cause__ is not None:
        data = {"cause": describe_cause(fault.__cause__)}
    return JsonRpcError(code=fault.code, message=fault.message, data=data)
