"""Single-request dispatch pipeline.

resolve → bind → invoke → envelope.  Each stage either hands its output
to the next or raises; the one ``except`` boundary in ``handle`` turns
whatever was raised into exactly one error envelope.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from rpc_core.binder import bind
from rpc_core.config import debug_enabled
from rpc_core.envelope import JsonRpcResponse
from rpc_core.errors import ParseError, RpcFault, to_error
from rpc_core.registry import HandlerCapabilities
from rpc_core.resolver import request_id, resolve

log = logging.getLogger(__name__)


class Dispatcher:
    """Runs one decoded request against *handler* and returns the response dict.

    Parameters
    ----------
    handler : HandlerCapabilities
        Usually a ``Registry``.
    debug : bool | Callable[[], bool] | None
        Whether error ``data`` may be attached.  A callable is consulted
        on every error; ``None`` reads the ``ENVIRONMENT`` setting.
    """

    def __init__(
        self,
        handler: HandlerCapabilities,
        debug: bool | Callable[[], bool] | None = None,
    ) -> None:
        self.handler = handler
        self._debug = debug_enabled if debug is None else debug

    @property
    def debug(self) -> bool:
        return bool(self._debug() if callable(self._debug) else self._debug)

    # -- Pipeline ------------------------------------------------------
    def handle(self, payload: Any) -> dict[str, Any]:
        """Resolve, bind and invoke; always returns one envelope."""
        req_id, has_id = request_id(payload)
        try:
            request = resolve(payload, self.handler)
            args = bind(request, self.handler.signature(request.method))
            log.debug("invoke %s(id=%s) with %d args", request.method, req_id, len(args))
            result = self.handler.invoke(request.method, args)
            # the envelope must render as strict JSON (no NaN/Infinity)
            json.dumps(result, allow_nan=False)
        except RpcFault as exc:
            log.debug("rpc fault %s: %s", exc.code, exc.message)
            return self._fail(exc, req_id, has_id)
        except Exception as exc:
            log.exception("unhandled error while dispatching id=%s", req_id)
            return self._fail(exc, req_id, has_id)
        return JsonRpcResponse.success(result, req_id, has_id).to_dict()

    def handle_body(self, body: bytes | str) -> dict[str, Any]:
        """Decode a raw request body, then ``handle`` it."""
        try:
            payload = json.loads(body)
        except (ValueError, RecursionError) as exc:
            fault = ParseError()
            fault.__cause__ = exc
            return self._fail(fault, None, False)
        return self.handle(payload)

    def _fail(self, exc: BaseException, req_id: Any, has_id: bool) -> dict[str, Any]:
        error = to_error(exc, debug=self.debug)
        return JsonRpcResponse.fail(error, req_id, has_id).to_dict()
