"""Argument binding: named params → positional argument list."""

from __future__ import annotations

from typing import Any, Sequence

from rpc_core.envelope import JsonRpcRequest
from rpc_core.errors import InvalidParams
from rpc_core.registry import ParameterDescriptor


def bind(request: JsonRpcRequest, signature: Sequence[ParameterDescriptor]) -> list[Any]:
    """Return arguments in the signature's declared order.

    A single-parameter operation only sees ``params[<its name>]``; the
    rest of the mapping is ignored.  Values are passed through as-is.
    Raises ``InvalidParams`` for the first parameter that is neither
    supplied nor defaulted.
    """
    params = request.params
    if len(signature) == 1:
        only = signature[0].name
        params = {only: params[only]} if only in params else {}

    args = []
    for p in signature:
        if p.name in params:
            args.append(params[p.name])
        elif p.has_default:
            args.append(p.default)
        else:
            raise InvalidParams(param=p.name)
    return args
