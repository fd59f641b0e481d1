"""Operation registry — the handler's callable surface.

Operations register themselves via the ``@registry.method`` decorator
or by exposing the public methods of a handler object.  Each operation's
parameter list is captured once, at registration time, as a tuple of
``ParameterDescriptor``; the binder only ever reads that table.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Protocol, Sequence

from rpc_core.errors import MethodNotFound

log = logging.getLogger(__name__)

# Type alias for an operation: plain positional callable
OperationFn = Callable[..., Any]

_UNBINDABLE = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


@dataclass(frozen=True, slots=True)
class ParameterDescriptor:
    """One declared parameter of an operation."""

    name: str
    has_default: bool = False
    default: Any = None

    @classmethod
    def optional(cls, name: str, default: Any) -> "ParameterDescriptor":
        return cls(name=name, has_default=True, default=default)


Signature = tuple[ParameterDescriptor, ...]


@dataclass(frozen=True, slots=True)
class Operation:
    name: str
    fn: OperationFn
    params: Signature


class HandlerCapabilities(Protocol):
    """What the resolver and dispatcher need to know about a handler."""

    def has_operation(self, name: str) -> bool: ...

    def signature(self, name: str) -> Signature: ...

    def invoke(self, name: str, args: Sequence[Any]) -> Any: ...


def describe(fn: OperationFn) -> Signature:
    """Read *fn*'s parameters into descriptors.

    Raises ``TypeError`` for parameters that cannot be filled positionally.
    """
    params = []
    for p in inspect.signature(fn).parameters.values():
        if p.kind in _UNBINDABLE:
            raise TypeError(
                f"{getattr(fn, '__qualname__', fn)!s}: parameter {p.name!r} "
                f"({p.kind.description}) cannot be bound positionally"
            )
        if p.default is inspect.Parameter.empty:
            params.append(ParameterDescriptor(p.name))
        else:
            params.append(ParameterDescriptor.optional(p.name, p.default))
    return tuple(params)


def _normalise(params: Sequence[ParameterDescriptor | str]) -> Signature:
    return tuple(
        p if isinstance(p, ParameterDescriptor) else ParameterDescriptor(p)
        for p in params
    )


class Registry:
    """A method name → operation mapping.

    Usage::

        registry = Registry()

        @registry.method()
        def add(a, b=10):
            return a + b

        registry.signature("add")
        # (ParameterDescriptor('a'), ParameterDescriptor('b', True, 10))
    """

    def __init__(self) -> None:
        self._operations: dict[str, Operation] = {}

    @staticmethod
    def is_internal(name: str) -> bool:
        """Names starting with ``_`` or the reserved ``rpc.`` prefix are never exposed."""
        return name.startswith("_") or name.startswith("rpc.")

    # -- Registration --------------------------------------------------
    def register(
        self,
        name: str,
        fn: OperationFn,
        params: Sequence[ParameterDescriptor | str] | None = None,
    ) -> Operation:
        """Register *fn* under *name*.

        Explicit *params* take precedence over introspecting *fn*.
        """
        if not name or self.is_internal(name):
            raise ValueError(f"cannot register internal or empty method name {name!r}")
        if not callable(fn):
            raise TypeError(f"operation {name!r} is not callable")
        signature = _normalise(params) if params is not None else describe(fn)
        if name in self._operations:
            log.warning("overwriting operation %r", name)
        op = Operation(name=name, fn=fn, params=signature)
        self._operations[name] = op
        log.debug(
            "registered operation %r → %s(%s)",
            name,
            getattr(fn, "__qualname__", fn),
            ", ".join(p.name for p in signature),
        )
        return op

    def method(
        self,
        name: str | None = None,
        params: Sequence[ParameterDescriptor | str] | None = None,
    ) -> Callable[[OperationFn], OperationFn]:
        """Decorator that registers *fn* under *name* (default: ``fn.__name__``)."""

        def decorator(fn: OperationFn) -> OperationFn:
            self.register(name or fn.__name__, fn, params)
            return fn

        return decorator

    def expose(self, obj: object, prefix: str = "") -> list[str]:
        """Register every public bound method of *obj*; returns the names."""
        names = []
        for attr in dir(obj):
            if self.is_internal(attr):
                continue
            member = getattr(obj, attr)
            if not inspect.ismethod(member):
                continue
            self.register(prefix + attr, member)
            names.append(prefix + attr)
        return names

    # -- Capabilities --------------------------------------------------
    def has_operation(self, name: str) -> bool:
        return (
            isinstance(name, str)
            and not self.is_internal(name)
            and name in self._operations
        )

    def _get(self, name: str) -> Operation:
        if not self.has_operation(name):
            raise MethodNotFound(name)
        return self._operations[name]

    def signature(self, name: str) -> Signature:
        return self._get(name).params

    def invoke(self, name: str, args: Sequence[Any]) -> Any:
        """Call the operation positionally and return its result."""
        return self._get(name).fn(*args)

    # -- Introspection -------------------------------------------------
    @property
    def methods(self) -> list[str]:
        return list(self._operations.keys())
