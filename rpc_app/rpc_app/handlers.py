"""Demo operations.

A ``Calculator`` instance is exposed on the module-level ``registry``
which the server imports.
"""

from __future__ import annotations

import hashlib
import json
import logging
from typing import Any

from rpc_core.errors import IntegrityError
from rpc_core.registry import Registry

log = logging.getLogger(__name__)

registry = Registry()


def _digest(data: Any) -> str:
    raw = json.dumps(data, sort_keys=True, separators=(",", ":")).encode()
    return hashlib.sha256(raw).hexdigest()


class Calculator:
    """Every public method becomes an RPC operation."""

    def echo(self, payload):
        """Return *payload* unchanged."""
        return payload

    def add(self, a, b):
        return a + b

    def scale(self, value, factor=10):
        return value * factor

    def greet(self, name, greeting="Hello"):
        return f"{greeting}, {name}!"

    def verify(self, data, checksum):
        """Check *data* against a sha256 hex digest of its canonical JSON."""
        if _digest(data) != checksum:
            raise IntegrityError("Checksum mismatch")
        return {"verified": True}

    def explode(self):
        # exercises the internal-error path
        raise RuntimeError("boom")

    def _secret(self):
        return "never exposed"


calculator = Calculator()
registry.expose(calculator)
