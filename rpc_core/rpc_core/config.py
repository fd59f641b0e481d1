"""Debug context.

Error ``data`` is only disclosed when the process runs with
``ENVIRONMENT=development``.  Entrypoints load any ``.env`` file before
serving (see ``rpc_app.config``).
"""

from __future__ import annotations

import os

DEVELOPMENT = "development"


def environment() -> str:
    return os.getenv("ENVIRONMENT", "production")


def debug_enabled() -> bool:
    return environment() == DEVELOPMENT
