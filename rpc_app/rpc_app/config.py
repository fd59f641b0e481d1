"""Server settings, read from the environment (and ``.env``).

``ENVIRONMENT`` is not read here: the dispatch core checks it on every
error, see ``rpc_core.config``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(os.path.join(Path.cwd(), ".env"))

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8100
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(slots=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            host=os.getenv("RPC_HOST", DEFAULT_HOST),
            port=int(os.getenv("RPC_PORT", DEFAULT_PORT)),
            log_level=os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL),
        )
