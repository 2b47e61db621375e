from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_STATIC_DIR = Path(__file__).resolve().parent / "static"
DEFAULT_CONTENT_SECURITY_POLICY = (
    "default-src 'self'; "
    "style-src 'self' 'unsafe-inline' https://fonts.googleapis.com https://cdn.jsdelivr.net; "
    "font-src 'self' https://fonts.gstatic.com; "
    "script-src 'self' 'unsafe-inline' 'unsafe-eval';"
)


@dataclass(frozen=True)
class Settings:
    data_file: Path
    static_dir: Path
    host: str
    port: int
    environment: str
    content_security_policy: str

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


def parse_port(raw_value: str | None) -> int:
    if not raw_value:
        return DEFAULT_PORT
    try:
        return int(raw_value)
    except ValueError:
        logger.warning("Invalid PORT value '%s'; defaulting to %s", raw_value, DEFAULT_PORT)
        return DEFAULT_PORT


def load_settings() -> Settings:
    return Settings(
        data_file=Path(os.getenv("TODO_DATA_FILE", "data/todos.json")),
        static_dir=Path(os.getenv("TODO_STATIC_DIR") or DEFAULT_STATIC_DIR),
        host=os.getenv("HOST", "0.0.0.0"),
        port=parse_port(os.getenv("PORT")),
        environment=os.getenv("ENVIRONMENT", "development").lower(),
        content_security_policy=os.getenv(
            "CONTENT_SECURITY_POLICY", DEFAULT_CONTENT_SECURITY_POLICY
        ),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
