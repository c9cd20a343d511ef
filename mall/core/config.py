"""
Configuration helpers for the mall directory backend.

Settings are read once from the environment and cached; tests that change
environment variables must call ``get_settings.cache_clear()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

ROOT = Path(__file__).resolve().parents[2]
MEMORY_DATA_FILE = ":memory:"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    host: str
    port: int
    data_file: str
    static_dir: str
    cors_origins: tuple[str, ...]
    log_level: str

    @property
    def in_memory(self) -> bool:
        return self.data_file == MEMORY_DATA_FILE


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _csv(value: str | None) -> tuple[str, ...]:
        return tuple(item.strip().rstrip("/") for item in (value or "").split(",") if item.strip())

    app_env = (os.getenv("APP_ENV") or "dev").lower()
    port = _int(os.getenv("PORT"), 3000)
    origins = set(_csv(os.getenv("CORS_ORIGINS")))
    if app_env != "prod":
        origins.update(
            {
                f"http://localhost:{port}",
                f"http://127.0.0.1:{port}",
                "http://localhost:5173",
                "http://127.0.0.1:5173",
            }
        )

    return Settings(
        app_env=app_env,
        host=os.getenv("HOST", "0.0.0.0"),
        port=port,
        data_file=os.getenv("DATA_FILE") or str(ROOT / "data" / "db.json"),
        static_dir=os.getenv("STATIC_DIR") or str(ROOT / "public"),
        cors_origins=tuple(sorted(origins)),
        log_level=(os.getenv("LOG_LEVEL") or "info").lower(),
    )
