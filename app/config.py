"""
Configuration loader.

- Reads env vars (.env supported by deploy)
- Provides strongly-typed Settings
- Holds logging, docs and seed-data knobs
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional

APP_NAME = "Feature Flag Service API"
APP_VERSION = "1.0.0"


def _get(name: str, default: Optional[str] = None) -> str:
    v = os.environ.get(name, default)
    if v is None:
        raise RuntimeError(f"Missing required env: {name}")
    return v


@dataclass(frozen=True)
class Settings:
    ENV: str                      # development | test | production

    # Server
    HOST: str
    PORT: int
    BASE_URL: str

    # Logging
    LOG_LEVEL: str
    LOG_DIR: str
    LOG_TO_FILE: bool

    # OpenAPI + Swagger UI at /docs
    ENABLE_DOCS: bool

    # Flags
    FLAGS_SEED_PATH: str | None   # JSON/YAML file; None -> built-in seeds
    DEFAULT_VARIATION_FLAG: str   # flag used by the bare POST /assignment


def _to_bool(s: str | bool | None, default: bool = False) -> bool:
    if s is None:
        return default
    if isinstance(s, bool):
        return s
    return s.strip().lower() in {"1", "true", "yes", "on"}


def _to_int(name: str, v: object) -> int:
    try:
        return int(v)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise RuntimeError(f"Invalid integer for {name}: {v!r}") from e


def load_settings(override: dict | None = None) -> Settings:
    o = override or {}
    return Settings(
        ENV=o.get("ENV", _get("APP_ENV", "development")),

        HOST=o.get("HOST", _get("HOST", "0.0.0.0")),
        PORT=_to_int("PORT", o.get("PORT", os.environ.get("PORT", 3000))),
        BASE_URL=o.get("BASE_URL", os.environ.get("BASE_URL", "http://localhost:3000")),

        LOG_LEVEL=str(o.get("LOG_LEVEL", os.environ.get("LOG_LEVEL", "INFO"))).upper(),
        LOG_DIR=o.get("LOG_DIR", os.environ.get("LOG_DIR", "logs")),
        LOG_TO_FILE=_to_bool(o.get("LOG_TO_FILE", os.environ.get("LOG_TO_FILE")), False),

        ENABLE_DOCS=_to_bool(o.get("ENABLE_DOCS", os.environ.get("ENABLE_DOCS")), True),

        FLAGS_SEED_PATH=o.get("FLAGS_SEED_PATH", os.environ.get("FLAGS_SEED_PATH")) or None,
        DEFAULT_VARIATION_FLAG=o.get(
            "DEFAULT_VARIATION_FLAG", _get("DEFAULT_VARIATION_FLAG", "feature-new-ui")
        ),
    )
