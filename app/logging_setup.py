"""
Logging setup.

- Console handler on the root logger
- Optional rotating file handlers for runtime and errors
- Request ID aware formatter
"""

from __future__ import annotations
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask import g, has_app_context

from app.config import Settings

FORMAT = "%(asctime)s [%(levelname)s] %(name)s %(request_id)s - %(message)s"

# marks handlers we own so a second create_app() doesn't stack duplicates
_HANDLER_TAG = "_flag_service_handler"


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            rid = g.get("request_id") if has_app_context() else None
            record.request_id = rid or "-"
        return True


def _tag(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(logging.Formatter(FORMAT))
    return handler


def _mk_handler(path: Path, level: int) -> RotatingFileHandler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(path, maxBytes=5_000_000, backupCount=3, encoding="utf-8")
    handler.setLevel(level)
    _tag(handler)
    return handler


def _drop_owned(logger: logging.Logger) -> None:
    for h in list(logger.handlers):
        if getattr(h, _HANDLER_TAG, False):
            logger.removeHandler(h)
            h.close()


def configure_logging(settings: Settings) -> None:
    level = logging.getLevelName(settings.LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    runtime_logger = logging.getLogger("Runtime")
    _drop_owned(root)
    _drop_owned(runtime_logger)
    root.setLevel(level)

    # Console
    console = _tag(logging.StreamHandler())
    console.setLevel(level)
    root.addHandler(console)

    if not settings.LOG_TO_FILE:
        return

    # Files
    logs_dir = Path(settings.LOG_DIR)
    runtime_logger.addHandler(_mk_handler(logs_dir / "runtime.log", level))
    root.addHandler(_mk_handler(logs_dir / "errors.log", logging.ERROR))
