"""Runtime logging configuration with bounded retention."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

_CONFIGURED = False


def _int_env(name: str, default: int, *, minimum: int, maximum: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return max(minimum, min(maximum, value))


def configure_runtime_logging() -> None:
    """Configure stderr logs, plus a rotating file when a log path is set, once per process."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = os.environ.get("TURBOSNAP_HELPER_LOG_LEVEL", "WARNING").strip().upper()
    level = getattr(logging, level_name or "WARNING", logging.WARNING)
    formatter = logging.Formatter(
        fmt="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )
    handlers: list[logging.Handler] = []
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    handlers.append(stream_handler)

    raw_path = os.environ.get("TURBOSNAP_HELPER_LOG_PATH", "").strip()
    if raw_path:
        log_path = Path(raw_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            filename=log_path,
            maxBytes=_int_env(
                "TURBOSNAP_HELPER_LOG_MAX_BYTES",
                1024 * 1024,
                minimum=64 * 1024,
                maximum=100 * 1024 * 1024,
            ),
            backupCount=_int_env("TURBOSNAP_HELPER_LOG_BACKUP_COUNT", 3, minimum=1, maximum=50),
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    for handler in handlers:
        root.addHandler(handler)

    _CONFIGURED = True
