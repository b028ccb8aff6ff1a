from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from turbosnap_helper.adapters import observability


def test_configure_runtime_logging_adds_file_handler(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    monkeypatch.setattr(observability, "_CONFIGURED", False)
    monkeypatch.setenv("TURBOSNAP_HELPER_LOG_LEVEL", "debug")
    monkeypatch.setenv("TURBOSNAP_HELPER_LOG_PATH", str(tmp_path / "logs" / "helper.log"))
    monkeypatch.setenv("TURBOSNAP_HELPER_LOG_BACKUP_COUNT", "not-a-number")
    try:
        observability.configure_runtime_logging()
        file_handlers = [h for h in root.handlers if isinstance(h, RotatingFileHandler)]
        assert root.level == logging.DEBUG
        assert len(file_handlers) == 1
        assert file_handlers[0].backupCount == 3
        assert (tmp_path / "logs").is_dir()
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = original_handlers
        root.setLevel(original_level)
