from __future__ import annotations

import logging
import os
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import Optional

from .formatter import ConsoleFormatter, JSONFormatter
from .levels import register_levels, to_level

_listener: QueueListener | None = None


def bootstrap_logging(
    *,
    service: str = "lp-tracker",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "lp_tracker.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger once per process.

    The file sink sits behind a QueueListener so request handling never
    blocks on disk I/O. Console output is opt-in through ``LOG_CONSOLE``.
    """
    global _listener
    shutdown_logging()
    register_levels()

    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)

    if os.getenv("LOG_CONSOLE", "false").strip().lower() == "true":
        console = logging.StreamHandler()
        console_level = os.getenv("LOG_CONSOLE_LEVEL", "")
        console.setLevel(to_level(console_level) if console_level else lvl)
        console.setFormatter(ConsoleFormatter())
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
        )
        file_handler.setLevel(lvl)
        file_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        root.addHandler(QueueHandler(q))
        _listener = QueueListener(q, file_handler, respect_handler_level=True)
        _listener.start()

    logging.getLogger(__name__).debug("logging ready for %s", service)


def shutdown_logging() -> None:
    global _listener
    if _listener is not None:
        _listener.stop()
        _listener = None
