from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler, QueueHandler, QueueListener
from queue import Queue
from pathlib import Path
from typing import Optional

from .context import get_context
from .levels import register_levels, to_level
from .formatter import ConsoleFormatter, JSONFormatter

_listener: QueueListener | None = None


class ContextFilter(logging.Filter):
    """Snapshot the log context onto the record on the emitting thread."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "log_context"):
            record.log_context = get_context()
        if getattr(record, "service", None) is None:
            record.service = self.service
        return True


def bootstrap_logging(
    *,
    service: str = "lol-stats",
    level: str | int | None = None,
    log_dir: Optional[Path] = None,
    log_file_name: str = "lol-stats.jsonl",
    max_bytes: int = 5_000_000,
    backup_count: int = 5,
) -> None:
    """Configure the root logger.

    Console output goes to stderr and is off unless ``LOG_CONSOLE=true``;
    with ``log_dir`` set, JSON lines are written through a queue to a
    rotating file.
    """
    global _listener
    shutdown_logging()
    register_levels()
    root = logging.getLogger()
    root.handlers.clear()
    lvl = to_level(level or os.getenv("LOG_LEVEL", "INFO"))
    root.setLevel(lvl)
    ctx_filter = ContextFilter(service)

    enable_console = os.getenv("LOG_CONSOLE", "false").strip().lower() == "true"
    console_level_str = os.getenv("LOG_CONSOLE_LEVEL", "")
    if enable_console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(to_level(console_level_str) if console_level_str else lvl)
        console.setFormatter(ConsoleFormatter(use_color=sys.stderr.isatty()))
        console.addFilter(ctx_filter)
        root.addHandler(console)

    if log_dir:
        log_dir.mkdir(parents=True, exist_ok=True)
        json_handler = RotatingFileHandler(
            str(log_dir / log_file_name), maxBytes=max_bytes, backupCount=backup_count
        )
        json_handler.setLevel(lvl)
        json_handler.setFormatter(JSONFormatter())
        q: Queue[logging.LogRecord] = Queue(-1)
        qh = QueueHandler(q)
        qh.addFilter(ctx_filter)
        root.addHandler(qh)
        _listener = QueueListener(q, json_handler, respect_handler_level=True)
        _listener.start()

    if not root.handlers:
        root.addHandler(logging.NullHandler())


def shutdown_logging() -> None:
    global _listener
    if _listener:
        _listener.stop()
        _listener = None
