"""Logging manager for structured server logs.

Provides:
- Structured JSON logging to logs/app.jsonl
- Console logging (verbose in development)
- Helpers to read recent entries and file statistics
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from sequential_thinking.config import ServerSettings, get_settings

# Standard LogRecord attributes; everything else is reported as extra_<name>
_RESERVED_ATTRS = {
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename", "module", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread", "threadName", "processName",
    "process", "exc_info", "exc_text", "stack_info", "getMessage", "taskName", "message",
}


class JSONFormatter(logging.Formatter):
    """Format log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
            "process_id": os.getpid(),
            "thread_id": record.thread,
            "thread_name": record.threadName,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        for k, v in record.__dict__.items():
            if k not in _RESERVED_ATTRS:
                entry[f"extra_{k}"] = v
        return json.dumps(entry, default=str)


class LoggingManager:
    """Configures root logging for the server process."""

    def __init__(self, settings: Optional[ServerSettings] = None) -> None:
        self.settings = settings or get_settings()
        self.is_development = self.settings.is_development
        self.log_level = self._get_log_level()
        self.logs_dir = self._get_logs_dir()
        self.log_file = self.logs_dir / "app.jsonl"
        self.logs_dir.mkdir(parents=True, exist_ok=True)
        self._setup_logging()

    def _get_log_level(self) -> int:
        level = getattr(logging, self.settings.log_level.upper(), None)
        return level if isinstance(level, int) else logging.INFO

    def _get_logs_dir(self) -> Path:
        if self.settings.app_log_dir:
            return Path(self.settings.app_log_dir)
        return Path.cwd() / "logs"

    def _setup_logging(self) -> None:
        """Configure structured logging to JSON file plus console."""
        root = logging.getLogger()
        for h in root.handlers[:]:
            root.removeHandler(h)

        file_handler = logging.FileHandler(self.log_file, encoding="utf-8")
        file_handler.setFormatter(JSONFormatter())
        file_handler.setLevel(self.log_level)
        root.addHandler(file_handler)
        root.setLevel(self.log_level)

        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
        console.setLevel(self.log_level if self.is_development else max(self.log_level, logging.WARNING))
        root.addHandler(console)

        self._suppress_noisy_loggers()

    def _suppress_noisy_loggers(self) -> None:
        """Suppress logs from noisy third-party libraries."""
        for name in ("httpx", "httpcore", "sse_starlette", "uvicorn.access"):
            logging.getLogger(name).setLevel(logging.WARNING)

    def get_log_file_path(self) -> Path:
        return self.log_file

    def read_logs(self, lines: int = 100) -> list[Dict[str, Any]]:
        """Read the most recent log entries."""
        if not self.log_file.exists():
            return []

        for handler in logging.getLogger().handlers:
            handler.flush()

        entries: list[Dict[str, Any]] = []
        with self.log_file.open("r", encoding="utf-8") as f:
            data = f.readlines()[-lines:]
        for ln in data:
            ln = ln.strip()
            if not ln:
                continue
            try:
                entries.append(json.loads(ln))
            except json.JSONDecodeError:
                continue
        return entries

    def get_log_stats(self) -> Dict[str, Any]:
        """Get statistics about the log file."""
        if not self.log_file.exists():
            return {"file_exists": False, "file_size": 0, "line_count": 0, "last_modified": None}

        stat = self.log_file.stat()
        with self.log_file.open("r", encoding="utf-8") as f:
            line_count = sum(1 for _ in f)
        return {
            "file_exists": True,
            "file_size": stat.st_size,
            "line_count": line_count,
            "last_modified": datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc).isoformat(),
            "file_path": str(self.log_file),
        }

    def shutdown(self) -> None:
        """Detach and close the handlers this manager installed."""
        root = logging.getLogger()
        for h in root.handlers[:]:
            root.removeHandler(h)
            h.close()
