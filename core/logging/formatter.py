from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Dict

from .context import get_context

_LEVEL_COLORS = {
    "TRACE": "\033[90m",
    "DEBUG": "\033[37m",
    "INFO": "\033[36m",
    "SUCCESS": "\033[32m",
    "WARNING": "\033[33m",
    "ERROR": "\033[31m",
    "CRITICAL": "\033[35m",
}
_RESET = "\033[0m"


def _base_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        "timestamp": datetime.fromtimestamp(record.created).isoformat(timespec="milliseconds"),
        "level": record.levelname,
        "logger": record.name,
        "service": getattr(record, "service", None),
        "function": record.funcName,
        "line_number": record.lineno,
    }


class ConsoleFormatter(logging.Formatter):
    """One colored line per record: ``time | LEVEL | service | where | message | ctx``."""

    def format(self, record: logging.LogRecord) -> str:
        try:
            fields = _base_fields(record)
            parts = [
                fields["timestamp"],
                record.levelname,
                fields["service"] or "-",
                f"{record.module}:{record.funcName}:{record.lineno}",
                record.getMessage(),
            ]
            exec_ms = getattr(record, "execution_time_ms", None)
            if exec_ms is not None:
                parts.append(f"t={exec_ms}ms")
            ctx = get_context()
            if ctx:
                parts.append(" ".join(f"{k}={v}" for k, v in ctx.items()))
            if record.exc_info:
                parts.append(self.formatException(record.exc_info))
            color = _LEVEL_COLORS.get(record.levelname, "")
            return f"{color}{' | '.join(parts)}{_RESET}"
        except Exception:
            return record.getMessage()


class JSONFormatter(logging.Formatter):
    """JSON-lines records for the rotating file sink."""

    def format(self, record: logging.LogRecord) -> str:
        payload = _base_fields(record)
        payload["message"] = record.getMessage()
        ctx = get_context()
        if ctx:
            payload["context"] = ctx
        extra_ctx = getattr(record, "context", None)
        if extra_ctx:
            payload.setdefault("context", {}).update(extra_ctx)
        exec_ms = getattr(record, "execution_time_ms", None)
        if exec_ms is not None:
            payload["execution_time_ms"] = exec_ms
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))
