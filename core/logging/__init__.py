"""Structured logging: JSON-lines file sink, colored console, context binding."""
from .config import bootstrap_logging, shutdown_logging
from .context import bind, context, get_context, unbind
from .logger import StructuredLogger, get_logger, traceable

__all__ = [
    "bootstrap_logging",
    "shutdown_logging",
    "bind",
    "unbind",
    "context",
    "get_context",
    "StructuredLogger",
    "get_logger",
    "traceable",
]
