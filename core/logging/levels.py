from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    SUCCESS = 25
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


_CUSTOM = {LogLevel.TRACE: "TRACE", LogLevel.SUCCESS: "SUCCESS"}


def register_levels() -> None:
    for level, name in _CUSTOM.items():
        if logging.getLevelName(int(level)) != name:
            logging.addLevelName(int(level), name)


def to_level(value: int | str) -> int:
    """Resolve a level name or number, falling back to INFO for unknown names."""
    if isinstance(value, int):
        return value
    name = value.strip().upper()
    if name in LogLevel.__members__:
        return int(LogLevel[name])
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO
