from __future__ import annotations

import contextvars
from typing import Any, Dict

# Keys bound here (puuid, match_id, region, ...) are attached to every record
# emitted from the same task.
_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar("log_context", default={})


def get_context() -> Dict[str, Any]:
    return dict(_context.get())


def _merged(values: Dict[str, Any]) -> Dict[str, Any]:
    current = dict(_context.get())
    current.update({k: v for k, v in values.items() if v is not None})
    return current


def bind(**values: Any) -> None:
    _context.set(_merged(values))


def unbind(*keys: str) -> None:
    current = dict(_context.get())
    for key in keys:
        current.pop(key, None)
    _context.set(current)


class context(object):
    """Scoped binding: ``with context(puuid=...):``."""

    def __init__(self, **values: Any) -> None:
        self._values = values
        self._token: contextvars.Token | None = None

    def __enter__(self) -> Dict[str, Any]:
        merged = _merged(self._values)
        self._token = _context.set(merged)
        return merged

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._token is not None:
            _context.reset(self._token)
            self._token = None
        return False
