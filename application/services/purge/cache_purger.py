from __future__ import annotations

import sqlite3
from typing import Callable

from core.logging.logger import get_logger

_TABLE = "match_rank_progress"


class CachePurgeError(Exception):
    pass


class PurgeNotConfirmedError(CachePurgeError):
    pass


class CachePurger:
    """Explicit removal of cached trajectory rows.

    The cache itself never deletes or rewrites rows; this is the only way a
    stored point goes away.
    """

    def __init__(self, connection_factory: Callable[[], sqlite3.Connection]) -> None:
        self._connection_factory = connection_factory
        self._log = get_logger(__name__, service="purge")

    def _table_exists(self, cur: sqlite3.Cursor) -> bool:
        row = cur.execute(
            "SELECT 1 FROM sqlite_master WHERE type='table' AND name = ?", (_TABLE,)
        ).fetchone()
        return row is not None

    def purge_player(self, puuid: str, *, confirm: bool) -> int:
        """Delete every row of one player. Returns the number removed."""
        if not confirm:
            raise PurgeNotConfirmedError("Purge not confirmed.")
        try:
            with self._connection_factory() as conn:
                cur = conn.cursor()
                if not self._table_exists(cur):
                    return 0
                removed = cur.execute(f'DELETE FROM "{_TABLE}" WHERE puuid = ?', (puuid,)).rowcount
                conn.commit()
        except sqlite3.Error as e:
            raise CachePurgeError(f"SQLite error while purging player '{puuid}': {e}") from e
        self._log.info(lambda: f"purged {removed} rows for {puuid}")
        return removed

    def purge_all(self, *, confirm: bool) -> int:
        if not confirm:
            raise PurgeNotConfirmedError("Purge not confirmed.")
        try:
            with self._connection_factory() as conn:
                cur = conn.cursor()
                if not self._table_exists(cur):
                    return 0
                removed = cur.execute(f'DELETE FROM "{_TABLE}"').rowcount
                conn.commit()
        except sqlite3.Error as e:
            raise CachePurgeError(f"SQLite error while purging cache: {e}") from e
        self._log.warning(lambda: f"purged entire cache ({removed} rows)")
        return removed
