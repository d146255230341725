"""Write-once SQLite store of reconstructed LP trajectory points."""
from __future__ import annotations

import csv
import sqlite3
import threading
from pathlib import Path
from typing import List, Optional

from core.logging.logger import get_logger
from domain.entities import CachedTrajectoryRow, TrajectoryPoint
from domain.exceptions import CacheWriteError
from domain.interfaces import IProgressCache

_COLUMNS = (
    "puuid", "match_id", "label_index", "lp_before", "lp_after", "lp_delta", "result",
    "tier_before", "division_before", "tier_after", "division_after", "exact",
    "game_creation", "created_at",
)


class ProgressCache(IProgressCache):
    """Audit trail of trajectory points keyed by ``(puuid, match_id)``.

    Rows are inserted once and never updated: a later request that computes
    a different point for the same match leaves the stored row untouched.
    Under a race the first writer wins. Nothing here is read back to serve
    a trajectory; every request recomputes from scratch.
    """

    def __init__(self, db_path: Path):
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._log = get_logger(__name__, service="progress-cache")
        # Writes may be dispatched from worker threads (asyncio.to_thread).
        self._conn = sqlite3.connect(str(db_path), check_same_thread=False)
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._conn.execute("PRAGMA synchronous=NORMAL")
        self._create_tables()

    def _create_tables(self) -> None:
        with self._lock:
            cur = self._conn.cursor()
            cur.execute(
                """CREATE TABLE IF NOT EXISTS match_rank_progress (
                   puuid TEXT NOT NULL, match_id TEXT NOT NULL, label_index INTEGER,
                   lp_before INTEGER, lp_after INTEGER, lp_delta INTEGER, result TEXT,
                   tier_before TEXT, division_before TEXT, tier_after TEXT, division_after TEXT,
                   exact INTEGER NOT NULL DEFAULT 0, game_creation INTEGER,
                   created_at TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%fZ', 'now')),
                   PRIMARY KEY(puuid, match_id))"""
            )
            cur.execute(
                "CREATE INDEX IF NOT EXISTS idx_rank_progress_puuid_time "
                "ON match_rank_progress(puuid, game_creation)"
            )
            self._conn.commit()

    def store(self, puuid: str, match_id: str, point: TrajectoryPoint) -> bool:
        row = CachedTrajectoryRow.from_point(puuid, point)
        try:
            with self._lock:
                cur = self._conn.execute(
                    """INSERT INTO match_rank_progress(puuid,match_id,label_index,lp_before,lp_after,
                       lp_delta,result,tier_before,division_before,tier_after,division_after,
                       exact,game_creation)
                       VALUES(?,?,?,?,?,?,?,?,?,?,?,?,?)
                       ON CONFLICT(puuid, match_id) DO NOTHING""",
                    (
                        puuid, match_id, row.label_index, row.lp_before, row.lp_after,
                        row.lp_delta, row.result, row.tier_before, row.division_before,
                        row.tier_after, row.division_after, 1 if row.exact else 0,
                        row.game_creation,
                    ),
                )
                self._conn.commit()
                inserted = cur.rowcount == 1
        except sqlite3.Error as e:
            raise CacheWriteError(f"Could not store {puuid}/{match_id}: {e}") from e

        if inserted:
            self._log.debug(lambda: f"cache-insert {match_id}")
        else:
            self._log.trace(lambda: f"cache-skip {match_id} (already stored)")
        return inserted

    # ── Query helpers ──────────────────────────────────────────────────────

    @staticmethod
    def _to_row(r: tuple) -> CachedTrajectoryRow:
        values = dict(zip(_COLUMNS, r))
        values["exact"] = bool(values["exact"])
        return CachedTrajectoryRow(**values)

    def get(self, puuid: str, match_id: str) -> Optional[CachedTrajectoryRow]:
        with self._lock:
            r = self._conn.execute(
                f"SELECT {', '.join(_COLUMNS)} FROM match_rank_progress WHERE puuid = ? AND match_id = ?",
                (puuid, match_id),
            ).fetchone()
        return self._to_row(r) if r else None

    def list_for_player(self, puuid: str) -> List[CachedTrajectoryRow]:
        """All stored rows of one player, oldest game first."""
        with self._lock:
            rows = self._conn.execute(
                f"""SELECT {', '.join(_COLUMNS)} FROM match_rank_progress
                    WHERE puuid = ? ORDER BY game_creation, created_at""",
                (puuid,),
            ).fetchall()
        return [self._to_row(r) for r in rows]

    def list_players(self) -> List[tuple[str, int]]:
        """``(puuid, row_count)`` for every player with stored rows."""
        with self._lock:
            return self._conn.execute(
                "SELECT puuid, COUNT(*) FROM match_rank_progress GROUP BY puuid ORDER BY puuid"
            ).fetchall()

    def count(self) -> int:
        with self._lock:
            return self._conn.execute("SELECT COUNT(*) FROM match_rank_progress").fetchone()[0]

    def export_csv(self, output_dir: Path) -> Path:
        output_dir.mkdir(parents=True, exist_ok=True)
        path = output_dir / "match_rank_progress.csv"
        with self._lock:
            cur = self._conn.execute(
                f"SELECT {', '.join(_COLUMNS)} FROM match_rank_progress ORDER BY puuid, game_creation"
            )
            rows = cur.fetchall()
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(_COLUMNS)
            w.writerows(rows)
        return path

    def close(self) -> None:
        with self._lock:
            self._conn.close()
