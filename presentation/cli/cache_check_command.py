from __future__ import annotations

import sqlite3

from config import settings
from core.logging.logger import get_logger
from application.services import ProgressCache


class CacheCheckCommand:
    """Inspection of the LP trajectory cache."""

    def __init__(self) -> None:
        self.log = get_logger(__name__, service="cache-cli")
        self.db_path = settings.cache_db_path

    def run(self) -> None:
        while True:
            print("\n=== Cache Check ===", flush=True)
            print(f"Database: {self.db_path}", flush=True)
            print("1) Rows per player", flush=True)
            print("2) Show player rows", flush=True)
            print("3) Export CSV", flush=True)
            print("4) PRAGMA integrity_check", flush=True)
            print("5) Back", flush=True)
            choice = input("Choose: ").strip()
            if choice == "1":
                self._players()
            elif choice == "2":
                self._player_rows(input("PUUID: ").strip())
            elif choice == "3":
                self._export()
            elif choice == "4":
                self._integrity()
            elif choice == "5":
                return
            else:
                print("Invalid option.", flush=True)
                continue
            input("Press Enter to return to cache menu...")

    def _players(self) -> None:
        cache = ProgressCache(self.db_path)
        try:
            players = cache.list_players()
            print(f"\nTotal rows: {cache.count()}", flush=True)
            for puuid, n in players:
                print(f"- {puuid}: {n}", flush=True)
        finally:
            cache.close()

    def _player_rows(self, puuid: str) -> None:
        cache = ProgressCache(self.db_path)
        try:
            rows = cache.list_for_player(puuid)
        finally:
            cache.close()
        if not rows:
            print("No rows for this player.", flush=True)
            return
        for r in rows:
            print(
                f"- {r.match_id} {r.result:<4} {r.lp_delta:+d} "
                f"{r.tier_after} {r.division_after} {r.lp_after} LP "
                f"{'exact' if r.exact else 'estimated'} @ {r.created_at}",
                flush=True,
            )

    def _export(self) -> None:
        settings.create_directories()
        cache = ProgressCache(self.db_path)
        try:
            path = cache.export_csv(settings.CSV_DIR)
        finally:
            cache.close()
        print(f"Exported to {path}", flush=True)

    def _integrity(self) -> None:
        try:
            conn = sqlite3.connect(self.db_path)
            try:
                row = conn.execute("PRAGMA integrity_check").fetchone()
            finally:
                conn.close()
            print(f"integrity_check: {row[0] if row else 'unknown'}", flush=True)
        except sqlite3.Error as e:
            self.log.error(lambda: f"integrity-failed {e}")
            print(f"Error: {e}", flush=True)
