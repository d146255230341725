from __future__ import annotations

import sqlite3

from config import settings
from core.logging.logger import get_logger
from application.services.purge import CachePurger, CachePurgeError


class PurgeCacheCommand:
    """Interactive purge of cached trajectory rows."""

    def __init__(self) -> None:
        self.log = get_logger(__name__, service="purge-cli")
        self.db_path = settings.cache_db_path
        self.purger = CachePurger(self._conn_factory)

    def _conn_factory(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return sqlite3.connect(self.db_path)

    def run(self) -> None:
        while True:
            print("\n=== Purge Cache ===")
            print(f"Database: {self.db_path}")
            print("1) Purge one player")
            print("2) Purge ALL rows")
            print("3) Back")
            choice = input("Choose: ").strip()
            if choice == "1":
                self._purge_player()
            elif choice == "2":
                self._purge_all()
            elif choice == "3":
                return
            else:
                print("Invalid option.")

    def _purge_player(self) -> None:
        puuid = input("PUUID to purge: ").strip()
        confirm = input(f"Type 'YES' to delete all cached rows of '{puuid}': ").strip()
        if confirm != "YES":
            print("Not confirmed.")
            return
        try:
            removed = self.purger.purge_player(puuid, confirm=True)
            print(f"Removed {removed} rows")
        except CachePurgeError as e:
            self.log.error(lambda: f"purge-player-failed {e}")
            print(f"Error: {e}")

    def _purge_all(self) -> None:
        confirm = input("Type 'NUKE' to delete the whole cache: ").strip()
        if confirm != "NUKE":
            print("Not confirmed.")
            return
        try:
            removed = self.purger.purge_all(confirm=True)
            print(f"Removed {removed} rows")
        except CachePurgeError as e:
            self.log.error(lambda: f"purge-all-failed {e}")
            print(f"Error: {e}")
