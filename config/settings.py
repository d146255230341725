"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """
    ─── LP ESTIMATION ────────────────────────────────────────────────────
    Riot does not expose per-match LP gains. Every point of the trajectory
    is estimated as +LP_HEURISTIC_DELTA for a win and -LP_HEURISTIC_DELTA
    for a loss, walking backward from the player's current rank. The UI
    fallback path uses the same constant, so keep the two in sync by
    reading it from here only.
    ──────────────────────────────────────────────────────────────────────
    """

    RIOT_API_KEY:   str = os.getenv('RIOT_API_KEY', '')
    DEFAULT_REGION: str = os.getenv('DEFAULT_REGION', 'euw1')

    # ── Trajectory ─────────────────────────────────────────────────────────
    LP_HEURISTIC_DELTA:    int = int(os.getenv('LP_HEURISTIC_DELTA', '15'))
    MATCH_WINDOW_SIZE:     int = int(os.getenv('MATCH_WINDOW_SIZE', '10'))
    # Games shorter than this are remakes and never count toward LP.
    REMAKE_MAX_DURATION_S: int = 300

    # ── Rate limits (per 1 second / per 2 minutes = Riot's actual windows) ──
    RATE_LIMIT_PER_1_SEC:        int = 18
    RATE_LIMIT_PER_2_MIN:        int = 90

    MATCH_RATE_LIMIT_PER_1_SEC:  int = 18
    MATCH_RATE_LIMIT_PER_2_MIN:  int = 90

    LEAGUE_RATE_LIMIT_PER_1_SEC: int = 15
    LEAGUE_RATE_LIMIT_PER_2_MIN: int = 75

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = BASE_DIR / 'data'
    DB_DIR:   Path = DATA_DIR / 'db'
    CSV_DIR:  Path = DATA_DIR / 'csv'
    LOG_DIR:  Path = DATA_DIR / 'logs'

    CACHE_DB_NAME: str = os.getenv('CACHE_DB_NAME', 'rank_progress.sqlite')

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: int   = 30
    MAX_RETRIES:     int   = 3
    RETRY_BACKOFF:   float = 2.0

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @property
    def cache_db_path(self) -> Path:
        return self.DB_DIR / self.CACHE_DB_NAME

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env")

    @classmethod
    def create_directories(cls) -> None:
        cls.DB_DIR.mkdir(parents=True, exist_ok=True)
        cls.CSV_DIR.mkdir(parents=True, exist_ok=True)
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
