"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """
    Process-wide configuration, read once from the environment.

    The Riot API key is never part of the source tree. Put it in
    config/.env (RIOT_API_KEY=RGAPI-...) or export it before running.
    Data Dragon requests work without a key.
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # ── Data Dragon ────────────────────────────────────────────────────────
    DDRAGON_VERSION: str = os.getenv('DDRAGON_VERSION', '13.6.1')
    DDRAGON_LOCALE:  str = os.getenv('DDRAGON_LOCALE',  'en_US')

    # ── Defaults for the CLI ───────────────────────────────────────────────
    DEFAULT_REGION:   str = os.getenv('DEFAULT_REGION', 'na')
    MATCH_COUNT:      int = int(os.getenv('MATCH_COUNT', '5'))
    LEADERBOARD_SIZE: int = int(os.getenv('LEADERBOARD_SIZE', '5'))

    # ── Paths ──────────────────────────────────────────────────────────────
    LOG_DIR:  Optional[Path] = (
        Path(os.environ['LOG_DIR']) if os.getenv('LOG_DIR') else None
    )

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env or the environment")


settings = Settings()
