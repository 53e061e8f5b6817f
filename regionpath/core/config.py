from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import Optional


BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings): # load all key=value pairs from .env
    """ Runtime settings, overridable from the environment or .env"""
    DATABASE_URL: str = f"sqlite:///{BASE_DIR / 'data' / 'regionpath.db'}"
    REGIONS_PATH: Path = BASE_DIR / "data" / "regions.json"

    # graph / challenge tuning
    COORDINATE_PRECISION: int = 5 # decimals kept when matching border points
    CHALLENGE_ATTEMPTS: int = 500
    MIN_CHALLENGE_LENGTH: int = 4
    CHALLENGE_SEED: Optional[int] = None # fixed seed gives reproducible challenges

    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "regionpath_errors.log"

    model_config = SettingsConfigDict(
        env_file = BASE_DIR/".env",
        env_file_encoding = "utf-8",
        extra = "ignore",
    )

settings = Settings()
