"""Service configuration, read from the environment and an optional .env file."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def _default_data_dir() -> Path:
    """``data/`` in a source checkout, else ``./data`` (installed package)."""
    checkout_data = PROJECT_ROOT / "data"
    if checkout_data.is_dir():
        return checkout_data
    return Path.cwd() / "data"


class Settings(BaseSettings):
    """Typed settings for the lookup service and its operator scripts."""

    # --- Application Meta ---
    APP_NAME: str = "pali-lookup"
    APP_VERSION: str = "0.3.0"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "json" in production

    # --- Lookup tables ---
    # Set DATA_DIR explicitly when running from an installed package
    DATA_DIR: Path = Field(default_factory=_default_data_dir)
    FALLBACK_TARGET: str = "en"
    MIN_SEGMENT_LENGTH: int = 4
    HANZI_MAX_SUBSTRING: int = 20

    # --- Dictionary sources (scripts/fetch_dictionaries.py) ---
    SUTTACENTRAL_API_URL: str = "https://suttacentral.net/api"
    DPD_BASE_URL: str = (
        "https://raw.githubusercontent.com/suttacentral/suttacentral/main/client/elements/lookups/dpd"
    )

    # --- HTTP ---
    CORS_ORIGINS: list[str] = ["*"]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
