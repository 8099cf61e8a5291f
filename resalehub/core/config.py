from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from resalehub.models.constants import CURRENCIES, THEMES


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic-settings rules (e.g. APP_NAME, DEBUG, DATA_DIR, DB_FILENAME, DEFAULT_CURRENCY).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "Resale Hub"
    debug: bool = True
    version: str = "0.1.0"

    # Data & persistence
    data_dir: Path = Path("data")
    db_filename: str = "app.sqlite3"
    db_path: Optional[Path] = None  # derived if not provided

    # Display defaults (first run, before anything is stored in metadata)
    default_currency: str = "EUR"
    default_theme: str = "dark"

    # Item name auto-detection: minimum trimmed input length
    auto_detect_min_length: int = 3

    def init_post_load(self) -> None:
        """Finalize derived fields and ensure directories exist."""
        if self.db_path is None:
            self.db_path = self.data_dir / self.db_filename
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.default_currency = self.default_currency.upper()
        if self.default_currency not in CURRENCIES:
            raise ValueError(
                f"Unsupported default_currency '{self.default_currency}'. Allowed: {CURRENCIES}"
            )
        if self.default_theme not in THEMES:
            raise ValueError(
                f"Unsupported default_theme '{self.default_theme}'. Allowed: {THEMES}"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
