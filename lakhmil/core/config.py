from functools import lru_cache
from pathlib import Path
from typing import Optional
from pydantic import AnyHttpUrl
from pydantic_settings import BaseSettings, SettingsConfigDict

from lakhmil.models.constants import DEFAULT_HISTORY_LIMIT

ALLOWED_RATE_PROVIDERS = {"static", "external-http"}


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Environment variable mapping follows pydantic's rules (e.g., APP_NAME, DEBUG,
    DATA_DIR, EXCHANGE_RATE_PROVIDER, RATES_CACHE_TTL_SECONDS, HISTORY_LIMIT).
    """

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Basic app metadata
    app_name: str = "lakhmil"
    debug: bool = False
    version: str = "0.1.0"

    # Data & persistence
    data_dir: Path = Path("data")
    db_filename: str = "lakhmil.sqlite3"
    db_path: Optional[Path] = None  # derived if not provided
    history_limit: int = DEFAULT_HISTORY_LIMIT

    # Exchange rate: 'static' (fixed placeholder) or 'external-http'
    exchange_rate_provider: str = "external-http"
    exchange_api_url: AnyHttpUrl = (
        "https://cdn.jsdelivr.net/npm/@fawazahmed0/currency-api@latest/v1/currencies/inr.json"
    )
    static_rate: float = 0.012  # USD per INR
    http_timeout_seconds: float = 5.0
    http_retries: int = 2
    # One fetch per session; refreshed once the cached rate is older than this.
    rates_cache_ttl_seconds: int = 3600

    def init_post_load(self) -> None:
        """Finalize derived fields and ensure directories exist."""
        if self.db_path is None:
            self.db_path = self.data_dir / self.db_filename
        self.db_path = Path(self.db_path)
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.exchange_rate_provider = self.exchange_rate_provider.strip().lower()
        if self.exchange_rate_provider not in ALLOWED_RATE_PROVIDERS:
            raise ValueError(
                f"Unsupported exchange_rate_provider '{self.exchange_rate_provider}'. "
                f"Allowed: {sorted(ALLOWED_RATE_PROVIDERS)}"
            )
        if self.history_limit < 1:
            raise ValueError("history_limit must be at least 1")
        if self.static_rate <= 0:
            raise ValueError("static_rate must be positive")


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings
