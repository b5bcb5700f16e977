# hodl_engine/core/config/settings.py

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path

class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or .env file.
    Includes general app settings, price source credentials and error policy.
    """
    # General App Settings
    APP_NAME: str = "HODL Engine API"
    APP_VERSION: str = "0.1.0"
    DEBUG_MODE: bool = False

    # API Specific Settings
    API_V1_STR: str = "/api/v1"

    # Logging Settings
    LOG_LEVEL: str = "INFO" # e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Valuation Settings
    DECIMAL_PRECISION: int = 28
    STRICT_MODE: bool = False # Abort the whole run on the first malformed record

    # Price Source Settings
    COIN_MARKET_CAP_API_KEY: Optional[str] = None
    PRICE_API_BASE_URL: str = "https://pro-api.coinmarketcap.com"
    PRICE_REQUEST_TIMEOUT: float = 10.0

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent.parent.parent / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

settings = Settings()
