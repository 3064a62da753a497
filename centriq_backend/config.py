from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Environment
    DEV_MODE: bool = True  # Set to False in production
    LOG_LEVEL: str = "INFO"
    FRONTEND_URL: str = "http://localhost:5173"  # Vite dev server of the dashboard SPA

    # API Settings
    API_PREFIX: str = "/api"

    # Upstream campaign / feed API
    API_BASE_URL: str = "http://localhost:3001/api"
    HTTP_TIMEOUT_SECONDS: float = 30.0

    # Reporting API (job stats)
    REPORTS_API_URL: str = "https://app-qa.goarya.com/api/v3"
    REPORTS_API_KEY: str = ""  # Sent verbatim as the Authorization header

    # Table views
    PAGE_SIZE_OPTIONS: List[int] = [10, 25, 50]
    DEFAULT_PAGE_SIZE: int = 10

    # Response cache freshness windows (seconds)
    CAMPAIGNS_CACHE_TTL: float = 30
    CLIENTS_CACHE_TTL: float = 60
    JOBSTATS_CACHE_TTL: float = 60
    FEED_NODES_CACHE_TTL: float = 5 * 60
    FEED_FIELDS_CACHE_TTL: float = 10 * 60  # fields don't change often

    class Config:
        env_file = ".env"

settings = Settings()
