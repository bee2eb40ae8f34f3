import os

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    GEMINI_API_KEY: str = os.environ.get("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = "gemini-2.5-flash"
    GEMINI_TEMPERATURE: float = 0.4

    MODEL_MAX_RETRIES: int = 2
    MODEL_RETRY_INITIAL_DELAY: float = 0.5
    MODEL_RETRY_MAX_DELAY: float = 4.0
    MAX_TOOL_ITERATIONS: int = 5

    NEWS_API_KEY: str = os.environ.get("NEWS_API_KEY", "")
    NEWS_API_URL: str = "https://api.thenewsapi.com/v1/news/top"
    NEWS_SEARCH_TERMS: str = "agriculture,farming,crops,mandi,rural"
    NEWS_CACHE_TTL_SECONDS: int = 3600
    LIVE_NEWS_ENABLED: bool = False

    SESSION_STORE: str = "memory"
    SESSION_STORE_PATH: str = os.environ.get(
        "SESSION_STORE_PATH", ".data/farmer_sessions.json"
    )

    LOG_LEVEL: str = "INFO"


settings = Settings()
