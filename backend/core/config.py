from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # Backend
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    APP_DEBUG: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Declension sources
    DECLENSION_PRIMARY_URL: str = "https://ru.wiktionary.org/api/rest_v1/page/html/"
    DECLENSION_PRIMARY_PAGE_URL: str = "https://ru.wiktionary.org/wiki/"
    DECLENSION_SECONDARY_URL: str = "https://en.wiktionary.org/w/api.php"
    DECLENSION_SECONDARY_PAGE_URL: str = "https://en.wiktionary.org/wiki/"
    DECLENSION_REQUEST_TIMEOUT: float = 8.0  # Seconds per upstream fetch
    DECLENSION_USER_AGENT: str = "padezh-backend/0.1 (declension resolver)"

    # Resolver
    DECLENSION_CACHE_TTL: float | None = None  # None keeps entries for the process lifetime
    DECLENSION_MAX_CONCURRENCY: int = 8
    DECLENSION_BATCH_LIMIT: int = 50

    @property
    def is_production(self) -> bool:
        return not self.APP_DEBUG

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
