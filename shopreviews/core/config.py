from functools import lru_cache
from typing import Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]
StorageBackend = Literal["mongo", "memory"]
ReviewSourceKind = Literal["memory", "http"]

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "ShopReviews"
    DEBUG: bool = False
    GIT_SHA: str = "unknown"

    # Storage
    STORAGE_BACKEND: StorageBackend = "mongo"
    MONGO_URI: str = ""
    MONGO_DB: str = "shopreviews"
    MONGO_TLS: bool = False

    # Redis (optional, product cache only)
    REDIS_URL: str = ""
    product_cache_ttl: int = 10 * 60            # 10 minutes
    product_cache_prefix: str = "product"       # redis key namespace

    # Review source (external review provider)
    REVIEW_SOURCE: ReviewSourceKind = "memory"
    REVIEW_SOURCE_URL: str = ""
    review_source_timeout_s: float = 10.0

    # Pagination
    default_page_limit: int = 50
    max_page_limit: int = 500

    # HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    api_prefix: str = "/api"
    ALLOWED_ORIGINS: str = ""                   # CSV
    SEED_SAMPLE_DATA: bool = False

    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

    @property
    def allowed_origins(self) -> list[str]:
        return [o.strip() for o in self.ALLOWED_ORIGINS.split(",") if o.strip()]

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Cache makes it cheap to inject via FastAPI dependencies.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
