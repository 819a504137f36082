from typing import Literal, List

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    PROJECT_NAME: str = "Brewery API"
    API_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # "memory" keeps everything in-process; handy for local runs without MongoDB
    STORE_BACKEND: Literal["mongo", "memory"] = "mongo"
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "brewery"

    SEED_ON_STARTUP: bool = True
    SEED_BLOCKING_STARTUP: bool = True

    METRICS_ENABLED: bool = True
    CORS_ORIGINS_STR: str = "http://localhost:3000"

    @property
    def CORS_ORIGINS(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS_STR.split(',') if origin.strip()]


@lru_cache()
def get_settings():
    return Settings()
