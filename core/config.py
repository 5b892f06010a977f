from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import ConfigDict

class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env")

    ENV: str = "development"

    DATABASE_URL: str = "sqlite:///./bekosher.db"
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    # Opening hours are stored as wall-clock times of the establishment
    TIMEZONE: str = "America/Sao_Paulo"
    DEFAULT_PHONE_REGION: str = "BR"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
