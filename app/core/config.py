from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: str = Field(default="dev", alias="APP_ENV")
    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    database_url: str = Field(
        default="sqlite+aiosqlite:///./quiz_board.db",
        alias="DATABASE_URL",
    )

    quiz_api_base_url: str = Field(default="http://127.0.0.1:8000", alias="QUIZ_API_BASE_URL")
    quiz_label_count: int = Field(default=4, ge=1, le=26, alias="QUIZ_LABEL_COUNT")
    quiz_default_size: int = Field(default=5, alias="QUIZ_DEFAULT_SIZE")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
