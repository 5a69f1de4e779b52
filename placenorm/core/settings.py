from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Place Normalizer", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    diagnostics_log_level: str = Field(default="WARNING", alias="DIAGNOSTICS_LOG_LEVEL")
    # None selects the table bundled with the package.
    character_replacements_path: Path | None = Field(
        default=None,
        alias="CHARACTER_REPLACEMENTS_PATH",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
