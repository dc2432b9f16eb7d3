from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Phonecheck API", alias="APP_NAME")
    app_env: str = Field(default="local", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    # None means the data set shipped inside phonecheck/metadata/data
    metadata_dir: str | None = Field(default=None, alias="METADATA_DIR")
    default_region: str | None = Field(default=None, alias="DEFAULT_REGION")
    max_input_length: int = Field(default=250, alias="MAX_INPUT_LENGTH")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
