# minidrive/core/config.py
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    base_dir: Path = Field(default_factory=Path.cwd)  # holds data/ and files/
    secret_key: str = "change-me"
    host: str = "127.0.0.1"
    port: int = 3000
    log_level: str = "INFO"

    # Tell pydantic-settings to load MINIDRIVE_* vars, falling back to .env
    model_config = SettingsConfigDict(
        env_prefix="MINIDRIVE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # ignore any extra stuff in .env
    )

    @property
    def data_dir(self) -> Path:
        return self.base_dir / "data"

    @property
    def users_file(self) -> Path:
        return self.data_dir / "users.json"

    @property
    def files_file(self) -> Path:
        return self.data_dir / "files.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
