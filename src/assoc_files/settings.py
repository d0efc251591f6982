from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from assoc_files.common import AppInfo, LoggingConfig
from assoc_files.constants import DEFAULT_PLAN_FILENAME


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    logging: LoggingConfig = LoggingConfig()
    plan_filename: str = DEFAULT_PLAN_FILENAME

    model_config = SettingsConfigDict(
        env_prefix="ASSOC_FILES_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None

# Convenience access - pre-initialized singleton
settings = get_settings()


__all__ = [
    "Settings",
    "get_settings",
    "settings",
]
