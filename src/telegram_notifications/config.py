from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    TELEGRAM_BOT_TOKEN: Optional[str] = Field(None, description="Default bot token used when a message sets none")
    TELEGRAM_FILE_PARSE_MODE: str = Field("Markdown", description="Parse mode applied to file captions by default")
    TEMPLATES_DIR: str = Field("templates", description="Directory holding caption templates")
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
