from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
from typing import Optional

class Settings(BaseSettings):
    ROCKETCHAT_WEBHOOK_URL: Optional[str] = Field(None, description="Incoming webhook URL from Rocket.Chat")
    ROCKETCHAT_CHANNEL: Optional[str] = Field(None, description="Channel to post to (#channel or @user)")
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
