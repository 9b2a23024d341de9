from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache
import yaml
from pathlib import Path
from typing import Optional, Tuple, Union

from .errors import ConfigurationError
from .schemas.plugin_config import PublisherConfig

class Settings(BaseSettings):
    SLACK_TOKEN: Optional[str] = Field(None, description="Slack Bot User OAuth Token")
    SLACK_CHANNEL: Optional[str] = Field(None, description="Channel receiving release announcements")
    LOG_LEVEL: str = "INFO"
    RELEASE_CONFIG_PATH: str = Field(".release-announcer.yaml", description="Path to the publisher YAML config")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()

def require_slack_target(settings: Settings) -> Tuple[str, str]:
    if not settings.SLACK_TOKEN or not settings.SLACK_CHANNEL:
        raise ConfigurationError("SLACK_TOKEN or SLACK_CHANNEL is not set in the environment variables.")
    return settings.SLACK_TOKEN, settings.SLACK_CHANNEL

def load_publisher_config(path: Union[str, Path]) -> PublisherConfig:
    path = Path(path)
    if not path.exists():
        return PublisherConfig()
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return PublisherConfig.model_validate(data)
