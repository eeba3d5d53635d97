from __future__ import annotations

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.constants import DEFAULT_CONFIG_FILE, DEFAULT_DIST

# Load .env once, early
load_dotenv()


class Settings(BaseSettings):
    """CLI defaults (env or .env), e.g. OFFCACHE_CONFIG_FILE=offline.json."""

    model_config = SettingsConfigDict(env_prefix="OFFCACHE_", env_file=None, extra="ignore")

    config_file: str = Field(default=DEFAULT_CONFIG_FILE)
    dist: str = Field(default=DEFAULT_DIST)


def get_settings() -> Settings:
    return Settings()
