"""
Unified application settings.

Groups the per-concern settings under one object so callers reach them as
settings.database, settings.auth, settings.catalog and settings.settings_stream.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from mangaverse.configs.auth import AuthSettings
from mangaverse.configs.base import BaseSettings
from mangaverse.configs.catalog import CatalogSettings
from mangaverse.configs.database import DatabaseSettings
from mangaverse.configs.site_settings import SiteSettingsStreamSettings


class Settings(BaseSettings):
    """Application settings; nested groups read their own env prefixes."""

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)
    settings_stream: SiteSettingsStreamSettings = Field(default_factory=SiteSettingsStreamSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Process-wide settings, read from the environment on first use.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
