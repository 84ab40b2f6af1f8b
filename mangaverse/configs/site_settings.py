"""
Site settings push channel configuration.

Dependencies: pydantic_settings
System role: Server-sent events tuning for site settings updates
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class SiteSettingsStreamSettings(BaseSettings):
    """Keepalive and buffering for the settings SSE stream."""

    keepalive_seconds: float = Field(
        default=15.0,
        description="Seconds between keepalive comments on idle streams",
    )
    queue_size: int = Field(
        default=16,
        description="Pending updates buffered per subscriber before dropping",
    )

    class Config:
        """Pydantic config."""

        env_prefix = "SETTINGS_STREAM_"
        case_sensitive = False
        extra = "ignore"
