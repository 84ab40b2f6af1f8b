"""
External catalog configuration settings.

Base URLs, timeouts and retry budget for the MangaDex and MangaPlus
adapters, plus image proxy rules.

Dependencies: pydantic, pydantic_settings
System role: Upstream catalog configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from mangaverse.configs.base import BaseSettings


class CatalogSettings(BaseSettings):
    """MangaDex / MangaPlus adapter and image proxy configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CATALOG_",
        case_sensitive=False,
        extra="ignore",
    )

    mangadex_base_url: str = Field(
        default="https://api.mangadex.org",
        description="MangaDex REST API root",
    )
    mangadex_uploads_url: str = Field(
        default="https://uploads.mangadex.org",
        description="MangaDex cover upload host",
    )
    mangaplus_base_url: str = Field(
        default="https://jumpg-webapi.tokyo-cdn.com/api",
        description="MangaPlus web API root",
    )
    request_timeout: float = Field(default=15.0, description="Upstream request timeout in seconds")
    max_retries: int = Field(default=3, ge=1, description="Attempts per upstream request")
    cover_size: int = Field(default=512, description="MangaDex cover thumbnail width")

    image_proxy_path: str = Field(
        default="/api/v1/image-proxy",
        description="Public path of the image proxy endpoint",
    )
    image_proxy_allowed_hosts: list[str] = Field(
        default=["mangadex.org", "mangadex.network"],
        description="Domains (and their subdomains) the image proxy may fetch",
    )
    placeholder_image_path: str | None = Field(
        default=None,
        description="Local stock cover served when an image cannot be proxied",
    )
