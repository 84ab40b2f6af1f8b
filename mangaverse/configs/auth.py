"""
Authentication configuration settings.

JWT signing parameters and password hashing cost.

Dependencies: pydantic, pydantic_settings
System role: Token and password configuration for the auth layer
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from mangaverse.configs.base import BaseSettings

DEV_JWT_SECRET = "mangaverse-dev-secret-change-me"


class AuthSettings(BaseSettings):
    """JWT and bcrypt configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    jwt_secret: str = Field(
        default=DEV_JWT_SECRET,
        min_length=16,
        description="HMAC secret used to sign access tokens",
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    token_expire_days: int = Field(default=7, ge=1, description="Access token lifetime in days")
    bcrypt_rounds: int = Field(default=12, ge=4, le=31, description="bcrypt cost factor")

    @property
    def uses_dev_secret(self) -> bool:
        """True when the built-in development secret is still in use."""
        return self.jwt_secret == DEV_JWT_SECRET
