"""
Ad schemas.

Dependencies: pydantic
System role: Ad inventory and ad serving API contracts
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CreateAdRequest(BaseModel):
    """Request schema for creating an ad. Needs a script or a banner image."""

    network_name: str | None = Field(None, max_length=255)
    ad_script: str | None = None
    banner_image: str | None = None
    banner_link: str | None = None
    width: int = Field(0, ge=0, description="0 means slot default")
    height: int = Field(0, ge=0, description="0 means slot default")
    slots: list[str] = Field(default_factory=list)
    enabled: bool = True

    @model_validator(mode="after")
    def require_creative(self) -> "CreateAdRequest":
        if not (self.ad_script and self.ad_script.strip()) and not (
            self.banner_image and self.banner_image.strip()
        ):
            raise ValueError("An ad needs either ad_script or banner_image")
        return self


class UpdateAdRequest(BaseModel):
    """Partial ad update."""

    network_name: str | None = Field(None, max_length=255)
    ad_script: str | None = None
    banner_image: str | None = None
    banner_link: str | None = None
    width: int | None = Field(None, ge=0)
    height: int | None = Field(None, ge=0)
    slots: list[str] | None = None
    enabled: bool | None = None

    @field_validator("width", "height", "slots", "enabled")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class AdResponse(BaseModel):
    """Stored ad as seen by the admin console."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    network_name: str | None
    ad_script: str | None
    banner_image: str | None
    banner_link: str | None
    width: int
    height: int
    slots: list[str]
    enabled: bool
    created_at: datetime


class ServedAdResponse(BaseModel):
    """Ad ready to render: kind and effective dimensions resolved."""

    id: int
    kind: Literal["script", "banner"]
    network_name: str | None
    ad_script: str | None
    banner_image: str | None
    banner_link: str | None
    width: int
    height: int
    slots: list[str]


class AdClickRequest(BaseModel):
    """Optional click context."""

    slot: str | None = Field(None, max_length=64)
    visitor_id: str | None = Field(None, max_length=128)
