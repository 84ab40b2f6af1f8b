"""
Site setting schemas.

Dependencies: pydantic
System role: Site settings API and stream contracts
"""

from datetime import datetime
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict

SettingType = Literal["string", "number", "boolean", "json"]


class SiteSettingResponse(BaseModel):
    """A site setting."""

    model_config = ConfigDict(from_attributes=True)

    key: str
    value: str | None
    type: SettingType
    updated_at: datetime


class UpdateSiteSettingRequest(BaseModel):
    """Set a setting's value; type defaults to the stored type or string."""

    value: str | None
    type: SettingType | None = None


class SettingsEventType(str, Enum):
    """Event types pushed on the settings stream."""

    SETTINGS = "settings"
    SETTINGS_UPDATE = "settings_update"
