"""
API configuration schemas.

Dependencies: pydantic
System role: Admin catalog-source registry contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CreateApiConfigRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    base_url: str = Field(..., min_length=1, max_length=2048)
    enabled: bool = True
    priority: int = Field(1, ge=0)
    endpoints: dict[str, str] = Field(default_factory=dict)


class UpdateApiConfigRequest(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    base_url: str | None = Field(None, min_length=1, max_length=2048)
    enabled: bool | None = None
    priority: int | None = Field(None, ge=0)
    endpoints: dict[str, str] | None = None

    @field_validator("name", "base_url", "enabled", "priority", "endpoints")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class ApiConfigResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    base_url: str
    enabled: bool
    priority: int
    endpoints: dict[str, str]
    created_at: datetime
    updated_at: datetime
