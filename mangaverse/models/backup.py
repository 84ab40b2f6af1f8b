"""
Backup and restore schemas.

Dependencies: pydantic
System role: Admin backup contracts
"""

from typing import Any

from pydantic import BaseModel, Field


class BackupDocument(BaseModel):
    """Full export of persisted application data."""

    version: str = "1.0"
    timestamp: str
    database: str = "mangaverse"
    tables: dict[str, list[dict[str, Any]]]
    counts: dict[str, int] = Field(default_factory=dict)


class RestoreRequest(BaseModel):
    """Backup document plus restore options."""

    backup: BackupDocument
    clear_existing: bool = False


class RestoreResponse(BaseModel):
    success: bool = True
    restored: dict[str, int]
    backup_version: str
    backup_timestamp: str
