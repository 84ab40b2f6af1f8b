"""
Site settings service.

Reads and updates key/value site settings and pushes every committed
change to live SSE subscribers.

Dependencies: mangaverse.boundary.db.CRUD, mangaverse.core.settings_broadcaster
System role: Runtime site configuration use case orchestration
"""

import asyncio
import json
import logging
from typing import AsyncGenerator, Awaitable, Callable

from sqlalchemy.ext.asyncio import AsyncSession

from mangaverse.boundary.db.CRUD.site_setting_crud import site_setting_crud
from mangaverse.core.exceptions import ValidationError
from mangaverse.core.settings_broadcaster import SettingsBroadcaster
from mangaverse.models.site_setting import SettingsEventType, SiteSettingResponse

logger = logging.getLogger(__name__)

KEEPALIVE_COMMENT = ": keepalive\n\n"


def validate_setting_value(value: str | None, type: str) -> None:
    """
    Check that a serialized value parses as its declared type.

    Args:
        value: Serialized value
        type: string, number, boolean or json

    Raises:
        ValidationError: Value does not match the type
    """
    if value is None:
        if type != "string":
            raise ValidationError(f"A {type} setting needs a value", field="value")
        return
    if type == "number":
        try:
            float(value)
        except ValueError as e:
            raise ValidationError("Value is not a number", field="value") from e
    elif type == "boolean":
        if value not in ("true", "false"):
            raise ValidationError('Boolean settings must be "true" or "false"', field="value")
    elif type == "json":
        try:
            json.loads(value)
        except json.JSONDecodeError as e:
            raise ValidationError("Value is not valid JSON", field="value") from e


def format_sse(payload: dict) -> str:
    return f"data: {json.dumps(payload, default=str)}\n\n"


class SiteSettingsService:
    """Site settings reads, admin updates and change fan-out."""

    def __init__(self, db: AsyncSession, broadcaster: SettingsBroadcaster) -> None:
        """
        Initialize settings service.

        Args:
            db: Async SQLAlchemy session
            broadcaster: Fan-out channel for settings_update events
        """
        self.db = db
        self.broadcaster = broadcaster

    async def list_settings(self) -> list[SiteSettingResponse]:
        rows = await site_setting_crud.list_ordered(self.db)
        return [SiteSettingResponse.model_validate(row) for row in rows]

    async def update_setting(
        self,
        key: str,
        value: str | None,
        type: str | None = None,
    ) -> SiteSettingResponse:
        """
        Upsert a setting, commit, then broadcast the change.

        Args:
            key: Setting name
            value: Serialized value
            type: Value type; defaults to the stored type, else string

        Returns:
            SiteSettingResponse: Stored setting

        Raises:
            ValidationError: Value does not parse as the type
        """
        if type is None:
            existing = await site_setting_crud.get_by_key(self.db, key)
            type = existing.type if existing is not None else "string"
        validate_setting_value(value, type)

        row = await site_setting_crud.upsert(self.db, key, value, type)
        setting = SiteSettingResponse.model_validate(row)
        await self.db.commit()

        settings = await self.list_settings()
        delivered = self.broadcaster.publish(
            {
                "type": SettingsEventType.SETTINGS_UPDATE.value,
                "setting": setting.model_dump(mode="json"),
                "settings": [s.model_dump(mode="json") for s in settings],
            }
        )
        logger.info(
            "Site setting updated",
            extra={"key": key, "type": type, "subscribers_notified": delivered},
        )
        return setting


async def settings_event_stream(
    snapshot: list[SiteSettingResponse],
    broadcaster: SettingsBroadcaster,
    queue: asyncio.Queue,
    keepalive_seconds: float = 15.0,
    is_disconnected: Callable[[], Awaitable[bool]] | None = None,
) -> AsyncGenerator[str, None]:
    """
    SSE body for the settings stream.

    Emits the snapshot first, then each broadcast update, with keepalive
    comments while idle. Unsubscribes the queue when the client goes away.

    Args:
        snapshot: Settings at connect time
        broadcaster: Broadcaster the queue was subscribed to
        queue: This subscriber's queue
        keepalive_seconds: Idle interval between keepalive comments
        is_disconnected: Optional disconnect check (Request.is_disconnected)

    Yields:
        str: SSE frames
    """
    try:
        yield format_sse(
            {
                "type": SettingsEventType.SETTINGS.value,
                "settings": [s.model_dump(mode="json") for s in snapshot],
            }
        )
        while True:
            if is_disconnected is not None and await is_disconnected():
                break
            try:
                event = await asyncio.wait_for(queue.get(), timeout=keepalive_seconds)
            except asyncio.TimeoutError:
                yield KEEPALIVE_COMMENT
                continue
            yield format_sse(event)
    finally:
        broadcaster.unsubscribe(queue)
