"""
Integration tests for site settings and the settings event stream.

System role: Verification of settings validation, persistence and push
"""

import asyncio
import json

import pytest

from mangaverse.application.services.site_settings_service import (
    KEEPALIVE_COMMENT,
    SiteSettingsService,
    settings_event_stream,
    validate_setting_value,
)
from mangaverse.core.exceptions import ValidationError
from mangaverse.core.settings_broadcaster import SettingsBroadcaster


def _payload(frame: str) -> dict:
    assert frame.startswith("data: ") and frame.endswith("\n\n")
    return json.loads(frame[len("data: "):])


class TestValidateSettingValue:
    @pytest.mark.parametrize(
        "value,type",
        [("Manga Reader", "string"), ("42", "number"), ("1.5", "number"), ("true", "boolean"),
         ('{"a": 1}', "json"), (None, "string")],
    )
    def test_valid(self, value, type) -> None:
        validate_setting_value(value, type)

    @pytest.mark.parametrize(
        "value,type",
        [("abc", "number"), ("yes", "boolean"), ("{oops", "json"), (None, "number")],
    )
    def test_invalid(self, value, type) -> None:
        with pytest.raises(ValidationError):
            validate_setting_value(value, type)


class TestSiteSettingsService:
    async def test_update_upserts_and_broadcasts(self, test_async_db) -> None:
        # Arrange
        broadcaster = SettingsBroadcaster()
        queue = broadcaster.subscribe()
        service = SiteSettingsService(db=test_async_db, broadcaster=broadcaster)

        # Act
        created = await service.update_setting("site_name", "Mangaverse")
        updated = await service.update_setting("site_name", "Mangaverse 2")
        settings = await service.list_settings()

        # Assert
        assert created.type == "string"
        assert updated.value == "Mangaverse 2"
        assert [s.key for s in settings] == ["site_name"]
        first = queue.get_nowait()
        second = queue.get_nowait()
        assert first["type"] == "settings_update"
        assert first["setting"]["value"] == "Mangaverse"
        assert second["settings"][0]["value"] == "Mangaverse 2"

    async def test_existing_type_is_kept(self, test_async_db) -> None:
        service = SiteSettingsService(db=test_async_db, broadcaster=SettingsBroadcaster())
        await service.update_setting("max_items", "10", "number")

        with pytest.raises(ValidationError):
            await service.update_setting("max_items", "ten")

    async def test_list_ordered_by_key(self, test_async_db) -> None:
        service = SiteSettingsService(db=test_async_db, broadcaster=SettingsBroadcaster())
        await service.update_setting("b_key", "2")
        await service.update_setting("a_key", "1")

        assert [s.key for s in await service.list_settings()] == ["a_key", "b_key"]


class TestSettingsEventStream:
    """SSE generator framing and lifecycle."""

    async def test_snapshot_then_updates(self, test_async_db) -> None:
        # Arrange
        broadcaster = SettingsBroadcaster()
        service = SiteSettingsService(db=test_async_db, broadcaster=broadcaster)
        await service.update_setting("site_name", "Before")
        queue = broadcaster.subscribe()
        snapshot = await service.list_settings()
        stream = settings_event_stream(snapshot, broadcaster, queue, keepalive_seconds=5)

        # Act
        first = await stream.__anext__()
        broadcaster.publish({"type": "settings_update", "setting": {"key": "site_name"}})
        second = await asyncio.wait_for(stream.__anext__(), timeout=1)
        await stream.aclose()

        # Assert
        assert _payload(first) == {
            "type": "settings",
            "settings": [s.model_dump(mode="json") for s in snapshot],
        }
        assert _payload(second)["type"] == "settings_update"
        assert broadcaster.subscriber_count == 0

    async def test_keepalive_when_idle(self) -> None:
        broadcaster = SettingsBroadcaster()
        queue = broadcaster.subscribe()
        stream = settings_event_stream([], broadcaster, queue, keepalive_seconds=0.01)

        await stream.__anext__()
        frame = await asyncio.wait_for(stream.__anext__(), timeout=1)
        await stream.aclose()

        assert frame == KEEPALIVE_COMMENT

    async def test_disconnect_ends_stream(self) -> None:
        broadcaster = SettingsBroadcaster()
        queue = broadcaster.subscribe()

        async def disconnected() -> bool:
            return True

        frames = [
            frame
            async for frame in settings_event_stream(
                [], broadcaster, queue, keepalive_seconds=5, is_disconnected=disconnected
            )
        ]

        assert len(frames) == 1
        assert broadcaster.subscriber_count == 0
