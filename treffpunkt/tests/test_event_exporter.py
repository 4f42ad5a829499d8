"""Tests for exporting a guild's scheduled events."""

from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from icalendar import Calendar

from treffpunkt.events.errors import PlatformError
from treffpunkt.events.event_exporter import export_events
from treffpunkt.tests.helpers import FakePlatform, http_exception


def scheduled_event(event_id: int, name: str, location="Biergarten"):
    """Test helper: Discord scheduled event."""
    return SimpleNamespace(
        id=event_id,
        name=name,
        description=None,
        start_time=datetime(2024, 6, 1, 17, 0, tzinfo=timezone.utc),
        end_time=None,
        location=SimpleNamespace(value=location)
    )


class TestExportEvents:
    """Tests for export_events()."""

    @pytest.mark.asyncio
    async def test_sends_calendar_attachment(self):
        platform = FakePlatform()
        platform.guild.fetch_scheduled_events.side_effect = None
        platform.guild.fetch_scheduled_events.return_value = [
            scheduled_event(1, "Stammtisch"),
            scheduled_event(2, "Wandern"),
        ]

        count = await export_events(platform.context)

        assert count == 2
        platform.guild.fetch_scheduled_events.assert_awaited_once_with(
            with_user_count=False
        )
        _, _, kwargs = platform.call("respond")
        attachment = kwargs["file"]
        assert attachment.filename == "calendar.ics"

        calendar = Calendar.from_ical(attachment.fp.read())
        entries = calendar.walk("VEVENT")
        assert [str(entry["SUMMARY"]) for entry in entries] == [
            "Stammtisch",
            "Wandern",
        ]
        assert str(entries[0]["LOCATION"]) == "Biergarten"

    @pytest.mark.asyncio
    async def test_defers_first(self):
        platform = FakePlatform()
        await export_events(platform.context)
        assert platform.call_names() == [
            "defer",
            "fetch_scheduled_events",
            "respond",
        ]

    @pytest.mark.asyncio
    async def test_no_events(self):
        platform = FakePlatform()
        count = await export_events(platform.context)

        assert count == 0
        _, _, kwargs = platform.call("respond")
        data = kwargs["file"].fp.read()
        assert b"BEGIN:VCALENDAR" in data
        assert b"BEGIN:VEVENT" not in data

    @pytest.mark.asyncio
    async def test_fetch_failure(self):
        platform = FakePlatform()
        platform.fail(platform.guild.fetch_scheduled_events, http_exception())

        with pytest.raises(PlatformError) as excinfo:
            await export_events(platform.context)

        assert excinfo.value.step == "fetch_events"
        assert "respond" not in platform.call_names()

    @pytest.mark.asyncio
    async def test_send_failure(self):
        platform = FakePlatform()
        platform.fail(platform.context.respond, http_exception())

        with pytest.raises(PlatformError) as excinfo:
            await export_events(platform.context)

        assert excinfo.value.step == "send_calendar"
