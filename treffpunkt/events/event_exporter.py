"""Event exporter module."""

from io import BytesIO

from discord import File
from loguru import logger

from treffpunkt import settings
from treffpunkt.events.calendar_encoder import PlatformEvent, write_calendar
from treffpunkt.output import disp_str, respond_message
from treffpunkt.utils.discord_utils import platform_call


async def export_events(context) -> int:
    """
    Reply to a command with all scheduled events of the guild as an
    iCalendar file.

    :param context: Command context
    :return: Number of exported events
    :raises PlatformError: When a Discord request fails
    :raises CalendarIoError: When the calendar could not be written
    """
    await platform_call("defer", context.defer())

    guild = context.guild
    scheduled_events = await platform_call(
        "fetch_events",
        guild.fetch_scheduled_events(with_user_count=False)
    )
    events = [
        PlatformEvent.from_scheduled_event(event)
        for event in scheduled_events
    ]

    buffer = BytesIO()
    size = write_calendar(events, buffer)
    buffer.seek(0)
    logger.debug(
        "Exporting {} event(s) of guild {} ({} bytes)",
        len(events),
        guild.id,
        size
    )

    await platform_call(
        "send_calendar",
        respond_message(
            context,
            disp_str("events_export_success").format(len(events)),
            file=File(buffer, filename=settings.calendar_filename)
        )
    )
    return len(events)
