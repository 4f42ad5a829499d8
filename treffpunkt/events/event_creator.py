"""
Event creator module.

Creates a scheduled event on Discord together with an announcement in
the guild's announcement channel. The announcement gets the RSVP
reactions and a discussion thread that the organizer is added to.

Every step is awaited in sequence and the first failure aborts the
remaining ones. Nothing is rolled back, so a failure after the event
was created leaves the event in place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from discord import ScheduledEvent
from loguru import logger

from treffpunkt import settings
from treffpunkt.events.date_normalizer import TzLike, normalize
from treffpunkt.events.errors import ParseError
from treffpunkt.events.guild_config import GuildConfig
from treffpunkt.utils.discord_utils import get_guild_channel, platform_call

END_PRECEDES_START = "end precedes start"


@dataclass
class EventDraft:
    """Start and end of an event that is about to be created."""
    start: datetime
    end: datetime

    @classmethod
    def from_input(
            cls,
            start: str,
            end: Optional[str] = None,
            zone: Optional[TzLike] = None
    ) -> "EventDraft":
        """
        Build an event draft from user input.

        :param start: Start time input
        :param end: Optional end time input
        :param zone: Timezone to read the inputs in
        :return: Event draft
        :raises ParseError: When an input is malformed or the end does
            not come after the start
        :raises ZoneError: When an input does not exist in local time
        """
        start_date, end_date = normalize(start, end, zone)
        if end_date <= start_date:
            raise ParseError(
                END_PRECEDES_START,
                f"End {end_date.isoformat()} does not come after "
                f"start {start_date.isoformat()}"
            )

        return cls(start=start_date, end=end_date)


def event_link(guild_id: int, event_id: int) -> str:
    """
    Get the Discord link to a scheduled event.

    :param guild_id: Discord guild ID
    :param event_id: Scheduled event ID
    :return: Event URL
    """
    return f"{settings.event_url.rstrip('/')}/{guild_id}/{event_id}"


def format_announcement(
        name: str,
        guild_id: int,
        event_id: int,
        author_mention: str
) -> str:
    """
    Format the announcement message of an event.

    :param name: Event name
    :param guild_id: Discord guild ID
    :param event_id: Scheduled event ID
    :param author_mention: Mention string of the organizer
    :return: Announcement text
    """
    return settings.event_announcement_template.format(
        name=name,
        url=event_link(guild_id, event_id),
        author=author_mention
    )


async def create_event(
        context,
        name: str,
        location: str,
        start: str,
        end: Optional[str],
        guild_config: GuildConfig
) -> ScheduledEvent:
    """
    Create a scheduled event and announce it.

    :param context: Command context
    :param name: Event name
    :param location: Event location
    :param start: Start time input
    :param end: Optional end time input
    :param guild_config: Guild config holding the announcement channels
    :return: Created scheduled event
    :raises ParseError: When the dates are malformed or out of order
    :raises ZoneError: When a date does not exist in local time
    :raises ConfigError: When the guild has no announcement channel
    :raises PlatformError: When a Discord request fails
    """
    await platform_call("defer", context.defer(ephemeral=True))

    draft = EventDraft.from_input(start, end)
    guild = context.guild
    author = context.author
    logger.debug(
        "Creating event {} in guild {} from {} to {}",
        name,
        guild.id,
        draft.start.isoformat(),
        draft.end.isoformat()
    )

    event: ScheduledEvent = await platform_call(
        "create_event",
        guild.create_scheduled_event(
            name=name,
            location=location,
            start_time=draft.start,
            end_time=draft.end,
            reason=f"Event created by {author} ({author.id})"
        )
    )
    logger.info(
        "Created scheduled event {} ({}) in guild {}",
        name,
        event.id,
        guild.id
    )

    announcement = format_announcement(
        name,
        guild.id,
        event.id,
        author.mention
    )
    channel_id = guild_config.announcement_channel_id(guild.id)
    channel = await platform_call(
        "fetch_channel",
        get_guild_channel(guild, channel_id)
    )

    message = await platform_call(
        "post_announcement",
        channel.send(announcement)
    )
    for reaction in guild_config.rsvp_reactions:
        logger.trace("Adding reaction {} to message {}", reaction, message.id)
        await platform_call("add_reaction", message.add_reaction(reaction))

    thread = await platform_call(
        "create_thread",
        message.create_thread(name=name)
    )
    await platform_call("add_thread_member", thread.add_user(author))
    logger.info(
        "Announced event {} in channel {} with thread {}",
        event.id,
        channel_id,
        thread.id
    )

    return event
