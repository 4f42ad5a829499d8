"""Events Cog Module."""
from typing import Optional

from discord import Colour, Embed
from discord.ext import bridge, commands
from discord.ext.bridge import BridgeContext, BridgeOption
from loguru import logger

from treffpunkt import settings
from treffpunkt.events import event_creator, event_exporter
from treffpunkt.events.errors import (
    CalendarIoError, ConfigError, EventsError, ParseError, PlatformError,
    ZoneError
)
from treffpunkt.events.guild_config import GuildConfig
from treffpunkt.output import disp_str, respond_message
from treffpunkt.output.error_handler import TreffpunktCommandError

START_DESCRIPTION = "yyyy-mm-dd hh:mm, example: 2012-12-21 12:34"
END_DESCRIPTION = "yyyy-mm-dd hh:mm, default start + 1h"


def to_command_error(exception: EventsError) -> TreffpunktCommandError:
    """
    Translate an events error into a command error with display strings.

    :param exception: Events error raised by an orchestrator
    :return: Command error to raise to the error handler
    """
    if isinstance(exception, ZoneError):
        return TreffpunktCommandError(
            "events_zone_error",
            exception.field,
            exception.civil,
            settings.timezone
        )

    if isinstance(exception, ParseError):
        if exception.field == event_creator.END_PRECEDES_START:
            return TreffpunktCommandError("events_end_before_start")
        return TreffpunktCommandError("events_parse_error", exception.field)

    if isinstance(exception, ConfigError):
        return TreffpunktCommandError("events_no_channel")

    if isinstance(exception, PlatformError):
        return TreffpunktCommandError(
            "events_platform_error",
            disp_str(f"events_step_{exception.step}")
        )

    if isinstance(exception, CalendarIoError):
        return TreffpunktCommandError("events_export_error")

    return TreffpunktCommandError("events_unknown_error")


class EventsCog(commands.Cog, name="events"):
    """
    Meetups.

    Create scheduled events with an announcement and a discussion thread,
    and export all scheduled events of a server as a calendar file.
    """

    __slots__ = ["bot", "guild_config"]

    # Using forward references to avoid cyclic imports
    # noinspection PyUnresolvedReferences
    def __init__(
            self,
            bot: "TreffpunktBot",
            guild_config: Optional[GuildConfig] = None
    ) -> None:
        """
        Initializer for the EventsCog class.

        :param bot: Treffpunkt bot object
        :param guild_config: Guild config, loaded from the guild config
            file if not given
        """
        self.bot = bot
        self.guild_config = (
            guild_config if guild_config is not None else GuildConfig.load()
        )

    @bridge.bridge_command(
        name="export_events",
        description="Export all events on this server as ICS calendar file"
    )
    @bridge.guild_only()
    async def export_events(self, context: BridgeContext) -> None:
        """
        Export all events on this server as ICS calendar file.

        :param context: Command context
        """
        try:
            count = await event_exporter.export_events(context)
        except EventsError as e:
            raise to_command_error(e) from e

        logger.info(
            "Exported {} event(s) of guild {} for {}",
            count,
            context.guild.id,
            context.author.id
        )

    @bridge.bridge_command(name="event", description="Create a new meetup")
    @bridge.guild_only()
    @bridge.has_permissions(manage_events=True)
    async def event(
            self,
            context: BridgeContext,
            name: str,
            location: str,
            start: BridgeOption(str, START_DESCRIPTION),
            end: BridgeOption(str, END_DESCRIPTION, required=False) = None
    ) -> None:
        """
        Create a new meetup.

        Times are read in the configured timezone. When quoting them in
        the prefix command, use `"2012-12-21 12:34"`.

        :param context: Command context
        :param name: Event name
        :param location: Event location
        :param start: Start time, yyyy-mm-dd hh:mm
        :param end: Optional end time, defaults to one hour after start
        """
        try:
            scheduled_event = await event_creator.create_event(
                context,
                name=name,
                location=location,
                start=start,
                end=end,
                guild_config=self.guild_config
            )
        except ParseError as e:
            logger.trace("Rejected event input from {}: {}", context.author, e)
            raise to_command_error(e) from e
        except EventsError as e:
            raise to_command_error(e) from e

        await respond_message(
            context,
            embed=Embed(
                title=disp_str("events_done"),
                colour=Colour(settings.embed_color_success),
                description=disp_str("events_create_success").format(
                    name,
                    event_creator.event_link(
                        context.guild.id,
                        scheduled_event.id
                    )
                )
            ),
            ephemeral=True
        )
