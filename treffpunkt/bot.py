"""
Main bot module.

Entry point for running the bot.
"""
import sys
import traceback
from typing import Optional

import discord
from discord import TextChannel
from discord.ext import bridge, commands
from loguru import logger

from treffpunkt import settings
from treffpunkt.events.events_cog import EventsCog
from treffpunkt.events.guild_config import GuildConfig
from treffpunkt.output import send_message
from treffpunkt.output.error_handler import handle_command_error


def setup_logging() -> None:
    """Replace the default logger output with the console format."""
    logger.remove()
    logger.level("DEBUG", color="<fg 251>")
    logger.add(
        sys.stderr,
        format="<bg 239><fg 15> {time:YYYY-MM-DD HH:mm:ss.SSS} </fg 15></bg 239>"
               "<bg 32><lvl><b> {level} </b></lvl></bg 32>"
               "<n> {message}</n>",
        level=settings.console_log_level
    )


class TreffpunktBot(bridge.Bot):
    """Treffpunkt Discord bot."""

    __slots__ = [
        "master_log_id",
        "log_channel",
        "first_start"
    ]

    def __init__(self) -> None:
        """Initializer for the TreffpunktBot class."""
        intents = discord.Intents.default()
        intents.message_content = True

        super().__init__(
            command_prefix=settings.command_prefix,
            help_command=None,
            description=settings.bot_description,
            intents=intents
        )

        self.log_channel: Optional[TextChannel] = None
        self.master_log_id: Optional[int] = None
        self.first_start = True

    async def on_error(self, event_method: str, *args, **kwargs) -> None:
        """
        Called when an event raises an uncaught exception.

        :param event_method: The name of the event that raised the
            exception
        :param args: Positional arguments for the event that raised the
            exception
        :param kwargs: Keyword arguments for the event that raised the
            exception
        """
        logger.error(
            "Exception raised in {}.\n\t{}",
            event_method,
            traceback.format_exc().replace("\n", "\n\t")
        )

    async def on_command_error(
            self,
            context: commands.Context,
            exception: Exception
    ) -> None:
        """
        Called when a prefix command triggers an error.

        :param context: Context of error-triggering command
        :param exception: Exception that the command raised
        """
        await handle_command_error(context, exception)

    async def on_application_command_error(
            self,
            context: discord.ApplicationContext,
            exception: discord.DiscordException
    ) -> None:
        """
        Called when a slash command triggers an error.

        :param context: Context of error-triggering command
        :param exception: Exception that the command raised
        """
        await handle_command_error(context, exception)

    async def on_ready(self) -> None:
        """
        Called when the bot is done preparing the data received from
        Discord.
        """
        if self.first_start:
            await self.on_first_ready()

    async def on_first_ready(self) -> None:
        """Startup procedure: set up the master log channel."""
        logger.trace("Setting up master log channel.")
        log_channel = self.get_channel(settings.master_log_channel)
        if log_channel is not None and isinstance(log_channel, TextChannel):
            self.log_channel = log_channel
            logger.info(
                "Set up master log channel on #{} ({})",
                log_channel.name,
                log_channel.id
            )

            async def log_message(msg: str) -> None:
                await send_message(
                    self.log_channel,
                    msg,
                    token_guard=True,
                    path_guard=True
                )

            self.master_log_id = logger.add(
                log_message,
                colorize=False,
                backtrace=False,
                catch=False,
                format="**[{time:YYYY-MM-DD HH:mm:ss.SSS!UTC}][{level}]** "
                       "```\n{message}\n```",
                level=settings.master_log_level
            )
        elif settings.master_log_channel:
            logger.error(
                "Bot master logging channel ID {} not found; setting ignored.",
                settings.master_log_channel
            )

        logger.info(
            "Treffpunkt has started on {} ({}) with {} server(s).",
            self.user.name,
            self.user.id,
            len(self.guilds)
        )

        self.first_start = False

    def load_cogs(self, guild_config: Optional[GuildConfig] = None) -> None:
        """
        Load all cogs.

        This has to happen before the bot connects so that the slash
        commands are registered with Discord.

        :param guild_config: Guild config, loaded from file if not given
        """
        logger.info("Loading events cog.")
        self.add_cog(EventsCog(self, guild_config))


def main() -> None:
    """Run the bot."""
    setup_logging()

    if not settings.bot_token:
        logger.critical("No bot token set; set TREFFPUNKT_BOT_TOKEN.")
        sys.exit(1)

    treffpunkt = TreffpunktBot()
    treffpunkt.load_cogs()
    treffpunkt.run(settings.bot_token)


if __name__ == "__main__":
    main()
