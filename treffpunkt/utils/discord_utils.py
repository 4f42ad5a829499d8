"""
Discord utilities module.

A collection of useful functions that retrieve stuff from Discord.
"""
from typing import Awaitable, TypeVar

from discord import DiscordException, Forbidden, Guild, HTTPException, NotFound
from discord.abc import GuildChannel
from loguru import logger

from treffpunkt.events.errors import PlatformError

FETCH_FAIL_EXCEPTIONS = (NotFound, Forbidden, HTTPException)

T = TypeVar("T")


async def get_guild_channel(guild: Guild, channel_id: int) -> GuildChannel:
    """
    Get a guild channel from the cache, falling back on the API.

    :param guild: Guild to search for the channel in
    :param channel_id: Channel ID
    :return: Guild channel
    :raises NotFound: When the channel does not exist
    :raises Forbidden: When the bot cannot see the channel
    :raises HTTPException: When fetching the channel failed
    """
    channel = guild.get_channel(channel_id)
    if channel is not None:
        return channel

    return await guild.fetch_channel(channel_id)


async def platform_call(step: str, awaitable: Awaitable[T]) -> T:
    """
    Await a Discord API call, wrapping failures in a PlatformError.

    :param step: Name of the step, used for error reporting
    :param awaitable: Pending API call
    :return: Result of the API call
    :raises PlatformError: When Discord rejected or failed the request
    """
    try:
        return await awaitable
    except DiscordException as e:
        logger.warning(
            "Discord request failed at step {}: {}",
            step,
            e
        )
        raise PlatformError(step) from e
