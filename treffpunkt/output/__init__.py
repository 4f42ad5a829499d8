"""
Output tools module.

Everything that the bot sends through discord is managed by this module;
this includes the functions that send plain messages, replies to
commands and error embeds.
"""

import os
import re
from typing import Optional

from discord import Colour, Embed, File, Forbidden, HTTPException, Message
from discord.abc import Messageable
from loguru import logger

from treffpunkt import settings
from treffpunkt.output import eng_strings

PARENT_DIRECTORY = os.path.dirname(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
)
DEFAULT_LANG = "eng"
TOKEN_REGEX = r"[MN][A-Za-z\d]{23}\.[\w-]{6}\.[\w-]{27}"

# Turned into a dict at runtime, so that we don't have to use getattr.
ENG_STRINGS = {
    name: value for name, value in vars(eng_strings).items()
    if not name.startswith("__")
}


def disp_str(str_name: str, lang: str = DEFAULT_LANG) -> str:
    """
    Retrieves display string based on string name.

    :param str_name: Name of string
    :param lang: Language of string
    :return: Pre-formatted string
    """
    if lang == "eng" and str_name in ENG_STRINGS:
        return ENG_STRINGS[str_name].replace(
            "%PREFIX%", settings.command_prefix
        )

    return ""


def guard_text(
        text: str,
        token_guard: bool = False,
        path_guard: bool = False
) -> str:
    """
    Censor bot tokens and the project directory from outgoing text.

    :param text: Text to censor
    :param token_guard: Censor discord bot tokens
    :param path_guard: Censor full project directory
    :return: Censored text
    """
    if token_guard:
        text = re.sub(TOKEN_REGEX, "[REDACTED TOKEN]", text)

    if path_guard and len(PARENT_DIRECTORY) > 1:
        text = text.replace(PARENT_DIRECTORY, "..")

    return text


async def send_message(
        channel: Messageable,
        text: Optional[str],
        embed: Embed = None,
        token_guard: bool = False,
        path_guard: bool = False
) -> Optional[Message]:
    """
    Sends a message to a given context or channel.

    :param channel: Context or channel of message
    :param text: Text content of message
    :param embed: Embed of message
    :param token_guard: Censor discord bot tokens
    :param path_guard: Censor full project directory
    :return: Discord Message object, or None if sending failed
    """
    if text is not None:
        text = guard_text(text, token_guard, path_guard)

    try:
        return await channel.send(text, embed=embed)
    except Forbidden:
        logger.warning(
            "Failed to send message to channel ID {}",
            str(channel)
        )
    except HTTPException:
        logger.error(
            "Failed to send message to channel {} "
            "due to invalid argument.",
            channel
        )

    return None


async def respond_message(
        context,
        text: Optional[str] = None,
        embed: Optional[Embed] = None,
        file: Optional[File] = None,
        ephemeral: bool = False
):
    """
    Reply to a command, either slash or prefix.

    Platform errors are propagated to the caller.

    :param context: Command context
    :param text: Text content of reply
    :param embed: Embed of reply
    :param file: File attachment of reply
    :param ephemeral: Whether only the invoker can see the reply (only
        honoured for slash commands)
    :return: Reply message or interaction
    """
    kwargs = {}
    if embed is not None:
        kwargs["embed"] = embed
    if file is not None:
        kwargs["file"] = file
    if ephemeral:
        kwargs["ephemeral"] = True

    return await context.respond(text, **kwargs)


async def send_error_embed(
        context,
        title: str,
        desc: str
) -> None:
    """
    Reply to a command with an error embed.

    :param context: Command context
    :param title: Embed title
    :param desc: Embed desc
    """
    embed = Embed(
        title=title,
        colour=Colour(settings.embed_color_error),
        description=guard_text(desc, token_guard=True, path_guard=True)
    )

    await respond_message(context, embed=embed, ephemeral=True)
