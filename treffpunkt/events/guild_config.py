"""
Guild config module.

Maps each guild to the channel that event announcements are posted in.
The mapping is read once from the guild config YAML file and is not
modified afterwards.
"""

import os
from typing import Dict, List, Optional, Union

import emoji
import yaml
from loguru import logger

from treffpunkt import settings
from treffpunkt.events.errors import ConfigError

ChannelMapping = Dict[str, int]


def is_id_string(value: str) -> bool:
    """Check whether a string is a Discord ID written in ASCII digits."""
    return value.isascii() and value.isdecimal()


class GuildConfig:
    """Read-only per-guild events configuration."""

    __slots__ = ["event_channel_per_guild", "rsvp_reactions"]

    def __init__(
            self,
            event_channel_per_guild: Optional[ChannelMapping] = None,
            rsvp_reactions: Optional[List[str]] = None
    ) -> None:
        """
        Initializer for the GuildConfig class.

        :param event_channel_per_guild: Announcement channel IDs indexed
            by guild ID strings
        :param rsvp_reactions: Emojis or emoji shortcodes to react with
            on announcements, defaults to the configured reactions
        :raises ConfigError: When one of the reactions is not an emoji
        """
        self.event_channel_per_guild: ChannelMapping = dict(
            event_channel_per_guild or {}
        )
        self.rsvp_reactions: List[str] = self.parse_reactions(
            settings.rsvp_reactions if rsvp_reactions is None
            else rsvp_reactions
        )

    @staticmethod
    def parse_reactions(reactions: List[str]) -> List[str]:
        """
        Convert emoji shortcodes to unicode emojis and validate them.

        :param reactions: Emojis or emoji shortcodes
        :return: List of unicode emojis in the same order
        :raises ConfigError: When a reaction is not a single emoji
        """
        parsed = []
        for reaction in reactions:
            emote = emoji.emojize(str(reaction).strip(), language="alias")
            if not emoji.is_emoji(emote):
                raise ConfigError(f"Invalid RSVP reaction: {reaction}")
            parsed.append(emote)

        return parsed

    @staticmethod
    def parse_channel_id(value: Union[int, str, dict]) -> Optional[int]:
        """
        Extract an announcement channel ID from a guild config entry.

        :param value: Either a channel ID or a dictionary containing the
            key announcement_channel
        :return: Channel ID, or None if the entry is invalid
        """
        if isinstance(value, dict):
            value = value.get("announcement_channel")

        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and is_id_string(value.strip()):
            return int(value.strip())

        return None

    @classmethod
    def from_dict(cls, config_dict: Optional[dict]) -> "GuildConfig":
        """
        Parse a guild config dictionary.

        Accepts either the nested form under the key "events" or a flat
        mapping of guild IDs to channel IDs. Invalid entries are skipped.

        :param config_dict: Dictionary loaded from the guild config file
        :return: Guild config
        """
        if not config_dict:
            return cls()

        if not isinstance(config_dict, dict):
            raise ConfigError("Guild config must be a mapping")

        guild_dict = config_dict.get("events", config_dict) or {}
        if not isinstance(guild_dict, dict):
            raise ConfigError("Guild config events must be a mapping")

        mapping: ChannelMapping = {}
        for guild_id, value in guild_dict.items():
            if not is_id_string(str(guild_id)):
                logger.warning("Skipping invalid guild ID {}", guild_id)
                continue

            channel_id = cls.parse_channel_id(value)
            if channel_id is None:
                logger.warning(
                    "Skipping invalid announcement channel for guild {}: {}",
                    guild_id,
                    value
                )
                continue

            mapping[str(guild_id)] = channel_id

        return cls(
            event_channel_per_guild=mapping,
            rsvp_reactions=config_dict.get("rsvp_reactions")
        )

    @classmethod
    def load(cls, file_path: str = settings.file_guild_config) -> "GuildConfig":
        """
        Load the guild config from a YAML file.

        :param file_path: Path to the YAML file
        :return: Guild config; empty if the file does not exist
        :raises ConfigError: When the file is not valid YAML
        """
        if not os.path.exists(file_path):
            logger.warning(
                "Guild config file {} not found; no announcement channels "
                "configured.",
                file_path
            )
            return cls()

        with open(file_path, "r", encoding="utf-8") as file:
            try:
                config_dict = yaml.safe_load(file)
            except yaml.YAMLError as e:
                raise ConfigError(
                    f"Failed to parse guild config {file_path}"
                ) from e

        guild_config = cls.from_dict(config_dict)
        logger.info(
            "Loaded announcement channels for {} guild(s)",
            len(guild_config.event_channel_per_guild)
        )
        return guild_config

    def announcement_channel_id(self, guild_id: int) -> int:
        """
        Get the announcement channel ID of a guild.

        :param guild_id: Discord guild ID
        :return: Announcement channel ID
        :raises ConfigError: When no channel is configured for the guild
        """
        try:
            return self.event_channel_per_guild[str(guild_id)]
        except KeyError as e:
            raise ConfigError(
                f"No announcement channel configured for guild {guild_id}"
            ) from e
