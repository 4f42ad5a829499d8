"""
Fake Discord objects for testing the command orchestrators.

Every API call made through these fakes is appended to a shared call
log so that tests can assert on the order of side effects.
"""

from types import SimpleNamespace
from typing import Any, List, Optional
from unittest.mock import AsyncMock, MagicMock, Mock

import discord

GUILD_ID = 111111111111111111
CHANNEL_ID = 222222222222222222
EVENT_ID = 333333333333333333
AUTHOR_ID = 444444444444444444


def http_exception(status: int = 500) -> discord.HTTPException:
    """Test helper: a Discord HTTP error."""
    return discord.HTTPException(Mock(status=status, reason="error"), "boom")


class FakePlatform:
    """Fake guild, announcement channel, message and thread."""

    def __init__(self, channel_cached: bool = True):
        self.calls: List[tuple] = []

        self.thread = SimpleNamespace(id=555, add_user=self._record("add_user"))
        self.message = SimpleNamespace(
            id=666,
            add_reaction=self._record("add_reaction"),
            create_thread=self._record("create_thread", self.thread)
        )
        self.channel = SimpleNamespace(
            id=CHANNEL_ID,
            send=self._record("send", self.message)
        )
        self.event = SimpleNamespace(id=EVENT_ID)

        self.guild = MagicMock()
        self.guild.id = GUILD_ID
        self.guild.create_scheduled_event = self._record(
            "create_scheduled_event",
            self.event
        )
        self.guild.fetch_scheduled_events = self._record(
            "fetch_scheduled_events",
            []
        )
        self.guild.get_channel = Mock(
            return_value=self.channel if channel_cached else None
        )
        self.guild.fetch_channel = self._record("fetch_channel", self.channel)

        self.author = MagicMock()
        self.author.id = AUTHOR_ID
        self.author.mention = f"<@{AUTHOR_ID}>"

        self.context = MagicMock()
        self.context.guild = self.guild
        self.context.author = self.author
        self.context.defer = self._record("defer")
        self.context.respond = self._record("respond")

    def _record(self, name: str, result: Any = None) -> AsyncMock:
        """Test helper: async mock that logs its calls."""
        async def side_effect(*args, **kwargs):
            self.calls.append((name, args, kwargs))
            return result

        return AsyncMock(side_effect=side_effect)

    def fail(self, mock: AsyncMock, exception: Exception) -> None:
        """Make a recorded API call raise after logging it."""
        original = mock.side_effect

        async def side_effect(*args, **kwargs):
            await original(*args, **kwargs)
            raise exception

        mock.side_effect = side_effect

    def call_names(self) -> List[str]:
        """Names of all API calls made, in order."""
        return [name for name, _, _ in self.calls]

    def call(self, name: str, index: int = 0) -> Optional[tuple]:
        """Arguments of the nth call with the given name."""
        matching = [call for call in self.calls if call[0] == name]
        return matching[index] if len(matching) > index else None
