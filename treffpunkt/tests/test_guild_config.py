"""Tests for loading the per-guild announcement channels."""

import pytest

from treffpunkt.events.errors import ConfigError
from treffpunkt.events.guild_config import GuildConfig


class TestGuildConfigFromDict:
    """Tests for GuildConfig.from_dict()."""

    def test_nested_form(self):
        config = GuildConfig.from_dict({
            "events": {
                "111": {"announcement_channel": 222},
                333: {"announcement_channel": "444"},
            }
        })
        assert config.event_channel_per_guild == {"111": 222, "333": 444}

    def test_flat_form(self):
        config = GuildConfig.from_dict({"111": 222})
        assert config.announcement_channel_id(111) == 222

    def test_invalid_entries_skipped(self):
        config = GuildConfig.from_dict({
            "events": {
                "111": {"announcement_channel": "general"},
                "not a guild": 5,
                "222": True,
                "333": 444,
            }
        })
        assert config.event_channel_per_guild == {"333": 444}

    def test_non_ascii_digits_skipped(self):
        config = GuildConfig.from_dict({
            "events": {
                "\u00b2": 222,
                "111": "\u00b2",
                "\u0663\u0663\u0663": 444,
                "555": {"announcement_channel": "\u2460"},
                "666": 777,
            }
        })
        assert config.event_channel_per_guild == {"666": 777}

    def test_empty(self):
        assert GuildConfig.from_dict(None).event_channel_per_guild == {}
        assert GuildConfig.from_dict({"events": None}).event_channel_per_guild == {}

    def test_not_a_mapping(self):
        with pytest.raises(ConfigError):
            GuildConfig.from_dict(["111", "222"])

    def test_missing_guild(self):
        config = GuildConfig({"111": 222})
        with pytest.raises(ConfigError, match="999"):
            config.announcement_channel_id(999)


class TestRsvpReactions:
    """Tests for RSVP reaction parsing."""

    def test_default_reactions(self):
        assert GuildConfig().rsvp_reactions == ["👍", "❔"]

    def test_shortcodes(self):
        config = GuildConfig(rsvp_reactions=[":thumbs_up:", "❔"])
        assert config.rsvp_reactions == ["👍", "❔"]

    def test_reactions_from_dict(self):
        config = GuildConfig.from_dict({
            "events": {"1": 2},
            "rsvp_reactions": ["✅", "❌"]
        })
        assert config.rsvp_reactions == ["✅", "❌"]

    def test_invalid_reaction(self):
        with pytest.raises(ConfigError):
            GuildConfig(rsvp_reactions=["maybe"])


class TestGuildConfigLoad:
    """Tests for GuildConfig.load()."""

    def test_load_file(self, tmp_path):
        path = tmp_path / "guild_config.yml"
        path.write_text(
            "events:\n"
            "  123456789012345678:\n"
            "    announcement_channel: 876543210987654321\n",
            encoding="utf-8"
        )
        config = GuildConfig.load(str(path))
        assert config.announcement_channel_id(123456789012345678) == (
            876543210987654321
        )

    def test_int_guild_keys_become_strings(self, tmp_path):
        path = tmp_path / "guild_config.yml"
        path.write_text(
            "events:\n"
            "  111: 222\n"
            "  \"333\": 444\n",
            encoding="utf-8"
        )
        config = GuildConfig.load(str(path))
        assert config.event_channel_per_guild == {"111": 222, "333": 444}
        assert config.announcement_channel_id(111) == 222

    def test_missing_file(self, tmp_path):
        config = GuildConfig.load(str(tmp_path / "missing.yml"))
        assert config.event_channel_per_guild == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "guild_config.yml"
        path.write_text("events: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigError):
            GuildConfig.load(str(path))
