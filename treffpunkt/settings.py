# pylint: skip-file
"""
This is the settings file.

Everything in here is deployment-wide. Per-guild options (such as the
announcement channel of each server) live in the guild config YAML file
referenced by file_guild_config.

========================================================================
Log levels:

5  | Trace    | All debug messages, including every step in every
              | function, used to test program logic and to pinpoint
              | the exact locations where things go wrong.

10 | Debug    | Important debug messages showing results of certain
              | computations without necessarily showing intermediate
              | steps.

20 | Info     | All information that might be necessary for the user
              | to monitor what the bot is doing.

30 | Warning  | Errors or things that go wrong that are not the result
              | of incorrect configuration or code; these do not affect
              | the bot's functionality.

40 | Error    | Errors that occur due to incorrect configuration or user
              | input that may impact the execution of a specific
              | command; these do not affect the bot's functionality.

50 | Critical | Unexpected errors that either impact an entire cog or
              | feature or the functionality of the entire bot.

60 | Nothing  | No messages at all.


The master log is a Discord channel dedicated for bot logs (without
accessing the console).
"""
import os

# Command prefix
command_prefix = "!"

# Bot Description (Shown in help)
bot_description = "Treffpunkt: meetup bot written using Pycord"

# Discord bot token
bot_token = os.environ.get("TREFFPUNKT_BOT_TOKEN", "")

# Master log channel ID (Leave as 0 for no logs)
master_log_channel = 0

# Log level
master_log_level = 30
console_log_level = 20

# Embed colours
embed_color_normal = 0xa0e0f0
embed_color_success = 0x2ded43
embed_color_error = 0xff2b4b

# File paths
file_guild_config = "./resources/events/guild_config.yml"

# Olson zone that user-entered event times are read in
timezone = "Europe/Berlin"

# Events
event_url = "https://discord.com/events/"
event_announcement_template = "[{name}]({url}) mit {author}"
default_event_duration_minutes = 60

# RSVP reactions added to every announcement, in order (unicode emoji or
# emoji shortcodes)
rsvp_reactions = ["👍", "❔"]

# Calendar export
calendar_prodid = "-//treffpunkt//meetup calendar//EN"
calendar_filename = "calendar.ics"
