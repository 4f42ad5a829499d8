# pylint: skip-file

"""
English Strings.

All strings displayed to discord users will be taken from this file; all
logger messages are hardcoded and shouldn't be in here. Some strings
here exceed the line length limit, which is fine since this is closer
to a config file than actual code.
"""

"""'''''''''''
Command Errors
'''''''''''"""

# General Headers
command_error_header = "**Error:** "
command_error_logger_header = "Command error {} triggered by command: {}"
command_error_failed_to_send = "Failed to send user error message to channel {}: {}"

# Command invocation exceptions
command_error_user_input_error = "User input error."
command_error_conversion_error = "Failed to convert argument."
command_error_bad_argument = "Invalid argument."
command_error_missing_required_argument = "Missing required argument."
command_error_unexpected_quote_error = "Encountered unexpected quote mark inside non-quoted string."
command_error_invalid_end_of_quoted_string_error = "Invalid end of quoted string."
command_error_expected_closing_quote_error = "Did not find closing quote character."
command_error_no_private_message = "Command cannot be used in Private Message."
command_error_invoke_error = "Command raised internal error."
command_error_too_many_arguments = "Too many arguments."

# Exceptions with format params
command_error_missing_permissions = "You are missing the necessary permissions to run this command: {}."
command_error_bot_missing_permissions = "I am missing the necessary permissions to execute this command: {}."


"""''''
Events
''''"""

events_done = "Done."
events_create_success = "Created event [{}]({})."
events_export_success = "Exported {} event(s)."

events_parse_error_title = "Invalid date"
events_parse_error_desc = "Couldn't parse {} time. Please use the format `yyyy-mm-dd hh:mm`, for example `2012-12-21 12:34`."
events_end_before_start_title = "Invalid date"
events_end_before_start_desc = "The end of the event must come after its start."
events_zone_error_title = "Invalid date"
events_zone_error_desc = "The {} time {} does not exist in the {} timezone (clocks skip it when daylight saving time starts)."
events_no_channel_title = "No announcement channel"
events_no_channel_desc = "No announcement channel is configured for this server. Please ask the bot operator to add one."
events_platform_error_title = "Discord error"
events_platform_error_desc = "Discord rejected the request while trying to {}. Steps before this one have already been carried out."
events_export_error_title = "Export failed"
events_export_error_desc = "Failed to write the calendar file."
events_unknown_error_title = "Something went wrong"
events_unknown_error_desc = "The command failed unexpectedly. Please try again later."

# Human readable names of platform steps
events_step_defer = "acknowledge the command"
events_step_fetch_events = "fetch the scheduled events"
events_step_create_event = "create the scheduled event"
events_step_fetch_channel = "find the announcement channel"
events_step_post_announcement = "post the announcement"
events_step_add_reaction = "add the RSVP reactions"
events_step_create_thread = "create the discussion thread"
events_step_add_thread_member = "add you to the discussion thread"
events_step_send_calendar = "send the calendar file"
