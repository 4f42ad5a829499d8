"""
Error handler module.

Command errors from both prefix and slash commands are all handled
here; the user gets an ephemeral error embed where the platform
supports it.
"""

from discord.ext.commands import (
    BotMissingPermissions, CommandError, CommandNotFound, MissingPermissions
)
from loguru import logger

from treffpunkt.output import disp_str, send_error_embed
from treffpunkt.utils.discord_utils import FETCH_FAIL_EXCEPTIONS

COMMAND_ERRORS = {
    "UserInputError": "command_error_user_input_error",
    "ConversionError": "command_error_conversion_error",
    "BadArgument": "command_error_bad_argument",
    "BadUnionArgument": "command_error_bad_argument",
    "MissingRequiredArgument": "command_error_missing_required_argument",
    "UnexpectedQuoteError": "command_error_unexpected_quote_error",
    "InvalidEndOfQuotedStringError": (
        "command_error_invalid_end_of_quoted_string_error"
    ),
    "ExpectedClosingQuoteError": "command_error_expected_closing_quote_error",
    "NoPrivateMessage": "command_error_no_private_message",
    "TooManyArguments": "command_error_too_many_arguments"
}


class TreffpunktCommandError(CommandError):
    """
    Treffpunkt command error.

    Directs error outputs to disp_str to control
    """

    __slots__ = ["error_header", "error_message"]

    def __init__(self, disp_type: str, *args):
        """
        Initializer for the TreffpunktCommandError class.

        :param disp_type: Display type taken from disp_str
        """
        self.error_header = disp_str(f"{disp_type}_title")
        self.error_message = disp_str(f"{disp_type}_desc")

        if args:
            self.error_message = self.error_message.format(*args)

        super().__init__(self.error_message)


def unwrap_exception(exception: Exception) -> Exception:
    """
    Get the exception that a command raised from its invoke error.

    :param exception: Exception passed to the error listener
    :return: Original exception
    """
    while getattr(exception, "original", None) is not None:
        exception = exception.original

    return exception


async def handle_command_error(context, exception: Exception) -> None:
    """
    Handles retrieval and sending of command error messages.

    :param context: Context in which error-causing command was invoked
    :param exception: Exception raised by command
    """
    if isinstance(exception, CommandNotFound):
        logger.trace("Command not found: {}", context.command)
        return

    exception = unwrap_exception(exception)
    error_header = disp_str("command_error_header")

    if type(exception).__name__ in COMMAND_ERRORS:
        error_message = (
            disp_str(COMMAND_ERRORS[type(exception).__name__])
            + "\n" + str(exception)
        )
    elif isinstance(exception, TreffpunktCommandError):
        error_header = exception.error_header
        error_message = exception.error_message
    elif isinstance(exception, MissingPermissions):
        error_message = disp_str(
            "command_error_missing_permissions"
        ).format(", ".join(exception.missing_permissions))
    elif isinstance(exception, BotMissingPermissions):
        error_message = disp_str(
            "command_error_bot_missing_permissions"
        ).format(", ".join(exception.missing_permissions))
    else:
        logger.opt(exception=exception).error(
            "Unhandled command error {} triggered by command {} in guild {}",
            type(exception).__name__,
            context.command,
            getattr(context.guild, "id", None)
        )
        error_message = disp_str("command_error_invoke_error")

    # Trace, because we don't need the bot to report to us whenever
    # a user enters a command wrongly.
    logger.trace(
        disp_str("command_error_logger_header"),
        error_message,
        context.command
    )

    try:
        await send_error_embed(
            context,
            title=error_header,
            desc=error_message
        )
    except FETCH_FAIL_EXCEPTIONS:
        logger.warning(
            disp_str("command_error_failed_to_send"),
            getattr(context.channel, "id", None),
            error_message
        )
