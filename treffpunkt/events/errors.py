"""
Events errors module.

Errors raised by the date normalizer, the calendar encoder and the two
command orchestrators. None of these depend on Discord; the events cog
translates them into command errors with display strings.
"""

from typing import Optional


class EventsError(Exception):
    """Base class for all events errors."""


class ParseError(EventsError, ValueError):
    """User-entered date string could not be parsed."""

    __slots__ = ["field"]

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        """
        Initializer for the ParseError class.

        :param field: Name of the offending input ("start", "end"), or a
            short description of the failed check
        :param message: Optional detailed message
        """
        self.field = field
        super().__init__(message or field)


class ZoneError(EventsError, ValueError):
    """Civil time does not exist in the configured time zone."""

    __slots__ = ["field", "civil"]

    def __init__(self, field: str, civil: str) -> None:
        """
        Initializer for the ZoneError class.

        :param field: Name of the offending input
        :param civil: The civil time string that fell into a DST gap
        """
        self.field = field
        self.civil = civil
        super().__init__(f"{field}: {civil} does not exist in local time")


class ConfigError(EventsError):
    """Missing or invalid configuration."""


class PlatformError(EventsError):
    """The chat platform rejected or failed a request."""

    __slots__ = ["step"]

    def __init__(self, step: str) -> None:
        """
        Initializer for the PlatformError class.

        :param step: Name of the step that failed
        """
        self.step = step
        super().__init__(step)


class CalendarIoError(EventsError, OSError):
    """Writing the encoded calendar to its byte sink failed."""
