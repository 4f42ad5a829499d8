"""
Date normalizer module.

Turns the wall-clock strings that users type into event commands into
timezone aware datetimes in the deployment timezone. The accepted
format is strictly `YYYY-MM-DD HH:MM` (24-hour clock, zero-padded).

Ambiguous local times (when clocks are turned back) resolve to the
earliest instant, i.e. the first time the wall clock shows that value.
Local times that do not exist (when clocks jump forward) are rejected.
"""

import re
from datetime import datetime, timedelta
from typing import Optional, Tuple, Union

import pytz
from pytz.tzinfo import BaseTzInfo

from treffpunkt import settings
from treffpunkt.events.errors import ParseError, ZoneError

INPUT_FORMAT_HINT = "yyyy-mm-dd hh:mm"
CIVIL_REGEX = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2}) ([0-9]{2}):([0-9]{2})"
)
DEFAULT_DURATION = timedelta(minutes=settings.default_event_duration_minutes)

TzLike = Union[str, BaseTzInfo]


def get_timezone(zone: Optional[TzLike] = None) -> BaseTzInfo:
    """
    Resolve a timezone name to a pytz timezone.

    :param zone: Olson zone name or pytz timezone, defaults to the
        configured deployment timezone
    :return: pytz timezone
    :raises pytz.UnknownTimeZoneError: When the zone name is unknown
    """
    if zone is None:
        zone = settings.timezone

    if isinstance(zone, str):
        return pytz.timezone(zone)

    return zone


def parse_civil(text: str, field: str) -> datetime:
    """
    Parse a civil date-time string without attaching a timezone.

    :param text: User input
    :param field: Name of the input, used for error reporting
    :return: Naive datetime
    :raises ParseError: When the input does not match the format or is
        not a real calendar date
    """
    matches = CIVIL_REGEX.fullmatch(text)
    if matches is None:
        raise ParseError(
            field,
            f"Couldn't parse {field} time {text!r}, "
            f"expected {INPUT_FORMAT_HINT}"
        )

    try:
        return datetime(*(int(group) for group in matches.groups()))
    except ValueError as e:
        raise ParseError(
            field,
            f"Couldn't parse {field} time {text!r}: {e}"
        ) from e


def localize(civil: datetime, tz: BaseTzInfo, field: str) -> datetime:
    """
    Attach a timezone to a civil datetime.

    :param civil: Naive datetime
    :param tz: pytz timezone
    :param field: Name of the input, used for error reporting
    :return: Timezone aware datetime
    :raises ZoneError: When the civil time falls into a DST gap
    """
    try:
        return tz.localize(civil, is_dst=None)
    except pytz.NonExistentTimeError as e:
        raise ZoneError(field, civil.strftime("%Y-%m-%d %H:%M")) from e
    except pytz.AmbiguousTimeError:
        # Both readings are valid; take whichever happens first
        candidates = [
            tz.localize(civil, is_dst=True),
            tz.localize(civil, is_dst=False)
        ]
        return min(candidates, key=lambda moment: moment.astimezone(pytz.utc))


def normalize_one(
        text: str,
        field: str,
        zone: Optional[TzLike] = None
) -> datetime:
    """
    Parse a single civil date-time string and localize it.

    :param text: User input
    :param field: Name of the input, used for error reporting
    :param zone: Timezone to read the input in, defaults to the
        configured deployment timezone
    :return: Timezone aware datetime
    """
    tz = get_timezone(zone)
    return localize(parse_civil(text, field), tz, field)


def normalize(
        start: str,
        end: Optional[str] = None,
        zone: Optional[TzLike] = None
) -> Tuple[datetime, datetime]:
    """
    Normalize the start and end strings of an event.

    When no end is given, the event lasts for the default duration of
    elapsed time, so the end may carry a different UTC offset than the
    start if a DST transition lies in between.

    This does not check that the end comes after the start.

    :param start: Start time input
    :param end: Optional end time input
    :param zone: Timezone to read the inputs in, defaults to the
        configured deployment timezone
    :return: Tuple of timezone aware start and end datetimes
    :raises ParseError: When either input is malformed
    :raises ZoneError: When either input does not exist in local time
    """
    tz = get_timezone(zone)
    start_date = normalize_one(start, "start", tz)

    if end is None:
        end_date = tz.normalize(start_date + DEFAULT_DURATION)
    else:
        end_date = normalize_one(end, "end", tz)

    return start_date, end_date
