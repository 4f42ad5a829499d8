"""Time utils module."""

from datetime import datetime

import pytz


def to_utc(moment: datetime) -> datetime:
    """
    Convert a timezone aware datetime to UTC with seconds accuracy.

    :param moment: Timezone aware datetime
    :return: Timezone aware UTC datetime without microseconds
    :raises ValueError: When the datetime is naive
    """
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError(f"Naive datetime cannot be converted: {moment}")

    return moment.astimezone(pytz.utc).replace(microsecond=0)


def utc_time_now() -> datetime:
    """
    Get current UTC timezone aware time.

    :return: Timezone aware datetime
    """
    return datetime.now(pytz.utc)
