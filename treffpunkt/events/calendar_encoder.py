"""
Calendar encoder module.

Exports scheduled events as an iCalendar (RFC 5545) document. All
times are written as UTC in the basic format (`20240601T100000Z`);
entries keep the order of the source sequence and are not deduplicated.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import BinaryIO, Iterable, Optional

from icalendar import Calendar, Event
from loguru import logger

from treffpunkt import settings
from treffpunkt.events.errors import CalendarIoError
from treffpunkt.utils.time_utils import to_utc, utc_time_now

CALENDAR_VERSION = "2.0"
DEFAULT_DURATION = timedelta(hours=1)


@dataclass
class PlatformEvent:
    """
    Scheduled event as far as the calendar export is concerned.

    Parameters:
    - id: Event ID, stable across exports
    - name: Event name
    - start_time: Timezone aware start time
    - end_time: Timezone aware end time, if any
    - description: Event description, if any
    - location: Text location, if any
    """
    id: int
    name: str
    start_time: datetime
    end_time: Optional[datetime] = None
    description: Optional[str] = None
    location: Optional[str] = None

    @classmethod
    def from_scheduled_event(cls, event) -> "PlatformEvent":
        """
        Adapt a Discord scheduled event.

        Only external events have a text location; events hosted in a
        voice or stage channel are exported without one.

        :param event: discord.ScheduledEvent
        :return: Platform event record
        """
        location = None
        event_location = getattr(event, "location", None)
        if event_location is not None and isinstance(event_location.value, str):
            location = event_location.value

        return cls(
            id=event.id,
            name=event.name,
            start_time=event.start_time,
            end_time=event.end_time,
            description=event.description or None,
            location=location or None
        )

    @property
    def effective_end_time(self) -> datetime:
        """End time, or one hour after the start if there is none."""
        if self.end_time is None:
            return self.start_time + DEFAULT_DURATION

        return self.end_time


def to_calendar_event(event: PlatformEvent, stamp: datetime) -> Event:
    """
    Map a single platform event to a calendar entry.

    :param event: Platform event
    :param stamp: Export time, written as DTSTAMP
    :return: iCalendar VEVENT
    """
    entry = Event()
    entry.add("uid", str(event.id))
    entry.add("dtstamp", stamp)
    entry.add("summary", event.name)

    if event.description is not None:
        entry.add("description", event.description)
    if event.location is not None:
        entry.add("location", event.location)

    entry.add("dtstart", to_utc(event.start_time))
    entry.add("dtend", to_utc(event.effective_end_time))
    return entry


def build_calendar(
        events: Iterable[PlatformEvent],
        stamp: Optional[datetime] = None
) -> Calendar:
    """
    Build a calendar containing one entry per event.

    :param events: Platform events, in export order
    :param stamp: Export time, defaults to now
    :return: iCalendar VCALENDAR
    """
    stamp = to_utc(stamp if stamp is not None else utc_time_now())

    calendar = Calendar()
    calendar.add("version", CALENDAR_VERSION)
    calendar.add("prodid", settings.calendar_prodid)

    for event in events:
        calendar.add_component(to_calendar_event(event, stamp))

    return calendar


def encode(
        events: Iterable[PlatformEvent],
        stamp: Optional[datetime] = None
) -> bytes:
    """
    Encode events as an iCalendar document.

    :param events: Platform events, in export order
    :param stamp: Export time, defaults to now
    :return: Calendar file contents, CRLF line endings
    """
    calendar = build_calendar(events, stamp)
    logger.trace(
        "Encoded calendar with {} event(s)",
        len(calendar.subcomponents)
    )
    return calendar.to_ical()


def write_calendar(
        events: Iterable[PlatformEvent],
        sink: BinaryIO,
        stamp: Optional[datetime] = None
) -> int:
    """
    Encode events and write the document to a binary stream.

    :param events: Platform events, in export order
    :param sink: Writable binary stream
    :param stamp: Export time, defaults to now
    :return: Number of bytes written
    :raises CalendarIoError: When writing to the stream fails
    """
    data = encode(events, stamp)
    try:
        sink.write(data)
    except (OSError, ValueError) as e:
        raise CalendarIoError(f"Failed to write calendar: {e}") from e

    return len(data)
