"""
Event, recurrence rule and alarm records extracted from calendar-data.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar, Union

UNTITLED_EVENT = "Untitled Event"


class Frequency(Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"

    @classmethod
    def from_name(cls, name: str | None) -> Frequency | None:
        """None for anything unrecognised, i.e. SECONDLY or garbage."""
        if not name:
            return None
        try:
            return cls(str(name).strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class RecurrenceRule:
    """A decomposed RRULE.

    ``count`` and ``until`` both being None means the event repeats
    forever.  The ``by*`` fields are None unless the rule has them.

    Attributes:
        freq: Recurrence frequency, None if the server sent one we
            do not know about.
        interval: Step between occurrences, at least 1.
        count: Number of occurrences.
        until: Last possible occurrence.
        byday: Day codes such as ``"MO"`` or ``"-1FR"``.
        bymonthday: Days of the month, negative counts from the end.
        bymonth: Month numbers 1-12.
    """

    freq: Frequency | None = None
    interval: int = 1
    count: int | None = None
    until: datetime | None = None
    byday: tuple[str, ...] | None = None
    bymonthday: tuple[int, ...] | None = None
    bymonth: tuple[int, ...] | None = None


@dataclass(frozen=True)
class DisplayAlarm:
    """VALARM with ACTION:DISPLAY"""

    action: ClassVar[str] = "DISPLAY"

    trigger: str
    description: str | None = None


@dataclass(frozen=True)
class EmailAlarm:
    """VALARM with ACTION:EMAIL"""

    action: ClassVar[str] = "EMAIL"

    trigger: str
    description: str | None = None
    summary: str | None = None
    attendees: tuple[str, ...] = ()


@dataclass(frozen=True)
class AudioAlarm:
    """VALARM with ACTION:AUDIO"""

    action: ClassVar[str] = "AUDIO"

    trigger: str


Alarm = Union[DisplayAlarm, EmailAlarm, AudioAlarm]

@dataclass(frozen=True)
class Event:
    """A calendar event.

    For whole-day events ``end`` is the start of the last day of the
    event (inclusive), not the exclusive DTEND boundary stored in the
    iCalendar data.  An event on January 10th only has start and end
    both on 2024-01-10T00:00:00.

    Attributes:
        uid: iCalendar UID.
        summary: SUMMARY, ``"Untitled Event"`` if blank.
        start: Start of the event.
        end: End of the event, equal to ``start`` if the data has none.
        etag: Entity tag of the resource, empty string if unknown.
        href: URL of the resource, used as key for change detection.
        whole_day: True if DTSTART is a date without time of day.
        description: DESCRIPTION, if any.
        location: LOCATION, if any.
        recurrence_rule: Decomposed RRULE, if any.
        start_tzid: TZID parameter of DTSTART, not resolved to an offset.
        end_tzid: TZID parameter of DTEND.
        alarms: Alarms in the order they appear in the data.
    """

    uid: str
    summary: str
    start: datetime
    end: datetime
    etag: str
    href: str
    whole_day: bool = False
    description: str | None = None
    location: str | None = None
    recurrence_rule: RecurrenceRule | None = None
    start_tzid: str | None = None
    end_tzid: str | None = None
    alarms: tuple[Alarm, ...] = ()
