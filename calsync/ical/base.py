"""
Common contract for the iCalendar back-ends.

A back-end turns the calendar-data text of one resource into the raw
fields of its first VEVENT.  It does not apply any event level
defaults; the summary placeholder, the missing DTEND fallback and the
whole-day end adjustment are done once in
:mod:`calsync.operations.event_ops`, whatever back-end was used.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Any, Iterable, Mapping, Sequence

from dateutil.parser import isoparse

from calsync.objects.event import (
    Alarm,
    AudioAlarm,
    DisplayAlarm,
    EmailAlarm,
    Frequency,
    RecurrenceRule,
)

log = logging.getLogger("calsync.ical")


@dataclass(frozen=True)
class EventFields:
    """
    Raw VEVENT fields as read by a back-end.

    ``start``/``end`` are whatever the library produced (``date`` for
    VALUE=DATE, naive or aware ``datetime`` otherwise), ``end`` is the
    DTEND as stored, exclusive for whole-day events, and None if the
    VEVENT has no DTEND.
    """

    uid: str
    summary: str | None
    start: date | datetime
    end: date | datetime | None = None
    duration: timedelta | None = None
    description: str | None = None
    location: str | None = None
    start_tzid: str | None = None
    end_tzid: str | None = None
    recurrence_rule: RecurrenceRule | None = None
    alarms: tuple[Alarm, ...] = ()

    @property
    def whole_day(self) -> bool:
        return is_date(self.start)


class ICalBackend(ABC):
    """
    Strategy for parsing calendar-data.

    Subclasses set ``name`` and implement :meth:`extract`.
    """

    name: str = ""

    @abstractmethod
    def extract(self, data: str) -> EventFields | None:
        """
        Parse an iCalendar document and read its first VEVENT.

        Returns None if the document has no VEVENT (e.g. a VTODO).
        Raises whatever the library raises on broken data.
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


def is_date(value: Any) -> bool:
    """True for a calendar date without time of day"""
    return isinstance(value, date) and not isinstance(value, datetime)


def to_datetime(value: date | datetime) -> datetime:
    """Dates are promoted to midnight of that day, datetimes are kept."""
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def first_value(value: Any) -> Any:
    """
    First value of a possibly multi-valued parameter.  Some libraries
    nest the values one level deeper than others, so lists are
    unwrapped until a single value remains.
    """
    while isinstance(value, (list, tuple)):
        if not value:
            return None
        value = value[0]
    return value


def optional_text(value: Any) -> str | None:
    if value is None:
        return None
    return str(value)


def split_rrule(value: Any) -> dict[str, list[str]]:
    """FREQ=WEEKLY;BYDAY=MO,WE -> {"FREQ": ["WEEKLY"], "BYDAY": ["MO", "WE"]}"""
    parts: dict[str, list[str]] = {}
    for part in str(value).split(";"):
        if "=" not in part:
            continue
        key, values = part.split("=", 1)
        parts[key.strip().upper()] = [v.strip() for v in values.split(",") if v.strip()]
    return parts


def recurrence_from_parts(parts: Mapping[str, Sequence[Any]]) -> RecurrenceRule:
    """
    Build a RecurrenceRule from RRULE parts, i.e. ``{"FREQ": ["WEEKLY"],
    "BYDAY": ["MO", "WE"]}``.  Keys are expected in upper case, values
    are lists as RRULE parts may carry several comma separated values.

    Parts that can't be read are left out of the rule rather than
    failing the whole event.
    """

    def values(key: str) -> list:
        found = parts.get(key)
        if found is None:
            return []
        if not isinstance(found, (list, tuple)):
            return [found]
        return list(found)

    freq = values("FREQ")
    interval = _integers("INTERVAL", values("INTERVAL"))
    count = _integers("COUNT", values("COUNT"))
    until = values("UNTIL")
    byday = values("BYDAY")
    bymonthday = _integers("BYMONTHDAY", values("BYMONTHDAY"))
    bymonth = _integers("BYMONTH", values("BYMONTH"))

    return RecurrenceRule(
        freq=Frequency.from_name(freq[0]) if freq else None,
        interval=max(interval[0], 1) if interval else 1,
        count=count[0] if count else None,
        until=_until_to_datetime(until[0]) if until else None,
        byday=tuple(str(day) for day in byday) if byday else None,
        bymonthday=tuple(bymonthday) if bymonthday else None,
        bymonth=tuple(bymonth) if bymonth else None,
    )


def _integers(key: str, values: list) -> list[int]:
    ret = []
    for value in values:
        try:
            ret.append(int(value))
        except (TypeError, ValueError):
            log.debug(f"ignoring RRULE {key} value {value!r}, not an integer")
    return ret


def _until_to_datetime(value: Any) -> datetime | None:
    if isinstance(value, str):
        try:
            value = isoparse(value.strip())
        except ValueError:
            log.debug(f"ignoring RRULE UNTIL value {value!r}")
            return None
    return to_datetime(value)


def build_alarm(
    action: str | None,
    trigger: str | None,
    description: str | None = None,
    summary: str | None = None,
    attendees: Iterable[str] = (),
) -> Alarm | None:
    """
    Construct the alarm variant matching ``action``.

    Returns None if there is no trigger or the action is not one of
    DISPLAY, EMAIL and AUDIO.
    """
    if not trigger:
        return None
    action = (action or "").strip().upper()
    if action == DisplayAlarm.action:
        return DisplayAlarm(trigger=trigger, description=description)
    if action == EmailAlarm.action:
        return EmailAlarm(
            trigger=trigger,
            description=description,
            summary=summary,
            attendees=tuple(attendees),
        )
    if action == AudioAlarm.action:
        return AudioAlarm(trigger=trigger)
    log.debug(f"ignoring alarm with unsupported action {action!r}")
    return None
