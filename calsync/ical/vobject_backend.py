"""
iCalendar back-end built on the ``vobject`` library.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import vobject
from vobject.icalendar import dateTimeToString, timedeltaToString

from calsync.lib import error

from .base import (
    EventFields,
    ICalBackend,
    build_alarm,
    first_value,
    optional_text,
    recurrence_from_parts,
    split_rrule,
)


class VobjectBackend(ICalBackend):
    name = "vobject"

    def extract(self, data: str) -> EventFields | None:
        component = vobject.readOne(data)
        if component.name == "VEVENT":
            vevent = component
        else:
            vevents = component.contents.get("vevent", [])
            if not vevents:
                return None
            vevent = vevents[0]

        dtstart = _line(vevent, "dtstart")
        if dtstart is None:
            raise error.CalendarDataError(reason="VEVENT without DTSTART")
        dtend = _line(vevent, "dtend")
        duration = _line(vevent, "duration")
        rrule = _line(vevent, "rrule")

        return EventFields(
            uid=_value(vevent, "uid") or "",
            summary=_value(vevent, "summary"),
            start=dtstart.value,
            end=dtend.value if dtend is not None else None,
            duration=duration.value if duration is not None else None,
            description=_value(vevent, "description"),
            location=_value(vevent, "location"),
            start_tzid=_tzid(dtstart),
            end_tzid=_tzid(dtend),
            recurrence_rule=(
                recurrence_from_parts(split_rrule(rrule.value))
                if rrule is not None
                else None
            ),
            alarms=tuple(
                alarm
                for alarm in (
                    _valarm_to_alarm(valarm)
                    for valarm in vevent.contents.get("valarm", [])
                )
                if alarm is not None
            ),
        )


def _line(component, name: str):
    lines = component.contents.get(name)
    if not lines:
        return None
    return lines[0]


def _value(component, name: str) -> str | None:
    line = _line(component, name)
    if line is None:
        return None
    return optional_text(line.value)


def _tzid(line) -> str | None:
    """
    vobject moves the TZID parameter into the tzinfo of the value, and
    keeps the original one as X-VOBJ-ORIGINAL-TZID
    """
    if line is None:
        return None
    tzid = line.params.get("TZID") or line.params.get("X-VOBJ-ORIGINAL-TZID")
    return optional_text(first_value(tzid))


def _trigger_to_text(value) -> str | None:
    if isinstance(value, timedelta):
        return timedeltaToString(value)
    if isinstance(value, datetime):
        return dateTimeToString(value)
    return optional_text(value) or None


def _valarm_to_alarm(valarm):
    trigger = _line(valarm, "trigger")
    if trigger is None:
        return None

    return build_alarm(
        action=_value(valarm, "action"),
        trigger=_trigger_to_text(trigger.value),
        description=_value(valarm, "description"),
        summary=_value(valarm, "summary"),
        attendees=[
            str(line.value) for line in valarm.contents.get("attendee", [])
        ],
    )
