"""
iCalendar back-end built on the ``icalendar`` library.  This is the
default back-end.
"""

from __future__ import annotations

import icalendar

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


class IcalendarBackend(ICalBackend):
    name = "icalendar"

    def extract(self, data: str) -> EventFields | None:
        calendar = icalendar.Calendar.from_ical(data)
        vevents = calendar.walk("VEVENT")
        if not vevents:
            return None
        vevent = vevents[0]

        dtstart = vevent.get("DTSTART")
        if dtstart is None:
            raise error.CalendarDataError(reason="VEVENT without DTSTART")
        dtend = vevent.get("DTEND")
        duration = vevent.get("DURATION")

        # .get() returns a single property or a list; only the first
        # RRULE is used
        rrule = first_value(vevent.get("RRULE"))

        return EventFields(
            uid=str(vevent.get("UID", "")),
            summary=optional_text(vevent.get("SUMMARY")),
            start=dtstart.dt,
            end=dtend.dt if dtend is not None else None,
            duration=duration.dt if duration is not None else None,
            description=optional_text(vevent.get("DESCRIPTION")),
            location=optional_text(vevent.get("LOCATION")),
            start_tzid=_tzid(dtstart),
            end_tzid=_tzid(dtend),
            recurrence_rule=_recurrence(rrule),
            alarms=tuple(
                alarm
                for alarm in (
                    _valarm_to_alarm(c)
                    for c in vevent.subcomponents
                    if getattr(c, "name", None) == "VALARM"
                )
                if alarm is not None
            ),
        )


def _recurrence(rrule):
    if rrule is None:
        return None
    if isinstance(rrule, icalendar.vRecur):
        return recurrence_from_parts(rrule)
    # icalendar keeps a rule it could not decode (i.e. an unknown FREQ)
    # as its raw text
    return recurrence_from_parts(split_rrule(rrule))


def _tzid(prop) -> str | None:
    if prop is None:
        return None
    return optional_text(first_value(prop.params.get("TZID")))


def _valarm_to_alarm(valarm):
    trigger = valarm.get("TRIGGER")
    if trigger is None:
        return None

    # .get() returns a single vCalAddress or a list; normalise to list
    raw_attendees = valarm.get("ATTENDEE")
    if raw_attendees is None:
        attendees = []
    elif isinstance(raw_attendees, list):
        attendees = raw_attendees
    else:
        attendees = [raw_attendees]

    return build_alarm(
        action=optional_text(valarm.get("ACTION")),
        trigger=trigger.to_ical().decode("utf-8"),
        description=optional_text(valarm.get("DESCRIPTION")),
        summary=optional_text(valarm.get("SUMMARY")),
        attendees=[str(attendee) for attendee in attendees],
    )
