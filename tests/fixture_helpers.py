"""
Shared builders for multistatus and iCalendar test data.
"""

from __future__ import annotations

from xml.sax.saxutils import escape

OK = "HTTP/1.1 200 OK"
NOT_FOUND = "HTTP/1.1 404 Not Found"


def multistatus(*responses: str) -> str:
    return (
        '<?xml version="1.0" encoding="utf-8"?>\n'
        '<d:multistatus xmlns:d="DAV:" xmlns:cal="urn:ietf:params:xml:ns:caldav" '
        'xmlns:cs="http://calendarserver.org/ns/" xmlns:ical="http://apple.com/ns/ical/">\n'
        + "\n".join(responses)
        + "\n</d:multistatus>"
    )


def propstat(props: str, status: str = OK) -> str:
    return f"<d:propstat><d:prop>{props}</d:prop><d:status>{status}</d:status></d:propstat>"


def calendar_response(
    href: str,
    displayname: str | None = "Work",
    ctag: str | None = "ctag-1",
    components: tuple = ("VEVENT",),
    status: str = OK,
    extra_props: str = "",
) -> str:
    props = ""
    if displayname is not None:
        props += f"<d:displayname>{escape(displayname)}</d:displayname>"
    if ctag is not None:
        props += f"<cs:getctag>{escape(ctag)}</cs:getctag>"
    if components:
        props += (
            "<cal:supported-calendar-component-set>"
            + "".join(f'<cal:comp name="{c}"/>' for c in components)
            + "</cal:supported-calendar-component-set>"
        )
    props += extra_props
    return f"<d:response><d:href>{href}</d:href>{propstat(props, status)}</d:response>"


def event_response(href: str, ical: str, etag: str | None = '"etag-1"') -> str:
    props = ""
    if etag is not None:
        props += f"<d:getetag>{escape(etag)}</d:getetag>"
    props += f"<cal:calendar-data>{escape(ical)}</cal:calendar-data>"
    return f"<d:response><d:href>{href}</d:href>{propstat(props)}</d:response>"


def vcalendar(*components: str) -> str:
    return (
        "BEGIN:VCALENDAR\r\n"
        "VERSION:2.0\r\n"
        "PRODID:-//calsync//tests//EN\r\n"
        + "".join(components)
        + "END:VCALENDAR\r\n"
    )


def vevent(uid: str = "event-1", *lines: str) -> str:
    return (
        "BEGIN:VEVENT\r\n"
        f"UID:{uid}\r\n"
        "DTSTAMP:20240101T120000Z\r\n"
        + "".join(line + "\r\n" for line in lines)
        + "END:VEVENT\r\n"
    )


def valarm(*lines: str) -> str:
    return "BEGIN:VALARM\r\n" + "".join(line + "\r\n" for line in lines) + "END:VALARM\r\n"


# Timed event in Berlin with an alarm and a weekly recurrence
meeting = vcalendar(
    vevent(
        "meeting-1",
        "SUMMARY:Weekly sync",
        "DTSTART;TZID=Europe/Berlin:20240110T090000",
        "DTEND;TZID=Europe/Berlin:20240110T100000",
        "LOCATION:Room 4",
        "DESCRIPTION:Agenda in the wiki",
        "RRULE:FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE;COUNT=10",
    )
    .replace(
        "END:VEVENT\r\n",
        valarm("ACTION:DISPLAY", "TRIGGER:-PT15M", "DESCRIPTION:Reminder")
        + "END:VEVENT\r\n",
    )
)

# Whole-day event on January 10th and 11th
holiday = vcalendar(
    vevent(
        "holiday-1",
        "SUMMARY:Conference",
        "DTSTART;VALUE=DATE:20240110",
        "DTEND;VALUE=DATE:20240112",
    )
)

# Floating times, no timezone at all
floating = vcalendar(
    vevent(
        "floating-1",
        "SUMMARY:Lunch",
        "DTSTART:20240301T120000",
        "DTEND:20240301T130000",
    )
)

todo = vcalendar(
    "BEGIN:VTODO\r\n"
    "UID:todo-1\r\n"
    "DTSTAMP:20240101T120000Z\r\n"
    "SUMMARY:Buy milk\r\n"
    "END:VTODO\r\n"
)
