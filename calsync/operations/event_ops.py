"""
Event operations - turning calendar-query / calendar-multiget REPORT
responses into Event objects.

One broken calendar object must not cost the caller the rest of the
calendar, so every response record is parsed on its own and failures
are logged and skipped.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Union

from calsync.ical import get_backend
from calsync.ical.base import EventFields, ICalBackend, to_datetime
from calsync.lib import error, vcal
from calsync.objects.event import UNTITLED_EVENT, Event
from calsync.operations.base import find_propstat_with, resolve_href
from calsync.protocol.types import ResponseRecord
from calsync.protocol.xml_parsers import parse_multistatus

log = logging.getLogger("calsync")


def parse_events(
    body: Union[str, bytes],
    base_url: str | None = None,
    backend: Union[str, ICalBackend, None] = None,
) -> list[Event]:
    """
    Parse a REPORT multistatus body with calendar-data into events.

    Args:
        body: Raw multistatus XML
        base_url: Base URL to resolve relative hrefs against
        backend: iCalendar back-end name or instance, see
            :func:`calsync.ical.get_backend`

    Returns:
        Events in the order of the response records.  Records without
        calendar-data, without a VEVENT or with broken data are left out.

    Raises:
        MultistatusError: If the body cannot be decoded
        ConfigurationError: If the back-end is unknown
    """
    ical_backend = get_backend(backend)
    events = []
    for response in parse_multistatus(body):
        try:
            event = _response_to_event(response, base_url, ical_backend)
        except Exception:
            log.error(
                f"Could not parse the calendar data of {response.href}, skipping it",
                exc_info=True,
            )
            continue
        if event is not None:
            events.append(event)
    return events


def _response_to_event(
    response: ResponseRecord,
    base_url: str | None,
    backend: ICalBackend,
) -> Event | None:
    propstat = find_propstat_with(response, "calendar-data")
    if propstat is None:
        log.debug(f"no calendar-data for {response.href}, skipping")
        return None

    data = vcal.fix(vcal.unescape_line_endings(propstat.text("calendar-data")))
    fields = backend.extract(data)
    if fields is None:
        log.debug(f"no VEVENT in the calendar-data of {response.href}, skipping")
        return None

    return build_event(
        fields,
        etag=propstat.text("getetag", ""),
        href=resolve_href(response.href, base_url),
    )


def build_event(fields: EventFields, etag: str, href: str) -> Event:
    """
    Apply the event level rules on the raw fields of a back-end:

    - a blank summary becomes "Untitled Event"
    - without DTEND the end is DTSTART plus DURATION, or DTSTART
    - for whole-day events the exclusive DTEND is made inclusive by
      going back one day, never before the start
    """
    whole_day = fields.whole_day
    start = to_datetime(fields.start)

    if fields.end is None and fields.duration is None:
        end = start
    else:
        if fields.end is not None:
            end = to_datetime(fields.end)
        else:
            end = start + fields.duration
        if whole_day:
            end = end - timedelta(days=1)
            if _comparable(start, end):
                end = max(end, start)

    if _comparable(start, end) and end < start:
        error.weirdness(f"event {href} ends before it starts")

    return Event(
        uid=fields.uid,
        summary=fields.summary if fields.summary and fields.summary.strip() else UNTITLED_EVENT,
        start=start,
        end=end,
        etag=etag or "",
        href=href,
        whole_day=whole_day,
        description=fields.description,
        location=fields.location,
        recurrence_rule=fields.recurrence_rule,
        start_tzid=fields.start_tzid,
        end_tzid=fields.end_tzid,
        alarms=fields.alarms,
    )


def _comparable(a: datetime, b: datetime) -> bool:
    """A floating time and one with a timezone can't be ordered"""
    return (a.tzinfo is None) == (b.tzinfo is None)
