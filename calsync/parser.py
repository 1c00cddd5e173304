"""
Facade bundling the settings that stay the same for every response of
one calendar server: the base URL and the iCalendar back-end.
"""

from typing import Iterable, List, Optional, Union

from calsync.ical import ICalBackend, get_backend
from calsync.objects import Calendar, Event, EventRef, SyncChangesResult
from calsync.operations import detect_changes, parse_calendars, parse_events


class CalendarResponseParser:
    """
    Parses the responses of one calendar server.

    This class does no I/O.  Feed it the bodies your HTTP client got
    back:

        parser = CalendarResponseParser(base_url="https://cal.example.com/")

        calendars = parser.parse_calendars(propfind_body)
        events = parser.parse_events(report_body)

        changes = parser.detect_changes(
            stored_ctag, stored_refs, calendars[0].ctag, event_refs(events)
        )
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        ical_backend: Union[str, ICalBackend, None] = None,
    ) -> None:
        """
        Args:
            base_url: Base URL relative hrefs are resolved against,
                hrefs are passed through as is without one
            ical_backend: iCalendar back-end name or instance

        Raises:
            ConfigurationError: If the back-end is unknown
        """
        self.base_url = base_url or None
        self.ical_backend = get_backend(ical_backend)

    def __repr__(self) -> str:
        return f"CalendarResponseParser(base_url={self.base_url!r}, ical_backend={self.ical_backend.name!r})"

    def parse_calendars(self, body: Union[str, bytes]) -> List[Calendar]:
        return parse_calendars(body, base_url=self.base_url)

    def parse_events(self, body: Union[str, bytes]) -> List[Event]:
        return parse_events(body, base_url=self.base_url, backend=self.ical_backend)

    def detect_changes(
        self,
        prev_ctag: Optional[str],
        prev_refs: Iterable[EventRef],
        curr_ctag: Optional[str],
        curr_refs: Iterable[EventRef],
    ) -> SyncChangesResult:
        return detect_changes(prev_ctag, prev_refs, curr_ctag, curr_refs)
