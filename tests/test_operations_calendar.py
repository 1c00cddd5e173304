"""
Tests for the calendar extraction from PROPFIND responses.
"""

import pytest

from calsync.lib import error
from calsync.objects import Calendar, SupportedComponent
from calsync.operations.calendar_ops import parse_calendars

from .fixture_helpers import NOT_FOUND, calendar_response, multistatus


class TestParseCalendars:
    def test_basic_calendar(self):
        body = multistatus(
            calendar_response("/dav/calendars/user/work/", displayname="Work", ctag="42")
        )
        assert parse_calendars(body) == [
            Calendar(
                display_name="Work",
                url="/dav/calendars/user/work/",
                ctag="42",
                supported_components=(SupportedComponent.VEVENT,),
            )
        ]

    def test_base_url_resolution(self):
        body = multistatus(calendar_response("/dav/calendars/user/work/"))
        (calendar,) = parse_calendars(body, base_url="https://cal.example.com/dav/")
        assert calendar.url == "https://cal.example.com/dav/calendars/user/work/"

    def test_absolute_href_kept(self):
        body = multistatus(calendar_response("https://other.example.com/cal/"))
        (calendar,) = parse_calendars(body, base_url="https://cal.example.com/")
        assert calendar.url == "https://other.example.com/cal/"

    def test_vtodo_only_calendar_is_excluded(self):
        body = multistatus(
            calendar_response("/tasks/", components=("VTODO",)),
            calendar_response("/events/", components=("VEVENT", "VTODO")),
        )
        calendars = parse_calendars(body)
        assert [c.url for c in calendars] == ["/events/"]
        assert calendars[0].supported_components == (
            SupportedComponent.VEVENT,
            SupportedComponent.VTODO,
        )

    def test_collection_without_component_set_is_excluded(self):
        body = multistatus(calendar_response("/dav/calendars/user/", components=()))
        assert parse_calendars(body) == []

    def test_unknown_components_are_discarded(self):
        body = multistatus(
            calendar_response("/cal/", components=("VEVENT", "X-WEIRD", "VAVAILABILITY"))
        )
        (calendar,) = parse_calendars(body)
        assert calendar.supported_components == (
            SupportedComponent.VEVENT,
            SupportedComponent.VAVAILABILITY,
        )
        assert calendar.supports(SupportedComponent.VAVAILABILITY)
        assert not calendar.supports(SupportedComponent.VJOURNAL)

    def test_non_ok_response_is_skipped(self):
        body = multistatus(
            calendar_response("/gone/", status=NOT_FOUND),
            calendar_response("/cal/"),
        )
        assert [c.url for c in parse_calendars(body)] == ["/cal/"]

    def test_ok_propstat_is_selected(self):
        body = multistatus(
            """<d:response><d:href>/cal/</d:href>
            <d:propstat><d:prop><cs:getctag/><ical:calendar-color/></d:prop>
              <d:status>HTTP/1.1 404 Not Found</d:status></d:propstat>
            <d:propstat><d:prop><d:displayname>Home</d:displayname>
              <cal:supported-calendar-component-set><cal:comp name="VEVENT"/>
              </cal:supported-calendar-component-set></d:prop>
              <d:status>HTTP/1.1 200 ok</d:status></d:propstat>
            </d:response>"""
        )
        (calendar,) = parse_calendars(body)
        assert calendar.display_name == "Home"
        assert calendar.ctag is None
        assert calendar.color is None

    def test_missing_displayname_defaults_to_empty(self):
        body = multistatus(calendar_response("/cal/", displayname=None, ctag=None))
        (calendar,) = parse_calendars(body)
        assert calendar.display_name == ""
        assert calendar.ctag is None

    def test_description_and_color(self):
        body = multistatus(
            calendar_response(
                "/cal/",
                extra_props=(
                    "<cal:calendar-description>Team events</cal:calendar-description>"
                    "<ical:calendar-color>#FF0000FF</ical:calendar-color>"
                ),
            )
        )
        (calendar,) = parse_calendars(body)
        assert calendar.description == "Team events"
        assert calendar.color == "#FF0000FF"

    def test_order_is_kept(self):
        hrefs = [f"/cal{i}/" for i in range(5)]
        body = multistatus(*[calendar_response(h) for h in hrefs])
        assert [c.url for c in parse_calendars(body)] == hrefs

    def test_broken_body_raises(self):
        with pytest.raises(error.MultistatusError):
            parse_calendars("<html><body>Bad gateway</body></html>")
