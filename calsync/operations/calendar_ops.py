"""
Calendar operations - turning a PROPFIND on a calendar home into
Calendar objects.
"""

from __future__ import annotations

import logging
from typing import Union

from calsync.objects.calendar import Calendar, SupportedComponent
from calsync.operations.base import comp_names, resolve_href
from calsync.protocol.types import ResponseRecord
from calsync.protocol.xml_parsers import parse_multistatus

log = logging.getLogger("calsync")


def parse_calendars(
    body: Union[str, bytes],
    base_url: str | None = None,
) -> list[Calendar]:
    """
    Parse a PROPFIND multistatus body listing calendar collections.

    Only collections with a 200 OK propstat that accept VEVENT
    components are returned; everything else (the calendar home itself,
    task lists, inboxes) is left out.

    Args:
        body: Raw multistatus XML
        base_url: Base URL to resolve relative hrefs against

    Returns:
        Calendars in the order of the response records

    Raises:
        MultistatusError: If the body cannot be decoded
    """
    calendars = []
    for response in parse_multistatus(body):
        calendar = _response_to_calendar(response, base_url)
        if calendar is not None:
            calendars.append(calendar)
    return calendars


def _response_to_calendar(
    response: ResponseRecord, base_url: str | None
) -> Calendar | None:
    propstat = response.ok_propstat()
    if propstat is None:
        log.debug(f"no properties returned for {response.href}, skipping")
        return None

    supported: list[SupportedComponent] = []
    for name in comp_names(propstat, "supported-calendar-component-set"):
        component = SupportedComponent.from_name(name)
        if component is not None and component not in supported:
            supported.append(component)

    if SupportedComponent.VEVENT not in supported:
        log.debug(f"{response.href} does not support VEVENT, skipping")
        return None

    return Calendar(
        display_name=propstat.text("displayname", ""),
        url=resolve_href(response.href, base_url),
        ctag=propstat.text("getctag"),
        supported_components=tuple(supported),
        description=propstat.text("calendar-description"),
        color=propstat.text("calendar-color"),
    )
