"""
Operations Layer - Sans-I/O business logic.

This package contains pure functions that turn decoded WebDAV responses
into domain objects, and compare snapshots of a calendar collection.
Nothing here performs network I/O.

Architecture:
    ┌─────────────────────────────────────┐
    │  caller (HTTP client, sync job)     │
    │  (handles I/O)                      │
    ├─────────────────────────────────────┤
    │  Operations Layer (this package)    │
    │  - parse_calendars / parse_events   │
    │  - detect_changes                   │
    ├─────────────────────────────────────┤
    │  Protocol Layer (calsync.protocol)  │
    │  - multistatus decoding             │
    ├─────────────────────────────────────┤
    │  iCalendar back-ends (calsync.ical) │
    └─────────────────────────────────────┘

Modules:
    base: href resolution and propstat helpers
    calendar_ops: calendar collections from a PROPFIND response
    event_ops: events from a calendar-query / multiget REPORT response
    sync_ops: ctag/etag based change detection
"""
from calsync.operations.base import resolve_href
from calsync.operations.calendar_ops import parse_calendars
from calsync.operations.event_ops import build_event
from calsync.operations.event_ops import parse_events
from calsync.operations.sync_ops import detect_changes
from calsync.operations.sync_ops import event_refs

__all__ = [
    "build_event",
    "detect_changes",
    "event_refs",
    "parse_calendars",
    "parse_events",
    "resolve_href",
]
