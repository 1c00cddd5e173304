"""
Change detection between two observations of a calendar collection.

The caller keeps the ctag and the (href, etag) pairs of the last
observation, and compares them with a fresh one.  Only the hrefs that
need to be fetched or forgotten are reported back.
"""

from __future__ import annotations

from typing import Iterable, Optional

from calsync.objects.event import Event
from calsync.objects.sync import EventRef, SyncChangesResult


def detect_changes(
    prev_ctag: Optional[str],
    prev_refs: Iterable[EventRef],
    curr_ctag: Optional[str],
    curr_refs: Iterable[EventRef],
) -> SyncChangesResult:
    """
    Compare two snapshots of a collection.

    If the ctag is unchanged the collection is unchanged, and the event
    references are not looked at.  Otherwise every href is classified
    as new, updated (etag differs) or deleted; hrefs with an unchanged
    etag are not reported.

    Args:
        prev_ctag: ctag of the previous observation
        prev_refs: event references of the previous observation
        curr_ctag: ctag of the current observation
        curr_refs: event references of the current observation

    Returns:
        SyncChangesResult, new and updated hrefs ordered as in
        ``curr_refs``, deleted hrefs ordered as in ``prev_refs``
    """
    if prev_ctag == curr_ctag:
        return SyncChangesResult(changed=False, new_ctag=curr_ctag)

    previous = _index_by_href(prev_refs)
    current = _index_by_href(curr_refs)

    new_events = []
    updated_events = []
    for href, etag in current.items():
        if href not in previous:
            new_events.append(href)
        elif previous[href] != etag:
            updated_events.append(href)

    deleted_events = [href for href in previous if href not in current]

    return SyncChangesResult(
        changed=True,
        new_ctag=curr_ctag,
        new_events=tuple(new_events),
        updated_events=tuple(updated_events),
        deleted_events=tuple(deleted_events),
    )


def event_refs(events: Iterable[Event]) -> list[EventRef]:
    """The (href, etag) references of parsed events, for detect_changes"""
    return [EventRef(href=event.href, etag=event.etag) for event in events]


def _index_by_href(refs: Iterable[EventRef]) -> dict[str, str]:
    ## dicts keep insertion order, the first occurrence of a duplicated
    ## href decides the position, the last one the etag
    index: dict[str, str] = {}
    for ref in refs:
        index[ref.href] = ref.etag
    return index
