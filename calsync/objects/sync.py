"""
Snapshot references and the result of comparing two snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EventRef:
    """Identifies one version of an event resource."""

    href: str
    etag: str


@dataclass(frozen=True)
class SyncChangesResult:
    """
    Difference between two observations of a calendar collection.

    Attributes:
        changed: False if the collection ctag did not change
        new_ctag: ctag of the current observation, to be stored by the caller
        new_events: hrefs only present in the current observation
        updated_events: hrefs present in both, with a different etag
        deleted_events: hrefs only present in the previous observation
    """

    changed: bool
    new_ctag: str | None
    new_events: tuple[str, ...] = ()
    updated_events: tuple[str, ...] = ()
    deleted_events: tuple[str, ...] = ()
