"""
Tests for ctag/etag based change detection.
"""

from datetime import datetime

import pytest

from calsync.objects import Event, EventRef, SyncChangesResult
from calsync.operations.sync_ops import detect_changes, event_refs


def refs(*pairs):
    return [EventRef(href=href, etag=etag) for href, etag in pairs]


class TestDetectChanges:
    def test_same_ctag_short_circuits(self):
        """Equal ctags win over any difference in the references."""
        result = detect_changes(
            "ctag-1", refs(("/a", "1"), ("/c", "1")), "ctag-1", refs(("/a", "2"), ("/b", "1"))
        )
        assert result == SyncChangesResult(changed=False, new_ctag="ctag-1")
        assert result.new_events == ()
        assert result.updated_events == ()
        assert result.deleted_events == ()

    def test_new_and_updated(self):
        result = detect_changes(
            "ctag-1", refs(("/a", "1")), "ctag-2", refs(("/a", "2"), ("/b", "1"))
        )
        assert result.changed
        assert result.new_ctag == "ctag-2"
        assert result.updated_events == ("/a",)
        assert result.new_events == ("/b",)
        assert result.deleted_events == ()

    def test_deleted(self):
        result = detect_changes(
            "ctag-1", refs(("/a", "1"), ("/b", "1"), ("/c", "1")), "ctag-2", refs(("/b", "1"))
        )
        assert result.deleted_events == ("/a", "/c")
        assert result.new_events == ()
        assert result.updated_events == ()

    def test_unchanged_etags_are_not_reported(self):
        result = detect_changes("1", refs(("/a", "x")), "2", refs(("/a", "x")))
        assert result.changed
        assert result == SyncChangesResult(changed=True, new_ctag="2")

    def test_ordering(self):
        prev = refs(("/z", "1"), ("/y", "1"), ("/x", "1"), ("/gone2", "1"), ("/gone1", "1"))
        curr = refs(("/new2", "1"), ("/x", "2"), ("/new1", "1"), ("/z", "2"), ("/y", "1"))
        result = detect_changes("a", prev, "b", curr)
        assert result.new_events == ("/new2", "/new1")
        assert result.updated_events == ("/x", "/z")
        assert result.deleted_events == ("/gone2", "/gone1")

    def test_initial_sync(self):
        """Nothing stored yet, everything is new."""
        result = detect_changes(None, [], "ctag-1", refs(("/a", "1"), ("/b", "")))
        assert result.new_events == ("/a", "/b")

    def test_empty_etags_compare(self):
        result = detect_changes("1", refs(("/a", "")), "2", refs(("/a", "")))
        assert result.updated_events == ()

    def test_accepts_generators(self):
        result = detect_changes(
            "1", (r for r in refs(("/a", "1"))), "2", (r for r in refs(("/b", "1")))
        )
        assert result.new_events == ("/b",)
        assert result.deleted_events == ("/a",)

    def test_result_is_immutable(self):
        result = detect_changes("1", [], "1", [])
        with pytest.raises(AttributeError):
            result.changed = True


class TestEventRefs:
    def test_event_refs(self):
        events = [
            Event(
                uid=f"uid-{i}",
                summary="s",
                start=datetime(2024, 1, 1),
                end=datetime(2024, 1, 1),
                etag=f'"{i}"',
                href=f"/cal/{i}.ics",
            )
            for i in range(3)
        ]
        assert event_refs(events) == refs(
            ("/cal/0.ics", '"0"'), ("/cal/1.ics", '"1"'), ("/cal/2.ics", '"2"')
        )
