"""
Immutable records returned by calsync.
"""

from calsync.objects.calendar import Calendar, SupportedComponent
from calsync.objects.event import (
    Alarm,
    AudioAlarm,
    DisplayAlarm,
    EmailAlarm,
    Event,
    Frequency,
    RecurrenceRule,
)
from calsync.objects.sync import EventRef, SyncChangesResult

__all__ = [
    "Alarm",
    "AudioAlarm",
    "Calendar",
    "DisplayAlarm",
    "EmailAlarm",
    "Event",
    "EventRef",
    "Frequency",
    "RecurrenceRule",
    "SupportedComponent",
    "SyncChangesResult",
]
