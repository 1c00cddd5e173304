#!/usr/bin/env python
import logging

__version__ = "0.3.0"

from .objects import *
from .operations import detect_changes
from .operations import event_refs
from .operations import parse_calendars
from .operations import parse_events
from .parser import CalendarResponseParser

## We should consider if the NullHandler-logic below is needed or not, and
## if there are better alternatives?
# Silence notification of no default logging handler
log = logging.getLogger("calsync")


class NullHandler(logging.Handler):
    def emit(self, record) -> None:
        pass


log.addHandler(NullHandler())

__all__ = [
    "__version__",
    "CalendarResponseParser",
    "parse_calendars",
    "parse_events",
    "detect_changes",
    "event_refs",
]
