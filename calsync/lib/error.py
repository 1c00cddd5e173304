#!/usr/bin/env python
import logging
import os
from typing import Optional

from calsync import __version__

## Environmental variables prepended with "PYTHON_CALSYNC" are used
## for debug purposes.  One of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("PYTHON_CALSYNC_DEBUGMODE")
if not debugmode:
    if "dev" in __version__ or __version__ == "(unknown)":
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("calsync")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def weirdness(*reasons) -> None:
    reason = " : ".join([str(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


class DAVError(Exception):
    url: Optional[str] = None
    reason: str = "no reason"

    def __init__(self, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class ResponseError(DAVError):
    pass


class MultistatusError(ResponseError):
    """
    The response body could not be decoded as a WebDAV multistatus
    document.  There are no record boundaries to recover from, so the
    whole parse call fails.
    """

    pass


class CalendarDataError(DAVError):
    """
    The calendar-data of a single response record could not be turned
    into an event.  Raised and caught inside the event extraction, the
    caller only sees a log line and a shorter event list.
    """

    pass


class ConfigurationError(DAVError):
    pass
