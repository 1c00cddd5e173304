"""
Pluggable iCalendar parsing.

Two back-ends are shipped, one per iCalendar library:

- ``icalendar`` (default): :class:`IcalendarBackend`
- ``vobject``: :class:`VobjectBackend`

Both implement :class:`ICalBackend`.  The environment variable
``PYTHON_CALSYNC_ICAL_BACKEND`` changes the default.
"""

from __future__ import annotations

import os

from calsync.lib import error

from .base import EventFields, ICalBackend
from .icalendar_backend import IcalendarBackend
from .vobject_backend import VobjectBackend

DEFAULT_BACKEND = "icalendar"

backends: dict[str, type[ICalBackend]] = {
    IcalendarBackend.name: IcalendarBackend,
    VobjectBackend.name: VobjectBackend,
}


def get_backend(name: str | ICalBackend | None = None) -> ICalBackend:
    """
    Return a back-end instance.

    Args:
        name: Back-end name, an ICalBackend instance (returned as is),
            or None for the configured default

    Raises:
        ConfigurationError: If there is no back-end with that name
    """
    if isinstance(name, ICalBackend):
        return name
    if not name:
        name = os.environ.get("PYTHON_CALSYNC_ICAL_BACKEND") or DEFAULT_BACKEND
    try:
        return backends[name.strip().lower()]()
    except KeyError:
        raise error.ConfigurationError(
            reason=f"unknown iCalendar backend {name!r}, choose one of {sorted(backends)}"
        ) from None


__all__ = [
    "DEFAULT_BACKEND",
    "EventFields",
    "ICalBackend",
    "IcalendarBackend",
    "VobjectBackend",
    "get_backend",
]
