"""
Calendar collection as reported by a PROPFIND on a calendar home.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SupportedComponent(Enum):
    """Component kinds a calendar collection may accept (RFC 4791 5.2.3)."""

    VEVENT = "VEVENT"
    VTODO = "VTODO"
    VJOURNAL = "VJOURNAL"
    VFREEBUSY = "VFREEBUSY"
    VTIMEZONE = "VTIMEZONE"
    VAVAILABILITY = "VAVAILABILITY"

    @classmethod
    def from_name(cls, name: str | None) -> SupportedComponent | None:
        """Look up a component by its ``comp name=...`` value, None if unknown."""
        if not name:
            return None
        try:
            return cls(name.strip().upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class Calendar:
    """A calendar collection that can hold events.

    Attributes:
        display_name: ``DAV:displayname``, empty string if the server
            did not send one.
        url: Collection URL, absolute when a base URL was given.
        ctag: ``CS:getctag`` collection change tag, if available.
        supported_components: Component kinds from
            ``supported-calendar-component-set``, in server order.
            Always contains ``SupportedComponent.VEVENT``.
        description: ``calendar-description``, if available.
        color: Apple ``calendar-color``, if available.
    """

    display_name: str
    url: str
    ctag: str | None = None
    supported_components: tuple[SupportedComponent, ...] = ()
    description: str | None = None
    color: str | None = None

    def supports(self, component: SupportedComponent) -> bool:
        return component in self.supported_components
