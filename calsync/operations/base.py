"""
Base utilities for the operations layer.

The operations layer contains pure functions (Sans-I/O) that turn
decoded multistatus records into domain objects, and compare domain
objects with each other.

Design principles:
- All functions are pure: same inputs always produce same outputs
- No network I/O - that's the caller's responsibility
- Nothing is cached between calls
"""
from __future__ import annotations

from typing import Iterable
from typing import Optional

from calsync.lib.url import URL
from calsync.protocol.types import PropstatRecord
from calsync.protocol.types import ResponseRecord


def resolve_href(href: str, base_url: Optional[str] = None) -> str:
    """
    Resolve an href from a server response to an absolute URL.

    Args:
        href: The href from the server response
        base_url: Optional base URL to resolve relative hrefs against

    Returns:
        The resolved URL, or the href verbatim if no base URL was given
        or the href already is a full URL
    """
    if not href or not base_url:
        return href
    return str(URL(base_url).join(href))


def find_propstat_with(
    response: ResponseRecord, prop_name: str
) -> Optional[PropstatRecord]:
    """
    First propstat of a response carrying a non-empty ``prop_name``.
    Propstats reported as 200 OK are preferred, some servers leave the
    status out altogether so the others are tried after.
    """
    candidates = [p for p in response.propstats if p.ok] + [
        p for p in response.propstats if not p.ok
    ]
    for propstat in candidates:
        if propstat.text(prop_name):
            return propstat
    return None


def comp_names(propstat: PropstatRecord, prop_name: str) -> Iterable[str]:
    """
    ``name`` attributes of the comp children of a property like
    supported-calendar-component-set.
    """
    node = propstat.prop.get(prop_name)
    if node is None:
        return []
    return [comp.get("name") for comp in node.findall("comp") if comp.get("name")]
