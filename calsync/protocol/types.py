"""
Records produced by the multistatus decoder.

These dataclasses are a namespace-agnostic view of a WebDAV 207
Multi-Status body.  Element names are local names only ("displayname",
never "{DAV:}displayname"), and everything that may repeat is a tuple.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True)
class XMLNode:
    """
    A decoded XML element.

    Attributes:
        name: Local element name, namespace stripped
        text: Text content (stripped), None for empty elements
        attributes: Attributes keyed by local name
        children: Child elements in document order
    """

    name: str
    text: str | None = None
    attributes: dict[str, str] = field(default_factory=dict)
    children: tuple[XMLNode, ...] = ()

    def __iter__(self) -> Iterator[XMLNode]:
        return iter(self.children)

    def findall(self, name: str) -> tuple[XMLNode, ...]:
        """All direct children called ``name``, possibly none."""
        return tuple(child for child in self.children if child.name == name)

    def find(self, name: str) -> XMLNode | None:
        """First direct child called ``name``."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def findtext(self, name: str, default: str | None = None) -> str | None:
        child = self.find(name)
        if child is None or child.text is None:
            return default
        return child.text

    def get(self, attribute: str, default: str | None = None) -> str | None:
        return self.attributes.get(attribute, default)


@dataclass(frozen=True)
class PropstatRecord:
    """
    One DAV:propstat of a response.

    Attributes:
        status: Status line, e.g. "HTTP/1.1 200 OK" (None if missing)
        prop: Property local name -> decoded property element
    """

    status: str | None = None
    prop: dict[str, XMLNode] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """True if the server reports these properties as 200 OK."""
        return bool(self.status) and "200 ok" in self.status.lower()

    def text(self, name: str, default: str | None = None) -> str | None:
        node = self.prop.get(name)
        if node is None or node.text is None:
            return default
        return node.text


@dataclass(frozen=True)
class ResponseRecord:
    """
    One DAV:response of a multistatus body.

    Attributes:
        href: The href exactly as sent by the server (whitespace stripped)
        propstats: All propstat elements, in document order
        status: Response-level status line, if any (e.g. in sync reports)
    """

    href: str
    propstats: tuple[PropstatRecord, ...] = ()
    status: str | None = None

    def ok_propstat(self) -> PropstatRecord | None:
        """The first propstat reported as 200 OK, if any."""
        for propstat in self.propstats:
            if propstat.ok:
                return propstat
        return None
