"""
Sans-I/O WebDAV response decoding.

This package turns the body of a 207 Multi-Status response into plain
records, without any I/O:

- types: ResponseRecord, PropstatRecord and XMLNode
- xml_parsers: parse_multistatus, the single place where XML namespaces
  are stripped and singleton elements are turned into sequences

Example usage:

    from calsync.protocol import parse_multistatus

    for response in parse_multistatus(body):
        propstat = response.ok_propstat()
        if propstat is not None:
            print(response.href, propstat.text("displayname"))
"""

from .types import PropstatRecord, ResponseRecord, XMLNode
from .xml_parsers import parse_multistatus

__all__ = [
    "PropstatRecord",
    "ResponseRecord",
    "XMLNode",
    "parse_multistatus",
]
