"""
Pure functions for decoding WebDAV multistatus XML.

All functions in this module are pure - they take XML text or bytes in
and return structured data out, with no side effects or I/O.
"""

import logging
from typing import Union

from lxml import etree
from lxml.etree import _Element

from calsync.lib import error
from calsync.lib.python_utilities import to_bytes

from .types import PropstatRecord, ResponseRecord, XMLNode

log = logging.getLogger(__name__)


def parse_multistatus(
    body: Union[str, bytes],
    huge_tree: bool = False,
) -> list[ResponseRecord]:
    """
    Parse a 207 Multi-Status response body.

    Namespace prefixes vary between servers, so only local names are
    matched.  Elements that may repeat (response, propstat, children of
    a property) always come out as tuples, also when the server sends
    exactly one of them.

    Args:
        body: Raw XML response, str or bytes
        huge_tree: Allow parsing very large XML documents

    Returns:
        One ResponseRecord per DAV:response, in document order

    Raises:
        MultistatusError: If body is not valid XML, is not a multistatus
            document, or contains a response without href
    """
    if body is None or not body.strip():
        raise error.MultistatusError(reason="empty response body")

    parser = etree.XMLParser(huge_tree=huge_tree, resolve_entities=False)
    try:
        tree = etree.fromstring(to_bytes(body), parser)
    except etree.XMLSyntaxError as e:
        raise error.MultistatusError(reason=f"invalid XML: {e}") from e

    multistatus = _strip_to_multistatus(tree)
    if multistatus is None:
        raise error.MultistatusError(
            reason=f"expected a multistatus root element, got {_localname(tree)}"
        )

    responses: list[ResponseRecord] = []
    for elem in multistatus:
        if _localname(elem) != "response":
            continue
        responses.append(_parse_response_element(elem))

    log.debug("decoded multistatus with %i responses", len(responses))
    return responses


# Helper functions


def _localname(elem: _Element) -> str:
    """Element name with the namespace stripped"""
    return etree.QName(elem).localname


def _strip_to_multistatus(tree: _Element) -> Union[_Element, None]:
    """
    Strip outer elements to get to the multistatus element.

    The general format is:
        <xml><multistatus>
            <response>...</response>
            <response>...</response>
        </multistatus></xml>

    but the xml wrapper is usually missing.
    """
    if _localname(tree) == "multistatus":
        return tree
    if _localname(tree) == "xml":
        for child in tree:
            if isinstance(child.tag, str) and _localname(child) == "multistatus":
                return child
    return None


def _parse_response_element(response: _Element) -> ResponseRecord:
    """
    Parse a single DAV:response element.
    """
    href = None
    status = None
    propstats: list[PropstatRecord] = []

    for elem in response:
        if not isinstance(elem.tag, str):
            ## comments and processing instructions
            continue
        name = _localname(elem)
        if name == "href" and href is None:
            href = (elem.text or "").strip()
        elif name == "status":
            status = _text(elem)
        elif name == "propstat":
            propstats.append(_parse_propstat_element(elem))

    if not href:
        raise error.MultistatusError(reason="response element without href")

    return ResponseRecord(href=href, propstats=tuple(propstats), status=status)


def _parse_propstat_element(propstat: _Element) -> PropstatRecord:
    status = None
    prop: dict[str, XMLNode] = {}

    for elem in propstat:
        if not isinstance(elem.tag, str):
            continue
        name = _localname(elem)
        if name == "status":
            status = _text(elem)
        elif name == "prop":
            for child in elem:
                if not isinstance(child.tag, str):
                    continue
                node = _element_to_node(child)
                ## first one wins if a server repeats a property
                prop.setdefault(node.name, node)

    return PropstatRecord(status=status, prop=prop)


def _element_to_node(elem: _Element) -> XMLNode:
    """
    Convert an lxml element into an XMLNode, recursively.
    """
    return XMLNode(
        name=_localname(elem),
        text=_text(elem),
        attributes={etree.QName(k).localname: v for k, v in elem.attrib.items()},
        children=tuple(
            _element_to_node(child) for child in elem if isinstance(child.tag, str)
        ),
    )


def _text(elem: _Element) -> Union[str, None]:
    if elem.text is None:
        return None
    text = elem.text.strip()
    return text or None
