"""Generic tree view of an XML document.

Elements become nested dicts keyed by local tag name (namespace dropped).
Repeated children are collected into a list, text-only leaves become plain
strings, attributes are kept under ``@name`` keys and text next to child
elements or attributes under ``#text``. Whether an element appears once or
several times is only known at runtime, so every repeated element must be
read through :func:`as_list`.
"""

import xml.etree.ElementTree as ET
from typing import Any

from trias_trips.domain.errors import ResponseParseError

TEXT_KEY = "#text"
ATTRIBUTE_PREFIX = "@"


def _local_name(tag: str) -> str:
    """Strip the namespace from a tag ("{http://www.vdv.de/trias}Trip" -> "Trip")."""
    return tag.rsplit("}", 1)[-1]


def _element_to_node(element: ET.Element) -> Any:
    """Convert an element and its descendants into a generic node."""
    children = list(element)
    text = (element.text or "").strip()

    if not children and not element.attrib:
        return text

    node: dict[str, Any] = {
        f"{ATTRIBUTE_PREFIX}{_local_name(key)}": value for key, value in element.attrib.items()
    }
    for child in children:
        key = _local_name(child.tag)
        value = _element_to_node(child)
        if key not in node:
            node[key] = value
        elif isinstance(node[key], list):
            node[key].append(value)
        else:
            node[key] = [node[key], value]

    if text:
        node[TEXT_KEY] = text
    return node


def parse_xml_tree(xml: str | bytes) -> dict[str, Any]:
    """Parse an XML document into a generic tree rooted at the document element.

    Raises:
        ResponseParseError: If the document is not well-formed.
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as e:
        raise ResponseParseError(f"Malformed TRIAS response: {e}") from e
    return {_local_name(root.tag): _element_to_node(root)}


def as_list(value: Any) -> list[Any]:
    """Normalize a node that may be absent, single or repeated to a list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


def get_path(node: Any, *keys: str) -> Any | None:
    """Follow child keys from node, returning None as soon as one is missing."""
    current = node
    for key in keys:
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


def text_of(node: Any) -> str | None:
    """Return the text content of a leaf node, or None if it has none."""
    if isinstance(node, str):
        return node or None
    if isinstance(node, dict):
        text = node.get(TEXT_KEY)
        return text if isinstance(text, str) and text else None
    return None
