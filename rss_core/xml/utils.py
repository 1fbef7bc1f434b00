"""
XML Utility Functions
=====================

Small lxml helpers shared by the parse/render adapter.
"""

from typing import Any, Iterator, Optional

from lxml import etree


def local_name(element: Any) -> str:
    """
    Extract local name from element tag, stripping any namespace prefix.

    Args:
        element: XML element

    Returns:
        Local tag name without namespace ("" for comments and PIs)

    Example:
        >>> elem = etree.Element("{http://purl.org/dc/elements/1.1/}creator")
        >>> local_name(elem)
        'creator'
    """
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def tag_name(element: Any, ignore_namespaces: bool = False) -> str:
    """Tag used to match an element: local name or the full Clark name."""
    if ignore_namespaces:
        return local_name(element)
    tag = element.tag
    return tag if isinstance(tag, str) else ""


def iter_element_children(element: Any) -> Iterator[Any]:
    """Iterate over child elements, skipping comments and processing instructions."""
    for child in element:
        if isinstance(child.tag, str):
            yield child


def character_data(element: Any) -> str:
    """
    All character data directly inside an element.

    Text interleaved with child elements is concatenated, so the result
    matches what a parser accumulating only direct text would see.
    """
    parts = [element.text or ""]
    for child in element:
        parts.append(child.tail or "")
    return "".join(parts)


def create_element(tag: str, text: Optional[str] = None,
                   attrib: Optional[dict] = None) -> Any:
    """
    Create an XML element with optional text and attributes.

    Args:
        tag: Element tag name
        text: Optional text content; "" is kept and renders as <tag></tag>
        attrib: Optional attributes dict (insertion order is preserved)

    Returns:
        New lxml Element
    """
    elem = etree.Element(tag)
    for name, value in (attrib or {}).items():
        elem.set(name, value)
    if text is not None:
        elem.text = text
    return elem
