"""
XML Serialization
=================

Bidirectional mapping between XML text and the element tree, delegated
to lxml for tokenizing and serializing.
"""

from rss_core.xml.serializer import (
    parse,
    render,
    to_etree,
)

from rss_core.xml.utils import (
    character_data,
    create_element,
    iter_element_children,
    local_name,
    tag_name,
)

__all__ = [
    "parse",
    "render",
    "to_etree",
    "character_data",
    "create_element",
    "iter_element_children",
    "local_name",
    "tag_name",
]
