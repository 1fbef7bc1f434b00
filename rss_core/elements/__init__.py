"""
Element Tree Model
==================

Typed representations of every RSS 2.0 element, built from the Field
model. Each element class declares its tag, character-data rules,
attributes and child slots; the validation engine and the XML adapter
both read these declarations.

Components:
- Element, AttributeSpec, ChildSpec: base declarations
- RSS, Channel: document assembly
- Item and item sub-elements
- Channel sub-elements (Cloud, Image, TextInput, SkipHours, SkipDays, ...)
- ELEMENT_TYPES: tag -> class registry
"""

from rss_core.elements.base import (
    AttributeSpec,
    ChildSpec,
    Element,
)

from rss_core.elements.common import (
    Category,
    Description,
    Link,
    PubDate,
    Title,
)

from rss_core.elements.channel import (
    CLOUD_PROTOCOLS,
    Cloud,
    Copyright,
    Day,
    Docs,
    Generator,
    Height,
    Hour,
    Image,
    Language,
    LastBuildDate,
    ManagingEditor,
    Name,
    Rating,
    SkipDays,
    SkipHours,
    TextInput,
    TTL,
    Url,
    WebMaster,
    Width,
)

from rss_core.elements.item import (
    Author,
    Comments,
    Enclosure,
    GUID,
    Item,
    Source,
)

from rss_core.elements.document import (
    ELEMENT_TYPES,
    RSS,
    RSS_VERSION,
    Channel,
)

__all__ = [
    # Base
    "AttributeSpec",
    "ChildSpec",
    "Element",
    # Document
    "ELEMENT_TYPES",
    "RSS",
    "RSS_VERSION",
    "Channel",
    # Shared
    "Category",
    "Description",
    "Link",
    "PubDate",
    "Title",
    # Channel
    "CLOUD_PROTOCOLS",
    "Cloud",
    "Copyright",
    "Day",
    "Docs",
    "Generator",
    "Height",
    "Hour",
    "Image",
    "Language",
    "LastBuildDate",
    "ManagingEditor",
    "Name",
    "Rating",
    "SkipDays",
    "SkipHours",
    "TextInput",
    "TTL",
    "Url",
    "WebMaster",
    "Width",
    # Item
    "Author",
    "Comments",
    "Enclosure",
    "GUID",
    "Item",
    "Source",
]
