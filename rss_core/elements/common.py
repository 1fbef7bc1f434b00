"""
Shared Elements
===============

Elements that appear under more than one parent: <title>, <link> and
<description> (channel, image, textInput, item), <pubDate> and
<category> (channel, item).

See: https://validator.w3.org/feed/docs/rss2.html
"""

from dataclasses import dataclass

from rss_core.elements.base import AttributeSpec, Element
from rss_core.fields import ABSENT, Field, not_empty, valid_date, valid_uri


@dataclass
class Title(Element):
    """<title>: required under channel, image and textInput; optional under item."""
    tag = "title"
    CHAR_DATA_RULES = (not_empty,)

    char_data: str = ""


@dataclass
class Link(Element):
    """<link>: required under channel, image and textInput; optional under item."""
    tag = "link"
    CHAR_DATA_RULES = (not_empty, valid_uri)

    char_data: str = ""


@dataclass
class Description(Element):
    """<description>: required under channel and textInput; optional elsewhere."""
    tag = "description"
    CHAR_DATA_RULES = (not_empty,)

    char_data: str = ""


@dataclass
class PubDate(Element):
    """
    <pubDate>: publication date of the channel or item.

    Must conform to the RFC 822 date-time format, except that the year
    may be two or four digits (four preferred).
    """
    tag = "pubDate"
    CHAR_DATA_RULES = (not_empty, valid_date)

    char_data: str = ""


@dataclass
class Category(Element):
    """
    <category>: one or more categories the channel or item belongs to.

    The optional `domain` attribute identifies a categorization taxonomy;
    when given it must not be empty.
    """
    tag = "category"
    CHAR_DATA_RULES = (not_empty,)
    ATTRIBUTES = (
        AttributeSpec("domain", "domain", required=False, rules=(not_empty,)),
    )

    char_data: str = ""
    domain: Field = ABSENT
