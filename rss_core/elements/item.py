"""
Item Elements
=============

<item> and its item-only sub-elements.

See: https://validator.w3.org/feed/docs/rss2.html#hrelementsOfLtitemgt
"""

from dataclasses import dataclass

from rss_core.elements.base import AttributeSpec, ChildSpec, Element
from rss_core.elements.common import Category, Description, Link, PubDate, Title
from rss_core.fields import (
    ABSENT,
    Field,
    bounded_uint,
    must_be_empty,
    not_empty,
    valid_enum,
    valid_mail_address,
    valid_uri,
)

PERMALINK_VALUES = ("true", "false")


@dataclass
class Source(Element):
    """
    <source>: the RSS channel the item came from.

    The character data (the source channel's title) may be empty; the
    `url` attribute is required.
    """
    tag = "source"
    CHAR_DATA_RULES = ()
    ATTRIBUTES = (
        AttributeSpec("url", "url", required=True, rules=(not_empty, valid_uri)),
    )

    char_data: str = ""
    url: Field = ABSENT


@dataclass
class Enclosure(Element):
    """
    <enclosure>: a media object attached to the item.

    An empty element; `length` is in bytes and 0 means unknown.

    Example:
        <enclosure url="https://example.com/a.mp3" length="12216320"
                   type="audio/mpeg"/>
    """
    tag = "enclosure"
    CHAR_DATA_RULES = (must_be_empty,)
    ATTRIBUTES = (
        AttributeSpec("url", "url", required=True, rules=(not_empty, valid_uri)),
        AttributeSpec("length", "length", required=True, rules=(bounded_uint(),)),
        AttributeSpec("type", "type", required=True, rules=(not_empty,)),
    )

    char_data: str = ""
    url: Field = ABSENT
    length: Field = ABSENT
    type: Field = ABSENT


@dataclass
class GUID(Element):
    """
    <guid>: a string that uniquely identifies the item.

    When isPermaLink is "true" the value must also be a URI; that check is
    conditional and lives in the rule table.
    """
    tag = "guid"
    CHAR_DATA_RULES = (not_empty,)
    ATTRIBUTES = (
        AttributeSpec("isPermaLink", "is_perma_link", required=False,
                      rules=(valid_enum(PERMALINK_VALUES),)),
    )

    char_data: str = ""
    is_perma_link: Field = ABSENT

    @property
    def is_permalink(self) -> bool:
        return self.is_perma_link.get() == "true"


@dataclass
class Comments(Element):
    """<comments>: URL of a page for comments relating to the item."""
    tag = "comments"
    CHAR_DATA_RULES = (not_empty, valid_uri)

    char_data: str = ""


@dataclass
class Author(Element):
    """<author>: email address of the author of the item."""
    tag = "author"
    CHAR_DATA_RULES = (not_empty, valid_mail_address)

    char_data: str = ""


@dataclass
class Item(Element):
    """
    <item>: a story in the channel.

    Every sub-element is optional, but at least one of <title> or
    <description> must be present and non-empty.
    """
    tag = "item"
    CHILDREN = (
        ChildSpec("title", "title", Title),
        ChildSpec("link", "link", Link),
        ChildSpec("description", "description", Description),
        ChildSpec("source", "source", Source),
        ChildSpec("enclosure", "enclosure", Enclosure),
        ChildSpec("category", "category", Category),
        ChildSpec("pubDate", "pub_date", PubDate),
        ChildSpec("guid", "guid", GUID),
        ChildSpec("comments", "comments", Comments),
        ChildSpec("author", "author", Author),
    )

    title: Field = ABSENT
    link: Field = ABSENT
    description: Field = ABSENT
    source: Field = ABSENT
    enclosure: Field = ABSENT
    category: Field = ABSENT
    pub_date: Field = ABSENT
    guid: Field = ABSENT
    comments: Field = ABSENT
    author: Field = ABSENT
