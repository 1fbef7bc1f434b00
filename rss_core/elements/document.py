"""
Document Assembly
=================

The top-level <rss> element and its single <channel>.

At the top level, an RSS document is an <rss> element with a mandatory
`version` attribute that must be "2.0". Subordinate to it is a single
<channel> holding the channel metadata and its items.

A version 0.91 or 0.92 document is accepted only if its content happens
to satisfy the 2.0 rules; its version attribute still fails the check.

See: https://validator.w3.org/feed/docs/rss2.html#whatIsRss
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Type

from rss_core.elements.base import AttributeSpec, ChildSpec, Element
from rss_core.elements.channel import (
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
from rss_core.elements.common import Category, Description, Link, PubDate, Title
from rss_core.elements.item import Author, Comments, Enclosure, GUID, Item, Source
from rss_core.fields import ABSENT, Field, Present
from rss_core.violations import ErrorKind, RuleError

RSS_VERSION = "2.0"


def valid_version(value: str) -> Optional[RuleError]:
    """The version attribute must be exactly "2.0"; no normalization."""
    if value != RSS_VERSION:
        return RuleError(ErrorKind.INVALID_VALUE, f'must be "{RSS_VERSION}"')
    return None


@dataclass
class Channel(Element):
    """
    <channel>: required sub-element of <rss>.

    <title>, <link> and <description> are required; everything else is
    optional. Any number of <item>s may follow.
    """
    tag = "channel"
    CHILDREN = (
        ChildSpec("title", "title", Title, required=True),
        ChildSpec("link", "link", Link, required=True),
        ChildSpec("description", "description", Description, required=True),
        ChildSpec("language", "language", Language),
        ChildSpec("copyright", "copyright", Copyright),
        ChildSpec("managingEditor", "managing_editor", ManagingEditor),
        ChildSpec("webMaster", "web_master", WebMaster),
        ChildSpec("pubDate", "pub_date", PubDate),
        ChildSpec("lastBuildDate", "last_build_date", LastBuildDate),
        ChildSpec("category", "category", Category),
        ChildSpec("generator", "generator", Generator),
        ChildSpec("docs", "docs", Docs),
        ChildSpec("cloud", "cloud", Cloud),
        ChildSpec("ttl", "ttl", TTL),
        ChildSpec("image", "image", Image),
        ChildSpec("rating", "rating", Rating),
        ChildSpec("textInput", "text_input", TextInput),
        ChildSpec("skipHours", "skip_hours", SkipHours),
        ChildSpec("skipDays", "skip_days", SkipDays),
        ChildSpec("item", "items", Item, repeated=True),
    )

    title: Field = ABSENT
    link: Field = ABSENT
    description: Field = ABSENT
    language: Field = ABSENT
    copyright: Field = ABSENT
    managing_editor: Field = ABSENT
    web_master: Field = ABSENT
    pub_date: Field = ABSENT
    last_build_date: Field = ABSENT
    category: Field = ABSENT
    generator: Field = ABSENT
    docs: Field = ABSENT
    cloud: Field = ABSENT
    ttl: Field = ABSENT
    image: Field = ABSENT
    rating: Field = ABSENT
    text_input: Field = ABSENT
    skip_hours: Field = ABSENT
    skip_days: Field = ABSENT
    items: List[Item] = field(default_factory=list)

    @classmethod
    def new(cls, title: str, link: str, description: str,
            **optional: Any) -> "Channel":
        """
        Build a channel from the required triad.

        Args:
            title: Channel title
            link: URL of the website the channel corresponds to
            description: Phrase or sentence describing the channel
            **optional: Other channel fields (Fields, or a list for items)

        Example:
            channel = Channel.new("Example", "https://example.com/", "News",
                                  language=Language.of("en-us"))
        """
        return cls(
            title=Title.of(title),
            link=Link.of(link),
            description=Description.of(description),
            **optional,
        )


@dataclass
class RSS(Element):
    """<rss>: document root with a mandatory `version` attribute."""
    tag = "rss"
    ATTRIBUTES = (
        AttributeSpec("version", "version", required=True, rules=(valid_version,)),
    )
    CHILDREN = (
        ChildSpec("channel", "channel", Channel, required=True),
    )

    version: Field = ABSENT
    channel: Field = ABSENT

    @classmethod
    def new(cls, channel: Channel) -> "RSS":
        """Wrap a channel in an <rss version="2.0"> document."""
        return cls(version=Present(RSS_VERSION), channel=Present(channel))

    @property
    def items(self) -> List[Item]:
        """Items of the channel (empty when the channel is absent)."""
        if self.channel.is_absent():
            return []
        return self.channel.unwrap().items


# Tag -> element class, for the XML adapter. Covers every element kind so
# a fragment rooted at any RSS element can be parsed on its own.
ELEMENT_TYPES: Dict[str, Type[Element]] = {
    cls.tag: cls
    for cls in (
        RSS, Channel, Item,
        Title, Link, Description, PubDate, Category,
        Language, Copyright, ManagingEditor, WebMaster, LastBuildDate,
        Generator, Docs, Cloud, TTL, Image, Url, Width, Height, Rating,
        TextInput, Name, SkipHours, Hour, SkipDays, Day,
        Source, Enclosure, GUID, Comments, Author,
    )
}
