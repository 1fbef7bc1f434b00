"""
Channel Elements
================

Optional sub-elements of <channel> and their descendants.

See: https://validator.w3.org/feed/docs/rss2.html#optionalChannelElements
"""

from dataclasses import dataclass, field
from typing import List

from rss_core.elements.base import AttributeSpec, ChildSpec, Element
from rss_core.elements.common import Description, Link, Title
from rss_core.fields import (
    ABSENT,
    Field,
    bounded_uint,
    must_be_empty,
    not_empty,
    valid_date,
    valid_enum,
    valid_uri,
)

CLOUD_PROTOCOLS = ("xml-rpc", "soap", "http-post")

MAX_IMAGE_WIDTH = 144
MAX_IMAGE_HEIGHT = 400
MAX_SKIP_HOURS = 24
MAX_SKIP_DAYS = 7


# Free-text channel metadata. RSS 2.0 puts no constraint on the content
# of these elements.

@dataclass
class Language(Element):
    """<language>: ISO 639 language code; not checked against the code list."""
    tag = "language"
    CHAR_DATA_RULES = ()

    char_data: str = ""


@dataclass
class Copyright(Element):
    tag = "copyright"
    CHAR_DATA_RULES = ()

    char_data: str = ""


@dataclass
class ManagingEditor(Element):
    tag = "managingEditor"
    CHAR_DATA_RULES = ()

    char_data: str = ""


@dataclass
class WebMaster(Element):
    tag = "webMaster"
    CHAR_DATA_RULES = ()

    char_data: str = ""


@dataclass
class Generator(Element):
    tag = "generator"
    CHAR_DATA_RULES = ()

    char_data: str = ""


@dataclass
class Docs(Element):
    tag = "docs"
    CHAR_DATA_RULES = ()

    char_data: str = ""


@dataclass
class Rating(Element):
    """<rating>: PICS rating for the channel."""
    tag = "rating"
    CHAR_DATA_RULES = ()

    char_data: str = ""


@dataclass
class LastBuildDate(Element):
    """<lastBuildDate>: last time the content of the channel changed (RFC 822)."""
    tag = "lastBuildDate"
    CHAR_DATA_RULES = (not_empty, valid_date)

    char_data: str = ""


@dataclass
class Cloud(Element):
    """
    <cloud>: registration endpoint for rssCloud change notifications.

    The element is optional, but once present it must carry all five
    attributes and no character data.

    Example:
        <cloud domain="rpc.sys.com" port="80" path="/RPC2"
               registerProcedure="pingMe" protocol="soap"/>
    """
    tag = "cloud"
    CHAR_DATA_RULES = (must_be_empty,)
    ATTRIBUTES = (
        AttributeSpec("domain", "domain", required=True, rules=(not_empty,)),
        AttributeSpec("port", "port", required=True, rules=(
            bounded_uint(65535, minimum=1, detail="must be a valid port (1-65535)"),
        )),
        AttributeSpec("path", "path", required=True, rules=(not_empty,)),
        AttributeSpec("registerProcedure", "register_procedure", required=True,
                      rules=(not_empty,)),
        AttributeSpec("protocol", "protocol", required=True,
                      rules=(valid_enum(CLOUD_PROTOCOLS),)),
    )

    char_data: str = ""
    domain: Field = ABSENT
    port: Field = ABSENT
    path: Field = ABSENT
    register_procedure: Field = ABSENT
    protocol: Field = ABSENT


@dataclass
class TTL(Element):
    """<ttl>: minutes a channel may be cached before refreshing."""
    tag = "ttl"
    CHAR_DATA_RULES = (not_empty, bounded_uint())

    char_data: str = ""


@dataclass
class Url(Element):
    """<url>: URL of the GIF, JPEG or PNG image that represents the channel."""
    tag = "url"
    CHAR_DATA_RULES = (not_empty, valid_uri)

    char_data: str = ""


@dataclass
class Width(Element):
    """<width>: image width in pixels, at most 144 (88 when omitted)."""
    tag = "width"
    CHAR_DATA_RULES = (bounded_uint(MAX_IMAGE_WIDTH),)

    char_data: str = ""


@dataclass
class Height(Element):
    """<height>: image height in pixels, at most 400 (31 when omitted)."""
    tag = "height"
    CHAR_DATA_RULES = (bounded_uint(MAX_IMAGE_HEIGHT),)

    char_data: str = ""


@dataclass
class Image(Element):
    """
    <image>: a GIF, JPEG or PNG image displayed with the channel.

    <url>, <title> and <link> are required; <width>, <height> and
    <description> are optional. Omitted width/height are not filled in.
    """
    tag = "image"
    CHILDREN = (
        ChildSpec("url", "url", Url, required=True),
        ChildSpec("title", "title", Title, required=True),
        ChildSpec("link", "link", Link, required=True),
        ChildSpec("width", "width", Width),
        ChildSpec("height", "height", Height),
        ChildSpec("description", "description", Description),
    )

    url: Field = ABSENT
    title: Field = ABSENT
    link: Field = ABSENT
    width: Field = ABSENT
    height: Field = ABSENT
    description: Field = ABSENT


@dataclass
class Name(Element):
    """<name>: name of the text object in the text input area."""
    tag = "name"
    CHAR_DATA_RULES = (not_empty,)

    char_data: str = ""


@dataclass
class TextInput(Element):
    """
    <textInput>: a text input box displayed with the channel.

    All four sub-elements are required as a group. Missing members are
    reported once for the whole element, not per slot, so the slots are
    declared optional here and the group rule lives in the rule table.
    """
    tag = "textInput"
    CHILDREN = (
        ChildSpec("title", "title", Title),
        ChildSpec("description", "description", Description),
        ChildSpec("name", "name", Name),
        ChildSpec("link", "link", Link),
    )

    title: Field = ABSENT
    description: Field = ABSENT
    name: Field = ABSENT
    link: Field = ABSENT


@dataclass
class Hour(Element):
    """<hour>: an hour (0-23, GMT) during which aggregators may skip reading."""
    tag = "hour"
    CHAR_DATA_RULES = (bounded_uint(23),)

    char_data: str = ""


@dataclass
class SkipHours(Element):
    """<skipHours>: up to 24 <hour> sub-elements."""
    tag = "skipHours"
    CHILDREN = (
        ChildSpec("hour", "hours", Hour, repeated=True, max_occurs=MAX_SKIP_HOURS),
    )

    hours: List[Hour] = field(default_factory=list)


@dataclass
class Day(Element):
    """<day>: a day of the week during which aggregators may skip reading."""
    tag = "day"
    CHAR_DATA_RULES = ()

    char_data: str = ""


@dataclass
class SkipDays(Element):
    """<skipDays>: up to seven <day> sub-elements."""
    tag = "skipDays"
    CHILDREN = (
        ChildSpec("day", "days", Day, repeated=True, max_occurs=MAX_SKIP_DAYS),
    )

    days: List[Day] = field(default_factory=list)
