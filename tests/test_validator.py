"""
RSS Validator Tests

End-to-end checks: XML in, ValidationResult out.

Run with: pytest tests/test_validator.py -v
"""

import logging

import pytest

from rss_core import RSSValidator, parse, render, validate
from rss_core.config import CoreConfig, ParserConfig, ValidationConfig
from rss_core.exceptions import FeedParseError
from rss_core.validation import BaseValidator
from rss_core.violations import ErrorKind


VALID_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Liftoff News</title>
    <link>http://liftoff.msfc.nasa.gov/</link>
    <description>Liftoff to Space Exploration.</description>
    <language>en-us</language>
    <pubDate>Tue, 10 Jun 2003 04:00:00 GMT</pubDate>
    <lastBuildDate>Tue, 10 Jun 2003 09:41:01 GMT</lastBuildDate>
    <docs>http://blogs.law.harvard.edu/tech/rss</docs>
    <generator>Weblog Editor 2.0</generator>
    <managingEditor>editor@example.com</managingEditor>
    <webMaster>webmaster@example.com</webMaster>
    <cloud domain="rpc.sys.com" port="80" path="/RPC2" registerProcedure="pingMe" protocol="soap"/>
    <ttl>60</ttl>
    <image>
      <url>http://liftoff.msfc.nasa.gov/logo.png</url>
      <title>Liftoff News</title>
      <link>http://liftoff.msfc.nasa.gov/</link>
      <width>144</width>
      <height>400</height>
    </image>
    <textInput>
      <title>Search</title>
      <description>Search the archives</description>
      <name>q</name>
      <link>http://liftoff.msfc.nasa.gov/search</link>
    </textInput>
    <skipDays><day>Saturday</day><day>Sunday</day></skipDays>
    <item>
      <title>Star City</title>
      <link>http://liftoff.msfc.nasa.gov/news/2003/news-starcity.asp</link>
      <description>How do Americans get ready to work with Russians aboard the ISS?</description>
      <pubDate>Tue, 03 Jun 2003 09:39:21 GMT</pubDate>
      <guid isPermaLink="true">http://liftoff.msfc.nasa.gov/2003/06/03.html#item573</guid>
      <author>first.last@example.com</author>
      <category domain="http://www.fool.com/cusips">MSFT</category>
      <source url="http://www.tomalak.org/links2.xml">Tomalak's Realm</source>
      <comments>http://liftoff.msfc.nasa.gov/comments/573</comments>
    </item>
    <item>
      <description>Sky watchers in Europe, Asia, and parts of Alaska and Canada</description>
      <enclosure url="http://www.scripting.com/mp3s/weatherReportSuite.mp3" length="12216320" type="audio/mpeg"/>
      <guid>item-574</guid>
    </item>
  </channel>
</rss>
"""

INVALID_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="0.92">
  <channel>
    <title>Broken</title>
    <link>not a uri</link>
    <description></description>
    <item>
      <link>http://example.com/1</link>
    </item>
    <item>
      <title>Second</title>
      <author>bad mail address</author>
      <pubDate>yesterday</pubDate>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def validator():
    return RSSValidator()


class TestRSSValidator:
    """Tests for RSSValidator."""

    def test_is_base_validator(self, validator):
        assert isinstance(validator, BaseValidator)
        assert validator.schema_type == "RSS 2.0"

    def test_valid_feed(self, validator):
        result = validator.validate_string(VALID_FEED)
        assert result.is_valid, result.summary()
        assert result.metadata['root'] == "rss"

    def test_valid_feed_bytes(self, validator):
        result = validator.validate_bytes(VALID_FEED.encode("utf-8"), context="upload")
        assert result.is_valid
        assert result.metadata['context'] == "upload"

    def test_invalid_feed(self, validator):
        """Every violation is reported, in document order."""
        result = validator.validate_string(INVALID_FEED)
        assert not result.is_valid
        assert [(v.path, v.kind) for v in result.violations] == [
            ("/rss", ErrorKind.INVALID_VALUE),
            ("/rss/channel/link", ErrorKind.INVALID_URI),
            ("/rss/channel/description", ErrorKind.EMPTY_VALUE),
            ("/rss/channel/item[1]", ErrorKind.INVALID_ELEMENT),
            ("/rss/channel/item[2]/pubDate", ErrorKind.INVALID_DATE),
            ("/rss/channel/item[2]/author", ErrorKind.INVALID_MAIL_ADDRESS),
        ]

    def test_version_message(self, validator):
        result = validator.validate_string(INVALID_FEED)
        message = result.violations[0].message
        assert message.startswith("Attribute 'version' of <rss> value '0.92' is invalid")
        assert '"2.0"' in message

    def test_malformed_raises(self, validator):
        """Malformed XML is an error, not a violation."""
        with pytest.raises(FeedParseError):
            validator.validate_string("<rss version='2.0'><channel>")

    def test_validate_element(self, validator):
        rss = parse(VALID_FEED)
        assert validator.validate_element(rss).is_valid

    def test_config_is_used(self):
        config = CoreConfig(validation=ValidationConfig(validate_day_names=True))
        feed = VALID_FEED.replace("<day>Sunday</day>", "<day>Funday</day>")
        assert RSSValidator().validate_string(feed).is_valid
        result = RSSValidator(config).validate_string(feed)
        assert result.kinds == [ErrorKind.INVALID_VALUE]
        assert result.violations[0].path == "/rss/channel/skipDays/day[2]"

    def test_parser_config_is_used(self):
        config = CoreConfig(parser=ParserConfig(ignore_namespaces=True))
        feed = VALID_FEED.replace('<rss version="2.0">',
                                  '<rss xmlns="http://example.com/ns" version="2.0">')
        assert RSSValidator(config).validate_string(feed).is_valid

    def test_logs_outcome(self, validator, caplog):
        with caplog.at_level(logging.INFO, logger="rss_core"):
            validator.validate_string(INVALID_FEED, context="feed.xml")
        assert any("feed.xml" in r.getMessage() for r in caplog.records)


class TestEndToEnd:
    """Parse, validate, render and validate again."""

    def test_round_trip_keeps_verdict(self):
        rss = parse(INVALID_FEED)
        before = validate(rss)
        after = validate(parse(render(rss)))
        assert before.kinds == after.kinds
        assert [v.path for v in before] == [v.path for v in after]

    def test_empty_vs_absent_verdicts(self):
        """An absent optional element is fine; a present empty one is not."""
        absent = parse("<item><title>x</title></item>")
        empty = parse("<item><title>x</title><comments/></item>")
        assert validate(absent).is_valid
        assert validate(empty).kinds == [ErrorKind.EMPTY_VALUE, ErrorKind.INVALID_URI]
