"""
Validation Engine Tests

Traversal order, violation paths, cardinality and the result container.

Run with: pytest tests/test_engine.py -v
"""

import pytest

from rss_core.config import ValidationConfig
from rss_core.elements import (
    RSS,
    Author,
    Channel,
    Cloud,
    Day,
    Enclosure,
    GUID,
    Hour,
    Image,
    Item,
    SkipDays,
    SkipHours,
    Title,
    TTL,
)
from rss_core.fields import ABSENT, Present
from rss_core.validation import (
    STRUCTURAL_RULES,
    ValidationResult,
    check_element,
    is_valid,
    validate,
    validate_tuple,
)
from rss_core.violations import ErrorKind, Location, Violation
from rss_core.xml import parse


def make_feed(**channel_fields):
    return RSS.new(Channel.new("Example", "https://example.com/", "An example feed",
                               **channel_fields))


FEED_HEAD = (
    b'<rss version="2.0"><channel>'
    b"<title>Example</title><link>https://example.com/</link>"
    b"<description>An example feed</description>"
)
FEED_TAIL = b"</channel></rss>"


class TestTraversal:
    """Tests for traversal order and exhaustiveness."""

    def test_valid_document(self):
        result = validate(make_feed())
        assert result.is_valid
        assert result.violations == []

    def test_self_before_children(self):
        """An element's own violations precede its children's."""
        rss = RSS(version=Present("1.0"), channel=Present(Channel()))
        result = validate(rss)
        assert result.kinds[0] == ErrorKind.INVALID_VALUE
        assert [v.name for v in result.violations] == [
            "version", "title", "link", "description",
        ]

    def test_siblings_left_to_right(self):
        """Sibling items are validated in sequence order."""
        items = [
            Item(title=Title.of("a"), author=Author.of("")),
            Item(),
            Item(title=Title.of("c"), guid=GUID.of("")),
        ]
        result = validate(make_feed(items=items))
        assert [v.path for v in result.violations] == [
            "/rss/channel/item[1]/author",
            "/rss/channel/item[1]/author",
            "/rss/channel/item[2]",
            "/rss/channel/item[3]/guid",
        ]

    def test_does_not_short_circuit(self):
        """Every failure in every scope is reported."""
        channel = Channel(
            title=Title.of(""),
            ttl=TTL.of("soon"),
            cloud=Present(Cloud(char_data="x")),
            items=[Item()],
        )
        result = validate(channel)
        assert result.kinds == [
            ErrorKind.EMPTY_VALUE,
            ErrorKind.INVALID_ELEMENT,
            ErrorKind.INVALID_ELEMENT,
            ErrorKind.NON_EMPTY_VALUE,
            ErrorKind.INVALID_ELEMENT,
            ErrorKind.INVALID_ELEMENT,
            ErrorKind.INVALID_ELEMENT,
            ErrorKind.INVALID_ELEMENT,
            ErrorKind.INVALID_ELEMENT,
            ErrorKind.INVALID_VALUE,
            ErrorKind.INVALID_ELEMENT,
        ]

    def test_absent_child_not_descended(self):
        """An absent optional child contributes nothing."""
        assert validate(make_feed(image=ABSENT, cloud=ABSENT)).is_valid

    def test_any_element_can_be_root(self):
        result = validate(Item())
        assert result.violations[0].path == "/item"


class TestHostileContent:
    """Pathological values are reported as violations; validation never raises."""

    @pytest.mark.parametrize("body, path, kind", [
        (b"<ttl>" + b"9" * 5000 + b"</ttl>",
         "/rss/channel/ttl", ErrorKind.INVALID_VALUE),
        (b"<skipHours><hour>" + b"1" * 5000 + b"</hour></skipHours>",
         "/rss/channel/skipHours/hour[1]", ErrorKind.INVALID_VALUE),
        (b"<item><title>x</title><enclosure url=\"https://example.com/a.mp3\" length=\""
         + b"9" * 5000 + b"\" type=\"audio/mpeg\"/></item>",
         "/rss/channel/item[1]/enclosure", ErrorKind.INVALID_VALUE),
        (b"<item><title>x</title><author>a@[</author></item>",
         "/rss/channel/item[1]/author", ErrorKind.INVALID_MAIL_ADDRESS),
        (b"<item><title>x</title><comments>http://a:bad/</comments></item>",
         "/rss/channel/item[1]/comments", ErrorKind.INVALID_URI),
    ])
    def test_reported_as_violation(self, body, path, kind):
        result = validate(parse(FEED_HEAD + body + FEED_TAIL))
        assert [(v.path, v.kind) for v in result.violations] == [(path, kind)]


class TestPaths:
    """Tests for violation paths."""

    def test_missing_child_path(self):
        """A missing required child is reported at its would-be path."""
        result = validate(RSS.new(Channel()))
        assert result.violations[0].path == "/rss/channel/title"
        assert result.violations[0].message.startswith(
            "Element <title> of <channel> is required"
        )

    def test_attribute_path(self):
        """Attribute violations carry their element's path."""
        item = Item(title=Title.of("x"), enclosure=Present(Enclosure(
            url=Present("https://example.com/a.mp3"), length=Present("x"),
            type=Present("audio/mpeg"),
        )))
        result = validate(make_feed(items=[item]))
        violation = result.violations[0]
        assert violation.path == "/rss/channel/item[1]/enclosure"
        assert violation.name == "length"

    def test_repeated_member_paths(self):
        skip = SkipHours(hours=[Hour("1"), Hour("99")])
        result = validate(make_feed(skip_hours=Present(skip)))
        assert result.violations[0].path == "/rss/channel/skipHours/hour[2]"


class TestCardinality:
    """Tests for repeated-slot caps."""

    def test_at_cap(self):
        skip = SkipDays(days=[Day("Monday")] * 7)
        assert validate(skip).is_valid

    def test_over_cap(self):
        """Overflow is one InvalidElement on the container."""
        skip = SkipDays(days=[Day("Monday")] * 8)
        result = validate(skip)
        assert result.kinds == [ErrorKind.INVALID_ELEMENT]
        assert result.violations[0].path == "/skipDays"
        assert "at most 7 <day> sub-elements allowed, found 8" in result.violations[0].message

    def test_items_unbounded(self):
        items = [Item(title=Title.of(str(i))) for i in range(100)]
        assert validate(make_feed(items=items)).is_valid


class TestConfig:
    """Tests for validation options."""

    def test_default_config(self):
        assert validate(Day("Caturday")).is_valid

    def test_day_names(self):
        config = ValidationConfig(validate_day_names=True)
        result = validate(Day("Caturday"), config)
        assert result.kinds == [ErrorKind.INVALID_VALUE]

    def test_log_violations(self, caplog):
        """With log_violations, each violation is logged at DEBUG."""
        config = ValidationConfig(log_violations=True)
        with caplog.at_level("DEBUG", logger="rss_core"):
            validate(Item(), config)
        assert any("one of <title> or <description>" in r.getMessage() for r in caplog.records)


class TestHelpers:
    """Tests for is_valid, validate_tuple and check_element."""

    def test_is_valid(self):
        assert is_valid(make_feed())
        assert not is_valid(Item())

    def test_validate_tuple(self):
        ok, violations = validate_tuple(Item())
        assert ok is False
        assert len(violations) == 1
        assert validate_tuple(make_feed()) == (True, [])

    def test_check_element_is_local(self):
        """check_element does not descend into children."""
        image = Image(title=Title.of(""))
        assert check_element(image, Location(tag="image"), ValidationConfig()) == []

    def test_structural_rule_table(self):
        assert Item in STRUCTURAL_RULES
        assert Channel not in STRUCTURAL_RULES


class TestValidationResult:
    """Tests for the result container."""

    def make_violation(self, kind=ErrorKind.EMPTY_VALUE, path="/rss/channel/title"):
        return Violation(kind=kind, name="title", value="", message="m", path=path)

    def test_defaults(self):
        result = ValidationResult()
        assert result.is_valid
        assert len(result) == 0
        assert result.summary() == "Validation PASSED - No violations found"

    def test_add_marks_invalid(self):
        result = ValidationResult()
        result.add(self.make_violation())
        assert not result.is_valid
        assert result.error_count == 1

    def test_merge(self):
        first = ValidationResult()
        second = ValidationResult()
        second.add(self.make_violation())
        second.metadata['root'] = "rss"
        first.merge(second)
        assert not first.is_valid
        assert len(first) == 1
        assert first.metadata['root'] == "rss"

    def test_grouping(self):
        result = ValidationResult()
        result.add(self.make_violation())
        result.add(self.make_violation(ErrorKind.INVALID_URI, "/rss/channel/link"))
        result.add(self.make_violation(ErrorKind.EMPTY_VALUE, "/rss/channel/link"))
        assert result.get_violations_by_kind() == {
            ErrorKind.EMPTY_VALUE: 2,
            ErrorKind.INVALID_URI: 1,
        }
        assert len(result.get_violations_by_path()["/rss/channel/link"]) == 2

    def test_summary(self):
        result = ValidationResult()
        result.add(self.make_violation())
        summary = result.summary()
        assert summary.startswith("Validation FAILED - 1 violation(s)")
        assert "/rss/channel/title: m" in summary

    def test_iteration(self):
        result = ValidationResult()
        violation = self.make_violation()
        result.add(violation)
        assert list(result) == [violation]

    def test_violation_to_dict(self):
        data = self.make_violation().to_dict()
        assert data['kind'] == "EmptyValue"
        assert data['path'] == "/rss/channel/title"


class TestErrorKind:
    """Tests for the error kind taxonomy."""

    def test_value_error_specializations(self):
        """Date, mail and URI errors are specializations of InvalidValue."""
        assert ErrorKind.INVALID_VALUE.is_value_error
        assert ErrorKind.INVALID_DATE.is_value_error
        assert ErrorKind.INVALID_MAIL_ADDRESS.is_value_error
        assert ErrorKind.INVALID_URI.is_value_error

    def test_structural_kinds(self):
        assert not ErrorKind.EMPTY_VALUE.is_value_error
        assert not ErrorKind.NON_EMPTY_VALUE.is_value_error
        assert not ErrorKind.INVALID_ELEMENT.is_value_error

    def test_descriptions(self):
        assert ErrorKind.EMPTY_VALUE.description == "Element must not have empty value"
        assert all(kind.description for kind in ErrorKind)
