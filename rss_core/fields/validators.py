"""
Syntactic Validators
====================

Pure checks applied to a single string value. Each rule takes the raw
string and returns None when it passes or a RuleError describing the
failure. Rules never raise on bad input.

Rules are composed per field with `apply_rules`, which runs every rule and
returns every failure: an empty link is reported both as empty and as an
invalid URI.
"""

from datetime import datetime
from email.errors import HeaderParseError
from email.headerregistry import HeaderRegistry
from email.utils import parsedate_to_datetime
from typing import Callable, Iterable, List, Optional, Sequence
from urllib.parse import urlsplit
import re

from rss_core.violations import ErrorKind, Location, RuleError, Violation

Rule = Callable[[str], Optional[RuleError]]


def not_empty(value: str) -> Optional[RuleError]:
    """Fail with EmptyValue if the value is the empty string."""
    if value == "":
        return RuleError(ErrorKind.EMPTY_VALUE)
    return None


def must_be_empty(value: str) -> Optional[RuleError]:
    """Fail with NonEmptyValue unless the value is the empty string."""
    if value != "":
        return RuleError(ErrorKind.NON_EMPTY_VALUE)
    return None


# Characters that never appear unescaped in an RFC 3986 URI-reference.
_URI_FORBIDDEN = re.compile(r'[\s<>"{}|\\^`\x00-\x1f\x7f]')
_BAD_PERCENT = re.compile(r'%(?![0-9A-Fa-f]{2})')
_SCHEME = re.compile(r'[A-Za-z][A-Za-z0-9+.\-]*')


def valid_uri(value: str) -> Optional[RuleError]:
    """
    Fail with InvalidUri unless the value is a usable URI-reference.

    Accepted forms are absolute URIs (with a scheme) and references that
    begin with "/" (absolute-path or network-path). Bare relative words
    such as "bad uri" or "index.html" and the empty string are rejected.
    """
    if value == "":
        return RuleError(ErrorKind.INVALID_URI, "empty url")
    if _URI_FORBIDDEN.search(value):
        return RuleError(ErrorKind.INVALID_URI, "contains characters not allowed in a URI")
    if _BAD_PERCENT.search(value):
        return RuleError(ErrorKind.INVALID_URI, "invalid percent-encoding")

    try:
        parts = urlsplit(value)
        parts.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError as e:
        return RuleError(ErrorKind.INVALID_URI, str(e))

    if parts.scheme:
        if not _SCHEME.fullmatch(parts.scheme):
            return RuleError(ErrorKind.INVALID_URI, f"invalid scheme '{parts.scheme}'")
        return None
    if value.startswith("/"):
        return None
    return RuleError(ErrorKind.INVALID_URI, "not an absolute URI or absolute path")


_DAY_OF_WEEK = r'(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun)'
_MONTH = r'(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)'
_ZONE = r'(?:UT|[A-Z]{3,5}|[A-IK-Z]|[+-]\d{4})'

# RFC 822 section 5 and its RFC 1123 refinement: optional day of week,
# two- or four-digit year, seconds optional.
_DATE_PATTERN = re.compile(
    r'(?:' + _DAY_OF_WEEK + r',\s*)?'
    r'\d{1,2}\s+' + _MONTH + r'\s+(?:\d{2}|\d{4})\s+'
    r'\d{2}:\d{2}(?::\d{2})?\s+' + _ZONE
)


def valid_date(value: str) -> Optional[RuleError]:
    """
    Fail with InvalidDate unless the value is an RFC 822/RFC 1123 date-time.

    The day of week, when given, is not checked against the date.
    """
    if not _DATE_PATTERN.fullmatch(value):
        return RuleError(ErrorKind.INVALID_DATE, "does not match RFC 822 date-time syntax")

    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError) as e:
        return RuleError(ErrorKind.INVALID_DATE, str(e))

    if not isinstance(parsed, datetime):
        return RuleError(ErrorKind.INVALID_DATE, "unparseable date")
    return None


_HEADERS = HeaderRegistry()
_MAIL_DETAIL = "not a single RFC 5322 address"


def valid_mail_address(value: str) -> Optional[RuleError]:
    """Fail with InvalidMailAddress unless the value is a single RFC 5322 address."""
    try:
        header = _HEADERS('to', value)
    except (AttributeError, HeaderParseError, IndexError, TypeError, ValueError):
        return RuleError(ErrorKind.INVALID_MAIL_ADDRESS, _MAIL_DETAIL)

    if header.defects:
        return RuleError(ErrorKind.INVALID_MAIL_ADDRESS, str(header.defects[0]))

    addresses = header.addresses
    if len(addresses) != 1:
        return RuleError(
            ErrorKind.INVALID_MAIL_ADDRESS,
            f"expected a single address, found {len(addresses)}",
        )

    address = addresses[0]
    if not address.username or not address.domain:
        return RuleError(ErrorKind.INVALID_MAIL_ADDRESS, "missing local part or domain")
    return None


def valid_enum(allowed: Sequence[str]) -> Rule:
    """Build a rule that fails with InvalidValue unless value is one of `allowed`."""
    allowed = tuple(allowed)
    if len(allowed) == 2:
        detail = f'must be "{allowed[0]}" or "{allowed[1]}"'
    else:
        quoted = [f'"{a}"' for a in allowed]
        detail = f"must be one of {', '.join(quoted[:-1])}, or {quoted[-1]}"

    def rule(value: str) -> Optional[RuleError]:
        if value not in allowed:
            return RuleError(ErrorKind.INVALID_VALUE, detail)
        return None

    rule.__name__ = f"valid_enum({'|'.join(allowed)})"
    return rule


_DIGITS = re.compile(r'[0-9]+')

# Widest unsigned 64-bit value; longer strings are out of range.
_MAX_DIGITS = 20


def bounded_uint(maximum: Optional[int] = None,
                 minimum: int = 0,
                 detail: Optional[str] = None) -> Rule:
    """
    Build a rule that fails with InvalidValue unless the value is a
    non-negative decimal integer within [minimum, maximum].

    Args:
        maximum: Inclusive upper bound, or None for unbounded
        minimum: Inclusive lower bound
        detail: Message hint; derived from the bounds when omitted
    """
    if detail is None:
        if maximum is None and minimum == 0:
            detail = "must be a non-negative integer"
        elif maximum is None:
            detail = f"must be an integer of at least {minimum}"
        else:
            detail = f"must be an integer between {minimum} and {maximum}"

    def rule(value: str) -> Optional[RuleError]:
        if len(value) > _MAX_DIGITS or not _DIGITS.fullmatch(value):
            return RuleError(ErrorKind.INVALID_VALUE, detail)
        number = int(value)
        if number < minimum or (maximum is not None and number > maximum):
            return RuleError(ErrorKind.INVALID_VALUE, detail)
        return None

    rule.__name__ = f"bounded_uint({minimum}, {maximum})"
    return rule


def apply_rules(value: str, rules: Iterable[Rule],
                location: Location) -> List[Violation]:
    """
    Run every rule against `value` and return all resulting violations.

    Args:
        value: Raw string from the document
        rules: Rules in declaration order
        location: Where the value lives, for diagnostics

    Returns:
        Violations in rule order (empty when every rule passes)
    """
    violations = []
    for rule in rules:
        error = rule(value)
        if error is not None:
            violations.append(Violation.invalid_value(location, value, error))
    return violations
