"""
Violations
==========

Error kinds and the violation record produced when a document breaks an
RSS 2.0 rule. Violations are plain data; they are collected, never raised.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Taxonomy of rule failures."""
    EMPTY_VALUE = "EmptyValue"
    NON_EMPTY_VALUE = "NonEmptyValue"
    INVALID_ELEMENT = "InvalidElement"
    INVALID_VALUE = "InvalidValue"
    INVALID_DATE = "InvalidDate"
    INVALID_MAIL_ADDRESS = "InvalidMailAddress"
    INVALID_URI = "InvalidUri"

    @property
    def description(self) -> str:
        descriptions = {
            ErrorKind.EMPTY_VALUE: "Element must not have empty value",
            ErrorKind.NON_EMPTY_VALUE: "Element must not have value",
            ErrorKind.INVALID_ELEMENT: "Element must contain required sub-elements",
            ErrorKind.INVALID_VALUE: "Element must have valid value",
            ErrorKind.INVALID_DATE: "Element must contain a valid date (RFC822)",
            ErrorKind.INVALID_MAIL_ADDRESS: "Element must contain a valid mail address (RFC5322)",
            ErrorKind.INVALID_URI: "Element must contain a valid URI (RFC3986)",
        }
        return descriptions[self]

    @property
    def is_value_error(self) -> bool:
        """InvalidDate, InvalidMailAddress and InvalidUri specialize InvalidValue."""
        return self in (
            ErrorKind.INVALID_VALUE,
            ErrorKind.INVALID_DATE,
            ErrorKind.INVALID_MAIL_ADDRESS,
            ErrorKind.INVALID_URI,
        )


@dataclass(frozen=True)
class RuleError:
    """Outcome of a single failed syntactic rule, before it is located."""
    kind: ErrorKind
    detail: str = ""


@dataclass(frozen=True)
class Location:
    """
    Where in the tree a value lives.

    Attributes:
        tag: Tag of the element being checked
        attribute: Attribute name, or None for the element's character data
        path: Slash path of the element, e.g. /rss/channel/item[2]/guid
    """
    tag: str
    attribute: Optional[str] = None
    path: str = ""

    @property
    def name(self) -> str:
        return self.attribute if self.attribute is not None else self.tag

    def invalid_value(self, value: str) -> str:
        if self.attribute is not None:
            return f"Attribute '{self.attribute}' of <{self.tag}> value '{value}' is invalid"
        return f"Element <{self.tag}> value '{value}' is invalid"

    def missing(self, parent_tag: Optional[str] = None) -> str:
        if self.attribute is not None:
            return f"Attribute '{self.attribute}' of <{self.tag}> is required"
        if parent_tag:
            return f"Element <{self.tag}> of <{parent_tag}> is required"
        return f"Element <{self.tag}> is required"

    def attribute_of(self, attribute: str) -> "Location":
        return Location(tag=self.tag, attribute=attribute, path=self.path)


@dataclass(frozen=True)
class Violation:
    """
    One reported rule failure.

    Attributes:
        kind: Error kind
        name: Offending tag or attribute name
        value: Literal offending value (None when the field is absent)
        message: Human-readable message embedding name and value
        path: Slash path of the element that owns the field
        detail: Extra hint, e.g. "must be a valid port (1-65535)"
    """
    kind: ErrorKind
    name: str
    value: Optional[str]
    message: str
    path: str = ""
    detail: str = ""

    @classmethod
    def invalid_value(cls, location: Location, value: str,
                      error: RuleError) -> "Violation":
        """Build a violation for a present value that failed a rule."""
        message = f"{location.invalid_value(value)}: {error.kind.description}"
        if error.detail:
            message = f"{message}: {error.detail}"
        return cls(
            kind=error.kind,
            name=location.name,
            value=value,
            message=message,
            path=location.path,
            detail=error.detail,
        )

    @classmethod
    def missing(cls, location: Location,
                parent_tag: Optional[str] = None) -> "Violation":
        """Build an InvalidElement violation for a required field that is absent."""
        kind = ErrorKind.INVALID_ELEMENT
        return cls(
            kind=kind,
            name=location.name,
            value=None,
            message=f"{location.missing(parent_tag)}: {kind.description}",
            path=location.path,
        )

    @classmethod
    def structural(cls, location: Location, detail: str,
                   kind: ErrorKind = ErrorKind.INVALID_ELEMENT,
                   value: Optional[str] = None) -> "Violation":
        """Build a violation for an element-level structural rule."""
        return cls(
            kind=kind,
            name=location.name,
            value=value,
            message=f"Element <{location.tag}> is invalid: {kind.description}: {detail}",
            path=location.path,
            detail=detail,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'kind': self.kind.value,
            'name': self.name,
            'value': self.value,
            'message': self.message,
            'path': self.path,
            'detail': self.detail,
        }

    def __str__(self) -> str:
        return self.message
