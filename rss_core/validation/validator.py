"""
RSS Validator
=============

BaseValidator implementation applying the RSS 2.0 rules.
"""

from typing import Optional, Union
import logging

from rss_core.config import CoreConfig
from rss_core.elements import Element
from rss_core.validation.base import BaseValidator, ValidationResult
from rss_core.validation.engine import validate
from rss_core.xml import parse

logger = logging.getLogger(__name__)


class RSSValidator(BaseValidator):
    """
    Validator for RSS 2.0 documents and fragments.

    Malformed XML is not a violation: validate_string and validate_bytes
    let FeedParseError propagate.

    Example:
        validator = RSSValidator()
        result = validator.validate_bytes(data)
        if not result.is_valid:
            print(result.summary())
    """

    def __init__(self, config: Optional[CoreConfig] = None):
        self._config = config or CoreConfig()

    @property
    def schema_type(self) -> str:
        return "RSS 2.0"

    @property
    def config(self) -> CoreConfig:
        return self._config

    def validate_element(self, element: Element, context: str = "element") -> ValidationResult:
        """Validate an already-parsed element tree."""
        result = validate(element, self._config.validation)
        result.metadata['context'] = context
        result.metadata['root'] = element.tag

        if result.is_valid:
            logger.info(f"{context}: <{element.tag}> is valid")
        else:
            logger.info(f"{context}: <{element.tag}> has {len(result)} violation(s)")

        return result

    def validate_string(self, xml_string: str, context: str = "string") -> ValidationResult:
        """Parse and validate a document given as text."""
        return self.validate_bytes(xml_string, context)

    def validate_bytes(self, data: Union[bytes, str], context: str = "bytes") -> ValidationResult:
        """
        Parse and validate a document given as bytes.

        Args:
            data: Raw XML document
            context: Context string for log messages

        Returns:
            ValidationResult with validation outcome

        Raises:
            FeedParseError: If the XML is malformed
            UnknownElementError: If the root tag is not an RSS element
        """
        element = parse(data, self._config.parser)
        return self.validate_element(element, context)
