"""
Validation Framework
====================

Checks an element tree against the RSS 2.0 rules and reports every
violation, in document order, rather than stopping at the first.

Components:
- ValidationResult: Container for validation results
- BaseValidator: Abstract base class for validators
- validate: The recursive traversal engine
- STRUCTURAL_RULES: Element-specific rules consulted by the engine
- RSSValidator: BaseValidator implementation for RSS 2.0
"""

from rss_core.validation.base import (
    BaseValidator,
    ValidationResult,
)

from rss_core.validation.rules import (
    DAY_NAMES,
    STRUCTURAL_RULES,
    StructuralRule,
)

from rss_core.validation.engine import (
    check_element,
    is_valid,
    validate,
    validate_tuple,
)

from rss_core.validation.validator import (
    RSSValidator,
)

__all__ = [
    # Base classes
    "BaseValidator",
    "ValidationResult",
    # Rules
    "DAY_NAMES",
    "STRUCTURAL_RULES",
    "StructuralRule",
    # Engine
    "check_element",
    "is_valid",
    "validate",
    "validate_tuple",
    # RSS
    "RSSValidator",
]
