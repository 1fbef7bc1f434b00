"""
RSS Core Library
================

A library for parsing, validating and serializing RSS 2.0 documents that
keeps an element or attribute that is absent from the source distinct
from one that is present but empty.

- Tri-state field model (absent / present-empty / present)
- Typed element tree for every RSS 2.0 element
- Exhaustive validation engine reporting every violation in document order
- lxml-backed parse/render adapter preserving the absent/empty distinction
- Configuration management (JSON/YAML)

Architecture
------------

The library is organized into independent, composable modules:

    rss_core/
    ├── fields/       - Field values and syntactic validators
    ├── elements/     - RSS element classes and document assembly
    ├── validation/   - Validation engine, rule table, results
    ├── xml/          - XML parse/render adapter
    └── config/       - Configuration management

Usage
-----

    from rss_core import RSSValidator, parse, render, validate

    # Validate a document
    rss = parse(data)
    result = validate(rss)
    if not result.is_valid:
        for violation in result.violations:
            print(violation.message)

    # Or in one step
    result = RSSValidator().validate_bytes(data)

    # Serialize back
    data = render(rss)

Violations are returned, never raised. Malformed XML raises
FeedParseError.

"""

__version__ = "1.0.0"
__author__ = "rss_core Team"

# Import key classes for convenience
from rss_core.exceptions import (
    FeedParseError,
    FieldAbsentError,
    RSSCoreError,
    UnknownElementError,
)

from rss_core.violations import (
    ErrorKind,
    Location,
    RuleError,
    Violation,
)

from rss_core.fields import (
    ABSENT,
    Absent,
    Field,
    Present,
)

from rss_core.elements import (
    ELEMENT_TYPES,
    RSS,
    RSS_VERSION,
    Channel,
    Element,
    Item,
)

from rss_core.validation import (
    BaseValidator,
    RSSValidator,
    ValidationResult,
    is_valid,
    validate,
)

from rss_core.xml import (
    parse,
    render,
)

from rss_core.config import (
    CoreConfig,
    ParserConfig,
    RenderConfig,
    ValidationConfig,
    load_config,
    save_config,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "FeedParseError",
    "FieldAbsentError",
    "RSSCoreError",
    "UnknownElementError",
    "ErrorKind",
    "Location",
    "RuleError",
    "Violation",
    # Fields
    "ABSENT",
    "Absent",
    "Field",
    "Present",
    # Elements
    "ELEMENT_TYPES",
    "RSS",
    "RSS_VERSION",
    "Channel",
    "Element",
    "Item",
    # Validation
    "BaseValidator",
    "RSSValidator",
    "ValidationResult",
    "is_valid",
    "validate",
    # XML
    "parse",
    "render",
    # Config
    "CoreConfig",
    "ParserConfig",
    "RenderConfig",
    "ValidationConfig",
    "load_config",
    "save_config",
]
