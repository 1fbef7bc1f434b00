"""
Field Model
===========

The tri-state value representation (absent / present-empty / present) and
the primitive syntactic validators applied to field values.

Components:
- Field, Absent, Present, ABSENT: tri-state values
- not_empty, must_be_empty, valid_uri, valid_date, valid_mail_address:
  fixed rules
- valid_enum, bounded_uint: rule factories
- apply_rules: run a rule list and collect every violation
"""

from rss_core.fields.base import (
    ABSENT,
    Absent,
    Field,
    Present,
    field_of,
)

from rss_core.fields.validators import (
    Rule,
    apply_rules,
    bounded_uint,
    must_be_empty,
    not_empty,
    valid_date,
    valid_enum,
    valid_mail_address,
    valid_uri,
)

__all__ = [
    # Values
    "ABSENT",
    "Absent",
    "Field",
    "Present",
    "field_of",
    # Rules
    "Rule",
    "apply_rules",
    "bounded_uint",
    "must_be_empty",
    "not_empty",
    "valid_date",
    "valid_enum",
    "valid_mail_address",
    "valid_uri",
]
