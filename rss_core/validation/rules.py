"""
Structural Rules
================

Element-specific rules that cannot be expressed as a per-field rule list:
conditional requirements, required groups and conditional syntax checks.

STRUCTURAL_RULES maps an element class to the rules the engine runs after
the element's character data and attribute checks. Each rule receives the
element, its Location and the active ValidationConfig and returns a list
of violations (empty when the rule holds).
"""

from typing import Callable, Dict, List, Tuple, Type

from rss_core.config import ValidationConfig
from rss_core.elements import Day, Element, GUID, Item, TextInput
from rss_core.fields import apply_rules, valid_uri
from rss_core.violations import ErrorKind, Location, RuleError, Violation

StructuralRule = Callable[[Element, Location, ValidationConfig], List[Violation]]

DAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def _has_text(slot) -> bool:
    return slot.is_present() and slot.unwrap().char_data != ""


def item_title_or_description(item: Item, location: Location,
                              config: ValidationConfig) -> List[Violation]:
    """At least one of <title> or <description> must be present and non-empty."""
    if _has_text(item.title) or _has_text(item.description):
        return []
    return [Violation.structural(
        location, "one of <title> or <description> must be present",
    )]


def text_input_group(text_input: TextInput, location: Location,
                     config: ValidationConfig) -> List[Violation]:
    """<title>, <description>, <name> and <link> are required as a unit."""
    slots = (text_input.title, text_input.description, text_input.name, text_input.link)
    if all(slot.is_present() for slot in slots):
        return []
    return [Violation.structural(
        location, "<title>, <description>, <name> and <link> must be present",
    )]


def guid_permalink_uri(guid: GUID, location: Location,
                       config: ValidationConfig) -> List[Violation]:
    """A permalink GUID (isPermaLink="true") must be a URI."""
    if not guid.is_permalink:
        return []
    return apply_rules(guid.char_data, (valid_uri,), location)


def day_name(day: Day, location: Location,
             config: ValidationConfig) -> List[Violation]:
    """<day> must name a weekday; only enforced when configured."""
    if not config.validate_day_names or day.char_data in DAY_NAMES:
        return []
    error = RuleError(ErrorKind.INVALID_VALUE, "must be Monday through Sunday")
    return [Violation.invalid_value(location, day.char_data, error)]


STRUCTURAL_RULES: Dict[Type[Element], Tuple[StructuralRule, ...]] = {
    Item: (item_title_or_description,),
    TextInput: (text_input_group,),
    GUID: (guid_permalink_uri,),
    Day: (day_name,),
}


def structural_rules_for(element: Element) -> Tuple[StructuralRule, ...]:
    return STRUCTURAL_RULES.get(type(element), ())
