"""
Validation Engine
=================

Recursive, depth-first, pre-order traversal of an element tree.

For each element the engine:

1. applies the element's own rules: character-data rules, attribute
   presence and attribute rules, then any structural rules registered
   for the element class;
2. walks the child slots in declaration order. An absent optional slot
   is skipped, an absent required slot is one InvalidElement violation,
   a present slot is validated recursively;
3. for repeated slots, checks the cardinality cap first and then
   validates each member in sequence order.

Every rule in a scope is evaluated; nothing short-circuits except that an
absent child is never descended into. The engine never raises for invalid
content: the verdict and the violations are always returned.
"""

from typing import List, Optional, Tuple
import logging

from rss_core.config import ValidationConfig
from rss_core.elements import ChildSpec, Element
from rss_core.fields import apply_rules
from rss_core.validation.base import ValidationResult
from rss_core.validation.rules import structural_rules_for
from rss_core.violations import Location, Violation

logger = logging.getLogger(__name__)


def check_element(element: Element, location: Location,
                  config: ValidationConfig) -> List[Violation]:
    """
    Apply the rules local to one element, without descending into children.

    Args:
        element: Element to check
        location: Location of the element
        config: Active validation configuration

    Returns:
        Violations of the element's own rules, in rule order
    """
    violations: List[Violation] = []

    if element.has_char_data():
        violations.extend(apply_rules(element.char_data, element.CHAR_DATA_RULES, location))

    for spec, value in element.iter_attributes():
        attr_location = location.attribute_of(spec.name)
        if value.is_absent():
            if spec.required:
                violations.append(Violation.missing(attr_location))
            continue
        violations.extend(apply_rules(value.unwrap(), spec.rules, attr_location))

    for rule in structural_rules_for(element):
        violations.extend(rule(element, location, config))

    return violations


def _check_cardinality(spec: ChildSpec, count: int,
                       location: Location) -> Optional[Violation]:
    if spec.max_occurs is None or count <= spec.max_occurs:
        return None
    return Violation.structural(
        location,
        f"at most {spec.max_occurs} <{spec.tag}> sub-elements allowed, found {count}",
    )


def _walk(element: Element, path: str, config: ValidationConfig,
          result: ValidationResult) -> None:
    location = Location(tag=element.tag, path=path)
    result.extend(check_element(element, location, config))

    for spec, value in element.iter_children():
        if spec.repeated:
            overflow = _check_cardinality(spec, len(value), location)
            if overflow is not None:
                result.add(overflow)
            for index, child in enumerate(value, start=1):
                _walk(child, f"{path}/{spec.tag}[{index}]", config, result)
            continue

        child_path = f"{path}/{spec.tag}"
        if value.is_absent():
            if spec.required:
                result.add(Violation.missing(
                    Location(tag=spec.tag, path=child_path), parent_tag=element.tag,
                ))
            continue
        _walk(value.unwrap(), child_path, config, result)


def validate(element: Element,
             config: Optional[ValidationConfig] = None) -> ValidationResult:
    """
    Validate an element and all of its descendants.

    Args:
        element: Root of the tree to validate (usually an RSS document,
            but any element kind works)
        config: Validation options; defaults to ValidationConfig()

    Returns:
        ValidationResult whose violations are in document order

    Example:
        result = validate(parse(data))
        if not result.is_valid:
            print(result.summary())
    """
    config = config or ValidationConfig()
    result = ValidationResult()
    _walk(element, f"/{element.tag}", config, result)

    if config.log_violations:
        for violation in result.violations:
            logger.debug(f"{violation.path}: {violation.message}")

    logger.debug(f"Validated <{element.tag}>: {len(result)} violation(s)")
    return result


def is_valid(element: Element, config: Optional[ValidationConfig] = None) -> bool:
    """Whether the element and its descendants satisfy every rule."""
    return validate(element, config).is_valid


def validate_tuple(element: Element,
                   config: Optional[ValidationConfig] = None) -> Tuple[bool, List[Violation]]:
    """Validate and return (is_valid, violations)."""
    return validate(element, config).as_tuple()
