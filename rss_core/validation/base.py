"""
Base Validation Classes
=======================

Result container and abstract validator interface. The RSS validator in
this package extends BaseValidator; other rule sets can do the same.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Tuple

from rss_core.violations import ErrorKind, Violation


@dataclass
class ValidationResult:
    """
    Container for validation results.

    Attributes:
        is_valid: Whether validation passed
        violations: Violations in document order (self, then children
            left-to-right, then grandchildren)
        metadata: Additional validation metadata
    """
    is_valid: bool = True
    violations: List[Violation] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add(self, violation: Violation) -> None:
        """Record one violation and mark the result invalid."""
        self.violations.append(violation)
        self.is_valid = False

    def extend(self, violations: Iterable[Violation]) -> None:
        for violation in violations:
            self.add(violation)

    def merge(self, other: 'ValidationResult') -> None:
        """Merge another result into this one."""
        self.violations.extend(other.violations)
        if not other.is_valid:
            self.is_valid = False
        self.metadata.update(other.metadata)

    @property
    def error_count(self) -> int:
        return len(self.violations)

    @property
    def kinds(self) -> List[ErrorKind]:
        """Error kinds of the violations, in order."""
        return [v.kind for v in self.violations]

    def get_violations_by_path(self) -> Dict[str, List[Violation]]:
        """Group violations by element path."""
        by_path: Dict[str, List[Violation]] = {}
        for violation in self.violations:
            by_path.setdefault(violation.path, []).append(violation)
        return by_path

    def get_violations_by_kind(self) -> Dict[ErrorKind, int]:
        """Get violation counts by kind."""
        by_kind: Dict[ErrorKind, int] = {}
        for violation in self.violations:
            by_kind[violation.kind] = by_kind.get(violation.kind, 0) + 1
        return by_kind

    def as_tuple(self) -> Tuple[bool, List[Violation]]:
        """Return (is_valid, violations)."""
        return self.is_valid, list(self.violations)

    def summary(self) -> str:
        """Generate a text summary of validation results."""
        if self.is_valid:
            return "Validation PASSED - No violations found"

        lines = [
            f"Validation FAILED - {self.error_count} violation(s)",
            "",
            "Violations by kind:",
        ]

        for kind, count in sorted(self.get_violations_by_kind().items(), key=lambda x: -x[1]):
            lines.append(f"  {kind.value}: {count}")

        lines.extend(["", "Violations:"])
        for violation in self.violations:
            lines.append(f"  {violation.path}: {violation.message}")

        return "\n".join(lines)

    def __iter__(self) -> Iterator[Violation]:
        return iter(self.violations)

    def __len__(self) -> int:
        return len(self.violations)


class BaseValidator(ABC):
    """
    Abstract base class for validators.

    Subclass this to check documents against a rule set.

    Example:
        class StrictRSSValidator(RSSValidator):
            def validate_element(self, element, context="element"):
                result = super().validate_element(element, context)
                # ... additional checks ...
                return result
    """

    @abstractmethod
    def validate_element(self, element: Any, context: str = "element") -> ValidationResult:
        """
        Validate a parsed element tree.

        Args:
            element: Root of the tree to validate
            context: Context string for log messages

        Returns:
            ValidationResult with validation outcome
        """
        pass

    @abstractmethod
    def validate_string(self, xml_string: str, context: str = "string") -> ValidationResult:
        """
        Parse and validate a document given as text.

        Args:
            xml_string: XML content as string
            context: Context string for log messages

        Returns:
            ValidationResult with validation outcome
        """
        pass

    @property
    def schema_type(self) -> str:
        """Return the type of rule set this validator applies (e.g. 'RSS 2.0')."""
        return "Unknown"
