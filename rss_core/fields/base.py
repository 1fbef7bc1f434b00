"""
Tri-State Fields
================

A Field records whether an element or attribute appeared in the source
document and, if it did, what value it carried:

    ABSENT          - not in the source at all
    Present("")     - in the source with a zero-length value
    Present("x")    - in the source with a value

Absent and present-but-empty are never interchangeable. Serializing
ABSENT emits nothing, serializing Present("") emits an empty tag or an
empty attribute value.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from rss_core.exceptions import FieldAbsentError

T = TypeVar("T")
U = TypeVar("U")


class Field(Generic[T]):
    """
    Abstract tri-state value. Use ABSENT or Present(value), never Field().

    Truthiness is not defined; test with is_present() or is_absent().
    """

    __slots__ = ()

    def is_absent(self) -> bool:
        raise NotImplementedError

    def is_present(self) -> bool:
        return not self.is_absent()

    def unwrap(self) -> T:
        """Return the value, raising FieldAbsentError when absent."""
        raise NotImplementedError

    def get(self, default: Optional[T] = None) -> Optional[T]:
        """Return the value when present, otherwise `default`."""
        return self.unwrap() if self.is_present() else default

    def map(self, fn: Callable[[T], U]) -> "Field[U]":
        """Apply `fn` to a present value; ABSENT stays ABSENT."""
        if self.is_absent():
            return ABSENT
        return Present(fn(self.unwrap()))

    def __bool__(self) -> bool:
        raise TypeError(
            "Field has no truth value; use is_present() or is_absent()"
        )


class Absent(Field[Any]):
    """The element or attribute does not appear in the source."""

    __slots__ = ()
    _instance: Optional["Absent"] = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_absent(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise FieldAbsentError("Field is absent from the source document")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Absent)

    def __hash__(self) -> int:
        return hash(Absent)

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (Absent, ())


@dataclass(frozen=True)
class Present(Field[T]):
    """The element or attribute appears in the source, possibly empty."""

    value: T

    def is_absent(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


ABSENT = Absent()


def field_of(value: Optional[T]) -> Field[T]:
    """
    Lift an optional value into a Field.

    Only for use at the XML boundary, where lxml reports a missing
    attribute as None. Inside the tree a Field is always explicit.
    """
    if value is None:
        return ABSENT
    return Present(value)
