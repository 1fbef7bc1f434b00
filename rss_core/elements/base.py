"""
Element Base Classes
====================

Every RSS node kind is a dataclass deriving from Element. The class-level
declarations below describe the node to both the validation engine and
the XML adapter, so neither needs to inspect instances at runtime:

    tag              - XML tag name
    CHAR_DATA_RULES  - rules for the character data, or None for a pure
                       container element that carries no text
    ATTRIBUTES       - ordered AttributeSpec declarations
    CHILDREN         - ordered ChildSpec declarations

Declarations are tuples and are never modified after import.
"""

from dataclasses import dataclass, fields as dataclass_fields
from typing import Any, ClassVar, Dict, Iterator, Optional, Tuple, Type

from rss_core.fields import Field, Present, Rule


@dataclass(frozen=True)
class AttributeSpec:
    """
    Declaration of one XML attribute.

    Attributes:
        name: Attribute name as written in XML (e.g. "registerProcedure")
        attr: Python attribute holding the Field (e.g. "register_procedure")
        required: Whether absence is an InvalidElement violation
        rules: Syntactic rules applied when the attribute is present
    """
    name: str
    attr: str
    required: bool = False
    rules: Tuple[Rule, ...] = ()


@dataclass(frozen=True)
class ChildSpec:
    """
    Declaration of one child slot.

    Attributes:
        tag: Child tag as written in XML
        attr: Python attribute holding the Field (or list, when repeated)
        element_type: Element subclass of the child
        required: Whether absence is an InvalidElement violation
        repeated: Whether the slot holds an ordered list of children
        max_occurs: Cardinality cap for repeated slots (None = unbounded)
    """
    tag: str
    attr: str
    element_type: Type["Element"]
    required: bool = False
    repeated: bool = False
    max_occurs: Optional[int] = None


class Element:
    """
    Base class for all RSS elements.

    Subclasses are dataclasses whose instance fields hold character data
    (`char_data`), attribute Fields and child Fields/lists named after the
    `attr` of their specs.
    """

    tag: ClassVar[str] = ""
    CHAR_DATA_RULES: ClassVar[Optional[Tuple[Rule, ...]]] = None
    ATTRIBUTES: ClassVar[Tuple[AttributeSpec, ...]] = ()
    CHILDREN: ClassVar[Tuple[ChildSpec, ...]] = ()

    @classmethod
    def has_char_data(cls) -> bool:
        """Whether this element kind carries character data."""
        return cls.CHAR_DATA_RULES is not None

    @classmethod
    def attribute_spec(cls, name: str) -> Optional[AttributeSpec]:
        for spec in cls.ATTRIBUTES:
            if spec.name == name:
                return spec
        return None

    @classmethod
    def child_spec(cls, tag: str) -> Optional[ChildSpec]:
        for spec in cls.CHILDREN:
            if spec.tag == tag:
                return spec
        return None

    @classmethod
    def of(cls, char_data: str = "", **attributes: Any) -> Field:
        """
        Build a present field holding a new element.

        Attribute keyword arguments are given as plain strings and lifted
        to Present values; omitted attributes stay ABSENT.

        Example:
            >>> Category.of("News", domain="dmoz")
            Present(Category(char_data='News', domain=Present('dmoz')))
        """
        kwargs: Dict[str, Any] = {
            key: value if isinstance(value, Field) else Present(value)
            for key, value in attributes.items()
        }
        if cls.has_char_data():
            kwargs['char_data'] = char_data
        return Present(cls(**kwargs))

    def iter_attributes(self) -> Iterator[Tuple[AttributeSpec, Field]]:
        """Yield (spec, field) for each declared attribute, in order."""
        for spec in self.ATTRIBUTES:
            yield spec, getattr(self, spec.attr)

    def iter_children(self) -> Iterator[Tuple[ChildSpec, Any]]:
        """Yield (spec, field-or-list) for each declared child slot, in order."""
        for spec in self.CHILDREN:
            yield spec, getattr(self, spec.attr)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data view of the element (ABSENT fields omitted)."""
        data: Dict[str, Any] = {}
        for f in dataclass_fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Field):
                if value.is_absent():
                    continue
                value = value.unwrap()
            if isinstance(value, Element):
                value = value.to_dict()
            elif isinstance(value, list):
                value = [v.to_dict() for v in value]
            data[f.name] = value
        return data
