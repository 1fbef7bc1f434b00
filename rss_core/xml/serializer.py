"""
XML Serialization Adapter
=========================

Maps between XML text and the element tree. Tokenizing and serializing
are delegated to lxml; this module is only responsible for the
absent/empty distinction:

    parse:  attribute missing            -> ABSENT
            attr=""                      -> Present("")
            child tag missing            -> ABSENT
            <x/> or <x></x>              -> Present(X(char_data=""))

    render: ABSENT                       -> nothing emitted
            Present("") attribute        -> attr=""
            element with empty text      -> <x></x>

Attributes are written in declaration order and children in slot order,
so parse(render(tree)) == tree for any tree whose character data has no
insignificant whitespace.

Example:
    rss = parse(data)
    data = render(rss)
"""

from typing import Any, Dict, List, Optional, Type, Union
import logging

from lxml import etree

from rss_core.config import ParserConfig, RenderConfig
from rss_core.elements import ELEMENT_TYPES, Element
from rss_core.exceptions import FeedParseError, UnknownElementError
from rss_core.fields import Present, field_of
from rss_core.xml.utils import (
    character_data,
    create_element,
    iter_element_children,
    tag_name,
)

logger = logging.getLogger(__name__)


def _make_parser(config: ParserConfig, encoding: Optional[str] = None) -> etree.XMLParser:
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=False,
        no_network=True,
        remove_comments=config.remove_comments,
        remove_pis=True,
        huge_tree=config.huge_tree,
    )


def _build(node: Any, cls: Type[Element], config: ParserConfig, path: str) -> Element:
    kwargs: Dict[str, Any] = {}

    if cls.has_char_data():
        kwargs['char_data'] = character_data(node)

    for spec in cls.ATTRIBUTES:
        kwargs[spec.attr] = field_of(node.get(spec.name))

    for name in node.attrib:
        if cls.attribute_spec(name) is None:
            logger.debug(f"Ignoring attribute '{name}' of {path}")

    repeated: Dict[str, List[Element]] = {
        spec.attr: [] for spec in cls.CHILDREN if spec.repeated
    }
    seen = set()

    for child in iter_element_children(node):
        tag = tag_name(child, config.ignore_namespaces)
        spec = cls.child_spec(tag)
        if spec is None:
            logger.debug(f"Ignoring unknown element {path}/{tag}")
            continue

        if spec.repeated:
            members = repeated[spec.attr]
            child_path = f"{path}/{spec.tag}[{len(members) + 1}]"
            members.append(_build(child, spec.element_type, config, child_path))
        elif spec.attr in seen:
            logger.warning(
                f"Duplicate <{spec.tag}> in <{cls.tag}> at {path}/{spec.tag}; "
                f"keeping the first occurrence"
            )
        else:
            seen.add(spec.attr)
            kwargs[spec.attr] = Present(
                _build(child, spec.element_type, config, f"{path}/{spec.tag}")
            )

    kwargs.update(repeated)
    return cls(**kwargs)


def parse(data: Union[bytes, str], config: Optional[ParserConfig] = None) -> Element:
    """
    Parse an XML document into an element tree.

    The root may be <rss> or any other RSS element kind (useful for
    validating fragments such as a single <item>).

    Args:
        data: XML document as bytes (encoding taken from the document) or str
        config: Parser options; defaults to ParserConfig()

    Returns:
        Root element of the tree

    Raises:
        FeedParseError: If the XML is malformed (no partial tree is produced)
        UnknownElementError: If the root tag is not an RSS element
    """
    config = config or ParserConfig()

    encoding = None
    if isinstance(data, str):
        data = data.encode('utf-8')
        encoding = 'utf-8'

    try:
        root = etree.fromstring(data, _make_parser(config, encoding))
    except etree.XMLSyntaxError as e:
        raise FeedParseError(f"Malformed XML: {e.msg}", line=e.lineno, column=e.offset) from e

    if root is None:
        raise FeedParseError("Malformed XML: document has no root element")

    tag = tag_name(root, config.ignore_namespaces)
    cls = ELEMENT_TYPES.get(tag)
    if cls is None:
        raise UnknownElementError(tag)

    element = _build(root, cls, config, f"/{cls.tag}")
    logger.debug(f"Parsed <{tag}> document")
    return element


def to_etree(element: Element) -> Any:
    """
    Build an lxml element for an element tree.

    Args:
        element: Root of the tree

    Returns:
        lxml Element
    """
    attrib = {
        spec.name: value.unwrap()
        for spec, value in element.iter_attributes()
        if value.is_present()
    }
    text = element.char_data if element.has_char_data() else None
    node = create_element(element.tag, text=text, attrib=attrib)

    for spec, value in element.iter_children():
        if spec.repeated:
            members = value
        elif value.is_present():
            members = [value.unwrap()]
        else:
            members = []
        for child in members:
            node.append(to_etree(child))

    # An element with neither text nor children renders as an open+close pair.
    if text is None and len(node) == 0:
        node.text = ""

    return node


def render(element: Element, config: Optional[RenderConfig] = None) -> bytes:
    """
    Serialize an element tree to XML bytes.

    Args:
        element: Root of the tree
        config: Render options; defaults to RenderConfig()

    Returns:
        Encoded XML document
    """
    config = config or RenderConfig()
    node = to_etree(element)
    return etree.tostring(
        node,
        xml_declaration=config.xml_declaration,
        encoding=config.encoding,
        pretty_print=config.pretty_print,
    )
