"""
ElementBuilder: builds an Element from an XSD element declaration.
An inline (anonymous) complex-type body is not built here; the element's type
is pointed at the synthesized name and the body is handed back as an
InlineTypeRequest for promotion.
"""
import logging
from typing import List, Optional, Tuple

from namespace_resolver import resolve_qualified_name
from wsdl_model import Element, UNBOUNDED
from xml_walk import attribute, first_child_named

logger = logging.getLogger(__name__)

INLINE_TYPE_SUFFIX = "Type"


class InlineTypeRequest:
    """An anonymous complex-type body waiting to be promoted to a named catalog entry."""

    def __init__(self, type_name: str, node, namespace: str):
        self.type_name = type_name
        self.node = node
        self.namespace = namespace

    def __repr__(self):
        return f"InlineTypeRequest(type_name={self.type_name!r}, namespace={self.namespace!r})"


def parse_occurs(raw: Optional[str], default: int = 1) -> int:
    if raw is None:
        return default
    raw = raw.strip()
    if raw == "unbounded":
        return UNBOUNDED
    try:
        return int(raw)
    except ValueError:
        logger.debug("Ignoring unparseable occurs value %r", raw)
        return default


def build_element(node, schema_namespace: str) -> Tuple[Element, List[InlineTypeRequest]]:
    """
    Build an Element from an <element> node.
    Returns the element and the inline complex-type bodies it owns (zero or one).
    """
    name = attribute(node, "name")
    type_name, type_namespace = "", ""
    if node.get("type") is not None:
        type_name, type_namespace = resolve_qualified_name(node.get("type"), node, schema_namespace)

    min_occurs = parse_occurs(node.get("minOccurs"))
    max_occurs = parse_occurs(node.get("maxOccurs"))

    element = Element(
        name=name,
        namespace=schema_namespace,
        type_name=type_name,
        type_namespace=type_namespace,
        min_occurs=min_occurs,
        max_occurs=max_occurs,
        is_array=max_occurs > 1,
        is_nillable=attribute(node, "nillable").strip() in ("true", "1"),
    )

    pending = []
    inline_body = first_child_named(node, "complexType")
    if inline_body is not None:
        element.is_complex_type = True
        element.type_name = name + INLINE_TYPE_SUFFIX
        element.type_namespace = schema_namespace
        pending.append(InlineTypeRequest(element.type_name, inline_body, schema_namespace))
    return element, pending
