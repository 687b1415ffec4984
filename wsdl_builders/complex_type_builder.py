"""
ComplexTypeBuilder: builds a ComplexType from an XSD complexType node.
Members come from the type's sequence (or all), either directly in the body or
inside complexContent/simpleContent derivations. Inline complex types of the
members are returned as pending requests, never built here.
"""
from typing import List, Optional, Tuple

from namespace_resolver import resolve_qualified_name
from wsdl_builders.array_detection import detect_array_type
from wsdl_builders.element_builder import InlineTypeRequest, build_element
from wsdl_model import ComplexType
from xml_walk import attribute, children_named, first_child_named

MEMBER_GROUPS = ("sequence", "all")
CONTENT_MODELS = ("complexContent", "simpleContent")
DERIVATIONS = ("extension", "restriction")


def _derivation(node, kind: str):
    for content_model in CONTENT_MODELS:
        content = first_child_named(node, content_model)
        if content is not None:
            derivation = first_child_named(content, kind)
            if derivation is not None:
                return derivation
    return None


def _member_group(node):
    holders = [node] + [d for d in (_derivation(node, kind) for kind in DERIVATIONS) if d is not None]
    for holder in holders:
        for group_name in MEMBER_GROUPS:
            group = first_child_named(holder, group_name)
            if group is not None:
                return group
    return None


def build_complex_type(node, schema_namespace: str, name: Optional[str] = None) -> Tuple[ComplexType, List[InlineTypeRequest]]:
    """
    Build a ComplexType.
    - name: overrides the name attribute; used when promoting an anonymous body
    Returns the type and the inline bodies found among its members.
    """
    complex_type = ComplexType(
        name=name if name is not None else attribute(node, "name"),
        namespace=schema_namespace,
    )

    extension = _derivation(node, "extension")
    if extension is not None and extension.get("base") is not None:
        complex_type.base_type_name, complex_type.base_type_namespace = resolve_qualified_name(
            extension.get("base"), extension, schema_namespace)

    pending = []
    group = _member_group(node)
    if group is not None:
        for element_node in children_named(group, "element"):
            element, inline = build_element(element_node, schema_namespace)
            complex_type.elements.append(element)
            pending.extend(inline)

    detect_array_type(complex_type, schema_namespace)
    return complex_type, pending
