"""
SimpleTypeBuilder: builds a SimpleType from an XSD simpleType node.
"""
from namespace_resolver import resolve_qualified_name
from wsdl_model import SimpleType
from xml_walk import attribute, children_named, first_descendant_named


def build_simple_type(node, schema_namespace: str) -> SimpleType:
    simple_type = SimpleType(name=attribute(node, "name"), namespace=schema_namespace)

    restriction = first_descendant_named(node, "restriction")
    if restriction is None:
        return simple_type
    if restriction.get("base") is not None:
        simple_type.base_type_name, simple_type.base_type_namespace = resolve_qualified_name(
            restriction.get("base"), restriction, schema_namespace)
    # Declaration order, duplicates kept
    for enumeration in children_named(restriction, "enumeration"):
        value = enumeration.get("value")
        if value is not None:
            simple_type.enumeration_values.append(value)
    return simple_type
