"""
TypesBuilder: fills the TypeCatalog from the schema fragments of a WSDL types section.

Per schema: strict re-validation (optional, never fatal), imported namespaces,
named complex types, simple types, then top-level elements. Inline complex
types found anywhere along the way are promoted once every schema has been
walked, so explicitly named types take their names first. A last pass marks
elements that reference a catalogued complex type.
"""
import copy
import logging
from typing import List, Optional

from lxml import etree

from wsdl_builders.complex_type_builder import build_complex_type
from wsdl_builders.element_builder import InlineTypeRequest, build_element
from wsdl_builders.inline_type_promotion import promote_inline_types
from wsdl_builders.simple_type_builder import build_simple_type
from wsdl_model import Element, TypeCatalog
from xml_walk import attribute, children_named

logger = logging.getLogger(__name__)


def standalone_schema(schema_node):
    """
    Copy a schema fragment into its own document. Prefixes inherited from the
    WSDL root are redeclared on the copy so QName attribute values such as
    type="tns:Foo" still resolve.
    """
    standalone = etree.Element(schema_node.tag, attrib=dict(schema_node.attrib), nsmap=schema_node.nsmap)
    standalone.text = schema_node.text
    for child in schema_node:
        standalone.append(copy.deepcopy(child))
    return standalone


def compile_schema(schema_node) -> Optional[etree.XMLSchema]:
    """
    Compile a schema fragment with lxml for strict re-validation.
    Returns None (and logs) when the fragment does not compile on its own,
    e.g. because it references types from another schema of the WSDL.
    """
    try:
        return etree.XMLSchema(standalone_schema(schema_node))
    except etree.XMLSchemaParseError as e:
        logger.warning("Schema '%s' failed strict validation: %s",
                       attribute(schema_node, "targetNamespace"), e)
        return None


def build_schema(schema_node, catalog: TypeCatalog, validate_schemas: bool = True) -> List[InlineTypeRequest]:
    """
    Extract one schema fragment into the catalog.
    Returns the inline complex-type bodies still waiting for promotion.
    """
    schema_namespace = attribute(schema_node, "targetNamespace")
    logger.debug("Building schema '%s'", schema_namespace)

    if validate_schemas:
        compiled = compile_schema(schema_node)
        if compiled is not None:
            catalog.add_schema(compiled)

    for import_node in children_named(schema_node, "import"):
        if import_node.get("namespace"):
            catalog.add_imported_namespace(import_node.get("namespace"))

    pending = []
    for complex_type_node in children_named(schema_node, "complexType"):
        complex_type, inline = build_complex_type(complex_type_node, schema_namespace)
        catalog.add_complex_type(complex_type)
        pending.extend(inline)

    for simple_type_node in children_named(schema_node, "simpleType"):
        catalog.add_simple_type(build_simple_type(simple_type_node, schema_namespace))

    for element_node in children_named(schema_node, "element"):
        element, inline = build_element(element_node, schema_namespace)
        catalog.add_element(element)
        pending.extend(inline)
    return pending


def _mark_complex_references(catalog: TypeCatalog) -> None:
    def mark(element: Element):
        if element.is_complex_type or not element.type_name:
            return
        if catalog.get_complex_type(element.type_name, element.type_namespace):
            element.is_complex_type = True

    for element in catalog.elements:
        mark(element)
    for complex_type in catalog.complex_types.values():
        for element in complex_type.elements:
            mark(element)


def build_types(types_node, catalog: Optional[TypeCatalog] = None, validate_schemas: bool = True) -> TypeCatalog:
    """
    Build the type catalog for a <types> node. The catalog is returned unfrozen;
    freezing is the caller's decision.
    """
    if catalog is None:
        catalog = TypeCatalog()
    pending = []
    if types_node is not None:
        for schema_node in children_named(types_node, "schema"):
            pending.extend(build_schema(schema_node, catalog, validate_schemas))
    promote_inline_types(pending, catalog)
    _mark_complex_references(catalog)
    return catalog
