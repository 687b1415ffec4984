"""
DefinitionBuilder: assembles the Definition from a WSDL root element.

Stages run in document order: basic properties, types, messages, port types,
bindings, services. The type catalog is complete (inline promotion included)
and frozen before any later stage runs. Nothing is caught here; an error in
any stage reaches the caller unchanged.
"""
import logging

from namespace_resolver import declared_namespaces
from wsdl_builders.binding_builder import build_binding
from wsdl_builders.interface_builder import build_interface
from wsdl_builders.message_builder import build_message
from wsdl_builders.service_builder import build_service
from wsdl_builders.types_builder import build_types
from wsdl_model import Definition
from xml_walk import attribute, children_named, first_child_named

logger = logging.getLogger(__name__)


def build_definition(root, validate_schemas: bool = True) -> Definition:
    """
    Build the Definition for a <definitions> element.
    The root is assumed to have been checked by the caller.
    """
    target_namespace = attribute(root, "targetNamespace")
    namespaces = declared_namespaces(root)
    logger.debug("Building definition '%s' (%d namespace declarations)", target_namespace, len(namespaces))

    types = build_types(first_child_named(root, "types"), validate_schemas=validate_schemas)
    types.freeze()
    logger.debug("Types: %d complex, %d simple, %d elements",
                 len(types.complex_types), len(types.simple_types), len(types.elements))

    messages = [build_message(node, target_namespace) for node in children_named(root, "message")]
    interfaces = [build_interface(node, target_namespace) for node in children_named(root, "portType")]
    bindings = [build_binding(node, target_namespace) for node in children_named(root, "binding")]
    services = [build_service(node, target_namespace) for node in children_named(root, "service")]
    logger.debug("%d messages, %d port types, %d bindings, %d services",
                 len(messages), len(interfaces), len(bindings), len(services))

    return Definition(
        target_namespace=target_namespace,
        namespaces=namespaces,
        types=types,
        messages=messages,
        interfaces=interfaces,
        bindings=bindings,
        services=services,
    )
