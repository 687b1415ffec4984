"""
BindingBuilder: transcribes <binding> declarations with their SOAP wiring.

The SOAP version comes from the namespace of the protocol elements (SOAP 1.1
or SOAP 1.2 WSDL bindings). Binding operations are only recorded by name;
pairing them with port-type operations happens by name at emission time, so
overloads are renamed with the same rule the interface builder uses.
"""
import logging
from typing import List, Optional

from namespace_resolver import SOAP12_NAMESPACE, SOAP_NAMESPACE, resolve_qualified_name
from wsdl_builders.overloads import disambiguate_names
from wsdl_model import (DEFAULT_STYLE, DEFAULT_USE, Binding, BindingOperation, BindingOperationMessage,
                        SoapHeader, SoapVersion)
from xml_walk import attribute, children_named, first_child_named, namespace_of

logger = logging.getLogger(__name__)

SOAP_NAMESPACES = (SOAP_NAMESPACE, SOAP12_NAMESPACE)


def _soap_child(node, name: str):
    return first_child_named(node, name, SOAP_NAMESPACES)


def build_soap_header(node, default_namespace: str = "") -> SoapHeader:
    header = SoapHeader(
        part=attribute(node, "part"),
        use=attribute(node, "use", DEFAULT_USE),
        encoding_style=node.get("encodingStyle"),
        namespace=node.get("namespace"),
    )
    if node.get("message") is not None:
        header.message_name, header.message_namespace = resolve_qualified_name(
            node.get("message"), node, default_namespace)
    return header


def build_binding_message(node, default_namespace: str = "") -> BindingOperationMessage:
    message = BindingOperationMessage(name=attribute(node, "name"))
    # Faults are wired with soap:fault, inputs and outputs with soap:body
    body = _soap_child(node, "body")
    if body is None:
        body = _soap_child(node, "fault")
    if body is not None:
        message.use = attribute(body, "use", DEFAULT_USE)
        message.namespace = attribute(body, "namespace")
        message.encoding_style = attribute(body, "encodingStyle")
        if body.get("parts") is not None:
            message.parts = body.get("parts").split()
    message.headers = [build_soap_header(h, default_namespace)
                       for h in children_named(node, "header", SOAP_NAMESPACES)]
    return message


def _optional_binding_message(operation_node, kind: str, default_namespace: str) -> Optional[BindingOperationMessage]:
    node = first_child_named(operation_node, kind)
    return build_binding_message(node, default_namespace) if node is not None else None


def build_binding_operation(node, name: Optional[str] = None, default_namespace: str = "") -> BindingOperation:
    declared_name = attribute(node, "name")
    operation = BindingOperation(name=declared_name if name is None else name, original_name=declared_name)
    soap_operation = _soap_child(node, "operation")
    if soap_operation is not None:
        operation.soap_action = attribute(soap_operation, "soapAction")
        operation.style = attribute(soap_operation, "style")
    operation.input = _optional_binding_message(node, "input", default_namespace)
    operation.output = _optional_binding_message(node, "output", default_namespace)
    operation.faults = [build_binding_message(f, default_namespace) for f in children_named(node, "fault")]
    return operation


def build_binding_operations(node, default_namespace: str = "") -> List[BindingOperation]:
    operation_nodes = list(children_named(node, "operation"))
    names = disambiguate_names([attribute(op, "name") for op in operation_nodes])
    return [build_binding_operation(op, name, default_namespace) for op, name in zip(operation_nodes, names)]


def build_binding(node, default_namespace: str = "") -> Binding:
    binding = Binding(name=attribute(node, "name"))
    if node.get("type") is not None:
        binding.interface_name, binding.interface_namespace = resolve_qualified_name(
            node.get("type"), node, default_namespace)

    soap_binding = _soap_child(node, "binding")
    if soap_binding is not None:
        if namespace_of(soap_binding) == SOAP12_NAMESPACE:
            binding.soap_version = SoapVersion.SOAP_12
        binding.transport = attribute(soap_binding, "transport")
        binding.style = attribute(soap_binding, "style", DEFAULT_STYLE)
    else:
        logger.debug("Binding '%s' has no SOAP binding element; defaulting to SOAP 1.1", binding.name)

    binding.operations = build_binding_operations(node, default_namespace)
    return binding
