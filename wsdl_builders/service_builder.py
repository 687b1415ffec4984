"""
ServiceBuilder: transcribes <service> declarations and their ports.
Binding references are resolved but not checked against the bindings.
"""
from namespace_resolver import HTTP_NAMESPACE, SOAP12_NAMESPACE, SOAP_NAMESPACE, resolve_qualified_name
from wsdl_model import Port, Service
from xml_walk import attribute, children_named, documentation_text, first_child_named

ADDRESS_NAMESPACES = (SOAP_NAMESPACE, SOAP12_NAMESPACE, HTTP_NAMESPACE)


def build_port(node, default_namespace: str = "") -> Port:
    port = Port(name=attribute(node, "name"))
    if node.get("binding") is not None:
        port.binding_name, port.binding_namespace = resolve_qualified_name(node.get("binding"), node, default_namespace)
    address = first_child_named(node, "address", ADDRESS_NAMESPACES)
    if address is not None:
        port.location = attribute(address, "location")
    return port


def build_service(node, default_namespace: str = "") -> Service:
    return Service(
        name=attribute(node, "name"),
        documentation=documentation_text(node),
        ports=[build_port(port, default_namespace) for port in children_named(node, "port")],
    )
