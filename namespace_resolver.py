"""
namespace_resolver.py
Qualified-name resolution against the XML namespace declarations in scope at a node.
"""
from typing import Dict, Optional, Tuple

WSDL_NAMESPACE = "http://schemas.xmlsoap.org/wsdl/"
XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema"
SOAP_NAMESPACE = "http://schemas.xmlsoap.org/wsdl/soap/"
SOAP12_NAMESPACE = "http://schemas.xmlsoap.org/wsdl/soap12/"
HTTP_NAMESPACE = "http://schemas.xmlsoap.org/wsdl/http/"
XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


def namespace_for_prefix(node, prefix: Optional[str]) -> str:
    """
    Look up the namespace URI bound to a prefix at the given node.
    - node: an lxml element; its nsmap holds every declaration in scope, innermost first
    - prefix: the prefix to look up; '' or None means the default namespace
    Returns the URI, or '' if the prefix is not bound.
    """
    if prefix == "xml":
        return XML_NAMESPACE
    if node is None:
        return ""
    return node.nsmap.get(prefix or None) or ""


def resolve_qualified_name(qualified_name: Optional[str], node, default_namespace: str = "") -> Tuple[str, str]:
    """
    Resolve 'prefix:Local' to (local name, namespace URI).
    - qualified_name: the raw attribute value, e.g. 's:string'
    - node: the element the value occurs on
    - default_namespace: namespace for names without a prefix (usually the schema targetNamespace)
    An unbound prefix resolves to namespace '' rather than failing.
    """
    if not qualified_name:
        return "", default_namespace
    qualified_name = qualified_name.strip()
    if ":" not in qualified_name:
        return qualified_name, default_namespace
    prefix, local_name = qualified_name.split(":", 1)
    return local_name, namespace_for_prefix(node, prefix)


def declared_namespaces(node) -> Dict[str, str]:
    """All namespace declarations visible at node, with the default namespace under ''."""
    return {prefix or "": uri for prefix, uri in node.nsmap.items()}
