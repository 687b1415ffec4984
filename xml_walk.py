"""
xml_walk.py
Helpers for walking lxml trees by local name. WSDL and XSD constructs are
matched by local name; comments and processing instructions are skipped.
"""
from typing import Iterator, Optional, Sequence

from lxml import etree


def is_element(node) -> bool:
    # Comments and PIs carry a non-string tag
    return isinstance(node.tag, str)


def local_name(node) -> str:
    if not is_element(node):
        return ""
    return etree.QName(node).localname


def namespace_of(node) -> str:
    if not is_element(node):
        return ""
    return etree.QName(node).namespace or ""


def _matches(node, name: str, namespaces: Optional[Sequence[str]]) -> bool:
    if local_name(node) != name:
        return False
    return namespaces is None or namespace_of(node) in namespaces


def children_named(node, name: str, namespaces: Optional[Sequence[str]] = None) -> Iterator:
    """Yield direct children with the given local name (optionally restricted to namespaces)."""
    for child in node:
        if _matches(child, name, namespaces):
            yield child


def first_child_named(node, name: str, namespaces: Optional[Sequence[str]] = None):
    return next(children_named(node, name, namespaces), None)


def first_descendant_named(node, name: str, namespaces: Optional[Sequence[str]] = None):
    for descendant in node.iterdescendants():
        if _matches(descendant, name, namespaces):
            return descendant
    return None


def attribute(node, name: str, default: Optional[str] = "") -> Optional[str]:
    value = node.get(name)
    return default if value is None else value


def documentation_text(node) -> str:
    """Trimmed text of the node's documentation child, or ''."""
    documentation = first_child_named(node, "documentation")
    if documentation is None:
        return ""
    return "".join(documentation.itertext()).strip()
