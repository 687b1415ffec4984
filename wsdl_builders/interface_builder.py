"""
InterfaceBuilder: transcribes <portType> declarations into Interfaces.
Overloaded operations are renamed with the shared overload rule.
"""
from typing import Optional

from namespace_resolver import resolve_qualified_name
from wsdl_builders.overloads import disambiguate_names
from wsdl_model import Interface, Operation, OperationMessage
from xml_walk import attribute, children_named, documentation_text, first_child_named


def build_operation_message(node, default_namespace: str = "") -> OperationMessage:
    message = OperationMessage(name=attribute(node, "name"))
    if node.get("message") is not None:
        message.message_name, message.message_namespace = resolve_qualified_name(
            node.get("message"), node, default_namespace)
    return message


def _optional_message(operation_node, kind: str, default_namespace: str) -> Optional[OperationMessage]:
    node = first_child_named(operation_node, kind)
    return build_operation_message(node, default_namespace) if node is not None else None


def build_operation(node, name: Optional[str] = None, default_namespace: str = "") -> Operation:
    declared_name = attribute(node, "name")
    return Operation(
        name=declared_name if name is None else name,
        input=_optional_message(node, "input", default_namespace),
        output=_optional_message(node, "output", default_namespace),
        faults=[build_operation_message(f, default_namespace) for f in children_named(node, "fault")],
        documentation=documentation_text(node),
        original_name=declared_name,
    )


def build_interface(node, default_namespace: str = "") -> Interface:
    operation_nodes = list(children_named(node, "operation"))
    names = disambiguate_names([attribute(op, "name") for op in operation_nodes])
    return Interface(
        name=attribute(node, "name"),
        operations=[build_operation(op, name, default_namespace) for op, name in zip(operation_nodes, names)],
    )
