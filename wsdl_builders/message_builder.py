"""
MessageBuilder: transcribes <message> declarations and their parts.
Element and type references are resolved to (name, namespace) only; looking
them up in the type catalog is left to the consumer.
"""
from namespace_resolver import resolve_qualified_name
from wsdl_model import Message, MessagePart
from xml_walk import attribute, children_named


def build_message_part(node, default_namespace: str = "") -> MessagePart:
    part = MessagePart(name=attribute(node, "name"))
    if node.get("element") is not None:
        part.element_name, part.element_namespace = resolve_qualified_name(node.get("element"), node, default_namespace)
    if node.get("type") is not None:
        part.type_name, part.type_namespace = resolve_qualified_name(node.get("type"), node, default_namespace)
    return part


def build_message(node, default_namespace: str = "") -> Message:
    return Message(
        name=attribute(node, "name"),
        parts=[build_message_part(part, default_namespace) for part in children_named(node, "part")],
    )
