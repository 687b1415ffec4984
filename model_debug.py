"""
model_debug.py
Pretty-print and debug dump utilities for WSDL definitions.
"""
import json
import logging
import os
from enum import Enum
from typing import Any, Dict, List

from wsdl_model import Definition, UNBOUNDED

logger = logging.getLogger(__name__)


def _default_encoder(obj: Any):
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return sorted(obj)
    if hasattr(obj, '__dict__'):
        # Private bookkeeping (e.g. the catalog's frozen flag) stays out of dumps
        return {k: v for k, v in vars(obj).items() if not k.startswith('_')}
    return str(obj)


def definition_to_dict(definition: Definition) -> Dict[str, Any]:
    """Plain dict/list rendering of a definition, suitable for JSON."""
    return json.loads(json.dumps(definition, default=_default_encoder))


def dump_definition_json(definition: Definition, file_path: str) -> str:
    """
    Write the definition as indented JSON, creating parent directories.
    Returns the path written.
    """
    directory = os.path.dirname(file_path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(file_path, "w", encoding="utf-8") as f:
        json.dump(definition, f, indent=2, default=_default_encoder)
    logger.debug("Definition dumped to %s", file_path)
    return file_path


def _occurs(value: int) -> str:
    return "unbounded" if value == UNBOUNDED else str(value)


def format_definition_summary(definition: Definition) -> str:
    lines: List[str] = []
    add_line = lines.append

    types = definition.types
    operation_count = sum(len(i.operations) for i in definition.interfaces)
    add_line(f"Target namespace: {definition.target_namespace or '(none)'}")
    add_line(f"Found {len(definition.interfaces)} port types with {operation_count} operations")
    add_line(f"Found {len(types.complex_types)} complex types")
    add_line(f"Found {len(types.simple_types)} simple types")
    add_line(f"Found {len(types.elements)} elements")

    for complex_type in types.complex_types.values():
        suffix = f" (array of {complex_type.array_item_type})" if complex_type.is_array else ""
        add_line(f"  type {complex_type.name}{suffix}")
        for element in complex_type.elements:
            add_line(f"    {element.name}: {element.type_name} [{element.min_occurs}..{_occurs(element.max_occurs)}]")
    for simple_type in types.simple_types.values():
        if simple_type.is_enumeration:
            add_line(f"  enum {simple_type.name}: {', '.join(simple_type.enumeration_values)}")

    for interface in definition.interfaces:
        add_line(f"Port type {interface.name}")
        for operation in interface.operations:
            input_name = operation.input.message_name if operation.input else '-'
            output_name = operation.output.message_name if operation.output else '-'
            add_line(f"  {operation.name}({input_name}) -> {output_name}")
    for binding in definition.bindings:
        add_line(f"Binding {binding.name} -> {binding.interface_name} (SOAP {binding.soap_version.value}, {binding.style})")
    for service in definition.services:
        add_line(f"Service {service.name}")
        for port in service.ports:
            add_line(f"  port {port.name} via {port.binding_name} at {port.location or '(no address)'}")
    return "\n".join(lines)
