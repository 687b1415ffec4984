"""
WSDL Model

This module defines the semantic model built from a WSDL document.
It provides classes for representing types, elements, messages, port types,
bindings, services and the definition that ties them together. The model is
the sole contract with code emitters.
"""

import logging
import sys
from enum import Enum
from typing import Dict, Iterable, List, Optional, Set

logger = logging.getLogger(__name__)

# maxOccurs="unbounded"
UNBOUNDED = sys.maxsize

DEFAULT_STYLE = "document"
DEFAULT_USE = "literal"


class SoapVersion(Enum):
    """SOAP protocol versions a binding can declare."""
    SOAP_11 = "1.1"
    SOAP_12 = "1.2"


class Element:
    """Represents an XSD element declaration, top-level or a complex type member."""

    def __init__(self, name: str, namespace: str = "", type_name: str = "", type_namespace: str = "",
                 is_complex_type: bool = False, min_occurs: int = 1, max_occurs: int = 1,
                 is_array: bool = False, is_nillable: bool = False):
        """
        Initialize an element.

        Args:
            name: The element name ("" when the declaration has none)
            namespace: The target namespace of the owning schema
            type_name: Local name of the referenced type
            type_namespace: Namespace URI of the referenced type
            is_complex_type: Whether the type is a complex type
            min_occurs: Minimum occurrences (default 1)
            max_occurs: Maximum occurrences (default 1, UNBOUNDED for "unbounded")
            is_array: Whether the element repeats
            is_nillable: Whether the element is declared nillable
        """
        self.name = name
        self.namespace = namespace
        self.type_name = type_name
        self.type_namespace = type_namespace
        self.is_complex_type = is_complex_type
        self.min_occurs = min_occurs
        self.max_occurs = max_occurs
        self.is_optional = min_occurs == 0
        self.is_array = is_array
        self.is_nillable = is_nillable

    def __repr__(self):
        return f"Element(name={self.name!r}, type={self.type_name!r}, is_array={self.is_array!r})"


class ComplexType:
    """Represents an XSD complex type, named or promoted from an inline body."""

    def __init__(self, name: str, namespace: str = "", elements: Optional[List[Element]] = None,
                 base_type_name: Optional[str] = None, base_type_namespace: Optional[str] = None,
                 is_array: bool = False, array_item_type: Optional[str] = None,
                 array_item_type_namespace: Optional[str] = None):
        """
        Initialize a complex type.

        Args:
            name: The type name
            namespace: The target namespace of the owning schema
            elements: Ordered member elements
            base_type_name: Base type local name when derived by extension
            base_type_namespace: Base type namespace when derived by extension
            is_array: Whether the type represents a homogeneous collection
            array_item_type: Item type local name when is_array
            array_item_type_namespace: Item type namespace when is_array
        """
        self.name = name
        self.namespace = namespace
        self.elements = elements or []
        self.base_type_name = base_type_name
        self.base_type_namespace = base_type_namespace
        self.is_array = is_array
        self.array_item_type = array_item_type
        self.array_item_type_namespace = array_item_type_namespace

    def get_element(self, name: str) -> Optional[Element]:
        """
        Get a member element by name.

        Args:
            name: The member element name

        Returns:
            The element, or None if not found
        """
        for element in self.elements:
            if element.name == name:
                return element
        return None

    def __repr__(self):
        return f"ComplexType(name={self.name!r}, elements={len(self.elements)}, is_array={self.is_array!r})"


class SimpleType:
    """Represents an XSD simple type, usually a string enumeration."""

    def __init__(self, name: str, namespace: str = "", base_type_name: str = "", base_type_namespace: str = "",
                 enumeration_values: Optional[List[str]] = None):
        self.name = name
        self.namespace = namespace
        self.base_type_name = base_type_name
        self.base_type_namespace = base_type_namespace
        self.enumeration_values = enumeration_values or []

    @property
    def is_enumeration(self) -> bool:
        return len(self.enumeration_values) > 0

    def __repr__(self):
        return f"SimpleType(name={self.name!r}, values={self.enumeration_values!r})"


class TypeCatalog:
    """
    Registry of the types and top-level elements declared in the WSDL types section.

    The catalog is filled while the types section is walked and frozen once
    that stage completes. Registration is keyed by name and the first
    registration of a name wins.
    """

    def __init__(self):
        """Initialize an empty catalog."""
        self.complex_types: Dict[str, ComplexType] = {}
        self.simple_types: Dict[str, SimpleType] = {}
        self.elements: List[Element] = []
        self.imported_namespaces: Set[str] = set()
        self.schemas: list = []  # lxml XMLSchema objects that compiled
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the catalog read-only."""
        self._frozen = True

    def _check_writable(self) -> None:
        if self._frozen:
            raise RuntimeError("TypeCatalog is frozen; types can only be registered while the types section is built")

    def add_complex_type(self, complex_type: ComplexType) -> bool:
        """
        Register a complex type unless its name is already taken.

        Args:
            complex_type: The complex type to register

        Returns:
            True if the type was added, False if the name was already registered
        """
        self._check_writable()
        if complex_type.name in self.complex_types:
            logger.warning("Complex type '%s' is already registered; ignoring duplicate", complex_type.name)
            return False
        self.complex_types[complex_type.name] = complex_type
        return True

    def add_simple_type(self, simple_type: SimpleType) -> bool:
        """
        Register a simple type unless its name is already taken.

        Args:
            simple_type: The simple type to register

        Returns:
            True if the type was added, False if the name was already registered
        """
        self._check_writable()
        if simple_type.name in self.simple_types:
            logger.warning("Simple type '%s' is already registered; ignoring duplicate", simple_type.name)
            return False
        self.simple_types[simple_type.name] = simple_type
        return True

    def add_element(self, element: Element) -> None:
        self._check_writable()
        self.elements.append(element)

    def add_imported_namespace(self, namespace: str) -> None:
        self._check_writable()
        self.imported_namespaces.add(namespace)

    def add_schema(self, schema) -> None:
        self._check_writable()
        self.schemas.append(schema)

    def has_complex_type(self, name: str) -> bool:
        return name in self.complex_types

    def get_complex_type(self, name: str, namespace: Optional[str] = None) -> Optional[ComplexType]:
        """
        Get a complex type by name.

        Args:
            name: The type name
            namespace: When given, the type must also live in this namespace

        Returns:
            The complex type, or None if not found
        """
        complex_type = self.complex_types.get(name)
        if complex_type is None or (namespace is not None and complex_type.namespace != namespace):
            return None
        return complex_type

    def get_simple_type(self, name: str, namespace: Optional[str] = None) -> Optional[SimpleType]:
        simple_type = self.simple_types.get(name)
        if simple_type is None or (namespace is not None and simple_type.namespace != namespace):
            return None
        return simple_type

    def get_element(self, name: str, namespace: Optional[str] = None) -> Optional[Element]:
        for element in self.elements:
            if element.name == name and (namespace is None or element.namespace == namespace):
                return element
        return None


class MessagePart:
    """A message part; references either an element or a type, never both."""

    def __init__(self, name: str, element_name: Optional[str] = None, element_namespace: Optional[str] = None,
                 type_name: Optional[str] = None, type_namespace: Optional[str] = None):
        self.name = name
        self.element_name = element_name
        self.element_namespace = element_namespace
        self.type_name = type_name
        self.type_namespace = type_namespace

    def __repr__(self):
        return f"MessagePart(name={self.name!r}, element={self.element_name!r}, type={self.type_name!r})"


class Message:
    def __init__(self, name: str, parts: Optional[List[MessagePart]] = None):
        self.name = name
        self.parts = parts or []

    def get_part(self, name: str) -> Optional[MessagePart]:
        return next((p for p in self.parts if p.name == name), None)


class OperationMessage:
    """Input, output or fault reference of an abstract operation."""

    def __init__(self, name: str = "", message_name: str = "", message_namespace: str = ""):
        self.name = name
        self.message_name = message_name
        self.message_namespace = message_namespace

    def __repr__(self):
        return f"OperationMessage(name={self.name!r}, message={self.message_name!r})"


class Operation:
    """
    An abstract operation of a port type.

    `name` is unique within its port type; `original_name` keeps the declared
    name when an overload had to be renamed.
    """

    def __init__(self, name: str, input: Optional[OperationMessage] = None, output: Optional[OperationMessage] = None,
                 faults: Optional[List[OperationMessage]] = None, documentation: str = "",
                 original_name: Optional[str] = None):
        self.name = name
        self.input = input
        self.output = output
        self.faults = faults or []
        self.documentation = documentation
        self.original_name = original_name if original_name is not None else name

    def __repr__(self):
        return f"Operation(name={self.name!r}, original_name={self.original_name!r})"


class Interface:
    """A WSDL port type: the abstract operations of a service."""

    def __init__(self, name: str, operations: Optional[List[Operation]] = None):
        self.name = name
        self.operations = operations or []

    def get_operation(self, name: str) -> Optional[Operation]:
        return next((op for op in self.operations if op.name == name), None)


class SoapHeader:
    """A header wired into a binding operation message, referencing a message part."""

    def __init__(self, message_name: str = "", message_namespace: str = "", part: str = "",
                 use: str = DEFAULT_USE, encoding_style: Optional[str] = None, namespace: Optional[str] = None):
        self.message_name = message_name
        self.message_namespace = message_namespace
        self.part = part
        self.use = use
        self.encoding_style = encoding_style
        self.namespace = namespace


class BindingOperationMessage:
    """Wire encoding of a binding operation's input, output or fault."""

    def __init__(self, name: str = "", use: str = DEFAULT_USE, encoding_style: Optional[str] = "",
                 namespace: Optional[str] = "", parts: Optional[List[str]] = None,
                 headers: Optional[List[SoapHeader]] = None):
        self.name = name
        self.use = use
        self.encoding_style = encoding_style
        self.namespace = namespace
        self.parts = parts
        self.headers = headers or []


class BindingOperation:
    def __init__(self, name: str, soap_action: str = "", style: str = "",
                 input: Optional[BindingOperationMessage] = None, output: Optional[BindingOperationMessage] = None,
                 faults: Optional[List[BindingOperationMessage]] = None, original_name: Optional[str] = None):
        self.name = name
        self.soap_action = soap_action
        self.style = style
        self.input = input
        self.output = output
        self.faults = faults or []
        self.original_name = original_name if original_name is not None else name

    def __repr__(self):
        return f"BindingOperation(name={self.name!r}, soap_action={self.soap_action!r})"


class Binding:
    """Maps the operations of a port type onto SOAP over a transport."""

    def __init__(self, name: str, interface_name: str = "", interface_namespace: str = "", transport: str = "",
                 soap_version: SoapVersion = SoapVersion.SOAP_11, style: str = DEFAULT_STYLE,
                 operations: Optional[List[BindingOperation]] = None):
        self.name = name
        self.interface_name = interface_name
        self.interface_namespace = interface_namespace
        self.transport = transport
        self.soap_version = soap_version
        self.style = style
        self.operations = operations or []

    def get_operation(self, name: str) -> Optional[BindingOperation]:
        return next((op for op in self.operations if op.name == name), None)

    def style_for(self, operation: BindingOperation) -> str:
        """Effective message style of an operation; an empty override inherits the binding style."""
        return operation.style or self.style


class Port:
    def __init__(self, name: str, binding_name: str = "", binding_namespace: str = "", location: str = ""):
        self.name = name
        self.binding_name = binding_name
        self.binding_namespace = binding_namespace
        self.location = location


class Service:
    def __init__(self, name: str, documentation: str = "", ports: Optional[List[Port]] = None):
        self.name = name
        self.documentation = documentation
        self.ports = ports or []


def _find_named(items: Iterable, name: str):
    return next((item for item in items if item.name == name), None)


class Definition:
    """
    Represents a complete WSDL document.

    This is the model handed to code emitters. It is built once per parse;
    ordered collections are stored as tuples and the type catalog is frozen.
    """

    def __init__(self, target_namespace: str = "", namespaces: Optional[Dict[str, str]] = None,
                 types: Optional[TypeCatalog] = None, messages: Iterable[Message] = (),
                 interfaces: Iterable[Interface] = (), bindings: Iterable[Binding] = (),
                 services: Iterable[Service] = ()):
        """
        Initialize a definition.

        Args:
            target_namespace: The targetNamespace of the definitions element
            namespaces: Prefix to URI declarations visible at the root ("" is the default namespace)
            types: The type catalog
            messages: Messages in document order
            interfaces: Port types in document order
            bindings: Bindings in document order
            services: Services in document order
        """
        self.target_namespace = target_namespace
        self.namespaces = dict(namespaces or {})
        self.types = types if types is not None else TypeCatalog()
        self.messages = tuple(messages)
        self.interfaces = tuple(interfaces)
        self.bindings = tuple(bindings)
        self.services = tuple(services)

    def _matches_namespace(self, namespace: Optional[str]) -> bool:
        # Messages, port types, bindings and services all live in the target namespace.
        return namespace is None or namespace == self.target_namespace

    def get_message(self, name: str, namespace: Optional[str] = None) -> Optional[Message]:
        """
        Get a message by name.

        Args:
            name: The message name
            namespace: The namespace of the reference, if known

        Returns:
            The message, or None if not found
        """
        if not self._matches_namespace(namespace):
            return None
        return _find_named(self.messages, name)

    def get_interface(self, name: str, namespace: Optional[str] = None) -> Optional[Interface]:
        if not self._matches_namespace(namespace):
            return None
        return _find_named(self.interfaces, name)

    def get_binding(self, name: str, namespace: Optional[str] = None) -> Optional[Binding]:
        if not self._matches_namespace(namespace):
            return None
        return _find_named(self.bindings, name)

    def get_service(self, name: str) -> Optional[Service]:
        return _find_named(self.services, name)

    def get_interface_for_binding(self, binding: Binding) -> Optional[Interface]:
        """Get the port type a binding implements, or None when the reference dangles."""
        return self.get_interface(binding.interface_name, binding.interface_namespace)
