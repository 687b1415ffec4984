"""
WSDL Parser

This module is the entry point for building a Definition from a WSDL document.
The document is loaded completely with lxml before the model is built; the
build itself does no I/O.
"""

import logging
import os
from typing import Union

from lxml import etree

from namespace_resolver import WSDL_NAMESPACE
from wsdl_builders.definition_builder import build_definition
from wsdl_model import Definition
from xml_walk import local_name, namespace_of

logger = logging.getLogger(__name__)


class WsdlParserError(Exception):
    """Raised when a well-formed XML document is not a WSDL document."""
    pass


class WsdlParser:
    """
    Parses WSDL documents into Definition objects.

    Malformed XML raises lxml's XMLSyntaxError unchanged; a document whose
    root is not a WSDL definitions element raises WsdlParserError.
    """

    def __init__(self, validate_schemas: bool = True):
        """
        Initialize the parser.

        Args:
            validate_schemas: Compile each embedded schema with lxml as a strict
                re-validation step. Failures are logged, never fatal.
        """
        self.validate_schemas = validate_schemas

    @staticmethod
    def _xml_parser() -> etree.XMLParser:
        return etree.XMLParser(resolve_entities=False, no_network=True)

    def parse_file(self, file_path: Union[str, os.PathLike]) -> Definition:
        """
        Parse a WSDL file.

        Args:
            file_path: Path to the WSDL document

        Returns:
            The definition
        """
        logger.debug("Parsing WSDL file %s", file_path)
        tree = etree.parse(os.fspath(file_path), self._xml_parser())
        return self.parse_tree(tree)

    def parse_string(self, wsdl_xml: Union[str, bytes]) -> Definition:
        """
        Parse WSDL document text.

        Args:
            wsdl_xml: The document as text or bytes

        Returns:
            The definition
        """
        if isinstance(wsdl_xml, str):
            # lxml refuses str input that carries an encoding declaration
            wsdl_xml = wsdl_xml.encode("utf-8")
        root = etree.fromstring(wsdl_xml, self._xml_parser())
        return self.parse_tree(root)

    def parse_stream(self, stream) -> Definition:
        """Parse a WSDL document from a text or binary stream."""
        return self.parse_string(stream.read())

    def parse_tree(self, document) -> Definition:
        """
        Build the definition for an already parsed lxml tree or root element.

        Raises:
            WsdlParserError: The document has no root, or the root is not a definitions element
        """
        root = document.getroot() if isinstance(document, etree._ElementTree) else document
        if root is None:
            raise WsdlParserError("The XML document has no root element.")
        if local_name(root) != "definitions":
            raise WsdlParserError(
                f"The XML document is not a valid WSDL document. Root element must be 'definitions', "
                f"but found '{local_name(root) or root.tag}'.")
        root_namespace = namespace_of(root)
        if root_namespace and root_namespace != WSDL_NAMESPACE:
            raise WsdlParserError(
                f"The definitions element is in namespace '{root_namespace}', expected '{WSDL_NAMESPACE}'.")
        if not root_namespace:
            logger.warning("The definitions element has no namespace; assuming WSDL 1.1")
        return build_definition(root, validate_schemas=self.validate_schemas)


def parse_wsdl(source, validate_schemas: bool = True) -> Definition:
    """
    Parse a WSDL document from whatever source is at hand.

    Args:
        source: A file path, document text or bytes, a readable stream, or an lxml tree/element
        validate_schemas: See WsdlParser

    Returns:
        The definition
    """
    parser = WsdlParser(validate_schemas=validate_schemas)
    if isinstance(source, (etree._ElementTree, etree._Element)):
        return parser.parse_tree(source)
    if hasattr(source, "read"):
        return parser.parse_stream(source)
    if isinstance(source, bytes):
        return parser.parse_string(source)
    if isinstance(source, str) and source.lstrip().startswith("<"):
        return parser.parse_string(source)
    return parser.parse_file(source)
