"""
Inline type promotion: turns anonymous complex-type bodies into named catalog entries.

Each request names its type <ElementName>Type. Building a promoted body can
yield further requests for the inline types of its own members; those are
processed from an explicit worklist, depth-first in declaration order, until
none remain. Registration is keyed by the synthesized name, so a name that is
already in the catalog is never built twice.
"""
import logging
from typing import Iterable, List

from wsdl_builders.complex_type_builder import build_complex_type
from wsdl_builders.element_builder import InlineTypeRequest
from wsdl_model import ComplexType, TypeCatalog

logger = logging.getLogger(__name__)


def promote_inline_types(requests: Iterable[InlineTypeRequest], catalog: TypeCatalog) -> List[ComplexType]:
    """
    Build and register every pending inline type, including nested ones.
    Returns the complex types that were added to the catalog.
    """
    promoted = []
    worklist = list(requests)
    worklist.reverse()
    while worklist:
        request = worklist.pop()
        if catalog.has_complex_type(request.type_name):
            logger.debug("Inline type '%s' already registered", request.type_name)
            continue
        complex_type, nested = build_complex_type(request.node, request.namespace, name=request.type_name)
        catalog.add_complex_type(complex_type)
        promoted.append(complex_type)
        logger.debug("Promoted inline type '%s' (%d nested)", complex_type.name, len(nested))
        worklist.extend(reversed(nested))
    return promoted
