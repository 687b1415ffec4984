"""
Array detection: classifies a freshly built ComplexType as a collection.

Two conventions mark an array:
- the name is ArrayOf<Item> and the type has exactly one member element; the
  member is forced to repeat and, when untyped, gets <Item> as its type.
  An ArrayOf type with any other member count is an ordinary record.
- otherwise, a member element repeats (maxOccurs > 1 or unbounded); the first
  such typed member gives the item type and the members are left as they are.
"""
import logging
import re

from wsdl_model import ComplexType

logger = logging.getLogger(__name__)

ARRAY_OF_PATTERN = re.compile(r"^ArrayOf(?P<item>.+)$", re.IGNORECASE)


def detect_array_type(complex_type: ComplexType, schema_namespace: str) -> bool:
    """
    Set is_array and the item type on complex_type when it is a collection.
    Runs after the members are built and before the type is registered.
    Returns True when the type was classified as an array.
    """
    match = ARRAY_OF_PATTERN.match(complex_type.name)
    if match:
        if len(complex_type.elements) != 1:
            logger.debug("'%s' has %d members; not treated as an array", complex_type.name, len(complex_type.elements))
            return False
        item = complex_type.elements[0]
        item.is_array = True
        if not item.type_name:
            item.type_name = match.group("item")
            item.type_namespace = schema_namespace
        _mark_array(complex_type, item.type_name, item.type_namespace)
        return True

    for element in complex_type.elements:
        if element.is_array and element.type_name:
            _mark_array(complex_type, element.type_name, element.type_namespace)
            return True
    return False


def _mark_array(complex_type: ComplexType, item_type: str, item_namespace: str) -> None:
    complex_type.is_array = True
    complex_type.array_item_type = item_type
    complex_type.array_item_type_namespace = item_namespace
    logger.debug("Complex type '%s' is an array of '%s'", complex_type.name, item_type)
