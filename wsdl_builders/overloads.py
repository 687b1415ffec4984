"""
Overload disambiguation shared by port-type and binding operations.

Operations sharing a name keep declaration order; the first keeps the bare
name and later ones are suffixed _1, _2, ... A suffix that is already taken,
by a declared operation or an earlier rename, is skipped. Applying the same
rule to both sides keeps binding operations paired with their port-type
operations by name.
"""
import logging
from typing import Dict, List, Sequence

logger = logging.getLogger(__name__)


def disambiguate_names(names: Sequence[str]) -> List[str]:
    """
    Return unique names for a sequence of declared operation names.
    e.g. ['Add', 'Get', 'Add', 'Add'] -> ['Add', 'Get', 'Add_1', 'Add_2']
         ['Add', 'Add_1', 'Add'] -> ['Add', 'Add_1', 'Add_2']
    """
    declared = set(names)
    used = set()
    last_index: Dict[str, int] = {}
    result = []
    for name in names:
        if name not in used:
            used.add(name)
            result.append(name)
            continue
        index = last_index.get(name, 0) + 1
        while f"{name}_{index}" in declared or f"{name}_{index}" in used:
            logger.warning("Overload suffix '%s_%d' collides with a declared operation name; skipping it", name, index)
            index += 1
        last_index[name] = index
        renamed = f"{name}_{index}"
        used.add(renamed)
        result.append(renamed)
        logger.debug("Renamed overloaded operation '%s' to '%s'", name, renamed)
    return result
