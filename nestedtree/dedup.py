"""Key-based deduplication of forests."""

import logging
from typing import Any, Callable, List, Sequence, Set, Union

from .config import FieldNames, FieldNamesLike, resolve_field_names
from .core.node import Forest, Node, get_children, is_hashable

logger = logging.getLogger(__name__)

DedupKey = Union[str, Sequence[str], Callable[[Node], Any]]

# Joins composite key parts; a control character that ordinary data lacks
_COMPOSITE_SEPARATOR = "\x01"

_BOOL_TAG = object()
_REF_TAG = object()


def _key_getter(key: DedupKey) -> Callable[[Node], Any]:
    if callable(key):
        return key

    if isinstance(key, str):
        return lambda node: node.get(key)

    names = list(key)

    def composite(node: Node) -> Any:
        parts = []
        has_value = False
        for name in names:
            value = node.get(name)
            if value is None:
                parts.append("")
            else:
                has_value = True
                parts.append(str(value))
        if not has_value:
            return None
        return _COMPOSITE_SEPARATOR.join(parts)

    return composite


def _seen_token(value: Any) -> Any:
    """Turn a key value into something a set can hold.

    Booleans are tagged so that True and 1 stay distinct keys; unhashable
    values are tracked by object identity.
    """
    if isinstance(value, bool):
        return (_BOOL_TAG, value)
    if not is_hashable(value):
        return (_REF_TAG, id(value))
    return value


def dedup_tree(
    forest: Forest,
    key: DedupKey,
    field_names: FieldNamesLike = None,
) -> Forest:
    """Build a new forest keeping only the first node for every key value.

    "First" means first in pre-order across the whole forest: one set of seen
    key values is shared by every level and every subtree of the call. A
    dropped node takes its whole subtree with it. Nodes whose key value is
    None are always kept.

    Kept nodes are shallow copies; the input forest is left untouched.

    Args:
        forest: List of root nodes
        key: Attribute name, list of attribute names (joined into a composite
            key), or a function computing the key from a node
        field_names: Custom children/id attribute names

    Returns:
        The deduplicated forest

    Example:
        >>> dedup_tree([{"id": 1, "children": [{"id": 2}, {"id": 2}]}], "id")
        [{'id': 1, 'children': [{'id': 2}]}]
    """
    fields = resolve_field_names(field_names)
    key_of = _key_getter(key)
    seen: Set[Any] = set()

    result = _dedup_nodes(forest, key_of, fields, seen)
    logger.debug("Deduplicated forest down to %d distinct key values", len(seen))
    return result


def _dedup_nodes(nodes: List[Node],
                 key_of: Callable[[Node], Any],
                 field_names: FieldNames,
                 seen: Set[Any]) -> List[Node]:
    unique: List[Node] = []

    for node in nodes:
        value = key_of(node)
        if value is not None:
            token = _seen_token(value)
            if token in seen:
                continue
            seen.add(token)

        copy = dict(node)
        children = get_children(node, field_names)
        if children:
            copy[field_names.children] = _dedup_nodes(children, key_of, field_names, seen)
        unique.append(copy)

    return unique
