"""Copying and reshaping forests.

Every function here returns new node dicts and leaves its input alone.
"Deep" copies rebuild the node dicts and children lists of the whole tree;
payload values themselves (nested dicts, lists, objects) are shared.
"""

from collections.abc import Mapping
from numbers import Real
from typing import Any, Callable, List, Optional, Tuple

from .config import FieldNames, FieldNamesLike, is_field_names, resolve_field_names
from .core.node import Forest, Node, get_children, get_id, ids_equal
from .errors import InvalidLookupError


def _deep_copy(node: Node, field_names: FieldNames) -> Node:
    copy = dict(node)
    children = get_children(node, field_names)
    if children:
        copied: List[Node] = []
        for child in children:
            copied.append(_deep_copy(child, field_names))
        copy[field_names.children] = copied
    return copy


def clone_tree(forest: Forest, field_names: FieldNamesLike = None) -> Forest:
    """Copy every node dict and children list of a forest."""
    if not isinstance(forest, list) or not forest:
        return []
    fields = resolve_field_names(field_names)
    return [_deep_copy(node, fields) for node in forest]


def shallow_clone_tree(forest: Forest, field_names: FieldNamesLike = None) -> Forest:
    """Copy only the root dicts; their children lists are shared with the input."""
    if not isinstance(forest, list) or not forest:
        return []
    return [dict(node) for node in forest]


def clone_subtree(
    forest: Forest,
    target: Mapping,
    field_names: FieldNamesLike = None,
) -> Forest:
    """Copy the subtree rooted at the first node matching a one-key lookup.

    The lookup attribute comes from the target's key, not from the configured
    id name, so ``{"name": "Sales"}`` searches by name.

    Args:
        forest: List of root nodes
        target: Dict with exactly one key, e.g. ``{"id": 3}``
        field_names: Custom children/id attribute names

    Returns:
        A one-tree forest holding the copy, or [] if nothing matches or the
        target has no keys

    Raises:
        InvalidLookupError: If target is not a dict or has more than one key
    """
    if not isinstance(forest, list) or not forest:
        return []

    if not isinstance(target, dict):
        raise InvalidLookupError(
            f"clone_subtree needs a dict such as {{'id': 1}}, got {type(target).__name__}"
        )
    if not target:
        return []
    if len(target) > 1:
        raise InvalidLookupError(
            f"clone_subtree lookup must have exactly one key, got {', '.join(map(str, target))}"
        )

    (attribute, wanted), = target.items()
    fields = resolve_field_names(field_names)
    lookup_fields = FieldNames(children=fields.children, id=attribute)

    found = _find_first(forest, wanted, lookup_fields)
    if found is None:
        return []
    return [_deep_copy(found, fields)]


def _find_first(nodes: List[Node], wanted: Any, field_names: FieldNames) -> Optional[Node]:
    for node in nodes:
        if ids_equal(get_id(node, field_names), wanted):
            return node
        children = get_children(node, field_names)
        if children:
            found = _find_first(children, wanted, field_names)
            if found is not None:
                return found
    return None


def clone_with_transform(
    forest: Forest,
    transform: Callable[[Node], Node],
    field_names: FieldNamesLike = None,
) -> Forest:
    """Copy a forest, passing every node through transform.

    transform receives the original node and returns the dict to copy in
    its place. The copy's children always come from the original node, so
    whatever children the transform returns are replaced when the original
    has any.
    """
    if not isinstance(forest, list) or not forest:
        return []
    fields = resolve_field_names(field_names)

    def _transform_copy(node: Node) -> Node:
        copy = dict(transform(node))
        children = get_children(node, fields)
        if children:
            copied: List[Node] = []
            for child in children:
                copied.append(_transform_copy(child))
            copy[fields.children] = copied
        return copy

    return [_transform_copy(node) for node in forest]


def concat_tree(*args: Any) -> Forest:
    """Concatenate forests into a new, deep-copied forest.

    A trailing FieldNames (or ``{"children": ..., "id": ...}`` dict) is taken
    as the field-name configuration. Arguments that are not non-empty lists
    are skipped.

    Example:
        >>> concat_tree([{"id": 1}], [{"id": 2}])
        [{'id': 1}, {'id': 2}]
    """
    forests = list(args)
    field_names = None
    if forests and is_field_names(forests[-1]):
        field_names = forests.pop()

    fields = resolve_field_names(field_names)
    result: Forest = []
    for forest in forests:
        if isinstance(forest, list) and forest:
            result.extend(clone_tree(forest, fields))
    return result


def _id_sort_key(node_id: Any) -> Tuple[int, str, Any]:
    """Order ids of any mix of types without raising.

    Missing ids sort last. Real numbers (booleans aside) sort numerically
    together, strings alphabetically; ids of any other type are grouped by
    type name and ordered by their string form.
    """
    if node_id is None:
        return (1, "", "")
    if isinstance(node_id, bool):
        return (0, "bool", node_id)
    if isinstance(node_id, Real):
        return (0, "number", node_id)
    if isinstance(node_id, str):
        return (0, "str", node_id)
    return (0, type(node_id).__name__, str(node_id))


def sort_tree(
    forest: Forest,
    key: Optional[Callable[[Node], Any]] = None,
    reverse: bool = False,
    field_names: FieldNamesLike = None,
) -> Forest:
    """Sort every sibling list of a deep copy of the forest.

    Args:
        forest: List of root nodes
        key: Sort key computed from a node; defaults to the node id, with
            missing ids last and ids of mixed types never raising
        reverse: Sort descending
        field_names: Custom children/id attribute names

    Returns:
        The sorted copy. Sorting is stable.
    """
    if not isinstance(forest, list) or not forest:
        return []
    fields = resolve_field_names(field_names)
    sort_key = key if key is not None else (lambda node: _id_sort_key(get_id(node, fields)))

    cloned = clone_tree(forest, fields)

    def _sort_level(nodes: List[Node]) -> None:
        nodes.sort(key=sort_key, reverse=reverse)
        for node in nodes:
            children = get_children(node, fields)
            if children:
                _sort_level(children)

    _sort_level(cloned)
    return cloned


def slice_tree(
    forest: Forest,
    start: Optional[int] = None,
    end: Optional[int] = None,
    field_names: FieldNamesLike = None,
) -> Forest:
    """Deep-copy a slice of the roots, with Python slice semantics.

    Only the root list is sliced; each selected root keeps its full subtree.
    """
    if not isinstance(forest, list) or not forest:
        return []
    return clone_tree(forest[start:end], field_names)
