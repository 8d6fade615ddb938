"""Relationship and depth queries.

Depths are 1-based: roots sit at depth 1, their children at depth 2.
"""

from typing import Any, Dict, List, Optional

from .config import FieldNamesLike, resolve_field_names
from .core.locator import locate
from .core.node import Forest, Node, get_children, get_id, has_children, is_hashable
from .core.traverser import DepthFirstPreOrderTraverser


def get_node_depth_map(
    forest: Forest,
    field_names: FieldNamesLike = None,
) -> Dict[Any, int]:
    """Map every node id to its depth in a single pass.

    When an id occurs more than once, the depth of its last occurrence in
    pre-order wins. Ids that cannot be used as dict keys are left out.

    Example:
        >>> get_node_depth_map([{"id": 1, "children": [{"id": 2}]}])
        {1: 1, 2: 2}
    """
    fields = resolve_field_names(field_names)
    depth_map: Dict[Any, int] = {}

    for visit in DepthFirstPreOrderTraverser(fields).traverse(forest):
        node_id = get_id(visit.node, fields)
        if is_hashable(node_id):
            depth_map[node_id] = visit.depth

    return depth_map


def get_node_depth(
    forest: Forest,
    target_id: Any,
    field_names: FieldNamesLike = None,
) -> Optional[int]:
    """Return the depth of the first node whose id is target_id, or None."""
    location = locate(forest, target_id, resolve_field_names(field_names))
    return location.depth if location is not None else None


def get_parent_tree(
    forest: Forest,
    target_id: Any,
    field_names: FieldNamesLike = None,
) -> Optional[Node]:
    """Return the parent of the node whose id is target_id.

    Returns None both for roots and for ids that are not in the forest; use
    includes_tree or is_root_node to tell the two apart.
    """
    location = locate(forest, target_id, resolve_field_names(field_names))
    if location is None:
        return None
    return location.parent


def get_children_tree(
    forest: Forest,
    target_id: Any,
    field_names: FieldNamesLike = None,
) -> List[Node]:
    """Return the children list of the node whose id is target_id.

    The list is returned by reference. A missing node or one without a
    children list gives a new empty list.
    """
    fields = resolve_field_names(field_names)
    location = locate(forest, target_id, fields)
    if location is None:
        return []
    children = get_children(location.node, fields)
    return children if children is not None else []


def get_siblings_tree(
    forest: Forest,
    target_id: Any,
    field_names: FieldNamesLike = None,
) -> List[Node]:
    """Return the list holding the node whose id is target_id.

    The node itself is part of the result. For a root the forest is
    returned; for an unknown id an empty list.
    """
    location = locate(forest, target_id, resolve_field_names(field_names))
    if location is None:
        return []
    return location.siblings


def includes_tree(
    forest: Forest,
    target_id: Any,
    field_names: FieldNamesLike = None,
) -> bool:
    """Check whether any node has id target_id."""
    return locate(forest, target_id, resolve_field_names(field_names)) is not None


def is_root_node(
    forest: Forest,
    node_id: Any,
    field_names: FieldNamesLike = None,
) -> bool:
    """Check whether node_id belongs to a root. Unknown ids are not roots."""
    location = locate(forest, node_id, resolve_field_names(field_names))
    return location is not None and location.is_root


def is_leaf_node(node: Node, field_names: FieldNamesLike = None) -> bool:
    """Check whether a node has no children.

    A missing, non-list or empty children attribute all make a leaf.
    """
    return not has_children(node, resolve_field_names(field_names))
