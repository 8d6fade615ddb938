"""In-place mutation of forests.

Every function here locates a node by id and changes the caller's object
graph directly. They report success through their return value; a missing
id is never an error.
"""

import logging
from typing import Any, Optional

from .config import FieldNames, FieldNamesLike, resolve_field_names
from .core.locator import locate
from .core.node import Forest, Node

logger = logging.getLogger(__name__)


def _writable_children(node: Node, field_names: FieldNames) -> Optional[list]:
    """Return the node's children list, creating it when absent.

    Falsy non-list values (missing, None, empty string, 0) are replaced by a
    new empty list. A truthy non-list value is payload we refuse to
    overwrite, so None is returned for it.
    """
    children = node.get(field_names.children)
    if isinstance(children, list):
        return children
    if children:
        return None
    children = []
    node[field_names.children] = children
    return children


def _insert_child(forest: Forest,
                  parent_id: Any,
                  new_node: Node,
                  field_names: FieldNamesLike,
                  at_start: bool) -> bool:
    fields = resolve_field_names(field_names)
    location = locate(forest, parent_id, fields)
    if location is None:
        logger.debug("Parent %r not found, nothing inserted", parent_id)
        return False

    children = _writable_children(location.node, fields)
    if children is None:
        logger.debug(
            "Parent %r has a non-list %r attribute, nothing inserted",
            parent_id, fields.children,
        )
        return False

    if at_start:
        children.insert(0, new_node)
    else:
        children.append(new_node)
    return True


def push_tree(
    forest: Forest,
    parent_id: Any,
    new_node: Node,
    field_names: FieldNamesLike = None,
) -> bool:
    """Append new_node to the children of the node whose id is parent_id.

    Args:
        forest: List of root nodes, modified in place
        parent_id: Id of the node receiving the child
        new_node: Node to append (inserted by reference)
        field_names: Custom children/id attribute names

    Returns:
        True if the parent was found and the node appended, False otherwise

    Example:
        >>> forest = [{"id": 1, "children": [{"id": 2}]}]
        >>> push_tree(forest, 1, {"id": 3})
        True
        >>> [child["id"] for child in forest[0]["children"]]
        [2, 3]
    """
    return _insert_child(forest, parent_id, new_node, field_names, at_start=False)


def unshift_tree(
    forest: Forest,
    parent_id: Any,
    new_node: Node,
    field_names: FieldNamesLike = None,
) -> bool:
    """Prepend new_node to the children of the node whose id is parent_id.

    Same contract as push_tree, but the node becomes the first child.
    """
    return _insert_child(forest, parent_id, new_node, field_names, at_start=True)


def _take_child(forest: Forest,
                node_id: Any,
                field_names: FieldNamesLike,
                position: int) -> Optional[Node]:
    fields = resolve_field_names(field_names)
    location = locate(forest, node_id, fields)
    if location is None:
        logger.debug("Node %r not found, nothing removed", node_id)
        return None

    children = location.node.get(fields.children)
    if not isinstance(children, list) or not children:
        return None
    return children.pop(position)


def pop_tree(
    forest: Forest,
    node_id: Any,
    field_names: FieldNamesLike = None,
) -> Optional[Node]:
    """Remove and return the last child of the node whose id is node_id.

    Returns:
        The removed child, or None if the node is missing or has no children
    """
    return _take_child(forest, node_id, field_names, -1)


def shift_tree(
    forest: Forest,
    node_id: Any,
    field_names: FieldNamesLike = None,
) -> Optional[Node]:
    """Remove and return the first child of the node whose id is node_id.

    Returns:
        The removed child, or None if the node is missing or has no children
    """
    return _take_child(forest, node_id, field_names, 0)


def remove_tree(
    forest: Forest,
    target_id: Any,
    field_names: FieldNamesLike = None,
) -> bool:
    """Remove the node whose id is target_id, together with its subtree.

    The node is taken out of whichever list holds it, so roots can be
    removed from the forest itself. Only the first match is removed.

    Returns:
        True if a node was removed, False if no node has that id
    """
    location = locate(forest, target_id, resolve_field_names(field_names))
    if location is None:
        logger.debug("Node %r not found, nothing removed", target_id)
        return False

    del location.siblings[location.index]
    logger.debug("Removed node %r at path %s", target_id, list(location.path))
    return True
