"""Structural validation of trees and forests.

Validation only checks shape: a node is a mapping (usually a dict), and a
children attribute, when present, is a list of nodes. Payload is never
inspected.
"""

from collections.abc import Mapping
from typing import Any, Optional, Set

from .config import FieldNames, FieldNamesLike, resolve_field_names
from .core.node import Forest
from .core.traverser import DepthFirstPreOrderTraverser


def _is_record(value: Any) -> bool:
    return isinstance(value, Mapping)


def _check_tree(value: Any, field_names: FieldNames, visited: Optional[Set[int]]) -> bool:
    if not _is_record(value):
        return False

    if visited is not None:
        if id(value) in visited:
            return False
        visited.add(id(value))

    if field_names.children not in value:
        return True

    children = value[field_names.children]
    # None is invalid here even though a missing attribute is fine
    if not isinstance(children, list):
        return False

    for child in children:
        if not _check_tree(child, field_names, visited):
            return False
    return True


def is_single_tree(value: Any, field_names: FieldNamesLike = None) -> bool:
    """Check whether value is a single tree.

    The value must be a mapping. If it carries a children attribute, that
    attribute must be a list and every element must itself be a single
    tree. A missing or empty children attribute is fine; None is not.

    Args:
        value: Anything
        field_names: Custom children/id attribute names

    Returns:
        True if value has the shape of a tree
    """
    return _check_tree(value, resolve_field_names(field_names), None)


def is_multiple_trees(value: Any, field_names: FieldNamesLike = None) -> bool:
    """Check whether value is a list of single trees (a forest).

    An empty list is a valid, empty forest.
    """
    if not isinstance(value, list):
        return False
    fields = resolve_field_names(field_names)
    return all(_check_tree(node, fields, None) for node in value)


def is_valid_tree_node(value: Any, field_names: FieldNamesLike = None) -> bool:
    """Check a single node without looking at its descendants.

    The node must be a mapping whose children attribute is absent or a list.
    """
    if not _is_record(value):
        return False
    fields = resolve_field_names(field_names)
    if fields.children not in value:
        return True
    return isinstance(value[fields.children], list)


def is_tree_node_with_circular_check(value: Any, field_names: FieldNamesLike = None) -> bool:
    """Like is_single_tree, but fails if any node object is reached twice.

    This catches cycles as well as the same dict being shared by two parents.
    """
    return _check_tree(value, resolve_field_names(field_names), set())


def is_safe_tree_depth(
    forest: Forest,
    max_depth: int,
    field_names: FieldNamesLike = None,
) -> bool:
    """Check that no node lies deeper than max_depth (roots are depth 1).

    The walk never descends below max_depth + 1, so it stays cheap even on
    trees far deeper than the limit.

    Returns:
        False if max_depth is not positive or the forest is too deep
    """
    if max_depth <= 0:
        return False
    traverser = DepthFirstPreOrderTraverser(resolve_field_names(field_names))
    return not any(
        visit.depth > max_depth
        for visit in traverser.traverse(forest, max_depth=max_depth + 1)
    )


def is_empty_tree_data(forest: Any, field_names: FieldNamesLike = None) -> bool:
    """Check whether a forest is empty (or not a list at all).

    field_names is accepted for signature symmetry and not used.
    """
    return not isinstance(forest, list) or len(forest) == 0


def is_empty_single_tree_data(value: Any, field_names: FieldNamesLike = None) -> bool:
    """Check whether a single tree has no children.

    Anything that is not a valid single tree counts as empty. Only the root's
    own children matter, so a root whose children are all leaves is not empty.
    """
    fields = resolve_field_names(field_names)
    if not _check_tree(value, fields, None):
        return True
    children = value.get(fields.children)
    return not isinstance(children, list) or len(children) == 0
