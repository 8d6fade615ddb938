"""Conversions between forests and flat representations.

Flattening functions return shallow copies with the children attribute
removed, so the results can be serialised or indexed without dragging whole
subtrees along. ``convert_back_tree`` goes the other way and builds a forest
from flat records.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional

from .config import FieldNames, FieldNamesLike, resolve_field_names
from .core.node import Forest, Node, get_children, get_id, ids_equal, is_hashable, without_children
from .core.traverser import DepthFirstPreOrderTraverser, LevelOrderTraverser

logger = logging.getLogger(__name__)


def convert_to_array_tree(forest: Forest, field_names: FieldNamesLike = None) -> List[Node]:
    """Flatten a forest into a pre-order list of nodes without children."""
    fields = resolve_field_names(field_names)
    return [
        without_children(visit.node, fields)
        for visit in DepthFirstPreOrderTraverser(fields).traverse(forest)
    ]


def convert_to_map_tree(forest: Forest, field_names: FieldNamesLike = None) -> Dict[Any, Node]:
    """Index a forest by node id.

    Values are copies without children. Nodes with a None id are left out;
    for repeated ids the last one in pre-order wins.
    """
    fields = resolve_field_names(field_names)
    result: Dict[Any, Node] = {}
    for visit in DepthFirstPreOrderTraverser(fields).traverse(forest):
        node_id = get_id(visit.node, fields)
        if node_id is not None and is_hashable(node_id):
            result[node_id] = without_children(visit.node, fields)
    return result


def convert_to_level_array_tree(
    forest: Forest,
    field_names: FieldNamesLike = None,
) -> List[List[Node]]:
    """Group the nodes of a forest by depth.

    Returns:
        A list whose item i holds the nodes at depth i + 1, left to right,
        as copies without children
    """
    if not isinstance(forest, list) or not forest:
        return []

    fields = resolve_field_names(field_names)
    levels: List[List[Node]] = []
    for visit in LevelOrderTraverser(fields).traverse(forest):
        if len(levels) < visit.depth:
            levels.append([])
        levels[visit.depth - 1].append(without_children(visit.node, fields))
    return levels


def convert_to_object_tree(forest: Forest, field_names: FieldNamesLike = None) -> Optional[Node]:
    """Return the only root of a single-rooted forest, or None otherwise."""
    if isinstance(forest, list) and len(forest) == 1:
        return forest[0]
    return None


def convert_back_tree(
    data: Any,
    root_parent_id: Any = None,
    parent_id_field: str = "parentId",
    field_names: FieldNamesLike = None,
) -> Forest:
    """Build a forest from flat data.

    Accepted inputs:

    - a list of records pointing at their parent through ``parent_id_field``;
    - a mapping of id -> record, where the key becomes the record's id;
    - a single record: returned as a one-tree forest.

    In the list form a record is a root when its parent id is
    ``root_parent_id`` or None. Records whose parent cannot be found also
    become roots, and records without an id are skipped. Every record is
    copied and given a fresh children list; input records are not modified.

    Args:
        data: Flat records, a mapping of records, or a single record
        root_parent_id: Parent id value that marks a root
        parent_id_field: Attribute holding the parent id
        field_names: Custom children/id attribute names

    Returns:
        The assembled forest (empty for unsupported or empty input)

    Example:
        >>> convert_back_tree([
        ...     {"id": 1, "parentId": None},
        ...     {"id": 2, "parentId": 1},
        ... ])
        [{'id': 1, 'parentId': None, 'children': [{'id': 2, 'parentId': 1, 'children': []}]}]
    """
    fields = resolve_field_names(field_names)

    if isinstance(data, list):
        return _build_from_records(data, root_parent_id, parent_id_field, fields)

    if isinstance(data, Mapping):
        if not data:
            return []

        if isinstance(data.get(fields.children), list):
            return [data]

        if all(isinstance(value, Mapping) for value in data.values()):
            records = [{**value, fields.id: key} for key, value in data.items()]
            return _build_from_records(records, root_parent_id, parent_id_field, fields)

        return [{**data, fields.children: []}]

    logger.debug("Cannot build a forest from %s", type(data).__name__)
    return []


def _build_from_records(records: List[Any],
                        root_parent_id: Any,
                        parent_id_field: str,
                        field_names: FieldNames) -> Forest:
    nodes: Dict[Any, Node] = {}

    for record in records:
        node_id = get_id(record, field_names)
        if node_id is None or not is_hashable(node_id):
            continue
        nodes[node_id] = {**record, field_names.children: []}

    roots: Forest = []
    orphans = 0

    for record in records:
        node_id = get_id(record, field_names)
        if node_id is None or not is_hashable(node_id):
            continue
        node = nodes[node_id]

        parent_id = record.get(parent_id_field)
        if parent_id is None or ids_equal(parent_id, root_parent_id):
            roots.append(node)
            continue

        parent = nodes.get(parent_id) if is_hashable(parent_id) else None
        if parent is None:
            orphans += 1
            roots.append(node)
            continue

        siblings = get_children(parent, field_names)
        if siblings is None:
            parent[field_names.children] = [node]
        else:
            siblings.append(node)

    if orphans:
        logger.debug("%d records had an unknown parent and became roots", orphans)
    return roots
