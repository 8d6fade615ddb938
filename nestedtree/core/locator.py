"""Locate a node by id.

Most mutations and relationship queries share the same first step: walk the
forest depth-first until a node's id matches, then act on that one node and
stop. ``locate`` performs that walk and hands back everything the callers
need to act: the node, the list that holds it, its position, its parent, its
depth and its index path.
"""

from dataclasses import dataclass
from typing import Any, List, Optional, Tuple

from ..config import FieldNames
from .node import Forest, Node, get_children, get_id, ids_equal


@dataclass
class Location:
    """Where a located node lives in the forest.

    Attributes:
        node: The matched node
        index: Position of the node in ``siblings``
        siblings: The list that holds the node (the forest itself for roots)
        parent: Parent node, None for roots
        depth: 1-based depth
        path: Sibling indices from the forest root down to the node
    """
    node: Node
    index: int
    siblings: List[Node]
    parent: Optional[Node]
    depth: int
    path: Tuple[int, ...]

    @property
    def is_root(self) -> bool:
        return self.parent is None


def locate(forest: Forest, target_id: Any, field_names: FieldNames) -> Optional[Location]:
    """Find the first node, in pre-order, whose id strictly equals target_id.

    Siblings after the match are never visited.

    Args:
        forest: List of root nodes
        target_id: Identity value to look for
        field_names: Resolved attribute names

    Returns:
        Location of the match, or None if no node has that id
    """
    return _search(forest, target_id, field_names, None, 1, ())


def _search(nodes: List[Node],
            target_id: Any,
            field_names: FieldNames,
            parent: Optional[Node],
            depth: int,
            path: Tuple[int, ...]) -> Optional[Location]:
    for index, node in enumerate(nodes):
        if ids_equal(get_id(node, field_names), target_id):
            return Location(node, index, nodes, parent, depth, path + (index,))

        children = get_children(node, field_names)
        if children:
            found = _search(children, target_id, field_names, node, depth + 1, path + (index,))
            if found is not None:
                return found
    return None
