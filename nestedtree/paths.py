"""Index-path addressing.

A path is the list of sibling indices leading from the forest down to a node:
``[0, 1]`` is the second child of the first root. Resolution never raises;
anything that does not lead to a node gives None.
"""

from typing import Any, List, Optional, Sequence

from .config import FieldNamesLike, resolve_field_names
from .core.locator import locate
from .core.node import Forest, Node, get_children


def _is_index(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def index_of_tree(
    forest: Forest,
    target_id: Any,
    field_names: FieldNamesLike = None,
) -> Optional[List[int]]:
    """Return the index path of the first node whose id is target_id.

    Returns:
        List of sibling indices from the root down, or None if not found

    Example:
        >>> index_of_tree([{"id": 1, "children": [{"id": 2}, {"id": 3}]}], 3)
        [0, 1]
    """
    location = locate(forest, target_id, resolve_field_names(field_names))
    if location is None:
        return None
    return list(location.path)


def at_index_of_tree(
    forest: Forest,
    path: Sequence[int],
    field_names: FieldNamesLike = None,
) -> Optional[Node]:
    """Resolve an index path back to a node.

    Each step must land inside a list, and every node on the way except the
    last must have a list of children. Negative indices are not accepted in
    paths.

    Args:
        forest: List of root nodes
        path: Sibling indices, as produced by index_of_tree
        field_names: Custom children/id attribute names

    Returns:
        The node at the path, or None if the path is empty or leads nowhere
    """
    if not isinstance(path, (list, tuple)) or not path:
        return None

    fields = resolve_field_names(field_names)
    current: Any = forest
    last = len(path) - 1

    for step, index in enumerate(path):
        if not isinstance(current, list) or not _is_index(index):
            return None
        if index < 0 or index >= len(current):
            return None

        node = current[index]
        if step == last:
            return node

        current = get_children(node, fields)
        if current is None:
            return None

    return None


def at_tree(
    forest: Forest,
    parent_id: Any,
    index: int,
    field_names: FieldNamesLike = None,
) -> Optional[Node]:
    """Return the child at index of the node whose id is parent_id.

    Negative indices count from the end, so -1 is the last child.

    Returns:
        The child node, or None if the parent is missing, has no children or
        the index is out of range
    """
    if not _is_index(index):
        return None

    fields = resolve_field_names(field_names)
    location = locate(forest, parent_id, fields)
    if location is None:
        return None

    children = get_children(location.node, fields)
    if not children:
        return None

    normalized = index if index >= 0 else len(children) + index
    if 0 <= normalized < len(children):
        return children[normalized]
    return None
