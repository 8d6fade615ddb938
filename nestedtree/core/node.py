"""Node accessors for nestedtree.

Nodes are plain dicts. There is no node class: the identity and children
attributes are looked up by the names in a FieldNames at every access, so the
same helpers work for ``{"id", "children"}`` org charts and for
``{"key", "items"}`` menus alike.
"""

from typing import Any, Dict, List, Mapping, Optional

from ..config import FieldNames

Node = Dict[str, Any]
Forest = List[Node]


def get_id(node: Any, field_names: FieldNames) -> Any:
    """Return the node's identity value, or None when it has none."""
    if not isinstance(node, Mapping):
        return None
    return node.get(field_names.id)


def get_children(node: Any, field_names: FieldNames) -> Optional[List[Node]]:
    """Return the node's children list.

    A children attribute that is missing or holds anything but a list means
    the node is a leaf, so None is returned for it.
    """
    if not isinstance(node, Mapping):
        return None
    children = node.get(field_names.children)
    if isinstance(children, list):
        return children
    return None


def has_children(node: Any, field_names: FieldNames) -> bool:
    """Check if the node has a non-empty children list."""
    children = get_children(node, field_names)
    return children is not None and len(children) > 0


def ids_equal(left: Any, right: Any) -> bool:
    """Compare two identity values strictly.

    Booleans only ever equal booleans, so ``True`` is not ``1`` and ``False``
    is not ``0``. Everything else uses ordinary equality.
    """
    left_is_bool = isinstance(left, bool)
    right_is_bool = isinstance(right, bool)
    if left_is_bool or right_is_bool:
        return left_is_bool and right_is_bool and left is right
    return bool(left == right)


def is_hashable(value: Any) -> bool:
    """Check whether value can be used as a dict key or set member.

    ``isinstance(value, Hashable)`` is not enough: a tuple holding a list
    passes that check and still fails to hash.
    """
    try:
        hash(value)
    except TypeError:
        return False
    return True


def without_children(node: Node, field_names: FieldNames) -> Node:
    """Shallow copy of a node with its children attribute removed."""
    return {key: value for key, value in node.items() if key != field_names.children}
